from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from src.application.use_cases.pens import create_pen, list_pens, update_pen
from src.infrastructure.db.session import SQLAlchemyUnitOfWork
from src.interfaces.http.deps import FarmContext, get_farm_context, get_uow
from src.interfaces.http.schemas.pens import PenCreate, PenResponse, PenUpdate

router = APIRouter(prefix="/pens", tags=["pens"])


@router.get("/", response_model=list[PenResponse])
async def list_pens_endpoint(
    *,
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
    context: FarmContext = Depends(get_farm_context),
    active: bool | None = Query(None),
):
    pens = await list_pens.execute(uow, context.farm_id, active=active)
    return [PenResponse.model_validate(p) for p in pens]


@router.post("/", response_model=PenResponse, status_code=status.HTTP_201_CREATED)
async def create_pen_endpoint(
    payload: PenCreate,
    *,
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
    context: FarmContext = Depends(get_farm_context),
):
    pen = await create_pen.execute(
        uow,
        context.farm_id,
        create_pen.CreatePenInput(
            name=payload.name,
            type=payload.type,
            description=payload.description,
            active=payload.active,
        ),
    )
    return PenResponse.model_validate(pen)


@router.put("/{pen_id}", response_model=PenResponse)
async def update_pen_endpoint(
    pen_id: UUID,
    payload: PenUpdate,
    *,
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
    context: FarmContext = Depends(get_farm_context),
):
    pen = await update_pen.execute(
        uow,
        context.farm_id,
        pen_id,
        update_pen.UpdatePenInput(
            name=payload.name,
            type=payload.type,
            description=payload.description,
            active=payload.active,
        ),
    )
    return PenResponse.model_validate(pen)
