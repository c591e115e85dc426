from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, BackgroundTasks, Depends, Query, status

from src.application.use_cases.calving import (
    close_lactation,
    list_records,
    record_calving,
    record_dry_off,
    record_offspring,
)
from src.config.settings import Settings
from src.interfaces.http.deps import (
    FarmContext,
    get_app_settings,
    get_farm_context,
    get_uow,
    schedule_events,
)
from src.interfaces.http.schemas.calving import (
    CalvingCreate,
    CalvingResponse,
    CalvingResult,
    DryOffCreate,
    DryOffResponse,
    LactationClose,
    LactationResponse,
    OffspringCreate,
    OffspringResponse,
)
from src.interfaces.http.schemas.reproduction import PregnancyResponse

router = APIRouter(tags=["calving"])


@router.post("/calvings", response_model=CalvingResult, status_code=status.HTTP_201_CREATED)
async def record_calving_endpoint(
    payload: CalvingCreate,
    background_tasks: BackgroundTasks,
    context: FarmContext = Depends(get_farm_context),
    settings: Settings = Depends(get_app_settings),
    uow=Depends(get_uow),
) -> CalvingResult:
    """Record a calving, deliver its pregnancy and open the next lactation."""
    result = await record_calving.execute(
        uow,
        context.farm_id,
        record_calving.RecordCalvingInput(**payload.model_dump()),
        actor_user_id=context.actor_user_id,
        lactation_number_attempts=settings.lactation_number_retries,
    )
    schedule_events(background_tasks, uow)
    return CalvingResult(
        calving=CalvingResponse.model_validate(result.calving),
        lactation=LactationResponse.model_validate(result.lactation),
        pregnancy=(
            PregnancyResponse.model_validate(result.pregnancy) if result.pregnancy else None
        ),
    )


@router.get("/calvings", response_model=list[CalvingResponse])
async def list_calvings_endpoint(
    animal_id: UUID | None = Query(None),
    context: FarmContext = Depends(get_farm_context),
    uow=Depends(get_uow),
) -> list[CalvingResponse]:
    calvings = await list_records.list_calvings(uow, context.farm_id, animal_id=animal_id)
    return [CalvingResponse.model_validate(c) for c in calvings]


@router.post(
    "/calvings/{calving_id}/offspring",
    response_model=OffspringResponse,
    status_code=status.HTTP_201_CREATED,
)
async def record_offspring_endpoint(
    calving_id: UUID,
    payload: OffspringCreate,
    background_tasks: BackgroundTasks,
    context: FarmContext = Depends(get_farm_context),
    uow=Depends(get_uow),
) -> OffspringResponse:
    offspring = await record_offspring.execute(
        uow,
        context.farm_id,
        calving_id,
        record_offspring.RecordOffspringInput(**payload.model_dump()),
        actor_user_id=context.actor_user_id,
    )
    schedule_events(background_tasks, uow)
    return OffspringResponse.model_validate(offspring)


@router.get("/calvings/{calving_id}/offspring", response_model=list[OffspringResponse])
async def list_offspring_endpoint(
    calving_id: UUID,
    context: FarmContext = Depends(get_farm_context),
    uow=Depends(get_uow),
) -> list[OffspringResponse]:
    offspring = await list_records.list_offspring(uow, context.farm_id, calving_id)
    return [OffspringResponse.model_validate(o) for o in offspring]


@router.get("/lactations", response_model=list[LactationResponse])
async def list_lactations_endpoint(
    animal_id: UUID | None = Query(None),
    context: FarmContext = Depends(get_farm_context),
    uow=Depends(get_uow),
) -> list[LactationResponse]:
    lactations = await list_records.list_lactations(uow, context.farm_id, animal_id=animal_id)
    return [LactationResponse.model_validate(lac) for lac in lactations]


@router.post("/lactations/{lactation_id}/close", response_model=LactationResponse)
async def close_lactation_endpoint(
    lactation_id: UUID,
    payload: LactationClose,
    context: FarmContext = Depends(get_farm_context),
    uow=Depends(get_uow),
) -> LactationResponse:
    lactation = await close_lactation.execute(
        uow,
        context.farm_id,
        lactation_id,
        close_lactation.CloseLactationInput(
            end_date=payload.end_date, total_production=payload.total_production
        ),
    )
    return LactationResponse.model_validate(lactation)


@router.post("/dry-offs", response_model=DryOffResponse, status_code=status.HTTP_201_CREATED)
async def record_dry_off_endpoint(
    payload: DryOffCreate,
    background_tasks: BackgroundTasks,
    context: FarmContext = Depends(get_farm_context),
    uow=Depends(get_uow),
) -> DryOffResponse:
    dry_off = await record_dry_off.execute(
        uow,
        context.farm_id,
        record_dry_off.RecordDryOffInput(**payload.model_dump()),
        actor_user_id=context.actor_user_id,
    )
    schedule_events(background_tasks, uow)
    return DryOffResponse.model_validate(dry_off)


@router.get("/dry-offs", response_model=list[DryOffResponse])
async def list_dry_offs_endpoint(
    animal_id: UUID | None = Query(None),
    context: FarmContext = Depends(get_farm_context),
    uow=Depends(get_uow),
) -> list[DryOffResponse]:
    dry_offs = await list_records.list_dry_offs(uow, context.farm_id, animal_id=animal_id)
    return [DryOffResponse.model_validate(d) for d in dry_offs]
