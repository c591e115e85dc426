from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, BackgroundTasks, Depends, Query, status

from src.application.use_cases.reproduction import (
    create_iatf_protocol,
    list_records,
    record_breeding,
    record_estrus,
    record_pregnancy_diagnosis,
    update_pregnancy_status,
)
from src.interfaces.http.deps import FarmContext, get_farm_context, get_uow, schedule_events
from src.interfaces.http.schemas.reproduction import (
    BreedingCreate,
    BreedingResponse,
    EstrusCreate,
    EstrusResponse,
    IatfProtocolCreate,
    IatfProtocolResponse,
    PregnancyDiagnosisCreate,
    PregnancyDiagnosisResponse,
    PregnancyDiagnosisResult,
    PregnancyResponse,
    PregnancyStatusUpdate,
)

router = APIRouter(tags=["reproduction"])


# Estrus
@router.post("/estrus", response_model=EstrusResponse, status_code=status.HTTP_201_CREATED)
async def record_estrus_endpoint(
    payload: EstrusCreate,
    context: FarmContext = Depends(get_farm_context),
    uow=Depends(get_uow),
) -> EstrusResponse:
    event = await record_estrus.execute(
        uow,
        context.farm_id,
        record_estrus.RecordEstrusInput(**payload.model_dump()),
        actor_user_id=context.actor_user_id,
    )
    return EstrusResponse.model_validate(event)


@router.get("/estrus", response_model=list[EstrusResponse])
async def list_estrus_endpoint(
    animal_id: UUID | None = Query(None),
    context: FarmContext = Depends(get_farm_context),
    uow=Depends(get_uow),
) -> list[EstrusResponse]:
    events = await list_records.list_estrus(uow, context.farm_id, animal_id=animal_id)
    return [EstrusResponse.model_validate(e) for e in events]


# Breedings
@router.post("/breedings", response_model=BreedingResponse, status_code=status.HTTP_201_CREATED)
async def record_breeding_endpoint(
    payload: BreedingCreate,
    background_tasks: BackgroundTasks,
    context: FarmContext = Depends(get_farm_context),
    uow=Depends(get_uow),
) -> BreedingResponse:
    """Record a service and mark the female as served."""
    breeding = await record_breeding.execute(
        uow,
        context.farm_id,
        record_breeding.RecordBreedingInput(**payload.model_dump()),
        actor_user_id=context.actor_user_id,
    )
    schedule_events(background_tasks, uow)
    return BreedingResponse.model_validate(breeding)


@router.get("/breedings", response_model=list[BreedingResponse])
async def list_breedings_endpoint(
    animal_id: UUID | None = Query(None),
    context: FarmContext = Depends(get_farm_context),
    uow=Depends(get_uow),
) -> list[BreedingResponse]:
    breedings = await list_records.list_breedings(uow, context.farm_id, animal_id=animal_id)
    return [BreedingResponse.model_validate(b) for b in breedings]


# Pregnancy diagnoses
@router.post(
    "/pregnancy-diagnoses",
    response_model=PregnancyDiagnosisResult,
    status_code=status.HTTP_201_CREATED,
)
async def record_pregnancy_diagnosis_endpoint(
    payload: PregnancyDiagnosisCreate,
    background_tasks: BackgroundTasks,
    context: FarmContext = Depends(get_farm_context),
    uow=Depends(get_uow),
) -> PregnancyDiagnosisResult:
    """Store a diagnosis; a positive one linked to a breeding opens a pregnancy."""
    result = await record_pregnancy_diagnosis.execute(
        uow,
        context.farm_id,
        record_pregnancy_diagnosis.RecordPregnancyDiagnosisInput(**payload.model_dump()),
        actor_user_id=context.actor_user_id,
    )
    schedule_events(background_tasks, uow)
    return PregnancyDiagnosisResult(
        diagnosis=PregnancyDiagnosisResponse.model_validate(result.diagnosis),
        pregnancy=(
            PregnancyResponse.model_validate(result.pregnancy) if result.pregnancy else None
        ),
    )


@router.get("/pregnancy-diagnoses", response_model=list[PregnancyDiagnosisResponse])
async def list_pregnancy_diagnoses_endpoint(
    animal_id: UUID | None = Query(None),
    context: FarmContext = Depends(get_farm_context),
    uow=Depends(get_uow),
) -> list[PregnancyDiagnosisResponse]:
    diagnoses = await list_records.list_diagnoses(uow, context.farm_id, animal_id=animal_id)
    return [PregnancyDiagnosisResponse.model_validate(d) for d in diagnoses]


# Pregnancies
@router.get("/pregnancies", response_model=list[PregnancyResponse])
async def list_pregnancies_endpoint(
    animal_id: UUID | None = Query(None),
    status_code: str | None = Query(None, alias="status"),
    context: FarmContext = Depends(get_farm_context),
    uow=Depends(get_uow),
) -> list[PregnancyResponse]:
    pregnancies = await list_records.list_pregnancies(
        uow,
        context.farm_id,
        animal_id=animal_id,
        status=status_code.upper() if status_code else None,
    )
    return [PregnancyResponse.model_validate(p) for p in pregnancies]


@router.post("/pregnancies/{pregnancy_id}/status", response_model=PregnancyResponse)
async def update_pregnancy_status_endpoint(
    pregnancy_id: UUID,
    payload: PregnancyStatusUpdate,
    background_tasks: BackgroundTasks,
    context: FarmContext = Depends(get_farm_context),
    uow=Depends(get_uow),
) -> PregnancyResponse:
    pregnancy = await update_pregnancy_status.execute(
        uow,
        context.farm_id,
        pregnancy_id,
        update_pregnancy_status.UpdatePregnancyStatusInput(
            status=payload.status, notes=payload.notes
        ),
        actor_user_id=context.actor_user_id,
    )
    schedule_events(background_tasks, uow)
    return PregnancyResponse.model_validate(pregnancy)


# IATF protocols
@router.post(
    "/iatf-protocols",
    response_model=IatfProtocolResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_iatf_protocol_endpoint(
    payload: IatfProtocolCreate,
    context: FarmContext = Depends(get_farm_context),
    uow=Depends(get_uow),
) -> IatfProtocolResponse:
    protocol = await create_iatf_protocol.execute(
        uow,
        context.farm_id,
        create_iatf_protocol.CreateIatfProtocolInput(**payload.model_dump()),
    )
    return IatfProtocolResponse.model_validate(protocol)


@router.get("/iatf-protocols", response_model=list[IatfProtocolResponse])
async def list_iatf_protocols_endpoint(
    active: bool | None = Query(None),
    context: FarmContext = Depends(get_farm_context),
    uow=Depends(get_uow),
) -> list[IatfProtocolResponse]:
    protocols = await list_records.list_iatf_protocols(uow, context.farm_id, active=active)
    return [IatfProtocolResponse.model_validate(p) for p in protocols]
