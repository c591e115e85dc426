from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, BackgroundTasks, Depends, Query, status

from src.application.use_cases.animals import (
    create_animal,
    get_animal,
    list_animals,
    reclassify_by_age,
    update_animal,
)
from src.application.use_cases.pens import list_pen_movements, move_animal
from src.config.settings import Settings
from src.interfaces.http.deps import (
    FarmContext,
    get_app_settings,
    get_farm_context,
    get_uow,
    schedule_events,
)
from src.interfaces.http.schemas.animals import (
    AnimalCreate,
    AnimalResponse,
    AnimalUpdate,
    MovePenRequest,
    PenMovementResponse,
    ReclassifyRequest,
    ReclassifyResponse,
)

router = APIRouter(prefix="/animals", tags=["animals"])


@router.get("/", response_model=list[AnimalResponse])
async def list_animals_endpoint(
    category: str | None = Query(None),
    reproductive_status: str | None = Query(None),
    pen_id: UUID | None = Query(None),
    q: str | None = Query(None, description="Text search across identification and breed"),
    context: FarmContext = Depends(get_farm_context),
    uow=Depends(get_uow),
) -> list[AnimalResponse]:
    animals = await list_animals.execute(
        uow,
        context.farm_id,
        category=category.upper() if category else None,
        reproductive_status=reproductive_status.upper() if reproductive_status else None,
        pen_id=pen_id,
        search=q,
    )
    return [AnimalResponse.model_validate(a) for a in animals]


@router.post("/", response_model=AnimalResponse, status_code=status.HTTP_201_CREATED)
async def create_animal_endpoint(
    payload: AnimalCreate,
    background_tasks: BackgroundTasks,
    context: FarmContext = Depends(get_farm_context),
    uow=Depends(get_uow),
) -> AnimalResponse:
    animal = await create_animal.execute(
        uow,
        context.farm_id,
        create_animal.CreateAnimalInput(**payload.model_dump()),
        actor_user_id=context.actor_user_id,
    )
    schedule_events(background_tasks, uow)
    return AnimalResponse.model_validate(animal)


@router.post("/reclassify-by-age", response_model=ReclassifyResponse)
async def reclassify_by_age_endpoint(
    background_tasks: BackgroundTasks,
    payload: ReclassifyRequest | None = None,
    context: FarmContext = Depends(get_farm_context),
    settings: Settings = Depends(get_app_settings),
    uow=Depends(get_uow),
) -> ReclassifyResponse:
    """Promote this farm's female calves that reached the minimum age to heifers."""
    min_age = payload.min_age_months if payload and payload.min_age_months else None
    result = await reclassify_by_age.execute(
        uow,
        min_age or settings.reclassification_min_age_months,
        farm_id=context.farm_id,
    )
    schedule_events(background_tasks, uow)
    return ReclassifyResponse(
        count=result.count,
        animal_ids=result.animal_ids,
        min_age_months=result.min_age_months,
    )


@router.get("/{animal_id}", response_model=AnimalResponse)
async def get_animal_endpoint(
    animal_id: UUID,
    context: FarmContext = Depends(get_farm_context),
    uow=Depends(get_uow),
) -> AnimalResponse:
    animal = await get_animal.execute(uow, context.farm_id, animal_id)
    return AnimalResponse.model_validate(animal)


@router.put("/{animal_id}", response_model=AnimalResponse)
async def update_animal_endpoint(
    animal_id: UUID,
    payload: AnimalUpdate,
    background_tasks: BackgroundTasks,
    context: FarmContext = Depends(get_farm_context),
    uow=Depends(get_uow),
) -> AnimalResponse:
    animal = await update_animal.execute(
        uow,
        context.farm_id,
        animal_id,
        update_animal.UpdateAnimalInput(**payload.model_dump()),
        actor_user_id=context.actor_user_id,
    )
    schedule_events(background_tasks, uow)
    return AnimalResponse.model_validate(animal)


@router.post(
    "/{animal_id}/move-pen",
    response_model=PenMovementResponse,
    status_code=status.HTTP_201_CREATED,
)
async def move_animal_endpoint(
    animal_id: UUID,
    payload: MovePenRequest,
    background_tasks: BackgroundTasks,
    context: FarmContext = Depends(get_farm_context),
    uow=Depends(get_uow),
) -> PenMovementResponse:
    movement = await move_animal.execute(
        uow,
        context.farm_id,
        animal_id,
        move_animal.MoveAnimalInput(
            destination_pen_id=payload.destination_pen_id,
            reason=payload.reason,
            moved_at=payload.moved_at,
        ),
        actor_user_id=context.actor_user_id,
    )
    schedule_events(background_tasks, uow)
    return PenMovementResponse.model_validate(movement)


@router.get("/{animal_id}/pen-movements", response_model=list[PenMovementResponse])
async def list_pen_movements_endpoint(
    animal_id: UUID,
    context: FarmContext = Depends(get_farm_context),
    uow=Depends(get_uow),
) -> list[PenMovementResponse]:
    movements = await list_pen_movements.execute(uow, context.farm_id, animal_id)
    return [PenMovementResponse.model_validate(m) for m in movements]
