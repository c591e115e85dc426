from __future__ import annotations

from datetime import datetime, timezone
from uuid import uuid4

import pytest

from src.application.errors import ConflictError, NotFound, ValidationError
from src.application.events.models import AnimalMovedEvent
from src.application.use_cases.pens import (
    create_pen,
    list_pen_movements,
    move_animal,
    update_pen,
)


async def test_create_pen_rejects_duplicate_name_case_insensitive(uow, farm_id):
    await create_pen.execute(
        uow, farm_id, create_pen.CreatePenInput(name="Maternity", type="MATERNITY")
    )
    with pytest.raises(ConflictError):
        await create_pen.execute(uow, farm_id, create_pen.CreatePenInput(name="maternity"))


async def test_same_pen_name_allowed_on_other_farm(uow, farm_id):
    await create_pen.execute(uow, farm_id, create_pen.CreatePenInput(name="Dry"))
    other = await create_pen.execute(uow, uuid4(), create_pen.CreatePenInput(name="Dry"))
    assert other.name == "Dry"


async def test_create_pen_rejects_unknown_type(uow, farm_id):
    with pytest.raises(ValidationError):
        await create_pen.execute(uow, farm_id, create_pen.CreatePenInput(name="X", type="POOL"))


async def test_update_pen_deactivates(uow, farm_id, make_pen):
    pen = await make_pen("Rearing")
    updated = await update_pen.execute(
        uow, farm_id, pen.id, update_pen.UpdatePenInput(active=False)
    )
    assert updated.active is False


async def test_move_animal_records_origin_and_destination(uow, farm_id, make_animal, make_pen):
    cow = await make_animal()
    first = await make_pen("Lactating A")
    second = await make_pen("Dry")

    initial = await move_animal.execute(
        uow, farm_id, cow.id, move_animal.MoveAnimalInput(destination_pen_id=first.id)
    )
    assert initial.origin_pen_id is None

    actor = uuid4()
    moved_at = datetime(2024, 5, 1, 8, tzinfo=timezone.utc)
    movement = await move_animal.execute(
        uow,
        farm_id,
        cow.id,
        move_animal.MoveAnimalInput(
            destination_pen_id=second.id, reason="dry-off", moved_at=moved_at
        ),
        actor_user_id=actor,
    )
    assert movement.origin_pen_id == first.id
    assert movement.destination_pen_id == second.id
    assert movement.moved_by == actor
    assert movement.moved_at == moved_at
    assert uow.animals.items[cow.id].current_pen_id == second.id
    assert any(isinstance(e, AnimalMovedEvent) for e in uow.events)

    history = await list_pen_movements.execute(uow, farm_id, cow.id)
    assert len(history) == 2


async def test_move_animal_to_pen_of_other_farm_is_rejected(uow, farm_id, make_animal, make_pen):
    cow = await make_animal()
    foreign = await make_pen("Foreign", farm=uuid4())
    with pytest.raises(ValidationError):
        await move_animal.execute(
            uow, farm_id, cow.id, move_animal.MoveAnimalInput(destination_pen_id=foreign.id)
        )
    assert not uow.pen_movements.items
    assert uow.animals.items[cow.id].current_pen_id is None


async def test_move_animal_to_unknown_pen(uow, farm_id, make_animal):
    cow = await make_animal()
    with pytest.raises(NotFound):
        await move_animal.execute(
            uow, farm_id, cow.id, move_animal.MoveAnimalInput(destination_pen_id=uuid4())
        )
