from __future__ import annotations

from datetime import date
from uuid import uuid4

import pytest

from src.application.errors import ConflictError, NotFound, ValidationError
from src.application.events.models import AnimalCreatedEvent
from src.application.use_cases.animals import (
    create_animal,
    get_animal,
    list_animals,
    update_animal,
)


async def test_create_animal_defaults_health_and_origin(uow, farm_id):
    result = await create_animal.execute(
        uow,
        farm_id,
        create_animal.CreateAnimalInput(
            identification=" COW-1 ", sex="F", category="COW", birth_date=date(2021, 3, 1)
        ),
    )
    assert result.identification == "COW-1"
    assert result.health_status == "HEALTHY"
    assert result.acquisition_origin == "BORN"
    assert result.reproductive_status is None
    assert uow.commits == 1
    assert isinstance(uow.events[0], AnimalCreatedEvent)


async def test_create_animal_requires_birth_date_when_born_on_farm(uow, farm_id):
    with pytest.raises(ValidationError):
        await create_animal.execute(
            uow, farm_id, create_animal.CreateAnimalInput(identification="COW-2", sex="F")
        )


async def test_create_purchased_animal_without_birth_date(uow, farm_id):
    result = await create_animal.execute(
        uow,
        farm_id,
        create_animal.CreateAnimalInput(
            identification="BULL-1", sex="M", category="BULL", acquisition_origin="PURCHASED"
        ),
    )
    assert result.birth_date is None


async def test_create_animal_rejects_duplicate_identification_across_farms(
    uow, farm_id, make_animal
):
    await make_animal("DUP-1", farm=uuid4())
    with pytest.raises(ConflictError):
        await create_animal.execute(
            uow,
            farm_id,
            create_animal.CreateAnimalInput(identification="DUP-1", birth_date=date(2022, 1, 1)),
        )


async def test_create_animal_rejects_unknown_category(uow, farm_id):
    with pytest.raises(ValidationError):
        await create_animal.execute(
            uow,
            farm_id,
            create_animal.CreateAnimalInput(
                identification="X-1", category="UNICORN", birth_date=date(2022, 1, 1)
            ),
        )


async def test_get_animal_is_farm_scoped(uow, make_animal):
    animal = await make_animal("SCOPED-1")
    with pytest.raises(NotFound):
        await get_animal.execute(uow, uuid4(), animal.id)


async def test_list_animals_rejects_unknown_status(uow, farm_id):
    with pytest.raises(ValidationError):
        await list_animals.execute(uow, farm_id, reproductive_status="FLYING")


async def test_update_animal_applies_fields_and_bumps_version(uow, farm_id, make_animal):
    animal = await make_animal("UPD-1")
    updated = await update_animal.execute(
        uow,
        farm_id,
        animal.id,
        update_animal.UpdateAnimalInput(version=animal.version, breed="Jersey"),
    )
    assert updated.breed == "Jersey"
    assert updated.version == animal.version + 1


async def test_update_animal_version_mismatch_raises(uow, farm_id, make_animal):
    animal = await make_animal("UPD-2")
    with pytest.raises(ConflictError):
        await update_animal.execute(
            uow,
            farm_id,
            animal.id,
            update_animal.UpdateAnimalInput(version=animal.version + 5, breed="Jersey"),
        )


async def test_update_animal_cannot_take_existing_identification(uow, farm_id, make_animal):
    await make_animal("TAKEN")
    animal = await make_animal("UPD-3")
    with pytest.raises(ConflictError):
        await update_animal.execute(
            uow,
            farm_id,
            animal.id,
            update_animal.UpdateAnimalInput(version=animal.version, identification="TAKEN"),
        )
