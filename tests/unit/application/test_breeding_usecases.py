from __future__ import annotations

from datetime import date, datetime, timezone
from uuid import uuid4

import pytest

from src.application.errors import NotFound, ValidationError
from src.application.use_cases.reproduction import (
    create_iatf_protocol,
    record_breeding,
    record_estrus,
)


async def test_natural_breeding_without_sire_is_rejected(uow, farm_id, make_animal):
    cow = await make_animal()
    with pytest.raises(ValidationError, match="Sire required"):
        await record_breeding.execute(
            uow,
            farm_id,
            record_breeding.RecordBreedingInput(
                animal_id=cow.id, type="NATURAL", date=date(2024, 1, 1)
            ),
        )
    assert not uow.breedings.items
    assert uow.animals.items[cow.id].reproductive_status is None


async def test_natural_breeding_with_free_text_sire(uow, farm_id, make_animal):
    cow = await make_animal()
    breeding = await record_breeding.execute(
        uow,
        farm_id,
        record_breeding.RecordBreedingInput(
            animal_id=cow.id, type="NATURAL", date=date(2024, 1, 1), sire_info="Neighbour bull"
        ),
    )
    assert breeding.sire_info == "Neighbour bull"
    assert uow.animals.items[cow.id].reproductive_status == "SERVED"


async def test_natural_breeding_with_blank_sire_info_is_rejected(uow, farm_id, make_animal):
    cow = await make_animal()
    with pytest.raises(ValidationError, match="Sire required"):
        await record_breeding.execute(
            uow,
            farm_id,
            record_breeding.RecordBreedingInput(
                animal_id=cow.id, type="NATURAL", date=date(2024, 1, 1), sire_info="   "
            ),
        )
    assert not uow.breedings.items


async def test_breeding_with_registered_bull_marks_served(uow, farm_id, make_animal):
    cow = await make_animal()
    bull = await make_animal(sex="M", category="BULL")
    breeding = await record_breeding.execute(
        uow,
        farm_id,
        record_breeding.RecordBreedingInput(
            animal_id=cow.id, type="NATURAL", date=date(2024, 1, 1), sire_animal_id=bull.id
        ),
    )
    assert breeding.sire_animal_id == bull.id
    assert uow.animals.items[cow.id].reproductive_status == "SERVED"
    assert uow.commits == 1


async def test_breeding_rejects_sire_from_another_farm(uow, farm_id, make_animal):
    cow = await make_animal()
    bull = await make_animal(sex="M", category="BULL", farm=uuid4())
    with pytest.raises(ValidationError, match="different farm"):
        await record_breeding.execute(
            uow,
            farm_id,
            record_breeding.RecordBreedingInput(
                animal_id=cow.id, type="AI", date=date(2024, 1, 1), sire_animal_id=bull.id
            ),
        )


async def test_breeding_rejects_unknown_sire(uow, farm_id, make_animal):
    cow = await make_animal()
    with pytest.raises(NotFound):
        await record_breeding.execute(
            uow,
            farm_id,
            record_breeding.RecordBreedingInput(
                animal_id=cow.id, type="AI", date=date(2024, 1, 1), sire_animal_id=uuid4()
            ),
        )


async def test_breeding_rejects_female_or_calf_as_sire(uow, farm_id, make_animal):
    cow = await make_animal()
    other_cow = await make_animal()
    male_calf = await make_animal(sex="M", category="MALE_CALF")
    for sire in (other_cow, male_calf):
        with pytest.raises(ValidationError):
            await record_breeding.execute(
                uow,
                farm_id,
                record_breeding.RecordBreedingInput(
                    animal_id=cow.id, type="AI", date=date(2024, 1, 1), sire_animal_id=sire.id
                ),
            )


async def test_breeding_rejects_male_subject(uow, farm_id, make_animal):
    bull = await make_animal(sex="M", category="BULL")
    with pytest.raises(ValidationError):
        await record_breeding.execute(
            uow,
            farm_id,
            record_breeding.RecordBreedingInput(
                animal_id=bull.id, type="AI", date=date(2024, 1, 1)
            ),
        )


async def test_breeding_rejects_unknown_type(uow, farm_id, make_animal):
    cow = await make_animal()
    with pytest.raises(ValidationError):
        await record_breeding.execute(
            uow,
            farm_id,
            record_breeding.RecordBreedingInput(
                animal_id=cow.id, type="CLONING", date=date(2024, 1, 1)
            ),
        )


async def test_breeding_links_estrus_of_same_animal(uow, farm_id, make_animal):
    cow = await make_animal()
    other = await make_animal()
    estrus = await record_estrus.execute(
        uow,
        farm_id,
        record_estrus.RecordEstrusInput(
            animal_id=cow.id,
            detected_at=datetime(2024, 1, 1, 6, tzinfo=timezone.utc),
            detection_method="VISUAL",
        ),
    )
    with pytest.raises(NotFound):
        await record_breeding.execute(
            uow,
            farm_id,
            record_breeding.RecordBreedingInput(
                animal_id=other.id, type="AI", date=date(2024, 1, 1), estrus_id=estrus.id
            ),
        )
    breeding = await record_breeding.execute(
        uow,
        farm_id,
        record_breeding.RecordBreedingInput(
            animal_id=cow.id, type="AI", date=date(2024, 1, 1), estrus_id=estrus.id
        ),
    )
    assert breeding.estrus_id == estrus.id


async def test_iatf_breeding_references_protocol(uow, farm_id, make_animal):
    cow = await make_animal()
    protocol = await create_iatf_protocol.execute(
        uow, farm_id, create_iatf_protocol.CreateIatfProtocolInput(name="Ovsynch", duration_days=10)
    )
    breeding = await record_breeding.execute(
        uow,
        farm_id,
        record_breeding.RecordBreedingInput(
            animal_id=cow.id, type="IATF", date=date(2024, 2, 1), protocol_id=protocol.id
        ),
    )
    assert breeding.protocol_id == protocol.id

    with pytest.raises(NotFound):
        await record_breeding.execute(
            uow,
            farm_id,
            record_breeding.RecordBreedingInput(
                animal_id=cow.id, type="IATF", date=date(2024, 2, 1), protocol_id=uuid4()
            ),
        )


async def test_estrus_for_male_is_rejected(uow, farm_id, make_animal):
    bull = await make_animal(sex="M", category="BULL")
    with pytest.raises(ValidationError):
        await record_estrus.execute(
            uow, farm_id, record_estrus.RecordEstrusInput(animal_id=bull.id)
        )
