from __future__ import annotations

import logging
from datetime import date, timedelta
from uuid import uuid4

import pytest

from src.application.errors import NotFound, ValidationError
from src.application.events.models import PregnancyConfirmedEvent, PregnancyEndedEvent
from src.application.use_cases.reproduction import (
    record_breeding,
    record_pregnancy_diagnosis,
    update_pregnancy_status,
)
from src.domain.models.breeding import GESTATION_DAYS


async def _served_cow(uow, farm_id, make_animal, served_on=date(2024, 1, 10)):
    cow = await make_animal()
    breeding = await record_breeding.execute(
        uow,
        farm_id,
        record_breeding.RecordBreedingInput(animal_id=cow.id, type="AI", date=served_on),
    )
    return cow, breeding


async def test_positive_diagnosis_opens_pregnancy_with_fixed_due_date(uow, farm_id, make_animal):
    cow, breeding = await _served_cow(uow, farm_id, make_animal)
    result = await record_pregnancy_diagnosis.execute(
        uow,
        farm_id,
        record_pregnancy_diagnosis.RecordPregnancyDiagnosisInput(
            animal_id=cow.id,
            date=date(2024, 2, 20),
            result="POSITIVE",
            breeding_id=breeding.id,
            method="ULTRASOUND",
        ),
    )
    assert result.pregnancy is not None
    assert result.pregnancy.status == "CONFIRMED"
    assert result.pregnancy.breeding_id == breeding.id
    assert result.pregnancy.due_date == date(2024, 1, 10) + timedelta(days=GESTATION_DAYS)
    assert result.pregnancy.due_date == date(2024, 10, 19)
    assert uow.animals.items[cow.id].reproductive_status == "PREGNANT"
    assert any(isinstance(e, PregnancyConfirmedEvent) for e in uow.events)


async def test_negative_diagnosis_keeps_status(uow, farm_id, make_animal):
    cow, breeding = await _served_cow(uow, farm_id, make_animal)
    result = await record_pregnancy_diagnosis.execute(
        uow,
        farm_id,
        record_pregnancy_diagnosis.RecordPregnancyDiagnosisInput(
            animal_id=cow.id, date=date(2024, 2, 20), result="NEGATIVE", breeding_id=breeding.id
        ),
    )
    assert result.pregnancy is None
    assert not uow.pregnancies.items
    assert uow.animals.items[cow.id].reproductive_status == "SERVED"


async def test_positive_diagnosis_with_unknown_breeding_is_kept_without_pregnancy(
    uow, farm_id, make_animal, caplog
):
    cow, _ = await _served_cow(uow, farm_id, make_animal)
    missing_breeding = uuid4()
    with caplog.at_level(logging.WARNING):
        result = await record_pregnancy_diagnosis.execute(
            uow,
            farm_id,
            record_pregnancy_diagnosis.RecordPregnancyDiagnosisInput(
                animal_id=cow.id,
                date=date(2024, 2, 20),
                result="POSITIVE",
                breeding_id=missing_breeding,
            ),
        )
    assert result.pregnancy is None
    assert result.diagnosis.breeding_id == missing_breeding
    assert result.diagnosis.id in uow.pregnancy_diagnoses.items
    assert not uow.pregnancies.items
    assert uow.animals.items[cow.id].reproductive_status == "SERVED"
    assert "no pregnancy created" in caplog.text


async def test_positive_diagnosis_ignores_breeding_of_another_animal(uow, farm_id, make_animal):
    _, breeding = await _served_cow(uow, farm_id, make_animal)
    other = await make_animal()
    result = await record_pregnancy_diagnosis.execute(
        uow,
        farm_id,
        record_pregnancy_diagnosis.RecordPregnancyDiagnosisInput(
            animal_id=other.id, date=date(2024, 2, 20), result="POSITIVE", breeding_id=breeding.id
        ),
    )
    assert result.pregnancy is None


async def test_diagnosis_rejects_unknown_result(uow, farm_id, make_animal):
    cow = await make_animal()
    with pytest.raises(ValidationError):
        await record_pregnancy_diagnosis.execute(
            uow,
            farm_id,
            record_pregnancy_diagnosis.RecordPregnancyDiagnosisInput(
                animal_id=cow.id, date=date(2024, 2, 20), result="MAYBE"
            ),
        )


async def _confirmed_pregnancy(uow, farm_id, make_animal):
    cow, breeding = await _served_cow(uow, farm_id, make_animal)
    result = await record_pregnancy_diagnosis.execute(
        uow,
        farm_id,
        record_pregnancy_diagnosis.RecordPregnancyDiagnosisInput(
            animal_id=cow.id, date=date(2024, 2, 20), result="POSITIVE", breeding_id=breeding.id
        ),
    )
    return result.pregnancy


async def test_pregnancy_can_be_marked_lost(uow, farm_id, make_animal):
    pregnancy = await _confirmed_pregnancy(uow, farm_id, make_animal)
    updated = await update_pregnancy_status.execute(
        uow,
        farm_id,
        pregnancy.id,
        update_pregnancy_status.UpdatePregnancyStatusInput(status="ABORTION", notes="day 90"),
    )
    assert updated.status == "ABORTION"
    assert updated.notes == "day 90"
    assert updated.due_date == pregnancy.due_date
    assert any(isinstance(e, PregnancyEndedEvent) for e in uow.events)


async def test_pregnancy_cannot_be_delivered_manually(uow, farm_id, make_animal):
    pregnancy = await _confirmed_pregnancy(uow, farm_id, make_animal)
    with pytest.raises(ValidationError):
        await update_pregnancy_status.execute(
            uow,
            farm_id,
            pregnancy.id,
            update_pregnancy_status.UpdatePregnancyStatusInput(status="DELIVERED"),
        )


async def test_ended_pregnancy_cannot_change_again(uow, farm_id, make_animal):
    pregnancy = await _confirmed_pregnancy(uow, farm_id, make_animal)
    payload = update_pregnancy_status.UpdatePregnancyStatusInput(status="LOSS")
    await update_pregnancy_status.execute(uow, farm_id, pregnancy.id, payload)
    with pytest.raises(ValidationError):
        await update_pregnancy_status.execute(uow, farm_id, pregnancy.id, payload)


async def test_unknown_pregnancy_status_update(uow, farm_id):
    with pytest.raises(NotFound):
        await update_pregnancy_status.execute(
            uow,
            farm_id,
            uuid4(),
            update_pregnancy_status.UpdatePregnancyStatusInput(status="LOSS"),
        )
