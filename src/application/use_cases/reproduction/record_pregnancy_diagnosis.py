from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from uuid import UUID

from src.application.errors import ValidationError
from src.application.events.models import PregnancyConfirmedEvent
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.guards import ensure_choice, load_animal
from src.domain.models.pregnancy import Pregnancy
from src.domain.models.pregnancy_diagnosis import (
    DiagnosisMethod,
    DiagnosisResult,
    PregnancyDiagnosis,
)
from src.domain.value_objects.animal_status import ReproductiveStatus

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class RecordPregnancyDiagnosisInput:
    animal_id: UUID
    date: date
    result: str
    breeding_id: UUID | None = None
    estimated_days: int | None = None
    method: str | None = None
    veterinarian: str | None = None
    notes: str | None = None


@dataclass(slots=True)
class RecordPregnancyDiagnosisOutput:
    diagnosis: PregnancyDiagnosis
    pregnancy: Pregnancy | None = None


async def execute(
    uow: UnitOfWork,
    farm_id: UUID,
    payload: RecordPregnancyDiagnosisInput,
    actor_user_id: UUID | None = None,
) -> RecordPregnancyDiagnosisOutput:
    """Record a diagnosis and, when positive, open the pregnancy it confirms.

    A positive result only creates a pregnancy when ``breeding_id`` resolves to
    a breeding of the same animal; otherwise the diagnosis is kept on its own.
    """
    if payload.result is None:
        raise ValidationError("Diagnosis result is required")
    ensure_choice(payload.result, DiagnosisResult, "result")
    ensure_choice(payload.method, DiagnosisMethod, "method")
    if payload.estimated_days is not None and payload.estimated_days < 0:
        raise ValidationError("estimated_days cannot be negative")

    animal = await load_animal(uow, farm_id, payload.animal_id)

    diagnosis = PregnancyDiagnosis.create(
        farm_id=farm_id,
        animal_id=animal.id,
        date=payload.date,
        result=payload.result,
        breeding_id=payload.breeding_id,
        estimated_days=payload.estimated_days,
        method=payload.method,
        veterinarian=payload.veterinarian,
        notes=payload.notes,
    )
    created = await uow.pregnancy_diagnoses.add(diagnosis)

    pregnancy = None
    if created.is_positive:
        breeding = None
        if payload.breeding_id:
            breeding = await uow.breedings.get(farm_id, payload.breeding_id)
            if breeding and breeding.animal_id != animal.id:
                breeding = None
        if breeding is None:
            logger.warning(
                "Positive diagnosis %s for animal %s has no resolvable breeding (%s); "
                "no pregnancy created",
                created.id,
                animal.id,
                payload.breeding_id,
            )
        else:
            pregnancy = await uow.pregnancies.add(
                Pregnancy.confirm(
                    farm_id=farm_id,
                    animal_id=animal.id,
                    breeding_id=breeding.id,
                    breeding_date=breeding.date,
                    confirmation_date=payload.date,
                )
            )
            await uow.animals.set_reproductive_status(
                animal.id, ReproductiveStatus.PREGNANT.value
            )
            uow.add_event(
                PregnancyConfirmedEvent(
                    farm_id=farm_id,
                    actor_user_id=actor_user_id,
                    animal_id=animal.id,
                    pregnancy_id=pregnancy.id,
                    due_date=pregnancy.due_date,
                )
            )

    await uow.commit()
    return RecordPregnancyDiagnosisOutput(diagnosis=created, pregnancy=pregnancy)
