from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from uuid import UUID

from dateutil.relativedelta import relativedelta

from src.application.errors import AppError
from src.application.events.models import AnimalsReclassifiedEvent
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.value_objects.animal_category import AnimalCategory

logger = logging.getLogger(__name__)

DEFAULT_MIN_AGE_MONTHS = 12


@dataclass(slots=True)
class ReclassificationResult:
    min_age_months: int
    animal_ids: list[UUID] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.animal_ids)


def age_cutoff(today: date, min_age_months: int) -> date:
    """Latest birth date at which an animal is at least ``min_age_months`` old."""
    return today - relativedelta(months=min_age_months)


async def execute(
    uow: UnitOfWork,
    min_age_months: int = DEFAULT_MIN_AGE_MONTHS,
    *,
    farm_id: UUID | None = None,
    today: date | None = None,
) -> ReclassificationResult:
    """Promote female calves that reached ``min_age_months`` to heifers.

    Only the female-calf category is covered; male calves keep their category.
    Each promotion runs in its own savepoint: an animal whose update fails is
    logged and skipped, and the rest of the batch is still committed.
    """
    if min_age_months <= 0:
        min_age_months = DEFAULT_MIN_AGE_MONTHS
    cutoff = age_cutoff(today or date.today(), min_age_months)

    result = ReclassificationResult(min_age_months=min_age_months)
    candidates = await uow.animals.list_female_calves_born_on_or_before(cutoff, farm_id=farm_id)
    for animal in candidates:
        try:
            async with uow.savepoint():
                await uow.animals.set_category(animal.id, AnimalCategory.HEIFER.value)
        except AppError as exc:
            logger.warning(
                "Skipping reclassification of animal %s (%s): %s",
                animal.id,
                animal.identification,
                exc.message,
            )
            continue
        result.animal_ids.append(animal.id)

    if result.animal_ids:
        uow.add_event(
            AnimalsReclassifiedEvent(
                farm_id=farm_id,
                animal_ids=tuple(result.animal_ids),
                min_age_months=min_age_months,
            )
        )
    await uow.commit()
    logger.info(
        "Reclassified %s of %s female calves born on or before %s",
        result.count,
        len(candidates),
        cutoff,
    )
    return result
