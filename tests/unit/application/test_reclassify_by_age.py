from __future__ import annotations

import logging
from datetime import date
from uuid import uuid4

from src.application.events.models import AnimalsReclassifiedEvent
from src.application.use_cases.animals import reclassify_by_age

TODAY = date(2025, 6, 15)


async def test_promotes_female_calves_that_reached_min_age(uow, make_animal):
    old_enough = await make_animal(category="FEMALE_CALF", birth_date=date(2024, 6, 1))
    on_cutoff = await make_animal(category="FEMALE_CALF", birth_date=date(2024, 6, 15))
    too_young = await make_animal(category="FEMALE_CALF", birth_date=date(2024, 6, 16))
    male_calf = await make_animal(sex="M", category="MALE_CALF", birth_date=date(2023, 1, 1))
    cow = await make_animal(category="COW", birth_date=date(2019, 1, 1))

    result = await reclassify_by_age.execute(uow, 12, today=TODAY)

    assert set(result.animal_ids) == {old_enough.id, on_cutoff.id}
    assert result.count == 2
    assert uow.animals.items[old_enough.id].category == "HEIFER"
    assert uow.animals.items[on_cutoff.id].category == "HEIFER"
    assert uow.animals.items[too_young.id].category == "FEMALE_CALF"
    assert uow.animals.items[male_calf.id].category == "MALE_CALF"
    assert uow.animals.items[cow.id].category == "COW"
    assert uow.commits == 1
    event = uow.events[0]
    assert isinstance(event, AnimalsReclassifiedEvent)
    assert event.min_age_months == 12


async def test_non_positive_min_age_falls_back_to_default(uow, make_animal):
    fifteen_months = await make_animal(category="FEMALE_CALF", birth_date=date(2024, 3, 1))
    result = await reclassify_by_age.execute(uow, 0, today=TODAY)
    assert result.min_age_months == reclassify_by_age.DEFAULT_MIN_AGE_MONTHS
    assert result.animal_ids == [fifteen_months.id]


async def test_custom_min_age(uow, make_animal):
    await make_animal(category="FEMALE_CALF", birth_date=date(2024, 3, 1))
    result = await reclassify_by_age.execute(uow, 18, today=TODAY)
    assert result.count == 0
    assert not uow.events


async def test_failed_update_is_skipped_and_others_promoted(uow, make_animal, caplog):
    broken = await make_animal(category="FEMALE_CALF", birth_date=date(2023, 1, 1))
    healthy = await make_animal(category="FEMALE_CALF", birth_date=date(2023, 2, 1))
    uow.animals.failing_ids.add(broken.id)

    with caplog.at_level(logging.WARNING):
        result = await reclassify_by_age.execute(uow, 12, today=TODAY)

    assert result.animal_ids == [healthy.id]
    assert uow.animals.items[broken.id].category == "FEMALE_CALF"
    assert uow.animals.items[healthy.id].category == "HEIFER"
    assert "Skipping reclassification" in caplog.text


async def test_farm_filter(uow, farm_id, make_animal):
    mine = await make_animal(category="FEMALE_CALF", birth_date=date(2023, 1, 1))
    theirs = await make_animal(category="FEMALE_CALF", birth_date=date(2023, 1, 1), farm=uuid4())

    result = await reclassify_by_age.execute(uow, 12, farm_id=farm_id, today=TODAY)

    assert result.animal_ids == [mine.id]
    assert uow.animals.items[theirs.id].category == "FEMALE_CALF"


def test_age_cutoff_handles_month_ends():
    assert reclassify_by_age.age_cutoff(date(2025, 3, 31), 1) == date(2025, 2, 28)
    assert reclassify_by_age.age_cutoff(date(2025, 6, 15), 12) == date(2024, 6, 15)
