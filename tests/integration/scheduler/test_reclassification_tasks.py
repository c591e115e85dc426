from __future__ import annotations

from datetime import date
from uuid import uuid4

import pytest

from src.infrastructure.db.base import Base
from src.infrastructure.db.orm.animal import AnimalORM
from src.infrastructure.db.session import create_engine, create_session_factory
from src.infrastructure.scheduler.reclassification_tasks import reclassify_calves


@pytest.fixture()
async def session_factory(tmp_path):
    engine = create_engine(f"sqlite+aiosqlite:///{tmp_path / 'tasks.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield create_session_factory(engine)
    await engine.dispose()


def _animal(farm_id, identification, category, birth_date, sex="F") -> AnimalORM:
    return AnimalORM(
        id=uuid4(),
        farm_id=farm_id,
        identification=identification,
        sex=sex,
        category=category,
        birth_date=birth_date,
        health_status="HEALTHY",
        acquisition_origin="BORN",
        version=1,
    )


async def test_reclassify_calves_across_farms(session_factory):
    farm_a, farm_b = uuid4(), uuid4()
    old_a = _animal(farm_a, "CALF-A", "FEMALE_CALF", date(2023, 1, 1))
    old_b = _animal(farm_b, "CALF-B", "FEMALE_CALF", date(2023, 2, 1))
    young = _animal(farm_a, "CALF-C", "FEMALE_CALF", date(2025, 1, 1))
    bull_calf = _animal(farm_a, "CALF-M", "MALE_CALF", date(2023, 1, 1), sex="M")
    async with session_factory() as session:
        session.add_all([old_a, old_b, young, bull_calf])
        await session.commit()

    result = await reclassify_calves(session_factory, 12, today=date(2025, 6, 15))

    assert result is not None
    assert set(result.animal_ids) == {old_a.id, old_b.id}
    categories = {}
    async with session_factory() as session:
        for seeded in (old_a, old_b, young, bull_calf):
            row = await session.get(AnimalORM, seeded.id)
            categories[row.identification] = (row.category, row.version)
    assert categories["CALF-A"] == ("HEIFER", 2)
    assert categories["CALF-B"] == ("HEIFER", 2)
    assert categories["CALF-C"] == ("FEMALE_CALF", 1)
    assert categories["CALF-M"] == ("MALE_CALF", 1)


async def test_reclassify_calves_single_farm(session_factory):
    farm_a, farm_b = uuid4(), uuid4()
    mine = _animal(farm_a, "CALF-A", "FEMALE_CALF", date(2023, 1, 1))
    theirs = _animal(farm_b, "CALF-B", "FEMALE_CALF", date(2023, 1, 1))
    async with session_factory() as session:
        session.add_all([mine, theirs])
        await session.commit()

    result = await reclassify_calves(
        session_factory, 12, farm_id=farm_a, today=date(2025, 6, 15)
    )

    assert result.animal_ids == [mine.id]


async def test_reclassify_calves_reports_failure_as_none(tmp_path):
    engine = create_engine(f"sqlite+aiosqlite:///{tmp_path / 'empty.db'}")
    try:
        # No tables: the query fails and the task swallows it after logging
        result = await reclassify_calves(create_session_factory(engine), 12)
    finally:
        await engine.dispose()
    assert result is None
