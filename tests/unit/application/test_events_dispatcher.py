from __future__ import annotations

import logging
from datetime import date
from uuid import uuid4

from src.application.events.dispatcher import describe, dispatch_events
from src.application.events.models import AnimalsReclassifiedEvent, PregnancyConfirmedEvent


def test_describe_reclassification_counts_animals():
    event = AnimalsReclassifiedEvent(
        farm_id=None, animal_ids=(uuid4(), uuid4()), min_age_months=12
    )
    assert describe(event) == "2 female calves promoted to heifer (min age 12 months)"


def test_describe_unknown_event_returns_none():
    assert describe(object()) is None


async def test_dispatch_logs_with_farm_prefix(caplog):
    farm_id = uuid4()
    event = PregnancyConfirmedEvent(
        farm_id=farm_id,
        actor_user_id=None,
        animal_id=uuid4(),
        pregnancy_id=uuid4(),
        due_date=date(2024, 10, 19),
    )
    with caplog.at_level(logging.INFO, logger="src.application.events.dispatcher"):
        await dispatch_events([event])
    assert f"[farm={farm_id}]" in caplog.text
    assert "due 2024-10-19" in caplog.text
