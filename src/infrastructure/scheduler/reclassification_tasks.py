from __future__ import annotations

import asyncio
import logging
from datetime import date
from uuid import UUID

from src.application.events.dispatcher import dispatch_events
from src.application.use_cases.animals import reclassify_by_age
from src.infrastructure.db.session import SQLAlchemyUnitOfWork

logger = logging.getLogger(__name__)


async def reclassify_calves(
    session_factory,
    min_age_months: int = reclassify_by_age.DEFAULT_MIN_AGE_MONTHS,
    *,
    farm_id: UUID | None = None,
    today: date | None = None,
) -> reclassify_by_age.ReclassificationResult | None:
    """Promote female calves old enough to be heifers, across every farm by default."""
    try:
        uow = SQLAlchemyUnitOfWork(session_factory)
        async with uow:
            result = await reclassify_by_age.execute(
                uow, min_age_months, farm_id=farm_id, today=today
            )
            events = uow.drain_events()
        await dispatch_events(events)
        return result
    except Exception as exc:
        logger.error("reclassify_calves failed: %s", exc, exc_info=True)
        return None


async def run_periodic_reclassification(
    session_factory, *, interval_hours: int, min_age_months: int
) -> None:
    """Run the reclassifier every ``interval_hours`` until cancelled."""
    interval = max(interval_hours, 1) * 3600
    logger.info(
        "Age reclassification scheduled every %sh (min age %s months)",
        interval_hours,
        min_age_months,
    )
    while True:
        await reclassify_calves(session_factory, min_age_months)
        await asyncio.sleep(interval)
