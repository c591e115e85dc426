from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Iterable

from src.application.events.models import (
    AnimalCreatedEvent,
    AnimalMovedEvent,
    AnimalsReclassifiedEvent,
    AnimalUpdatedEvent,
    BreedingRecordedEvent,
    CalfRegisteredEvent,
    CalvingRecordedEvent,
    DryOffRecordedEvent,
    PregnancyConfirmedEvent,
    PregnancyEndedEvent,
)

logger = logging.getLogger(__name__)

_MESSAGES: dict[type, str] = {
    AnimalCreatedEvent: "Animal %(identification)s registered",
    AnimalUpdatedEvent: "Animal %(identification)s updated: %(changed_fields)s",
    BreedingRecordedEvent: "Breeding %(breeding_id)s (%(type)s) recorded for animal %(animal_id)s",
    PregnancyConfirmedEvent: (
        "Pregnancy %(pregnancy_id)s confirmed for animal %(animal_id)s, due %(due_date)s"
    ),
    PregnancyEndedEvent: "Pregnancy %(pregnancy_id)s of animal %(animal_id)s ended as %(status)s",
    CalvingRecordedEvent: (
        "Calving %(calving_id)s recorded for animal %(animal_id)s, "
        "lactation #%(lactation_number)s opened"
    ),
    CalfRegisteredEvent: "Calf %(identification)s registered from calving %(calving_id)s",
    DryOffRecordedEvent: "Dry-off %(dry_off_id)s recorded for animal %(animal_id)s",
    AnimalMovedEvent: (
        "Animal %(animal_id)s moved from pen %(origin_pen_id)s to %(destination_pen_id)s"
    ),
    AnimalsReclassifiedEvent: (
        "%(count)s female calves promoted to heifer (min age %(min_age_months)s months)"
    ),
}


def describe(event: object) -> str | None:
    template = _MESSAGES.get(type(event))
    if template is None:
        return None
    values = asdict(event)
    if isinstance(event, AnimalsReclassifiedEvent):
        values["count"] = len(event.animal_ids)
    return template % values


async def dispatch_events(events: Iterable[object]) -> None:
    """
    Dispatch events post-commit to the lifecycle log.
    Safe to call in a background task.
    """
    events = list(events)
    if not events:
        return

    for event in events:
        message = describe(event)
        if message is None:
            logger.debug("No handler for event %s", type(event).__name__)
            continue
        farm_id = getattr(event, "farm_id", None)
        logger.info("[farm=%s] %s", farm_id or "*", message)
