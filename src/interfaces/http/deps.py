from __future__ import annotations

from collections.abc import AsyncIterator
from dataclasses import dataclass
from uuid import UUID

from fastapi import BackgroundTasks, Request

from src.application.errors import InvalidFarmContext
from src.application.events.dispatcher import dispatch_events
from src.config.settings import Settings, get_settings
from src.domain.value_objects.farm_id import parse_farm_id
from src.infrastructure.db.session import SQLAlchemyUnitOfWork


@dataclass(slots=True, frozen=True)
class FarmContext:
    farm_id: UUID
    actor_user_id: UUID | None = None


def _settings_from(request: Request) -> Settings:
    return getattr(request.app.state, "settings", None) or get_settings()


async def get_farm_context(request: Request) -> FarmContext:
    settings = _settings_from(request)
    raw_farm = request.headers.get(settings.farm_header)
    if not raw_farm:
        raise InvalidFarmContext(f"Missing {settings.farm_header} header")
    try:
        farm_id = parse_farm_id(raw_farm.strip())
    except ValueError as exc:
        raise InvalidFarmContext(f"Invalid {settings.farm_header} header") from exc

    actor_user_id = None
    raw_actor = request.headers.get(settings.actor_header)
    if raw_actor:
        try:
            actor_user_id = UUID(raw_actor.strip())
        except ValueError as exc:
            raise InvalidFarmContext(f"Invalid {settings.actor_header} header") from exc
    return FarmContext(farm_id=farm_id, actor_user_id=actor_user_id)


async def get_uow(request: Request) -> AsyncIterator[SQLAlchemyUnitOfWork]:
    session_factory = getattr(request.app.state, "session_factory", None)
    if session_factory is None:
        raise RuntimeError("Session factory not configured")
    uow = SQLAlchemyUnitOfWork(session_factory)
    async with uow:
        yield uow


def get_app_settings(request: Request) -> Settings:
    return _settings_from(request)


def schedule_events(background_tasks: BackgroundTasks, uow: SQLAlchemyUnitOfWork) -> None:
    """Hand events collected by a committed unit of work to the post-response dispatcher."""
    events = uow.drain_events()
    if events:
        background_tasks.add_task(dispatch_events, events)
