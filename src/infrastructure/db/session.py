from __future__ import annotations

from collections.abc import Callable

from sqlalchemy import event
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from src.application.errors import PersistenceError
from src.application.interfaces.unit_of_work import UnitOfWork

_REPO_ATTRS = (
    "animals",
    "pens",
    "pen_movements",
    "estrus",
    "breedings",
    "iatf_protocols",
    "pregnancy_diagnoses",
    "pregnancies",
    "calvings",
    "offspring",
    "lactations",
    "dry_offs",
)


def _enable_sqlite_savepoints(engine: AsyncEngine) -> None:
    # pysqlite's own transaction handling breaks SAVEPOINT; emit BEGIN ourselves
    @event.listens_for(engine.sync_engine, "connect")
    def _on_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine.sync_engine, "begin")
    def _on_begin(conn):
        conn.exec_driver_sql("BEGIN")


def create_engine(database_url: str) -> AsyncEngine:
    engine = create_async_engine(database_url, echo=False, future=True)
    if engine.dialect.name == "sqlite":
        _enable_sqlite_savepoints(engine)
    return engine


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False)


class SQLAlchemyUnitOfWork(UnitOfWork):
    def __init__(self, session_factory: Callable[[], AsyncSession]) -> None:
        self._session_factory = session_factory
        self.session: AsyncSession | None = None
        self.events: list = []
        self._clear_repos()

    def _clear_repos(self) -> None:
        for attr in _REPO_ATTRS:
            setattr(self, attr, None)

    def bind(self, session: AsyncSession) -> None:
        """Wire every repository onto ``session``."""
        from src.infrastructure.repos.animals_sqlalchemy import AnimalsSQLAlchemyRepository
        from src.infrastructure.repos.breedings_sqlalchemy import BreedingsSQLAlchemyRepository
        from src.infrastructure.repos.calvings_sqlalchemy import CalvingsSQLAlchemyRepository
        from src.infrastructure.repos.dry_offs_sqlalchemy import DryOffsSQLAlchemyRepository
        from src.infrastructure.repos.estrus_sqlalchemy import EstrusSQLAlchemyRepository
        from src.infrastructure.repos.iatf_protocols_sqlalchemy import (
            IatfProtocolsSQLAlchemyRepository,
        )
        from src.infrastructure.repos.lactations_sqlalchemy import LactationsSQLAlchemyRepository
        from src.infrastructure.repos.offspring_sqlalchemy import OffspringSQLAlchemyRepository
        from src.infrastructure.repos.pen_movements_sqlalchemy import (
            PenMovementsSQLAlchemyRepository,
        )
        from src.infrastructure.repos.pens_sqlalchemy import PensSQLAlchemyRepository
        from src.infrastructure.repos.pregnancies_sqlalchemy import (
            PregnanciesSQLAlchemyRepository,
            PregnancyDiagnosesSQLAlchemyRepository,
        )

        self.session = session
        self.animals = AnimalsSQLAlchemyRepository(session)
        self.pens = PensSQLAlchemyRepository(session)
        self.pen_movements = PenMovementsSQLAlchemyRepository(session)
        self.estrus = EstrusSQLAlchemyRepository(session)
        self.breedings = BreedingsSQLAlchemyRepository(session)
        self.iatf_protocols = IatfProtocolsSQLAlchemyRepository(session)
        self.pregnancy_diagnoses = PregnancyDiagnosesSQLAlchemyRepository(session)
        self.pregnancies = PregnanciesSQLAlchemyRepository(session)
        self.calvings = CalvingsSQLAlchemyRepository(session)
        self.offspring = OffspringSQLAlchemyRepository(session)
        self.lactations = LactationsSQLAlchemyRepository(session)
        self.dry_offs = DryOffsSQLAlchemyRepository(session)

    async def __aenter__(self) -> UnitOfWork:
        self.bind(self._session_factory())
        self.events = []
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if not self.session:
            return
        try:
            if exc:
                await self.session.rollback()
        finally:
            await self.session.close()
            self.session = None
            self._clear_repos()

    async def commit(self) -> None:
        if not self.session:
            return
        try:
            await self.session.commit()
        except SQLAlchemyError as exc:
            await self.session.rollback()
            raise PersistenceError("Failed to commit transaction") from exc

    async def rollback(self) -> None:
        if not self.session:
            return
        await self.session.rollback()

    def savepoint(self):
        if not self.session:
            raise PersistenceError("Unit of work is not active")
        return self.session.begin_nested()

    def add_event(self, event: object) -> None:
        self.events.append(event)

    def drain_events(self) -> list:
        drained = list(self.events)
        self.events.clear()
        return drained
