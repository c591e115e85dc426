from __future__ import annotations

from typing import AsyncContextManager, Protocol

from src.application.interfaces.repositories.animals import AnimalRepository
from src.application.interfaces.repositories.breedings import (
    BreedingsRepository,
    EstrusRepository,
    IatfProtocolsRepository,
)
from src.application.interfaces.repositories.calvings import (
    CalvingsRepository,
    DryOffsRepository,
    OffspringRepository,
)
from src.application.interfaces.repositories.lactations import LactationsRepository
from src.application.interfaces.repositories.pen_movements import PenMovementsRepository
from src.application.interfaces.repositories.pregnancies import (
    PregnanciesRepository,
    PregnancyDiagnosesRepository,
)
from src.domain.ports.pens_repo import PensRepo


class UnitOfWork(Protocol):
    animals: AnimalRepository
    pens: PensRepo
    pen_movements: PenMovementsRepository
    estrus: EstrusRepository
    breedings: BreedingsRepository
    iatf_protocols: IatfProtocolsRepository
    pregnancy_diagnoses: PregnancyDiagnosesRepository
    pregnancies: PregnanciesRepository
    calvings: CalvingsRepository
    offspring: OffspringRepository
    lactations: LactationsRepository
    dry_offs: DryOffsRepository
    # Domain events collected during the transaction
    events: list

    async def __aenter__(self) -> UnitOfWork: ...

    async def __aexit__(self, exc_type, exc, tb) -> None: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...

    # Nested transaction; a failure inside it leaves the outer one usable
    def savepoint(self) -> AsyncContextManager: ...

    # Record a domain event during the transaction
    def add_event(self, event: object) -> None: ...

    # Drain collected events (used for post-commit dispatch)
    def drain_events(self) -> list: ...
