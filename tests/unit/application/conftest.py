from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from dataclasses import replace
from datetime import date
from uuid import UUID, uuid4

import pytest

from src.application.errors import ConflictError, NotFound, PersistenceError
from src.domain.models.animal import Animal
from src.domain.models.pen import Pen


class InMemoryAnimals:
    def __init__(self) -> None:
        self.items: dict[UUID, Animal] = {}
        self.failing_ids: set[UUID] = set()

    async def add(self, animal: Animal) -> Animal:
        if any(a.identification == animal.identification for a in self.items.values()):
            raise ConflictError("Animal identification already exists")
        self.items[animal.id] = animal
        return animal

    async def get(self, farm_id, animal_id):
        animal = self.items.get(animal_id)
        return animal if animal and animal.farm_id == farm_id else None

    async def get_by_id(self, animal_id):
        return self.items.get(animal_id)

    async def exists_by_identification(self, identification):
        return any(a.identification == identification for a in self.items.values())

    async def list(
        self, farm_id, *, category=None, reproductive_status=None, pen_id=None, search=None
    ):
        return [
            a
            for a in self.items.values()
            if a.farm_id == farm_id
            and (category is None or a.category == category)
            and (reproductive_status is None or a.reproductive_status == reproductive_status)
            and (pen_id is None or a.current_pen_id == pen_id)
        ]

    async def update(self, farm_id, animal_id, data, expected_version):
        animal = await self.get(farm_id, animal_id)
        if not animal or animal.version != expected_version:
            return None
        updated = replace(animal, **data, version=expected_version + 1)
        self.items[animal_id] = updated
        return updated

    def _set(self, animal_id, **values) -> None:
        if animal_id in self.failing_ids:
            raise PersistenceError("Failed to update animal")
        if animal_id not in self.items:
            raise NotFound("Animal not found")
        animal = self.items[animal_id]
        self.items[animal_id] = replace(animal, **values, version=animal.version + 1)

    async def set_reproductive_status(self, animal_id, status):
        self._set(animal_id, reproductive_status=status)

    async def set_current_pen(self, animal_id, pen_id):
        self._set(animal_id, current_pen_id=pen_id)

    async def set_category(self, animal_id, category):
        self._set(animal_id, category=category)

    async def list_female_calves_born_on_or_before(self, cutoff: date, *, farm_id=None):
        return [
            a
            for a in self.items.values()
            if a.category == "FEMALE_CALF"
            and a.birth_date is not None
            and a.birth_date <= cutoff
            and (farm_id is None or a.farm_id == farm_id)
        ]


class InMemoryPens:
    def __init__(self) -> None:
        self.items: dict[UUID, Pen] = {}

    async def add(self, pen):
        self.items[pen.id] = pen
        return pen

    async def get(self, farm_id, pen_id):
        pen = self.items.get(pen_id)
        return pen if pen and pen.farm_id == farm_id else None

    async def get_by_id(self, pen_id):
        return self.items.get(pen_id)

    async def find_by_name(self, farm_id, name):
        for pen in self.items.values():
            if pen.farm_id == farm_id and pen.name.lower() == name.lower():
                return pen
        return None

    async def list_for_farm(self, farm_id, *, active=None):
        return [
            p
            for p in self.items.values()
            if p.farm_id == farm_id and (active is None or p.active == active)
        ]

    async def update(self, farm_id, pen_id, data):
        pen = await self.get(farm_id, pen_id)
        if not pen:
            return None
        updated = replace(pen, **data)
        self.items[pen_id] = updated
        return updated


class InMemoryRecords:
    """Farm-scoped store for append-mostly lifecycle records."""

    def __init__(self) -> None:
        self.items: dict[UUID, object] = {}

    async def add(self, record):
        self.items[record.id] = record
        return record

    async def get(self, farm_id, record_id):
        record = self.items.get(record_id)
        return record if record and record.farm_id == farm_id else None

    async def update(self, record):
        self.items[record.id] = record
        return record

    async def list(self, farm_id, *, animal_id=None, status=None, active=None):
        return [
            r
            for r in self.items.values()
            if r.farm_id == farm_id
            and (animal_id is None or r.animal_id == animal_id)
            and (status is None or r.status == status)
            and (active is None or r.active == active)
        ]

    async def list_by_animal(self, farm_id, animal_id):
        return await self.list(farm_id, animal_id=animal_id)


class InMemoryOffspring:
    def __init__(self) -> None:
        self.items: dict[UUID, object] = {}

    async def add(self, offspring):
        self.items[offspring.id] = offspring
        return offspring

    async def update(self, offspring):
        self.items[offspring.id] = offspring
        return offspring

    async def count_by_calving(self, calving_id):
        return sum(1 for o in self.items.values() if o.calving_id == calving_id)

    async def list_by_calving(self, calving_id):
        return [o for o in self.items.values() if o.calving_id == calving_id]


class InMemoryLactations(InMemoryRecords):
    """Enforces one lactation per (animal, number), like the database index."""

    async def add(self, lactation):
        for existing in self.items.values():
            if (existing.animal_id, existing.number) == (lactation.animal_id, lactation.number):
                raise ConflictError("Lactation number already taken for animal")
        return await super().add(lactation)

    async def count_by_animal(self, animal_id):
        count = sum(1 for lac in self.items.values() if lac.animal_id == animal_id)
        # Let a concurrent calving read the same count before either inserts
        await asyncio.sleep(0)
        return count


class InMemoryUnitOfWork:
    def __init__(self) -> None:
        self.animals = InMemoryAnimals()
        self.pens = InMemoryPens()
        self.pen_movements = InMemoryRecords()
        self.estrus = InMemoryRecords()
        self.breedings = InMemoryRecords()
        self.iatf_protocols = InMemoryRecords()
        self.pregnancy_diagnoses = InMemoryRecords()
        self.pregnancies = InMemoryRecords()
        self.calvings = InMemoryRecords()
        self.offspring = InMemoryOffspring()
        self.lactations = InMemoryLactations()
        self.dry_offs = InMemoryRecords()
        self.events: list = []
        self.commits = 0

    async def commit(self) -> None:
        self.commits += 1

    async def rollback(self) -> None:
        return None

    @asynccontextmanager
    async def savepoint(self):
        yield self

    def add_event(self, event) -> None:
        self.events.append(event)

    def drain_events(self) -> list:
        drained, self.events = self.events, []
        return drained


@pytest.fixture()
def uow() -> InMemoryUnitOfWork:
    return InMemoryUnitOfWork()


@pytest.fixture()
def farm_id() -> UUID:
    return uuid4()


@pytest.fixture()
def make_animal(uow, farm_id):
    async def _make(
        identification: str | None = None,
        *,
        sex: str = "F",
        category: str | None = "COW",
        birth_date: date | None = date(2020, 1, 1),
        farm: UUID | None = None,
    ) -> Animal:
        animal = Animal.create(
            farm_id=farm or farm_id,
            identification=identification or f"A-{uuid4().hex[:8]}",
            birth_date=birth_date,
            sex=sex,
            category=category,
            health_status="HEALTHY",
            acquisition_origin="BORN",
        )
        return await uow.animals.add(animal)

    return _make


@pytest.fixture()
def make_pen(uow, farm_id):
    async def _make(name: str = "Pen 1", *, farm: UUID | None = None) -> Pen:
        return await uow.pens.add(Pen.create(farm_id=farm or farm_id, name=name))

    return _make
