from __future__ import annotations

from datetime import date
from uuid import UUID

from sqlalchemy import func, or_, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import ConflictError, NotFound, PersistenceError
from src.application.interfaces.repositories.animals import AnimalRepository
from src.domain.models.animal import Animal
from src.domain.value_objects.animal_category import AnimalCategory
from src.infrastructure.db.orm.animal import AnimalORM


class AnimalsSQLAlchemyRepository(AnimalRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: AnimalORM) -> Animal:
        return Animal(
            id=orm.id,
            farm_id=orm.farm_id,
            identification=orm.identification,
            breed=orm.breed,
            birth_date=orm.birth_date,
            sex=orm.sex,
            health_status=orm.health_status,
            category=orm.category,
            reproductive_status=orm.reproductive_status,
            mother_id=orm.mother_id,
            sire_info=orm.sire_info,
            current_pen_id=orm.current_pen_id,
            birth_weight=orm.birth_weight,
            entry_date=orm.entry_date,
            exit_date=orm.exit_date,
            exit_reason=orm.exit_reason,
            acquisition_origin=orm.acquisition_origin,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
            version=orm.version,
        )

    async def add(self, animal: Animal) -> Animal:
        orm = AnimalORM(
            id=animal.id,
            farm_id=animal.farm_id,
            identification=animal.identification,
            breed=animal.breed,
            birth_date=animal.birth_date,
            sex=animal.sex,
            health_status=animal.health_status,
            category=animal.category,
            reproductive_status=animal.reproductive_status,
            mother_id=animal.mother_id,
            sire_info=animal.sire_info,
            current_pen_id=animal.current_pen_id,
            birth_weight=animal.birth_weight,
            entry_date=animal.entry_date,
            exit_date=animal.exit_date,
            exit_reason=animal.exit_reason,
            acquisition_origin=animal.acquisition_origin,
            created_at=animal.created_at,
            updated_at=animal.updated_at,
            version=animal.version,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("Animal identification already exists") from exc
        return self._to_domain(orm)

    async def get(self, farm_id: UUID, animal_id: UUID) -> Animal | None:
        stmt = (
            select(AnimalORM)
            .where(AnimalORM.farm_id == farm_id)
            .where(AnimalORM.id == animal_id)
        )
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def get_by_id(self, animal_id: UUID) -> Animal | None:
        orm = await self.session.get(AnimalORM, animal_id)
        return self._to_domain(orm) if orm else None

    async def exists_by_identification(self, identification: str) -> bool:
        stmt = select(func.count(AnimalORM.id)).where(
            AnimalORM.identification == identification
        )
        result = await self.session.execute(stmt)
        return (result.scalar() or 0) > 0

    async def list(
        self,
        farm_id: UUID,
        *,
        category: str | None = None,
        reproductive_status: str | None = None,
        pen_id: UUID | None = None,
        search: str | None = None,
    ) -> list[Animal]:
        stmt = select(AnimalORM).where(AnimalORM.farm_id == farm_id)
        if category is not None:
            stmt = stmt.where(AnimalORM.category == category)
        if reproductive_status is not None:
            stmt = stmt.where(AnimalORM.reproductive_status == reproductive_status)
        if pen_id is not None:
            stmt = stmt.where(AnimalORM.current_pen_id == pen_id)
        if search:
            pattern = f"%{search.strip().lower()}%"
            stmt = stmt.where(
                or_(
                    func.lower(AnimalORM.identification).like(pattern),
                    func.lower(AnimalORM.breed).like(pattern),
                )
            )
        stmt = stmt.order_by(AnimalORM.identification)
        result = await self.session.execute(stmt)
        return [self._to_domain(item) for item in result.scalars().all()]

    async def update(
        self,
        farm_id: UUID,
        animal_id: UUID,
        data: dict,
        expected_version: int,
    ) -> Animal | None:
        values = {**data, "version": expected_version + 1, "updated_at": func.now()}
        stmt = (
            update(AnimalORM)
            .where(AnimalORM.farm_id == farm_id, AnimalORM.id == animal_id)
            .where(AnimalORM.version == expected_version)
            .values(**values)
            .returning(AnimalORM)
        )
        try:
            result = await self.session.execute(stmt)
        except IntegrityError as exc:
            raise ConflictError("Failed to update animal due to constraint violation") from exc
        orm = result.scalar_one_or_none()
        if not orm:
            return None
        return self._to_domain(orm)

    async def _set_fields(self, animal_id: UUID, **values) -> None:
        stmt = (
            update(AnimalORM)
            .where(AnimalORM.id == animal_id)
            .values(**values, version=AnimalORM.version + 1, updated_at=func.now())
            .returning(AnimalORM.id)
        )
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as exc:
            raise PersistenceError("Failed to update animal") from exc
        if result.scalar_one_or_none() is None:
            raise NotFound("Animal not found")

    async def set_reproductive_status(self, animal_id: UUID, status: str | None) -> None:
        await self._set_fields(animal_id, reproductive_status=status)

    async def set_current_pen(self, animal_id: UUID, pen_id: UUID | None) -> None:
        await self._set_fields(animal_id, current_pen_id=pen_id)

    async def set_category(self, animal_id: UUID, category: str) -> None:
        await self._set_fields(animal_id, category=category)

    async def list_female_calves_born_on_or_before(
        self, cutoff: date, *, farm_id: UUID | None = None
    ) -> list[Animal]:
        stmt = (
            select(AnimalORM)
            .where(AnimalORM.category == AnimalCategory.FEMALE_CALF.value)
            .where(AnimalORM.birth_date.is_not(None))
            .where(AnimalORM.birth_date <= cutoff)
        )
        if farm_id is not None:
            stmt = stmt.where(AnimalORM.farm_id == farm_id)
        stmt = stmt.order_by(AnimalORM.birth_date)
        result = await self.session.execute(stmt)
        return [self._to_domain(item) for item in result.scalars().all()]
