"""Shared SQLAlchemy plumbing for the per-collection pet repositories."""

import logging
from abc import abstractmethod
from typing import Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import DBAPIError, IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from petbook.domain.exceptions import DuplicateEntityError, EntityNotFoundError, StorageError
from petbook.infrastructure.database.models import CatModel, DogModel

logger = logging.getLogger(__name__)

EntityT = TypeVar("EntityT")
ModelT = TypeVar("ModelT", CatModel, DogModel)


def _describe(exc: Exception) -> str:
    """Driver message without the SQL statement or bound parameters."""
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        return str(exc.orig)
    if isinstance(exc, OSError):
        return str(exc)
    return type(exc).__name__


class SQLAlchemyPetRepositoryBase(Generic[EntityT, ModelT]):
    """create / find_all / find_by_name / update / commit over one ORM model.

    Database failures are rolled back and re-raised as domain exceptions so
    the request session stays usable for the error response. The full
    driver error is logged; the domain exception carries only a short
    description.
    """

    model_class: type[ModelT]
    entity_name: str

    def __init__(self, session: AsyncSession):
        self._session = session

    @abstractmethod
    def _to_entity(self, model: ModelT) -> EntityT:
        """Map ORM model → domain entity."""

    @abstractmethod
    def _to_model(self, entity: EntityT) -> ModelT:
        """Map domain entity → ORM model (for creation)."""

    @abstractmethod
    def _apply(self, model: ModelT, entity: EntityT) -> None:
        """Copy the mutable entity fields onto a loaded ORM model."""

    async def create(self, record: EntityT) -> EntityT:
        model = self._to_model(record)
        name = model.name
        self._session.add(model)
        try:
            await self._session.flush()
        except IntegrityError as exc:
            await self._session.rollback()
            if "unique" in str(exc.orig).lower():
                raise DuplicateEntityError(self.entity_name, "name", name) from exc
            logger.exception("Constraint violation creating %s '%s'", self.entity_name, name)
            raise StorageError("create", _describe(exc)) from exc
        except (SQLAlchemyError, OSError) as exc:
            await self._session.rollback()
            logger.exception("Failed to create %s '%s'", self.entity_name, name)
            raise StorageError("create", _describe(exc)) from exc
        return self._to_entity(model)

    async def find_all(self) -> list[EntityT]:
        stmt = select(self.model_class).order_by(self.model_class.id)
        try:
            result = await self._session.execute(stmt)
        except (SQLAlchemyError, OSError) as exc:
            logger.exception("Failed to list %s records", self.entity_name)
            raise StorageError("find_all", _describe(exc)) from exc
        return [self._to_entity(row) for row in result.scalars().all()]

    async def find_by_name(self, name: str) -> EntityT | None:
        stmt = (
            select(self.model_class)
            .where(self.model_class.name == name)
            .order_by(self.model_class.id)
            .limit(1)
        )
        try:
            result = await self._session.execute(stmt)
        except (SQLAlchemyError, OSError) as exc:
            logger.exception("Failed to look up %s '%s'", self.entity_name, name)
            raise StorageError("find_by_name", _describe(exc)) from exc
        model = result.scalars().first()
        return self._to_entity(model) if model else None

    async def update(self, record: EntityT) -> EntityT:
        record_id = getattr(record, "id")
        try:
            model = await self._session.get(self.model_class, record_id)
            if model is None:
                raise EntityNotFoundError(self.entity_name, record_id)
            self._apply(model, record)
            await self._session.flush()
        except (SQLAlchemyError, OSError) as exc:
            await self._session.rollback()
            logger.exception("Failed to update %s %s", self.entity_name, record_id)
            raise StorageError("update", _describe(exc)) from exc
        return self._to_entity(model)

    async def commit(self) -> None:
        try:
            await self._session.commit()
        except (SQLAlchemyError, OSError) as exc:
            await self._session.rollback()
            logger.exception("Failed to commit %s changes", self.entity_name)
            raise StorageError("commit", _describe(exc)) from exc
