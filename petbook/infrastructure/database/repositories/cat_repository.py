"""Concrete repository implementation for Cat backed by SQLAlchemy."""

from petbook.application.interfaces import CatRepository
from petbook.domain.entities import Cat
from petbook.infrastructure.database.models import CatModel
from petbook.infrastructure.database.repositories.pet_repository_base import (
    SQLAlchemyPetRepositoryBase,
)


class SQLAlchemyCatRepository(SQLAlchemyPetRepositoryBase[Cat, CatModel], CatRepository):
    """Implements the CatRepository port using SQLAlchemy async sessions."""

    model_class = CatModel
    entity_name = "Cat"

    def _to_entity(self, model: CatModel) -> Cat:
        return Cat(
            id=model.id,
            name=model.name,
            beds_owned=model.beds_owned,
            created_date=model.created_date,
        )

    def _to_model(self, entity: Cat) -> CatModel:
        return CatModel(
            name=entity.name,
            beds_owned=entity.beds_owned,
            created_date=entity.created_date,
        )

    def _apply(self, model: CatModel, entity: Cat) -> None:
        model.beds_owned = entity.beds_owned
