"""Concrete repository implementation for Dog backed by SQLAlchemy."""

from petbook.application.interfaces import DogRepository
from petbook.domain.entities import Dog
from petbook.infrastructure.database.models import DogModel
from petbook.infrastructure.database.repositories.pet_repository_base import (
    SQLAlchemyPetRepositoryBase,
)


class SQLAlchemyDogRepository(SQLAlchemyPetRepositoryBase[Dog, DogModel], DogRepository):
    """Implements the DogRepository port using SQLAlchemy async sessions."""

    model_class = DogModel
    entity_name = "Dog"

    def _to_entity(self, model: DogModel) -> Dog:
        return Dog(
            id=model.id,
            name=model.name,
            breed=model.breed,
            age=model.age,
            created_date=model.created_date,
        )

    def _to_model(self, entity: Dog) -> DogModel:
        return DogModel(
            name=entity.name,
            breed=entity.breed,
            age=entity.age,
            created_date=entity.created_date,
        )

    def _apply(self, model: DogModel, entity: Dog) -> None:
        model.age = entity.age
