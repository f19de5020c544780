from .cat_repository import SQLAlchemyCatRepository
from .dog_repository import SQLAlchemyDogRepository

__all__ = [
    "SQLAlchemyCatRepository",
    "SQLAlchemyDogRepository",
]
