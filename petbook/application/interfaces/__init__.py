from .pet_repository import CatRepository, DogRepository, PetRepository

__all__ = [
    "CatRepository",
    "DogRepository",
    "PetRepository",
]
