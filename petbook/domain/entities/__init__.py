"""Domain entities — pure Python business objects, no framework dependencies."""

from .cat import Cat
from .dog import Dog

PetRecord = Cat | Dog

__all__ = [
    "Cat",
    "Dog",
    "PetRecord",
]
