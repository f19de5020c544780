from .cat import CatModel
from .dog import DogModel

__all__ = [
    "CatModel",
    "DogModel",
]
