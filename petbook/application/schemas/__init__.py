from .pet import (
    CatCreate,
    CatResponse,
    DogCreate,
    DogResponse,
    ErrorResponse,
    NameResponse,
    PetCreate,
    parse_pet_create,
)

__all__ = [
    "CatCreate",
    "CatResponse",
    "DogCreate",
    "DogResponse",
    "ErrorResponse",
    "NameResponse",
    "PetCreate",
    "parse_pet_create",
]
