"""Pydantic DTOs (Data Transfer Objects) for the Cat and Dog features."""

from collections.abc import Mapping
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, model_validator
from pydantic import ValidationError as PydanticValidationError

from petbook.domain.entities import Cat, Dog
from petbook.domain.exceptions import ValidationError

CAT_REQUIRED_MESSAGE = "firstname,lastname and beds are all required"
DOG_REQUIRED_MESSAGE = "name, breed and age are all required"
KIND_REQUIRED_MESSAGE = "A beds field (cat) or an age field (dog) is required"


class CatCreate(BaseModel):
    """Schema for creating a new cat.

    The page form posts ``firstname`` and ``lastname``; they are joined into
    ``name`` when no explicit name is given.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    kind: Literal["cat"] = "cat"
    name: str = Field(..., min_length=1, examples=["Mister Whiskers"])
    beds: int = Field(..., ge=0, examples=[2])

    @model_validator(mode="before")
    @classmethod
    def _join_first_and_last_name(cls, data: Any) -> Any:
        if not isinstance(data, dict) or data.get("name"):
            return data
        first = str(data.get("firstname") or "").strip()
        last = str(data.get("lastname") or "").strip()
        if first and last:
            return {**data, "name": f"{first} {last}"}
        return data


class DogCreate(BaseModel):
    """Schema for creating a new dog."""

    model_config = ConfigDict(str_strip_whitespace=True)

    kind: Literal["dog"] = "dog"
    name: str = Field(..., min_length=1, examples=["Rex"])
    breed: str = Field(..., min_length=1, examples=["Lab"])
    age: int = Field(..., ge=0, examples=[3])


PetCreate = Annotated[CatCreate | DogCreate, Field(discriminator="kind")]

_pet_create_adapter: TypeAdapter[CatCreate | DogCreate] = TypeAdapter(PetCreate)


def infer_kind(fields: Mapping[str, Any]) -> str | None:
    """Derive the record kind from the body fields of an untagged request."""
    if "beds" in fields:
        return "cat"
    if "age" in fields:
        return "dog"
    return None


def parse_pet_create(fields: Mapping[str, Any]) -> CatCreate | DogCreate:
    """Turn raw request fields into a tagged create request.

    Empty values count as missing. Raises the domain ValidationError with one
    entry per violated constraint.
    """
    data = {key: value for key, value in fields.items() if value is not None and value != ""}

    kind = str(data.get("kind") or infer_kind(data) or "").strip().lower()
    if not kind:
        raise ValidationError(KIND_REQUIRED_MESSAGE, [KIND_REQUIRED_MESSAGE])
    if kind not in ("cat", "dog"):
        message = f"Unknown record kind '{kind}'"
        raise ValidationError(message, [message])
    data["kind"] = kind

    try:
        return _pet_create_adapter.validate_python(data)
    except PydanticValidationError as exc:
        errors = [
            f"{'.'.join(str(part) for part in err['loc'][1:]) or kind}: {err['msg']}"
            for err in exc.errors()
        ]
        if any(err["type"] == "missing" for err in exc.errors()):
            message = CAT_REQUIRED_MESSAGE if kind == "cat" else DOG_REQUIRED_MESSAGE
        else:
            message = "; ".join(errors)
        raise ValidationError(message, errors) from exc


class CatResponse(BaseModel):
    """Key fields of a cat returned to the client."""

    name: str
    beds: int

    @classmethod
    def from_entity(cls, cat: Cat) -> "CatResponse":
        return cls(name=cat.name, beds=cat.beds_owned)


class DogResponse(BaseModel):
    """Key fields of a dog returned to the client."""

    name: str
    breed: str
    age: int

    @classmethod
    def from_entity(cls, dog: Dog) -> "DogResponse":
        return cls(name=dog.name, breed=dog.breed, age=dog.age)


class NameResponse(BaseModel):
    name: str


class ErrorResponse(BaseModel):
    error: str
