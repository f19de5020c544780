"""Domain entity for a dog with its breed and age."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class Dog:
    """Core domain entity stored in the ``dogs`` collection."""

    name: str
    breed: str
    age: int
    id: int | None = None
    created_date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    kind = "dog"

    def birthday(self) -> None:
        """Age the dog by one year."""
        self.age += 1
