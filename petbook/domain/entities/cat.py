"""Domain entity for a cat and the number of beds it owns."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class Cat:
    """Core domain entity stored in the ``cats`` collection."""

    name: str
    beds_owned: int
    id: int | None = None
    created_date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    kind = "cat"

    def add_bed(self) -> None:
        """Give the cat one more bed."""
        self.beds_owned += 1
