"""Abstract repository interfaces (ports) for the Cat and Dog collections."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from petbook.domain.entities import Cat, Dog

RecordT = TypeVar("RecordT", Cat, Dog)


class PetRepository(ABC, Generic[RecordT]):
    """Port for one pet collection — implemented in the infrastructure layer."""

    @abstractmethod
    async def create(self, record: RecordT) -> RecordT:
        """Persist a new record and return it with the generated ID.

        Raises DuplicateEntityError when the name is already taken.
        """
        ...

    @abstractmethod
    async def find_all(self) -> list[RecordT]:
        """Retrieve every record in the collection, in store order."""
        ...

    @abstractmethod
    async def find_by_name(self, name: str) -> RecordT | None:
        """Retrieve the first record with exactly this name."""
        ...

    @abstractmethod
    async def update(self, record: RecordT) -> RecordT:
        """Persist changes to an existing record."""
        ...

    @abstractmethod
    async def commit(self) -> None:
        """Make pending writes durable.

        Raises StorageError when the store refuses them; nothing is kept then.
        """
        ...


class CatRepository(PetRepository[Cat]):
    """Port for cat persistence."""


class DogRepository(PetRepository[Dog]):
    """Port for dog persistence."""
