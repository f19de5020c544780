"""Application service (use case) for the Cat and Dog collections."""

import logging
from dataclasses import replace

from petbook.application.interfaces import CatRepository, DogRepository
from petbook.application.schemas import CatCreate, DogCreate
from petbook.application.services.record_cache import RecordCache
from petbook.domain.entities import Cat, Dog, PetRecord
from petbook.domain.exceptions import EntityNotFoundError, ValidationError

logger = logging.getLogger(__name__)


class PetService:
    """Orchestrates pet persistence and the last-added record cache.

    Depends on the repository ports (DI) and the process-wide RecordCache.
    The cache only moves after the store has committed a write.
    """

    def __init__(
        self,
        cat_repository: CatRepository,
        dog_repository: DogRepository,
        record_cache: RecordCache,
    ):
        self._cats = cat_repository
        self._dogs = dog_repository
        self._cache = record_cache

    @property
    def last_added(self) -> PetRecord:
        return self._cache.get()

    async def list_cats(self) -> list[Cat]:
        return await self._cats.find_all()

    async def list_dogs(self) -> list[Dog]:
        return await self._dogs.find_all()

    async def create_pet(self, data: CatCreate | DogCreate) -> PetRecord:
        """Persist a new cat or dog and make it the last added record."""
        created: PetRecord
        if isinstance(data, CatCreate):
            created = await self._cats.create(Cat(name=data.name, beds_owned=data.beds))
            await self._cats.commit()
        else:
            created = await self._dogs.create(
                Dog(name=data.name, breed=data.breed, age=data.age)
            )
            await self._dogs.commit()
        logger.info("Created %s '%s'", created.kind, created.name)
        self._cache.set(created)
        return created

    async def find_cat(self, name: str) -> Cat:
        cat = await self._cats.find_by_name(name)
        if cat is None:
            raise EntityNotFoundError("Cat", name)
        return cat

    async def find_and_age_dog(self, name: str) -> Dog:
        """Look a dog up by name, then age it by one year.

        The lookup itself is the trigger: every successful search persists
        the incremented age and makes the dog the last added record.
        """
        dog = await self._dogs.find_by_name(name)
        if dog is None:
            raise EntityNotFoundError("Dog", name)
        dog.birthday()
        updated = await self._dogs.update(dog)
        await self._dogs.commit()
        self._cache.set(updated)
        return updated

    async def update_last(self) -> Cat:
        """Give the last added cat one more bed and persist it.

        The startup placeholder has never been saved; the first update
        creates it, or adopts a stored cat of the same name.
        """
        last = self._cache.get()
        if not isinstance(last, Cat):
            raise ValidationError(
                "The last added record is not a cat",
                [f"last added record is a {last.kind}"],
            )

        if last.id is None:
            stored = await self._cats.find_by_name(last.name)
            cat = replace(stored or last)
        else:
            cat = replace(last)
        cat.add_bed()

        if cat.id is None:
            saved = await self._cats.create(cat)
        else:
            saved = await self._cats.update(cat)
        await self._cats.commit()
        logger.info("Cat '%s' now owns %d beds", saved.name, saved.beds_owned)
        self._cache.set(saved)
        return saved
