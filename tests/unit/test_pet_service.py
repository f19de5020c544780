"""Unit tests for the PetService."""

from dataclasses import replace

import pytest

from petbook.application.interfaces import CatRepository, DogRepository
from petbook.application.schemas import CatCreate, DogCreate
from petbook.application.services import PetService, RecordCache
from petbook.domain.entities import Cat, Dog
from petbook.domain.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    StorageError,
    ValidationError,
)


# ── Fake Repositories ────────────────────────────────────────────────

class FakeCatRepository(CatRepository):
    """In-memory fake cat repository for unit testing."""

    def __init__(self):
        self._cats: dict[int, Cat] = {}
        self._next_id = 1
        self.commit_error: StorageError | None = None

    async def create(self, record: Cat) -> Cat:
        if any(c.name == record.name for c in self._cats.values()):
            raise DuplicateEntityError("Cat", "name", record.name)
        stored = replace(record, id=self._next_id)
        self._next_id += 1
        self._cats[stored.id] = stored
        return replace(stored)

    async def find_all(self) -> list[Cat]:
        return [replace(c) for c in self._cats.values()]

    async def find_by_name(self, name: str) -> Cat | None:
        for cat in self._cats.values():
            if cat.name == name:
                return replace(cat)
        return None

    async def update(self, record: Cat) -> Cat:
        if record.id not in self._cats:
            raise EntityNotFoundError("Cat", record.id)
        self._cats[record.id] = replace(record)
        return replace(record)

    async def commit(self) -> None:
        if self.commit_error is not None:
            raise self.commit_error


class FakeDogRepository(DogRepository):
    """In-memory fake dog repository for unit testing."""

    def __init__(self):
        self._dogs: dict[int, Dog] = {}
        self._next_id = 1
        self.commit_error: StorageError | None = None

    async def create(self, record: Dog) -> Dog:
        if any(d.name == record.name for d in self._dogs.values()):
            raise DuplicateEntityError("Dog", "name", record.name)
        stored = replace(record, id=self._next_id)
        self._next_id += 1
        self._dogs[stored.id] = stored
        return replace(stored)

    async def find_all(self) -> list[Dog]:
        return [replace(d) for d in self._dogs.values()]

    async def find_by_name(self, name: str) -> Dog | None:
        for dog in self._dogs.values():
            if dog.name == name:
                return replace(dog)
        return None

    async def update(self, record: Dog) -> Dog:
        if record.id not in self._dogs:
            raise EntityNotFoundError("Dog", record.id)
        self._dogs[record.id] = replace(record)
        return replace(record)

    async def commit(self) -> None:
        if self.commit_error is not None:
            raise self.commit_error


# ── Fixtures ─────────────────────────────────────────────────────────

@pytest.fixture
def cats() -> FakeCatRepository:
    return FakeCatRepository()


@pytest.fixture
def dogs() -> FakeDogRepository:
    return FakeDogRepository()


@pytest.fixture
def cache() -> RecordCache:
    return RecordCache()


@pytest.fixture
def service(cats, dogs, cache) -> PetService:
    return PetService(cat_repository=cats, dog_repository=dogs, record_cache=cache)


@pytest.mark.asyncio
async def test_create_cat_updates_cache(service: PetService, cache: RecordCache):
    cat = await service.create_pet(CatCreate(name="Tom", beds=2))
    assert cat.id is not None
    assert isinstance(cache.get(), Cat)
    assert cache.name == "Tom"


@pytest.mark.asyncio
async def test_create_dog_updates_cache(service: PetService, cache: RecordCache):
    dog = await service.create_pet(DogCreate(name="Rex", breed="Lab", age=3))
    assert isinstance(dog, Dog)
    assert cache.get() is dog


@pytest.mark.asyncio
async def test_duplicate_cat_leaves_cache_unchanged(service: PetService, cache: RecordCache):
    await service.create_pet(CatCreate(name="Tom", beds=2))
    await service.create_pet(DogCreate(name="Rex", breed="Lab", age=3))

    with pytest.raises(DuplicateEntityError):
        await service.create_pet(CatCreate(name="Tom", beds=5))

    assert cache.name == "Rex"


@pytest.mark.asyncio
async def test_list_cats_and_dogs(service: PetService):
    await service.create_pet(CatCreate(name="A", beds=0))
    await service.create_pet(CatCreate(name="B", beds=1))
    await service.create_pet(DogCreate(name="C", breed="Pug", age=1))
    assert [c.name for c in await service.list_cats()] == ["A", "B"]
    assert [d.name for d in await service.list_dogs()] == ["C"]


@pytest.mark.asyncio
async def test_find_cat_not_found(service: PetService):
    with pytest.raises(EntityNotFoundError):
        await service.find_cat("Nobody")


@pytest.mark.asyncio
async def test_find_cat_does_not_touch_cache(service: PetService, cache: RecordCache):
    await service.create_pet(CatCreate(name="Tom", beds=2))
    await service.create_pet(DogCreate(name="Rex", breed="Lab", age=3))
    found = await service.find_cat("Tom")
    assert found.beds_owned == 2
    assert cache.name == "Rex"


@pytest.mark.asyncio
async def test_find_dog_ages_and_persists(
    service: PetService, dogs: FakeDogRepository, cache: RecordCache
):
    await service.create_pet(DogCreate(name="Rex", breed="Lab", age=3))
    await service.create_pet(CatCreate(name="Tom", beds=2))

    found = await service.find_and_age_dog("Rex")

    assert found.age == 4
    stored = await dogs.find_by_name("Rex")
    assert stored is not None and stored.age == 4
    assert cache.name == "Rex"


@pytest.mark.asyncio
async def test_find_dog_not_found(service: PetService, cache: RecordCache):
    with pytest.raises(EntityNotFoundError):
        await service.find_and_age_dog("Nobody")
    assert cache.name == "unknown"


@pytest.mark.asyncio
async def test_update_last_twice_adds_two_beds(service: PetService, cats: FakeCatRepository):
    await service.create_pet(CatCreate(name="Tom", beds=2))
    await service.update_last()
    updated = await service.update_last()
    assert updated.beds_owned == 4
    stored = await cats.find_by_name("Tom")
    assert stored is not None and stored.beds_owned == 4


@pytest.mark.asyncio
async def test_update_last_saves_placeholder_on_first_call(
    service: PetService, cats: FakeCatRepository
):
    first = await service.update_last()
    second = await service.update_last()
    assert first.name == "unknown"
    assert first.beds_owned == 1
    assert second.beds_owned == 2
    assert len(await cats.find_all()) == 1


@pytest.mark.asyncio
async def test_update_last_adopts_stored_placeholder(
    service: PetService, cats: FakeCatRepository
):
    await cats.create(Cat(name="unknown", beds_owned=7))
    updated = await service.update_last()
    assert updated.beds_owned == 8
    assert len(await cats.find_all()) == 1


@pytest.mark.asyncio
async def test_update_last_rejects_dog(service: PetService, cache: RecordCache):
    dog = await service.create_pet(DogCreate(name="Rex", breed="Lab", age=3))
    with pytest.raises(ValidationError):
        await service.update_last()
    assert cache.get() is dog


@pytest.mark.asyncio
async def test_failed_commit_on_create_leaves_cache_unchanged(
    service: PetService, dogs: FakeDogRepository, cache: RecordCache
):
    await service.create_pet(CatCreate(name="Tom", beds=2))
    dogs.commit_error = StorageError("commit", "database is locked")

    with pytest.raises(StorageError):
        await service.create_pet(DogCreate(name="Ghost", breed="Lab", age=3))

    assert cache.name == "Tom"


@pytest.mark.asyncio
async def test_failed_commit_on_find_dog_leaves_cache_unchanged(
    service: PetService, dogs: FakeDogRepository, cache: RecordCache
):
    await service.create_pet(DogCreate(name="Rex", breed="Lab", age=3))
    await service.create_pet(CatCreate(name="Tom", beds=2))
    dogs.commit_error = StorageError("commit", "database is locked")

    with pytest.raises(StorageError):
        await service.find_and_age_dog("Rex")

    assert cache.name == "Tom"


@pytest.mark.asyncio
async def test_failed_commit_on_update_last_leaves_cache_unchanged(
    service: PetService, cats: FakeCatRepository, cache: RecordCache
):
    tom = await service.create_pet(CatCreate(name="Tom", beds=2))
    cats.commit_error = StorageError("commit", "database is locked")

    with pytest.raises(StorageError):
        await service.update_last()

    assert cache.get() is tom
    assert cache.get().beds_owned == 2
