"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from petbook.application.services import PetService, RecordCache, get_record_cache
from petbook.infrastructure.database.repositories import (
    SQLAlchemyCatRepository,
    SQLAlchemyDogRepository,
)
from petbook.infrastructure.database.session import get_db_session


async def get_pet_service(
    session: AsyncSession = Depends(get_db_session),
    record_cache: RecordCache = Depends(get_record_cache),
) -> AsyncGenerator[PetService, None]:
    """Provides a PetService with both collection repositories and the record cache."""
    yield PetService(
        cat_repository=SQLAlchemyCatRepository(session),
        dog_repository=SQLAlchemyDogRepository(session),
        record_cache=record_cache,
    )
