"""Process-local pointer to the most recently created or updated pet."""

import logging
from functools import lru_cache

from petbook.domain.entities import Cat, PetRecord

logger = logging.getLogger(__name__)

PLACEHOLDER_NAME = "unknown"


def _placeholder() -> Cat:
    return Cat(name=PLACEHOLDER_NAME, beds_owned=0)


class RecordCache:
    """Holds the last created or updated record of either kind.

    Lives on the event loop thread only, so there is no lock: concurrent
    requests race and the last ``set`` wins. Nothing here is persisted.
    """

    def __init__(self) -> None:
        self._record: PetRecord = _placeholder()

    def get(self) -> PetRecord:
        return self._record

    def set(self, record: PetRecord) -> None:
        self._record = record
        logger.debug("Last added record is now %s '%s'", record.kind, record.name)

    def reset(self) -> None:
        """Drop the current record and go back to the unsaved placeholder cat."""
        self._record = _placeholder()

    @property
    def name(self) -> str:
        return self._record.name


@lru_cache
def get_record_cache() -> RecordCache:
    """Process-wide RecordCache instance."""
    return RecordCache()
