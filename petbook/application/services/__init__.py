from .pet_service import PetService
from .record_cache import RecordCache, get_record_cache

__all__ = [
    "PetService",
    "RecordCache",
    "get_record_cache",
]
