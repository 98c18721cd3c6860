"""Domain entities for internal representation.

These are pure dataclasses used internally by services and repositories.
They are NOT used for API contracts - use DTOs from the dto package for that.
"""

from .cache_entry import CacheEntryEntity
from .cache_stats import CacheStatsEntity
from .prompt_record import LoadedFrom, PromptRecord
from .results import PromptListResult, SavedPromptEntity

__all__ = [
    "CacheEntryEntity",
    "CacheStatsEntity",
    "LoadedFrom",
    "PromptListResult",
    "PromptRecord",
    "SavedPromptEntity",
]
