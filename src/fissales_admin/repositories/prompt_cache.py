"""In-memory implementation of PromptCacheStore.

A single key space mapping prompt names to records, with aggregate hit/miss
counters for observability. There is no eviction and no expiry: an entry
lives until it is deleted, the cache is cleared, or the owner goes away.
"""

import logging
import time
from collections.abc import Callable
from dataclasses import replace

from fissales_admin.entities import CacheEntryEntity, CacheStatsEntity, PromptRecord

logger = logging.getLogger(__name__)


class PromptCache:
    """Process-local prompt cache.

    This class satisfies the PromptCacheStore protocol through structural
    typing - no explicit inheritance needed.

    Every operation body is synchronous, so under asyncio no other task can
    interleave with it and the map needs no lock.

    Example:
        ```python
        cache = PromptCache()
        cache.set("greeting", PromptRecord(name="greeting", content="Hi", version=1))

        record = cache.get("greeting")
        print(record.loaded_from)  # "cache"
        print(cache.stats().hit_rate)  # 1.0
        ```
    """

    def __init__(self, clock: Callable[[], float] | None = None) -> None:
        """Initialize an empty cache.

        Args:
            clock: Returns the current Unix time. Defaults to time.time.
        """
        self._clock = clock or time.time
        self._entries: dict[str, CacheEntryEntity] = {}
        self._hits = 0
        self._misses = 0

    def get(self, name: str) -> PromptRecord | None:
        entry = self._entries.get(name)
        if entry is None:
            self._misses += 1
            logger.debug("Prompt cache miss: %s", name)
            return None

        entry.last_accessed = self._clock()
        self._hits += 1
        logger.debug("Prompt cache hit: %s", name)
        return entry.record.tagged("cache")

    def set(self, name: str, record: PromptRecord) -> None:
        # Entry key and record name must agree.
        stored = replace(record, name=name, loaded_from="cache")
        self._entries[name] = CacheEntryEntity(record=stored, last_accessed=self._clock())

    def delete(self, name: str) -> bool:
        return self._entries.pop(name, None) is not None

    def clear(self) -> None:
        """Remove all entries and reset the hit/miss counters."""
        self._entries.clear()
        self._hits = 0
        self._misses = 0
        logger.info("Local prompt cache cleared")

    def stats(self) -> CacheStatsEntity:
        """Compute a snapshot of the cache at call time."""
        lookups = self._hits + self._misses
        return CacheStatsEntity(
            size=len(self._entries),
            keys=list(self._entries),
            last_accessed={entry.key: entry.last_accessed for entry in self._entries.values()},
            hit_rate=self._hits / lookups if lookups else None,
        )

    @property
    def hits(self) -> int:
        return self._hits

    @property
    def misses(self) -> int:
        return self._misses

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._entries
