"""Prompt cache protocol.

Defines the interface for a local, keyed prompt cache that tracks
aggregate hit/miss counts. Every operation is infallible: absence is a
normal return value, not an error.
"""

from typing import Protocol, runtime_checkable

from fissales_admin.entities import CacheStatsEntity, PromptRecord


@runtime_checkable
class PromptCacheStore(Protocol):
    """Protocol for local prompt caches."""

    def get(self, name: str) -> PromptRecord | None:
        """Look up a prompt, counting a hit or a miss.

        Args:
            name: The prompt name

        Returns:
            A copy tagged ``loaded_from="cache"``, or None on a miss
        """
        ...

    def set(self, name: str, record: PromptRecord) -> None:
        """Insert or replace the entry for a prompt.

        Args:
            name: The prompt name
            record: The record to store
        """
        ...

    def delete(self, name: str) -> bool:
        """Remove the entry for a prompt.

        Args:
            name: The prompt name

        Returns:
            True if an entry was removed, False otherwise
        """
        ...

    def clear(self) -> None:
        """Remove all entries and reset the hit/miss counters."""
        ...

    def stats(self) -> CacheStatsEntity:
        """Get a snapshot of the cache.

        Returns:
            Size, keys, per-key last access and hit rate
        """
        ...
