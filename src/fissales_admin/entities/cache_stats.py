"""Cache statistics domain entity."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class CacheStatsEntity:
    """Snapshot of a prompt cache.

    Attributes:
        size: Number of entries
        keys: Names of all cached prompts
        last_accessed: Mapping of name to last access time
        hit_rate: hits / (hits + misses), or None before the first lookup
    """

    size: int
    keys: list[str] = field(default_factory=list)
    last_accessed: dict[str, Any] = field(default_factory=dict)
    hit_rate: float | None = None
