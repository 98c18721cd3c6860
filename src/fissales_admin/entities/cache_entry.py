"""Cache entry domain entity."""

from dataclasses import dataclass

from .prompt_record import PromptRecord


@dataclass
class CacheEntryEntity:
    """A cached prompt record plus its last access time.

    Attributes:
        record: The cached prompt, always tagged ``loaded_from="cache"``
        last_accessed: Unix timestamp of the last get or set
    """

    record: PromptRecord
    last_accessed: float

    @property
    def key(self) -> str:
        return self.record.name
