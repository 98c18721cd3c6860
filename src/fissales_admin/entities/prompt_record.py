"""Prompt record domain entity."""

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Literal

LoadedFrom = Literal["cache", "api"]


@dataclass(frozen=True)
class PromptRecord:
    """Domain entity for a named, versioned prompt.

    Attributes:
        name: Unique prompt identifier
        content: Prompt text
        version: Version assigned by the remote service on each save
        created_at: When the remote service first stored the prompt
        updated_at: When the remote service last stored the prompt
        loaded_from: Whether this instance came from the local cache or the API
    """

    name: str
    content: str
    version: int
    created_at: datetime | None = None
    updated_at: datetime | None = None
    loaded_from: LoadedFrom = "api"

    def tagged(self, loaded_from: LoadedFrom) -> "PromptRecord":
        """Return a copy of this record with a different provenance tag."""
        return replace(self, loaded_from=loaded_from)
