"""Remote prompt source protocol.

Defines the interface for the authoritative prompt store that the local
cache sits in front of. The default implementation talks to the FisSales
prompt service over HTTP.
"""

from typing import Protocol, runtime_checkable

from fissales_admin.entities import CacheStatsEntity, PromptRecord, SavedPromptEntity


@runtime_checkable
class PromptSource(Protocol):
    """Protocol for the system of record for prompts.

    Implementations raise ``PromptServiceError`` on failures other than
    the documented not-found cases.
    """

    async def list_names(self) -> list[str]:
        """List the names of all stored prompts."""
        ...

    async def get(self, name: str) -> PromptRecord | None:
        """Fetch a prompt by name.

        Returns:
            The prompt, or None if the source has no prompt with that name
        """
        ...

    async def save(self, name: str, content: str) -> SavedPromptEntity:
        """Store new content for a prompt.

        Returns:
            The saved name, a status message and the new version
        """
        ...

    async def delete(self, name: str) -> None:
        """Delete a prompt.

        Raises:
            PromptNotFoundError: If the source has no prompt with that name
        """
        ...

    async def cache_stats(self) -> CacheStatsEntity:
        """Get the source's own cache statistics."""
        ...

    async def clear_cache(self) -> None:
        """Clear the source's own cache."""
        ...

    async def health_check(self) -> bool:
        """Check if the source is reachable."""
        ...

    async def close(self) -> None:
        """Release any connections held by the source."""
        ...
