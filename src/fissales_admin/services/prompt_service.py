"""Prompt service for core business logic.

This service puts the local prompt cache in front of the remote prompt
service: reads go through the cache, and writes update it only after the
remote service has accepted them.
"""

import logging
from datetime import datetime, timezone

from fissales_admin.entities import CacheStatsEntity, PromptListResult, PromptRecord, SavedPromptEntity
from fissales_admin.errors import PromptAdminError, PromptNotFoundError, PromptServiceError
from fissales_admin.protocols import PromptCacheStore, PromptSource
from fissales_admin.repositories import HttpPromptRepository, PromptCache
from fissales_admin.utils import ensure_valid_content, ensure_valid_name

logger = logging.getLogger(__name__)


class PromptService:
    """Read-through / write-through prompt accessor.

    This service depends on PROTOCOLS, not concrete implementations:
    - PromptSource: the remote prompt service (HTTP by default)
    - PromptCacheStore: the local cache it owns

    The cache belongs to the service instance; build a new service to get a
    cold cache.

    A lookup that misses suspends on the remote call before populating the
    cache, so two concurrent misses for one name both fetch. The later
    write wins; nothing is lost but a duplicate request.

    Example:
        ```python
        from fissales_admin.services import PromptService

        service = PromptService.create()
        prompt = await service.fetch_prompt("greeting")
        await service.save_prompt("greeting", "Hello!")
        ```
    """

    def __init__(
        self,
        source: PromptSource,
        cache: PromptCacheStore | None = None,
    ) -> None:
        """Initialize the prompt service.

        Args:
            source: The remote prompt service (required).
            cache: Local cache. Defaults to a new, empty PromptCache.
        """
        self._source = source
        self._cache = cache if cache is not None else PromptCache()

    @classmethod
    def create(
        cls,
        source: PromptSource | None = None,
        cache: PromptCacheStore | None = None,
    ) -> "PromptService":
        """Factory method to create PromptService with sensible defaults.

        Args:
            source: Remote prompt service. If None, uses HttpPromptRepository
                    configured from settings.
            cache: Local cache. If None, creates an empty PromptCache.

        Returns:
            Configured PromptService instance
        """
        return cls(source=source or HttpPromptRepository.create(), cache=cache)

    async def list_prompt_names(self) -> PromptListResult:
        """List all prompt names known to the remote service.

        Returns:
            A tagged result; failures are reported in ``error``, never raised
        """
        try:
            names = await self._source.list_names()
        except PromptAdminError as e:
            logger.error("Error getting prompt names: %s", e)
            return PromptListResult.failed(str(e) or "Failed to fetch prompt names")
        return PromptListResult.ok(names)

    async def fetch_prompt(self, name: str) -> PromptRecord | None:
        """Get a prompt, from the cache if possible.

        Business logic:
        1. Validate the name
        2. Return the cached copy on a hit
        3. Otherwise fetch remotely and cache a found record
        4. Remote absence is returned as None and never cached

        Args:
            name: The prompt name

        Returns:
            The prompt, tagged with where it was loaded from, or None

        Raises:
            PromptValidationError: If the name is invalid
            PromptServiceError: If the remote service fails
        """
        ensure_valid_name(name)

        cached = self._cache.get(name)
        if cached is not None:
            return cached

        try:
            record = await self._source.get(name)
        except PromptServiceError as e:
            logger.error("Error getting prompt %s: %s", name, e)
            raise PromptServiceError(
                str(e) or f"Failed to fetch prompt: {name}", status_code=e.status_code
            ) from e

        if record is None:
            return None

        record = record.tagged("api")
        self._cache.set(name, record)
        return record

    async def save_prompt(self, name: str, content: str) -> SavedPromptEntity:
        """Save prompt content remotely, then update the cache.

        Args:
            name: The prompt name
            content: New prompt text, 1 to 50,000 characters

        Returns:
            The remote service's acknowledgement with the new version

        Raises:
            PromptValidationError: If the name or content is invalid
            PromptServiceError: If the remote service rejects the save
        """
        ensure_valid_name(name)
        ensure_valid_content(content)

        try:
            saved = await self._source.save(name, content)
        except PromptServiceError as e:
            logger.error("Error saving prompt %s: %s", name, e)
            raise

        self._cache.set(
            name,
            PromptRecord(
                name=name,
                content=content,
                version=saved.version,
                updated_at=datetime.now(timezone.utc),
            ),
        )
        logger.info("Saved prompt %s (version %d)", name, saved.version)
        return saved

    async def delete_prompt(self, name: str) -> None:
        """Delete a prompt remotely, then drop it from the cache.

        Raises:
            PromptValidationError: If the name is invalid
            PromptNotFoundError: If the remote service has no such prompt
            PromptServiceError: If the remote service fails
        """
        ensure_valid_name(name)

        try:
            await self._source.delete(name)
        except PromptNotFoundError:
            # The remote has no record, so a cached copy is stale.
            self._cache.delete(name)
            logger.warning("Prompt not found on delete: %s", name)
            raise
        except PromptServiceError as e:
            logger.error("Error deleting prompt %s: %s", name, e)
            raise

        self._cache.delete(name)
        logger.info("Deleted prompt %s", name)

    async def get_cache_stats(self) -> tuple[CacheStatsEntity, str]:
        """Get the remote service's cache stats, falling back to local ones.

        Returns:
            Tuple of (stats, source) where source is "remote" or "local"
        """
        try:
            return await self._source.cache_stats(), "remote"
        except PromptServiceError as e:
            logger.warning("Remote cache stats unavailable, using local stats: %s", e)
            return self._cache.stats(), "local"

    def local_cache_stats(self) -> CacheStatsEntity:
        """Get statistics for the local cache only."""
        return self._cache.stats()

    async def clear_remote_and_local_cache(self) -> None:
        """Clear the remote cache, and the local one once that succeeds.

        Raises:
            PromptServiceError: If the remote clear fails (local cache kept)
        """
        try:
            await self._source.clear_cache()
        except PromptServiceError as e:
            logger.error("Error clearing prompt cache: %s", e)
            raise

        self._cache.clear()

    async def is_healthy(self) -> bool:
        """Check if the remote prompt service is reachable."""
        return await self._source.health_check()

    async def close(self) -> None:
        """Release the remote service's connections."""
        await self._source.close()

    @property
    def cache(self) -> PromptCacheStore:
        """Get the local cache (for testing)."""
        return self._cache

    @property
    def source(self) -> PromptSource:
        """Get the remote prompt source (for testing)."""
        return self._source
