"""HTTP handlers for prompt operations.

Handlers convert between DTOs (API contracts) and service calls.
They handle HTTP concerns like status codes, validation, and error handling.
"""

from fastapi import HTTPException, status

from fissales_admin.dto import (
    CacheStatsItem,
    CacheStatsResponse,
    HealthCheckResponse,
    OperationResponse,
    PromptItem,
    PromptNamesResponse,
    PromptResponse,
    SavedPromptItem,
    SavePromptRequest,
    SavePromptResponse,
)
from fissales_admin.entities import CacheStatsEntity
from fissales_admin.errors import (
    PromptAdminError,
    PromptNotFoundError,
    PromptServiceError,
    PromptValidationError,
)
from fissales_admin.services import PromptService


def _http_error(error: PromptAdminError) -> HTTPException:
    if isinstance(error, PromptValidationError):
        code = status.HTTP_400_BAD_REQUEST
    elif isinstance(error, PromptNotFoundError):
        code = status.HTTP_404_NOT_FOUND
    elif isinstance(error, PromptServiceError):
        code = status.HTTP_502_BAD_GATEWAY
    else:
        code = status.HTTP_500_INTERNAL_SERVER_ERROR
    return HTTPException(status_code=code, detail=str(error))


def _stats_item(stats: CacheStatsEntity) -> CacheStatsItem:
    return CacheStatsItem(
        size=stats.size,
        keys=stats.keys,
        last_accessed=stats.last_accessed,
        hit_rate=stats.hit_rate,
    )


class PromptHandler:
    """HTTP handlers for prompt operations.

    This handler delegates business logic to PromptService
    and handles HTTP-specific concerns like:
    - Converting entities to DTOs
    - Mapping prompt errors to status codes (400 / 404 / 502)

    Example:
        ```python
        service = PromptService.create()
        handler = PromptHandler(prompt_service=service)

        @app.get("/api/prompts/{name}", response_model=PromptResponse)
        async def get_prompt(name: str):
            return await handler.get_prompt(name)
        ```
    """

    def __init__(self, prompt_service: PromptService) -> None:
        """Initialize the prompt handler.

        Args:
            prompt_service: The prompt service for business logic (required).
        """
        self._prompts = prompt_service

    async def list_prompts(self) -> PromptNamesResponse:
        """Handle GET /api/prompts requests.

        Failures are reported in the body rather than raised.
        """
        result = await self._prompts.list_prompt_names()
        return PromptNamesResponse(success=result.success, data=result.data, error=result.error)

    async def get_prompt(self, name: str) -> PromptResponse:
        """Handle GET /api/prompts/{name} requests.

        Raises:
            HTTPException: 400 for a bad name, 404 if absent, 502 on remote failure
        """
        try:
            record = await self._prompts.fetch_prompt(name)
        except PromptAdminError as e:
            raise _http_error(e) from e

        if record is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Prompt not found: {name}",
            )

        return PromptResponse(
            data=PromptItem(
                name=record.name,
                content=record.content,
                version=record.version,
                created_at=record.created_at,
                updated_at=record.updated_at,
                loaded_from=record.loaded_from,
            )
        )

    async def save_prompt(self, name: str, request: SavePromptRequest) -> SavePromptResponse:
        """Handle PUT/POST /api/prompts/{name} requests.

        Raises:
            HTTPException: 400 for bad name or content, 502 on remote failure
        """
        try:
            saved = await self._prompts.save_prompt(name, request.content)
        except PromptAdminError as e:
            raise _http_error(e) from e

        return SavePromptResponse(
            data=SavedPromptItem(name=saved.name, message=saved.message, version=saved.version)
        )

    async def delete_prompt(self, name: str) -> OperationResponse:
        """Handle DELETE /api/prompts/{name} requests.

        Raises:
            HTTPException: 400 for a bad name, 404 if absent, 502 on remote failure
        """
        try:
            await self._prompts.delete_prompt(name)
        except PromptAdminError as e:
            raise _http_error(e) from e

        return OperationResponse(success=True, message=f"Prompt deleted: {name}")

    async def get_cache_stats(self) -> CacheStatsResponse:
        """Handle GET /api/prompts/cache/stats requests."""
        stats, source = await self._prompts.get_cache_stats()
        return CacheStatsResponse(data=_stats_item(stats), source=source)

    async def clear_cache(self) -> OperationResponse:
        """Handle POST /api/prompts/cache/clear requests.

        Raises:
            HTTPException: 502 if the prompt service fails to clear its cache
        """
        try:
            await self._prompts.clear_remote_and_local_cache()
        except PromptAdminError as e:
            raise _http_error(e) from e

        return OperationResponse(success=True, message="Prompt cache cleared successfully")

    async def health_check(self) -> HealthCheckResponse:
        """Handle GET /health requests."""
        is_healthy = await self._prompts.is_healthy()

        return HealthCheckResponse(
            status="healthy" if is_healthy else "unhealthy",
            backend_healthy=is_healthy,
        )
