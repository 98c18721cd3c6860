"""HTTP implementation of PromptSource.

Talks to the FisSales prompt service, which stores prompts for the
Shopify/WooCommerce backends and answers with a ``{success, data}`` envelope:

- GET    /api/prompts                 -> list of names
- GET    /api/prompts/{name}          -> one prompt (404 = absent)
- POST   /api/prompts/{name}          -> save (PUT on older deployments)
- DELETE /api/prompts/{name}          -> delete (404 = error)
- GET    /api/prompts/cache/stats     -> remote cache statistics
- POST   /api/prompts/cache/clear     -> clear remote cache
"""

import logging
from datetime import datetime
from typing import Any
from urllib.parse import quote

import httpx

from fissales_admin.config import settings
from fissales_admin.entities import CacheStatsEntity, PromptRecord, SavedPromptEntity
from fissales_admin.errors import PromptNotFoundError, PromptServiceError

logger = logging.getLogger(__name__)


def _parse_timestamp(value: Any) -> datetime | None:
    if not isinstance(value, str) or not value:
        return None
    try:
        # fromisoformat() before 3.11 rejects a trailing "Z"
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None


def _error_message(response: httpx.Response) -> str:
    """Best available error message for a failed response.

    Prefers the body's ``message`` field, then ``error``, then the status line.
    """
    try:
        body = response.json()
    except ValueError:
        body = None

    if isinstance(body, dict):
        message = body.get("message") or body.get("error")
        if message:
            return str(message)

    return f"HTTP {response.status_code}: {response.reason_phrase}"


class HttpPromptRepository:
    """httpx-based implementation of PromptSource protocol.

    This class satisfies the PromptSource protocol through structural
    typing - no explicit inheritance needed.

    Example:
        ```python
        repository = HttpPromptRepository.create(base_url="http://localhost:8080")

        names = await repository.list_names()
        prompt = await repository.get("greeting")
        await repository.close()
        ```
    """

    def __init__(
        self,
        base_url: str | None = None,
        save_method: str | None = None,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the HTTP prompt repository.

        Args:
            base_url: Prompt service base URL. Defaults to settings.api_base.
            save_method: HTTP method used for saves, POST or PUT.
                        Defaults to settings.prompt_save_method.
            timeout: Request timeout in seconds. Defaults to settings.
            client: Pre-built async client (mainly for tests).
        """
        self._base_url = (base_url or settings.api_base).rstrip("/")
        self._save_method = (save_method or settings.prompt_save_method).upper()
        self._timeout = timeout or settings.request_timeout
        self._client = client

    @classmethod
    def create(
        cls,
        base_url: str | None = None,
        save_method: str | None = None,
    ) -> "HttpPromptRepository":
        """Factory method to create HttpPromptRepository with defaults.

        Args:
            base_url: Prompt service URL. If None, uses settings.
            save_method: POST or PUT. If None, uses settings.

        Returns:
            Configured HttpPromptRepository
        """
        return cls(base_url=base_url, save_method=save_method)

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy-load the async HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                limits=httpx.Limits(max_connections=100, max_keepalive_connections=20),
            )
        return self._client

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def save_method(self) -> str:
        return self._save_method

    def _prompt_url(self, name: str) -> str:
        return f"{self._base_url}/api/prompts/{quote(name, safe='')}"

    async def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        try:
            return await self.client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            logger.error("Prompt service request failed: %s %s: %s", method, url, e)
            raise PromptServiceError(f"Prompt service unreachable: {e}") from e

    def _payload(self, response: httpx.Response) -> dict[str, Any]:
        """Decode a 2xx JSON envelope, raising on non-2xx or success=false."""
        if not response.is_success:
            raise PromptServiceError(_error_message(response), status_code=response.status_code)

        # 204 and other empty 2xx replies carry no envelope
        if response.status_code == httpx.codes.NO_CONTENT or not response.content:
            return {}

        try:
            payload = response.json()
        except ValueError as e:
            raise PromptServiceError(
                "Invalid JSON from prompt service", status_code=response.status_code
            ) from e

        if not isinstance(payload, dict):
            raise PromptServiceError(
                "Unexpected response from prompt service", status_code=response.status_code
            )

        if payload.get("success") is False:
            raise PromptServiceError(
                str(payload.get("message") or payload.get("error") or "Prompt service reported failure"),
                status_code=response.status_code,
            )

        return payload

    async def list_names(self) -> list[str]:
        response = await self._request("GET", f"{self._base_url}/api/prompts")
        data = self._payload(response).get("data")
        if data is None:
            return []
        if not isinstance(data, list):
            raise PromptServiceError("Unexpected prompt list from prompt service")
        return [str(name) for name in data]

    async def get(self, name: str) -> PromptRecord | None:
        response = await self._request("GET", self._prompt_url(name))
        if response.status_code == httpx.codes.NOT_FOUND:
            return None

        payload = self._payload(response)
        # Older deployments answer with {"prompt": {...}} instead of {"data": {...}}
        data = payload.get("data") or payload.get("prompt")
        if not isinstance(data, dict):
            return None

        try:
            return PromptRecord(
                name=str(data.get("name") or name),
                content=str(data["content"]),
                version=int(data.get("version", 0)),
                created_at=_parse_timestamp(data.get("createdAt")),
                updated_at=_parse_timestamp(data.get("updatedAt")),
                loaded_from="api",
            )
        except (KeyError, TypeError, ValueError) as e:
            raise PromptServiceError(f"Malformed prompt from prompt service: {name}") from e

    async def save(self, name: str, content: str) -> SavedPromptEntity:
        response = await self._request(
            self._save_method,
            self._prompt_url(name),
            json={"content": content},
        )
        payload = self._payload(response)
        data = payload.get("data")
        if not isinstance(data, dict):
            data = payload

        try:
            return SavedPromptEntity(
                name=str(data.get("name") or name),
                message=str(data.get("message") or "Prompt saved"),
                version=int(data["version"]),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise PromptServiceError(f"Malformed save response for prompt: {name}") from e

    async def delete(self, name: str) -> None:
        response = await self._request("DELETE", self._prompt_url(name))
        if response.status_code == httpx.codes.NOT_FOUND:
            raise PromptNotFoundError(name)
        self._payload(response)

    async def cache_stats(self) -> CacheStatsEntity:
        response = await self._request("GET", f"{self._base_url}/api/prompts/cache/stats")
        data = self._payload(response).get("data")
        if not isinstance(data, dict):
            raise PromptServiceError("Missing cache stats in prompt service response")

        try:
            raw_keys = data.get("keys") or []
            raw_last_accessed = data.get("lastAccessed") or {}
            if not isinstance(raw_keys, list) or not isinstance(raw_last_accessed, dict):
                raise TypeError("keys must be a list and lastAccessed an object")

            keys = [str(key) for key in raw_keys]
            size = int(data.get("size", len(keys)))
            raw_hit_rate = data.get("hitRate")
            hit_rate = float(raw_hit_rate) if raw_hit_rate is not None else None
        except (TypeError, ValueError) as e:
            raise PromptServiceError("Malformed cache stats from prompt service") from e

        if size < 0 or (hit_rate is not None and not 0.0 <= hit_rate <= 1.0):
            raise PromptServiceError("Cache stats from prompt service out of range")

        return CacheStatsEntity(
            size=size,
            keys=keys,
            last_accessed=dict(raw_last_accessed),
            hit_rate=hit_rate,
        )

    async def clear_cache(self) -> None:
        response = await self._request("POST", f"{self._base_url}/api/prompts/cache/clear")
        self._payload(response)

    async def health_check(self) -> bool:
        """Check if the prompt service answers a listing request."""
        try:
            await self.list_names()
            return True
        except PromptServiceError:
            return False

    async def close(self) -> None:
        """Close the async HTTP client.

        Should be called when shutting down the application.
        """
        if self._client is not None:
            await self._client.aclose()
            self._client = None
