"""FisSales Admin - prompt management proxy with a local prompt cache.

This package provides a layered architecture in front of the FisSales
prompt service:

Layers:
    - protocols: Interface contracts (PromptSource, PromptCacheStore)
    - repositories: Local cache and remote HTTP client
    - services: Read-through / write-through business logic
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (API contracts)
    - entities: Domain models (internal)

Usage:
    ```python
    from fissales_admin.services import PromptService

    service = PromptService.create()
    prompt = await service.fetch_prompt("greeting")
    ```

For HTTP API:
    ```python
    from fissales_admin.api.app import app
    ```
"""

from fissales_admin.config import configure_logging, settings
from fissales_admin.dto import SavePromptRequest
from fissales_admin.entities import CacheEntryEntity, CacheStatsEntity, PromptRecord
from fissales_admin.errors import (
    PromptAdminError,
    PromptNotFoundError,
    PromptServiceError,
    PromptValidationError,
)
from fissales_admin.handlers import PromptHandler
from fissales_admin.protocols import PromptCacheStore, PromptSource
from fissales_admin.repositories import HttpPromptRepository, PromptCache
from fissales_admin.services import PromptService
from fissales_admin.utils import validate_prompt_name

__all__ = [
    # Configuration
    "settings",
    "configure_logging",
    # Errors
    "PromptAdminError",
    "PromptNotFoundError",
    "PromptServiceError",
    "PromptValidationError",
    # Protocols (interfaces)
    "PromptCacheStore",
    "PromptSource",
    # Services (business logic)
    "PromptService",
    # Handlers (HTTP)
    "PromptHandler",
    # Repositories (data access)
    "HttpPromptRepository",
    "PromptCache",
    # Entities (domain models)
    "CacheEntryEntity",
    "CacheStatsEntity",
    "PromptRecord",
    # DTOs (API contracts)
    "SavePromptRequest",
    # Validation
    "validate_prompt_name",
]
