"""Data Transfer Objects for API contracts.

These Pydantic models define the external API contract.
They are used for request/response validation and serialization.

Internal domain logic should use entities from the entities package.
"""

from .requests import SavePromptRequest
from .responses import (
    CacheStatsItem,
    CacheStatsResponse,
    HealthCheckResponse,
    OperationResponse,
    PromptItem,
    PromptNamesResponse,
    PromptResponse,
    SavedPromptItem,
    SavePromptResponse,
)

__all__ = [
    "SavePromptRequest",
    "PromptItem",
    "PromptResponse",
    "PromptNamesResponse",
    "SavedPromptItem",
    "SavePromptResponse",
    "CacheStatsItem",
    "CacheStatsResponse",
    "OperationResponse",
    "HealthCheckResponse",
]
