"""Response DTOs for API endpoints."""

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class PromptItem(BaseModel):
    """A single prompt record."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., description="Unique prompt name")
    content: str = Field(..., description="Prompt text")
    version: int = Field(..., description="Version assigned by the prompt service", ge=0)
    created_at: datetime | None = Field(None, alias="createdAt")
    updated_at: datetime | None = Field(None, alias="updatedAt")
    loaded_from: Literal["cache", "api"] = Field(
        ...,
        alias="loadedFrom",
        description="Whether the local cache or the prompt service produced this record",
    )


class PromptResponse(BaseModel):
    """Response DTO for fetching one prompt."""

    success: bool = Field(True, description="Whether the operation succeeded")
    data: PromptItem


class PromptNamesResponse(BaseModel):
    """Response DTO for listing prompt names."""

    success: bool = Field(..., description="Whether the operation succeeded")
    data: list[str] | None = Field(None, description="Prompt names")
    error: str | None = Field(None, description="Failure message")


class SavedPromptItem(BaseModel):
    """Acknowledgement for a saved prompt."""

    name: str
    message: str
    version: int = Field(..., ge=0)


class SavePromptResponse(BaseModel):
    """Response DTO for saving a prompt."""

    success: bool = Field(True, description="Whether the operation succeeded")
    data: SavedPromptItem


class CacheStatsItem(BaseModel):
    """Prompt cache statistics."""

    model_config = ConfigDict(populate_by_name=True)

    size: int = Field(..., description="Number of cached prompts", ge=0)
    keys: list[str] = Field(default_factory=list, description="Cached prompt names")
    last_accessed: dict[str, Any] = Field(
        default_factory=dict,
        alias="lastAccessed",
        description="Last access time per prompt name",
    )
    hit_rate: float | None = Field(
        None,
        alias="hitRate",
        description="Hits / lookups, or null before the first lookup",
        ge=0.0,
        le=1.0,
    )


class CacheStatsResponse(BaseModel):
    """Response DTO for cache statistics."""

    success: bool = Field(True, description="Whether the operation succeeded")
    data: CacheStatsItem
    source: Literal["remote", "local"] = Field(
        ...,
        description="'remote' for the prompt service's stats, 'local' for the fallback",
    )


class OperationResponse(BaseModel):
    """Response DTO for operations without a payload."""

    success: bool = Field(..., description="Whether the operation succeeded")
    message: str = Field(..., description="Human-readable status message")


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy' or 'unhealthy'")
    backend_healthy: bool = Field(..., description="Whether the prompt service is reachable")
