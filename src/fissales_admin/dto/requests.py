"""Request DTOs for API endpoints."""

from pydantic import BaseModel, Field


class SavePromptRequest(BaseModel):
    """Request DTO for saving a prompt.

    Length limits are enforced by the service layer so that the caller gets
    the same message whether the request came over HTTP or not.
    """

    content: str = Field(..., description="The prompt text (at most 50,000 characters)")
