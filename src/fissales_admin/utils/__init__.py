"""Utility modules for prompt administration."""

from .validation import (
    MAX_CONTENT_LENGTH,
    MAX_NAME_LENGTH,
    ensure_valid_content,
    ensure_valid_name,
    validate_prompt_name,
)

__all__ = [
    "MAX_CONTENT_LENGTH",
    "MAX_NAME_LENGTH",
    "ensure_valid_content",
    "ensure_valid_name",
    "validate_prompt_name",
]
