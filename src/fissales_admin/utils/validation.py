"""Prompt name and content validation.

These checks run before any request reaches the remote prompt service.
"""

import re

from fissales_admin.errors import PromptValidationError

MAX_NAME_LENGTH = 100
MAX_CONTENT_LENGTH = 50_000

_NAME_PATTERN = re.compile(r"^[a-zA-Z0-9_-]+$")


def validate_prompt_name(name: str) -> bool:
    """Check whether a prompt name is usable.

    Names are 1-100 characters of letters, digits, hyphens and underscores.

    Args:
        name: The candidate name

    Returns:
        True if the name is valid, False otherwise
    """
    if not isinstance(name, str):
        return False
    return bool(_NAME_PATTERN.fullmatch(name)) and 0 < len(name) <= MAX_NAME_LENGTH


def ensure_valid_name(name: str) -> None:
    """Raise PromptValidationError if the name is invalid."""
    if not validate_prompt_name(name):
        raise PromptValidationError(
            f"Invalid prompt name: {name!r}. Use 1-{MAX_NAME_LENGTH} letters, "
            "digits, hyphens or underscores"
        )


def ensure_valid_content(content: str) -> None:
    """Raise PromptValidationError if the content is empty or too long."""
    if not content or not isinstance(content, str):
        raise PromptValidationError("Content must be a non-empty string")

    if len(content) > MAX_CONTENT_LENGTH:
        raise PromptValidationError("Content must be less than 50,000 characters")
