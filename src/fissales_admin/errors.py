"""Exception hierarchy for prompt administration.

Validation errors are raised before any network call. Service errors wrap
non-2xx responses and transport failures from the remote prompt service and
keep the best message available.
"""


class PromptAdminError(Exception):
    """Base class for all prompt administration errors."""


class PromptValidationError(PromptAdminError, ValueError):
    """A prompt name or content failed local validation."""


class PromptNotFoundError(PromptAdminError):
    """The remote service has no prompt with the requested name."""

    def __init__(self, name: str, message: str | None = None) -> None:
        self.name = name
        super().__init__(message or f"Prompt not found: {name}")


class PromptServiceError(PromptAdminError):
    """The remote prompt service failed or could not be reached.

    Attributes:
        status_code: HTTP status of the failed response, or None for
            transport failures
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)
