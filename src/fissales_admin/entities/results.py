"""Result entities returned by the prompt service."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SavedPromptEntity:
    """Acknowledgement returned by the remote service after a save."""

    name: str
    message: str
    version: int


@dataclass(frozen=True)
class PromptListResult:
    """Tagged success/failure result for listing prompt names."""

    success: bool
    data: list[str] | None = None
    error: str | None = None

    @classmethod
    def ok(cls, names: list[str]) -> "PromptListResult":
        return cls(success=True, data=names)

    @classmethod
    def failed(cls, error: str) -> "PromptListResult":
        return cls(success=False, error=error)
