"""Handler layer for HTTP endpoints.

Handlers depend on services (business logic), not directly on repositories.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Cache / Remote prompt service)
"""

from .prompt_handler import PromptHandler

__all__ = [
    "PromptHandler",
]
