"""Repository layer for data access.

This layer holds the local prompt cache and the client for the remote
prompt service, both behind protocol-based interfaces. The repositories are
protocol-based (structural typing), not inheritance-based.
"""

from fissales_admin.protocols import PromptCacheStore, PromptSource

from .http_prompt_repository import HttpPromptRepository
from .prompt_cache import PromptCache

__all__ = [
    "PromptCacheStore",
    "PromptSource",
    "HttpPromptRepository",
    "PromptCache",
]
