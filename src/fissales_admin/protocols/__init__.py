"""Protocol interfaces for swappable implementations.

Protocols enable:
- Swapping the remote prompt service client (HTTP, in-memory fake, etc.)
- Unit testing with mock implementations
- Clear separation of concerns

Usage:
    ```python
    from fissales_admin.protocols import PromptCacheStore, PromptSource

    source: PromptSource = HttpPromptRepository.create()
    cache: PromptCacheStore = PromptCache()
    ```
"""

from .prompt_cache_store import PromptCacheStore
from .prompt_source import PromptSource

__all__ = [
    "PromptCacheStore",
    "PromptSource",
]
