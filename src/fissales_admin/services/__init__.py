"""Service layer for business logic.

Services depend on protocols (interfaces), not concrete implementations,
making them testable and flexible.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Cache / Remote prompt service)

Usage:
    ```python
    from fissales_admin.services import PromptService

    # Using factory method (recommended)
    service = PromptService.create()

    # Or manual creation
    service = PromptService(source=repository, cache=PromptCache())
    ```
"""

from .prompt_service import PromptService

__all__ = [
    "PromptService",
]
