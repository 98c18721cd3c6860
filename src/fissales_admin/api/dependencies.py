"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Services stored in app.state during lifespan
    - Dependency functions retrieve from request.app.state
    - The prompt cache is owned by the PromptService built here, so it
      lives exactly as long as the app
"""

import logging
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from fissales_admin.config import configure_logging, settings
from fissales_admin.handlers import PromptHandler
from fissales_admin.repositories import HttpPromptRepository, PromptCache
from fissales_admin.services import PromptService

logger = logging.getLogger(__name__)


def get_prompt_service(request: Request) -> PromptService:
    """Dependency injection for PromptService from app.state.

    Raises:
        RuntimeError: If service is not initialized
    """
    service = getattr(request.app.state, "prompt_service", None)
    if service is None:
        raise RuntimeError("PromptService not initialized. Check lifespan setup.")
    return service


def get_handler(request: Request) -> PromptHandler:
    """Dependency injection for PromptHandler from app.state.

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "prompt_handler", None)
    if handler is None:
        raise RuntimeError("PromptHandler not initialized. Check lifespan setup.")
    return handler


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app.

    Initializes all layers and stores in app.state:
    1. Repository (remote prompt service client) and local cache
    2. Service (business logic) - stored in app.state.prompt_service
    3. Handler (HTTP endpoints) - stored in app.state.prompt_handler

    Cleanup:
        Closes the HTTP client and removes all services from app.state
    """
    configure_logging()

    repository = HttpPromptRepository.create(
        base_url=settings.api_base,
        save_method=settings.prompt_save_method,
    )
    prompt_service = PromptService.create(source=repository, cache=PromptCache())
    prompt_handler = PromptHandler(prompt_service=prompt_service)

    app.state.prompt_service = prompt_service
    app.state.prompt_handler = prompt_handler

    logger.info("Prompt service initialized")
    logger.info("Prompt API base: %s", settings.api_base)
    logger.info("Save method: %s", settings.prompt_save_method)

    yield

    await prompt_service.close()
    del app.state.prompt_handler
    del app.state.prompt_service
    logger.info("Prompt service shut down")


# Type aliases for cleaner dependency injection
HandlerDep = Annotated[PromptHandler, Depends(get_handler)]
ServiceDep = Annotated[PromptService, Depends(get_prompt_service)]
