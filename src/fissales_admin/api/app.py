from typing import Any

from fastapi import FastAPI, Response, status
from fastapi.middleware.cors import CORSMiddleware

from fissales_admin.api.dependencies import HandlerDep, ServiceDep, lifespan
from fissales_admin.config import settings
from fissales_admin.dto import (
    CacheStatsItem,
    CacheStatsResponse,
    HealthCheckResponse,
    OperationResponse,
    PromptNamesResponse,
    PromptResponse,
    SavePromptRequest,
    SavePromptResponse,
)

app = FastAPI(
    title="FisSales Admin Prompt API",
    description="Prompt management proxy with a local read-through cache",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,  # type: ignore[arg-type]
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
async def root() -> dict[str, Any]:
    """Root endpoint with API information."""
    return {
        "name": "FisSales Admin Prompt API",
        "version": "0.1.0",
        "description": "Prompt management proxy with a local read-through cache",
        "endpoints": {
            "prompts": "/api/prompts",
            "cache_stats": "/api/prompts/cache/stats",
            "local_cache_stats": "/api/prompts/cache/local-stats",
            "cache_clear": "/api/prompts/cache/clear",
            "health": "/health",
            "docs": "/docs",
        },
    }


@app.get("/health", response_model=HealthCheckResponse)
async def health(handler: HandlerDep) -> HealthCheckResponse:
    """Health check endpoint."""
    return await handler.health_check()


@app.get("/api/prompts", response_model=PromptNamesResponse, response_model_exclude_none=True)
async def list_prompts(handler: HandlerDep, response: Response) -> PromptNamesResponse:
    """List all prompt names."""
    result = await handler.list_prompts()
    if not result.success:
        response.status_code = status.HTTP_502_BAD_GATEWAY
    return result


@app.get("/api/prompts/cache/stats", response_model=CacheStatsResponse)
async def get_cache_stats(handler: HandlerDep) -> CacheStatsResponse:
    """Get prompt cache statistics (remote, or local as a fallback)."""
    return await handler.get_cache_stats()


@app.get("/api/prompts/cache/local-stats", response_model=CacheStatsResponse)
async def get_local_cache_stats(service: ServiceDep) -> CacheStatsResponse:
    """Get statistics for this process's prompt cache only."""
    stats = service.local_cache_stats()
    return CacheStatsResponse(
        data=CacheStatsItem(
            size=stats.size,
            keys=stats.keys,
            last_accessed=stats.last_accessed,
            hit_rate=stats.hit_rate,
        ),
        source="local",
    )


@app.post("/api/prompts/cache/clear", response_model=OperationResponse)
async def clear_cache(handler: HandlerDep) -> OperationResponse:
    """Clear the remote prompt cache and then the local one."""
    return await handler.clear_cache()


@app.get("/api/prompts/{name}", response_model=PromptResponse)
async def get_prompt(name: str, handler: HandlerDep) -> PromptResponse:
    """Get a prompt by name."""
    return await handler.get_prompt(name)


@app.api_route("/api/prompts/{name}", methods=["PUT", "POST"], response_model=SavePromptResponse)
async def save_prompt(name: str, request: SavePromptRequest, handler: HandlerDep) -> SavePromptResponse:
    """Save prompt content."""
    return await handler.save_prompt(name, request)


@app.delete("/api/prompts/{name}", response_model=OperationResponse)
async def delete_prompt(name: str, handler: HandlerDep) -> OperationResponse:
    """Delete a prompt."""
    return await handler.delete_prompt(name)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "fissales_admin.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
