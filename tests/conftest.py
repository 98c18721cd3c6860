"""Shared fixtures for the prompt proxy tests."""

import pytest

from fissales_admin.entities import CacheStatsEntity, PromptRecord, SavedPromptEntity
from fissales_admin.errors import PromptNotFoundError, PromptServiceError
from fissales_admin.repositories import PromptCache
from fissales_admin.services import PromptService


class FakeClock:
    """Manually advanced replacement for time.time."""

    def __init__(self, start: float = 1_700_000_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> float:
        self.now += seconds
        return self.now


class FakePromptSource:
    """In-memory PromptSource that records every call."""

    def __init__(self) -> None:
        self.prompts: dict[str, PromptRecord] = {}
        self.calls: list[tuple[str, str | None]] = []
        self.error: PromptServiceError | None = None
        self.remote_stats = CacheStatsEntity(size=0)
        self.closed = False

    def _record(self, operation: str, name: str | None = None) -> None:
        self.calls.append((operation, name))
        if self.error is not None:
            raise self.error

    def calls_for(self, operation: str) -> list[tuple[str, str | None]]:
        return [call for call in self.calls if call[0] == operation]

    async def list_names(self) -> list[str]:
        self._record("list")
        return sorted(self.prompts)

    async def get(self, name: str) -> PromptRecord | None:
        self._record("get", name)
        return self.prompts.get(name)

    async def save(self, name: str, content: str) -> SavedPromptEntity:
        self._record("save", name)
        previous = self.prompts.get(name)
        version = previous.version + 1 if previous else 1
        self.prompts[name] = PromptRecord(name=name, content=content, version=version)
        return SavedPromptEntity(name=name, message="Prompt saved", version=version)

    async def delete(self, name: str) -> None:
        self._record("delete", name)
        if name not in self.prompts:
            raise PromptNotFoundError(name)
        del self.prompts[name]

    async def cache_stats(self) -> CacheStatsEntity:
        self._record("cache_stats")
        return self.remote_stats

    async def clear_cache(self) -> None:
        self._record("clear_cache")

    async def health_check(self) -> bool:
        return self.error is None

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def cache(clock: FakeClock) -> PromptCache:
    """A fresh, empty cache per test."""
    return PromptCache(clock=clock)


@pytest.fixture
def source() -> FakePromptSource:
    return FakePromptSource()


@pytest.fixture
def service(source: FakePromptSource, cache: PromptCache) -> PromptService:
    return PromptService(source=source, cache=cache)
