"""Tests for the read-through / write-through prompt service."""

import httpx
import pytest

from fissales_admin.entities import CacheStatsEntity, PromptRecord
from fissales_admin.errors import PromptNotFoundError, PromptServiceError, PromptValidationError
from fissales_admin.repositories import HttpPromptRepository, PromptCache
from fissales_admin.services import PromptService


class TestFetchPrompt:
    @pytest.mark.asyncio
    async def test_miss_fetches_remotely_and_caches(self, service, source, cache):
        source.prompts["greeting"] = PromptRecord(name="greeting", content="Hi", version=1)

        record = await service.fetch_prompt("greeting")

        assert record.content == "Hi"
        assert record.loaded_from == "api"
        assert source.calls_for("get") == [("get", "greeting")]
        assert "greeting" in cache

    @pytest.mark.asyncio
    async def test_second_fetch_served_from_cache(self, service, source):
        source.prompts["greeting"] = PromptRecord(name="greeting", content="Hi", version=1)

        await service.fetch_prompt("greeting")
        record = await service.fetch_prompt("greeting")

        assert record.loaded_from == "cache"
        assert len(source.calls_for("get")) == 1
        assert service.local_cache_stats().hit_rate == pytest.approx(0.5)

    @pytest.mark.asyncio
    async def test_absent_prompt_is_not_cached(self, service, source, cache):
        assert await service.fetch_prompt("missing") is None
        assert await service.fetch_prompt("missing") is None

        assert len(source.calls_for("get")) == 2
        assert cache.stats().size == 0

    @pytest.mark.asyncio
    async def test_remote_failure_propagates_and_leaves_cache(self, service, source, cache):
        source.error = PromptServiceError("HTTP 500: Internal Server Error", status_code=500)

        with pytest.raises(PromptServiceError, match="HTTP 500") as exc_info:
            await service.fetch_prompt("greeting")

        assert exc_info.value.status_code == 500
        assert cache.stats().size == 0

    @pytest.mark.asyncio
    async def test_invalid_name_rejected_before_network(self, service, source):
        with pytest.raises(PromptValidationError):
            await service.fetch_prompt("bad name!")

        assert source.calls == []


class TestSavePrompt:
    @pytest.mark.asyncio
    async def test_save_updates_cache_with_returned_version(self, service, source, cache):
        source.prompts["greeting"] = PromptRecord(name="greeting", content="Hi", version=3)

        saved = await service.save_prompt("greeting", "Hello")

        assert saved.version == 4
        cached = cache.get("greeting")
        assert cached.content == "Hello"
        assert cached.version == 4
        assert cached.updated_at is not None

    @pytest.mark.asyncio
    async def test_save_replaces_existing_cache_entry(self, service, source, cache):
        source.prompts["greeting"] = PromptRecord(name="greeting", content="Hi", version=1)
        await service.fetch_prompt("greeting")

        await service.save_prompt("greeting", "Hello")
        record = await service.fetch_prompt("greeting")

        assert record.loaded_from == "cache"
        assert record.content == "Hello"
        assert record.version == 2
        assert cache.stats().size == 1

    @pytest.mark.asyncio
    async def test_oversized_content_rejected_before_network(self, service, source):
        with pytest.raises(PromptValidationError, match="50,000 characters"):
            await service.save_prompt("greeting", "x" * 50_001)

        assert source.calls == []

    @pytest.mark.asyncio
    async def test_empty_content_rejected(self, service, source):
        with pytest.raises(PromptValidationError):
            await service.save_prompt("greeting", "")

        assert source.calls == []

    @pytest.mark.asyncio
    async def test_failed_save_leaves_cache_untouched(self, service, source, cache):
        cache.set("greeting", PromptRecord(name="greeting", content="Hi", version=1))
        source.error = PromptServiceError("Backend down")

        with pytest.raises(PromptServiceError, match="Backend down"):
            await service.save_prompt("greeting", "Hello")

        assert cache.get("greeting").content == "Hi"

    @pytest.mark.asyncio
    async def test_oversized_content_never_reaches_http(self):
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json={"success": True})

        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        service = PromptService(
            source=HttpPromptRepository(base_url="http://prompts.test", client=client)
        )

        with pytest.raises(PromptValidationError, match="50,000"):
            await service.save_prompt("greeting", "x" * 50_001)

        assert requests == []
        await service.close()


class TestDeletePrompt:
    @pytest.mark.asyncio
    async def test_delete_removes_cache_entry(self, service, source, cache):
        source.prompts["greeting"] = PromptRecord(name="greeting", content="Hi", version=1)
        await service.fetch_prompt("greeting")

        await service.delete_prompt("greeting")

        assert "greeting" not in source.prompts
        assert cache.get("greeting") is None

    @pytest.mark.asyncio
    async def test_delete_missing_raises_and_evicts_stale_entry(self, service, cache):
        cache.set("ghost", PromptRecord(name="ghost", content="Boo", version=1))

        with pytest.raises(PromptNotFoundError):
            await service.delete_prompt("ghost")

        assert "ghost" not in cache

    @pytest.mark.asyncio
    async def test_failed_delete_keeps_cache_entry(self, service, source, cache):
        cache.set("greeting", PromptRecord(name="greeting", content="Hi", version=1))
        source.error = PromptServiceError("HTTP 503: Service Unavailable", status_code=503)

        with pytest.raises(PromptServiceError):
            await service.delete_prompt("greeting")

        assert "greeting" in cache


class TestListAndCacheOperations:
    @pytest.mark.asyncio
    async def test_list_returns_tagged_success(self, service, source):
        source.prompts["b"] = PromptRecord(name="b", content="B", version=1)
        source.prompts["a"] = PromptRecord(name="a", content="A", version=1)

        result = await service.list_prompt_names()

        assert result.success is True
        assert result.data == ["a", "b"]
        assert result.error is None

    @pytest.mark.asyncio
    async def test_list_failure_returns_tagged_error(self, service, source):
        source.error = PromptServiceError("Backend down")

        result = await service.list_prompt_names()

        assert result.success is False
        assert result.data is None
        assert result.error == "Backend down"

    @pytest.mark.asyncio
    async def test_cache_stats_prefers_remote(self, service, source):
        source.remote_stats = CacheStatsEntity(size=2, keys=["a", "b"], hit_rate=0.75)

        stats, origin = await service.get_cache_stats()

        assert origin == "remote"
        assert stats.size == 2
        assert stats.hit_rate == 0.75

    @pytest.mark.asyncio
    async def test_cache_stats_falls_back_to_local(self, service, source, cache):
        cache.set("a", PromptRecord(name="a", content="A", version=1))
        source.error = PromptServiceError("HTTP 500: Internal Server Error", status_code=500)

        stats, origin = await service.get_cache_stats()

        assert origin == "local"
        assert stats.size == 1
        assert stats.keys == ["a"]

    @pytest.mark.asyncio
    async def test_clear_clears_local_after_remote_success(self, service, source, cache):
        cache.set("a", PromptRecord(name="a", content="A", version=1))
        cache.get("a")

        await service.clear_remote_and_local_cache()

        assert source.calls_for("clear_cache") == [("clear_cache", None)]
        stats = cache.stats()
        assert stats.size == 0
        assert stats.hit_rate is None

    @pytest.mark.asyncio
    async def test_clear_keeps_local_on_remote_failure(self, service, source, cache):
        cache.set("a", PromptRecord(name="a", content="A", version=1))
        source.error = PromptServiceError("Backend down")

        with pytest.raises(PromptServiceError):
            await service.clear_remote_and_local_cache()

        assert cache.stats().size == 1

    @pytest.mark.asyncio
    async def test_health_and_close(self, service, source):
        assert await service.is_healthy() is True
        source.error = PromptServiceError("Backend down")
        assert await service.is_healthy() is False

        await service.close()
        assert source.closed is True


def make_http_service(handler, cache: PromptCache) -> PromptService:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    repository = HttpPromptRepository(base_url="http://prompts.test", client=client)
    return PromptService(source=repository, cache=cache)


class TestUnexpectedRemoteBodies:
    """The service keeps its contracts when the prompt service answers oddly."""

    @pytest.mark.asyncio
    async def test_list_with_non_list_data_returns_failed_result(self, cache):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"success": True, "data": 5})

        service = make_http_service(handler, cache)
        result = await service.list_prompt_names()

        assert result.success is False
        assert result.data is None
        assert "Unexpected prompt list" in result.error

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "data",
        [{"size": "n/a"}, {"size": 1, "hitRate": 2.0}, {"size": -3}, {"size": 1, "lastAccessed": 7}],
    )
    async def test_bad_remote_stats_fall_back_to_local(self, cache, data):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"success": True, "data": data})

        cache.set("greeting", PromptRecord(name="greeting", content="Hi", version=1))
        service = make_http_service(handler, cache)

        stats, origin = await service.get_cache_stats()

        assert origin == "local"
        assert stats.keys == ["greeting"]

    @pytest.mark.asyncio
    async def test_delete_with_no_content_reply_evicts_cache_entry(self, cache):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.method == "DELETE"
            return httpx.Response(204)

        cache.set("greeting", PromptRecord(name="greeting", content="Hi", version=1))
        service = make_http_service(handler, cache)

        await service.delete_prompt("greeting")

        assert "greeting" not in cache

    @pytest.mark.asyncio
    async def test_clear_with_no_content_reply_clears_local_cache(self, cache):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(204)

        cache.set("greeting", PromptRecord(name="greeting", content="Hi", version=1))
        service = make_http_service(handler, cache)

        await service.clear_remote_and_local_cache()

        assert cache.stats().size == 0


def test_each_service_owns_a_fresh_cache(source):
    first = PromptService(source=source)
    second = PromptService(source=source)

    first.cache.set("a", PromptRecord(name="a", content="A", version=1))

    assert isinstance(second.cache, PromptCache)
    assert second.cache.stats().size == 0


def test_create_defaults_to_http_repository():
    service = PromptService.create()
    assert isinstance(service.source, HttpPromptRepository)
