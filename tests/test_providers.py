"""Unit tests for provider backends - mocked SDK clients, no internet."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from apify_shared.models import ListPage
from google.genai import types

from instalens.exceptions import ProviderError
from instalens.providers.apify_provider import ApifyScrapingProvider
from instalens.providers.base import ScrapeJob
from instalens.providers.gemini_generator import GeminiTextGenerator


def make_run(status: str = "SUCCEEDED", dataset_id: str = "ds-1") -> dict:
    """Run object as returned by ActorClientAsync.call() in apify-client 1.x."""
    return {
        "id": "run-1",
        "actId": "act-1",
        "status": status,
        "defaultDatasetId": dataset_id,
        "defaultKeyValueStoreId": "kv-1",
    }


def make_page(items: list[dict]) -> ListPage:
    """Dataset listing as returned by DatasetClientAsync.list_items()."""
    return ListPage({
        "items": items,
        "count": len(items),
        "offset": 0,
        "limit": len(items),
        "total": len(items),
        "desc": False,
    })


def mock_apify_client(run: dict | None, items: list[dict] | None = None) -> MagicMock:
    client = MagicMock()
    client.actor.return_value.call = AsyncMock(return_value=run)
    client.dataset.return_value.list_items = AsyncMock(return_value=make_page(items or []))
    return client


class TestApifyScrapingProvider:
    """Test Apify job submission and result listing."""

    @pytest.mark.asyncio
    async def test_submit_job_returns_handle(self):
        client = mock_apify_client(make_run())
        provider = ApifyScrapingProvider("token", client=client)

        job = await provider.submit_job("apify/instagram-profile-scraper", {"usernames": ["jane"]})

        client.actor.assert_called_once_with("apify/instagram-profile-scraper")
        client.actor.return_value.call.assert_awaited_once_with(run_input={"usernames": ["jane"]})
        assert job.dataset_id == "ds-1"
        assert job.run_id == "run-1"
        assert job.status == "SUCCEEDED"

    @pytest.mark.asyncio
    async def test_submit_then_list_results(self):
        records = [{"username": "jane", "followersCount": 10}]
        client = mock_apify_client(make_run(dataset_id="ds-7"), items=records)
        provider = ApifyScrapingProvider("token", client=client)

        job = await provider.submit_job("actor", {})
        items = await provider.list_results(job)

        client.dataset.assert_called_once_with("ds-7")
        assert items == records

    @pytest.mark.asyncio
    async def test_submit_job_no_run(self):
        provider = ApifyScrapingProvider("token", client=mock_apify_client(None))
        with pytest.raises(ProviderError):
            await provider.submit_job("actor", {})

    @pytest.mark.asyncio
    async def test_unfinished_run_keeps_partial_results(self):
        records = [{"likesCount": 3}]
        client = mock_apify_client(make_run(status="TIMED-OUT"), items=records)
        provider = ApifyScrapingProvider("token", client=client)

        job = await provider.submit_job("actor", {})

        assert job.status == "TIMED-OUT"
        assert await provider.list_results(job) == records

    @pytest.mark.asyncio
    async def test_list_results_empty_dataset(self):
        provider = ApifyScrapingProvider("token", client=mock_apify_client(None))
        items = await provider.list_results(ScrapeJob(actor_id="a", run_id="r", dataset_id="ds-9"))
        assert items == []


class TestGeminiTextGenerator:
    """Test Gemini text generation wrapper."""

    @pytest.mark.asyncio
    async def test_generate_uses_system_instruction(self):
        client = MagicMock()
        client.aio.models.generate_content = AsyncMock(return_value=SimpleNamespace(text="Hello"))

        generator = GeminiTextGenerator("key", "gemini-2.5-flash", client=client)
        text = await generator.generate("prompt", "be brief")

        assert text == "Hello"
        kwargs = client.aio.models.generate_content.await_args.kwargs
        assert kwargs["model"] == "gemini-2.5-flash"
        assert kwargs["contents"] == "prompt"
        assert isinstance(kwargs["config"], types.GenerateContentConfig)
        assert kwargs["config"].system_instruction == "be brief"

    def test_clients_hold_their_own_keys(self):
        first = GeminiTextGenerator("key-one")
        second = GeminiTextGenerator("key-two")
        assert first._client is not second._client
        assert first._client._api_client.api_key == "key-one"
        assert second._client._api_client.api_key == "key-two"
