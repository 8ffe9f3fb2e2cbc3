"""Apify-backed scraping provider."""

from apify_client import ApifyClientAsync

from instalens.exceptions import ProviderError
from instalens.logging import get_logger
from instalens.providers.base import ScrapeJob, ScrapingProvider


class ApifyScrapingProvider(ScrapingProvider):
    """
    Runs Apify actors and reads their default datasets.

    Targets the apify-client 1.x API, where run objects are plain dicts
    and dataset listings are ListPage objects.
    """

    def __init__(self, token: str, client: ApifyClientAsync | None = None):
        self._client = client or ApifyClientAsync(token)
        self._log = get_logger("apify")

    async def submit_job(self, actor_id: str, run_input: dict) -> ScrapeJob:
        run = await self._client.actor(actor_id).call(run_input=run_input)
        if not run or not run.get("defaultDatasetId"):
            raise ProviderError(f"Actor {actor_id} returned no run")

        # Unfinished or failed runs may still hold partial results
        status = run.get("status", "SUCCEEDED")
        if status != "SUCCEEDED":
            self._log.warning("run_not_succeeded", actor_id=actor_id, status=status)

        return ScrapeJob(
            actor_id=actor_id,
            run_id=run.get("id", ""),
            dataset_id=run["defaultDatasetId"],
            status=status,
        )

    async def list_results(self, job: ScrapeJob) -> list[dict]:
        page = await self._client.dataset(job.dataset_id).list_items()
        return list(page.items or [])
