"""Lookup orchestrator - coordinates scraping jobs, normalization and enrichment."""

from datetime import datetime

from instalens.config import AggregatorConfig
from instalens.core.summarizer import summarize
from instalens.core.transformer import compute_engagement, transform_posts, transform_profile
from instalens.exceptions import (
    DEFAULT_ERROR_MESSAGE,
    ConfigError,
    InvalidUsernameError,
    ProfileNotFoundError,
    ProviderError,
)
from instalens.logging import configure_logging, get_logger, lookup_context
from instalens.models.result import LookupResult
from instalens.providers.apify_provider import ApifyScrapingProvider
from instalens.providers.base import ScrapingProvider, TextGenerator
from instalens.providers.gemini_generator import GeminiTextGenerator


def normalize_username(username: str | None) -> str:
    """
    Trim whitespace and a leading @ from a username.

    Raises:
        InvalidUsernameError: If nothing is left
    """
    cleaned = (username or "").strip().lstrip("@").strip().lower()
    if not cleaned:
        raise InvalidUsernameError("Username required")
    return cleaned


class Aggregator:
    """
    Builds the aggregated profile, engagement and posts payload for a username.

    Example:
        async with Aggregator(config) as aggregator:
            result = await aggregator.lookup("natgeo")
            print(result.engagement.engagement_rate)
    """

    def __init__(
        self,
        config: AggregatorConfig | None = None,
        scraper: ScrapingProvider | None = None,
        generator: TextGenerator | None = None,
    ):
        """
        Initialize aggregator with optional configuration and providers.

        Args:
            config: AggregatorConfig instance, uses defaults if None
            scraper: Scraping backend, built from config on entry if None
            generator: Summary backend, built from config on entry if None
        """
        self.config = config or AggregatorConfig()
        self._scraper = scraper
        self._generator = generator
        self._owns_scraper = scraper is None
        self._log = get_logger("aggregator")

    async def __aenter__(self) -> "Aggregator":
        """Async context manager entry - initialize providers."""
        configure_logging(self.config)

        if self._scraper is None:
            if not self.config.apify_token:
                raise ConfigError("INSTALENS_APIFY_TOKEN is not set")
            self._scraper = ApifyScrapingProvider(self.config.apify_token)

        if self._generator is None and self.config.summary_enabled:
            if self.config.gemini_api_key:
                self._generator = GeminiTextGenerator(
                    self.config.gemini_api_key,
                    self.config.gemini_model,
                )
            else:
                self._log.warning("summary_disabled", reason="INSTALENS_GEMINI_API_KEY is not set")

        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit - cleanup owned providers."""
        if self._scraper and self._owns_scraper:
            await self._scraper.close()
            self._scraper = None

    async def lookup(self, username: str | None) -> LookupResult:
        """
        Fetch profile and recent posts, compute engagement and add a summary.

        Args:
            username: Instagram handle, with or without @

        Returns:
            LookupResult with profile, engagement and posts

        Raises:
            InvalidUsernameError: Username missing or blank
            ProfileNotFoundError: Profile job returned no records
            ProviderError: A scraping job failed
        """
        username = normalize_username(username)
        if self._scraper is None:
            raise ConfigError("Aggregator has no scraping provider")

        with lookup_context(username):
            return await self._lookup(username)

    async def _lookup(self, username: str) -> LookupResult:
        """Run both jobs, then aggregate and enrich."""
        self._log.info("lookup_start")
        start = datetime.now()

        profile_items = await self._run_job(
            self.config.profile_actor_id,
            {"usernames": [username]},
        )
        if not profile_items:
            self._log.info("profile_not_found")
            raise ProfileNotFoundError("Profile not found")

        profile = transform_profile(profile_items[0], username)
        self._log.info("profile_fetched", followers=profile.followers)

        post_items = await self._run_job(
            self.config.posts_actor_id,
            {"username": [username], "resultsLimit": self.config.posts_limit},
        )
        posts = transform_posts(post_items, limit=self.config.posts_limit)
        self._log.info("posts_fetched", posts_count=len(posts))

        engagement = compute_engagement(posts, profile.followers)

        generator = self._generator if self.config.summary_enabled else None
        summary = await summarize(generator, profile)
        profile = profile.model_copy(update={"summary": summary})

        self._log.info(
            "lookup_complete",
            posts_count=len(posts),
            engagement_rate=engagement.engagement_rate,
            duration_ms=(datetime.now() - start).total_seconds() * 1000,
        )

        return LookupResult(profile=profile, engagement=engagement, posts=posts)

    async def _run_job(self, actor_id: str, run_input: dict) -> list[dict]:
        """Submit a job once and return its result set."""
        try:
            job = await self._scraper.submit_job(actor_id, run_input)
            return await self._scraper.list_results(job)
        except ProviderError as e:
            self._log.error("provider_error", actor_id=actor_id, error=str(e))
            raise
        except Exception as e:
            self._log.error("provider_error", actor_id=actor_id, error=str(e))
            raise ProviderError(str(e) or DEFAULT_ERROR_MESSAGE) from e
