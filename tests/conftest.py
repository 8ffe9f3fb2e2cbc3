"""Shared fakes for provider-facing tests - no internet."""

import pytest

from instalens.config import AggregatorConfig
from instalens.providers.base import ScrapeJob, ScrapingProvider, TextGenerator


PROFILE_ACTOR = "apify/instagram-profile-scraper"
POSTS_ACTOR = "apify/instagram-post-scraper"


class FakeScraper(ScrapingProvider):
    """In-memory scraping provider keyed by actor id."""

    def __init__(self, results: dict | None = None, errors: dict | None = None):
        self.results = results or {}
        self.errors = errors or {}
        self.calls: list[tuple[str, dict]] = []
        self.closed = False

    async def submit_job(self, actor_id: str, run_input: dict) -> ScrapeJob:
        self.calls.append((actor_id, run_input))
        if actor_id in self.errors:
            raise self.errors[actor_id]
        return ScrapeJob(actor_id=actor_id, run_id="run-1", dataset_id=f"ds-{actor_id}")

    async def list_results(self, job: ScrapeJob) -> list[dict]:
        return list(self.results.get(job.actor_id, []))

    async def close(self) -> None:
        self.closed = True

    def actors_called(self) -> list[str]:
        return [actor_id for actor_id, _ in self.calls]


class FakeGenerator(TextGenerator):
    """Returns a fixed text or raises a fixed error."""

    def __init__(self, text: str = "A concise summary.", error: Exception | None = None):
        self.text = text
        self.error = error
        self.calls: list[tuple[str, str]] = []

    async def generate(self, prompt: str, system_instruction: str) -> str:
        self.calls.append((prompt, system_instruction))
        if self.error:
            raise self.error
        return self.text


@pytest.fixture
def profile_record() -> dict:
    return {
        "fullName": "Jane Doe",
        "username": "janedoe",
        "followersCount": 1000,
        "followsCount": 150,
        "postsCount": 42,
        "profilePicUrlHD": "https://cdn.example.com/jane_hd.jpg",
        "profilePicUrl": "https://cdn.example.com/jane.jpg",
    }


@pytest.fixture
def post_records() -> list[dict]:
    return [
        {
            "caption": "Sunset run #running #sunset",
            "likesCount": 100,
            "commentsCount": 10,
            "displayUrl": "https://cdn.example.com/p1.jpg",
        },
        {
            "caption": "Carousel dump",
            "likesCount": 50,
            "commentsCount": 5,
            "images": ["https://cdn.example.com/p2a.jpg", "https://cdn.example.com/p2b.jpg"],
        },
    ]


@pytest.fixture
def config() -> AggregatorConfig:
    return AggregatorConfig(
        apify_token="test-token",
        gemini_api_key=None,
        static_dir="__no_static__",
    )


@pytest.fixture
def scraper(profile_record, post_records) -> FakeScraper:
    return FakeScraper(results={PROFILE_ACTOR: [profile_record], POSTS_ACTOR: post_records})
