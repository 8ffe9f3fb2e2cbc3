"""External provider implementations."""

from instalens.providers.base import ScrapeJob, ScrapingProvider, TextGenerator
from instalens.providers.apify_provider import ApifyScrapingProvider
from instalens.providers.gemini_generator import GeminiTextGenerator

__all__ = [
    "ScrapeJob",
    "ScrapingProvider",
    "TextGenerator",
    "ApifyScrapingProvider",
    "GeminiTextGenerator",
]
