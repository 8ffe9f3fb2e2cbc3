"""Configuration management using Pydantic Settings."""

from enum import Enum

from pydantic import Field
from pydantic_settings import BaseSettings


class LogFormat(str, Enum):
    """Log output format."""
    JSON = "json"
    CONSOLE = "console"


class AggregatorConfig(BaseSettings):
    """Configuration for the instalens aggregator."""

    # Provider credentials
    apify_token: str | None = None
    gemini_api_key: str | None = None

    # Scraping jobs
    profile_actor_id: str = "apify/instagram-profile-scraper"
    posts_actor_id: str = "apify/instagram-post-scraper"
    posts_limit: int = Field(default=6, ge=1, le=50)

    # Summary enrichment
    summary_enabled: bool = True
    gemini_model: str = "gemini-2.5-flash"

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    static_dir: str = "public"

    # Logging
    log_level: str = "INFO"
    log_format: LogFormat = LogFormat.CONSOLE

    model_config = {
        "env_prefix": "INSTALENS_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }
