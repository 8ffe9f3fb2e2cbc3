"""FastAPI web server for the instalens aggregator."""

from contextlib import asynccontextmanager
from datetime import datetime
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel, Field

from instalens import Aggregator, AggregatorConfig, __version__
from instalens.core.exporter import to_dict
from instalens.core.orchestrator import normalize_username
from instalens.exceptions import DEFAULT_ERROR_MESSAGE, ConfigError, InstalensError
from instalens.logging import get_logger


# Request/Response models
class ScrapeRequest(BaseModel):
    """Request body for a profile lookup."""

    username: Optional[str] = Field(
        default=None,
        description="Instagram username to look up, with or without @",
    )


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    timestamp: str


class ConfigResponse(BaseModel):
    """Current aggregator configuration, without secrets."""

    profile_actor_id: str = Field(
        ...,
        description="Scraping actor used for the profile lookup job.",
        json_schema_extra={"example": "apify/instagram-profile-scraper"},
    )
    posts_actor_id: str = Field(
        ...,
        description="Scraping actor used for the recent posts job.",
        json_schema_extra={"example": "apify/instagram-post-scraper"},
    )
    posts_limit: int = Field(
        ...,
        description="Maximum number of recent posts requested per lookup. Range: 1-50.",
        json_schema_extra={"example": 6},
    )
    summary_enabled: bool = Field(
        ...,
        description="Whether a generated profile summary is requested.",
        json_schema_extra={"example": True},
    )
    gemini_model: str = Field(
        ...,
        description="Gemini model used for profile summaries.",
        json_schema_extra={"example": "gemini-2.5-flash"},
    )
    apify_configured: bool = Field(
        ...,
        description="True when INSTALENS_APIFY_TOKEN is set.",
    )
    gemini_configured: bool = Field(
        ...,
        description="True when INSTALENS_GEMINI_API_KEY is set.",
    )


def create_app(
    config: AggregatorConfig | None = None,
    aggregator: Aggregator | None = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        config: AggregatorConfig instance, uses defaults if None
        aggregator: Pre-built aggregator, built from config if None

    Returns:
        Configured FastAPI app
    """
    if aggregator is not None:
        config = aggregator.config
    config = config or AggregatorConfig()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Manage aggregator lifecycle."""
        agg = aggregator or Aggregator(config)
        try:
            await agg.__aenter__()
        except ConfigError as e:
            # Lookups fail per request, /health and static files stay up
            get_logger("api").error("aggregator_unavailable", error=str(e))
            app.state.aggregator = None
            app.state.startup_error = str(e)
            yield
            return

        app.state.aggregator = agg
        yield
        await agg.__aexit__(None, None, None)

    app = FastAPI(
        title="instalens API",
        description="Instagram profile lookup and engagement API",
        version=__version__,
        lifespan=lifespan,
    )

    @app.exception_handler(InstalensError)
    async def instalens_error_handler(request: Request, exc: InstalensError):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc) or DEFAULT_ERROR_MESSAGE},
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"error": "Username required"})

    @app.get("/health", response_model=HealthResponse, tags=["System"])
    async def health_check():
        """Check API health status."""
        return HealthResponse(
            status="healthy",
            version=__version__,
            timestamp=datetime.now().isoformat(),
        )

    @app.post("/api/scrape", tags=["Lookup"])
    async def scrape_post(request: Request, body: Optional[ScrapeRequest] = None):
        """
        Look up an Instagram profile with engagement metrics and recent posts.

        Returns `{profile, engagement, posts}`, or `{error}` with status
        400 (missing username), 404 (unknown profile) or 500.
        """
        logger = get_logger("api")
        username = body.username if body else None
        logger.info("scrape_request", username=username)

        agg = request.app.state.aggregator
        if agg is None:
            normalize_username(username)
            raise ConfigError(request.app.state.startup_error)

        try:
            result = await agg.lookup(username)
        except InstalensError:
            raise
        except Exception as e:
            logger.exception("scrape_failed", username=username)
            raise InstalensError(str(e) or DEFAULT_ERROR_MESSAGE) from e

        return to_dict(result)

    @app.get("/api/config", response_model=ConfigResponse, tags=["System"])
    async def get_config():
        """Return the active configuration without credentials."""
        return ConfigResponse(
            profile_actor_id=config.profile_actor_id,
            posts_actor_id=config.posts_actor_id,
            posts_limit=config.posts_limit,
            summary_enabled=config.summary_enabled,
            gemini_model=config.gemini_model,
            apify_configured=bool(config.apify_token),
            gemini_configured=bool(config.gemini_api_key),
        )

    # Single-page frontend, mounted last so API routes take precedence
    if Path(config.static_dir).is_dir():
        app.mount("/", StaticFiles(directory=config.static_dir, html=True), name="static")

    return app


if __name__ == "__main__":
    import uvicorn

    settings = AggregatorConfig()
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)
