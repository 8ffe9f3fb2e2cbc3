"""Custom exception hierarchy for instalens."""


DEFAULT_ERROR_MESSAGE = "Failed to fetch data"


class InstalensError(Exception):
    """Base exception for all instalens errors."""

    status_code = 500


class InvalidUsernameError(InstalensError):
    """Username missing or blank."""

    status_code = 400


class ProfileNotFoundError(InstalensError):
    """Profile job returned no records."""

    status_code = 404


class ProviderError(InstalensError):
    """Scraping provider call failed."""


class EnrichmentError(InstalensError):
    """Summary generation failed or returned nothing."""


class ConfigError(InstalensError):
    """Invalid configuration."""
