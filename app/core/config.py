"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here, no scattered magic strings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode (exposes /docs and /redoc).
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        api_prefix: Path prefix for the items routes.
        error_path: Literal value written to the ``path`` field of every
            error payload. It does not track the request path.
        cors_allow_origins: Origins allowed for cross-origin requests.
        rate_limit_enabled: Turn per-client rate limiting on or off.
        rate_limit_default: Default rate limit applied to every endpoint.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "Items API"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    api_prefix: str = "/api"
    error_path: str = "/api/error"
    cors_allow_origins: list[str] = ["*"]
    rate_limit_enabled: bool = True
    rate_limit_default: str = "60/minute"


settings = Settings()
