"""
core/config.py -- Centralized application configuration via pydantic-settings.

All environment variable reads for the auth service happen here. No module
should call os.getenv() or os.environ.get() directly -- import get_settings()
instead.

Design patterns used:
  Singleton via lru_cache: get_settings() instantiates Settings once at first
      call and returns the cached instance on every subsequent call. This is
      the official FastAPI dependency injection pattern for config.

  BaseSettings (pydantic-settings): Reads values from environment variables
      and an optional .env file automatically. Field names map to env var names
      (e.g. auth_service_host_name -> AUTH_SERVICE_HOST_NAME). Type coercion
      and validation are built in.

  @model_validator(mode="after"): Runs cross-field validation after all fields
      are resolved from environment. Derives the exerciser's target URL from
      the host name and port when AUTH_SERVICE_URL is not set.

Layer rule: core/ is the kernel. This module may not import from api/ or auth/.
"""

import logging
from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger("authservice.config")


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file.

    All fields have defaults so Settings() can be instantiated in test
    environments without a real .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ------------------------------------------------------------------
    # Core
    # ------------------------------------------------------------------

    debug: bool = False
    log_level: str = "INFO"

    # ------------------------------------------------------------------
    # Server bind address
    # ------------------------------------------------------------------

    # "::" listens on every configured interface (IPv4 and IPv6), which is
    # what a containerised deployment needs.
    host: str = "::"
    port: int = 50051

    # ------------------------------------------------------------------
    # Health-check exerciser
    # ------------------------------------------------------------------

    # Set to the service name (e.g. "auth") when running under Docker Compose.
    auth_service_host_name: str = "[::1]"
    # Empty string is the sentinel for "derive from host name and port".
    auth_service_url: str = ""
    health_check_interval_seconds: float = 3.0
    request_timeout_seconds: float = 10.0

    # ------------------------------------------------------------------
    # Validators
    # ------------------------------------------------------------------

    @model_validator(mode="after")
    def validate_endpoints(self) -> "Settings":
        """Fill in auth_service_url and reject values that cannot work.

        The port must be a valid TCP port, and both the exerciser interval and
        the HTTP timeout must be positive.
        """
        if not 0 < self.port < 65536:
            raise ValueError(f"PORT must be between 1 and 65535, got {self.port}.")
        if self.health_check_interval_seconds <= 0:
            raise ValueError("HEALTH_CHECK_INTERVAL_SECONDS must be greater than 0.")
        if self.request_timeout_seconds <= 0:
            raise ValueError("REQUEST_TIMEOUT_SECONDS must be greater than 0.")
        if not self.auth_service_url:
            self.auth_service_url = f"http://{self.auth_service_host_name}:{self.port}"
            logger.debug("AUTH_SERVICE_URL not set, using %s", self.auth_service_url)
        self.auth_service_url = self.auth_service_url.rstrip("/")
        return self

    @property
    def effective_log_level(self) -> str:
        """DEBUG forces debug-level logging regardless of LOG_LEVEL."""
        return "DEBUG" if self.debug else self.log_level.upper()


@lru_cache
def get_settings() -> Settings:
    """Return the application Settings singleton.

    In tests: call get_settings.cache_clear() between test cases if you need
    to inject different environment variables.
    """
    return Settings()
