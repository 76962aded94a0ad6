"""
PDF Function Configuration Module

Centralized configuration management with Pydantic validation.
All environment variables are validated at startup to catch misconfigurations early.
"""

import logging
from functools import lru_cache
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

# Chromium flags required when the host cannot provide a setuid/user-namespace sandbox
NO_SANDBOX_ARGS = ["--no-sandbox", "--disable-setuid-sandbox"]


class ServiceSettings(BaseSettings):
    """
    PDF function configuration with validation.

    All settings can be overridden via environment variables.
    Validation happens at startup to fail fast on misconfiguration.
    """

    model_config = SettingsConfigDict(
        env_prefix="",  # No prefix, use exact env var names
        case_sensitive=False,  # MAX_CONCURRENT_PDFS = max_concurrent_pdfs
    )

    # === Concurrency & Limits ===
    max_concurrent_pdfs: int = Field(
        default=5,
        ge=1,
        le=50,
        description="Maximum browser processes rendering at once in this instance (1-50)"
    )
    playwright_timeout: int = Field(
        default=30000,
        ge=1000,
        le=300000,
        description="Navigation/render timeout in milliseconds (1000-300000)"
    )

    # === Browser ===
    playwright_headless: bool = Field(
        default=True,
        description="Run Chromium without a visible UI"
    )
    browser_sandbox: bool = Field(
        default=True,
        description="Keep the Chromium sandbox enabled (disable only where the host requires it)"
    )

    # === Runtime ===
    log_level: str = Field(
        default="INFO",
        description="Logging level: DEBUG, INFO, WARNING, ERROR, CRITICAL"
    )
    environment: str = Field(
        default="development",
        description="Environment: development, staging, production"
    )

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment is a known value."""
        allowed = {"development", "staging", "production"}
        v_lower = v.lower()
        if v_lower not in allowed:
            raise ValueError(f"environment must be one of: {', '.join(sorted(allowed))}")
        return v_lower

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is one the logging module knows."""
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in allowed:
            raise ValueError(f"log_level must be one of: {', '.join(sorted(allowed))}")
        return v_upper

    @property
    def chromium_args(self) -> List[str]:
        """Extra Chromium launch flags derived from the sandbox setting."""
        if self.browser_sandbox:
            return []
        return list(NO_SANDBOX_ARGS)

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment == "production"

    def validate_production_config(self) -> List[str]:
        """
        Validate configuration is suitable for production.

        Returns list of warning/error messages.
        """
        issues = []

        if self.is_production:
            if not self.playwright_headless:
                issues.append("CRITICAL: PLAYWRIGHT_HEADLESS must be true in production")
            if self.log_level == "DEBUG":
                issues.append("WARNING: LOG_LEVEL=DEBUG in production")

        return issues


@lru_cache()
def get_settings() -> ServiceSettings:
    """
    Get cached settings instance.

    Settings are loaded once and cached for performance.
    Use this function to access configuration throughout the app.
    """
    return ServiceSettings()


def validate_config_on_startup() -> ServiceSettings:
    """
    Validate configuration at application startup.

    Raises ValueError with details if config is invalid.
    Logs warnings for non-critical issues and when the browser sandbox is disabled.
    """
    try:
        settings = get_settings()
    except Exception as e:
        raise ValueError(f"Configuration validation failed: {e}") from e

    for issue in settings.validate_production_config():
        if issue.startswith("CRITICAL"):
            raise ValueError(issue)
        logger.warning(issue)

    if not settings.browser_sandbox:
        logger.warning(
            "Chromium sandbox is DISABLED (BROWSER_SANDBOX=false) - "
            "only run this way on hosts that cannot provide one"
        )

    logger.info(f"Configuration loaded: environment={settings.environment}")
    logger.info(f"  max_concurrent_pdfs={settings.max_concurrent_pdfs}")
    logger.info(f"  playwright_timeout={settings.playwright_timeout}ms")
    logger.info(f"  playwright_headless={settings.playwright_headless}")
    logger.info(f"  browser_sandbox={settings.browser_sandbox}")

    return settings
