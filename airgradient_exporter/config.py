"""Configuration management using Pydantic settings.

Two-layer configuration system:
1. Environment: Loads raw values from environment variables (UPPER_CASE)
2. Settings: Clean application settings with lowercase fields and derived values
"""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from airgradient_exporter.exceptions import ConfigurationError

_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_DEFAULT_API_URL = "https://api.airgradient.com/public/api/v1"
_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Environment(BaseSettings):
    """Raw environment variable loading."""

    model_config = SettingsConfigDict(
        env_file=_PROJECT_ROOT / ".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # ── Server ─────────────────────────────────────────────────────────

    HOST: str = Field(default="0.0.0.0")
    PORT: int = Field(default=3000, ge=1, le=65535)
    WAITRESS_THREADS: int = Field(default=4, ge=1)
    LOG_LEVEL: str = Field(default="INFO")

    # ── AirGradient ────────────────────────────────────────────────────

    AIRGRADIENT_API_TOKEN: str | None = Field(default=None)
    AIRGRADIENT_API_URL: str = Field(default=_DEFAULT_API_URL)

    # ── Metrics ────────────────────────────────────────────────────────

    METRICS_INCLUDE_RUNTIME: bool = Field(default=False)


class Settings(BaseModel):
    """Application settings with lowercase fields and derived values."""

    model_config = ConfigDict(from_attributes=True)

    host: str = "0.0.0.0"
    port: int = 3000
    waitress_threads: int = 4
    log_level: str = "INFO"

    airgradient_api_token: str | None = None
    airgradient_api_url: str = _DEFAULT_API_URL

    metrics_include_runtime: bool = False

    def validate_config(self) -> None:
        errors: list[str] = []

        if not self.airgradient_api_token or not self.airgradient_api_token.strip():
            errors.append("AIRGRADIENT_API_TOKEN environment variable is required")

        if not self.airgradient_api_url.startswith(("http://", "https://")):
            errors.append("AIRGRADIENT_API_URL must be an http(s) URL")

        if self.log_level not in _LOG_LEVELS:
            errors.append(f"LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}")

        if errors:
            raise ConfigurationError(
                "Configuration validation failed:\n  - " + "\n  - ".join(errors)
            )

    @classmethod
    def load(cls, env: "Environment | None" = None) -> "Settings":
        if env is None:
            try:
                env = Environment()
            except ValidationError as e:
                problems = [
                    f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
                    for error in e.errors()
                ]
                raise ConfigurationError(
                    "Configuration validation failed:\n  - " + "\n  - ".join(problems)
                ) from e

        return cls(
            host=env.HOST,
            port=env.PORT,
            waitress_threads=env.WAITRESS_THREADS,
            log_level=env.LOG_LEVEL.upper(),
            airgradient_api_token=env.AIRGRADIENT_API_TOKEN,
            airgradient_api_url=env.AIRGRADIENT_API_URL.rstrip("/"),
            metrics_include_runtime=env.METRICS_INCLUDE_RUNTIME,
        )
