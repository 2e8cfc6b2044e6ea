"""Configuration management for the operator console core."""

from datetime import datetime
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    # Secure store (OpenBao, KV v2)
    openbao_addr: str = Field(
        default="http://openbao:8200", description="Base URL of the OpenBao server"
    )
    openbao_service_token: str | None = Field(
        default=None,
        description="Service token sent as X-Vault-Token on every secure store request",
    )
    openbao_mount: str = Field(default="secret", description="KV v2 mount point")
    secret_store_timeout: float = Field(
        default=3.0,
        gt=0,
        description="Timeout in seconds for every secure store request. An unreachable "
        "store degrades to the environment fallback after this long.",
    )
    secret_store_health_ttl: float = Field(
        default=60.0,
        ge=0,
        description="Seconds a secure store health probe result is reused",
    )

    # AI provider selection
    ai_provider: str | None = Field(
        default=None,
        description="Last-resort provider choice when no preference resolves: "
        "'anthropic' or 'openrouter'",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_dir: Path = Field(
        default=Path.home() / ".operator-console" / "logs",
        description="Directory for log files",
    )

    @field_validator("openbao_addr")
    @classmethod
    def validate_openbao_addr(cls, v: str) -> str:
        """Require an http(s) URL and drop any trailing slash."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("OpenBao address must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("ai_provider")
    @classmethod
    def validate_ai_provider(cls, v: str | None) -> str | None:
        """Normalize the provider name and reject unknown providers."""
        if v is None or not v.strip():
            return None
        v = v.strip().lower()
        if v not in ("anthropic", "openrouter"):
            raise ValueError("AI_PROVIDER must be 'anthropic' or 'openrouter'")
        return v

    def get_log_file(self, component_name: str = "console") -> Path:
        """Get a log file path for a specific component.

        Creates log files with the format: {component_name}_{date}.log
        e.g., console_cli_2024-01-15.log

        Args:
            component_name: Name of the component

        Returns:
            Path to the log file
        """
        date_str = datetime.now().strftime("%Y-%m-%d")
        # Sanitize component name for filesystem
        safe_name = "".join(c if c.isalnum() or c in "_-" else "_" for c in component_name)
        return self.log_dir / f"{safe_name}_{date_str}.log"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
