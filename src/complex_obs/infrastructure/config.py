"""Configuration management for Complex Obs using Pydantic Settings."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageConfig(BaseModel):
    """Storage configuration for complex observation payloads."""

    application_data_dir: Path = Field(
        default=Path("/var/lib/complex_obs"), description="Application data directory"
    )
    complex_obs_dir: Path = Field(
        default=Path("complex_obs"),
        description="Directory for complex obs files (relative paths resolve under application_data_dir)",
    )
    encoding: str = Field(default="utf-8", description="Text encoding of stored payloads")
    default_extension: str = Field(
        default="dat", min_length=1, description="Extension used when the title has none"
    )

    def resolve_complex_obs_dir(self) -> Path:
        """Return the absolute complex obs directory."""
        if self.complex_obs_dir.is_absolute():
            return self.complex_obs_dir
        return self.application_data_dir / self.complex_obs_dir


class ServerConfig(BaseModel):
    """Server configuration."""

    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8080, ge=1, le=65535, description="Server port")
    metrics_port: int = Field(default=8009, ge=1, le=65535, description="Prometheus metrics port")


class ObservabilityConfig(BaseModel):
    """Observability configuration."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Log level"
    )
    log_format: Literal["json", "console"] = Field(default="json", description="Log format")
    otlp_endpoint: str = Field(default="", description="OpenTelemetry collector endpoint")
    trace_console_export: bool = Field(default=False, description="Also export spans to stdout")
    environment: str = Field(default="development", description="Deployment environment")


class Config(BaseSettings):
    """Root configuration for Complex Obs."""

    model_config = SettingsConfigDict(
        env_prefix="COMPLEX_OBS_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    storage: StorageConfig = Field(default_factory=StorageConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache
def get_config() -> Config:
    """Get cached configuration instance."""
    return Config()
