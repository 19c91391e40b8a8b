"""Configuration models."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from apphosting_link.api import developer_connect, resource_manager
from apphosting_link.engine.operations import PollerOptions

DEFAULT_LOCATION = "us-central1"


class ProviderConfig(BaseSettings):
    """Project and API settings.

    Fields can be set via YAML (constructor kwargs) or environment variables
    with the ``APPHOSTING_`` prefix.  Constructor kwargs take precedence.

    ``access_token`` is typically left unset so Application Default
    Credentials are used, or provided via ``APPHOSTING_ACCESS_TOKEN`` rather
    than YAML to avoid committing secrets to version control.
    """

    model_config = SettingsConfigDict(env_prefix="APPHOSTING_")

    project: str = Field(min_length=1)
    location: str = Field(default=DEFAULT_LOCATION, min_length=1)
    access_token: str | None = None
    developer_connect_origin: str = developer_connect.DEFAULT_ORIGIN
    api_version: str = developer_connect.DEFAULT_API_VERSION
    resource_manager_origin: str = resource_manager.DEFAULT_ORIGIN


class Config(BaseModel):
    """Linking configuration - validates YAML structure directly."""

    provider: ProviderConfig
    poller: PollerOptions = Field(default_factory=PollerOptions)
    config_dir: Path = Path()
