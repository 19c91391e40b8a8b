"""YAML configuration file loader."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

from dotenv import dotenv_values
from pydantic import ValidationError
from ruamel.yaml import YAML

from apphosting_link.config.schema import Config

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised for configuration loading / validation errors."""


# Field name → environment variable.
_PROVIDER_ENV_MAP: dict[str, str] = {
    "project": "APPHOSTING_PROJECT",
    "location": "APPHOSTING_LOCATION",
    "access_token": "APPHOSTING_ACCESS_TOKEN",
    "developer_connect_origin": "APPHOSTING_DEVELOPER_CONNECT_ORIGIN",
    "api_version": "APPHOSTING_API_VERSION",
    "resource_manager_origin": "APPHOSTING_RESOURCE_MANAGER_ORIGIN",
}


def _resolve_provider(
    raw_provider: dict[str, Any],
    config_dir: Path,
    overrides: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Resolve provider fields from overrides, YAML, env vars, and ``.env`` file.

    Priority (highest wins): override (CLI option) > YAML value > env var > ``.env`` file.
    """
    overrides = overrides or {}
    env_file = config_dir / ".env"
    dotenv_vals = dotenv_values(env_file, encoding="utf-8-sig") if env_file.is_file() else {}

    resolved: dict[str, Any] = {}
    for field, env_key in _PROVIDER_ENV_MAP.items():
        val = overrides.get(field)
        if val is None:
            val = raw_provider.get(field)
        if val is None:
            val = os.environ.get(env_key)
        if val is None:
            val = dotenv_vals.get(env_key)
        if val is not None:
            resolved[field] = val

    if "project" not in resolved:
        raise ConfigError(
            "provider.project is required (set in YAML, --project or APPHOSTING_PROJECT)"
        )
    return resolved


def load_config(
    path: Path | str,
    *,
    overrides: dict[str, Any] | None = None,
    required: bool = True,
) -> Config:
    """Load a YAML configuration file and return a ``Config`` object.

    With ``required=False`` a missing file is treated as empty, so settings
    come only from *overrides* and the environment.

    Raises:
        ConfigError: On YAML parse errors, missing settings, or validation failures.
    """
    path = Path(path)

    if path.is_file():
        try:
            raw = YAML(typ="safe").load(path) or {}
        except Exception as exc:
            raise ConfigError(f"Failed to read {path}: {exc}") from exc
        if not isinstance(raw, dict):
            raise ConfigError(f"Failed to read {path}: expected a mapping at the top level")
    elif required:
        raise ConfigError(f"Configuration file not found: {path}")
    else:
        logger.debug("No configuration file at %s, using environment only", path)
        raw = {}

    try:
        raw["provider"] = _resolve_provider(raw.get("provider") or {}, path.parent, overrides)
        config = Config.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc

    config.config_dir = path.parent
    logger.info(
        "Loaded config for project %s (%s)", config.provider.project, config.provider.location
    )
    return config
