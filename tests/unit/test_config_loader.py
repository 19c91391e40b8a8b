"""Tests for YAML configuration loading and settings precedence."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from apphosting_link.config import provider_from_config
from apphosting_link.config.loader import ConfigError, load_config
from apphosting_link.config.schema import DEFAULT_LOCATION
from apphosting_link.core.provider import AccessTokenAuth

if TYPE_CHECKING:
    from pathlib import Path


def _write(tmp_path: Path, text: str, name: str = "apphosting.yaml") -> Path:
    path = tmp_path / name
    path.write_text(text)
    return path


class TestLoadConfig:
    def test_minimal(self, tmp_path: Path) -> None:
        config = load_config(_write(tmp_path, "provider:\n  project: my-proj\n"))
        assert config.provider.project == "my-proj"
        assert config.provider.location == DEFAULT_LOCATION
        assert config.provider.access_token is None
        assert config.config_dir == tmp_path

    def test_poller_options(self, tmp_path: Path) -> None:
        config = load_config(
            _write(
                tmp_path,
                "provider:\n  project: p\npoller:\n  master_timeout: 60\n  max_backoff: 2\n",
            )
        )
        assert config.poller.master_timeout == 60
        assert config.poller.max_backoff == 2
        assert config.poller.initial_backoff == 0.25

    def test_invalid_poller_option(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="master_timeout"):
            load_config(_write(tmp_path, "provider:\n  project: p\npoller:\n  master_timeout: 0\n"))

    def test_missing_required_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="not found"):
            load_config(tmp_path / "nope.yaml")

    def test_missing_optional_file_uses_overrides(self, tmp_path: Path) -> None:
        config = load_config(
            tmp_path / "nope.yaml", overrides={"project": "cli-proj"}, required=False
        )
        assert config.provider.project == "cli-proj"

    def test_missing_project(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match=r"provider\.project is required"):
            load_config(_write(tmp_path, "provider:\n  location: europe-west4\n"))

    def test_non_mapping(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="expected a mapping"):
            load_config(_write(tmp_path, "- a\n- b\n"))

    def test_bad_yaml(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="Failed to read"):
            load_config(_write(tmp_path, "provider: [unclosed\n"))

    def test_empty_file_without_project(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError):
            load_config(_write(tmp_path, ""))


class TestPrecedence:
    def test_override_beats_yaml(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "provider:\n  project: yaml-proj\n  location: asia-east1\n")
        config = load_config(path, overrides={"location": "europe-west4"})
        assert config.provider.project == "yaml-proj"
        assert config.provider.location == "europe-west4"

    def test_yaml_beats_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APPHOSTING_PROJECT", "env-proj")
        config = load_config(_write(tmp_path, "provider:\n  project: yaml-proj\n"))
        assert config.provider.project == "yaml-proj"

    def test_env_fills_gaps(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APPHOSTING_PROJECT", "env-proj")
        monkeypatch.setenv("APPHOSTING_ACCESS_TOKEN", "tok")
        config = load_config(_write(tmp_path, "poller:\n  max_backoff: 1\n"))
        assert config.provider.project == "env-proj"
        assert config.provider.access_token == "tok"

    def test_env_beats_dotenv(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        _write(tmp_path, "APPHOSTING_PROJECT=dotenv-proj\nAPPHOSTING_LOCATION=asia-east1\n", ".env")
        monkeypatch.setenv("APPHOSTING_PROJECT", "env-proj")
        config = load_config(_write(tmp_path, "poller: {}\n"))
        assert config.provider.project == "env-proj"
        assert config.provider.location == "asia-east1"

    def test_dotenv_next_to_config(self, tmp_path: Path) -> None:
        _write(tmp_path, "APPHOSTING_PROJECT=dotenv-proj\n", ".env")
        config = load_config(_write(tmp_path, "{}\n"))
        assert config.provider.project == "dotenv-proj"


class TestProviderFromConfig:
    def test_token_auth(self, tmp_path: Path) -> None:
        config = load_config(
            _write(tmp_path, "provider:\n  project: p\n  access_token: secret-token\n")
        )
        provider = provider_from_config(config)
        assert isinstance(provider.auth, AccessTokenAuth)
        assert provider.auth.access_token.get_secret_value() == "secret-token"

    def test_default_credentials(self, tmp_path: Path) -> None:
        config = load_config(
            _write(
                tmp_path,
                "provider:\n  project: p\n  api_version: v1beta\n"
                "  developer_connect_origin: https://dc.example.com\n",
            )
        )
        provider = provider_from_config(config)
        assert provider.auth is None
        assert provider.api_version == "v1beta"
        assert provider.developer_connect_origin == "https://dc.example.com"
