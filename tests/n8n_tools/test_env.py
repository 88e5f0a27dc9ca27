"""Tests for environment configuration."""

from pathlib import Path

import pytest

from n8n_tools.env import (
    N8nSettings,
    clear_env_config_cache,
    find_dotenv,
    get_env_config,
)
from n8n_tools.exceptions import ConfigurationError


def test_settings_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("N8N_API_URL", "https://n8n.example.com/api/v1")
    monkeypatch.setenv("N8N_REQUEST_TIMEOUT", "12.5")

    settings = N8nSettings()

    assert settings.n8n_api_url == "https://n8n.example.com/api/v1"
    assert settings.request_timeout == 12.5


def test_missing_api_url_raises() -> None:
    with pytest.raises(ConfigurationError) as exc_info:
        _ = N8nSettings().n8n_api_url
    assert exc_info.value.setting == "N8N_API_URL"


def test_find_dotenv_searches_parents(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setattr(Path, "home", lambda: tmp_path)
    project = tmp_path / "project"
    nested = project / "a" / "b"
    nested.mkdir(parents=True)
    (project / ".env").write_text("N8N_API_URL=http://localhost:5678/api/v1\n")

    assert find_dotenv(nested) == project / ".env"


def test_find_dotenv_stops_at_home(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    home = tmp_path / "home"
    home.mkdir()
    (tmp_path / ".env").write_text("N8N_API_URL=http://outside\n")
    monkeypatch.setattr(Path, "home", lambda: home)

    assert find_dotenv(home) is None


def test_get_env_config_reads_dotenv(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setattr(Path, "home", lambda: tmp_path)
    (tmp_path / ".env").write_text("N8N_API_URL=http://localhost:5678/api/v1\n")
    clear_env_config_cache()

    assert get_env_config().n8n_api_url == "http://localhost:5678/api/v1"


def test_get_env_config_is_cached() -> None:
    assert get_env_config() is get_env_config()
