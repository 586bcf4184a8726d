import os

import pytest

from src.common import env
from src.common.config import (
    DEFAULT_SCREENBOARD_URL,
    DEFAULT_TIMEOUT_SEC,
    ConfigError,
    load_settings,
)

ENV_KEYS = ("DATADOG_APP_KEY", "DATADOG_API_KEY", "DATADOG_SCREENBOARD_URL", "DATADOG_TIMEOUT_SEC")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_load_settings_defaults(monkeypatch):
    monkeypatch.setenv("DATADOG_APP_KEY", "app")
    monkeypatch.setenv("DATADOG_API_KEY", "api")

    settings = load_settings()

    assert settings.application_key == "app"
    assert settings.api_key == "api"
    assert settings.api_url == DEFAULT_SCREENBOARD_URL
    assert settings.timeout_sec == DEFAULT_TIMEOUT_SEC


def test_load_settings_overrides(monkeypatch):
    monkeypatch.setenv("DATADOG_APP_KEY", "app")
    monkeypatch.setenv("DATADOG_API_KEY", "api")
    monkeypatch.setenv("DATADOG_SCREENBOARD_URL", "https://app.datadoghq.eu/api/v1/screen")
    monkeypatch.setenv("DATADOG_TIMEOUT_SEC", "7.5")

    settings = load_settings()

    assert settings.api_url == "https://app.datadoghq.eu/api/v1/screen"
    assert settings.timeout_sec == 7.5


@pytest.mark.parametrize("missing", ["DATADOG_APP_KEY", "DATADOG_API_KEY"])
def test_load_settings_requires_keys(monkeypatch, missing):
    monkeypatch.setenv("DATADOG_APP_KEY", "app")
    monkeypatch.setenv("DATADOG_API_KEY", "api")
    monkeypatch.setenv(missing, "")

    with pytest.raises(ConfigError, match=missing):
        load_settings()


def test_load_settings_rejects_bad_timeout(monkeypatch):
    monkeypatch.setenv("DATADOG_APP_KEY", "app")
    monkeypatch.setenv("DATADOG_API_KEY", "api")
    monkeypatch.setenv("DATADOG_TIMEOUT_SEC", "soon")

    with pytest.raises(ConfigError):
        load_settings()


def test_load_env_reads_dotenv_file(monkeypatch, tmp_path):
    # setenv first so monkeypatch removes the variable again at teardown.
    monkeypatch.setenv("DATADOG_APP_KEY", "placeholder")
    monkeypatch.delenv("DATADOG_APP_KEY")
    dotenv_file = tmp_path / ".env"
    dotenv_file.write_text("DATADOG_APP_KEY=from-dotenv\n")

    assert env.load_env(str(dotenv_file)) is True
    assert env.is_loaded() is True
    assert os.environ["DATADOG_APP_KEY"] == "from-dotenv"


def test_load_env_missing_file_returns_false(tmp_path):
    assert env.load_env(str(tmp_path / "absent.env")) is False


def test_find_project_root_uses_pyproject(tmp_path):
    (tmp_path / "pyproject.toml").write_text("[project]\nname='x'\n")
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)

    assert env.find_project_root(nested) == tmp_path
