import pytest

from foodspend.app.config import DEFAULT_CORS_ORIGINS, get_settings


ENV_KEYS = (
    "DATABASE_URL",
    "PORT",
    "HOST",
    "CORS_ALLOW_ORIGINS",
    "SUMMARY_SCHEDULER_ENABLED",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_defaults():
    settings = get_settings()

    assert settings.database_url is None
    assert settings.port == 3000
    assert settings.host == "0.0.0.0"
    assert settings.summary_scheduler_enabled is True
    assert settings.log_level == "INFO"
    assert settings.cors_origins == DEFAULT_CORS_ORIGINS


def test_overrides(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite:///./orders.db")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("SUMMARY_SCHEDULER_ENABLED", "false")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", "https://a.example, https://b.example")

    settings = get_settings()

    assert settings.port == 8080
    assert settings.summary_scheduler_enabled is False
    assert settings.log_level == "DEBUG"
    assert settings.cors_origins == ["https://a.example", "https://b.example"]


def test_bad_port_falls_back(monkeypatch):
    monkeypatch.setenv("PORT", "not-a-port")
    assert get_settings().port == 3000


def test_empty_cors_allowlist_is_an_error(monkeypatch):
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", " , ")
    with pytest.raises(RuntimeError):
        get_settings()
