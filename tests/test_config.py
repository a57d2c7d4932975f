import pytest
from pydantic import ValidationError

import interview_drills.config as cfg
from interview_drills.config import Settings, get_settings


@pytest.fixture(autouse=True)
def reset_settings():
    cfg._settings = None
    yield
    cfg._settings = None


def test_defaults(monkeypatch):
    monkeypatch.delenv("DRILLS_CONCURRENCY_LIMIT", raising=False)
    settings = Settings(_env_file=None)
    assert settings.rate_limit_max_calls == 3
    assert settings.rate_limit_window_ms == 1000
    assert settings.concurrency_limit == 2
    assert settings.log_dir is None


def test_reads_prefixed_environment(monkeypatch):
    monkeypatch.setenv("DRILLS_CONCURRENCY_LIMIT", "4")
    monkeypatch.setenv("DRILLS_RATE_LIMIT_WINDOW_MS", "250")
    settings = Settings(_env_file=None)
    assert settings.concurrency_limit == 4
    assert settings.rate_limit_window_ms == 250


@pytest.mark.parametrize(
    "var, value",
    [
        ("DRILLS_CONCURRENCY_LIMIT", "0"),
        ("DRILLS_RATE_LIMIT_WINDOW_MS", "0"),
        ("DRILLS_RATE_LIMIT_MAX_CALLS", "-1"),
    ],
)
def test_invalid_values_rejected(monkeypatch, var, value):
    monkeypatch.setenv(var, value)
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
