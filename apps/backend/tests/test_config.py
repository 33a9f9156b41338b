import pytest
from pydantic import ValidationError

from src.config import Settings


def test_defaults(monkeypatch):
    for key in ("PORT", "HOST", "LOG_LEVEL", "SERVICE_NAME"):
        monkeypatch.delenv(key, raising=False)
    s = Settings(_env_file=None)
    assert s.PORT == 8080
    assert s.HOST == "0.0.0.0"
    assert s.LOG_LEVEL == "info"
    assert s.SERVICE_NAME == "RailRakshak Backend"


def test_port_from_environment(monkeypatch):
    monkeypatch.setenv("PORT", "9000")
    assert Settings(_env_file=None).PORT == 9000


def test_lowercase_env_keys_accepted(monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.setenv("port", "9100")
    assert Settings(_env_file=None).PORT == 9100


def test_invalid_port_rejected(monkeypatch):
    monkeypatch.setenv("PORT", "not-a-port")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_log_level_normalized(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", " WARNING ")
    assert Settings(_env_file=None).LOG_LEVEL == "warning"


def test_unknown_log_level_rejected(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "loud")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)
