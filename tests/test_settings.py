import pytest

from beamload import settings


def test_float_env_reads_value(monkeypatch):
    monkeypatch.setenv("DEFAULT_MAX_WIDTH", "250.5")

    assert settings._float_env("DEFAULT_MAX_WIDTH", 240.0) == 250.5


def test_float_env_blank_uses_default(monkeypatch):
    monkeypatch.setenv("DEFAULT_MAX_WIDTH", " ")

    assert settings._float_env("DEFAULT_MAX_WIDTH", 240.0) == 240.0


def test_float_env_rejects_malformed_value(monkeypatch):
    monkeypatch.setenv("DEFAULT_MAX_WIDTH", "wide")

    with pytest.raises(ValueError):
        settings._float_env("DEFAULT_MAX_WIDTH", 240.0)
