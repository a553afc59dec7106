"""Tests for environment parsing in core.config."""

import pytest

from octopets_api.app.core.config import FeatureFlags, Settings, env_flag


@pytest.mark.parametrize("raw", ["1", "true", "TRUE", "Yes", "on", " true "])
def test_env_flag_truthy_values(monkeypatch, raw):
    monkeypatch.setenv("SOME_FLAG", raw)
    assert env_flag("SOME_FLAG") is True


@pytest.mark.parametrize("raw", ["0", "false", "no", "off", "maybe"])
def test_env_flag_falsy_values(monkeypatch, raw):
    monkeypatch.setenv("SOME_FLAG", raw)
    assert env_flag("SOME_FLAG", default=True) is False


@pytest.mark.parametrize("raw", [None, "", "   "])
def test_env_flag_unset_or_blank_uses_default(monkeypatch, raw):
    if raw is None:
        monkeypatch.delenv("SOME_FLAG", raising=False)
    else:
        monkeypatch.setenv("SOME_FLAG", raw)
    assert env_flag("SOME_FLAG", default=True) is True
    assert env_flag("SOME_FLAG", default=False) is False


def test_feature_flag_defaults(monkeypatch):
    monkeypatch.delenv("ERRORS", raising=False)
    monkeypatch.delenv("ENABLE_CRUD", raising=False)
    flags = FeatureFlags.from_env()
    assert flags.errors is False
    assert flags.enable_crud is True


def test_feature_flags_snapshot_is_immutable(monkeypatch):
    monkeypatch.setenv("ERRORS", "true")
    flags = FeatureFlags.from_env()
    monkeypatch.setenv("ERRORS", "false")
    assert flags.errors is True
    with pytest.raises(AttributeError):
        flags.errors = False


def test_settings_read_environment_at_construction(monkeypatch):
    monkeypatch.setenv("PROJECT_NAME", "Pets")
    monkeypatch.setenv("REPOSITORY_BACKEND", "sqlite")
    monkeypatch.setenv("SLOW_OPERATION_ITERATIONS", "10")
    monkeypatch.setenv("SLOW_OPERATION_SECONDS", "0.5")
    settings = Settings()
    assert settings.project_name == "Pets"
    assert settings.repository_backend == "sqlite"
    assert settings.slow_operation_iterations == 10
    assert settings.slow_operation_seconds == 0.5
