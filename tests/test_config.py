import pytest

from config import get_settings_module


@pytest.mark.parametrize(
    "env,module",
    [
        ("development", "config.development"),
        ("dev", "config.development"),
        ("Testing", "config.testing"),
        ("ci", "config.testing"),
        (" prod ", "config.production"),
    ],
)
def test_aliases_select_settings_module(env, module):
    assert get_settings_module(env) == module


def test_app_env_defaults_to_development(monkeypatch):
    monkeypatch.delenv("APP_ENV", raising=False)

    assert get_settings_module() == "config.development"


def test_app_env_is_read_from_environment(monkeypatch):
    monkeypatch.setenv("APP_ENV", "test")

    assert get_settings_module() == "config.testing"


def test_unknown_env_is_rejected(monkeypatch):
    monkeypatch.setenv("APP_ENV", "staging")

    with pytest.raises(ValueError, match="staging"):
        get_settings_module()
