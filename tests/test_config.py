"""Tests for environment-driven settings."""

import pytest

from hateguard.config import Settings, load_settings
from hateguard.errors import ConfigError


def test_defaults():
    assert load_settings({}) == Settings()


def test_all_values():
    settings = load_settings(
        {
            "HATEGUARD_LATENCY_SECONDS": "1.5",
            "HATEGUARD_SEED": "42",
            "HATEGUARD_DASHBOARD_PATH": " /tmp/dash.yaml ",
            "HATEGUARD_LOG_LEVEL": "debug",
        }
    )
    assert settings.latency_seconds == 1.5
    assert settings.seed == 42
    assert settings.dashboard_path == "/tmp/dash.yaml"
    assert settings.log_level == "DEBUG"


def test_blank_values_use_defaults():
    settings = load_settings({"HATEGUARD_LATENCY_SECONDS": "  ", "HATEGUARD_SEED": ""})
    assert settings.latency_seconds is None
    assert settings.seed is None


@pytest.mark.parametrize(
    "env,name",
    [
        ({"HATEGUARD_LATENCY_SECONDS": "soon"}, "HATEGUARD_LATENCY_SECONDS"),
        ({"HATEGUARD_LATENCY_SECONDS": "-1"}, "HATEGUARD_LATENCY_SECONDS"),
        ({"HATEGUARD_SEED": "1.5"}, "HATEGUARD_SEED"),
        ({"HATEGUARD_LOG_LEVEL": "LOUD"}, "HATEGUARD_LOG_LEVEL"),
    ],
)
def test_invalid_values_name_the_variable(env, name):
    with pytest.raises(ConfigError, match=name):
        load_settings(env)


def test_reads_os_environ(monkeypatch):
    monkeypatch.setenv("HATEGUARD_SEED", "7")
    assert load_settings().seed == 7
