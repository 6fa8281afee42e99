"""Environment-driven settings for the CLI and the API."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from hateguard.errors import ConfigError

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass(frozen=True)
class Settings:
    """Runtime settings read from ``HATEGUARD_*`` environment variables."""

    latency_seconds: Optional[float] = None  # None: caller picks its own default
    seed: Optional[int] = None
    dashboard_path: str = ""
    log_level: str = "WARNING"


def _parse_float(env: Mapping[str, str], name: str) -> Optional[float]:
    raw = env.get(name, "").strip()
    if not raw:
        return None
    try:
        value = float(raw)
    except ValueError:
        raise ConfigError(f"{name} must be a number, got {raw!r}") from None
    if value < 0:
        raise ConfigError(f"{name} must not be negative, got {raw!r}")
    return value


def _parse_int(env: Mapping[str, str], name: str) -> Optional[int]:
    raw = env.get(name, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from *env* (defaults to ``os.environ``)."""
    env = os.environ if env is None else env

    log_level = env.get("HATEGUARD_LOG_LEVEL", "WARNING").strip().upper() or "WARNING"
    if log_level not in _LOG_LEVELS:
        raise ConfigError(f"HATEGUARD_LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}")

    return Settings(
        latency_seconds=_parse_float(env, "HATEGUARD_LATENCY_SECONDS"),
        seed=_parse_int(env, "HATEGUARD_SEED"),
        dashboard_path=env.get("HATEGUARD_DASHBOARD_PATH", "").strip(),
        log_level=log_level,
    )


def get_settings() -> Settings:
    return load_settings()
