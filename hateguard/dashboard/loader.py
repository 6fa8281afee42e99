"""Load the dashboard content from YAML.

The bundled ``dashboard.yaml`` is used unless an explicit path or the
``HATEGUARD_DASHBOARD_PATH`` environment variable points elsewhere.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from hateguard.config import get_settings
from hateguard.dashboard.models import (
    Dashboard,
    FeatureImportance,
    MethodologyStep,
    ModelMetrics,
    QuickStats,
)
from hateguard.errors import DashboardError

logger = logging.getLogger(__name__)

BUNDLED_PATH = Path(__file__).with_name("dashboard.yaml")


def _percentage(value: Any, where: str) -> float:
    try:
        pct = float(value)
    except (TypeError, ValueError):
        raise DashboardError(f"{where}: expected a number, got {value!r}") from None
    if not 0.0 <= pct <= 100.0:
        raise DashboardError(f"{where}: {pct} is outside [0, 100]")
    return pct


def _count(value: Any, where: str) -> int:
    try:
        n = int(value)
    except (TypeError, ValueError):
        raise DashboardError(f"{where}: expected an integer, got {value!r}") from None
    if n < 0:
        raise DashboardError(f"{where}: must not be negative")
    return n


def _section(data: dict, key: str, kind: type) -> Any:
    value = data.get(key, kind())
    if not isinstance(value, kind):
        raise DashboardError(f"'{key}' must be a {kind.__name__}")
    return value


def parse_dashboard(data: Any) -> Dashboard:
    """Validate a decoded YAML document and build a Dashboard."""
    if not isinstance(data, dict):
        raise DashboardError("Dashboard document must be a mapping")

    metrics = _section(data, "model_metrics", dict)
    model_metrics = ModelMetrics(
        **{
            name: _percentage(metrics.get(name), f"model_metrics.{name}")
            for name in ("accuracy", "precision", "recall", "f1_score")
        }
    )

    stats = _section(data, "quick_stats", dict)
    quick_stats = QuickStats(
        texts_analyzed_today=_count(stats.get("texts_analyzed_today", 0), "quick_stats.texts_analyzed_today"),
        hate_speech_detected=_count(stats.get("hate_speech_detected", 0), "quick_stats.hate_speech_detected"),
        model_uptime=_percentage(stats.get("model_uptime", 0), "quick_stats.model_uptime"),
    )

    features = []
    for i, entry in enumerate(_section(data, "feature_engineering", list)):
        if not isinstance(entry, dict) or not entry.get("name"):
            raise DashboardError(f"feature_engineering[{i}] needs a name")
        features.append(
            FeatureImportance(
                name=str(entry["name"]),
                description=str(entry.get("description", "")),
                importance=_percentage(entry.get("importance"), f"feature_engineering[{i}].importance"),
            )
        )

    steps = []
    for i, entry in enumerate(_section(data, "methodology", list)):
        if not isinstance(entry, dict) or not entry.get("title"):
            raise DashboardError(f"methodology[{i}] needs a title")
        steps.append(
            MethodologyStep(
                order=i + 1,
                title=str(entry["title"]),
                description=str(entry.get("description", "")),
            )
        )

    return Dashboard(
        model_metrics=model_metrics,
        quick_stats=quick_stats,
        feature_engineering=features,
        methodology=steps,
        training_details={str(k): str(v) for k, v in _section(data, "training_details", dict).items()},
        model_architecture={str(k): str(v) for k, v in _section(data, "model_architecture", dict).items()},
        preprocessing=[str(s) for s in _section(data, "preprocessing", list)],
        advanced_features=[str(s) for s in _section(data, "advanced_features", list)],
    )


def load_dashboard(path: str | Path | None = None) -> Dashboard:
    """Load dashboard content from *path*, the env override, or the bundled file."""
    if path is None:
        override = get_settings().dashboard_path
        path = Path(override) if override else BUNDLED_PATH
    path = Path(path)

    if not path.is_file():
        raise DashboardError(f"Dashboard file not found: {path}")

    # Binary stream: PyYAML detects the encoding and reports bad bytes as ReaderError.
    try:
        with open(path, "rb") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise DashboardError(f"Invalid YAML in {path}: {exc}") from exc
    except OSError as exc:
        raise DashboardError(f"Cannot read dashboard file {path}: {exc}") from exc

    logger.debug("Loaded dashboard content from %s", path)
    return parse_dashboard(data)
