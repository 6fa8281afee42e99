"""Static dashboard content: metrics, methodology and feature importances."""

from hateguard.dashboard.loader import BUNDLED_PATH, load_dashboard, parse_dashboard
from hateguard.dashboard.models import (
    Dashboard,
    FeatureImportance,
    MethodologyStep,
    ModelMetrics,
    QuickStats,
)

__all__ = [
    "BUNDLED_PATH",
    "Dashboard",
    "FeatureImportance",
    "MethodologyStep",
    "ModelMetrics",
    "QuickStats",
    "load_dashboard",
    "parse_dashboard",
]
