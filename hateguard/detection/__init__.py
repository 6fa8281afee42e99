"""Hate speech scoring engine and its result types."""

from hateguard.detection.engine import (
    HATE_KEYWORDS,
    ScoringEngine,
    analyze,
    get_default_engine,
    matched_keywords,
    risk_level_for,
)
from hateguard.detection.models import (
    FEATURE_VOCABULARY,
    AnalysisInput,
    AnalysisResult,
    FeatureFlag,
    Prediction,
    RiskLevel,
)
from hateguard.errors import EmptyInputError

__all__ = [
    "HATE_KEYWORDS",
    "FEATURE_VOCABULARY",
    "AnalysisInput",
    "AnalysisResult",
    "EmptyInputError",
    "FeatureFlag",
    "Prediction",
    "RiskLevel",
    "ScoringEngine",
    "analyze",
    "get_default_engine",
    "matched_keywords",
    "risk_level_for",
]
