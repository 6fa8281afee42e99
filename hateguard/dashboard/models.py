"""Data models for the static dashboard content."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ModelMetrics:
    """Headline evaluation figures, as percentages."""

    accuracy: float
    precision: float
    recall: float
    f1_score: float

    def as_rows(self) -> list[tuple[str, float]]:
        return [
            ("Accuracy", self.accuracy),
            ("Precision", self.precision),
            ("Recall", self.recall),
            ("F1-Score", self.f1_score),
        ]


@dataclass(frozen=True)
class FeatureImportance:
    name: str
    description: str
    importance: float  # percentage


@dataclass(frozen=True)
class MethodologyStep:
    order: int
    title: str
    description: str


@dataclass(frozen=True)
class QuickStats:
    texts_analyzed_today: int
    hate_speech_detected: int
    model_uptime: float  # percentage


@dataclass(frozen=True)
class Dashboard:
    """Everything the presentation layer shows besides the live verdict."""

    model_metrics: ModelMetrics
    quick_stats: QuickStats
    feature_engineering: list[FeatureImportance] = field(default_factory=list)
    methodology: list[MethodologyStep] = field(default_factory=list)
    training_details: dict[str, str] = field(default_factory=dict)
    model_architecture: dict[str, str] = field(default_factory=dict)
    preprocessing: list[str] = field(default_factory=list)
    advanced_features: list[str] = field(default_factory=list)
