"""Data models for the hate speech scoring engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from functools import total_ordering
from typing import Any


class Prediction(Enum):
    """Binary verdict returned by the engine."""

    HATE_SPEECH_DETECTED = "HateSpeechDetected"
    SAFE_CONTENT = "SafeContent"

    @property
    def label(self) -> str:
        return _PREDICTION_LABELS[self]

    @property
    def is_positive(self) -> bool:
        return self is Prediction.HATE_SPEECH_DETECTED


_PREDICTION_LABELS = {
    Prediction.HATE_SPEECH_DETECTED: "Hate Speech Detected",
    Prediction.SAFE_CONTENT: "Safe Content",
}


@total_ordering
class RiskLevel(Enum):
    """Ordered risk tier: LOW < MEDIUM < HIGH."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def rank(self) -> int:
        return _RISK_ORDER.index(self)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, RiskLevel):
            return NotImplemented
        return self.rank < other.rank


_RISK_ORDER = [RiskLevel.LOW, RiskLevel.MEDIUM, RiskLevel.HIGH]


class FeatureFlag(Enum):
    """Category of content issue attached to a verdict.

    Declaration order matters: verdicts report a prefix of this vocabulary.
    """

    PROFANITY_DETECTED = "profanity_detected"
    NEGATIVE_SENTIMENT = "negative_sentiment"
    PERSONAL_ATTACK = "personal_attack"

    @property
    def label(self) -> str:
        return self.value.replace("_", " ")


FEATURE_VOCABULARY: tuple[FeatureFlag, ...] = tuple(FeatureFlag)


@dataclass(frozen=True)
class AnalysisInput:
    """Text submitted for analysis."""

    text: str = ""

    @property
    def is_blank(self) -> bool:
        return not self.text.strip()


@dataclass(frozen=True)
class AnalysisResult:
    """Verdict for a single piece of text.

    Built once per engine call and never mutated. The toxicity score that
    produced it is not included.
    """

    prediction: Prediction
    confidence: float  # percentage, 0 - 100
    risk_level: RiskLevel
    triggered_features: tuple[FeatureFlag, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not 0.0 <= self.confidence <= 100.0:
            raise ValueError(f"confidence out of range: {self.confidence}")

    @property
    def is_hate_speech(self) -> bool:
        return self.prediction.is_positive

    def to_dict(self) -> dict[str, Any]:
        return {
            "prediction": self.prediction.value,
            "label": self.prediction.label,
            "confidence": self.confidence,
            "risk_level": self.risk_level.value,
            "triggered_features": [f.value for f in self.triggered_features],
        }
