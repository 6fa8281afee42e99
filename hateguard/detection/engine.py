"""Scoring engine: turns a piece of text into a hate speech verdict.

The deterministic part is a keyword match over the lowercased text. A
uniform jitter term stands in for the residual uncertainty of a real
classifier. The random source is injectable so callers can pin it; a real
model can replace ``toxicity_score`` without changing the output contract.
"""

from __future__ import annotations

import logging
import random
from typing import Optional, Protocol

from hateguard.detection.models import (
    FEATURE_VOCABULARY,
    AnalysisInput,
    AnalysisResult,
    Prediction,
    RiskLevel,
)
from hateguard.errors import EmptyInputError

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Decision constants
# ---------------------------------------------------------------------------

HATE_KEYWORDS: tuple[str, ...] = ("hate", "stupid", "idiot", "kill", "die", "worst")

KEYWORD_WEIGHT = 20.0
JITTER_RANGE = 30.0

HATE_THRESHOLD = 40.0
HIGH_RISK_THRESHOLD = 60.0
MEDIUM_RISK_THRESHOLD = 30.0

CONFIDENCE_FLOOR = 85.0
CONFIDENCE_SPREAD = 15.0
CONFIDENCE_CAP = 99.0

POSITIVE_FEATURE_COUNT = 3
NEGATIVE_FEATURE_COUNT = 1


class RandomSource(Protocol):
    """Anything with a ``random()`` method returning a float in [0, 1)."""

    def random(self) -> float: ...


def risk_level_for(score: float) -> RiskLevel:
    """Map a toxicity score to its tier. Thresholds are exclusive."""
    if score > HIGH_RISK_THRESHOLD:
        return RiskLevel.HIGH
    if score > MEDIUM_RISK_THRESHOLD:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


def matched_keywords(text: str) -> list[str]:
    """Return the distinct keywords occurring as substrings of *text*."""
    normalized = text.lower()
    return [kw for kw in HATE_KEYWORDS if kw in normalized]


class ScoringEngine:
    """Stateless hate speech scorer with an injectable random source.

    Parameters
    ----------
    rng : RandomSource | None
        Source of uniform draws. Defaults to a fresh ``random.Random``
        seeded with *seed*.
    seed : int | None
        Seed for the default generator; ignored when *rng* is given.
    """

    def __init__(self, rng: Optional[RandomSource] = None, seed: Optional[int] = None) -> None:
        self._rng = rng if rng is not None else random.Random(seed)

    # -- scoring -------------------------------------------------------------

    def keyword_score(self, text: str) -> float:
        return KEYWORD_WEIGHT * len(matched_keywords(text))

    def toxicity_score(self, text: str) -> float:
        """Keyword weight plus one jitter draw in [0, JITTER_RANGE)."""
        return self.keyword_score(text) + self._rng.random() * JITTER_RANGE

    def confidence(self) -> float:
        return min(CONFIDENCE_FLOOR + self._rng.random() * CONFIDENCE_SPREAD, CONFIDENCE_CAP)

    # -- public API ----------------------------------------------------------

    def analyze(self, text: str | AnalysisInput) -> AnalysisResult:
        """Score *text* and return a fresh AnalysisResult.

        Raises EmptyInputError for empty or whitespace-only input before
        any random draw is made.
        """
        request = text if isinstance(text, AnalysisInput) else AnalysisInput(text=text or "")
        if request.is_blank:
            logger.info("Rejected empty input")
            raise EmptyInputError()

        score = self.toxicity_score(request.text)
        confidence = self.confidence()

        prediction = (
            Prediction.HATE_SPEECH_DETECTED if score > HATE_THRESHOLD else Prediction.SAFE_CONTENT
        )
        count = POSITIVE_FEATURE_COUNT if prediction.is_positive else NEGATIVE_FEATURE_COUNT

        result = AnalysisResult(
            prediction=prediction,
            confidence=confidence,
            risk_level=risk_level_for(score),
            triggered_features=FEATURE_VOCABULARY[:count],
        )
        logger.debug(
            "Verdict %s (risk=%s) for %d chars",
            result.prediction.value,
            result.risk_level.value,
            len(request.text),
        )
        return result


_shared_engines: dict[Optional[int], ScoringEngine] = {}


def get_default_engine(seed: Optional[int] = None) -> ScoringEngine:
    """Return the shared engine for *seed*, creating it on first use.

    The engine reads no settings itself; callers resolve the seed (for
    instance from ``HATEGUARD_SEED``) and pass it in.
    """
    if seed not in _shared_engines:
        _shared_engines[seed] = ScoringEngine(seed=seed)
    return _shared_engines[seed]


def analyze(text: str | AnalysisInput) -> AnalysisResult:
    """Analyze *text* with the default engine."""
    return get_default_engine().analyze(text)
