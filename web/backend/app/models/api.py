"""Pydantic models for API request/response serialization.

These models mirror the HateGuard dataclasses and provide proper JSON
serialization for the FastAPI endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Detector models
# ---------------------------------------------------------------------------


class AnalyzeTextRequest(BaseModel):
    """Mirrors hateguard.detection.models.AnalysisInput."""

    text: str = ""


class AnalysisResultResponse(BaseModel):
    """Mirrors hateguard.detection.models.AnalysisResult."""

    prediction: str
    label: str
    confidence: float = Field(ge=0.0, le=100.0)
    risk_level: str
    triggered_features: list[str] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Dashboard models
# ---------------------------------------------------------------------------


class ModelMetricsResponse(BaseModel):
    """Mirrors hateguard.dashboard.models.ModelMetrics."""

    accuracy: float
    precision: float
    recall: float
    f1_score: float


class MetricsResponse(BaseModel):
    """Metrics tab: headline figures plus training and architecture details."""

    model_config = ConfigDict(protected_namespaces=())

    model_metrics: ModelMetricsResponse
    training_details: dict[str, str] = Field(default_factory=dict)
    model_architecture: dict[str, str] = Field(default_factory=dict)


class MethodologyStepResponse(BaseModel):
    """Mirrors hateguard.dashboard.models.MethodologyStep."""

    order: int
    title: str
    description: str = ""


class MethodologyResponse(BaseModel):
    steps: list[MethodologyStepResponse] = Field(default_factory=list)


class FeatureImportanceResponse(BaseModel):
    """Mirrors hateguard.dashboard.models.FeatureImportance."""

    name: str
    description: str = ""
    importance: float


class FeaturesResponse(BaseModel):
    """Features tab: importances and preprocessing checklists."""

    feature_engineering: list[FeatureImportanceResponse] = Field(default_factory=list)
    preprocessing: list[str] = Field(default_factory=list)
    advanced_features: list[str] = Field(default_factory=list)


class QuickStatsResponse(BaseModel):
    """Mirrors hateguard.dashboard.models.QuickStats."""

    model_config = ConfigDict(protected_namespaces=())

    texts_analyzed_today: int
    hate_speech_detected: int
    model_uptime: float
