"""Dashboard router -- static metrics, methodology, features and stats."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from hateguard.dashboard import Dashboard, load_dashboard
from hateguard.errors import HateGuardError

from web.backend.app.models.api import (
    FeatureImportanceResponse,
    FeaturesResponse,
    MethodologyResponse,
    MethodologyStepResponse,
    MetricsResponse,
    ModelMetricsResponse,
    QuickStatsResponse,
)

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


def _load() -> Dashboard:
    """Load the dashboard content or raise 500."""
    try:
        return load_dashboard()
    except HateGuardError as exc:
        raise HTTPException(status_code=500, detail=str(exc))


@router.get("/metrics", response_model=MetricsResponse, summary="Model metrics")
async def get_metrics():
    dash = _load()
    m = dash.model_metrics
    return MetricsResponse(
        model_metrics=ModelMetricsResponse(
            accuracy=m.accuracy,
            precision=m.precision,
            recall=m.recall,
            f1_score=m.f1_score,
        ),
        training_details=dash.training_details,
        model_architecture=dash.model_architecture,
    )


@router.get("/methodology", response_model=MethodologyResponse, summary="Pipeline steps")
async def get_methodology():
    dash = _load()
    return MethodologyResponse(
        steps=[
            MethodologyStepResponse(order=s.order, title=s.title, description=s.description)
            for s in dash.methodology
        ]
    )


@router.get("/features", response_model=FeaturesResponse, summary="Feature engineering")
async def get_features():
    dash = _load()
    return FeaturesResponse(
        feature_engineering=[
            FeatureImportanceResponse(name=f.name, description=f.description, importance=f.importance)
            for f in dash.feature_engineering
        ],
        preprocessing=dash.preprocessing,
        advanced_features=dash.advanced_features,
    )


@router.get("/stats", response_model=QuickStatsResponse, summary="Quick stats")
async def get_stats():
    qs = _load().quick_stats
    return QuickStatsResponse(
        texts_analyzed_today=qs.texts_analyzed_today,
        hate_speech_detected=qs.hate_speech_detected,
        model_uptime=qs.model_uptime,
    )
