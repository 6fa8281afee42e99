"""Detector router -- live text analysis with the scoring engine."""

from __future__ import annotations

import asyncio

from fastapi import APIRouter, HTTPException

from hateguard.config import get_settings
from hateguard.detection import get_default_engine
from hateguard.errors import ConfigError, EmptyInputError

from web.backend.app.models.api import AnalysisResultResponse, AnalyzeTextRequest

router = APIRouter(tags=["detector"])


@router.post(
    "/api/analyze",
    response_model=AnalysisResultResponse,
    summary="Analyze text for hate speech",
)
async def analyze_text(request: AnalyzeTextRequest):
    """Score the submitted text and return the verdict.

    Empty or whitespace-only text is a validation failure (422); the
    client should prompt the user to enter some text and retry.
    """
    try:
        settings = get_settings()
    except ConfigError as exc:
        raise HTTPException(status_code=500, detail=str(exc))

    try:
        result = get_default_engine(settings.seed).analyze(request.text)
    except EmptyInputError as exc:
        raise HTTPException(status_code=422, detail=str(exc))

    if settings.latency_seconds:
        await asyncio.sleep(settings.latency_seconds)

    return AnalysisResultResponse(**result.to_dict())
