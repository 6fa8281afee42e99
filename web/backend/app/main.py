"""FastAPI application for the HateGuard web portal.

Provides REST API endpoints wrapping the HateGuard Python package for:
- Live text analysis with the scoring engine
- Static dashboard content (metrics, methodology, features, quick stats)
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the hateguard package is importable by adding the project root to sys.path.
_project_root = str(Path(__file__).resolve().parents[3])
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hateguard import __version__
from web.backend.app.routers import dashboard, detector

app = FastAPI(
    title="HateGuard API",
    description=(
        "REST API for the HateGuard hate speech detection demo. "
        "Provides endpoints for text analysis and the model dashboard."
    ),
    version=__version__,
)

# ---------------------------------------------------------------------------
# CORS middleware (allow all origins for development)
# ---------------------------------------------------------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---------------------------------------------------------------------------
# Include routers
# ---------------------------------------------------------------------------
app.include_router(detector.router)
app.include_router(dashboard.router)


# ---------------------------------------------------------------------------
# Root and health-check endpoints
# ---------------------------------------------------------------------------


@app.get("/", tags=["meta"])
async def root():
    """Return basic API information."""
    return {
        "name": "HateGuard API",
        "version": __version__,
        "description": "Advanced Hate Speech Detection System REST API",
        "docs": "/docs",
        "openapi": "/openapi.json",
    }


@app.get("/health", tags=["meta"])
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
