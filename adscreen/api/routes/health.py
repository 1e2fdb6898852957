"""
Health Check Route — GET /health
"""

from __future__ import annotations

from fastapi import APIRouter

from adscreen.config import settings

router = APIRouter()


@router.get("/health")
async def health():
    """Health check endpoint."""
    return {
        "status": "ok",
        "version": "1.0.0",
        "engine": "deterministic-rules",
        "image_classifier": settings.image_classifier,
    }
