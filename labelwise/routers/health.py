"""Health check endpoints — used by load balancers and uptime monitoring."""

from __future__ import annotations

import asyncio
import logging

from fastapi import APIRouter

from labelwise.services.ocr import tesseract_available

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict:
    """Liveness probe — returns 200 if the process is running."""
    return {"status": "ok", "version": "1.0.0"}


@router.get("/ready")
async def ready() -> dict:
    """
    Readiness probe. Text analysis has no external dependencies, so this is
    always 200; a missing Tesseract binary only disables POST /scan and is
    reported as {"ocr": "unavailable"}.
    """
    ocr_ok = await asyncio.to_thread(tesseract_available)
    return {"analysis": "ok", "ocr": "ok" if ocr_ok else "unavailable"}
