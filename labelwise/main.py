"""
Labelwise — FastAPI application entry point.
Lifespan: log configuration → probe Tesseract so a missing binary shows up at boot.
"""

from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from labelwise.config import settings
from labelwise.routers import analysis, health, preferences, products, scan
from labelwise.services.aggregator import EmptyAnalysisError
from labelwise.services.ocr import tesseract_available
from labelwise.services.validator import ValidationError

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    logger.info("Starting Labelwise (env=%s)", settings.app_env)

    if await asyncio.to_thread(tesseract_available):
        logger.info("Tesseract OCR available.")
    else:
        logger.warning("Tesseract OCR unavailable — POST /scan will fall back to visual signals.")

    yield

    logger.info("Shutting down Labelwise.")


app = FastAPI(
    title="Labelwise",
    description="Food ingredient classification, verdicts and personalised insight.",
    version="1.0.0",
    lifespan=lifespan,
)

# ── CORS ─────────────────────────────────────────────────────────────────────

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ── Routers ──────────────────────────────────────────────────────────────────

app.include_router(health.router)
app.include_router(analysis.router)
app.include_router(products.router)
app.include_router(preferences.router)
app.include_router(scan.router)


# ── Exception handlers ───────────────────────────────────────────────────────

@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    """Input failed the food gate."""
    return JSONResponse(
        status_code=422,
        content={"detail": exc.reason, "code": "INVALID_INPUT"},
    )


@app.exception_handler(EmptyAnalysisError)
async def empty_analysis_handler(request: Request, exc: EmptyAnalysisError) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={"detail": str(exc), "code": "EMPTY_INGREDIENT_LIST"},
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return a machine-readable error for any unhandled exception."""
    logger.exception("Unhandled exception on %s %s", request.method, request.url)
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error", "code": "ANALYZER_UNAVAILABLE"},
    )
