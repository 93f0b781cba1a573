"""
Analysis router — text ingredient analysis and the built-in samples.

Endpoints:
  POST /analyze                      — analyse a raw ingredient list
  GET  /samples                      — list sample products
  POST /samples/{sample_id}/analyze  — analyse a sample product

Preferences come from the request body when given, otherwise from the
session named by the optional X-Session-ID header, otherwise defaults.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Header, HTTPException, status

from labelwise.schemas.analysis import AnalysisResult, AnalyzeRequest, SampleProduct
from labelwise.schemas.preferences import DEFAULT_PREFERENCES, UserPreferences
from labelwise.services.analysis import analyze
from labelwise.services.preferences_store import preferences_store
from labelwise.utils.reference_data import SAMPLE_PRODUCTS, SAMPLES_BY_ID

logger = logging.getLogger(__name__)

router = APIRouter(tags=["analysis"])


def session_preferences(session_id: Optional[str]) -> UserPreferences:
    """Stored preferences for the session, or defaults when no session is given."""
    if not session_id:
        return DEFAULT_PREFERENCES
    return preferences_store.get(session_id)


@router.post("/analyze", response_model=AnalysisResult)
async def analyze_ingredients(
    body: AnalyzeRequest,
    x_session_id: Optional[str] = Header(default=None, alias="X-Session-ID"),
) -> AnalysisResult:
    """
    Classify every ingredient and build the verdict.
    Non-food input → 422 INVALID_INPUT; nothing parseable → 422 EMPTY_INGREDIENT_LIST.
    """
    prefs = body.preferences or session_preferences(x_session_id)
    return analyze(body.ingredient_list, prefs)


@router.get("/samples", response_model=list[SampleProduct])
async def list_samples() -> list[SampleProduct]:
    return list(SAMPLE_PRODUCTS)


@router.post("/samples/{sample_id}/analyze", response_model=AnalysisResult)
async def analyze_sample(
    sample_id: str,
    x_session_id: Optional[str] = Header(default=None, alias="X-Session-ID"),
) -> AnalysisResult:
    sample = SAMPLES_BY_ID.get(sample_id)
    if sample is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown sample '{sample_id}'",
        )
    return analyze(sample.ingredient_list, session_preferences(x_session_id))
