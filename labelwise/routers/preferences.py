"""
Session preferences — goal, tone and concern flags per X-Session-ID.

Endpoints:
  GET    /preferences/{session_id}  — current preferences (defaults when unknown)
  PATCH  /preferences/{session_id}  — partial update
  DELETE /preferences/{session_id}  — reset to defaults
"""

from __future__ import annotations

import logging

from fastapi import APIRouter

from labelwise.schemas.preferences import PreferencesPatch, UserPreferences
from labelwise.services.preferences_store import preferences_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/preferences", tags=["preferences"])


@router.get("/{session_id}", response_model=UserPreferences)
async def get_preferences(session_id: str) -> UserPreferences:
    return preferences_store.get(session_id)


@router.patch("/{session_id}", response_model=UserPreferences)
async def patch_preferences(session_id: str, body: PreferencesPatch) -> UserPreferences:
    """Only the fields present in the body change; the rest keep their stored values."""
    return preferences_store.apply_patch(session_id, body)


@router.delete("/{session_id}", response_model=UserPreferences)
async def reset_preferences(session_id: str) -> UserPreferences:
    logger.info("Preferences reset for session %s", session_id)
    return preferences_store.reset(session_id)
