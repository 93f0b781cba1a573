"""
In-process session store for user preferences.

Stored values are immutable UserPreferences; every update replaces the entry
with a new value. Sessions expire after `preferences_session_ttl` seconds of
not being written.
"""

from __future__ import annotations

import logging
import threading
from typing import Optional

from cachetools import TTLCache

from labelwise.config import settings
from labelwise.schemas.preferences import (
    DEFAULT_PREFERENCES,
    PreferencesPatch,
    TonePreference,
    UserGoal,
    UserPreferences,
)

logger = logging.getLogger(__name__)


class PreferencesStore:
    def __init__(self, maxsize: Optional[int] = None, ttl: Optional[float] = None) -> None:
        self._cache: TTLCache = TTLCache(
            maxsize=maxsize or settings.preferences_max_sessions,
            ttl=ttl or settings.preferences_session_ttl,
        )
        # TTLCache is not thread-safe and FastAPI runs sync routes in a threadpool
        self._lock = threading.Lock()

    def get(self, session_id: str) -> UserPreferences:
        with self._lock:
            return self._cache.get(session_id, DEFAULT_PREFERENCES)

    def _put(self, session_id: str, prefs: UserPreferences) -> UserPreferences:
        self._cache[session_id] = prefs
        return prefs

    def update_goal(self, session_id: str, goal: UserGoal) -> UserPreferences:
        with self._lock:
            current = self._cache.get(session_id, DEFAULT_PREFERENCES)
            return self._put(session_id, current.with_goal(goal))

    def update_tone(self, session_id: str, tone: TonePreference) -> UserPreferences:
        with self._lock:
            current = self._cache.get(session_id, DEFAULT_PREFERENCES)
            return self._put(session_id, current.with_tone(tone))

    def update_flags(self, session_id: str, **flags: bool) -> UserPreferences:
        with self._lock:
            current = self._cache.get(session_id, DEFAULT_PREFERENCES)
            return self._put(session_id, current.with_flags(**flags))

    def apply_patch(self, session_id: str, patch: PreferencesPatch) -> UserPreferences:
        """Apply every field set on the patch in one step."""
        with self._lock:
            prefs = self._cache.get(session_id, DEFAULT_PREFERENCES)
            if patch.goal is not None:
                prefs = prefs.with_goal(patch.goal)
            if patch.tone_preference is not None:
                prefs = prefs.with_tone(patch.tone_preference)
            flags = patch.flags()
            if flags:
                prefs = prefs.with_flags(**flags)
            logger.info("Preferences updated for session %s (goal=%s)", session_id, prefs.goal)
            return self._put(session_id, prefs)

    def reset(self, session_id: str) -> UserPreferences:
        with self._lock:
            self._cache.pop(session_id, None)
        return DEFAULT_PREFERENCES


# Module-level singleton
preferences_store = PreferencesStore()
