"""Pydantic schemas for user preferences."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict

UserGoal = Literal[
    "normal-consumer",
    "fitness-focused",
    "health-conscious",
    "medical-sensitivity",
    "curious-learner",
]
TonePreference = Literal["simple", "balanced", "detailed"]

FLAG_FIELDS = (
    "flag_high_sugar",
    "flag_artificial_additives",
    "flag_preservatives",
    "flag_allergens",
)


class UserPreferences(BaseModel):
    """
    Immutable preference value threaded into every analysis call.
    Every "update" returns a new instance; nothing is mutated in place.
    """

    model_config = ConfigDict(frozen=True)

    goal: UserGoal = "normal-consumer"
    tone_preference: TonePreference = "balanced"
    flag_high_sugar: bool = False
    flag_artificial_additives: bool = False
    flag_preservatives: bool = False
    flag_allergens: bool = False

    def with_goal(self, goal: UserGoal) -> UserPreferences:
        return self.model_validate({**self.model_dump(), "goal": goal})

    def with_tone(self, tone: TonePreference) -> UserPreferences:
        return self.model_validate({**self.model_dump(), "tone_preference": tone})

    def with_flags(self, **flags: bool) -> UserPreferences:
        """Return a copy with the given boolean flags replaced."""
        unknown = set(flags) - set(FLAG_FIELDS)
        if unknown:
            raise ValueError(f"Unknown preference flags: {sorted(unknown)}")
        return self.model_validate({**self.model_dump(), **flags})

    @classmethod
    def defaults(cls) -> UserPreferences:
        return cls()


DEFAULT_PREFERENCES = UserPreferences()


class PreferencesPatch(BaseModel):
    """Body for PATCH /preferences/{session_id} — only given fields change."""

    goal: Optional[UserGoal] = None
    tone_preference: Optional[TonePreference] = None
    flag_high_sugar: Optional[bool] = None
    flag_artificial_additives: Optional[bool] = None
    flag_preservatives: Optional[bool] = None
    flag_allergens: Optional[bool] = None

    def flags(self) -> dict[str, bool]:
        """Return only the flag fields that were set."""
        return {
            name: getattr(self, name)
            for name in FLAG_FIELDS
            if getattr(self, name) is not None
        }
