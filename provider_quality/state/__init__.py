"""State models for awards."""

from .schema import (
    Award,
    AwardDefaults,
    AwardKind,
    AWARD_DEFAULTS,
    MAX_QUALITY,
    MIN_QUALITY,
    MIN_EXPIRES_IN,
    PINNED_QUALITY,
)

__all__ = [
    "Award",
    "AwardDefaults",
    "AwardKind",
    "AWARD_DEFAULTS",
    "MAX_QUALITY",
    "MIN_QUALITY",
    "MIN_EXPIRES_IN",
    "PINNED_QUALITY",
]
