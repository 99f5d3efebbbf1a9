"""
Award rules as pure functions.

Separates logic from data models for easier testing.
"""

from .award import (
    AWARD_RULES,
    advance_one_day,
    clamp_quality,
    create_award,
    derive_award_name,
)

__all__ = [
    "AWARD_RULES",
    "advance_one_day",
    "clamp_quality",
    "create_award",
    "derive_award_name",
]
