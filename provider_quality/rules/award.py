"""
Award update rules as pure functions.

These functions operate on Award data without being methods on the model.
Each kind's daily rule lives in AWARD_RULES; adding a kind means adding a
row to AWARD_DEFAULTS and a rule here.
"""

from __future__ import annotations

import re
from typing import Callable

from ..errors import InvalidAwardKindError
from ..state.schema import (
    Award,
    AwardKind,
    AWARD_DEFAULTS,
    MAX_QUALITY,
    MIN_QUALITY,
    MIN_EXPIRES_IN,
)


_NON_ALPHANUMERIC = re.compile(r"[^A-Za-z0-9]+")

# Days-remaining thresholds below which Blue Compare gains extra quality
BLUE_COMPARE_SECOND_STEP = 11
BLUE_COMPARE_THIRD_STEP = 6


def derive_award_name(kind: AwardKind) -> str:
    """
    Turn a kind's identifier into its display name.

    Runs of non-alphanumeric characters collapse to a single space,
    so "Blue_First" becomes "Blue First".
    """
    identifier = kind.value if isinstance(kind, AwardKind) else str(kind)
    return _NON_ALPHANUMERIC.sub(" ", identifier)


def _coerce_kind(kind: AwardKind | str) -> AwardKind:
    try:
        return AwardKind(kind)
    except ValueError as exc:
        raise InvalidAwardKindError(kind) from exc


def create_award(kind: AwardKind | str) -> Award:
    """
    Create an award with the starting values for its kind.

    Args:
        kind: An AwardKind or its identifier, e.g. "Blue_Star"

    Returns:
        A fresh Award

    Raises:
        InvalidAwardKindError: If kind is not in the award catalog
    """
    award_kind = _coerce_kind(kind)
    defaults = AWARD_DEFAULTS.get(award_kind)
    if defaults is None:
        raise InvalidAwardKindError(award_kind)

    return Award(
        kind=award_kind,
        name=derive_award_name(award_kind),
        **defaults.model_dump(),
    )


# -----------------------------------------------------------------------------
# Per-kind rules
#
# Each rule takes the award (after the day's countdown) and returns the
# unclamped quality for the day. The award itself is only written once,
# with the clamped result.
# -----------------------------------------------------------------------------

def _apply_default_decay(award: Award) -> int:
    """Lose quality daily, and lose it twice as fast once expired."""
    quality = award.quality
    if quality > MIN_QUALITY:
        quality += award.decrement_factor
    # Re-checked against the already-decayed quality
    if award.expires_in <= MIN_EXPIRES_IN and quality > MIN_QUALITY:
        quality += award.post_expiration_decrement_factor
    return quality


def _apply_blue_compare(award: Award) -> int:
    """Gain quality faster as expiry nears, then drop to zero."""
    if award.expires_in <= MIN_EXPIRES_IN:
        return MIN_QUALITY

    quality = award.quality
    if quality < MAX_QUALITY:
        quality += award.decrement_factor
        if award.expires_in < BLUE_COMPARE_SECOND_STEP and quality < MAX_QUALITY:
            quality += award.decrement_factor
        if award.expires_in < BLUE_COMPARE_THIRD_STEP and quality < MAX_QUALITY:
            quality += award.decrement_factor
    return quality


def _apply_blue_first(award: Award) -> int:
    """Gain quality daily until the cap."""
    if award.quality < MAX_QUALITY:
        return award.quality + award.decrement_factor
    return award.quality


AwardRule = Callable[[Award], int]

AWARD_RULES: dict[AwardKind, AwardRule] = {
    AwardKind.GOV_QUALITY_PLUS: _apply_default_decay,
    AwardKind.ACME_PARTNER_FACILITY: _apply_default_decay,
    AwardKind.TOP_CONNECTED_PROVIDERS: _apply_default_decay,
    AwardKind.BLUE_STAR: _apply_default_decay,
    AwardKind.BLUE_COMPARE: _apply_blue_compare,
    AwardKind.BLUE_FIRST: _apply_blue_first,
}


def clamp_quality(kind: AwardKind, quality: int) -> int:
    """
    Pull a quality value back inside the bounds for its kind.

    Quality is capped at MAX_QUALITY for every kind except Blue
    Distinction Plus, and floored at MIN_QUALITY for all kinds.
    """
    if quality > MAX_QUALITY and kind != AwardKind.BLUE_DISTINCTION_PLUS:
        quality = MAX_QUALITY
    return max(quality, MIN_QUALITY)


def advance_one_day(award: Award) -> None:
    """
    Advance an award by one simulated day.

    Mutates the award in place. Calling it twice advances two days.

    Args:
        award: The award to update

    Raises:
        InvalidAwardKindError: If the award's kind has no update rule
    """
    if award.kind == AwardKind.BLUE_DISTINCTION_PLUS:
        return

    rule = AWARD_RULES.get(award.kind)
    if rule is None:
        raise InvalidAwardKindError(award.kind)

    if award.expires_in > MIN_EXPIRES_IN:
        award.expires_in -= 1

    award.quality = clamp_quality(award.kind, rule(award))
