"""
Pydantic models for award state.

The award catalog is closed: every kind has exactly one row in
AWARD_DEFAULTS and one update rule in rules.award.AWARD_RULES.
"""

from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, model_validator


# -----------------------------------------------------------------------------
# Bounds
# -----------------------------------------------------------------------------

MIN_QUALITY = 0
MAX_QUALITY = 50
MIN_EXPIRES_IN = 0
PINNED_QUALITY = 80  # Blue Distinction Plus never moves off this


# -----------------------------------------------------------------------------
# Enums
# -----------------------------------------------------------------------------

class AwardKind(str, Enum):
    GOV_QUALITY_PLUS = "Gov_Quality_Plus"
    BLUE_FIRST = "Blue_First"
    ACME_PARTNER_FACILITY = "Acme_Partner_Facility"
    BLUE_DISTINCTION_PLUS = "Blue_Distinction_Plus"
    BLUE_COMPARE = "Blue_Compare"
    TOP_CONNECTED_PROVIDERS = "Top_Connected_Providers"
    BLUE_STAR = "Blue_Star"


# -----------------------------------------------------------------------------
# Initial values
# -----------------------------------------------------------------------------

class AwardDefaults(BaseModel):
    """Starting state and per-day factors for one award kind."""
    model_config = ConfigDict(frozen=True)

    expires_in: int
    quality: int
    decrement_factor: int = -1
    post_expiration_decrement_factor: int = -1


AWARD_DEFAULTS: dict[AwardKind, AwardDefaults] = {
    AwardKind.GOV_QUALITY_PLUS: AwardDefaults(expires_in=10, quality=20),
    # Grows toward the cap, nothing extra after expiry
    AwardKind.BLUE_FIRST: AwardDefaults(
        expires_in=2, quality=0,
        decrement_factor=1, post_expiration_decrement_factor=0,
    ),
    AwardKind.ACME_PARTNER_FACILITY: AwardDefaults(expires_in=5, quality=7),
    # Never expires, never changes
    AwardKind.BLUE_DISTINCTION_PLUS: AwardDefaults(
        expires_in=0, quality=PINNED_QUALITY,
        decrement_factor=0, post_expiration_decrement_factor=0,
    ),
    # Grows faster as expiry nears, drops to zero once expired
    AwardKind.BLUE_COMPARE: AwardDefaults(
        expires_in=15, quality=20,
        decrement_factor=1, post_expiration_decrement_factor=0,
    ),
    AwardKind.TOP_CONNECTED_PROVIDERS: AwardDefaults(expires_in=3, quality=6),
    # Decays at double the default rate
    AwardKind.BLUE_STAR: AwardDefaults(
        expires_in=10, quality=30,
        decrement_factor=-2, post_expiration_decrement_factor=-2,
    ),
}


# -----------------------------------------------------------------------------
# Award
# -----------------------------------------------------------------------------

class Award(BaseModel):
    """
    An award with a quality score and an expiration countdown.

    Kind, name and factors are fixed at creation. Quality and
    expires_in only change through rules.award.advance_one_day; any
    assignment that leaves them out of range is rejected.
    """
    model_config = ConfigDict(validate_assignment=True)

    kind: AwardKind = Field(frozen=True)
    name: str = Field(frozen=True)
    quality: int
    expires_in: int = Field(ge=MIN_EXPIRES_IN)
    decrement_factor: int = Field(default=-1, frozen=True)
    post_expiration_decrement_factor: int = Field(default=-1, frozen=True)

    @model_validator(mode="after")
    def _check_bounds(self) -> "Award":
        if self.kind == AwardKind.BLUE_DISTINCTION_PLUS:
            if self.quality != PINNED_QUALITY or self.expires_in != MIN_EXPIRES_IN:
                raise ValueError(
                    f"{self.name} is pinned at quality {PINNED_QUALITY} "
                    f"and {MIN_EXPIRES_IN} days"
                )
        elif not MIN_QUALITY <= self.quality <= MAX_QUALITY:
            raise ValueError(
                f"quality {self.quality} outside {MIN_QUALITY}..{MAX_QUALITY}"
            )
        return self

    @property
    def never_expires(self) -> bool:
        """Blue Distinction Plus sits at zero days but is not expired."""
        return self.kind == AwardKind.BLUE_DISTINCTION_PLUS

    @property
    def is_expired(self) -> bool:
        return self.expires_in <= MIN_EXPIRES_IN and not self.never_expires
