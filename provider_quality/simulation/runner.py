"""Simulation driver and day snapshots."""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict, Field

from ..rules.award import advance_one_day, create_award
from ..state.schema import Award, AwardKind

logger = logging.getLogger(__name__)


class RankedAward(BaseModel):
    """One row of a day's ranking."""
    model_config = ConfigDict(frozen=True)

    rank: int = Field(ge=1)
    name: str
    quality: int
    expires_in: int


class DaySnapshot(BaseModel):
    """The ranked awards at the end of a simulated day."""
    model_config = ConfigDict(frozen=True)

    day: int
    rankings: list[RankedAward] = Field(default_factory=list)


class AwardSimulation:
    """
    Advances a fixed set of awards one day at a time.

    Awards are re-sorted, never re-created. Ordering is by quality,
    highest first; ties keep their order from the previous day.
    """

    def __init__(self, awards: list[Award]):
        self.awards = list(awards)
        self.day = 0

    @classmethod
    def default(cls) -> "AwardSimulation":
        """One award of every kind, in catalog order."""
        return cls([create_award(kind) for kind in AwardKind])

    def ranked(self) -> list[Award]:
        """Awards in their current display order."""
        return list(self.awards)

    def advance_day(self) -> list[Award]:
        """
        Advance every award once, then re-rank.

        Returns:
            The awards ordered by quality, descending
        """
        for award in self.awards:
            advance_one_day(award)

        # list.sort is stable, so equal quality keeps the prior order
        self.awards.sort(key=lambda award: award.quality, reverse=True)
        self.day += 1

        logger.debug(
            "Day %d: %s",
            self.day,
            ", ".join(f"{a.name}={a.quality}/{a.expires_in}" for a in self.awards),
        )
        return self.ranked()

    def snapshot(self) -> DaySnapshot:
        """Capture the current ranking."""
        return DaySnapshot(
            day=self.day,
            rankings=[
                RankedAward(
                    rank=i,
                    name=award.name,
                    quality=award.quality,
                    expires_in=award.expires_in,
                )
                for i, award in enumerate(self.awards, 1)
            ],
        )

    def run(self, days: int) -> list[DaySnapshot]:
        """
        Advance a fixed number of days without any input.

        Args:
            days: Number of days to simulate

        Returns:
            One snapshot per day, in order
        """
        if days < 0:
            raise ValueError(f"days must be non-negative, got {days}")

        snapshots = []
        for _ in range(days):
            self.advance_day()
            snapshots.append(self.snapshot())
        return snapshots
