"""Errors raised by the award engine."""

from __future__ import annotations

from typing import Any


class AwardError(Exception):
    """Base error for award processing."""
    pass


class InvalidAwardKindError(AwardError, ValueError):
    """Award kind is outside the closed award catalog."""
    def __init__(self, kind: Any):
        self.kind = kind
        super().__init__(
            f"Unknown award kind {kind!r}. "
            "Are you sure the award kind is part of the award catalog?"
        )
