"""Pydantic models for the values this module computes itself.

Upstream documents (activities, wellness rows, curves) stay plain dicts; only
the fields the module inspects are read, by the helpers in ``activities``.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any

from pydantic import BaseModel, Field


class TimeWindow(BaseModel):
    """Date range used for one upstream query."""

    oldest: date
    newest: date
    lookback_days: int = Field(ge=1)

    def as_dict(self) -> dict:
        return {
            "oldest": self.oldest.isoformat(),
            "newest": self.newest.isoformat(),
            "lookback_days": self.lookback_days,
        }


class SourceCheck(BaseModel):
    """Outcome of the restricted-source heuristic for one activity."""

    isStrava: bool
    source: str | None = None
    message: str


@dataclass
class Attempt:
    """Outcome of a best-effort lookup: a value or the error that replaced it."""

    value: Any = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
