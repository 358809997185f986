"""Clock abstractions so occupancy timers can be tested deterministically."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Protocol


class Clock(Protocol):
    """A source of the current time."""

    def now(self) -> datetime:
        ...


@dataclass(frozen=True)
class SystemClock:
    """Current system time in UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


@dataclass
class FixedClock:
    """Clock pinned to a given time. ``advance`` moves it forward."""

    fixed_time: datetime

    def now(self) -> datetime:
        if self.fixed_time.tzinfo is None:
            return self.fixed_time.replace(tzinfo=timezone.utc)
        return self.fixed_time

    def advance(self, **kwargs: float) -> None:
        """Move the clock forward, e.g. ``advance(minutes=5)``."""
        self.fixed_time = self.now() + timedelta(**kwargs)
