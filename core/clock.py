"""
Clock abstraction used to resolve "today".

Services receive a Clock at construction and never read wall-clock time
themselves, so date resolution can be pinned in tests.
"""

from abc import ABC, abstractmethod
from datetime import date, datetime
from typing import Optional
from zoneinfo import ZoneInfo


class Clock(ABC):
    """Source of the current date"""

    @abstractmethod
    def today(self) -> date:
        raise NotImplementedError


class SystemClock(Clock):
    """Wall-clock time in a fixed timezone (canteens publish in local time)"""

    def __init__(self, timezone: Optional[str] = None):
        self._tz = ZoneInfo(timezone) if timezone else None

    def today(self) -> date:
        return datetime.now(self._tz).date()


class FixedClock(Clock):
    """Always returns the same date"""

    def __init__(self, fixed: date):
        if isinstance(fixed, datetime):
            fixed = fixed.date()
        self._fixed = fixed

    def today(self) -> date:
        return self._fixed
