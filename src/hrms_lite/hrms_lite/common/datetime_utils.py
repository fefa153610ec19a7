from __future__ import annotations

import threading
from datetime import date, datetime

from ..core.constants import EMPLOYEE_ID_PREFIX


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def now_millis() -> int:
    return int(now_local().timestamp() * 1000)


class EmployeeIdGenerator:
    """Generate ids like ``EMP1704441600000`` from the current time in milliseconds.

    Ids never repeat within a process: when the clock has not advanced since the
    previous call, the last value is bumped by one.
    """

    def __init__(self, *, prefix: str = EMPLOYEE_ID_PREFIX, clock=now_millis):
        self._prefix = prefix
        self._clock = clock
        self._last = 0
        self._lock = threading.Lock()

    def __call__(self) -> str:
        with self._lock:
            value = max(int(self._clock()), self._last + 1)
            self._last = value
        return f"{self._prefix}{value}"
