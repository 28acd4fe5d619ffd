"""Current-date providers.

The development guide's troubleshooting footer carries a "Last Updated" date.
It is the only value in the generated output that does not come from the
``ProjectConfig``, so it is read through an explicit ``Clock`` that callers
(and tests) can replace.
"""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Callable

Clock = Callable[[], date]


def system_clock() -> date:
    """Today's date in UTC."""
    return datetime.now(timezone.utc).date()


def fixed_clock(day: date) -> Clock:
    """Return a clock that always reports *day*."""

    def _clock() -> date:
        return day

    return _clock
