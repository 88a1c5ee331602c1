# tracc/util/duration.py
from __future__ import annotations

import datetime as dt


def format_duration(d: dt.timedelta) -> str:
    """Render a duration as ``H:MM``.

    Whole hours, then the remaining minutes zero-padded to two digits.
    Seconds are dropped, so anything under a minute shows as ``0:00``.
    """
    secs = int(d.total_seconds())
    total_min = abs(secs) // 60
    sign = "-" if secs < 0 and total_min > 0 else ""
    return f"{sign}{total_min // 60}:{total_min % 60:02d}"
