# tracc/util/timeparse.py
from __future__ import annotations

import datetime as dt
from typing import Any, Optional

# Stored timestamps are naive local wall-clock times.
TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S"


def now_local() -> dt.datetime:
    return dt.datetime.now().replace(microsecond=0)


def format_timestamp(t: dt.datetime) -> str:
    return t.strftime(TIMESTAMP_FORMAT)


def parse_timestamp(s: str) -> dt.datetime:
    """Parse a stored timestamp.

    Accepts the canonical ``YYYY-MM-DDTHH:MM:SS`` form and, leniently, any
    ISO 8601 string ``datetime.fromisoformat`` understands. Aware values are
    converted to local time and made naive so they compare with ``now_local()``.
    """
    if not isinstance(s, str) or not s.strip():
        raise ValueError(f"Invalid timestamp: {s!r}")
    ss = s.strip()
    try:
        t = dt.datetime.strptime(ss, TIMESTAMP_FORMAT)
    except ValueError:
        try:
            t = dt.datetime.fromisoformat(ss.replace("Z", "+00:00"))
        except ValueError as ex:
            raise ValueError(f"Invalid timestamp: {s!r}") from ex
    if t.tzinfo is not None:
        t = t.astimezone().replace(tzinfo=None)
    return t


def try_parse_timestamp(v: Any) -> Optional[dt.datetime]:
    if not isinstance(v, str):
        return None
    try:
        return parse_timestamp(v)
    except ValueError:
        return None


def format_hhmm(t: dt.datetime) -> str:
    return t.strftime("%H:%M")
