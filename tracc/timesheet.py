# tracc/timesheet.py
from __future__ import annotations

import datetime as dt
import re
from typing import Dict, List, Optional, Sequence, Tuple

from .model import TimeEntry
from .util.duration import format_duration
from .util.timeparse import now_local

PAUSE_LABEL = "pause"
END_LABEL = "end"
PAUSE_SYNONYMS = frozenset({"pause", "lunch", "mittag", "break"})

SHIFT_STEP_MIN = 5

# Bracketed overrides; the first one with non-blank contents wins, e.g. "[focus] meeting".
_OVERRIDE_RE = re.compile(r"\[([^\[\]]+)\]")


def normalize_label(raw_text: str) -> str:
    label = raw_text
    for m in _OVERRIDE_RE.finditer(raw_text):
        if m.group(1).strip():
            label = m.group(1).strip()
            break
    if label.strip().lower() in PAUSE_SYNONYMS:
        return PAUSE_LABEL
    return label


def maybe_synthetic_end(
    entries: Sequence[TimeEntry],
    now: Optional[dt.datetime] = None,
) -> Optional[TimeEntry]:
    """Return a trailing "end" entry at `now` if the log is still open.

    No entry is produced when the log is empty, already ends in a pause or an
    explicit "end", or when the last timestamp lies in the future.
    """
    if not entries:
        return None
    now = now_local() if now is None else now
    last = entries[-1]
    label = normalize_label(last.text)
    if label in (PAUSE_LABEL, END_LABEL) or last.time > now:
        return None
    return TimeEntry(text=END_LABEL, time=now)


def durations_by_adjacent_pair(
    entries: Sequence[TimeEntry],
    now: Optional[dt.datetime] = None,
) -> List[Tuple[str, dt.timedelta]]:
    seq = list(entries)
    end = maybe_synthetic_end(seq, now)
    if end is not None:
        seq.append(end)
    return [(normalize_label(prev.text), nxt.time - prev.time) for prev, nxt in zip(seq, seq[1:])]


def grouped_durations(
    entries: Sequence[TimeEntry],
    now: Optional[dt.datetime] = None,
) -> Dict[str, dt.timedelta]:
    sums: Dict[str, dt.timedelta] = {}
    for label, d in durations_by_adjacent_pair(entries, now):
        sums[label] = sums.get(label, dt.timedelta(0)) + d
    # Ordered by label so repeated renders never reorder.
    return {label: sums[label] for label in sorted(sums)}


def total_excluding_pause(
    entries: Sequence[TimeEntry],
    now: Optional[dt.datetime] = None,
) -> dt.timedelta:
    total = dt.timedelta(0)
    for label, d in grouped_durations(entries, now).items():
        if label != PAUSE_LABEL:
            total += d
    return total


def pause_total(
    entries: Sequence[TimeEntry],
    now: Optional[dt.datetime] = None,
) -> dt.timedelta:
    return grouped_durations(entries, now).get(PAUSE_LABEL, dt.timedelta(0))


def shift_time(entry: TimeEntry, delta_minutes: int) -> None:
    t = entry.time + dt.timedelta(minutes=delta_minutes)
    entry.time = t - dt.timedelta(minutes=t.minute % SHIFT_STEP_MIN)


def summary_lines(
    entries: Sequence[TimeEntry],
    now: Optional[dt.datetime] = None,
) -> List[str]:
    now = now_local() if now is None else now
    grouped = grouped_durations(entries, now)
    lines = [f"{label}: {format_duration(d)}" for label, d in grouped.items() if label != PAUSE_LABEL]
    lines.append(f"Sum: {format_duration(total_excluding_pause(entries, now))}")
    lines.append(f"Pause: {format_duration(pause_total(entries, now))}")
    return lines


__all__ = [
    "END_LABEL",
    "PAUSE_LABEL",
    "PAUSE_SYNONYMS",
    "durations_by_adjacent_pair",
    "format_duration",
    "grouped_durations",
    "maybe_synthetic_end",
    "normalize_label",
    "pause_total",
    "shift_time",
    "summary_lines",
    "total_excluding_pause",
]
