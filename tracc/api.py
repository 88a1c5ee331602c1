"""tracc.api

Stable *library* entrypoint for tracc.

Policy:
  - Only names listed in __all__ are considered public API.
  - Everything else is internal and may change without notice.
"""

from __future__ import annotations

from tracc.listview import EditableList, ListEntry
from tracc.model import TimeEntry, TodoEntry
from tracc.persistence import load_times, load_todos, save
from tracc.session import Focus, Mode, Session
from tracc.timesheet import (
    PAUSE_LABEL,
    durations_by_adjacent_pair,
    grouped_durations,
    maybe_synthetic_end,
    normalize_label,
    pause_total,
    shift_time,
    summary_lines,
    total_excluding_pause,
)
from tracc.util.duration import format_duration


# --- Public API exports (locked by contract tests) ------------------------
# Keep changes intentional and reviewable.
_PUBLIC_EXPORTS = (
    "EditableList",
    "Focus",
    "ListEntry",
    "Mode",
    "PAUSE_LABEL",
    "Session",
    "TimeEntry",
    "TodoEntry",
    "durations_by_adjacent_pair",
    "format_duration",
    "grouped_durations",
    "load_times",
    "load_todos",
    "maybe_synthetic_end",
    "normalize_label",
    "pause_total",
    "save",
    "shift_time",
    "summary_lines",
    "total_excluding_pause",
)

__all__ = [n for n in _PUBLIC_EXPORTS if n in globals()]
# --- /Public API exports --------------------------------------------------
