# tracc/persistence.py
"""JSON load/save for both entry kinds.

Files are a JSON array with one object per entry:
  todos: [{"text": "...", "done": false}, ...]
  times: [{"text": "...", "time": "2024-05-01T08:00:00"}, ...]

Loading is forgiving (anything unusable reads as absent). Saving is not: if the
file cannot be written the process exits with the serialized data in the
message, so no edits are lost silently.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, List, Optional, Sequence, TypeVar, Union

from .model import TimeEntry, TodoEntry
from .util.console import eprint, obs_enabled

try:
    import orjson  # type: ignore
except Exception:  # pragma: no cover
    orjson = None  # type: ignore

PathLike = Union[str, Path]
E = TypeVar("E", TodoEntry, TimeEntry)


def _read_array(path: PathLike) -> Optional[List[Any]]:
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None
    except OSError as ex:
        if obs_enabled():
            eprint(f"[tracc.persistence] WARN: cannot read {str(p)!r}: {ex}")
        return None
    try:
        raw = json.loads(text)
    except ValueError as ex:
        if obs_enabled():
            eprint(f"[tracc.persistence] WARN: malformed JSON in {str(p)!r}: {ex}")
        return None
    if not isinstance(raw, list):
        if obs_enabled():
            eprint(f"[tracc.persistence] WARN: {str(p)!r} is not a JSON array")
        return None
    return raw


def _load(path: PathLike, parse: Callable[[Any], Optional[E]]) -> Optional[List[E]]:
    raw = _read_array(path)
    if raw is None:
        return None
    out: List[E] = []
    for i, rec in enumerate(raw):
        entry = parse(rec)
        if entry is None:
            if obs_enabled():
                eprint(f"[tracc.persistence] WARN: bad record #{i} in {str(path)!r}: {rec!r}")
            return None
        out.append(entry)
    return out


def load_todos(path: PathLike) -> Optional[List[TodoEntry]]:
    return _load(path, TodoEntry.from_json)


def load_times(path: PathLike) -> Optional[List[TimeEntry]]:
    return _load(path, TimeEntry.from_json)


def dumps_entries(entries: Sequence[Union[TodoEntry, TimeEntry]]) -> str:
    records = [e.to_json() for e in entries]
    if orjson is not None:
        return orjson.dumps(records).decode("utf-8")
    return json.dumps(records, ensure_ascii=False, separators=(",", ":"))


def save(path: PathLike, entries: Sequence[Union[TodoEntry, TimeEntry]]) -> None:
    text = dumps_entries(entries)
    p = Path(path)
    try:
        p.write_text(text, encoding="utf-8")
    except OSError as ex:
        raise SystemExit(f"Can't save entries to {str(p)!r} ({ex}). Dumping raw data:\n{text}")
    if obs_enabled():
        eprint(f"[tracc.persistence] save.ok path={str(p)!r} entries={len(entries)}")


__all__ = [
    "dumps_entries",
    "load_times",
    "load_todos",
    "save",
]
