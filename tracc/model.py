# tracc/model.py
from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional

from .util.timeparse import format_hhmm, format_timestamp, now_local, try_parse_timestamp


@dataclass
class TodoEntry:
    text: str = ""
    done: bool = False

    def clone(self) -> "TodoEntry":
        return replace(self)

    def toggle(self) -> None:
        self.done = not self.done

    def __str__(self) -> str:
        return f"[{'x' if self.done else ' '}] {self.text}"

    def to_json(self) -> Dict[str, Any]:
        return {"text": self.text, "done": self.done}

    @classmethod
    def from_json(cls, raw: Any) -> Optional["TodoEntry"]:
        if not isinstance(raw, dict):
            return None
        text = raw.get("text")
        done = raw.get("done")
        if not isinstance(text, str) or not isinstance(done, bool):
            return None
        return cls(text=text, done=done)


@dataclass
class TimeEntry:
    text: str = ""
    time: dt.datetime = field(default_factory=now_local)

    def clone(self) -> "TimeEntry":
        return replace(self)

    def __str__(self) -> str:
        return f"[{format_hhmm(self.time)}] {self.text}"

    def to_json(self) -> Dict[str, Any]:
        return {"text": self.text, "time": format_timestamp(self.time)}

    @classmethod
    def from_json(cls, raw: Any) -> Optional["TimeEntry"]:
        if not isinstance(raw, dict):
            return None
        text = raw.get("text")
        t = try_parse_timestamp(raw.get("time"))
        if not isinstance(text, str) or t is None:
            return None
        return cls(text=text, time=t)


__all__ = [
    "TodoEntry",
    "TimeEntry",
]
