# tracc/session.py
from __future__ import annotations

import datetime as dt
import enum
from pathlib import Path
from typing import Callable, List, Optional, Union

from .listview import EditableList
from .model import TimeEntry, TodoEntry
from .persistence import load_times, load_todos, save
from .timesheet import shift_time, summary_lines
from .util.timeparse import now_local

DEFAULT_TODO_TEXT = "This is a list entry"
DEFAULT_TIME_TEXT = "start"


class Mode(enum.Enum):
    NORMAL = "normal"
    EDIT = "edit"


class Focus(enum.Enum):
    TODOS = "todos"
    TIMES = "times"


Clock = Callable[[], dt.datetime]
ModeListener = Callable[[Mode], None]


def _by_time(e: TimeEntry) -> dt.datetime:
    return e.time


class Session:
    """Both lists plus the focus flag and the Normal/Edit mode.

    List operations go to whichever list has focus. The session never touches
    the terminal; UIs subscribe with on_mode_change() to react to transitions.
    """

    def __init__(
        self,
        todos: Optional[List[TodoEntry]] = None,
        times: Optional[List[TimeEntry]] = None,
        *,
        clock: Clock = now_local,
        todo_path: Union[str, Path, None] = None,
        time_path: Union[str, Path, None] = None,
    ) -> None:
        self.clock = clock
        if todos is None:
            todos = [TodoEntry(DEFAULT_TODO_TEXT)]
        if times is None:
            times = [TimeEntry(DEFAULT_TIME_TEXT, clock())]
        self.todos: EditableList[TodoEntry] = EditableList(todos)
        self.times: EditableList[TimeEntry] = EditableList(sorted(times, key=_by_time))
        self.focus = Focus.TODOS
        self.mode = Mode.NORMAL
        self.todo_path = todo_path
        self.time_path = time_path
        self._listeners: List[ModeListener] = []

    @classmethod
    def open(
        cls,
        todo_path: Union[str, Path],
        time_path: Union[str, Path],
        *,
        clock: Clock = now_local,
    ) -> "Session":
        return cls(
            load_todos(todo_path),
            load_times(time_path),
            clock=clock,
            todo_path=todo_path,
            time_path=time_path,
        )

    def persist(self) -> None:
        if self.todo_path is not None:
            save(self.todo_path, self.todos.items)
        if self.time_path is not None:
            save(self.time_path, self.times.items)

    # focus
    def focused(self) -> Union[EditableList[TodoEntry], EditableList[TimeEntry]]:
        return self.todos if self.focus is Focus.TODOS else self.times

    def switch_focus(self) -> None:
        self.focus = Focus.TIMES if self.focus is Focus.TODOS else Focus.TODOS

    # mode
    def on_mode_change(self, fn: ModeListener) -> None:
        self._listeners.append(fn)

    def _set_mode(self, mode: Mode) -> None:
        if mode is self.mode:
            return
        self.mode = mode
        for fn in list(self._listeners):
            fn(mode)

    def start_editing(self, insert: bool = False) -> None:
        if self.mode is Mode.EDIT:
            return
        if insert:
            if self.focus is Focus.TODOS:
                self.todos.insert_after(TodoEntry())
            else:
                self.times.insert_after(TimeEntry("", self.clock()))
        self._set_mode(Mode.EDIT)

    def commit(self) -> None:
        if self.mode is not Mode.EDIT:
            return
        self.focused().exit_edit_mode()
        if self.focus is Focus.TIMES:
            self.times.sort(key=_by_time)
        self._set_mode(Mode.NORMAL)

    # routed list operations
    def move_up(self) -> None:
        self.focused().move_up()

    def move_down(self) -> None:
        self.focused().move_down()

    def remove_current(self) -> None:
        self.focused().remove_current()

    def paste(self) -> None:
        self.focused().paste()

    def append(self, ch: str) -> None:
        self.focused().append(ch)

    def backspace(self) -> None:
        self.focused().backspace()

    def printable(self) -> List[str]:
        return self.focused().printable()

    def toggle_current(self) -> None:
        if self.focus is not Focus.TODOS:
            return
        cur = self.todos.current()
        if cur is not None:
            cur.toggle()

    def shift_current_time(self, delta_minutes: int) -> None:
        if self.focus is not Focus.TIMES:
            return
        cur = self.times.current()
        if cur is not None:
            shift_time(cur, delta_minutes)
            self.times.sort(key=_by_time)

    def summary(self, now: Optional[dt.datetime] = None) -> List[str]:
        return summary_lines(self.times.items, self.clock() if now is None else now)


__all__ = [
    "Focus",
    "Mode",
    "Session",
]
