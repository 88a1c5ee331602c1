# tracc/tui.py
"""curses front end: three stacked panes (todos, times, summary)."""

from __future__ import annotations

import curses
from typing import List, Optional, Sequence, Tuple, Union

from .session import Focus, Mode, Session

SHIFT_MIN = 5

KEY_ESC = 27
KEY_TAB = 9
ENTER_KEYS = (10, 13, curses.KEY_ENTER)
BACKSPACE_KEYS = (curses.KEY_BACKSPACE, 127, 8)

HELP_LINE = "j/k move  o new  a edit  d cut  p paste  space toggle  +/- shift  Tab focus  q quit"


def dispatch_key(session: Session, key: Union[int, str]) -> bool:
    """Apply one key press to the session. Returns False when the user quits.

    `key` is either a typed character (as returned by get_wch) or a curses key
    code. Key codes from KEY_MIN up are never treated as text.
    """
    if isinstance(key, str):
        ch, key = key, ord(key)
    else:
        ch = chr(key) if 0 <= key < curses.KEY_MIN else ""

    if session.mode is Mode.EDIT:
        if key in ENTER_KEYS or key == KEY_ESC:
            session.commit()
        elif key in BACKSPACE_KEYS:
            session.backspace()
        elif ch and ch.isprintable():
            session.append(ch)
        return True

    if key == ord("q"):
        return False
    if key in (ord("j"), curses.KEY_DOWN):
        session.move_down()
    elif key in (ord("k"), curses.KEY_UP):
        session.move_up()
    elif key == ord("o"):
        session.start_editing(insert=True)
    elif key in (ord("a"), ord("A"), ord("i")):
        session.start_editing()
    elif key == ord("d"):
        session.remove_current()
    elif key == ord("p"):
        session.paste()
    elif key == ord(" "):
        session.toggle_current()
    elif key == ord("+"):
        session.shift_current_time(SHIFT_MIN)
    elif key == ord("-"):
        session.shift_current_time(-SHIFT_MIN)
    elif key == KEY_TAB:
        session.switch_focus()
    return True


def layout(height: int) -> List[Tuple[int, int]]:
    """Split `height` rows 40/40/20 into (top, rows) pairs."""
    a = height * 40 // 100
    b = height * 40 // 100
    c = height - a - b
    return [(0, a), (a, b), (a + b, c)]


class TUI:
    def __init__(self, stdscr, session: Session):
        self.stdscr = stdscr
        self.session = session
        self.stdscr.keypad(True)
        self.has_colors = curses.has_colors()
        if self.has_colors:
            curses.start_color()
            try:
                curses.use_default_colors()
            except curses.error:
                pass
            curses.init_pair(1, curses.COLOR_GREEN, -1)
            self.COL_SELECTED = curses.color_pair(1) | curses.A_BOLD
        else:
            self.COL_SELECTED = curses.A_REVERSE
        self._set_cursor(session.mode)
        session.on_mode_change(self._set_cursor)

    def _set_cursor(self, mode: Mode) -> None:
        try:
            curses.curs_set(1 if mode is Mode.EDIT else 0)
        except curses.error:
            pass

    def _pane(
        self,
        top: int,
        rows: int,
        width: int,
        title: str,
        lines: Sequence[str],
        selected: Optional[int],
        active: bool,
    ) -> Optional[Tuple[int, int]]:
        if rows <= 0:
            return None
        title_attr = curses.A_BOLD if active else curses.A_DIM
        self.stdscr.hline(top, 0, curses.ACS_HLINE, width)
        self.stdscr.addnstr(top, 1, f" {title} ", max(width - 2, 0), title_attr)
        body = rows - 1
        if body <= 0:
            return None
        scroll = 0
        if selected is not None:
            scroll = max(0, selected - body + 1)
        cursor_pos = None
        for i, line in enumerate(lines[scroll : scroll + body]):
            idx = scroll + i
            y = top + 1 + i
            is_sel = selected is not None and idx == selected
            text = (">" if is_sel else " ") + line
            self.stdscr.addnstr(y, 0, text, max(width - 1, 0), self.COL_SELECTED if is_sel else curses.A_NORMAL)
            if is_sel:
                cursor_pos = (y, min(len(text), width - 1))
        return cursor_pos

    def draw(self) -> None:
        s = self.session
        self.stdscr.erase()
        height, width = self.stdscr.getmaxyx()
        (t_top, t_rows), (m_top, m_rows), (s_top, s_rows) = layout(height - 1)

        todo_focus = s.focus is Focus.TODOS
        cur_todo = self._pane(
            t_top, t_rows, width, "Todos", s.todos.printable(),
            s.todos.cursor if todo_focus else None, todo_focus,
        )
        cur_time = self._pane(
            m_top, m_rows, width, "Times", s.times.printable(),
            s.times.cursor if not todo_focus else None, not todo_focus,
        )
        self._pane(s_top, s_rows, width, "Summary", s.summary(), None, False)
        self.stdscr.addnstr(height - 1, 0, HELP_LINE, max(width - 1, 0), curses.A_DIM)

        pos = cur_todo if todo_focus else cur_time
        if s.mode is Mode.EDIT and pos is not None:
            self.stdscr.move(*pos)
        self.stdscr.refresh()

    def run(self) -> None:
        while True:
            self.draw()
            key = self.stdscr.get_wch()
            if not dispatch_key(self.session, key):
                break


def run(session: Session) -> None:
    def _main(stdscr) -> None:
        TUI(stdscr, session).run()

    try:
        curses.wrapper(_main)
    except KeyboardInterrupt:
        pass
    finally:
        session.persist()
