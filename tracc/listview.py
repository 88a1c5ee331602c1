# tracc/listview.py
"""Generic editable ordered list shared by the todo and time views.

All index arithmetic clamps: no operation raises on an empty list or at the
boundaries, it becomes a no-op instead.
"""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterator, List, Optional, Protocol, Sequence, Tuple, TypeVar


class ListEntry(Protocol):
    text: str

    def clone(self) -> Any: ...

    def __str__(self) -> str: ...


T = TypeVar("T", bound=ListEntry)


class EditableList(Generic[T]):
    def __init__(self, items: Optional[Sequence[T]] = None) -> None:
        self._items: List[T] = list(items or [])
        self.cursor: int = 0
        self.register: Optional[T] = None

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    @property
    def items(self) -> Tuple[T, ...]:
        return tuple(self._items)

    def current(self) -> Optional[T]:
        if not self._items:
            return None
        return self._items[self.cursor]

    # selection
    def move_up(self) -> None:
        self.cursor = max(self.cursor - 1, 0)

    def move_down(self) -> None:
        self.cursor = min(self.cursor + 1, max(len(self._items) - 1, 0))

    # adding/removing
    def insert_after(self, item: T, position: Optional[int] = None) -> None:
        pos = self.cursor if position is None else position
        if pos == max(len(self._items) - 1, 0):
            self._items.append(item)
            self.cursor = len(self._items) - 1
        else:
            self._items.insert(pos + 1, item)
            self.cursor = pos + 1

    def remove_current(self) -> None:
        if not self._items:
            return
        index = self.cursor
        self.cursor = min(index, max(len(self._items) - 2, 0))
        self.register = self._items.pop(index)

    def paste(self) -> None:
        if self.register is not None:
            self.insert_after(self.register.clone())

    # text editing
    def append(self, ch: str) -> None:
        cur = self.current()
        if cur is not None:
            cur.text += ch

    def backspace(self) -> None:
        cur = self.current()
        if cur is not None:
            cur.text = cur.text[:-1]

    def exit_edit_mode(self) -> None:
        """Commit the current entry; an entry left empty is dropped.

        The empty entry goes through remove_current (so it lands in the
        register) and the selection then moves one further up.
        """
        cur = self.current()
        if cur is None or cur.text:
            return
        self.remove_current()
        self.cursor = max(self.cursor - 1, 0)

    def sort(self, key: Callable[[T], Any]) -> None:
        """Stable re-sort; the selected entry stays selected."""
        cur = self.current()
        self._items.sort(key=key)
        if cur is not None:
            for i, item in enumerate(self._items):
                if item is cur:
                    self.cursor = i
                    break

    def printable(self) -> List[str]:
        return [str(item) for item in self._items]


__all__ = [
    "EditableList",
    "ListEntry",
]
