from __future__ import annotations

import random
import unittest

from tracc.listview import EditableList
from tracc.model import TodoEntry


def _todos(*texts: str) -> EditableList[TodoEntry]:
    return EditableList([TodoEntry(t) for t in texts])


class TestEditableListContract(unittest.TestCase):
    def test_moves_clamp_at_both_ends(self) -> None:
        lst = _todos("a", "b", "c")
        lst.move_up()
        self.assertEqual(lst.cursor, 0)
        lst.move_down()
        lst.move_down()
        lst.move_down()
        self.assertEqual(lst.cursor, 2)

    def test_moves_on_empty_list_are_noops(self) -> None:
        lst: EditableList[TodoEntry] = EditableList()
        lst.move_down()
        lst.move_up()
        self.assertEqual(lst.cursor, 0)
        self.assertIsNone(lst.current())

    def test_insert_after_tail_appends(self) -> None:
        lst = _todos("a", "b")
        lst.move_down()
        lst.insert_after(TodoEntry("c"))
        self.assertEqual([e.text for e in lst], ["a", "b", "c"])
        self.assertEqual(lst.cursor, 2)

    def test_insert_after_middle(self) -> None:
        lst = _todos("a", "b", "c")
        lst.insert_after(TodoEntry("x"))
        self.assertEqual([e.text for e in lst], ["a", "x", "b", "c"])
        self.assertEqual(lst.cursor, 1)

    def test_insert_after_explicit_position(self) -> None:
        lst = _todos("a", "b", "c")
        lst.insert_after(TodoEntry("x"), position=1)
        self.assertEqual([e.text for e in lst], ["a", "b", "x", "c"])
        self.assertEqual(lst.cursor, 2)

    def test_insert_into_empty_list(self) -> None:
        lst: EditableList[TodoEntry] = EditableList()
        lst.insert_after(TodoEntry("first"))
        self.assertEqual(lst.printable(), ["[ ] first"])
        self.assertEqual(lst.cursor, 0)

    def test_remove_single_element(self) -> None:
        lst = _todos("only")
        lst.remove_current()
        self.assertEqual(len(lst), 0)
        self.assertEqual(lst.cursor, 0)
        self.assertIsNotNone(lst.register)
        self.assertEqual(lst.register.text, "only")

    def test_remove_last_selects_new_last(self) -> None:
        lst = _todos("a", "b", "c")
        lst.move_down()
        lst.move_down()
        lst.remove_current()
        self.assertEqual(lst.cursor, 1)
        self.assertEqual(lst.current().text, "b")

    def test_remove_on_empty_list_is_noop(self) -> None:
        lst: EditableList[TodoEntry] = EditableList()
        lst.remove_current()
        self.assertIsNone(lst.register)

    def test_paste_is_repeatable_and_copies(self) -> None:
        lst = _todos("a", "b")
        lst.remove_current()
        lst.paste()
        lst.paste()
        self.assertEqual([e.text for e in lst], ["b", "a", "a"])
        self.assertIsNotNone(lst.register)
        first, second = lst.items[1], lst.items[2]
        self.assertIsNot(first, second)
        self.assertIsNot(first, lst.register)
        first.text = "changed"
        self.assertEqual(lst.register.text, "a")

    def test_paste_with_empty_register_is_noop(self) -> None:
        lst = _todos("a")
        lst.paste()
        self.assertEqual(len(lst), 1)

    def test_append_and_backspace(self) -> None:
        lst = _todos("ab")
        lst.append("c")
        self.assertEqual(lst.current().text, "abc")
        lst.backspace()
        lst.backspace()
        lst.backspace()
        lst.backspace()
        self.assertEqual(lst.current().text, "")

    def test_text_edits_on_empty_list_are_noops(self) -> None:
        lst: EditableList[TodoEntry] = EditableList()
        lst.append("x")
        lst.backspace()
        self.assertEqual(len(lst), 0)

    def test_exit_edit_mode_drops_empty_entry_and_selects_previous(self) -> None:
        lst = _todos("a", "b", "c")
        lst.move_down()
        lst.insert_after(TodoEntry())
        self.assertEqual(lst.cursor, 2)
        lst.exit_edit_mode()
        self.assertEqual([e.text for e in lst], ["a", "b", "c"])
        self.assertEqual(lst.cursor, 1)
        self.assertEqual(lst.register.text, "")

    def test_exit_edit_mode_clamps_at_zero(self) -> None:
        lst = EditableList([TodoEntry(""), TodoEntry("b")])
        lst.exit_edit_mode()
        self.assertEqual(lst.cursor, 0)
        self.assertEqual(lst.current().text, "b")

    def test_exit_edit_mode_keeps_non_empty_entry(self) -> None:
        lst = _todos("a", "b")
        lst.move_down()
        lst.exit_edit_mode()
        self.assertEqual(len(lst), 2)
        self.assertEqual(lst.cursor, 1)
        self.assertIsNone(lst.register)

    def test_sort_keeps_selected_entry(self) -> None:
        lst = _todos("c", "a", "b")
        lst.sort(key=lambda e: e.text)
        self.assertEqual(lst.printable(), ["[ ] a", "[ ] b", "[ ] c"])
        self.assertEqual(lst.current().text, "c")

    def test_printable_is_pure(self) -> None:
        lst = _todos("a", "b")
        self.assertEqual(lst.printable(), lst.printable())
        self.assertEqual(lst.cursor, 0)

    def test_cursor_stays_in_bounds_under_random_operations(self) -> None:
        rng = random.Random(1234)
        lst = _todos("seed")
        for _ in range(2000):
            op = rng.choice(("up", "down", "insert", "remove", "paste"))
            if op == "up":
                lst.move_up()
            elif op == "down":
                lst.move_down()
            elif op == "insert":
                lst.insert_after(TodoEntry("x"))
            elif op == "remove" and len(lst) > 1:
                lst.remove_current()
            elif op == "paste":
                lst.paste()
            self.assertTrue(0 <= lst.cursor < len(lst), f"cursor={lst.cursor} len={len(lst)}")


if __name__ == "__main__":
    unittest.main(verbosity=2)
