"""Tests for whole-text and per-line tree normalization helpers."""

from __future__ import annotations

import unittest

from treesmith.tree_text import normalize
from treesmith.tree_text.normalize import (
    blank_ascii_decoration,
    blank_connectors,
    collapse_inline_spaces,
    normalize_tree_text,
    strip_entry_icon,
    strip_inline_comment,
    strip_name_quotes,
)


class NormalizeTreeTextTests(unittest.TestCase):
    def test_line_endings_are_unified(self) -> None:
        self.assertEqual(normalize_tree_text("a\r\nb\rc\n"), "a\nb\nc\n")

    def test_vertical_bar_runs_collapse(self) -> None:
        self.assertEqual(normalize_tree_text("│││   └── x"), "│   └── x")

    def test_no_break_spaces_become_spaces(self) -> None:
        self.assertEqual(normalize_tree_text("\u00a0\u202fx"), "  x")

    def test_dot_space_before_connector_is_removed(self) -> None:
        self.assertEqual(normalize_tree_text("app/\n. ├── main.py"), "app/\n├── main.py")

    def test_leading_spaces_survive(self) -> None:
        self.assertEqual(normalize_tree_text("a/\n    b"), "a/\n    b")


class LineHelperTests(unittest.TestCase):
    def test_blank_connectors_keeps_column_width(self) -> None:
        line = "│   ├── main.py"

        blanked = blank_connectors(line)

        self.assertEqual(len(blanked), len(line))
        self.assertEqual(blanked, "        main.py")

    def test_blank_connectors_handles_heavy_and_rounded_glyphs(self) -> None:
        self.assertEqual(blank_connectors("┣━━ a ╰─ b"), "    a    b")

    def test_blank_ascii_decoration(self) -> None:
        self.assertEqual(blank_ascii_decoration("|   `-- main.py"), "        main.py")
        self.assertEqual(blank_ascii_decoration("+-- lib/"), "    lib/")
        self.assertEqual(blank_ascii_decoration("  * item"), "    item")
        self.assertEqual(blank_ascii_decoration("--verbose.txt"), "--verbose.txt")

    def test_blank_ascii_decoration_clears_bar_only_spacers(self) -> None:
        self.assertEqual(blank_ascii_decoration("|"), " ")
        self.assertEqual(blank_ascii_decoration("|   |"), "     ")
        self.assertEqual(blank_ascii_decoration("|name"), "|name")

    def test_strip_inline_comment_uses_earliest_marker(self) -> None:
        self.assertEqual(strip_inline_comment("a.py // x # y", ("#", "//")), "a.py")
        self.assertEqual(strip_inline_comment("a.py", ("",)), "a.py")

    def test_collapse_inline_spaces(self) -> None:
        self.assertEqual(collapse_inline_spaces("my   big  file"), "my big file")

    def test_strip_entry_icon(self) -> None:
        self.assertEqual(strip_entry_icon("\U0001f4c2 src"), ("src", True))
        self.assertEqual(strip_entry_icon("\U0001f5c2\ufe0f docs"), ("docs", True))
        self.assertEqual(strip_entry_icon("\U0001f4c4 a.txt"), ("a.txt", False))
        self.assertEqual(strip_entry_icon("plain"), ("plain", False))

    def test_strip_name_quotes(self) -> None:
        self.assertEqual(strip_name_quotes("`'a b'`"), "a b")
        self.assertEqual(strip_name_quotes("it's"), "it's")

    def test_defaults(self) -> None:
        self.assertEqual(normalize.DEFAULT_COMMENT_MARKERS, ("#",))
        self.assertEqual(normalize.DEFAULT_TAB_WIDTH, 4)


if __name__ == "__main__":
    unittest.main()
