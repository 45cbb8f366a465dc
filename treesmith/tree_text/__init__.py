"""Tree-text parsing: normalization, depth inference, and path rebuilding.

This package contains the pure, filesystem-free half of treesmith:
- ``TreeLine``/``TreeItem`` datatypes
- connector/indent normalization helpers
- the ancestry-stack parser producing ordered ``TreeItem`` lists
"""

from __future__ import annotations

from .normalize import DEFAULT_COMMENT_MARKERS, DEFAULT_TAB_WIDTH, normalize_tree_text
from .parser import iter_tree_lines, parse_tree_text, split_entry_name, split_tree_line
from .types import TreeItem, TreeLine

__all__ = [
    "TreeItem",
    "TreeLine",
    "DEFAULT_COMMENT_MARKERS",
    "DEFAULT_TAB_WIDTH",
    "normalize_tree_text",
    "iter_tree_lines",
    "split_tree_line",
    "split_entry_name",
    "parse_tree_text",
]
