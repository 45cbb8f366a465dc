"""Rebuild an ordered path list from indented or connector-drawn tree text.

Depth is inferred from leading whitespace width after connector glyphs are
blanked. An ancestry stack of ``(path, indent)`` pairs tracks the open
directories: a line closes every scope whose indent is not strictly less
than its own, so equal indentation always means siblings.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

from .normalize import (
    DEFAULT_COMMENT_MARKERS,
    DEFAULT_TAB_WIDTH,
    blank_ascii_decoration,
    blank_connectors,
    collapse_inline_spaces,
    normalize_tree_text,
    strip_entry_icon,
    strip_inline_comment,
    strip_name_quotes,
)
from .types import TreeItem, TreeLine

logger = logging.getLogger(__name__)

DIRECTORY_MARKERS = ("/", ":")
ROOT_SENTINEL_INDENT = -1


def split_tree_line(
    line: str,
    tab_width: int = DEFAULT_TAB_WIDTH,
    comment_markers: tuple[str, ...] = DEFAULT_COMMENT_MARKERS,
) -> TreeLine | None:
    """Measure indent and extract the entry text of one line.

    Returns ``None`` for blank lines, decoration-only lines and lines that
    are nothing but a comment.
    """
    line = line.rstrip()
    if not line:
        return None
    line = blank_connectors(line).expandtabs(tab_width)
    line = blank_ascii_decoration(line)
    remainder = line.lstrip()
    if not remainder:
        return None
    indent = len(line) - len(remainder)
    remainder = strip_inline_comment(remainder, comment_markers)
    if not remainder:
        return None
    return TreeLine(indent=indent, raw_name=collapse_inline_spaces(remainder))


def split_entry_name(raw_name: str) -> tuple[str, bool] | None:
    """Return ``(name, is_dir)`` for a line's entry text, or ``None``."""
    text, folder_icon = strip_entry_icon(raw_name)
    text = strip_name_quotes(text)
    is_dir = folder_icon or text.endswith(DIRECTORY_MARKERS)
    name = strip_name_quotes(text.rstrip("/: \t"))
    if not name:
        return None
    return name, is_dir


def child_path(parent: Path, name: str) -> Path | None:
    """Join ``name`` under ``parent`` unless it would leave ``parent``.

    Names with a ``..`` segment are rejected. Leading separators and ``.``
    segments are dropped, so ``/app`` lands at ``parent/app``. Names with
    inner separators (``src/utils``) nest several levels at once.
    """
    parts = [part for part in name.split("/") if part and part != "."]
    if not parts or ".." in parts:
        return None
    return parent.joinpath(*parts)


def iter_tree_lines(
    text: str,
    tab_width: int = DEFAULT_TAB_WIDTH,
    comment_markers: tuple[str, ...] = DEFAULT_COMMENT_MARKERS,
) -> Iterator[TreeLine]:
    """Yield normalized ``TreeLine`` records in input order."""
    for line in normalize_tree_text(text).split("\n"):
        tree_line = split_tree_line(line, tab_width=tab_width, comment_markers=comment_markers)
        if tree_line is not None:
            yield tree_line


def parse_tree_text(
    text: str,
    root: Path | str,
    *,
    tab_width: int = DEFAULT_TAB_WIDTH,
    comment_markers: tuple[str, ...] = DEFAULT_COMMENT_MARKERS,
) -> list[TreeItem]:
    """Parse tree text into ``TreeItem`` records rooted under ``root``.

    Items come back in input order, so every directory precedes the entries
    nested under it. Lines that cannot be interpreted are dropped; this
    function does not raise for malformed text.
    """
    root_path = Path(root)
    stack: list[tuple[Path, int]] = [(root_path, ROOT_SENTINEL_INDENT)]
    items: list[TreeItem] = []

    for tree_line in iter_tree_lines(text, tab_width=tab_width, comment_markers=comment_markers):
        entry = split_entry_name(tree_line.raw_name)
        if entry is None:
            logger.debug("skipping line without a usable name: %r", tree_line.raw_name)
            continue
        name, is_dir = entry

        while len(stack) > 1 and tree_line.indent <= stack[-1][1]:
            stack.pop()

        path = child_path(stack[-1][0], name)
        if path is None:
            logger.debug("skipping entry that escapes its parent: %r", name)
            continue

        items.append(TreeItem(path=path, is_dir=is_dir))
        if is_dir:
            stack.append((path, tree_line.indent))

    logger.debug("parsed %d tree entries under %s", len(items), root_path)
    return items


__all__ = [
    "DIRECTORY_MARKERS",
    "split_tree_line",
    "split_entry_name",
    "child_path",
    "iter_tree_lines",
    "parse_tree_text",
]
