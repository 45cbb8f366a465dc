"""Render tree items as connector tree text for preview and reporting.

Rows keep the order of the item list. The output uses the usual
``├── ``/``└── ``/``│   `` layout, so the plain (colorless) rendering parses
back to the same items under the same root.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from .tree_text.types import TreeItem

DIR_COLOR = "\033[1;34m"
FILE_COLOR = "\033[38;5;252m"
BRANCH_COLOR = "\033[2;38;5;245m"
NOTE_COLOR = "\033[2;38;5;250m"
RESET = "\033[0m"

BRANCH = "├── "
LAST_BRANCH = "└── "
PIPE = "│   "
SPACE = "    "


def _group_children(items: Sequence[TreeItem], root: Path) -> dict[Path, list[tuple[str, TreeItem]]]:
    """Map each rendered parent to its ``(label, item)`` children in order.

    An item whose parent is not itself a listed directory hangs off its
    nearest listed ancestor (or the root) with a multi-segment label.
    """
    listed_dirs = {item.path for item in items if item.is_dir}
    grouped: dict[Path, list[tuple[str, TreeItem]]] = {}
    for item in items:
        anchor = item.path.parent
        while anchor != root and anchor not in listed_dirs and anchor != anchor.parent:
            anchor = anchor.parent
        if anchor not in listed_dirs:
            anchor = root
        try:
            label = item.path.relative_to(anchor).as_posix()
        except ValueError:
            label = item.path.as_posix()
        grouped.setdefault(anchor, []).append((label, item))
    return grouped


def render_tree_preview(
    items: Sequence[TreeItem],
    root: Path | str,
    no_color: bool = False,
    show_root: bool = True,
) -> str:
    """Render ``items`` as tree text rooted at ``root``."""
    root_path = Path(root)
    if no_color:
        dir_color = file_color = branch_color = reset = ""
    else:
        dir_color, file_color, branch_color, reset = DIR_COLOR, FILE_COLOR, BRANCH_COLOR, RESET

    grouped = _group_children(items, root_path)
    lines_out: list[str] = []
    if show_root:
        lines_out.append(f"{dir_color}{root_path.as_posix().rstrip('/')}/{reset}")

    expanded: set[Path] = set()

    def walk(parent: Path, prefix: str) -> None:
        if parent in expanded:
            return
        expanded.add(parent)
        children = grouped.get(parent, [])
        for idx, (label, item) in enumerate(children):
            last = idx == len(children) - 1
            branch = LAST_BRANCH if last else BRANCH
            suffix = "/" if item.is_dir else ""
            name_color = dir_color if item.is_dir else file_color
            lines_out.append(f"{branch_color}{prefix}{branch}{reset}{name_color}{label}{suffix}{reset}")
            if item.is_dir:
                walk(item.path, prefix + (SPACE if last else PIPE))

    walk(root_path, "")
    return "\n".join(lines_out)


def format_summary(items: Sequence[TreeItem], no_color: bool = False) -> str:
    """Return ``"N directories, M files"`` for ``items``."""
    directories = sum(1 for item in items if item.is_dir)
    files = len(items) - directories
    dir_word = "directory" if directories == 1 else "directories"
    file_word = "file" if files == 1 else "files"
    text = f"{directories} {dir_word}, {files} {file_word}"
    if no_color:
        return text
    return f"{NOTE_COLOR}{text}{RESET}"


__all__ = [
    "render_tree_preview",
    "format_summary",
]
