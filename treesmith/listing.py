"""Re-derive tree items from a real directory subtree.

Produces the same ``TreeItem`` shape the parser emits, in depth-first order
with directories first, so a created tree can be compared with its source
text or rendered back through the preview.
"""

from __future__ import annotations

import os
from pathlib import Path

from .tree_text.types import TreeItem


def list_directory_children(directory: Path, show_hidden: bool = True) -> list[tuple[str, Path, bool]]:
    """List ``(name, path, is_dir)`` children sorted directories-first.

    Unreadable directories list as empty. Symlinks are reported as files and
    never followed.
    """
    children: list[tuple[str, Path, bool]] = []
    try:
        with os.scandir(directory) as entries:
            for child in entries:
                name = child.name
                if not show_hidden and name.startswith("."):
                    continue
                try:
                    is_dir = child.is_dir(follow_symlinks=False)
                except OSError:
                    is_dir = False
                children.append((name, Path(child.path), is_dir))
    except OSError:
        return []

    children.sort(key=lambda item: (not item[2], item[0].lower()))
    return children


def collect_tree_items(root: Path | str, show_hidden: bool = True) -> list[TreeItem]:
    """Walk ``root`` and return every entry below it as ``TreeItem`` rows."""
    items: list[TreeItem] = []

    def walk(directory: Path) -> None:
        for _name, child_path, is_dir in list_directory_children(directory, show_hidden=show_hidden):
            items.append(TreeItem(path=child_path, is_dir=is_dir))
            if is_dir:
                walk(child_path)

    walk(Path(root))
    return items


__all__ = [
    "list_directory_children",
    "collect_tree_items",
]
