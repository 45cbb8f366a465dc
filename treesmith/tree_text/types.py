"""Domain datatypes for parsed tree text."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class TreeLine:
    """One normalized input line before it is placed in the hierarchy."""

    indent: int
    raw_name: str


@dataclass(frozen=True)
class TreeItem:
    """One entry to create: absolute target path plus directory flag."""

    path: Path
    is_dir: bool

    @property
    def name(self) -> str:
        return self.path.name

    def relative_to(self, root: Path | str) -> Path:
        """Return ``path`` relative to ``root``."""
        return self.path.relative_to(Path(root))


__all__ = [
    "TreeLine",
    "TreeItem",
]
