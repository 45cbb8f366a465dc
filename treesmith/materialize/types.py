"""Result and decision datatypes for materialization and undo."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from ..tree_text.types import TreeItem


class ConflictDecision(str, Enum):
    """Answer to a pre-existing entry at a target path."""

    OVERWRITE = "overwrite"
    SKIP = "skip"
    CANCEL = "cancel"


class ConflictKind(str, Enum):
    FILE_EXISTS = "file_exists"
    FILE_BLOCKS_DIRECTORY = "file_blocks_directory"


class MaterializeOutcome(str, Enum):
    COMPLETED = "completed"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class Conflict:
    """One conflict handed to the resolver.

    ``FILE_EXISTS`` is a file item whose target file already exists.
    ``FILE_BLOCKS_DIRECTORY`` is a directory item whose target is a file.
    """

    item: TreeItem
    kind: ConflictKind

    @property
    def path(self) -> Path:
        return self.item.path


ConflictResolver = Callable[[Conflict], ConflictDecision]


@dataclass
class MaterializeResult:
    """Everything one materialization run did, in processing order.

    ``created`` is the created-items log: the only input undo needs.
    """

    created: list[Path] = field(default_factory=list)
    skipped: list[Path] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    errors: list[tuple[Path, str]] = field(default_factory=list)
    outcome: MaterializeOutcome = MaterializeOutcome.COMPLETED

    @property
    def cancelled(self) -> bool:
        return self.outcome is MaterializeOutcome.CANCELLED


@dataclass
class UndoResult:
    removed: list[Path] = field(default_factory=list)
    failures: list[tuple[Path, str]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures


__all__ = [
    "ConflictDecision",
    "ConflictKind",
    "MaterializeOutcome",
    "Conflict",
    "ConflictResolver",
    "MaterializeResult",
    "UndoResult",
]
