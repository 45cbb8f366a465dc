"""Create parsed tree items on disk with per-conflict resolution.

Items are processed strictly in order, one filesystem operation at a time,
so parents always exist before their children. Every path this run creates
(including implicit intermediate directories) is appended to the result's
``created`` log in creation order; undo replays that log backwards.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from ..tree_text.types import TreeItem
from .policies import skip_conflicts
from .types import (
    Conflict,
    ConflictDecision,
    ConflictKind,
    ConflictResolver,
    MaterializeOutcome,
    MaterializeResult,
)

logger = logging.getLogger(__name__)


def _entry_exists(path: Path) -> bool:
    return path.exists() or path.is_symlink()


def _missing_ancestors(path: Path) -> list[Path]:
    """Return missing parent directories of ``path``, outermost first."""
    missing: list[Path] = []
    current = path.parent
    while current != current.parent and not _entry_exists(current):
        missing.append(current)
        current = current.parent
    missing.reverse()
    return missing


def _ensure_parents(path: Path, result: MaterializeResult) -> None:
    for ancestor in _missing_ancestors(path):
        ancestor.mkdir()
        result.created.append(ancestor)
        logger.info("created intermediate directory %s", ancestor)


def _decide(resolver: ConflictResolver, conflict: Conflict) -> ConflictDecision:
    decision = ConflictDecision(resolver(conflict))
    logger.debug("conflict at %s (%s): %s", conflict.path, conflict.kind.value, decision.value)
    return decision


def _materialize_directory(item: TreeItem, resolver: ConflictResolver, result: MaterializeResult) -> bool:
    """Create one directory item; return ``True`` when the run must stop."""
    path = item.path
    if path.is_dir():
        logger.debug("directory already present: %s", path)
        return False

    if _entry_exists(path):
        decision = _decide(resolver, Conflict(item=item, kind=ConflictKind.FILE_BLOCKS_DIRECTORY))
        if decision is ConflictDecision.CANCEL:
            return True
        if decision is ConflictDecision.SKIP:
            result.skipped.append(path)
            return False
        path.unlink()

    _ensure_parents(path, result)
    path.mkdir()
    result.created.append(path)
    logger.info("created directory %s", path)
    return False


def _materialize_file(item: TreeItem, resolver: ConflictResolver, result: MaterializeResult) -> bool:
    """Create one empty file item; return ``True`` when the run must stop."""
    path = item.path
    if path.is_dir():
        message = f"skipped {path}: a directory already exists at this path"
        logger.warning("%s", message)
        result.warnings.append(message)
        result.skipped.append(path)
        return False

    if _entry_exists(path):
        decision = _decide(resolver, Conflict(item=item, kind=ConflictKind.FILE_EXISTS))
        if decision is ConflictDecision.CANCEL:
            return True
        if decision is ConflictDecision.SKIP:
            result.skipped.append(path)
            return False
        path.write_bytes(b"")
        result.created.append(path)
        logger.info("overwrote file %s", path)
        return False

    _ensure_parents(path, result)
    path.touch(exist_ok=False)
    result.created.append(path)
    logger.info("created file %s", path)
    return False


def materialize(
    items: Iterable[TreeItem],
    resolve_conflict: ConflictResolver | None = None,
) -> MaterializeResult:
    """Create ``items`` on disk in order and return what happened.

    ``resolve_conflict`` is called once per pre-existing entry and may block
    for as long as it likes. Without a resolver conflicts are skipped. A
    ``CANCEL`` decision stops the run at once; everything created so far is
    left in place and stays in ``created``. Per-item ``OSError`` failures are
    recorded in ``errors`` and the run moves on.
    """
    resolver = resolve_conflict if resolve_conflict is not None else skip_conflicts
    result = MaterializeResult()

    for item in items:
        handler = _materialize_directory if item.is_dir else _materialize_file
        try:
            stop = handler(item, resolver, result)
        except OSError as exc:
            logger.error("could not create %s: %s", item.path, exc)
            result.errors.append((item.path, str(exc)))
            continue
        if stop:
            logger.info("materialization cancelled at %s", item.path)
            result.outcome = MaterializeOutcome.CANCELLED
            break

    return result


__all__ = ["materialize"]
