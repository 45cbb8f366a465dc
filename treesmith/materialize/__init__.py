"""Filesystem side of treesmith: create parsed items, resolve conflicts, undo.

This package contains:
- conflict/decision/result datatypes
- the ordered materializer and uniform conflict policies
- reverse-order undo and the persisted last-run journal
"""

from __future__ import annotations

from .materializer import materialize
from .policies import POLICY_NAMES, policy_from_name, skip_conflicts, uniform_policy
from .types import (
    Conflict,
    ConflictDecision,
    ConflictKind,
    ConflictResolver,
    MaterializeOutcome,
    MaterializeResult,
    UndoResult,
)
from .undo import undo_created

__all__ = [
    "Conflict",
    "ConflictDecision",
    "ConflictKind",
    "ConflictResolver",
    "MaterializeOutcome",
    "MaterializeResult",
    "UndoResult",
    "materialize",
    "undo_created",
    "uniform_policy",
    "skip_conflicts",
    "policy_from_name",
    "POLICY_NAMES",
]
