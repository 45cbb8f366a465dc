"""Uniform conflict policies for non-interactive runs."""

from __future__ import annotations

from .types import Conflict, ConflictDecision, ConflictResolver

ASK_POLICY = "ask"
POLICY_NAMES = (ASK_POLICY, "overwrite", "skip", "cancel")


def uniform_policy(decision: ConflictDecision) -> ConflictResolver:
    """Return a resolver answering every conflict with ``decision``."""
    decision = ConflictDecision(decision)

    def resolve(_conflict: Conflict) -> ConflictDecision:
        return decision

    return resolve


def skip_conflicts(_conflict: Conflict) -> ConflictDecision:
    return ConflictDecision.SKIP


def policy_from_name(name: str) -> ConflictResolver | None:
    """Map a policy name to a uniform resolver.

    Returns ``None`` for ``"ask"``, meaning the caller supplies an
    interactive resolver. Unknown names raise ``ValueError``.
    """
    normalized = name.strip().lower()
    if normalized == ASK_POLICY:
        return None
    try:
        return uniform_policy(ConflictDecision(normalized))
    except ValueError as exc:
        raise ValueError(f"unknown conflict policy: {name!r}") from exc


__all__ = [
    "ASK_POLICY",
    "POLICY_NAMES",
    "uniform_policy",
    "skip_conflicts",
    "policy_from_name",
]
