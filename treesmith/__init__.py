"""Public package surface for treesmith.

Exports ``main`` for programmatic CLI invocation.
Parsing lives in ``treesmith.tree_text``; filesystem work in
``treesmith.materialize``.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main"]
