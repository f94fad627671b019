"""Grouping of alignment operations into hunks."""

import logging
from typing import List, Optional, Tuple

from .align import align
from .types import (
    Alignment, DiffOptions, DiffStats, Document, EditScript, Hunk,
    InvalidConfigurationError, OpKind, DEFAULT_CONTEXT_LINES,
)

logger = logging.getLogger(__name__)


def _group_changes(alignment: Alignment, context_lines: int) -> List[Tuple[int, int]]:
    """Return (first, last) alignment indices of each group of changes.

    Two changes belong to the same group when at most 2 * context_lines
    matches separate them, so their context windows touch or overlap.
    """
    change_indices = [k for k, op in enumerate(alignment) if op.is_change]
    if not change_indices:
        return []

    groups = []
    first = last = change_indices[0]
    for k in change_indices[1:]:
        if k - last - 1 <= 2 * context_lines:
            last = k
        else:
            groups.append((first, last))
            first = last = k
    groups.append((first, last))
    return groups


def build_hunks(alignment: Alignment, context_lines: int = DEFAULT_CONTEXT_LINES) -> Tuple[Hunk, ...]:
    """Group the changes of an alignment into hunks with context.

    Args:
        alignment: Operations from align()
        context_lines: Matches to keep on each side of a change

    Returns:
        Hunks in document order; empty when nothing changed
    """
    if context_lines < 0:
        raise InvalidConfigurationError(
            f"context size must be non-negative, got {context_lines}"
        )

    # Lines of A and B consumed before each alignment position
    a_before = [0]
    b_before = [0]
    for op in alignment:
        a_before.append(a_before[-1] + (op.kind is not OpKind.INSERT))
        b_before.append(b_before[-1] + (op.kind is not OpKind.DELETE))

    hunks = []
    for first, last in _group_changes(alignment, context_lines):
        start = max(0, first - context_lines)
        end = min(len(alignment), last + context_lines + 1)

        a_count = a_before[end] - a_before[start]
        b_count = b_before[end] - b_before[start]
        a_start = a_before[start] + 1 if a_count else a_before[start]
        b_start = b_before[start] + 1 if b_count else b_before[start]

        hunks.append(Hunk(
            a_start=a_start,
            a_count=a_count,
            b_start=b_start,
            b_count=b_count,
            operations=tuple(alignment[start:end]),
        ))

    return tuple(hunks)


def get_stats(alignment: Alignment) -> DiffStats:
    """Count insertions and deletions in an alignment."""
    additions = sum(1 for op in alignment if op.kind is OpKind.INSERT)
    deletions = sum(1 for op in alignment if op.kind is OpKind.DELETE)
    return DiffStats(additions=additions, deletions=deletions)


def diff_documents(a: Document, b: Document, options: Optional[DiffOptions] = None) -> EditScript:
    """Run the whole pipeline and return the edit script for A -> B."""
    opts = (options or DiffOptions()).validate()

    alignment = align(a, b, opts)
    hunks = build_hunks(alignment, opts.context_lines)
    stats = get_stats(alignment)

    logger.debug(
        "%s -> %s: %d hunks, +%d -%d",
        a.source, b.source, len(hunks), stats.additions, stats.deletions,
    )
    return EditScript(a=a, b=b, hunks=hunks, stats=stats)
