"""Alignment of two documents from their LCS table."""

import logging
from typing import List, Optional

from .lcs import LcsTable, build_table, comparison_keys
from .types import Alignment, DiffError, DiffOptions, Document, OpKind, Operation

logger = logging.getLogger(__name__)


def _deletes_first(operations: List[Operation]) -> List[Operation]:
    """Within each run of changes, put deletions before insertions."""
    result: List[Operation] = []
    deletes: List[Operation] = []
    inserts: List[Operation] = []

    for op in operations:
        if op.kind is OpKind.DELETE:
            deletes.append(op)
        elif op.kind is OpKind.INSERT:
            inserts.append(op)
        else:
            result.extend(deletes)
            result.extend(inserts)
            deletes, inserts = [], []
            result.append(op)

    result.extend(deletes)
    result.extend(inserts)
    return result


def build_alignment(
    table: LcsTable,
    a: Document,
    b: Document,
    options: Optional[DiffOptions] = None,
) -> Alignment:
    """Backtrack the LCS table into Match/Delete/Insert operations.

    When deleting and inserting would keep the same LCS length, the
    deletion is taken. The walk is iterative so long documents do not
    hit the recursion limit.
    """
    n, m = len(a), len(b)
    if table.rows != n + 1 or table.cols != m + 1:
        raise DiffError(
            f"table is {table.rows}x{table.cols}, documents need {n + 1}x{m + 1}"
        )

    a_keys = comparison_keys(a, options)
    b_keys = comparison_keys(b, options)

    backtrack: List[Operation] = []
    i, j = n, m
    while i > 0 or j > 0:
        if (
            i > 0 and j > 0
            and a_keys[i - 1] == b_keys[j - 1]
            and table[i, j] == table[i - 1, j - 1] + 1
        ):
            backtrack.append(Operation.match(i, j))
            i -= 1
            j -= 1
        elif i > 0 and (j == 0 or table[i - 1, j] >= table[i, j - 1]):
            backtrack.append(Operation.delete(i))
            i -= 1
        else:
            backtrack.append(Operation.insert(j))
            j -= 1

    backtrack.reverse()
    return tuple(_deletes_first(backtrack))


def align(a: Document, b: Document, options: Optional[DiffOptions] = None) -> Alignment:
    """Compute the alignment of two documents."""
    table = build_table(a, b, options)
    alignment = build_alignment(table, a, b, options)
    logger.debug(
        "aligned %s and %s: %d operations, %d matches",
        a.source, b.source, len(alignment), table.lcs_length,
    )
    return alignment


def apply_alignment(alignment: Alignment, a: Document, b: Document) -> List[str]:
    """Replay an alignment against A and return the resulting lines.

    Matches and deletions walk A in order, insertions are taken from B.
    The result equals B's contents for any alignment produced by align().
    """
    result: List[str] = []
    a_pos = 0
    b_pos = 0

    for op in alignment:
        if op.kind is OpKind.MATCH:
            if op.a_index != a_pos + 1 or op.b_index != b_pos + 1:
                raise DiffError(f"{op!r} out of order at A:{a_pos} B:{b_pos}")
            result.append(a[op.a_index].content)
            a_pos += 1
            b_pos += 1
        elif op.kind is OpKind.DELETE:
            if op.a_index != a_pos + 1:
                raise DiffError(f"{op!r} out of order at A:{a_pos}")
            a_pos += 1
        else:
            if op.b_index != b_pos + 1:
                raise DiffError(f"{op!r} out of order at B:{b_pos}")
            result.append(b[op.b_index].content)
            b_pos += 1

    if a_pos != len(a) or b_pos != len(b):
        raise DiffError(
            f"alignment covers {a_pos}/{len(a)} lines of A and {b_pos}/{len(b)} of B"
        )
    return result
