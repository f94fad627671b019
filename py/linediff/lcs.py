"""Longest common subsequence table for two documents."""

import logging
import re
from typing import List, Optional, Sequence, Tuple

from .types import DiffOptions, Document, ResourceExceededError

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")


def comparison_keys(document: Document, options: Optional[DiffOptions] = None) -> List[str]:
    """Return the strings used to compare each line of a document.

    Lines compare by exact content unless the options ask for
    line-ending or whitespace-insensitive comparison.
    """
    opts = options or DiffOptions()
    keys = []
    for line in document.lines:
        key = line.content
        if opts.ignore_line_endings and key.endswith("\r"):
            key = key[:-1]
        if opts.ignore_whitespace:
            key = _WHITESPACE.sub("", key)
        keys.append(key)
    return keys


class LcsTable:
    """Dynamic-programming table of LCS lengths.

    Cell (i, j) holds the LCS length of the first i lines of A and the
    first j lines of B. Cells live in one flat row-major list.
    """

    def __init__(self, rows: int, cols: int, cells: List[int]):
        if len(cells) != rows * cols:
            raise ValueError("cell count does not match table dimensions")
        self.rows = rows
        self.cols = cols
        self._cells = cells

    def __getitem__(self, index: Tuple[int, int]) -> int:
        i, j = index
        if not (0 <= i < self.rows and 0 <= j < self.cols):
            raise IndexError(f"cell ({i}, {j}) outside {self.rows}x{self.cols} table")
        return self._cells[i * self.cols + j]

    def row(self, i: int) -> List[int]:
        start = i * self.cols
        return self._cells[start:start + self.cols]

    @property
    def lcs_length(self) -> int:
        return self._cells[-1]

    def __repr__(self) -> str:
        return f"LcsTable({self.rows}x{self.cols}, lcs={self.lcs_length})"


def check_ceiling(n: int, m: int, max_cells: int) -> None:
    """Raise ResourceExceededError if an n x m comparison is too large."""
    if n * m > max_cells:
        raise ResourceExceededError(
            f"comparing {n} x {m} lines needs {n * m} table cells, "
            f"limit is {max_cells}"
        )


def build_key_table(a: Sequence[str], b: Sequence[str], max_cells: int) -> LcsTable:
    """Build the LCS table for two sequences of comparison keys."""
    n, m = len(a), len(b)
    check_ceiling(n, m, max_cells)

    cols = m + 1
    cells = [0] * ((n + 1) * cols)

    for i in range(1, n + 1):
        a_key = a[i - 1]
        row = i * cols
        prev = row - cols
        for j in range(1, cols):
            if a_key == b[j - 1]:
                cells[row + j] = cells[prev + j - 1] + 1
            else:
                up = cells[prev + j]
                left = cells[row + j - 1]
                cells[row + j] = up if up >= left else left

    logger.debug("built %dx%d LCS table, lcs length %d", n + 1, cols, cells[-1])
    return LcsTable(n + 1, cols, cells)


def build_table(a: Document, b: Document, options: Optional[DiffOptions] = None) -> LcsTable:
    """Build the LCS table between two documents.

    Raises:
        ResourceExceededError: len(a) * len(b) exceeds options.max_cells.
            Raised before the table is allocated.
    """
    opts = (options or DiffOptions()).validate()
    return build_key_table(
        comparison_keys(a, opts), comparison_keys(b, opts), opts.max_cells
    )
