"""Type definitions for linediff library."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple


@dataclass(frozen=True)
class Line:
    """A single line of a document, without its terminator."""
    number: int  # 1-based
    content: str


@dataclass(frozen=True)
class Document:
    """An immutable, ordered sequence of lines from one source."""
    source: str
    lines: Tuple[Line, ...] = ()
    trailing_newline: bool = True

    def __len__(self) -> int:
        return len(self.lines)

    def __getitem__(self, number: int) -> Line:
        """Return the line at 1-based position `number`."""
        if number < 1 or number > len(self.lines):
            raise IndexError(f"line {number} out of range for {self.source}")
        return self.lines[number - 1]

    @property
    def contents(self) -> Tuple[str, ...]:
        return tuple(line.content for line in self.lines)

    def is_last(self, number: int) -> bool:
        return number == len(self.lines)


class OpKind(str, Enum):
    """Kind of a single alignment operation."""
    MATCH = "match"
    DELETE = "delete"
    INSERT = "insert"


@dataclass(frozen=True)
class Operation:
    """One step of an alignment.

    Match references a line in both documents, Delete only a line in A
    and Insert only a line in B. Indices are 1-based.
    """
    kind: OpKind
    a_index: Optional[int] = None
    b_index: Optional[int] = None

    @classmethod
    def match(cls, i: int, j: int) -> "Operation":
        return cls(OpKind.MATCH, i, j)

    @classmethod
    def delete(cls, i: int) -> "Operation":
        return cls(OpKind.DELETE, a_index=i)

    @classmethod
    def insert(cls, j: int) -> "Operation":
        return cls(OpKind.INSERT, b_index=j)

    @property
    def is_change(self) -> bool:
        return self.kind is not OpKind.MATCH

    def __repr__(self) -> str:
        if self.kind is OpKind.MATCH:
            return f"Match({self.a_index},{self.b_index})"
        if self.kind is OpKind.DELETE:
            return f"Delete({self.a_index})"
        return f"Insert({self.b_index})"


Alignment = Tuple[Operation, ...]


@dataclass(frozen=True)
class Hunk:
    """A run of operations with surrounding context.

    Counts include context lines. For an empty range the start is the
    line before the hunk, as in unified diff headers.
    """
    a_start: int
    a_count: int
    b_start: int
    b_count: int
    operations: Tuple[Operation, ...]


@dataclass(frozen=True)
class DiffStats:
    """Statistics about a diff."""
    additions: int = 0
    deletions: int = 0

    @property
    def changes(self) -> int:
        return min(self.additions, self.deletions)


@dataclass(frozen=True)
class EditScript:
    """All hunks describing the differences between two documents."""
    a: Document
    b: Document
    hunks: Tuple[Hunk, ...] = ()
    stats: DiffStats = field(default_factory=DiffStats)

    @property
    def is_empty(self) -> bool:
        return not self.hunks


DEFAULT_CONTEXT_LINES = 3
DEFAULT_MAX_CELLS = 25_000_000


@dataclass(frozen=True)
class DiffOptions:
    """Options for diff operations."""
    context_lines: int = DEFAULT_CONTEXT_LINES
    ignore_whitespace: bool = False
    ignore_line_endings: bool = False
    max_cells: int = DEFAULT_MAX_CELLS

    def validate(self) -> "DiffOptions":
        if self.context_lines < 0:
            raise InvalidConfigurationError(
                f"context size must be non-negative, got {self.context_lines}"
            )
        if self.max_cells <= 0:
            raise InvalidConfigurationError(
                f"memory ceiling must be positive, got {self.max_cells}"
            )
        return self


# Errors
class DiffError(Exception):
    """Base error for diff operations."""
    kind = "error"


class SourceReadError(DiffError):
    """Input source could not be read."""
    kind = "read error"


class EncodingError(DiffError):
    """Input content is not valid text."""
    kind = "encoding error"


class ResourceExceededError(DiffError):
    """The LCS table would exceed the configured memory ceiling."""
    kind = "resource exceeded"


class InvalidConfigurationError(DiffError):
    """Caller supplied an invalid option."""
    kind = "invalid configuration"
