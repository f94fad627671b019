"""linediff - line-oriented diff built on the longest common subsequence."""

from .types import (
    Line, Document, OpKind, Operation, Alignment, Hunk, DiffStats, EditScript, DiffOptions,
    DiffError, SourceReadError, EncodingError, ResourceExceededError, InvalidConfigurationError,
)

from .document import load, from_text, split_lines, is_binary

from .lcs import LcsTable, build_table, comparison_keys

from .align import align, build_alignment, apply_alignment

from .hunks import build_hunks, diff_documents, get_stats

from .render import format_range, render_hunk, render, render_stat

__all__ = [
    # Types
    "Line", "Document", "OpKind", "Operation", "Alignment", "Hunk", "DiffStats",
    "EditScript", "DiffOptions",
    "DiffError", "SourceReadError", "EncodingError", "ResourceExceededError",
    "InvalidConfigurationError",
    # Documents
    "load", "from_text", "split_lines", "is_binary",
    # LCS engine
    "LcsTable", "build_table", "comparison_keys",
    # Alignment
    "align", "build_alignment", "apply_alignment",
    # Hunks
    "build_hunks", "diff_documents", "get_stats",
    # Rendering
    "format_range", "render_hunk", "render", "render_stat",
]
