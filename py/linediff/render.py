"""Unified diff text output for edit scripts."""

from typing import List

from .types import Document, EditScript, Hunk, OpKind

NO_NEWLINE_MARKER = "\\ No newline at end of file"

_PREFIX = {
    OpKind.MATCH: " ",
    OpKind.DELETE: "-",
    OpKind.INSERT: "+",
}


def format_range(start: int, count: int) -> str:
    """Format a hunk range as `start,count`, or `start` when count is 1."""
    if count == 1:
        return str(start)
    return f"{start},{count}"


def hunk_header(hunk: Hunk) -> str:
    return (
        f"@@ -{format_range(hunk.a_start, hunk.a_count)} "
        f"+{format_range(hunk.b_start, hunk.b_count)} @@"
    )


def _lacks_newline(document: Document, number) -> bool:
    return number is not None and not document.trailing_newline and document.is_last(number)


def render_hunk(hunk: Hunk, a: Document, b: Document) -> List[str]:
    """Render one hunk as a list of lines without terminators."""
    lines = [hunk_header(hunk)]

    for op in hunk.operations:
        if op.kind is OpKind.INSERT:
            content = b[op.b_index].content
        else:
            content = a[op.a_index].content
        lines.append(_PREFIX[op.kind] + content)

        a_last = op.kind is not OpKind.INSERT and _lacks_newline(a, op.a_index)
        b_last = op.kind is not OpKind.DELETE and _lacks_newline(b, op.b_index)
        if a_last or b_last:
            lines.append(NO_NEWLINE_MARKER)

    return lines


def render(script: EditScript, file_headers: bool = True) -> str:
    """Serialize an edit script as unified diff text.

    An edit script without hunks renders as the empty string.
    """
    if script.is_empty:
        return ""

    lines = []
    if file_headers:
        lines.append(f"--- {script.a.source}")
        lines.append(f"+++ {script.b.source}")
    for hunk in script.hunks:
        lines.extend(render_hunk(hunk, script.a, script.b))

    return "\n".join(lines) + "\n"


def render_stat(script: EditScript) -> str:
    """One-line summary of insertions and deletions."""
    stats = script.stats
    insertions = "insertion" if stats.additions == 1 else "insertions"
    deletions = "deletion" if stats.deletions == 1 else "deletions"
    return (
        f"{script.a.source} -> {script.b.source}: "
        f"{stats.additions} {insertions}(+), {stats.deletions} {deletions}(-)\n"
    )
