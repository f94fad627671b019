"""Tests for alignment reconstruction."""

import pytest

from test_lcs import PAIRS

MORE_PAIRS = PAIRS + [
    (["a", "b"], ["b", "a"]),
    (["a", "b", "c", "d"], ["a", "c", "d", "b"]),
    (["1", "2", "3", "4", "5"], ["0", "1", "3", "5", "6"]),
    (["x"] * 4, ["x", "y", "x"]),
]


class TestAlign:
    """Tests for concrete alignments."""

    def test_single_substitution(self, lib, doc):
        """A changed middle line is a deletion followed by an insertion."""
        Op = lib.Operation
        alignment = lib.align(doc(["a", "b", "c"]), doc(["a", "x", "c"]))
        assert list(alignment) == [Op.match(1, 1), Op.delete(2), Op.insert(2), Op.match(3, 3)]

    def test_insert_into_empty(self, lib, doc):
        """Everything is inserted when A is empty."""
        alignment = lib.align(doc([]), doc(["a"]))
        assert list(alignment) == [lib.Operation.insert(1)]

    def test_delete_everything(self, lib, doc):
        """Everything is deleted when B is empty."""
        alignment = lib.align(doc(["a", "b"]), doc([]))
        assert list(alignment) == [lib.Operation.delete(1), lib.Operation.delete(2)]

    def test_both_empty(self, lib, doc):
        """Two empty documents align to nothing."""
        assert lib.align(doc([]), doc([])) == ()

    def test_identical(self, lib, doc):
        """Identical documents are all matches."""
        alignment = lib.align(doc(["a", "b"]), doc(["a", "b"]))
        assert list(alignment) == [lib.Operation.match(1, 1), lib.Operation.match(2, 2)]

    def test_tie_prefers_delete(self, lib, doc):
        """Equal-length choices keep A's earlier line as the match."""
        Op = lib.Operation
        alignment = lib.align(doc(["a", "b"]), doc(["b", "a"]))
        assert list(alignment) == [Op.insert(1), Op.match(1, 2), Op.delete(2)]

    def test_deletes_before_inserts_in_a_run(self, lib, doc):
        """A run of changes lists all deletions before insertions."""
        kinds = [op.kind for op in lib.align(doc(["p", "q"]), doc(["r", "s"]))]
        assert kinds == [lib.OpKind.DELETE, lib.OpKind.DELETE,
                         lib.OpKind.INSERT, lib.OpKind.INSERT]

    def test_operation_repr(self, lib):
        """Operations print in Match/Delete/Insert notation."""
        assert repr(lib.Operation.match(1, 2)) == "Match(1,2)"
        assert repr(lib.Operation.delete(3)) == "Delete(3)"
        assert repr(lib.Operation.insert(4)) == "Insert(4)"

    def test_ignore_whitespace_matches(self, lib, doc):
        """Lines equal after whitespace removal are matched."""
        options = lib.DiffOptions(ignore_whitespace=True)
        alignment = lib.align(doc(["a  b"]), doc(["ab"]), options)
        assert list(alignment) == [lib.Operation.match(1, 1)]

    def test_table_must_fit_documents(self, lib, doc):
        """A table built for other documents is rejected."""
        table = lib.build_table(doc(["a"]), doc(["a"]))
        with pytest.raises(lib.DiffError):
            lib.build_alignment(table, doc(["a", "b"]), doc(["a"]))

    def test_long_documents(self, lib, doc):
        """Backtracking does not recurse per line."""
        a_lines = [f"line {n}" for n in range(1500)]
        b_lines = list(a_lines)
        b_lines[750] = "changed"
        alignment = lib.align(doc(a_lines), doc(b_lines))
        assert sum(1 for op in alignment if op.is_change) == 2


class TestAlignmentProperties:
    """Properties that hold for every alignment."""

    @pytest.mark.parametrize("a_lines,b_lines", MORE_PAIRS)
    def test_round_trip(self, lib, doc, a_lines, b_lines):
        """Applying the alignment to A reproduces B."""
        a, b = doc(a_lines), doc(b_lines)
        assert lib.apply_alignment(lib.align(a, b), a, b) == b_lines

    @pytest.mark.parametrize("a_lines,b_lines", MORE_PAIRS)
    def test_monotonic(self, lib, doc, a_lines, b_lines):
        """A and B indices each strictly increase."""
        alignment = lib.align(doc(a_lines), doc(b_lines))
        a_indices = [op.a_index for op in alignment if op.a_index is not None]
        b_indices = [op.b_index for op in alignment if op.b_index is not None]
        assert a_indices == list(range(1, len(a_lines) + 1))
        assert b_indices == list(range(1, len(b_lines) + 1))

    @pytest.mark.parametrize("a_lines,b_lines", MORE_PAIRS)
    def test_lcs_length_symmetric(self, lib, doc, a_lines, b_lines):
        """Swapping the documents keeps the number of matches."""
        forward = lib.align(doc(a_lines), doc(b_lines))
        backward = lib.align(doc(b_lines), doc(a_lines))
        matches = lambda alignment: sum(1 for op in alignment if not op.is_change)
        assert matches(forward) == matches(backward)

    @pytest.mark.parametrize("a_lines,b_lines", MORE_PAIRS)
    def test_matches_equal_lcs_length(self, lib, doc, a_lines, b_lines):
        """The alignment achieves the LCS length."""
        a, b = doc(a_lines), doc(b_lines)
        matches = sum(1 for op in lib.align(a, b) if not op.is_change)
        assert matches == lib.build_table(a, b).lcs_length


class TestApplyAlignment:
    """Tests for replaying alignments."""

    def test_incomplete_alignment(self, lib, doc):
        """An alignment that skips lines is rejected."""
        a, b = doc(["a", "b"]), doc(["a"])
        with pytest.raises(lib.DiffError):
            lib.apply_alignment((lib.Operation.match(1, 1),), a, b)

    def test_out_of_order(self, lib, doc):
        """Operations must follow document order."""
        a, b = doc(["a", "b"]), doc([])
        with pytest.raises(lib.DiffError):
            lib.apply_alignment((lib.Operation.delete(2), lib.Operation.delete(1)), a, b)
