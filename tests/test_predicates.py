"""
Tests for filter predicates.

Predicates are compiled values: each can be tested on a synthetic
row with no file and no schema involved.
"""

import pytest
from csvpeek.predicates import (
    EqualsLiteral,
    FilterKind,
    FilterPredicate,
    accepts_all,
)


class TestEqualsLiteral:
    """Test exact string equality on one column."""

    def test_accepts_matching_value(self):
        predicate = EqualsLiteral(column_index=2, literal="file1.png")
        row = ["someContentInFirstColumn", "someContentInSecondColumn", "file1.png"]
        assert predicate.accepts(row) is True

    def test_rejects_other_value(self):
        predicate = EqualsLiteral(column_index=2, literal="file1.png")
        row = ["someContentInFirstColumn", "someContentInSecondColumn", "file2.png"]
        assert predicate.accepts(row) is False

    def test_no_numeric_coercion(self):
        """'1' and '1.0' are different strings."""
        predicate = EqualsLiteral(column_index=0, literal="1")
        assert not predicate.accepts(["1.0"])
        assert predicate.accepts(["1"])

    def test_whitespace_is_significant(self):
        predicate = EqualsLiteral(column_index=0, literal="ok")
        assert not predicate.accepts([" ok"])

    def test_empty_literal_matches_empty_field(self):
        predicate = EqualsLiteral(column_index=1, literal="")
        assert predicate.accepts(["x", ""])
        assert not predicate.accepts(["x", "y"])

    def test_kind_tag(self):
        predicate = EqualsLiteral(column_index=0, literal="x")
        assert predicate.kind is FilterKind.EQUALS_LITERAL
        assert isinstance(predicate, FilterPredicate)

    def test_predicate_immutable(self):
        predicate = EqualsLiteral(column_index=0, literal="x")
        with pytest.raises(AttributeError):
            predicate.literal = "y"

    def test_predicate_equality(self):
        """Compiled predicates compare by value."""
        assert EqualsLiteral(1, "a") == EqualsLiteral(1, "a")
        assert EqualsLiteral(1, "a") != EqualsLiteral(0, "a")


class TestAcceptsAll:
    """AND semantics across a filter set."""

    def test_empty_set_accepts(self):
        assert accepts_all([], ["anything"])

    def test_all_accept(self):
        predicates = [EqualsLiteral(0, "a"), EqualsLiteral(1, "b")]
        assert accepts_all(predicates, ["a", "b"])

    def test_one_rejects(self):
        """One accepting and one rejecting clause reject the row."""
        predicates = [EqualsLiteral(0, "a"), EqualsLiteral(1, "b")]
        assert not accepts_all(predicates, ["a", "x"])

    def test_short_circuits_on_first_rejection(self):
        calls = []

        class Recording(FilterPredicate):
            kind = FilterKind.EQUALS_LITERAL

            def __init__(self, result):
                self.result = result

            def accepts(self, row):
                calls.append(self.result)
                return self.result

        assert not accepts_all([Recording(False), Recording(True)], ["a"])
        assert calls == [False]
