"""
Filter predicates.

A predicate is a compiled, stateless boolean test over one row.
Predicates form a closed tagged variant: each kind is a frozen
dataclass carrying a FilterKind tag and exposing `accepts(row)`.

Current kinds:
    - EQUALS_LITERAL: exact string equality of one column with a literal

ARCHITECTURAL RULE:
    Column names are resolved at compile time.
    A predicate only holds positional indices that are valid
    for the schema it was compiled against.
    New operators are new kinds, the evaluator contract does not change.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Sequence

Row = Sequence[str]


class FilterKind(Enum):
    """
    Comparison kinds a filter clause can compile to.

    Only string equality is recognized. A clause containing `<` or `>`
    is not special-cased: those characters are ordinary text.
    """

    EQUALS_LITERAL = "="


class FilterPredicate(ABC):
    """
    Base class for all compiled predicates.

    Subclasses are immutable and hold no state between rows,
    so one instance can be reused for every record of a stream.
    """

    kind: FilterKind

    @abstractmethod
    def accepts(self, row: Row) -> bool:
        """Return True if the row passes this predicate."""


@dataclass(frozen=True)
class EqualsLiteral(FilterPredicate):
    """
    Accepts rows whose value at `column_index` equals `literal` exactly.

    Example:
        IMAGE_NAME=file1.png, with IMAGE_NAME at index 2

    Becomes:
        EqualsLiteral(column_index=2, literal="file1.png")

    Properties:
        column_index: Position of the tested column
        literal: Expected value, compared as a string with no coercion
    """

    column_index: int
    literal: str

    @property
    def kind(self) -> FilterKind:
        return FilterKind.EQUALS_LITERAL

    def accepts(self, row: Row) -> bool:
        return row[self.column_index] == self.literal


def accepts_all(predicates: Iterable[FilterPredicate], row: Row) -> bool:
    """AND across a filter set; stops at the first rejection. Empty sets accept."""
    return all(predicate.accepts(row) for predicate in predicates)
