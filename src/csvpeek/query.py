"""
Query compilation (compile phase: raw option strings -> executable Query).

Converts:
    --cols "c,a"          -> projection [2, 0]
    --filter "A=x,B=y=z"  -> [EqualsLiteral(0, "x"), EqualsLiteral(1, "y=z")]

Clause grammar:
    <column-name> "=" <literal>

    - The filter set is split on "," first, then each clause on its first "="
    - Everything after the first "=" is the literal, later "=" kept verbatim
    - No quoting, no escaping, no whitespace trimming

Every error is raised here, before a single data row is read.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from csvpeek.config import DEFAULT_LIMIT, DEFAULT_OFFSET
from csvpeek.errors import MalformedFilter
from csvpeek.predicates import EqualsLiteral, FilterPredicate
from csvpeek.schema import SchemaIndex

log = logging.getLogger(__name__)

LIST_SEPARATOR = ","
EQUALS_OPERATOR = "="


@dataclass(frozen=True)
class Query:
    """
    A compiled query, ready for the Row Stream Evaluator.

    Properties:
        schema: Schema the query was compiled against
        projection: Column indices in output order; empty means raw rows
        filters: Predicates AND-ed together; empty accepts every row
        offset: Records to skip before filtering
        limit: Maximum number of rows to emit; 0 emits nothing
    """

    schema: SchemaIndex
    projection: Tuple[int, ...] = ()
    filters: Tuple[FilterPredicate, ...] = ()
    offset: int = DEFAULT_OFFSET
    limit: int = DEFAULT_LIMIT

    @property
    def projected_columns(self) -> List[str]:
        """Header names of the projection, in output order."""
        return [self.schema.columns[index] for index in self.projection]


def resolve_projection(schema: SchemaIndex, spec: Optional[str]) -> List[int]:
    """
    Turn a comma-separated column list into ordered column indices.

    The caller's order is kept and columns may repeat.
    Resolution is fail-fast: the first unknown name aborts.

    Args:
        schema: Schema to resolve against
        spec: e.g. "c,a", or None for no projection

    Returns:
        List of column indices (empty when spec is None)

    Raises:
        UnknownColumn: On the first name absent from the schema
    """
    if spec is None:
        return []
    return [schema.resolve(name) for name in spec.split(LIST_SEPARATOR)]


def compile_filter(schema: SchemaIndex, clause: str) -> FilterPredicate:
    """
    Compile a single filter clause.

    Raises:
        MalformedFilter: If the clause contains no "="
        UnknownColumn: If the left-hand side is not a header name
    """
    if EQUALS_OPERATOR not in clause:
        raise MalformedFilter(clause)

    column, literal = clause.split(EQUALS_OPERATOR, 1)
    return EqualsLiteral(column_index=schema.resolve(column), literal=literal)


def compile_filters(schema: SchemaIndex, spec: Optional[str]) -> List[FilterPredicate]:
    """
    Compile a comma-separated filter set, preserving clause order.

    Args:
        schema: Schema to resolve column references against
        spec: e.g. "STATUS=ok,IMAGE_NAME=file1.png", or None

    Returns:
        List of predicates (empty when spec is None)
    """
    if spec is None:
        return []
    return [compile_filter(schema, clause) for clause in spec.split(LIST_SEPARATOR)]


def compile_query(
    schema: SchemaIndex,
    cols: Optional[str] = None,
    filters: Optional[str] = None,
    offset: int = DEFAULT_OFFSET,
    limit: int = DEFAULT_LIMIT,
) -> Query:
    """
    Compile projection and filter specs into a Query.

    Raises:
        ValueError: If offset or limit is negative
        UnknownColumn, MalformedFilter: From compilation
    """
    if offset < 0:
        raise ValueError(f"offset must be non-negative, got {offset}")
    if limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")

    projection = resolve_projection(schema, cols)
    predicates = compile_filters(schema, filters)
    log.debug("Compiled projection %s and filters %s", projection, predicates)

    return Query(
        schema=schema,
        projection=tuple(projection),
        filters=tuple(predicates),
        offset=offset,
        limit=limit,
    )
