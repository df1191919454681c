"""
Row Stream Evaluator.

Drives a compiled Query over a lazy record stream:

    SKIPPING    rows seen < offset; the row is neither filtered nor emitted
    EVALUATING  run the filter set, AND semantics, first rejection wins
    EMITTING    format the row per the projection and yield one line
    DONE        limit reached or stream exhausted; nothing more is read

Offset counts records read, before filtering.
Limit counts emitted rows only.
A limit of 0 ends the run before the first record is pulled.

At most one record is in flight at any time.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Sequence

from csvpeek.formatting import format_projected, format_raw
from csvpeek.predicates import accepts_all
from csvpeek.query import Query

log = logging.getLogger(__name__)


class EvaluatorState(Enum):
    SKIPPING = "skipping"
    EVALUATING = "evaluating"
    EMITTING = "emitting"
    DONE = "done"


@dataclass
class EvaluationStats:
    """Counters for one run of the evaluator."""
    rows_seen: int = 0
    rows_skipped: int = 0
    rows_evaluated: int = 0
    rows_rejected: int = 0
    rows_emitted: int = 0


class RowStreamEvaluator:
    """
    Streams records through offset, filters and limit.

    Example:
        evaluator = RowStreamEvaluator(query)
        for line in evaluator.run(source.records()):
            print(line)

    `state` and `stats` reflect progress and stay readable after the run.
    """

    def __init__(self, query: Query):
        self.query = query
        self.state = EvaluatorState.SKIPPING
        self.stats = EvaluationStats()

    def run(self, records: Iterable[Sequence[str]]) -> Iterator[str]:
        """
        Yield one formatted output line per emitted row.

        Errors raised by the record stream propagate unchanged;
        lines already yielded stay valid.
        """
        query = self.query
        self.state = EvaluatorState.SKIPPING if query.offset else EvaluatorState.EVALUATING

        try:
            if query.limit == 0:
                return

            for row in records:
                self.stats.rows_seen += 1

                if self.state is EvaluatorState.SKIPPING:
                    self.stats.rows_skipped += 1
                    if self.stats.rows_skipped >= query.offset:
                        self.state = EvaluatorState.EVALUATING
                    continue

                self.stats.rows_evaluated += 1
                if not accepts_all(query.filters, row):
                    self.stats.rows_rejected += 1
                    continue

                self.state = EvaluatorState.EMITTING
                line = self._format(row)
                self.stats.rows_emitted += 1
                yield line

                if self.stats.rows_emitted >= query.limit:
                    break
                self.state = EvaluatorState.EVALUATING
        finally:
            self._finish()

    def _format(self, row: Sequence[str]) -> str:
        if self.query.projection:
            return format_projected(row, self.query.projection)
        return format_raw(row)

    def _finish(self) -> None:
        self.state = EvaluatorState.DONE
        log.debug("Evaluation finished: %s", self.stats)
