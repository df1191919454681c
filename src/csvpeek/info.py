"""
Info mode: header names, column count and row count.

A separate traversal from the query pipeline. Every record is
read to be counted; offset, filters, limit and projection never apply.
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Sequence

from csvpeek.reader import CsvSource


@dataclass
class CsvInfo:
    """Summary of one delimited file."""
    headers: List[str] = field(default_factory=list)
    row_count: int = 0

    @property
    def column_count(self) -> int:
        return len(self.headers)


def collect_info(header: Sequence[str], records: Iterable[Sequence[str]]) -> CsvInfo:
    """Count records without retaining them."""
    row_count = 0
    for _ in records:
        row_count += 1
    return CsvInfo(headers=list(header), row_count=row_count)


def collect_source_info(source: CsvSource) -> CsvInfo:
    return collect_info(source.header, source.records())


def format_info(info: CsvInfo) -> List[str]:
    """
    Render the plain-text report.

    Output:
        one line per header name
        Number of columns: N
        Number of rows: M
    """
    lines = list(info.headers)
    lines.append(f"Number of columns: {info.column_count}")
    lines.append(f"Number of rows: {info.row_count}")
    return lines
