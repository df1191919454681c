"""
Record source: a delimited file read lazily, one record at a time.

The header (record 0) is read when the source is opened.
Data records are pulled on demand and never buffered, so a query
that stops early never scans the rest of the file.

Records must be rectangular: a record whose field count differs
from the header's is a RecordReadError. Blank lines are skipped.
"""

import csv
import logging
import sys
from typing import Iterator, List, Optional

from csvpeek.config import DEFAULT_DELIMITER, DEFAULT_ENCODING
from csvpeek.errors import FileOpenError, RecordReadError

log = logging.getLogger(__name__)


def raise_field_size_limit() -> int:
    """Lift the csv module's per-field cap to the largest value a C long holds."""
    limit = sys.maxsize
    while True:
        try:
            csv.field_size_limit(limit)
            return limit
        except OverflowError:
            limit //= 2


class CsvSource:
    """
    An open delimited file.

    Use as a context manager; the file handle is owned by the source
    and closed on exit:

        with CsvSource(path) as source:
            header = source.header
            for record in source.records():
                ...

    records() is single-pass: the underlying stream is not restartable.
    """

    def __init__(self, path: str, delimiter: str = DEFAULT_DELIMITER,
                 encoding: str = DEFAULT_ENCODING):
        self.path = path
        self.delimiter = delimiter
        self.encoding = encoding
        self.header: List[str] = []
        self._handle = None
        self._reader = None

    def __enter__(self) -> "CsvSource":
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def open(self) -> None:
        """
        Open the file and read the header record.

        Raises:
            FileOpenError: If the path is missing or unreadable
            RecordReadError: If the header itself cannot be decoded
        """
        try:
            self._handle = open(self.path, "r", encoding=self.encoding, newline="")
        except OSError as e:
            raise FileOpenError(self.path, e.strerror or str(e)) from e

        raise_field_size_limit()
        self._reader = csv.reader(self._handle, delimiter=self.delimiter)
        try:
            header = self._next_record()
        except RecordReadError:
            self.close()
            raise
        self.header = header if header is not None else []
        log.info("Opened %s with %d columns", self.path, len(self.header))

    def close(self) -> None:
        if self._handle is not None:
            self._handle.close()
            self._handle = None

    def records(self) -> Iterator[List[str]]:
        """
        Yield data records after the header.

        Raises:
            RecordReadError: On a parse error or a field count mismatch
        """
        if self._reader is None:
            raise RuntimeError("CsvSource is not open")

        expected = len(self.header)
        while True:
            record = self._next_record()
            if record is None:
                return
            if len(record) != expected:
                raise RecordReadError(
                    self._reader.line_num,
                    f"found {len(record)} fields, expected {expected}",
                )
            yield record

    def _next_record(self) -> Optional[List[str]]:
        """Next non-blank record, or None at end of file."""
        try:
            for record in self._reader:
                if record:
                    return record
        except csv.Error as e:
            raise RecordReadError(self._reader.line_num, str(e)) from e
        except UnicodeDecodeError as e:
            raise RecordReadError(self._reader.line_num, f"cannot decode as {self.encoding}: {e.reason}") from e
        return None
