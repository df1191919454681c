"""
Error taxonomy for csvpeek.

Every failure the tool reports to the user is a CsvPeekError.
Anything else escaping the pipeline is a bug and is left to propagate.
"""


class CsvPeekError(Exception):
    """Base class for errors reported to the user."""
    pass


class FileOpenError(CsvPeekError):
    """Raised when the input file is missing or unreadable."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot open '{path}': {reason}")


class UnknownColumn(CsvPeekError):
    """Raised when a projection or filter names a column absent from the header."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Column not found: '{name}'")


class MalformedFilter(CsvPeekError):
    """Raised when a filter clause has no recognized operator."""

    def __init__(self, clause: str):
        self.clause = clause
        super().__init__(f"No operator for filter string '{clause}'")


class RecordReadError(CsvPeekError):
    """Raised when the record stream yields a malformed record."""

    def __init__(self, line: int, message: str):
        self.line = line
        super().__init__(f"Malformed record at line {line}: {message}")


__all__ = [
    "CsvPeekError",
    "FileOpenError",
    "UnknownColumn",
    "MalformedFilter",
    "RecordReadError",
]
