"""
Schema Index: header names mapped to positional column indices.

Built once per file from the header record and then only read.
The query compiler borrows it to resolve projections and filters.

DUPLICATE HEADERS:
    The first occurrence of a name wins during resolution.
    Every header is still listed, in file order.
    Duplicates are reported with a UserWarning, never an error.
"""

import warnings
from dataclasses import dataclass, field
from typing import Dict, List, Sequence, Tuple

from csvpeek.errors import UnknownColumn


@dataclass(frozen=True)
class SchemaIndex:
    """
    Ordered column names plus a name -> index lookup.

    Properties:
        columns: Header names in file order
        positions: Name -> index of its first occurrence
    """

    columns: Tuple[str, ...]
    positions: Dict[str, int] = field(compare=False, repr=False)

    @classmethod
    def from_header(cls, header: Sequence[str]) -> "SchemaIndex":
        """
        Build the index from a header record.

        Args:
            header: Header field values, in file order

        Returns:
            SchemaIndex
        """
        positions: Dict[str, int] = {}
        duplicates: List[str] = []
        for index, name in enumerate(header):
            if name in positions:
                if name not in duplicates:
                    duplicates.append(name)
                continue
            positions[name] = index

        if duplicates:
            warnings.warn(
                f"Duplicate header names {duplicates}; the first occurrence of each is used",
                UserWarning,
            )

        return cls(columns=tuple(header), positions=positions)

    @property
    def column_count(self) -> int:
        return len(self.columns)

    def resolve(self, name: str) -> int:
        """
        Look up the index of a column.

        Raises:
            UnknownColumn: If no header has this name
        """
        try:
            return self.positions[name]
        except KeyError:
            raise UnknownColumn(name) from None

    def __contains__(self, name: object) -> bool:
        return name in self.positions
