"""
Output line formatting.

Projected rows are a raw "," join of the selected values: embedded
delimiters are not quoted or escaped. Unprojected rows use a
readable list form, e.g. ["a", "b", "c"].
"""

import json
from typing import Sequence

OUTPUT_SEPARATOR = ","


def format_header(columns: Sequence[str]) -> str:
    return OUTPUT_SEPARATOR.join(columns)


def format_projected(row: Sequence[str], projection: Sequence[int]) -> str:
    return OUTPUT_SEPARATOR.join(row[index] for index in projection)


def format_raw(row: Sequence[str]) -> str:
    return json.dumps(list(row), ensure_ascii=False)
