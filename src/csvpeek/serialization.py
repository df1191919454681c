"""
Structured rendering of the info report (dict, JSON, YAML).

Keys are stable and explicit so the output can be consumed by scripts.
"""
from __future__ import annotations

import json
from typing import Any, Dict

import yaml

from csvpeek.info import CsvInfo


def info_to_dict(info: CsvInfo) -> Dict[str, Any]:
    return {
        "columns": list(info.headers),
        "column_count": info.column_count,
        "row_count": info.row_count,
    }


def info_to_json(info: CsvInfo) -> str:
    return json.dumps(info_to_dict(info), indent=2, ensure_ascii=False)


def info_to_yaml(info: CsvInfo) -> str:
    return yaml.safe_dump(info_to_dict(info), sort_keys=False, allow_unicode=True)


RENDERERS = {
    "json": info_to_json,
    "yaml": info_to_yaml,
}
