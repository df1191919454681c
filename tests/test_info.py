"""
Tests for info mode and its structured renderings.
"""

import json

import yaml
from csvpeek.info import CsvInfo, collect_info, collect_source_info, format_info
from csvpeek.reader import CsvSource
from csvpeek.serialization import RENDERERS, info_to_dict, info_to_json, info_to_yaml


def build_info() -> CsvInfo:
    return CsvInfo(headers=["ID", "NAME", "IMAGE_NAME"], row_count=42)


class TestCollectInfo:

    def test_counts_rows_and_columns(self):
        info = collect_info(["a", "b"], iter([["1", "2"], ["3", "4"], ["5", "6"]]))
        assert info.headers == ["a", "b"]
        assert info.column_count == 2
        assert info.row_count == 3

    def test_no_rows(self):
        info = collect_info(["a"], iter([]))
        assert info.row_count == 0

    def test_from_source(self, tmp_path):
        path = tmp_path / "data.csv"
        path.write_text("a,b,c\n1,2,3\n4,5,6\n", encoding="utf-8")
        with CsvSource(str(path)) as source:
            info = collect_source_info(source)
        assert info == CsvInfo(headers=["a", "b", "c"], row_count=2)


class TestFormatInfo:

    def test_text_report(self):
        """N header lines, then the column count, then the row count."""
        assert format_info(build_info()) == [
            "ID",
            "NAME",
            "IMAGE_NAME",
            "Number of columns: 3",
            "Number of rows: 42",
        ]

    def test_empty_file_report(self):
        assert format_info(CsvInfo()) == ["Number of columns: 0", "Number of rows: 0"]


class TestSerialization:

    def test_to_dict(self):
        assert info_to_dict(build_info()) == {
            "columns": ["ID", "NAME", "IMAGE_NAME"],
            "column_count": 3,
            "row_count": 42,
        }

    def test_json_is_parseable(self):
        assert json.loads(info_to_json(build_info())) == info_to_dict(build_info())

    def test_yaml_is_parseable(self):
        assert yaml.safe_load(info_to_yaml(build_info())) == info_to_dict(build_info())

    def test_yaml_keeps_key_order(self):
        text = info_to_yaml(build_info())
        assert text.index("columns:") < text.index("column_count:") < text.index("row_count:")

    def test_renderers(self):
        assert set(RENDERERS) == {"json", "yaml"}
