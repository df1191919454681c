"""
csvpeek: inspect delimited files from the command line.

Two modes:
    - Info: header names, column count and row count
    - Query: a projected, filtered, row-limited view of the data

QUERY PIPELINE:
---------------
    header row -> SchemaIndex -> {projection, filter set} -> RowStreamEvaluator

Compilation happens before the first data row is read, so every
column and filter error surfaces before any output.
"""

__version__ = "0.1.0"
