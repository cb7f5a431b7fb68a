"""
分块结果展示与导出模块
"""

from .table import COLUMNS, chunks_to_dataframe, chunks_to_rows, format_chunk_table
from .csv_exporter import chunks_to_csv, export_chunks_as_csv

__all__ = [
    "COLUMNS",
    "chunks_to_rows",
    "chunks_to_dataframe",
    "format_chunk_table",
    "chunks_to_csv",
    "export_chunks_as_csv",
]
