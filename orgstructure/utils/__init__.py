"""
Utilities package.
"""

from .common import (
    CSV_ENCODING,
    today_iso,
    clean_column_name,
    clean_dataframe_columns,
    read_csv_bytes,
    dataframe_to_csv,
    records_to_csv,
)

__all__ = [
    "CSV_ENCODING",
    "today_iso",
    "clean_column_name",
    "clean_dataframe_columns",
    "read_csv_bytes",
    "dataframe_to_csv",
    "records_to_csv",
]
