"""
Common utilities for the API: timestamps and CSV conversion.
"""
import io
import re
from datetime import date
from typing import Iterable, List

import pandas as pd


CSV_ENCODING = "utf-8-sig"


def today_iso() -> str:
    """Current date as YYYY-MM-DD, the format stored in lastUpdated fields."""
    return date.today().isoformat()


def clean_column_name(col_name: str) -> str:
    """
    Normalize a CSV header.

    Strips whitespace and annotations like ``###[...]###`` and lower-cases
    the result so "Name " and "name" match.
    """
    col_name = re.sub(r'\s*###\[.*?\]###', '', str(col_name))
    return col_name.strip().lower()


def clean_dataframe_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Return ``df`` with every column name cleaned."""
    df = df.copy()
    df.columns = [clean_column_name(col) for col in df.columns]
    return df


def read_csv_bytes(content: bytes) -> pd.DataFrame:
    """
    Parse an uploaded CSV file.

    All cells are read as strings and missing cells become "".

    Raises:
        ValueError: If the content is empty, not parseable as CSV, or has
            headers that collide once cleaned ("Name" and "name ")
    """
    if not content or not content.strip():
        raise ValueError("File is empty")
    try:
        df = pd.read_csv(io.BytesIO(content), encoding=CSV_ENCODING, dtype=str, keep_default_na=False)
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as e:
        raise ValueError(f"Could not parse CSV: {e}") from e
    df = clean_dataframe_columns(df.fillna(""))
    duplicated = df.columns[df.columns.duplicated()].unique().tolist()
    if duplicated:
        raise ValueError(f"Duplicate columns after cleaning headers: {', '.join(duplicated)}")
    return df


def dataframe_to_csv(df: pd.DataFrame) -> str:
    """Serialize a DataFrame as CSV text without the index."""
    return df.to_csv(index=False)


def records_to_csv(records: Iterable[dict], columns: List[str]) -> str:
    """Serialize dict records as CSV with a fixed column order."""
    df = pd.DataFrame(list(records), columns=columns)
    return dataframe_to_csv(df.fillna(""))
