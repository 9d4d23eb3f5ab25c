"""
Unit tests for orgstructure/utils/common.py
"""
import re

import pytest

from orgstructure.utils.common import (
    clean_column_name,
    read_csv_bytes,
    records_to_csv,
    today_iso,
)


class TestCleanColumnName:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("Name", "name"),
            ("  Description ", "description"),
            ("name ###[required]###", "name"),
        ],
    )
    def test_clean(self, raw, expected):
        assert clean_column_name(raw) == expected


class TestReadCsvBytes:
    def test_reads_strings_with_bom(self):
        df = read_csv_bytes("Name,Description\n007,\n".encode("utf-8-sig"))

        assert list(df.columns) == ["name", "description"]
        assert df.loc[0, "name"] == "007"
        assert df.loc[0, "description"] == ""

    def test_empty_content(self):
        with pytest.raises(ValueError):
            read_csv_bytes(b"   ")

    def test_headers_colliding_after_cleaning(self):
        with pytest.raises(ValueError, match="Duplicate columns"):
            read_csv_bytes(b"Name,name \nWelding,Welding\n")


class TestRecordsToCsv:
    def test_fixed_columns_and_blanks(self):
        content = records_to_csv([{"id": "1", "name": "A", "extra": "x"}], ["id", "name", "description"])
        assert content.splitlines() == ["id,name,description", "1,A,"]


def test_today_iso_format():
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2}", today_iso())
