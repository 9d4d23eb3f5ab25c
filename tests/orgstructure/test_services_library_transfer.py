"""
Tests for orgstructure/services/library_transfer_service.py
"""
import io

import pandas as pd
import pytest

from orgstructure.core.exceptions import InvalidImportFileException
from orgstructure.repositories import standard_skill_repository
from orgstructure.services.library_transfer_service import LibraryTransferService


@pytest.fixture
def service(store):
    return LibraryTransferService(standard_skill_repository, "skill")


def to_csv_bytes(df: pd.DataFrame) -> bytes:
    return df.to_csv(index=False).encode("utf-8-sig")


class TestLibraryImport:
    @pytest.mark.asyncio
    async def test_import_skips_blank_and_duplicate_names(self, service):
        standard_skill_repository.create({"name": "Diagnostics"})
        content = to_csv_bytes(
            pd.DataFrame(
                {
                    "Name": ["diagnostics", "Welding", "", "welding", "Scheduling"],
                    "Description": ["dup", "Join metal", "blank", "dup", ""],
                }
            )
        )

        summary = await service.import_csv(content, "skills.csv")

        assert summary["imported"] == 2
        assert summary["skipped"] == 3
        names = [item["name"] for item in standard_skill_repository.list_all()]
        assert names == ["Diagnostics", "Scheduling", "Welding"]
        welding = standard_skill_repository.find_by_name("Welding")
        assert welding["description"] == "Join metal"
        assert standard_skill_repository.find_by_name("Scheduling")["description"] is None

    @pytest.mark.asyncio
    async def test_import_without_description_column(self, service):
        summary = await service.import_csv(b"name\nWelding\n", "skills.csv")
        assert summary["imported"] == 1

    @pytest.mark.asyncio
    async def test_import_requires_name_column(self, service):
        with pytest.raises(InvalidImportFileException) as exc_info:
            await service.import_csv(b"title\nWelding\n", "skills.csv")

        assert exc_info.value.error_code == "INVALID_IMPORT_FILE"
        assert exc_info.value.status_code == 400

    @pytest.mark.asyncio
    async def test_import_empty_file(self, service):
        with pytest.raises(InvalidImportFileException):
            await service.import_csv(b"", "empty.csv")


class TestLibraryExport:
    @pytest.mark.asyncio
    async def test_export_orders_by_name(self, service):
        standard_skill_repository.create({"name": "Welding", "description": "Join metal"})
        standard_skill_repository.create({"name": "Diagnostics"})

        df = pd.read_csv(io.StringIO(await service.export_csv()), keep_default_na=False)

        assert list(df.columns) == ["id", "name", "description"]
        assert list(df["name"]) == ["Diagnostics", "Welding"]
        assert list(df["description"]) == ["", "Join metal"]

    @pytest.mark.asyncio
    async def test_export_empty_library_has_header(self, service):
        content = await service.export_csv()
        assert content.strip() == "id,name,description"
