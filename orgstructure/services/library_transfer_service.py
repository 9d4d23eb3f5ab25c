"""
CSV import and export of the standard item libraries.

Import files need a ``name`` column and may carry a ``description`` column.
Blank names and names already in the library (case-insensitive) are skipped.
"""

from typing import Any, Dict

from orgstructure.core.exceptions import InvalidImportFileException
from orgstructure.core.logging import get_logger
from orgstructure.repositories import (
    standard_responsibility_repository,
    standard_skill_repository,
)
from orgstructure.repositories.library_repository import StandardItemRepository
from orgstructure.utils.common import read_csv_bytes, records_to_csv

logger = get_logger(__name__)

EXPORT_COLUMNS = ["id", "name", "description"]
MAX_NAME_LENGTH = 100
MAX_DESCRIPTION_LENGTH = 500


class LibraryTransferService:
    """Moves library items between the store and CSV files."""

    def __init__(self, repository: StandardItemRepository, kind: str):
        self.repository = repository
        self.kind = kind

    async def import_csv(self, content: bytes, filename: str) -> Dict[str, Any]:
        """
        Add the rows of a CSV file to the library.

        Args:
            content: Raw file bytes
            filename: Original file name, for error messages

        Returns:
            Dict with imported count, skipped count and the created items

        Raises:
            InvalidImportFileException: If the file cannot be parsed or has no name column
        """
        try:
            df = read_csv_bytes(content)
        except ValueError as e:
            raise InvalidImportFileException(filename, str(e)) from e

        if "name" not in df.columns:
            raise InvalidImportFileException(filename, "missing required column 'name'")
        if "description" not in df.columns:
            df["description"] = ""

        df["name"] = df["name"].str.strip()
        df["description"] = df["description"].str.strip()

        known = set(self.repository.names())
        created = []
        skipped = 0
        for row in df.itertuples(index=False):
            name = row.name
            key = name.casefold()
            if len(name) < 2 or len(name) > MAX_NAME_LENGTH or key in known:
                skipped += 1
                continue
            description = row.description[:MAX_DESCRIPTION_LENGTH] or None
            created.append(self.repository.create({"name": name, "description": description}))
            known.add(key)

        logger.info(
            "Library imported",
            kind=self.kind,
            filename=filename,
            imported=len(created),
            skipped=skipped,
        )
        return {"imported": len(created), "skipped": skipped, "items": created}

    async def export_csv(self) -> str:
        """The whole library as CSV text ordered by name."""
        items = self.repository.list_all()
        return records_to_csv(items, EXPORT_COLUMNS)


# Singleton instances
skill_transfer_service = LibraryTransferService(standard_skill_repository, "skill")
responsibility_transfer_service = LibraryTransferService(
    standard_responsibility_repository, "responsibility"
)
