"""Repository for business process documents."""

from orgstructure.repositories.base import DocumentRepository


class ProcessRepository(DocumentRepository):
    """Repository for the processes collection."""

    collection = "processes"
    order_field = "name"
    field_defaults = {"description": None, "responsibilityIds": []}


# Singleton instance
process_repository = ProcessRepository()
