"""
Repository base class over the document store.

Each subclass binds one collection, its default ordering, and the defaults
applied to documents on read so callers never see a missing array field.
"""

import copy
from typing import Any, Dict, List, Optional

from orgstructure.persistence import DocumentStore, get_document_store


class DocumentRepository:
    """Data access for a single collection."""

    collection: str = ""
    order_field: Optional[str] = None
    descending: bool = False
    field_defaults: Dict[str, Any] = {}

    def __init__(self, store: Optional[DocumentStore] = None):
        self._store = store

    @property
    def store(self) -> DocumentStore:
        return self._store if self._store is not None else get_document_store()

    def normalize(self, document: Dict[str, Any]) -> Dict[str, Any]:
        """Fill missing or null fields from ``field_defaults``."""
        for field, default in self.field_defaults.items():
            if document.get(field) is None:
                document[field] = copy.deepcopy(default)
        return document

    def list_all(self, where: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        """
        Read the collection in its default order.

        Args:
            where: Optional field/value equality filter

        Returns:
            Normalized documents
        """
        documents = self.store.list(
            self.collection,
            order_by=self.order_field,
            descending=self.descending,
            where=where,
        )
        return [self.normalize(doc) for doc in documents]

    def get(self, doc_id: str) -> Optional[Dict[str, Any]]:
        """
        Retrieve one document by ID.

        Returns:
            Normalized document or None if not found
        """
        document = self.store.get(self.collection, doc_id)
        return self.normalize(document) if document is not None else None

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Insert a document.

        Returns:
            The stored document including its new ID
        """
        doc_id = self.store.add(self.collection, data)
        return self.normalize({**data, "id": doc_id})

    def update(self, doc_id: str, fields: Dict[str, Any]) -> bool:
        """Merge fields into a document. Returns False if it does not exist."""
        return self.store.update(self.collection, doc_id, fields)

    def delete(self, doc_id: str) -> bool:
        """Delete a document. Returns False if it did not exist."""
        return self.store.delete(self.collection, doc_id)

    def exists(self, doc_id: str) -> bool:
        return self.get(doc_id) is not None

    def count(self) -> int:
        return self.store.count(self.collection)
