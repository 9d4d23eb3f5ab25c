"""Persistence package: the document store and its process-wide instance."""

from threading import Lock
from typing import Optional

from orgstructure.persistence.document_store import (
    DELETE_FIELD,
    DocumentNotFoundError,
    DocumentStore,
    Increment,
    WriteBatch,
)

_store: Optional[DocumentStore] = None
_lock = Lock()


def get_document_store() -> DocumentStore:
    """Return the shared store, creating it from settings on first use."""
    global _store
    if _store is None:
        with _lock:
            if _store is None:
                from orgstructure.core.settings import get_settings

                store = DocumentStore(get_settings().database_path)
                store.initialize_schema()
                _store = store
    return _store


def set_document_store(store: Optional[DocumentStore]) -> None:
    """Replace the shared store (None resets to lazy creation)."""
    global _store
    with _lock:
        if store is not None:
            store.initialize_schema()
        _store = store


__all__ = [
    "DELETE_FIELD",
    "DocumentNotFoundError",
    "DocumentStore",
    "Increment",
    "WriteBatch",
    "get_document_store",
    "set_document_store",
]
