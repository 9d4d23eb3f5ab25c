"""
Document database backed by SQLite.

Documents are JSON objects grouped into named collections and keyed by a
generated string ID. Reads come back as plain dicts with the ID under "id".
"""

import json
import sqlite3
import uuid
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Tuple

from orgstructure.core.exceptions import DatabaseException
from orgstructure.core.logging import get_logger

logger = get_logger(__name__)


class Increment:
    """Update value that adds ``amount`` to the stored number."""

    def __init__(self, amount: float):
        self.amount = amount

    def __repr__(self) -> str:
        return f"Increment({self.amount})"


class _DeleteField:
    def __repr__(self) -> str:
        return "DELETE_FIELD"


# Update value that removes the addressed key
DELETE_FIELD = _DeleteField()


class DocumentNotFoundError(LookupError):
    """Raised when a batched update addresses a document that does not exist."""

    def __init__(self, collection: str, doc_id: str):
        self.collection = collection
        self.doc_id = doc_id
        super().__init__(f"{collection}/{doc_id}")


def _utcnow() -> str:
    return datetime.now(timezone.utc).isoformat()


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def apply_field_updates(data: Dict[str, Any], fields: Dict[str, Any]) -> Dict[str, Any]:
    """
    Merge ``fields`` into ``data`` in place.

    Dotted keys address nested maps ("assignments.r1.p1"); intermediate maps
    are created as needed. DELETE_FIELD removes the key and Increment adds
    to the current number (a missing or non-numeric value counts as 0).

    Returns:
        The updated ``data`` dict
    """
    for key, value in fields.items():
        parts = key.split(".")
        target: Optional[Dict[str, Any]] = data
        for part in parts[:-1]:
            child = target.get(part)
            if not isinstance(child, dict):
                if value is DELETE_FIELD:
                    target = None
                    break
                child = {}
                target[part] = child
            target = child
        if target is None:
            continue

        leaf = parts[-1]
        if value is DELETE_FIELD:
            target.pop(leaf, None)
        elif isinstance(value, Increment):
            current = target.get(leaf)
            target[leaf] = (current if _is_number(current) else 0) + value.amount
        else:
            target[leaf] = value
    return data


def _sort_key(value: Any) -> Tuple[int, Any]:
    if isinstance(value, str):
        return (1, value.casefold())
    if _is_number(value) or isinstance(value, bool):
        return (0, value)
    return (2, str(value))


class WriteBatch:
    """
    Queue of writes applied in a single transaction.

    Usable as a context manager: commits on clean exit, discards the queue
    when the block raises.
    """

    def __init__(self, store: "DocumentStore"):
        self._store = store
        self._operations: List[Tuple[str, str, str, Any]] = []
        self.committed = False

    def set(self, collection: str, doc_id: str, data: Dict[str, Any]) -> "WriteBatch":
        self._operations.append(("set", collection, doc_id, dict(data)))
        return self

    def update(self, collection: str, doc_id: str, fields: Dict[str, Any]) -> "WriteBatch":
        self._operations.append(("update", collection, doc_id, dict(fields)))
        return self

    def delete(self, collection: str, doc_id: str) -> "WriteBatch":
        self._operations.append(("delete", collection, doc_id, None))
        return self

    def __len__(self) -> int:
        return len(self._operations)

    def commit(self) -> None:
        """Apply all queued operations atomically."""
        if self.committed:
            raise RuntimeError("Batch already committed")
        self._store._apply_batch(self._operations)
        self.committed = True

    def __enter__(self) -> "WriteBatch":
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if exc_type is None:
            self.commit()
        else:
            self._operations.clear()
        return False


class DocumentStore:
    """Stores JSON documents in a single SQLite table."""

    def __init__(self, db_path: str | Path = "orgstructure.db", timeout: float = 5.0):
        """
        Initialize the document store.

        Args:
            db_path: Path to SQLite database file
            timeout: Seconds to wait on a locked database
        """
        self.db_path = Path(db_path)
        self.timeout = timeout
        self._ensure_directory()
        self._initialized = False

    def _ensure_directory(self):
        """Ensure database directory exists."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

    @contextmanager
    def get_connection(self) -> Iterator[sqlite3.Connection]:
        """
        Get database connection context manager.

        Commits on success, rolls back on any error. SQLite errors surface
        as DatabaseException.

        Yields:
            sqlite3.Connection: Database connection
        """
        try:
            conn = sqlite3.connect(str(self.db_path), timeout=self.timeout)
        except sqlite3.Error as e:
            raise DatabaseException("connect", str(e)) from e
        conn.row_factory = sqlite3.Row
        try:
            yield conn
            conn.commit()
        except sqlite3.Error as e:
            conn.rollback()
            logger.error("Database error", db_path=str(self.db_path), error=str(e))
            raise DatabaseException("query", str(e)) from e
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def initialize_schema(self) -> None:
        """Create the documents table and its index."""
        if self._initialized:
            return

        with self.get_connection() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS documents (
                    collection TEXT NOT NULL,
                    doc_id TEXT NOT NULL,
                    data TEXT NOT NULL DEFAULT '{}',
                    created_at TEXT NOT NULL,
                    updated_at TEXT NOT NULL,
                    PRIMARY KEY (collection, doc_id)
                )
            """)
            conn.execute("""
                CREATE INDEX IF NOT EXISTS idx_documents_collection_created
                ON documents(collection, created_at)
            """)

        self._initialized = True
        logger.info("Document store initialized", db_path=str(self.db_path))

    # Single-document operations
    def add(self, collection: str, data: Dict[str, Any]) -> str:
        """
        Insert a new document under a generated ID.

        Args:
            collection: Collection name
            data: Document fields ("id" is ignored)

        Returns:
            The new document ID
        """
        doc_id = uuid.uuid4().hex
        body = {k: v for k, v in data.items() if k != "id"}
        now = _utcnow()
        with self.get_connection() as conn:
            conn.execute(
                "INSERT INTO documents (collection, doc_id, data, created_at, updated_at) "
                "VALUES (?, ?, ?, ?, ?)",
                (collection, doc_id, self.serialize_json(body), now, now),
            )
        logger.debug("Document added", collection=collection, doc_id=doc_id)
        return doc_id

    def set(self, collection: str, doc_id: str, data: Dict[str, Any]) -> None:
        """Create or replace a document under a known ID."""
        with self.get_connection() as conn:
            self._set(conn, collection, doc_id, data)

    def get(self, collection: str, doc_id: str) -> Optional[Dict[str, Any]]:
        """
        Fetch one document.

        Returns:
            Document dict including "id", or None if not found
        """
        with self.get_connection() as conn:
            row = conn.execute(
                "SELECT doc_id, data FROM documents WHERE collection = ? AND doc_id = ?",
                (collection, doc_id),
            ).fetchone()
        return self._row_to_document(row) if row else None

    def update(self, collection: str, doc_id: str, fields: Dict[str, Any]) -> bool:
        """
        Merge fields into an existing document.

        Returns:
            True if the document existed and was updated
        """
        with self.get_connection() as conn:
            try:
                self._update(conn, collection, doc_id, fields)
            except DocumentNotFoundError:
                return False
        return True

    def delete(self, collection: str, doc_id: str) -> bool:
        """
        Delete one document.

        Returns:
            True if a document was removed
        """
        with self.get_connection() as conn:
            cursor = conn.execute(
                "DELETE FROM documents WHERE collection = ? AND doc_id = ?",
                (collection, doc_id),
            )
            return cursor.rowcount > 0

    # Collection operations
    def list(
        self,
        collection: str,
        order_by: Optional[str] = None,
        descending: bool = False,
        where: Optional[Dict[str, Any]] = None,
    ) -> List[Dict[str, Any]]:
        """
        Read a whole collection.

        Args:
            collection: Collection name
            order_by: Field to sort by; documents without it come last
            descending: Reverse the order of documents that have the field
            where: Field/value pairs every returned document must equal

        Returns:
            List of document dicts
        """
        with self.get_connection() as conn:
            rows = conn.execute(
                "SELECT doc_id, data FROM documents WHERE collection = ? "
                "ORDER BY created_at, rowid",
                (collection,),
            ).fetchall()

        documents = [self._row_to_document(row) for row in rows]
        if where:
            documents = [
                doc for doc in documents
                if all(doc.get(field) == value for field, value in where.items())
            ]
        if not order_by:
            return documents

        present = [doc for doc in documents if doc.get(order_by) is not None]
        missing = [doc for doc in documents if doc.get(order_by) is None]
        present.sort(key=lambda doc: _sort_key(doc[order_by]), reverse=descending)
        return present + missing

    def count(self, collection: str) -> int:
        with self.get_connection() as conn:
            row = conn.execute(
                "SELECT COUNT(*) AS n FROM documents WHERE collection = ?", (collection,)
            ).fetchone()
        return int(row["n"])

    def batch(self) -> WriteBatch:
        """Start a batch of writes committed together."""
        return WriteBatch(self)

    def clear(self, collection: Optional[str] = None) -> int:
        """
        Delete every document, or every document of one collection.

        Returns:
            Number of documents removed
        """
        with self.get_connection() as conn:
            if collection:
                cursor = conn.execute("DELETE FROM documents WHERE collection = ?", (collection,))
            else:
                cursor = conn.execute("DELETE FROM documents")
            return cursor.rowcount

    # Internals
    def _apply_batch(self, operations: List[Tuple[str, str, str, Any]]) -> None:
        with self.get_connection() as conn:
            for op, collection, doc_id, payload in operations:
                if op == "set":
                    self._set(conn, collection, doc_id, payload)
                elif op == "update":
                    self._update(conn, collection, doc_id, payload)
                elif op == "delete":
                    conn.execute(
                        "DELETE FROM documents WHERE collection = ? AND doc_id = ?",
                        (collection, doc_id),
                    )
        logger.debug("Batch committed", operations=len(operations))

    def _set(self, conn: sqlite3.Connection, collection: str, doc_id: str, data: Dict[str, Any]):
        body = {k: v for k, v in data.items() if k != "id"}
        now = _utcnow()
        conn.execute(
            "INSERT INTO documents (collection, doc_id, data, created_at, updated_at) "
            "VALUES (?, ?, ?, ?, ?) "
            "ON CONFLICT(collection, doc_id) DO UPDATE SET data = excluded.data, "
            "updated_at = excluded.updated_at",
            (collection, doc_id, self.serialize_json(body), now, now),
        )

    def _update(
        self, conn: sqlite3.Connection, collection: str, doc_id: str, fields: Dict[str, Any]
    ) -> None:
        row = conn.execute(
            "SELECT data FROM documents WHERE collection = ? AND doc_id = ?",
            (collection, doc_id),
        ).fetchone()
        if row is None:
            raise DocumentNotFoundError(collection, doc_id)

        data = self.deserialize_json(row["data"])
        apply_field_updates(data, {k: v for k, v in fields.items() if k != "id"})
        conn.execute(
            "UPDATE documents SET data = ?, updated_at = ? WHERE collection = ? AND doc_id = ?",
            (self.serialize_json(data), _utcnow(), collection, doc_id),
        )

    def _row_to_document(self, row: sqlite3.Row) -> Dict[str, Any]:
        document = self.deserialize_json(row["data"])
        document["id"] = row["doc_id"]
        return document

    @staticmethod
    def serialize_json(data: Any) -> str:
        """Serialize data to JSON string."""
        return json.dumps(data, ensure_ascii=False)

    @staticmethod
    def deserialize_json(json_str: str) -> Any:
        """Deserialize JSON string to data."""
        try:
            return json.loads(json_str)
        except (json.JSONDecodeError, TypeError):
            return {}
