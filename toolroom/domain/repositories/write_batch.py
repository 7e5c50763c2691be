"""
Write Batch Interface
=====================

Abstract contract for grouping writes across collections and committing
them together. Implementations should be in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, Optional


class WriteBatch(ABC):
    """
    Collects document writes and commits them in one go.

    A batch may be committed once. Committing an empty batch is a no-op.
    """

    @abstractmethod
    def set(self, collection: str, doc_id: str, data: Dict[str, Any]) -> "WriteBatch":
        """
        Create or fully replace a document.

        Args:
            collection: Collection name
            doc_id: Document id
            data: Document body (without the id)
        """
        pass

    @abstractmethod
    def insert(self, collection: str, data: Dict[str, Any]) -> str:
        """
        Insert a new document under a generated id.

        Returns:
            The generated document id
        """
        pass

    @abstractmethod
    def update(
        self,
        collection: str,
        doc_id: str,
        data: Optional[Dict[str, Any]] = None,
        array_union: Optional[Dict[str, Iterable[Any]]] = None,
        array_remove: Optional[Dict[str, Iterable[Any]]] = None,
    ) -> "WriteBatch":
        """
        Partially update an existing document.

        Args:
            collection: Collection name
            doc_id: Document id
            data: Fields to overwrite
            array_union: Array fields to add values to (no duplicates)
            array_remove: Array fields to remove values from
        """
        pass

    @abstractmethod
    def delete(self, collection: str, doc_id: str) -> "WriteBatch":
        """Delete a document."""
        pass

    @abstractmethod
    def commit(self) -> int:
        """
        Apply every staged write.

        Returns:
            Number of operations applied
        """
        pass

    @property
    @abstractmethod
    def size(self) -> int:
        """Number of staged operations."""
        pass
