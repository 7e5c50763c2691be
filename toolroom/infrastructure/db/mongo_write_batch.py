"""
MongoDB Write Batch
===================

Concrete implementation of WriteBatch using pymongo bulk writes.
"""
import logging
from typing import Any, Dict, Iterable, List, Optional

from pymongo import DeleteOne, InsertOne, ReplaceOne, UpdateOne

from toolroom.domain.repositories.write_batch import WriteBatch
from toolroom.infrastructure.db.mongo_connection import (
    MongoClientManager,
    get_mongo_client,
    new_object_id,
)

logger = logging.getLogger(__name__)


class MongoWriteBatch(WriteBatch):
    """
    Stages writes per collection and flushes each collection with one
    ordered bulk_write.

    With `use_transactions` the flush runs inside a session transaction so
    every collection is written or none is. That needs a replica set; on a
    standalone server each collection's bulk write is applied in order.
    """

    def __init__(
        self,
        client: Optional[MongoClientManager] = None,
        use_transactions: bool = False,
    ) -> None:
        self._client = client or get_mongo_client()
        self._use_transactions = use_transactions
        self._operations: Dict[str, List[Any]] = {}
        self._committed = False

    def _stage(self, collection: str, operation: Any) -> "MongoWriteBatch":
        if self._committed:
            raise RuntimeError("Write batch has already been committed")
        self._operations.setdefault(collection, []).append(operation)
        return self

    def set(self, collection: str, doc_id: str, data: Dict[str, Any]) -> "MongoWriteBatch":
        body = {k: v for k, v in data.items() if k != "_id"}
        body["_id"] = doc_id
        return self._stage(collection, ReplaceOne({"_id": doc_id}, body, upsert=True))

    def insert(self, collection: str, data: Dict[str, Any]) -> str:
        doc_id = new_object_id()
        body = dict(data)
        body["_id"] = doc_id
        self._stage(collection, InsertOne(body))
        return doc_id

    def update(
        self,
        collection: str,
        doc_id: str,
        data: Optional[Dict[str, Any]] = None,
        array_union: Optional[Dict[str, Iterable[Any]]] = None,
        array_remove: Optional[Dict[str, Iterable[Any]]] = None,
    ) -> "MongoWriteBatch":
        update_doc: Dict[str, Any] = {}
        if data:
            update_doc["$set"] = dict(data)
        if array_union:
            update_doc["$addToSet"] = {
                key: {"$each": list(values)} for key, values in array_union.items()
            }
        if array_remove:
            update_doc["$pull"] = {
                key: {"$in": list(values)} for key, values in array_remove.items()
            }
        if not update_doc:
            raise ValueError("Update requires at least one field")
        return self._stage(collection, UpdateOne({"_id": doc_id}, update_doc))

    def delete(self, collection: str, doc_id: str) -> "MongoWriteBatch":
        return self._stage(collection, DeleteOne({"_id": doc_id}))

    @property
    def size(self) -> int:
        return sum(len(ops) for ops in self._operations.values())

    def _apply(self, session: Any = None) -> None:
        kwargs = {"session": session} if session is not None else {}
        for collection, operations in self._operations.items():
            self._client.get_collection(collection).bulk_write(
                operations, ordered=True, **kwargs
            )

    def commit(self) -> int:
        if self._committed:
            raise RuntimeError("Write batch has already been committed")
        self._committed = True

        applied = self.size
        if applied == 0:
            return 0

        if self._use_transactions:
            with self._client.client.start_session() as session:
                session.with_transaction(lambda s: self._apply(s))
        else:
            self._apply()

        logger.debug(
            "Committed %d writes across %s", applied, ", ".join(self._operations)
        )
        return applied
