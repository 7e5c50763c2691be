"""
MongoDB History Repositories
============================

Concrete implementations of HistoryRepository and BatchRepository using MongoDB.
"""
import logging
from datetime import datetime
from typing import List, Optional, Tuple

from pymongo import ASCENDING, DESCENDING

from toolroom.core.config import get_settings
from toolroom.domain.constants.history_fields import BatchFields, HistoryFields
from toolroom.domain.models.tool_history import ToolAction, ToolBatch, ToolHistory
from toolroom.domain.repositories.history_repository import BatchRepository, HistoryRepository
from toolroom.domain.repositories.write_batch import WriteBatch
from toolroom.infrastructure.db.mongo_connection import (
    MongoClientManager,
    get_mongo_client,
    new_object_id,
    to_mongo_datetime,
)
from toolroom.utils.datetime_utils import as_aware, now

logger = logging.getLogger(__name__)


def _time_range(field: str, start: Optional[datetime], end: Optional[datetime]) -> dict:
    bounds = {}
    if start is not None:
        bounds["$gte"] = to_mongo_datetime(start)
    if end is not None:
        bounds["$lte"] = to_mongo_datetime(end)
    return {field: bounds} if bounds else {}


class MongoHistoryRepository(HistoryRepository):
    """MongoDB implementation of HistoryRepository."""

    def __init__(self, client: Optional[MongoClientManager] = None):
        self._client = client or get_mongo_client()
        self.collection_name = get_settings().history_collection
        self._collection = self._client.get_collection(self.collection_name)

    def _to_entity(self, doc: dict) -> ToolHistory:
        return ToolHistory(
            id=str(doc[HistoryFields.MONGO_ID]),
            tool_ref=doc.get(HistoryFields.TOOL_REF) or "",
            action=ToolAction.from_string(doc.get(HistoryFields.ACTION)),
            by_ref=doc.get(HistoryFields.BY) or "",
            supervisor_ref=doc.get(HistoryFields.SUPERVISOR),
            assigned_to_ref=doc.get(HistoryFields.ASSIGNED_TO),
            timestamp=as_aware(doc.get(HistoryFields.TIMESTAMP)) or now(),
            notes=doc.get(HistoryFields.NOTES),
            location=doc.get(HistoryFields.LOCATION),
            batch_id=doc.get(HistoryFields.BATCH_ID),
            metadata=dict(doc.get(HistoryFields.METADATA) or {}),
        )

    def to_document(self, entry: ToolHistory) -> dict:
        return {
            HistoryFields.TOOL_REF: entry.tool_ref,
            HistoryFields.ACTION: entry.action.value,
            HistoryFields.BY: entry.by_ref,
            HistoryFields.SUPERVISOR: entry.supervisor_ref,
            HistoryFields.ASSIGNED_TO: entry.assigned_to_ref,
            HistoryFields.TIMESTAMP: to_mongo_datetime(entry.timestamp),
            HistoryFields.NOTES: entry.notes,
            HistoryFields.LOCATION: entry.location,
            HistoryFields.BATCH_ID: entry.batch_id,
            HistoryFields.METADATA: dict(entry.metadata),
        }

    def new_id(self) -> str:
        return new_object_id()

    def create(self, entry: ToolHistory) -> ToolHistory:
        if not entry.id:
            entry.id = self.new_id()
        doc = self.to_document(entry)
        doc[HistoryFields.MONGO_ID] = entry.id
        self._collection.insert_one(doc)
        return entry

    def find_by_id(self, entry_id: str) -> Optional[ToolHistory]:
        doc = self._collection.find_one({HistoryFields.MONGO_ID: entry_id})
        if not doc:
            return None
        return self._to_entity(doc)

    def find(
        self,
        tool_ref: Optional[str] = None,
        staff_ref: Optional[str] = None,
        batch_id: Optional[str] = None,
        action: Optional[ToolAction] = None,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        limit: int = 0,
        offset: int = 0,
    ) -> List[ToolHistory]:
        query: dict = _time_range(HistoryFields.TIMESTAMP, start, end)
        if tool_ref:
            query[HistoryFields.TOOL_REF] = tool_ref
        if staff_ref:
            query["$or"] = [
                {HistoryFields.BY: staff_ref},
                {HistoryFields.ASSIGNED_TO: staff_ref},
            ]
        if batch_id:
            query[HistoryFields.BATCH_ID] = batch_id
        if action is not None:
            query[HistoryFields.ACTION] = action.value

        cursor = self._collection.find(query).sort(HistoryFields.TIMESTAMP, DESCENDING)
        if offset:
            cursor = cursor.skip(offset)
        if limit:
            cursor = cursor.limit(limit)
        return [self._to_entity(doc) for doc in cursor]

    def count(
        self,
        by_ref: Optional[str] = None,
        action: Optional[ToolAction] = None,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> int:
        query: dict = _time_range(HistoryFields.TIMESTAMP, start, end)
        if by_ref:
            query[HistoryFields.BY] = by_ref
        if action is not None:
            query[HistoryFields.ACTION] = action.value
        return self._collection.count_documents(query)

    def count_by_performer(
        self,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        limit: int = 0,
    ) -> List[Tuple[str, int]]:
        match: dict = _time_range(HistoryFields.TIMESTAMP, start, end)
        match[HistoryFields.BY] = {"$nin": [None, ""]}
        pipeline = [
            {"$match": match},
            {"$group": {"_id": f"${HistoryFields.BY}", "count": {"$sum": 1}}},
            {"$sort": {"count": DESCENDING, "_id": ASCENDING}},
        ]
        if limit:
            pipeline.append({"$limit": limit})
        return [(row["_id"], row["count"]) for row in self._collection.aggregate(pipeline)]

    def update_notes(self, entry_id: str, notes: str) -> bool:
        result = self._collection.update_one(
            {HistoryFields.MONGO_ID: entry_id},
            {
                "$set": {
                    HistoryFields.NOTES: notes,
                    f"{HistoryFields.METADATA}.updatedAt": to_mongo_datetime(now()),
                }
            },
        )
        return result.matched_count > 0

    def delete(self, entry_id: str) -> bool:
        result = self._collection.delete_one({HistoryFields.MONGO_ID: entry_id})
        if result.deleted_count:
            logger.info("History entry deleted: %s", entry_id)
        return result.deleted_count > 0

    def delete_all(self) -> int:
        return self._collection.delete_many({}).deleted_count

    def stage_create(self, batch: WriteBatch, entry: ToolHistory) -> None:
        if not entry.id:
            entry.id = self.new_id()
        batch.set(self.collection_name, entry.id, self.to_document(entry))


class MongoBatchRepository(BatchRepository):
    """MongoDB implementation of BatchRepository."""

    def __init__(self, client: Optional[MongoClientManager] = None):
        self._client = client or get_mongo_client()
        self.collection_name = get_settings().batches_collection
        self._collection = self._client.get_collection(self.collection_name)

    def _to_entity(self, doc: dict) -> ToolBatch:
        return ToolBatch(
            id=str(doc[BatchFields.MONGO_ID]),
            created_by=doc.get(BatchFields.CREATED_BY) or "",
            created_at=as_aware(doc.get(BatchFields.CREATED_AT)) or now(),
            tool_ids=list(doc.get(BatchFields.TOOL_IDS) or []),
            assigned_to_ref=doc.get(BatchFields.ASSIGNED_TO),
            notes=doc.get(BatchFields.NOTES),
            action=ToolAction.from_string(doc.get(BatchFields.ACTION)),
            metadata=dict(doc.get(BatchFields.METADATA) or {}),
        )

    def to_document(self, batch_record: ToolBatch) -> dict:
        return {
            BatchFields.CREATED_BY: batch_record.created_by,
            BatchFields.CREATED_AT: to_mongo_datetime(batch_record.created_at),
            BatchFields.TOOL_IDS: list(batch_record.tool_ids),
            BatchFields.ASSIGNED_TO: batch_record.assigned_to_ref,
            BatchFields.NOTES: batch_record.notes,
            BatchFields.ACTION: batch_record.action.value,
            BatchFields.METADATA: dict(batch_record.metadata),
        }

    def new_id(self) -> str:
        return new_object_id()

    def save(self, batch_record: ToolBatch) -> ToolBatch:
        if not batch_record.id:
            batch_record.id = self.new_id()
        self._collection.replace_one(
            {BatchFields.MONGO_ID: batch_record.id},
            self.to_document(batch_record),
            upsert=True,
        )
        return batch_record

    def find_by_id(self, batch_id: str) -> Optional[ToolBatch]:
        doc = self._collection.find_one({BatchFields.MONGO_ID: batch_id})
        if not doc:
            return None
        return self._to_entity(doc)

    def find_all(self, limit: int = 0) -> List[ToolBatch]:
        cursor = self._collection.find({}).sort(BatchFields.CREATED_AT, DESCENDING)
        if limit:
            cursor = cursor.limit(limit)
        return [self._to_entity(doc) for doc in cursor]

    def delete_all(self) -> int:
        return self._collection.delete_many({}).deleted_count

    def stage_save(self, batch: WriteBatch, batch_record: ToolBatch) -> None:
        if not batch_record.id:
            batch_record.id = self.new_id()
        batch.set(self.collection_name, batch_record.id, self.to_document(batch_record))
