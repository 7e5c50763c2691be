"""
MongoDB Tool Repository
=======================

Concrete implementation of ToolRepository using MongoDB.
"""
import logging
from typing import List, Optional

from pymongo import DESCENDING

from toolroom.core.config import get_settings
from toolroom.domain.constants.tool_fields import ToolFields
from toolroom.domain.exceptions import NotFoundError
from toolroom.domain.models.tool import Tool, ToolStatus
from toolroom.domain.references import staff_ref
from toolroom.domain.repositories.tool_repository import ToolRepository
from toolroom.domain.repositories.write_batch import WriteBatch
from toolroom.infrastructure.db.mongo_connection import (
    MongoClientManager,
    get_mongo_client,
    new_object_id,
    to_mongo_datetime,
)
from toolroom.utils.datetime_utils import as_aware, now

logger = logging.getLogger(__name__)


class MongoToolRepository(ToolRepository):
    """
    MongoDB implementation of ToolRepository.

    Handles all tool persistence operations using MongoDB.
    """

    def __init__(self, client: Optional[MongoClientManager] = None):
        """Initialize repository with MongoDB client."""
        self._client = client or get_mongo_client()
        self.collection_name = get_settings().tools_collection
        self._collection = self._client.get_collection(self.collection_name)

    def _to_entity(self, doc: dict) -> Tool:
        """Convert MongoDB document to Tool entity."""
        num = doc.get(ToolFields.NUM)
        return Tool(
            id=str(doc[ToolFields.MONGO_ID]),
            unique_id=doc.get(ToolFields.UNIQUE_ID) or "",
            name=doc.get(ToolFields.NAME) or "",
            brand=doc.get(ToolFields.BRAND) or "",
            model=doc.get(ToolFields.MODEL) or "",
            num=str(num) if num is not None else "",
            images=list(doc.get(ToolFields.IMAGES) or []),
            qr_payload=doc.get(ToolFields.QR_PAYLOAD) or "",
            status=doc.get(ToolFields.STATUS) or ToolStatus.AVAILABLE,
            current_holder=doc.get(ToolFields.CURRENT_HOLDER),
            last_assigned_to_name=doc.get(ToolFields.LAST_ASSIGNED_TO_NAME),
            last_assigned_to_job_code=doc.get(ToolFields.LAST_ASSIGNED_TO_JOB_CODE),
            last_assigned_by_name=doc.get(ToolFields.LAST_ASSIGNED_BY_NAME),
            last_assigned_at=as_aware(doc.get(ToolFields.LAST_ASSIGNED_AT)),
            last_checkin_at=as_aware(doc.get(ToolFields.LAST_CHECKIN_AT)),
            last_checkin_by_name=doc.get(ToolFields.LAST_CHECKIN_BY_NAME),
            meta=dict(doc.get(ToolFields.META) or {}),
            created_at=as_aware(doc.get(ToolFields.CREATED_AT)) or now(),
            updated_at=as_aware(doc.get(ToolFields.UPDATED_AT)) or now(),
        )

    def to_document(self, tool: Tool) -> dict:
        """Convert Tool entity to MongoDB document (without _id)."""
        return {
            ToolFields.UNIQUE_ID: tool.unique_id,
            ToolFields.NAME: tool.name,
            ToolFields.BRAND: tool.brand,
            ToolFields.MODEL: tool.model,
            ToolFields.NUM: tool.num,
            ToolFields.IMAGES: list(tool.images),
            ToolFields.QR_PAYLOAD: tool.qr_payload,
            ToolFields.STATUS: tool.status,
            ToolFields.CURRENT_HOLDER: tool.current_holder,
            ToolFields.LAST_ASSIGNED_TO_NAME: tool.last_assigned_to_name,
            ToolFields.LAST_ASSIGNED_TO_JOB_CODE: tool.last_assigned_to_job_code,
            ToolFields.LAST_ASSIGNED_BY_NAME: tool.last_assigned_by_name,
            ToolFields.LAST_ASSIGNED_AT: to_mongo_datetime(tool.last_assigned_at),
            ToolFields.LAST_CHECKIN_AT: to_mongo_datetime(tool.last_checkin_at),
            ToolFields.LAST_CHECKIN_BY_NAME: tool.last_checkin_by_name,
            ToolFields.META: dict(tool.meta),
            ToolFields.CREATED_AT: to_mongo_datetime(tool.created_at),
            ToolFields.UPDATED_AT: to_mongo_datetime(tool.updated_at),
        }

    def new_id(self) -> str:
        return new_object_id()

    def create(self, tool: Tool) -> Tool:
        """Create a new tool."""
        if not tool.id:
            tool.id = self.new_id()
        tool.created_at = now()
        tool.updated_at = tool.created_at

        doc = self.to_document(tool)
        doc[ToolFields.MONGO_ID] = tool.id
        self._collection.insert_one(doc)
        logger.info("Tool created with ID: %s", tool.id)
        return tool

    def update(self, tool: Tool) -> Tool:
        """Update an existing tool."""
        tool.updated_at = now()

        doc = self.to_document(tool)
        doc.pop(ToolFields.CREATED_AT)
        result = self._collection.update_one(
            {ToolFields.MONGO_ID: tool.id},
            {"$set": doc},
        )
        if result.matched_count == 0:
            raise NotFoundError(f"Tool '{tool.id}' not found")

        logger.info("Tool updated: %s", tool.id)
        return tool

    def find_by_id(self, tool_id: str) -> Optional[Tool]:
        """Find a tool by its document ID."""
        doc = self._collection.find_one({ToolFields.MONGO_ID: tool_id})
        if not doc:
            return None
        return self._to_entity(doc)

    def find_by_unique_id(self, unique_id: str) -> Optional[Tool]:
        """Find a tool by its label code."""
        doc = self._collection.find_one({ToolFields.UNIQUE_ID: unique_id})
        if not doc:
            return None
        return self._to_entity(doc)

    def find_all(
        self,
        status: Optional[str] = None,
        limit: int = 0,
        offset: int = 0,
    ) -> List[Tool]:
        """List tools, most recently updated first."""
        query = {ToolFields.STATUS: status} if status else {}
        cursor = self._collection.find(query).sort(ToolFields.UPDATED_AT, DESCENDING)
        if offset:
            cursor = cursor.skip(offset)
        if limit:
            cursor = cursor.limit(limit)
        return [self._to_entity(doc) for doc in cursor]

    def find_by_holder(self, staff_uid: str) -> List[Tool]:
        """Find tools checked out to a staff member."""
        docs = self._collection.find(
            {
                ToolFields.CURRENT_HOLDER: staff_ref(staff_uid),
                ToolFields.STATUS: ToolStatus.CHECKED_OUT,
            }
        ).sort(ToolFields.UPDATED_AT, DESCENDING)
        return [self._to_entity(doc) for doc in docs]

    def count(self, status: Optional[str] = None) -> int:
        query = {ToolFields.STATUS: status} if status else {}
        return self._collection.count_documents(query)

    def delete(self, tool_id: str) -> bool:
        """Delete a tool."""
        result = self._collection.delete_one({ToolFields.MONGO_ID: tool_id})
        if result.deleted_count:
            logger.info("Tool deleted: %s", tool_id)
        return result.deleted_count > 0

    def delete_all(self) -> int:
        return self._collection.delete_many({}).deleted_count

    def stage_save(self, batch: WriteBatch, tool: Tool) -> None:
        if not tool.id:
            tool.id = self.new_id()
        batch.set(self.collection_name, tool.id, self.to_document(tool))
