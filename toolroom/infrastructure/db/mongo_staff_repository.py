"""
MongoDB Staff Repository
========================

Concrete implementation of StaffRepository using MongoDB.
"""
import logging
from typing import List, Optional

from pymongo import ASCENDING
from pymongo.errors import DuplicateKeyError

from toolroom.core.config import get_settings
from toolroom.domain.constants.staff_fields import StaffFields
from toolroom.domain.exceptions import ConflictError, NotFoundError
from toolroom.domain.models.staff import Staff, StaffRole
from toolroom.domain.repositories.staff_repository import StaffRepository
from toolroom.domain.repositories.write_batch import WriteBatch
from toolroom.infrastructure.db.mongo_connection import (
    MongoClientManager,
    get_mongo_client,
    new_object_id,
    to_mongo_datetime,
)
from toolroom.utils.datetime_utils import as_aware, now

logger = logging.getLogger(__name__)

# Documents without an isActive field count as active
_ACTIVE = {StaffFields.IS_ACTIVE: {"$ne": False}}


class MongoStaffRepository(StaffRepository):
    """MongoDB implementation of StaffRepository."""

    def __init__(self, client: Optional[MongoClientManager] = None):
        self._client = client or get_mongo_client()
        self.collection_name = get_settings().staff_collection
        self._collection = self._client.get_collection(self.collection_name)

    def _to_entity(self, doc: dict) -> Staff:
        """Convert MongoDB document to Staff entity."""
        return Staff(
            uid=str(doc[StaffFields.MONGO_ID]),
            auth_uid=doc.get(StaffFields.AUTH_UID),
            full_name=doc.get(StaffFields.FULL_NAME) or "",
            job_code=doc.get(StaffFields.JOB_CODE) or "",
            role=StaffRole.from_string(doc.get(StaffFields.ROLE)),
            team_id=doc.get(StaffFields.TEAM_ID),
            photo_url=doc.get(StaffFields.PHOTO_URL),
            email=doc.get(StaffFields.EMAIL) or "",
            is_active=doc.get(StaffFields.IS_ACTIVE, True),
            has_auth_account=doc.get(StaffFields.HAS_AUTH_ACCOUNT, False),
            assigned_tool_ids=list(doc.get(StaffFields.ASSIGNED_TOOL_IDS) or []),
            created_at=as_aware(doc.get(StaffFields.CREATED_AT)) or now(),
            updated_at=as_aware(doc.get(StaffFields.UPDATED_AT)) or now(),
            last_sign_in=as_aware(doc.get(StaffFields.LAST_SIGN_IN)),
        )

    def to_document(self, staff: Staff) -> dict:
        """Convert Staff entity to MongoDB document (without _id)."""
        return {
            StaffFields.AUTH_UID: staff.auth_uid,
            StaffFields.FULL_NAME: staff.full_name,
            StaffFields.JOB_CODE: staff.job_code,
            StaffFields.ROLE: staff.role.value,
            StaffFields.TEAM_ID: staff.team_id,
            StaffFields.PHOTO_URL: staff.photo_url,
            StaffFields.EMAIL: staff.email,
            StaffFields.IS_ACTIVE: staff.is_active,
            StaffFields.HAS_AUTH_ACCOUNT: staff.has_auth_account,
            StaffFields.ASSIGNED_TOOL_IDS: list(staff.assigned_tool_ids),
            StaffFields.CREATED_AT: to_mongo_datetime(staff.created_at),
            StaffFields.UPDATED_AT: to_mongo_datetime(staff.updated_at),
            StaffFields.LAST_SIGN_IN: to_mongo_datetime(staff.last_sign_in),
        }

    def new_id(self) -> str:
        return new_object_id()

    def create(self, staff: Staff) -> Staff:
        if not staff.uid:
            staff.uid = self.new_id()
        doc = self.to_document(staff)
        doc[StaffFields.MONGO_ID] = staff.uid
        try:
            self._collection.insert_one(doc)
        except DuplicateKeyError:
            raise ConflictError(f"Staff '{staff.uid}' already exists")
        logger.info("Staff created with UID: %s", staff.uid)
        return staff

    def update(self, staff: Staff) -> Staff:
        staff.updated_at = now()
        doc = self.to_document(staff)
        doc.pop(StaffFields.CREATED_AT)
        result = self._collection.update_one(
            {StaffFields.MONGO_ID: staff.uid},
            {"$set": doc},
        )
        if result.matched_count == 0:
            raise NotFoundError(f"Staff member '{staff.uid}' not found")
        return staff

    def _find_one(self, query: dict) -> Optional[Staff]:
        doc = self._collection.find_one(query)
        if not doc:
            return None
        return self._to_entity(doc)

    def find_by_id(self, uid: str) -> Optional[Staff]:
        return self._find_one({StaffFields.MONGO_ID: uid})

    def find_by_email(self, email: str) -> Optional[Staff]:
        return self._find_one({StaffFields.EMAIL: email.strip().lower()})

    def find_by_job_code(self, job_code: str) -> Optional[Staff]:
        return self._find_one({StaffFields.JOB_CODE: job_code.strip()})

    def find_by_auth_uid(self, auth_uid: str) -> Optional[Staff]:
        return self._find_one({StaffFields.AUTH_UID: auth_uid})

    def find_all(
        self,
        include_inactive: bool = False,
        role: Optional[StaffRole] = None,
        team_id: Optional[str] = None,
    ) -> List[Staff]:
        query: dict = {} if include_inactive else dict(_ACTIVE)
        if role is not None:
            query[StaffFields.ROLE] = role.value
        if team_id:
            query[StaffFields.TEAM_ID] = team_id
        docs = self._collection.find(query).sort(StaffFields.FULL_NAME, ASCENDING)
        return [self._to_entity(doc) for doc in docs]

    def count(self, active_only: bool = False, role: Optional[StaffRole] = None) -> int:
        query: dict = dict(_ACTIVE) if active_only else {}
        if role is not None:
            query[StaffFields.ROLE] = role.value
        return self._collection.count_documents(query)

    def exists(self, uid: str) -> bool:
        return self._collection.count_documents({StaffFields.MONGO_ID: uid}, limit=1) > 0

    def delete_all(self) -> int:
        return self._collection.delete_many({}).deleted_count

    def stage_assigned_tool(
        self,
        batch: WriteBatch,
        uid: str,
        tool_unique_id: str,
        assigned: bool,
    ) -> None:
        values = {StaffFields.ASSIGNED_TOOL_IDS: [tool_unique_id]}
        batch.update(
            self.collection_name,
            uid,
            {StaffFields.UPDATED_AT: to_mongo_datetime(now())},
            array_union=values if assigned else None,
            array_remove=None if assigned else values,
        )

    def stage_team(self, batch: WriteBatch, uid: str, team_id: Optional[str]) -> None:
        batch.update(
            self.collection_name,
            uid,
            {
                StaffFields.TEAM_ID: team_id,
                StaffFields.UPDATED_AT: to_mongo_datetime(now()),
            },
        )
