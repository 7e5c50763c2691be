"""
MongoDB Team Repository
=======================
"""
from typing import List, Optional

from pymongo import ASCENDING

from toolroom.core.config import get_settings
from toolroom.domain.constants.team_fields import TeamFields
from toolroom.domain.models.team import Team
from toolroom.domain.repositories.team_repository import TeamRepository
from toolroom.domain.repositories.write_batch import WriteBatch
from toolroom.infrastructure.db.mongo_connection import (
    MongoClientManager,
    get_mongo_client,
    to_mongo_datetime,
)
from toolroom.utils.datetime_utils import as_aware, now


class MongoTeamRepository(TeamRepository):
    """MongoDB implementation of TeamRepository."""

    def __init__(self, client: Optional[MongoClientManager] = None):
        self._client = client or get_mongo_client()
        self.collection_name = get_settings().teams_collection
        self._collection = self._client.get_collection(self.collection_name)

    def _to_entity(self, doc: dict) -> Team:
        return Team(
            id=str(doc[TeamFields.MONGO_ID]),
            name=doc.get(TeamFields.NAME) or "",
            description=doc.get(TeamFields.DESCRIPTION) or "",
            leader=doc.get(TeamFields.LEADER) or "",
            members=list(doc.get(TeamFields.MEMBERS) or []),
            is_active=doc.get(TeamFields.IS_ACTIVE, True),
            created_at=as_aware(doc.get(TeamFields.CREATED_AT)) or now(),
        )

    def to_document(self, team: Team) -> dict:
        return {
            TeamFields.NAME: team.name,
            TeamFields.DESCRIPTION: team.description,
            TeamFields.LEADER: team.leader,
            TeamFields.MEMBERS: list(team.members),
            TeamFields.IS_ACTIVE: team.is_active,
            TeamFields.CREATED_AT: to_mongo_datetime(team.created_at),
        }

    def save(self, team: Team) -> Team:
        self._collection.replace_one(
            {TeamFields.MONGO_ID: team.id},
            self.to_document(team),
            upsert=True,
        )
        return team

    def find_by_id(self, team_id: str) -> Optional[Team]:
        doc = self._collection.find_one({TeamFields.MONGO_ID: team_id})
        if not doc:
            return None
        return self._to_entity(doc)

    def find_all(self, active_only: bool = False) -> List[Team]:
        query = {TeamFields.IS_ACTIVE: {"$ne": False}} if active_only else {}
        docs = self._collection.find(query).sort(TeamFields.NAME, ASCENDING)
        return [self._to_entity(doc) for doc in docs]

    def exists(self, team_id: str) -> bool:
        return self._collection.count_documents({TeamFields.MONGO_ID: team_id}, limit=1) > 0

    def delete_all(self) -> int:
        return self._collection.delete_many({}).deleted_count

    def stage_member(self, batch: WriteBatch, team_id: str, staff_uid: str, member: bool) -> None:
        values = {TeamFields.MEMBERS: [staff_uid]}
        batch.update(
            self.collection_name,
            team_id,
            array_union=values if member else None,
            array_remove=None if member else values,
        )
