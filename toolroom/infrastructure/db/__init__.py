from .mongo_connection import MongoClientManager, get_mongo_client
from .mongo_write_batch import MongoWriteBatch
from .mongo_tool_repository import MongoToolRepository
from .mongo_staff_repository import MongoStaffRepository
from .mongo_history_repository import MongoBatchRepository, MongoHistoryRepository
from .mongo_team_repository import MongoTeamRepository

__all__ = [
    "MongoClientManager",
    "get_mongo_client",
    "MongoWriteBatch",
    "MongoToolRepository",
    "MongoStaffRepository",
    "MongoHistoryRepository",
    "MongoBatchRepository",
    "MongoTeamRepository",
]
