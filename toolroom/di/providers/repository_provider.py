from typing import TYPE_CHECKING

from ...domain.repositories.history_repository import BatchRepository, HistoryRepository
from ...domain.repositories.staff_repository import StaffRepository
from ...domain.repositories.team_repository import TeamRepository
from ...domain.repositories.tool_repository import ToolRepository
from ...infrastructure.db.mongo_history_repository import MongoBatchRepository, MongoHistoryRepository
from ...infrastructure.db.mongo_staff_repository import MongoStaffRepository
from ...infrastructure.db.mongo_team_repository import MongoTeamRepository
from ...infrastructure.db.mongo_tool_repository import MongoToolRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all repository implementations.
        Gets database client from database provider and creates repository instances.
        """
        # Get MongoDB client from database provider
        mongo_client = container.get("mongo_client")

        # Domain interfaces -> Infrastructure implementations
        container.register_singleton(ToolRepository, MongoToolRepository(mongo_client))
        container.register_singleton(StaffRepository, MongoStaffRepository(mongo_client))
        container.register_singleton(HistoryRepository, MongoHistoryRepository(mongo_client))
        container.register_singleton(BatchRepository, MongoBatchRepository(mongo_client))
        container.register_singleton(TeamRepository, MongoTeamRepository(mongo_client))
