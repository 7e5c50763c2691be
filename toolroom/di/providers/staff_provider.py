from typing import TYPE_CHECKING

from ...application.services.staff_service import StaffService
from ...application.services.team_service import TeamService
from ...domain.repositories.staff_repository import StaffRepository
from ...domain.repositories.team_repository import TeamRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class StaffProvider:
    """Staff service provider - registers staff and team services"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_singleton(
            StaffService,
            StaffService(
                staff_repository=container.get(StaffRepository),
                team_repository=container.get(TeamRepository),
                batch_factory=container.get("write_batch_factory"),
            ),
        )

        container.register_singleton(
            TeamService,
            TeamService(
                team_repository=container.get(TeamRepository),
                staff_repository=container.get(StaffRepository),
                batch_factory=container.get("write_batch_factory"),
            ),
        )
