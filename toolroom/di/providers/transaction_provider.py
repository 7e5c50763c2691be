from typing import TYPE_CHECKING

from ...application.services.history_service import HistoryService
from ...application.services.transaction_service import ToolTransactionService
from ...core.config import get_settings
from ...domain.repositories.history_repository import BatchRepository, HistoryRepository
from ...domain.repositories.staff_repository import StaffRepository
from ...domain.repositories.tool_repository import ToolRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class TransactionProvider:
    """Transaction service provider - registers check-out/check-in and history services"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register ToolTransactionService and HistoryService.
        Both share the history and batch repositories.
        """
        container.register_singleton(
            ToolTransactionService,
            ToolTransactionService(
                tool_repository=container.get(ToolRepository),
                staff_repository=container.get(StaffRepository),
                history_repository=container.get(HistoryRepository),
                batch_repository=container.get(BatchRepository),
                batch_factory=container.get("write_batch_factory"),
            ),
        )

        container.register_singleton(
            HistoryService,
            HistoryService(
                history_repository=container.get(HistoryRepository),
                batch_repository=container.get(BatchRepository),
                default_limit=get_settings().history_query_limit,
            ),
        )
