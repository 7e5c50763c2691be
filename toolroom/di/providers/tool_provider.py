from typing import TYPE_CHECKING

from ...application.services.tool_service import ToolService
from ...application.services.tools_catalog import ToolsCatalog
from ...core.config import get_settings
from ...domain.repositories.tool_repository import ToolRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class ToolProvider:
    """Tool service provider - registers the tool service and the tools catalog"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register ToolService and the ToolsCatalog built on top of it.
        """
        tool_service = ToolService(tool_repository=container.get(ToolRepository))
        container.register_singleton(ToolService, tool_service)

        container.register_singleton(
            ToolsCatalog,
            ToolsCatalog(
                tool_service=tool_service,
                max_age_seconds=get_settings().catalog_max_age_seconds,
            ),
        )
