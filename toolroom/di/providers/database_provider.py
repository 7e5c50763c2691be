from typing import TYPE_CHECKING

from ...core.config import get_settings
from ...infrastructure.db.mongo_connection import get_mongo_client
from ...infrastructure.db.mongo_write_batch import MongoWriteBatch

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for all DB connections"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the MongoDB client and the write batch factory.
        Every repository and every multi-document write goes through the
        client registered here.
        """
        # Get MongoDB client manager instance
        mongo_client = get_mongo_client()
        use_transactions = get_settings().mongo_use_transactions

        # Register MongoDB client as singleton
        container.register_singleton("mongo_client", mongo_client)

        # Each call hands out a fresh batch bound to the same client
        container.register_singleton(
            "write_batch_factory",
            lambda: MongoWriteBatch(mongo_client, use_transactions=use_transactions),
        )
