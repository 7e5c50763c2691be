"""
MongoDB Client
==============

Singleton MongoDB client for database connections.
"""
import logging
from datetime import datetime
from typing import Any, Optional

from bson import ObjectId
from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database

from toolroom.core.config import get_settings
from toolroom.utils.datetime_utils import to_utc

logger = logging.getLogger(__name__)


class MongoClientManager:
    """
    Singleton MongoDB client manager.

    Manages MongoDB connections and provides access to collections.
    """
    _instance: Optional["MongoClientManager"] = None
    _client: Optional[Any] = None
    _database: Optional[Database] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if self._client is None:
            self._initialize_client()

    def _initialize_client(self) -> None:
        """Initialize MongoDB client connection."""
        if self._client is not None:
            return  # Already initialized

        settings = get_settings()
        if not settings.mongo_uri:
            raise RuntimeError("❌ MONGO_URI not set. Please configure it in your .env file.")

        client = MongoClient(settings.mongo_uri)
        self._attach(client, settings.mongo_database_name)
        print(f"✅ Connected to MongoDB: {settings.mongo_database_name}")

    def _attach(self, client: Any, database_name: str) -> None:
        type(self)._client = client
        type(self)._database = client[database_name]

    @classmethod
    def use_client(cls, client: Any, database_name: Optional[str] = None) -> "MongoClientManager":
        """
        Install an already-built client (e.g. a mongomock client in tests).

        Args:
            client: pymongo-compatible client
            database_name: Database to use (defaults to DB_NAME)
        """
        manager = cls.__new__(cls)
        manager._attach(client, database_name or get_settings().mongo_database_name)
        return manager

    @property
    def client(self) -> Any:
        if self._client is None:
            self._initialize_client()
        return self._client

    def get_database(self) -> Database:
        """Get MongoDB database instance."""
        if self._database is None:
            self._initialize_client()
        return self._database

    def get_collection(self, collection_name: str) -> Collection:
        """
        Get a MongoDB collection.

        Args:
            collection_name: Name of the collection

        Returns:
            MongoDB Collection object
        """
        return self.get_database()[collection_name]

    def ping(self) -> bool:
        """Check the server answers."""
        try:
            self.get_database().command("ping")
            return True
        except Exception as e:
            logger.warning("MongoDB ping failed: %s", e)
            return False

    def close(self) -> None:
        """Close MongoDB connection."""
        cls = type(self)
        if cls._client is not None:
            cls._client.close()
        cls._client = None
        cls._database = None


def get_mongo_client() -> MongoClientManager:
    """Get singleton MongoDB client manager."""
    return MongoClientManager()


def new_object_id() -> str:
    """Generate a document id the same way Mongo does."""
    return str(ObjectId())


def to_mongo_datetime(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Store datetimes as naive UTC, which is what MongoDB hands back.
    Naive input is application time, the same as everywhere outside storage.
    """
    if dt is None:
        return None
    return to_utc(dt).replace(tzinfo=None)
