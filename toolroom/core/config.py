# Standard library imports
import os
from typing import Final, List, Optional
from dotenv import load_dotenv


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """

    def __init__(self) -> None:
        # Load environment variables from .env file
        load_dotenv()

        # Timezone Configuration
        # Default to UTC, but can be set via TIMEZONE env var (e.g., "UTC", "Africa/Johannesburg")
        self.timezone: Final[str] = os.getenv("TIMEZONE", "UTC")

        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("DB_NAME", "toolroom")
        # Multi-collection commits need a replica set; off for standalone servers
        self.mongo_use_transactions: Final[bool] = os.getenv(
            "MONGO_USE_TRANSACTIONS", "false"
        ).lower() in ("true", "1", "yes")

        # Collection Names
        self.staff_collection: Final[str] = os.getenv("STAFF_COLLECTION", "staff")
        self.tools_collection: Final[str] = os.getenv("TOOLS_COLLECTION", "tools")
        self.history_collection: Final[str] = os.getenv("HISTORY_COLLECTION", "tool_history")
        self.batches_collection: Final[str] = os.getenv("BATCHES_COLLECTION", "batches")
        self.teams_collection: Final[str] = os.getenv("TEAMS_COLLECTION", "teams")

        # Query Configuration
        self.history_query_limit: Final[int] = int(
            os.getenv("HISTORY_QUERY_LIMIT", "50")
        )

        # Tools catalog snapshot (in-memory tool list served to list screens)
        self.catalog_max_age_seconds: Final[int] = int(
            os.getenv("CATALOG_MAX_AGE_SECONDS", "30")
        )

        # API Configuration
        self.cors_allow_origins: Final[List[str]] = [
            origin.strip()
            for origin in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",")
            if origin.strip()
        ]
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()

    @property
    def collection_names(self) -> List[str]:
        """All collections owned by the application, in seeding order."""
        return [
            self.staff_collection,
            self.tools_collection,
            self.history_collection,
            self.batches_collection,
            self.teams_collection,
        ]


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
