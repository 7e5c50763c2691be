import mongomock
import pytest
from fastapi.testclient import TestClient

from toolroom.application.services.history_service import HistoryService
from toolroom.application.services.staff_service import StaffService
from toolroom.application.services.team_service import TeamService
from toolroom.application.services.tool_service import ToolService
from toolroom.application.services.transaction_service import ToolTransactionService
from toolroom.core.config import reset_settings
from toolroom.di.container import reset_container
from toolroom.infrastructure.db import (
    MongoBatchRepository,
    MongoHistoryRepository,
    MongoStaffRepository,
    MongoTeamRepository,
    MongoToolRepository,
)
from toolroom.infrastructure.db.mongo_connection import MongoClientManager
from toolroom.infrastructure.db.mongo_write_batch import MongoWriteBatch
from toolroom.scripts.data_seeder import DataSeeder


@pytest.fixture(autouse=True)
def mongo(monkeypatch):
    """Fresh in-memory database and freshly built settings/container per test."""
    monkeypatch.setenv("DB_NAME", "toolroom_test")
    monkeypatch.setenv("MONGO_USE_TRANSACTIONS", "false")
    monkeypatch.setenv("TIMEZONE", "UTC")
    reset_settings()
    reset_container()

    manager = MongoClientManager.use_client(mongomock.MongoClient())
    yield manager

    manager.close()
    reset_container()
    reset_settings()


@pytest.fixture
def seeded(mongo):
    """Sample staff, tools and teams from the data seeder."""
    seeder = DataSeeder(mongo)
    seeder.seed_staff()
    seeder.seed_tools()
    seeder.seed_teams()
    return mongo


@pytest.fixture
def batch_factory(mongo):
    return lambda: MongoWriteBatch(mongo)


@pytest.fixture
def tool_repo(mongo):
    return MongoToolRepository(mongo)


@pytest.fixture
def staff_repo(mongo):
    return MongoStaffRepository(mongo)


@pytest.fixture
def history_repo(mongo):
    return MongoHistoryRepository(mongo)


@pytest.fixture
def batch_repo(mongo):
    return MongoBatchRepository(mongo)


@pytest.fixture
def team_repo(mongo):
    return MongoTeamRepository(mongo)


@pytest.fixture
def tool_service(tool_repo):
    return ToolService(tool_repo)


@pytest.fixture
def staff_service(staff_repo, team_repo, batch_factory):
    return StaffService(staff_repo, team_repo, batch_factory)


@pytest.fixture
def team_service(team_repo, staff_repo, batch_factory):
    return TeamService(team_repo, staff_repo, batch_factory)


@pytest.fixture
def transaction_service(tool_repo, staff_repo, history_repo, batch_repo, batch_factory):
    return ToolTransactionService(tool_repo, staff_repo, history_repo, batch_repo, batch_factory)


@pytest.fixture
def history_service(history_repo, batch_repo):
    return HistoryService(history_repo, batch_repo)


@pytest.fixture
def client(seeded):
    """TestClient running the full app (startup + shutdown) on the seeded database."""
    from toolroom.main import app

    with TestClient(app) as test_client:
        yield test_client
