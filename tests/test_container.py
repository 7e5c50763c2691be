"""Tests for the DI container wiring."""
import pytest

from toolroom.application.services.staff_service import StaffService
from toolroom.application.services.team_service import TeamService
from toolroom.di.container import get_container


def test_services_are_singletons(mongo):
    container = get_container()
    assert container.get(StaffService) is container.get(StaffService)
    assert get_container() is container


def test_unknown_registration(mongo):
    with pytest.raises(ValueError):
        get_container().get("missing_service")


def test_staff_service_keeps_teams_in_sync(seeded):
    container = get_container()
    container.get(StaffService).assign_to_team("worker-003", "team-beta")

    beta = container.get(TeamService).get_team("team-beta")
    alpha = container.get(TeamService).get_team("team-alpha")
    assert "worker-003" in beta.members
    assert "worker-003" not in alpha.members
