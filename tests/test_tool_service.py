"""Tests for ToolService."""
import re

import pytest

from toolroom.application.services.tool_service import ToolService
from toolroom.domain.exceptions import ConflictError, NotFoundError


def test_create_tool(tool_service):
    tool = tool_service.create_tool(
        unique_id=" T2001 ",
        name="Angle Grinder",
        brand="Bosch",
        model="GWS 7-115",
        meta={"category": "Power Tools"},
    )
    assert tool.id
    assert tool.unique_id == "T2001"
    assert tool.qr_payload == "TOOL#T2001"
    assert tool.is_available
    assert tool_service.get_tool_by_unique_id("T2001").id == tool.id


@pytest.mark.parametrize("missing", ["unique_id", "name", "brand", "model"])
def test_create_tool_requires_fields(tool_service, missing):
    fields = dict(unique_id="T2002", name="Grinder", brand="Bosch", model="GWS")
    fields[missing] = "  "
    with pytest.raises(ValueError):
        tool_service.create_tool(**fields)


def test_create_tool_rejects_duplicate_unique_id(seeded, tool_service):
    with pytest.raises(ConflictError):
        tool_service.create_tool(unique_id="T1001", name="Drill", brand="DeWalt", model="X")


def test_update_tool_regenerates_qr_payload(seeded, tool_service):
    tool = tool_service.get_tool_by_unique_id("T1003")
    updated = tool_service.update_tool(tool.id, {"unique_id": "T3003", "name": "Socket Set 120pc", "status": "checked_out"})

    assert updated.unique_id == "T3003"
    assert updated.qr_payload == "TOOL#T3003"
    assert updated.name == "Socket Set 120pc"
    # Status is not editable
    assert tool_service.get_tool(tool.id).is_available


def test_update_tool_conflicts_and_missing(seeded, tool_service):
    tool = tool_service.get_tool_by_unique_id("T1003")
    with pytest.raises(ConflictError):
        tool_service.update_tool(tool.id, {"unique_id": "T1001"})
    with pytest.raises(ValueError):
        tool_service.update_tool(tool.id, {"name": ""})
    with pytest.raises(NotFoundError):
        tool_service.update_tool("missing", {"name": "x"})


def test_checked_out_tool_keeps_its_unique_id(seeded, tool_service, transaction_service, staff_repo):
    transaction_service.check_out_tool("T1001", "worker-001")
    tool = tool_service.get_tool_by_unique_id("T1001")

    with pytest.raises(ConflictError):
        tool_service.update_tool(tool.id, {"unique_id": "T7777"})
    # Other fields stay editable, and the same id is not a rename
    assert tool_service.update_tool(tool.id, {"unique_id": "T1001", "name": "Hammer Drill"}).name == "Hammer Drill"
    assert tool_service.get_tool_by_unique_id("T7777") is None

    transaction_service.check_in_tool("T1001")
    assert "T1001" not in staff_repo.find_by_id("worker-001").assigned_tool_ids

    renamed = tool_service.update_tool(tool.id, {"unique_id": "T7777"})
    assert renamed.qr_payload == "TOOL#T7777"


def test_delete_tool(seeded, tool_service):
    available = tool_service.get_tool_by_unique_id("T1001")
    checked_out = tool_service.get_tool_by_unique_id("T1002")

    with pytest.raises(ConflictError):
        tool_service.delete_tool(checked_out.id)

    assert tool_service.delete_tool(available.id) is True
    assert tool_service.get_tool(available.id) is None


def test_list_and_search(seeded, tool_service):
    assert len(tool_service.list_tools()) == 5
    assert len(tool_service.list_tools(status="available")) == 3
    # Unknown status lists everything
    assert len(tool_service.list_tools(status="lost")) == 5

    assert [t.unique_id for t in tool_service.search_tools("fluke")] == ["T1005"]
    assert len(tool_service.list_tools(search="workshop")) == 0
    assert len(tool_service.list_tools(search="t100", limit=2, offset=1)) == 2


def test_holder_and_counts(seeded, tool_service):
    assert [t.unique_id for t in tool_service.get_tools_by_holder("worker-001")] == ["T1002"]
    assert tool_service.get_counts() == {"total": 5, "available": 3, "checked_out": 2}


def test_generate_unique_id():
    assert re.fullmatch(r"T\d{4}", ToolService.generate_unique_id())


def test_validate_tool_data():
    assert ToolService.validate_tool_data({"uniqueId": "T1", "name": "a", "brand": "b", "model": "c"})
    assert not ToolService.validate_tool_data({"uniqueId": "T1", "name": "a", "brand": "b"})
    assert not ToolService.validate_tool_data({"uniqueId": "T1", "name": " ", "brand": "b", "model": "c"})
