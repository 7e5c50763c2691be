"""
Response builders shared by the v1 controllers.
"""
from toolroom.application.dto.history_dto import BatchResponse, HistoryEntryResponse
from toolroom.application.dto.staff_dto import StaffResponse
from toolroom.application.dto.team_dto import TeamResponse
from toolroom.application.dto.tool_dto import ToolResponse
from toolroom.domain.models.staff import Staff
from toolroom.domain.models.team import Team
from toolroom.domain.models.tool import Tool
from toolroom.domain.models.tool_history import ToolBatch, ToolHistory


def tool_response(tool: Tool) -> ToolResponse:
    return ToolResponse(
        id=tool.id,
        unique_id=tool.unique_id,
        name=tool.name,
        brand=tool.brand,
        model=tool.model,
        num=tool.num,
        display_name=tool.display_name,
        images=tool.images,
        qr_payload=tool.qr_payload,
        status=tool.status,
        current_holder=tool.current_holder,
        holder_id=tool.holder_id,
        last_assigned_to_name=tool.last_assigned_to_name,
        last_assigned_to_job_code=tool.last_assigned_to_job_code,
        last_assigned_by_name=tool.last_assigned_by_name,
        last_assigned_at=tool.last_assigned_at,
        last_checkin_at=tool.last_checkin_at,
        last_checkin_by_name=tool.last_checkin_by_name,
        meta=tool.meta,
        created_at=tool.created_at,
        updated_at=tool.updated_at,
    )


def staff_response(staff: Staff) -> StaffResponse:
    return StaffResponse(
        uid=staff.uid,
        full_name=staff.full_name,
        job_code=staff.job_code,
        email=staff.email,
        role=staff.role,
        role_display_name=staff.role_display_name,
        initials=staff.initials,
        team_id=staff.team_id,
        photo_url=staff.photo_url,
        is_active=staff.is_active,
        has_auth_account=staff.has_auth_account,
        assigned_tool_ids=staff.assigned_tool_ids,
        created_at=staff.created_at,
        updated_at=staff.updated_at,
        last_sign_in=staff.last_sign_in,
    )


def history_response(entry: ToolHistory) -> HistoryEntryResponse:
    return HistoryEntryResponse(
        id=entry.id,
        tool_ref=entry.tool_ref,
        tool_id=entry.tool_id,
        action=entry.action.value,
        action_display_name=entry.action.display_name,
        by_ref=entry.by_ref,
        by_id=entry.by_id,
        supervisor_ref=entry.supervisor_ref,
        assigned_to_ref=entry.assigned_to_ref,
        timestamp=entry.timestamp,
        formatted_timestamp=entry.formatted_timestamp(),
        notes=entry.notes,
        location=entry.location,
        batch_id=entry.batch_id,
        metadata=entry.metadata,
    )


def batch_response(batch: ToolBatch) -> BatchResponse:
    return BatchResponse(
        id=batch.id,
        created_by=batch.created_by,
        created_at=batch.created_at,
        tool_ids=batch.tool_ids,
        tool_count=batch.tool_count,
        assigned_to_ref=batch.assigned_to_ref,
        notes=batch.notes,
        action=batch.action.value,
        metadata=batch.metadata,
    )


def team_response(team: Team) -> TeamResponse:
    return TeamResponse(
        id=team.id,
        name=team.name,
        description=team.description,
        leader=team.leader,
        members=team.members,
        member_count=team.member_count,
        is_active=team.is_active,
        created_at=team.created_at,
    )
