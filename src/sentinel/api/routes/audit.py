"""
Audit log API routes.

Provides read-only access to audit logs for administrators.
Audit logs are immutable - no update/delete operations.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Query
from pydantic import BaseModel

from sentinel.api.deps import AdminUser, AuditRepo
from sentinel.audit import AuditEvent

router = APIRouter()


class AuditLogResponse(BaseModel):
    """Response model for audit log entry."""

    id: UUID
    event: AuditEvent
    user_id: str
    timestamp: datetime
    details: dict


@router.get("", response_model=list[AuditLogResponse])
async def list_audit_logs(
    audit_repo: AuditRepo,
    user: AdminUser,
    event: Optional[AuditEvent] = None,
    user_id: Optional[str] = None,
    limit: int = Query(100, ge=1, le=1000),
):
    """
    List audit entries, newest first.

    Viewing the trail is itself recorded as an admin action.
    """
    entries = audit_repo.list_entries(event=event, user_id=user_id, limit=limit)

    # Meta-log after listing so the view does not appear in its own result
    audit_repo.record(
        AuditEvent.ADMIN_ACTION,
        user.id,
        {
            "action": "view_audit_log",
            "event_filter": event.value if event else None,
            "user_filter": user_id,
        },
    )

    return [AuditLogResponse.model_validate(e.to_dict()) for e in entries]
