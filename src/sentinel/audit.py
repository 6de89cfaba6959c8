"""
Audit trail for security-relevant events.

Entries are append-only: there is no update or delete operation.
Login, Failed Login and User Registered are reserved for the upstream auth
gateway; this service records flagged transactions and admin actions.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

logger = logging.getLogger(__name__)


class AuditEvent(str, Enum):
    """Kinds of audited events."""

    LOGIN = "Login"
    FAILED_LOGIN = "Failed Login"
    TRANSACTION_FLAGGED = "Transaction Flagged"
    ADMIN_ACTION = "Admin Action"
    USER_REGISTERED = "User Registered"


@dataclass(frozen=True)
class AuditLogEntry:
    """A single audit record."""

    event: AuditEvent
    user_id: str
    details: dict[str, Any] = field(default_factory=dict)
    id: UUID = field(default_factory=uuid4)
    timestamp: datetime = field(default_factory=datetime.utcnow)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": str(self.id),
            "event": self.event.value,
            "user_id": self.user_id,
            "timestamp": self.timestamp.isoformat(),
            "details": self.details,
        }


class AuditLog:
    """In-memory, append-only audit log."""

    def __init__(self):
        self._entries: list[AuditLogEntry] = []

    def __len__(self) -> int:
        return len(self._entries)

    def record(
        self,
        event: AuditEvent,
        user_id: str,
        details: Optional[dict[str, Any]] = None,
    ) -> AuditLogEntry:
        """Append an entry and return it."""
        entry = AuditLogEntry(event=event, user_id=user_id, details=dict(details or {}))
        self._entries.append(entry)
        logger.info(f"Audit: {event.value} by {user_id}")
        return entry

    def list_entries(
        self,
        event: Optional[AuditEvent] = None,
        user_id: Optional[str] = None,
        limit: int = 100,
    ) -> list[AuditLogEntry]:
        """List entries newest first, optionally filtered."""
        entries = [
            e for e in reversed(self._entries)
            if (event is None or e.event == event)
            and (user_id is None or e.user_id == user_id)
        ]
        return entries[:limit]
