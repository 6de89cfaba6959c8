"""
FastAPI dependencies for the API.

Provides:
- Caller identification from request headers
- Role-based authorization
- Access to the per-application services
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Optional

from fastapi import Depends, Header, HTTPException, Request, status

from sentinel.audit import AuditLog
from sentinel.fincrime.transactions import TransactionService, TransactionStore

logger = logging.getLogger(__name__)


class UserRole(str, Enum):
    """Roles known to the dashboard."""

    USER = "user"
    ADMIN = "admin"


@dataclass(frozen=True)
class CurrentUser:
    """Authenticated caller."""

    id: str
    role: UserRole = UserRole.USER

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN


async def get_current_user(
    x_user_id: Annotated[Optional[str], Header()] = None,
    x_user_role: Annotated[Optional[str], Header()] = None,
) -> CurrentUser:
    """
    Identify the caller from X-User-* headers.

    Session handling lives in front of this service; by the time a request
    arrives the gateway has set the verified user ID and role.

    Raises:
        HTTPException: 401 if no user ID is present
    """
    if not x_user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not authenticated.",
        )

    role = UserRole.USER
    if x_user_role:
        try:
            role = UserRole(x_user_role.lower())
        except ValueError:
            logger.warning(f"Unknown role {x_user_role!r} for {x_user_id}; using 'user'")

    return CurrentUser(id=x_user_id, role=role)


User = Annotated[CurrentUser, Depends(get_current_user)]


async def require_admin(user: User) -> CurrentUser:
    """Require admin role."""
    if not user.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin role required",
        )
    return user


AdminUser = Annotated[CurrentUser, Depends(require_admin)]


def get_transaction_service(request: Request) -> TransactionService:
    return request.app.state.transaction_service


def get_transaction_store(request: Request) -> TransactionStore:
    return request.app.state.transaction_service.store


def get_audit_log(request: Request) -> AuditLog:
    return request.app.state.audit_log


# Type aliases for dependency injection
Transactions = Annotated[TransactionService, Depends(get_transaction_service)]
TransactionRepo = Annotated[TransactionStore, Depends(get_transaction_store)]
AuditRepo = Annotated[AuditLog, Depends(get_audit_log)]
