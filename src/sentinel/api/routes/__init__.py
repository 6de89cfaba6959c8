"""
API route modules.
"""

from sentinel.api.routes.transactions import router as transactions_router
from sentinel.api.routes.alerts import router as alerts_router
from sentinel.api.routes.dashboard import router as dashboard_router
from sentinel.api.routes.audit import router as audit_router

__all__ = [
    "transactions_router",
    "alerts_router",
    "dashboard_router",
    "audit_router",
]
