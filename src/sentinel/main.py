"""
SecurePay Sentinel - Fraud Monitoring Backend

FastAPI application entry point.
"""

import logging
import time
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Any

from fastapi import FastAPI, Request, Response, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address
from starlette.middleware.base import BaseHTTPMiddleware

from sentinel import __version__
from sentinel.audit import AuditLog
from sentinel.config import settings
from sentinel.errors import (
    ExplanationUnavailableError,
    InvalidInputError,
    NotAuthenticatedError,
    TransactionNotFoundError,
)
from sentinel.fincrime.risk_scoring import RiskPolicy, RiskScorer
from sentinel.fincrime.transactions import TransactionService, TransactionStore

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


# Rate limiter
limiter = Limiter(key_func=get_remote_address, default_limits=[
    f"{settings.rate_limit_requests}/{settings.rate_limit_window_seconds}seconds"
])


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Add security headers to all responses."""

    async def dispatch(self, request: Request, call_next) -> Response:
        response = await call_next(request)

        response.headers["X-Frame-Options"] = "DENY"
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"

        # HSTS (only in production with HTTPS)
        if settings.is_production:
            response.headers["Strict-Transport-Security"] = (
                "max-age=31536000; includeSubDomains"
            )

        return response


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log requests for auditing."""

    async def dispatch(self, request: Request, call_next) -> Response:
        start_time = time.time()

        request_id = request.headers.get("X-Request-ID", f"req_{int(time.time() * 1000)}")

        logger.info(
            f"Request: {request.method} {request.url.path} "
            f"[{request_id}] from {request.client.host if request.client else 'unknown'}"
        )

        response = await call_next(request)

        process_time = time.time() - start_time
        response.headers["X-Request-ID"] = request_id
        response.headers["X-Process-Time"] = str(process_time)

        logger.info(
            f"Response: {request.method} {request.url.path} "
            f"[{request_id}] status={response.status_code} time={process_time:.3f}s"
        )

        return response


def init_services(app: FastAPI) -> None:
    """Attach fresh scorer, stores and audit log to the application state."""
    app.state.audit_log = AuditLog()
    app.state.transaction_service = TransactionService(
        scorer=RiskScorer(policy=RiskPolicy.from_settings(settings)),
        store=TransactionStore(),
        audit_log=app.state.audit_log,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown events."""
    logger.info("Starting SecurePay Sentinel...")
    init_services(app)
    logger.info("SecurePay Sentinel started successfully")

    yield

    logger.info("SecurePay Sentinel shutdown complete")


app = FastAPI(
    title="SecurePay Sentinel",
    description="Fraud monitoring backend with rule-based transaction risk scoring",
    version=__version__,
    lifespan=lifespan,
    # Disable docs in production
    docs_url="/docs" if not settings.is_production else None,
    redoc_url="/redoc" if not settings.is_production else None,
    openapi_url="/openapi.json" if not settings.is_production else None,
)

# Rate limiting
app.state.limiter = limiter
app.add_middleware(SlowAPIMiddleware)

app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(RequestLoggingMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=[
        "Content-Type",
        "X-Request-ID",
        "X-User-Id",
        "X-User-Role",
    ],
    expose_headers=["X-Request-ID", "X-Process-Time"],
    max_age=600,
)


@app.exception_handler(RateLimitExceeded)
async def rate_limit_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """Handle rate limit exceeded errors."""
    return JSONResponse(
        status_code=status.HTTP_429_TOO_MANY_REQUESTS,
        content={
            "error": "Rate limit exceeded",
            "message": "Too many requests. Please try again later.",
            "retry_after": exc.detail,
        },
        headers={"Retry-After": str(exc.detail)},
    )


@app.exception_handler(InvalidInputError)
async def invalid_input_handler(request: Request, exc: InvalidInputError) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={"error": "Invalid input", "field": exc.field, "message": exc.message},
    )


@app.exception_handler(NotAuthenticatedError)
async def not_authenticated_handler(request: Request, exc: NotAuthenticatedError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={"error": "Not authenticated", "message": str(exc)},
    )


@app.exception_handler(TransactionNotFoundError)
async def not_found_handler(request: Request, exc: TransactionNotFoundError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"error": "Not found", "message": str(exc)},
    )


@app.exception_handler(ExplanationUnavailableError)
async def explanation_unavailable_handler(
    request: Request, exc: ExplanationUnavailableError
) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={"error": "Not a fraud alert", "message": str(exc)},
    )


@app.get("/health")
async def health_check() -> dict[str, Any]:
    """Health check endpoint."""
    return {
        "status": "healthy",
        "timestamp": datetime.utcnow().isoformat(),
        "version": __version__,
    }


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint with API information."""
    return {
        "name": "SecurePay Sentinel",
        "description": "Fraud monitoring backend",
        "version": __version__,
        "docs": "/docs",
        "health": "/health",
    }


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle uncaught exceptions securely."""
    logger.exception(f"Unhandled exception: {exc}")

    # Never expose internal error details in production
    if settings.is_production:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": "Internal server error",
                "message": "An unexpected error occurred. Please contact support.",
            },
        )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Internal server error",
            "message": str(exc),
            "type": type(exc).__name__,
        },
    )


# Import and include routers
from sentinel.api.routes import (
    alerts_router,
    audit_router,
    dashboard_router,
    transactions_router,
)

app.include_router(transactions_router, prefix="/api/v1/transactions", tags=["transactions"])
app.include_router(alerts_router, prefix="/api/v1/alerts", tags=["alerts"])
app.include_router(dashboard_router, prefix="/api/v1/dashboard", tags=["dashboard"])
app.include_router(audit_router, prefix="/api/v1/audit", tags=["audit"])
