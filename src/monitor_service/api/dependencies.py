"""FastAPI dependency injection definitions."""

from collections.abc import AsyncGenerator
from typing import Annotated, Any

from fastapi import Depends, Header, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from src.monitor_service.core.config import get_settings
from src.monitor_service.core.db import get_session
from src.monitor_service.core.logging import bind_identity_context
from src.monitor_service.core.security import decode_token
from src.monitor_service.repositories import MonitorRepository
from src.monitor_service.schemas.pagination import PageRequest, normalize_page_request
from src.monitor_service.services import MonitorService

# --- Database ---


async def get_db_session() -> AsyncGenerator[AsyncSession]:
    """Get a database session for the duration of one request."""
    async with get_session() as session:
        yield session


DBSession = Annotated[AsyncSession, Depends(get_db_session)]

# --- Repositories & services ---


def get_monitor_repository(session: DBSession) -> MonitorRepository:
    """Get monitor repository bound to the request session."""
    return MonitorRepository(session)


MonitorRepo = Annotated[MonitorRepository, Depends(get_monitor_repository)]


def get_monitor_service(monitor_repo: MonitorRepo) -> MonitorService:
    """Get monitor service."""
    return MonitorService(monitor_repo)


MonitorServiceDep = Annotated[MonitorService, Depends(get_monitor_service)]

# --- Pagination ---


def get_page_request(
    page: Annotated[int | None, Query(description="1-based page number")] = None,
    per_page: Annotated[int | None, Query(description="Items per page")] = None,
) -> PageRequest:
    """Derive offset/limit from page and per_page query parameters."""
    settings = get_settings()
    return normalize_page_request(
        page,
        per_page,
        default_page_size=settings.default_page_size,
        max_page_size=settings.max_page_size,
    )


PageParams = Annotated[PageRequest, Depends(get_page_request)]

# --- Auth ---


async def get_current_identity(
    authorization: Annotated[str | None, Header()] = None,
) -> dict[str, Any]:
    """Validate the bearer token and return its claims.

    Only signature, expiry and token type are checked; no authorization rules
    are evaluated here.
    """
    if not authorization or not authorization.startswith("Bearer "):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing or invalid authorization header",
            headers={"WWW-Authenticate": "Bearer"},
        )

    payload = decode_token(authorization[7:])
    if payload is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    if payload.get("type") != "access":
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token type",
        )

    subject = payload.get("sub")
    if not subject:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token payload",
        )

    bind_identity_context(subject)
    return payload


CurrentIdentity = Annotated[dict[str, Any], Depends(get_current_identity)]
