"""Monitor endpoints.

Reads are public. Create, update and delete require a bearer token.
"""

from fastapi import APIRouter, status

from src.monitor_service.api.dependencies import CurrentIdentity, MonitorServiceDep, PageParams
from src.monitor_service.schemas.monitor import (
    MonitorCount,
    MonitorCreate,
    MonitorRead,
    MonitorUpdate,
    OrgMonitorCount,
    TenantMonitorCount,
)
from src.monitor_service.schemas.pagination import Page

router = APIRouter(tags=["monitors"])


@router.get(
    "/monitors/{monitor_id}",
    response_model=MonitorRead,
    summary="Get monitor",
    responses={
        200: {"description": "Monitor details"},
        404: {"description": "Monitor not found"},
    },
)
async def get_monitor(monitor_id: str, service: MonitorServiceDep) -> MonitorRead:
    """Get a monitor by ID."""
    return await service.get(monitor_id)


@router.get(
    "/monitors",
    response_model=Page[MonitorRead],
    summary="List monitors",
    description="List all monitors ordered by ID with page/per_page pagination.",
)
async def list_monitors(service: MonitorServiceDep, pages: PageParams) -> Page[MonitorRead]:
    """List all monitors."""
    total = await service.count()
    monitors = await service.query(pages.offset, pages.limit)
    return pages.wrap(monitors, total)


@router.get(
    "/monitors/org/{org_id}",
    response_model=Page[MonitorRead],
    summary="List monitors of an organization",
)
async def list_org_monitors(
    org_id: str, service: MonitorServiceDep, pages: PageParams
) -> Page[MonitorRead]:
    """List monitors owned by an organization."""
    total = await service.count_by_org(org_id)
    monitors = await service.get_by_org(org_id, pages.offset, pages.limit)
    return pages.wrap(monitors, total)


@router.get(
    "/monitors/tenant/{tenant}",
    response_model=Page[MonitorRead],
    summary="List monitors of a tenant",
)
async def list_tenant_monitors(
    tenant: str, service: MonitorServiceDep, pages: PageParams
) -> Page[MonitorRead]:
    """List monitors owned by a tenant."""
    total = await service.count_by_tenant(tenant)
    monitors = await service.get_by_tenant(tenant, pages.offset, pages.limit)
    return pages.wrap(monitors, total)


@router.get("/monitorscount", response_model=MonitorCount, summary="Count monitors")
async def count_monitors(service: MonitorServiceDep) -> MonitorCount:
    return MonitorCount(total_monitors_count=await service.count())


@router.get(
    "/orgmonitorscount/{org_id}",
    response_model=OrgMonitorCount,
    summary="Count monitors of an organization",
)
async def count_org_monitors(org_id: str, service: MonitorServiceDep) -> OrgMonitorCount:
    return OrgMonitorCount(
        org_name=org_id,
        total_monitors_count=await service.count_by_org(org_id),
    )


@router.get(
    "/tenantmonitorscount/{tenant}",
    response_model=TenantMonitorCount,
    summary="Count monitors of a tenant",
)
async def count_tenant_monitors(tenant: str, service: MonitorServiceDep) -> TenantMonitorCount:
    return TenantMonitorCount(
        tenant_name=tenant,
        total_monitors_count=await service.count_by_tenant(tenant),
    )


@router.post(
    "/monitors",
    response_model=MonitorRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create monitor",
    responses={
        201: {"description": "Monitor created"},
        401: {"description": "Missing or invalid bearer token"},
        422: {"description": "Invalid payload"},
    },
)
async def create_monitor(
    request: MonitorCreate,
    service: MonitorServiceDep,
    _identity: CurrentIdentity,
) -> MonitorRead:
    """Register a new monitor. The ID and timestamp are assigned by the server."""
    return await service.create(request)


@router.put(
    "/monitors/{monitor_id}",
    response_model=MonitorRead,
    summary="Rename monitor",
    responses={
        200: {"description": "Monitor updated"},
        401: {"description": "Missing or invalid bearer token"},
        404: {"description": "Monitor not found"},
        422: {"description": "Invalid payload"},
    },
)
async def update_monitor(
    monitor_id: str,
    request: MonitorUpdate,
    service: MonitorServiceDep,
    _identity: CurrentIdentity,
) -> MonitorRead:
    """Update a monitor's name."""
    return await service.update(monitor_id, request)


@router.delete(
    "/monitors/{monitor_id}",
    response_model=MonitorRead,
    summary="Delete monitor",
    responses={
        200: {"description": "Deleted monitor as it was before removal"},
        401: {"description": "Missing or invalid bearer token"},
        404: {"description": "Monitor not found"},
    },
)
async def delete_monitor(
    monitor_id: str,
    service: MonitorServiceDep,
    _identity: CurrentIdentity,
) -> MonitorRead:
    """Delete a monitor and return the removed record."""
    return await service.delete(monitor_id)
