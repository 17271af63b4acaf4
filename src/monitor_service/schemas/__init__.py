from src.monitor_service.schemas.monitor import (
    MonitorCount,
    MonitorCreate,
    MonitorRead,
    MonitorUpdate,
    OrgMonitorCount,
    TenantMonitorCount,
)
from src.monitor_service.schemas.pagination import Page, PageRequest, normalize_page_request

__all__ = [
    "MonitorCount",
    "MonitorCreate",
    "MonitorRead",
    "MonitorUpdate",
    "OrgMonitorCount",
    "Page",
    "PageRequest",
    "TenantMonitorCount",
    "normalize_page_request",
]
