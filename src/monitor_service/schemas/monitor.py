"""Monitor schemas for API request/response."""

from datetime import datetime

from pydantic import BaseModel, Field

MONITOR_NAME_MAX_LENGTH = 128


class MonitorCreate(BaseModel):
    """Schema for registering a monitor."""

    name: str = Field(min_length=1, max_length=MONITOR_NAME_MAX_LENGTH)
    monitor_id: str = ""
    org_id: str = ""
    tenant: str = ""


class MonitorUpdate(BaseModel):
    """Schema for renaming a monitor."""

    name: str = Field(min_length=1, max_length=MONITOR_NAME_MAX_LENGTH)


class MonitorRead(BaseModel):
    """Schema for reading a monitor."""

    id: str
    name: str
    monitor_id: str
    org_id: str
    tenant: str
    is_deleted: bool
    updated_at: datetime

    model_config = {"from_attributes": True}


class MonitorCount(BaseModel):
    """Total number of registered monitors."""

    total_monitors_count: int


class TenantMonitorCount(BaseModel):
    """Number of monitors registered under one tenant."""

    tenant_name: str
    total_monitors_count: int


class OrgMonitorCount(BaseModel):
    """Number of monitors registered under one organization."""

    org_name: str
    total_monitors_count: int
