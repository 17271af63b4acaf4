"""Monitor model - a registered API health-check."""

from datetime import datetime

from sqlmodel import Field, SQLModel

from src.monitor_service.models.base import utc_now

MONITOR_SCHEMA = "hawkeye"


class Monitor(SQLModel, table=True):
    """Monitor record scoped to an organization and a tenant.

    `is_deleted` exists in the table but nothing sets it: deletion removes the row.
    """

    __tablename__ = "apichecks"
    __table_args__ = {"schema": MONITOR_SCHEMA}

    id: str = Field(primary_key=True, max_length=36)
    name: str = Field(max_length=128)
    monitor_id: str = Field(default="")
    org_id: str = Field(default="", index=True)
    tenant: str = Field(default="", index=True)
    is_deleted: bool = Field(default=False)
    updated_at: datetime = Field(default_factory=utc_now)
