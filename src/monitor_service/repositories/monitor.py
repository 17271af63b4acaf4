"""Repository for Monitor entity."""

from typing import Protocol

from sqlalchemy import update

from src.monitor_service.core.exceptions import NotFoundError
from src.monitor_service.models import Monitor
from src.monitor_service.repositories.base import BaseRepository


class MonitorRepositoryProtocol(Protocol):
    """Data access contract for monitors.

    Implementations raise NotFoundError for missing rows and StorageError for
    anything the storage engine rejects. List methods return rows ordered by
    id ascending, sliced to [offset, offset + limit).
    """

    async def get(self, id: str) -> Monitor: ...

    async def get_by_org(self, org_id: str, offset: int, limit: int) -> list[Monitor]: ...

    async def get_by_tenant(self, tenant: str, offset: int, limit: int) -> list[Monitor]: ...

    async def query(self, offset: int, limit: int) -> list[Monitor]: ...

    async def count(self) -> int: ...

    async def count_by_org(self, org_id: str) -> int: ...

    async def count_by_tenant(self, tenant: str) -> int: ...

    async def create(self, monitor: Monitor) -> None: ...

    async def update(self, monitor: Monitor) -> None: ...

    async def delete(self, id: str) -> None: ...


class MonitorRepository(BaseRepository[Monitor]):
    """Repository for Monitor rows in the apichecks table."""

    model = Monitor

    async def get(self, id: str) -> Monitor:
        """Get the monitor with the given id."""
        return await self.get_by_id(id)

    async def get_by_org(self, org_id: str, offset: int, limit: int) -> list[Monitor]:
        """List monitors owned by an organization."""
        return await self.list_where(Monitor.org_id == org_id, offset=offset, limit=limit)

    async def get_by_tenant(self, tenant: str, offset: int, limit: int) -> list[Monitor]:
        """List monitors owned by a tenant."""
        return await self.list_where(Monitor.tenant == tenant, offset=offset, limit=limit)

    async def query(self, offset: int, limit: int) -> list[Monitor]:
        """List all monitors."""
        return await self.list_where(offset=offset, limit=limit)

    async def count(self) -> int:
        return await self.count_where()

    async def count_by_org(self, org_id: str) -> int:
        return await self.count_where(Monitor.org_id == org_id)

    async def count_by_tenant(self, tenant: str) -> int:
        return await self.count_where(Monitor.tenant == tenant)

    async def create(self, monitor: Monitor) -> None:
        """Insert a fully populated monitor. A duplicate id raises StorageError."""
        await self.insert(monitor)

    async def update(self, monitor: Monitor) -> None:
        """Persist every mutable column of an existing monitor."""
        async with self.storage_errors("update"):
            result = await self.session.execute(
                update(Monitor)
                .where(Monitor.id == monitor.id)  # type: ignore[arg-type]
                .values(
                    name=monitor.name,
                    monitor_id=monitor.monitor_id,
                    org_id=monitor.org_id,
                    tenant=monitor.tenant,
                    is_deleted=monitor.is_deleted,
                    updated_at=monitor.updated_at,
                )
            )
            matched = result.rowcount
            await self.session.commit()
        if matched == 0:
            raise NotFoundError(f"Monitor {monitor.id} not found")

    async def delete(self, id: str) -> None:
        """Look the monitor up, then remove its row."""
        monitor = await self.get(id)
        async with self.storage_errors("delete"):
            await self.session.delete(monitor)
            await self.session.commit()
