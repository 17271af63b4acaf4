"""Monitor management service - validation, identity and timestamps."""

from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from src.monitor_service.core.exceptions import StorageError, ValidationError
from src.monitor_service.core.logging import get_logger
from src.monitor_service.models import Monitor, generate_id, utc_now
from src.monitor_service.repositories import MonitorRepositoryProtocol
from src.monitor_service.schemas.monitor import MonitorCreate, MonitorRead, MonitorUpdate

logger = get_logger(__name__)

SchemaType = TypeVar("SchemaType", bound=BaseModel)


def _validate(
    schema: type[SchemaType], payload: SchemaType | Mapping[str, Any]
) -> SchemaType:
    """Validate a request payload, raising the domain ValidationError on failure."""
    try:
        if isinstance(payload, schema):
            # Re-check instances too: model_construct() skips validation
            return schema.model_validate(payload.model_dump())
        return schema.model_validate(payload)
    except PydanticValidationError as e:
        raise ValidationError(
            f"Invalid {schema.__name__} payload",
            errors=e.errors(include_url=False, include_context=False, include_input=False),
        ) from e


class MonitorService:
    """Monitor use cases on top of a repository.

    Returns MonitorRead response models, never table rows. Calls are independent
    of each other; multi-step operations (update, delete) are not transactional.
    """

    def __init__(self, monitor_repo: MonitorRepositoryProtocol):
        self.monitor_repo = monitor_repo

    async def get(self, id: str) -> MonitorRead:
        """Get the monitor with the given id. Raises NotFoundError if absent."""
        monitor = await self.monitor_repo.get(id)
        return MonitorRead.model_validate(monitor)

    async def query(self, offset: int, limit: int) -> list[MonitorRead]:
        """List all monitors, ordered by id."""
        try:
            items = await self.monitor_repo.query(offset, limit)
        except StorageError as e:
            logger.warning("Failed to list monitors", error=e.detail)
            raise
        return [MonitorRead.model_validate(item) for item in items]

    async def get_by_org(self, org_id: str, offset: int, limit: int) -> list[MonitorRead]:
        """List monitors owned by an organization, ordered by id."""
        try:
            items = await self.monitor_repo.get_by_org(org_id, offset, limit)
        except StorageError as e:
            logger.warning("Failed to list monitors by org", org_id=org_id, error=e.detail)
            raise
        return [MonitorRead.model_validate(item) for item in items]

    async def get_by_tenant(self, tenant: str, offset: int, limit: int) -> list[MonitorRead]:
        """List monitors owned by a tenant, ordered by id."""
        try:
            items = await self.monitor_repo.get_by_tenant(tenant, offset, limit)
        except StorageError as e:
            logger.warning("Failed to list monitors by tenant", tenant=tenant, error=e.detail)
            raise
        return [MonitorRead.model_validate(item) for item in items]

    async def count(self) -> int:
        try:
            return await self.monitor_repo.count()
        except StorageError as e:
            logger.warning("Failed to count monitors", error=e.detail)
            raise

    async def count_by_org(self, org_id: str) -> int:
        try:
            return await self.monitor_repo.count_by_org(org_id)
        except StorageError as e:
            logger.warning("Failed to count monitors by org", org_id=org_id, error=e.detail)
            raise

    async def count_by_tenant(self, tenant: str) -> int:
        try:
            return await self.monitor_repo.count_by_tenant(tenant)
        except StorageError as e:
            logger.warning("Failed to count monitors by tenant", tenant=tenant, error=e.detail)
            raise

    async def create(self, payload: MonitorCreate | Mapping[str, Any]) -> MonitorRead:
        """Register a new monitor.

        Steps:
        1. Validate the payload (no storage access on failure)
        2. Assign a fresh id and stamp updated_at
        3. Insert, then re-read so the response reflects what storage holds

        Raises:
            ValidationError: name missing, empty or longer than 128 characters
            StorageError: the insert was rejected
        """
        request = _validate(MonitorCreate, payload)

        monitor_id = generate_id()
        await self.monitor_repo.create(
            Monitor(
                id=monitor_id,
                name=request.name,
                monitor_id=request.monitor_id,
                org_id=request.org_id,
                tenant=request.tenant,
                updated_at=utc_now(),
            )
        )
        logger.info("Monitor created", id=monitor_id, org_id=request.org_id, tenant=request.tenant)
        return await self.get(monitor_id)

    async def update(self, id: str, payload: MonitorUpdate | Mapping[str, Any]) -> MonitorRead:
        """Rename a monitor and refresh its updated_at.

        Raises:
            ValidationError: invalid name (checked before the lookup)
            NotFoundError: no monitor with this id
            StorageError: the update was rejected
        """
        request = _validate(MonitorUpdate, payload)

        current = await self.get(id)
        monitor = Monitor(**current.model_dump())
        monitor.name = request.name
        monitor.updated_at = utc_now()

        await self.monitor_repo.update(monitor)
        logger.info("Monitor updated", id=id)
        return await self.get(id)

    async def delete(self, id: str) -> MonitorRead:
        """Delete a monitor and return it as it was just before removal."""
        snapshot = await self.get(id)
        await self.monitor_repo.delete(id)
        logger.info("Monitor deleted", id=id)
        return snapshot
