"""Unit tests for MonitorService against the in-memory repository."""

from datetime import timedelta

import pytest
from structlog.testing import capture_logs

from src.monitor_service.core.exceptions import (
    ErrorKind,
    NotFoundError,
    StorageError,
    ValidationError,
)
from src.monitor_service.models import utc_now
from src.monitor_service.schemas.monitor import MonitorCreate, MonitorRead, MonitorUpdate
from tests.factories import MonitorFactory

pytestmark = pytest.mark.unit


def seed(fake_repo, *monitors):
    for monitor in monitors:
        fake_repo.rows[monitor.id] = monitor
    return monitors


class TestCreate:
    """Tests for create."""

    async def test_create_round_trips_through_get(self, service):
        """A created monitor can be read back by its generated id."""
        started = utc_now()

        created = await service.create({"name": "Payments API"})
        fetched = await service.get(created.id)

        assert isinstance(created, MonitorRead)
        assert fetched.id == created.id
        assert fetched.name == "Payments API"
        assert fetched.updated_at >= started
        assert fetched.is_deleted is False

    async def test_create_assigns_unique_ids(self, service):
        first = await service.create({"name": "a"})
        second = await service.create({"name": "a"})

        assert first.id != second.id

    async def test_create_accepts_request_schema(self, service):
        created = await service.create(
            MonitorCreate(name="Search API", monitor_id="m-1", org_id="org-1", tenant="t-1")
        )

        assert created.monitor_id == "m-1"
        assert created.org_id == "org-1"
        assert created.tenant == "t-1"

    async def test_create_returns_stored_value(self, service, fake_repo):
        """Response is re-read from storage after the insert."""
        created = await service.create({"name": "Stored"})

        assert fake_repo.calls == ["create", "get"]
        assert fake_repo.rows[created.id].name == created.name

    async def test_create_accepts_name_at_max_length(self, service):
        created = await service.create({"name": "x" * 128})

        assert len(created.name) == 128

    @pytest.mark.parametrize(
        "payload",
        [
            {"name": ""},
            {"name": "x" * 129},
            {},
            {"name": None},
        ],
        ids=["empty", "too-long", "missing", "null"],
    )
    async def test_create_rejects_invalid_name_without_storage_access(
        self, service, fake_repo, payload
    ):
        with pytest.raises(ValidationError) as exc_info:
            await service.create(payload)

        assert exc_info.value.kind is ErrorKind.VALIDATION
        assert exc_info.value.errors
        assert fake_repo.calls == []
        assert await service.count() == 0

    async def test_create_revalidates_unvalidated_schema_instance(self, service, fake_repo):
        with pytest.raises(ValidationError):
            await service.create(MonitorCreate.model_construct(name=""))

        assert fake_repo.calls == []

    async def test_create_propagates_storage_error(self, service, fake_repo):
        fake_repo.fail_with = StorageError("connection refused")

        with pytest.raises(StorageError):
            await service.create({"name": "Payments API"})


class TestGet:
    """Tests for get."""

    async def test_get_returns_response_model(self, service, fake_repo):
        (monitor,) = seed(fake_repo, MonitorFactory.build())

        result = await service.get(monitor.id)

        assert result == MonitorRead.model_validate(monitor)

    async def test_get_missing_raises_not_found(self, service):
        with pytest.raises(NotFoundError) as exc_info:
            await service.get("does-not-exist")

        assert exc_info.value.kind is ErrorKind.NOT_FOUND


class TestUpdate:
    """Tests for update."""

    async def test_update_preserves_identity(self, service, fake_repo):
        (monitor,) = seed(fake_repo, MonitorFactory.build(name="Old"))

        updated = await service.update(monitor.id, {"name": "New"})

        assert updated.id == monitor.id
        assert updated.name == "New"
        assert updated.org_id == monitor.org_id
        assert updated.tenant == monitor.tenant
        assert updated.monitor_id == monitor.monitor_id
        assert fake_repo.rows[monitor.id].name == "New"

    async def test_update_refreshes_updated_at(self, service, fake_repo):
        old_timestamp = utc_now() - timedelta(days=1)
        (monitor,) = seed(fake_repo, MonitorFactory.build(updated_at=old_timestamp))

        updated = await service.update(monitor.id, MonitorUpdate(name="Renamed"))

        assert updated.updated_at > old_timestamp

    async def test_update_returns_stored_value(self, service, fake_repo):
        (monitor,) = seed(fake_repo, MonitorFactory.build())

        await service.update(monitor.id, {"name": "Renamed"})

        assert fake_repo.calls == ["get", "update", "get"]

    async def test_update_missing_raises_not_found(self, service, fake_repo):
        with pytest.raises(NotFoundError):
            await service.update("nonexistent", {"name": "M"})

        assert "update" not in fake_repo.calls

    async def test_update_validates_before_lookup(self, service, fake_repo):
        (monitor,) = seed(fake_repo, MonitorFactory.build(name="Keep"))

        with pytest.raises(ValidationError):
            await service.update(monitor.id, {"name": ""})

        assert fake_repo.calls == []
        assert fake_repo.rows[monitor.id].name == "Keep"


class TestDelete:
    """Tests for delete."""

    async def test_delete_returns_snapshot_and_removes(self, service, fake_repo):
        (monitor,) = seed(fake_repo, MonitorFactory.build(name="Doomed"))

        deleted = await service.delete(monitor.id)

        assert deleted.name == "Doomed"
        assert deleted.id == monitor.id
        with pytest.raises(NotFoundError):
            await service.get(monitor.id)

    async def test_delete_missing_raises_not_found(self, service, fake_repo):
        with pytest.raises(NotFoundError):
            await service.delete("nonexistent")

        assert "delete" not in fake_repo.calls


class TestListing:
    """Tests for query, get_by_org and get_by_tenant."""

    async def test_get_by_org_returns_all_in_id_order(self, service, fake_repo):
        monitors = seed(fake_repo, *MonitorFactory.batch(5, org_id="org-1"))
        seed(fake_repo, MonitorFactory.for_org("org-2"))

        result = await service.get_by_org("org-1", 0, 5)

        assert [m.id for m in result] == sorted(m.id for m in monitors)

    async def test_get_by_org_pages_do_not_overlap(self, service, fake_repo):
        seed(fake_repo, *MonitorFactory.batch(5, org_id="org-1"))

        first = await service.get_by_org("org-1", 0, 3)
        second = await service.get_by_org("org-1", 3, 3)

        assert len(first) == 3
        assert len(second) == 2
        assert not {m.id for m in first} & {m.id for m in second}

    async def test_get_by_org_offset_past_end_is_empty(self, service, fake_repo):
        seed(fake_repo, *MonitorFactory.batch(3, org_id="org-1"))

        assert await service.get_by_org("org-1", 3, 10) == []

    async def test_get_by_tenant_filters(self, service, fake_repo):
        (mine,) = seed(fake_repo, MonitorFactory.for_tenant("tenant-a"))
        seed(fake_repo, MonitorFactory.for_tenant("tenant-b"))

        result = await service.get_by_tenant("tenant-a", 0, 10)

        assert [m.id for m in result] == [mine.id]

    async def test_query_matches_count(self, service, fake_repo):
        seed(fake_repo, *MonitorFactory.batch(4))

        total = await service.count()
        result = await service.query(0, total)

        assert len(result) == total == 4

    @pytest.mark.parametrize(
        ("method", "args"),
        [
            ("query", (0, 10)),
            ("get_by_org", ("org-1", 0, 10)),
            ("get_by_tenant", ("tenant-1", 0, 10)),
            ("count", ()),
            ("count_by_org", ("org-1",)),
            ("count_by_tenant", ("tenant-1",)),
        ],
    )
    async def test_list_failure_is_logged_and_raised(self, service, fake_repo, method, args):
        fake_repo.fail_with = StorageError("relation does not exist")

        with capture_logs() as logs, pytest.raises(StorageError):
            await getattr(service, method)(*args)

        assert logs[0]["log_level"] == "warning"
        assert logs[0]["error"] == "relation does not exist"


class TestCounts:
    """Tests for the count pass-throughs."""

    async def test_counts_are_independent(self, service, fake_repo):
        seed(
            fake_repo,
            MonitorFactory.build(org_id="org-1", tenant="tenant-a"),
            MonitorFactory.build(org_id="org-1", tenant="tenant-b"),
            MonitorFactory.build(org_id="org-2", tenant="tenant-a"),
        )

        assert await service.count() == 3
        assert await service.count_by_org("org-1") == 2
        assert await service.count_by_tenant("tenant-a") == 2
        assert await service.count_by_org("missing") == 0

    async def test_count_propagates_storage_error(self, service, fake_repo):
        fake_repo.fail_with = StorageError("timeout")

        with pytest.raises(StorageError):
            await service.count_by_tenant("tenant-a")
