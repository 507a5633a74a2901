"""Test booking repository metadata checks."""
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest

from core.business.metadata import MetadataRejected
from verticals.receptionist.models.db_models import Booking
from verticals.receptionist.repository import BookingRepository


class FakeProfiles:
    def __init__(self, business_type):
        self.business_type = business_type

    async def get_business_type(self, tenant_id):
        return self.business_type


def _session():
    session = MagicMock()
    session.flush = AsyncMock()
    session.delete = AsyncMock()
    return session


def _booking_data(**overrides):
    data = {
        "customer_name": "Léa Martin",
        "customer_phone": "+33600000000",
        "starts_at": datetime(2026, 3, 14, 19, 30, tzinfo=timezone.utc),
        "status": "confirmed",
        "notes": None,
        "metadata": {"vehicle_brand": "Renault", "status": "workshop"},
    }
    data.update(overrides)
    return data


@pytest.mark.asyncio
async def test_create_stores_validated_metadata():
    session = _session()
    repo = BookingRepository(session, profiles=FakeProfiles("garage"))

    booking = await repo.create(tenant_id="T1", data=_booking_data())

    session.add.assert_called_once()
    session.flush.assert_awaited_once()
    assert booking["tenant_id"] == "T1"
    assert booking["metadata"] == {"vehicle_brand": "Renault", "status": "workshop"}


@pytest.mark.asyncio
async def test_create_rejects_invalid_metadata_before_write():
    session = _session()
    repo = BookingRepository(session, profiles=FakeProfiles("automotive"))

    with pytest.raises(MetadataRejected) as exc_info:
        await repo.create(tenant_id="T1", data=_booking_data(metadata={"status": "parked"}))

    assert [e.path for e in exc_info.value.errors] == ["status"]
    session.add.assert_not_called()
    session.flush.assert_not_awaited()


@pytest.mark.asyncio
async def test_create_without_profile_uses_default_vertical():
    session = _session()
    repo = BookingRepository(session, profiles=FakeProfiles(None))

    booking = await repo.create(tenant_id="T1", data=_booking_data(metadata={"guests": 2}))
    assert booking["metadata"] == {"guests": 2}

    with pytest.raises(MetadataRejected):
        await repo.create(tenant_id="T1", data=_booking_data(metadata={"guests": "two"}))


@pytest.mark.asyncio
async def test_create_without_metadata():
    repo = BookingRepository(_session(), profiles=FakeProfiles("medical"))
    data = _booking_data()
    del data["metadata"]
    booking = await repo.create(tenant_id="T1", data=data)
    assert booking["metadata"] == {}


@pytest.mark.asyncio
async def test_update_validates_only_when_metadata_given():
    session = _session()
    repo = BookingRepository(session, profiles=FakeProfiles("medical"))
    existing = Booking(
        tenant_id="T1",
        customer_name="Paul",
        starts_at=datetime(2026, 3, 14, 9, 0, tzinfo=timezone.utc),
        status="confirmed",
        record_metadata={"urgency": "routine"},
    )
    repo.get_instance = AsyncMock(return_value=existing)

    updated = await repo.update(item_id="b1", tenant_id="T1", data={"status": "cancelled"})
    assert updated["status"] == "cancelled"
    assert updated["metadata"] == {"urgency": "routine"}

    with pytest.raises(MetadataRejected):
        await repo.update(item_id="b1", tenant_id="T1", data={"metadata": {"urgency": "soon"}})
    assert existing.record_metadata == {"urgency": "routine"}

    updated = await repo.update(
        item_id="b1", tenant_id="T1", data={"metadata": {"urgency": "emergency"}}
    )
    assert updated["metadata"] == {"urgency": "emergency"}


@pytest.mark.asyncio
async def test_update_never_moves_tenant():
    repo = BookingRepository(_session(), profiles=FakeProfiles("restaurant"))
    existing = Booking(
        tenant_id="T1",
        customer_name="Paul",
        starts_at=datetime(2026, 3, 14, 9, 0, tzinfo=timezone.utc),
        status="confirmed",
        record_metadata={},
    )
    repo.get_instance = AsyncMock(return_value=existing)

    updated = await repo.update(item_id="b1", tenant_id="T1", data={"tenant_id": "T2"})
    assert updated["tenant_id"] == "T1"


@pytest.mark.asyncio
async def test_update_missing_booking():
    repo = BookingRepository(_session(), profiles=FakeProfiles("restaurant"))
    repo.get_instance = AsyncMock(return_value=None)
    assert await repo.update(item_id="nope", tenant_id="T1", data={"status": "cancelled"}) is None
