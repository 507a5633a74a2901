"""Receptionist repositories: async database access with tenant isolation.

Bookings carry free-form, vertical-specific metadata. The booking store
validates it against the tenant's vertical before anything is flushed, so
invalid metadata never reaches the database.
"""

import logging
from typing import Any

from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from core.business.metadata import MetadataRejected, validate_metadata
from core.database import get_session
from patterns.repository import BaseRepository
from verticals.receptionist.models.db_models import Booking, TenantProfile

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Tenant profile repository
# ---------------------------------------------------------------------------

class TenantProfileRepository(BaseRepository[TenantProfile]):
    """Repository for tenant business profiles."""

    model = TenantProfile

    async def get_for_tenant(self, tenant_id: str) -> dict | None:
        stmt = select(TenantProfile).where(TenantProfile.tenant_id == tenant_id)
        result = await self.session.execute(stmt)
        profile = result.scalars().first()
        return profile.to_dict() if profile else None

    async def get_business_type(self, tenant_id: str) -> str | None:
        """Declared vertical label of a tenant (None if no profile yet)."""
        stmt = select(TenantProfile.business_type).where(
            TenantProfile.tenant_id == tenant_id
        )
        result = await self.session.execute(stmt)
        return result.scalars().first()


# ---------------------------------------------------------------------------
# Booking repository
# ---------------------------------------------------------------------------

class BookingRepository(BaseRepository[Booking]):
    """Repository for bookings; validates metadata on every write."""

    model = Booking

    def __init__(
        self,
        session: AsyncSession,
        profiles: TenantProfileRepository | None = None,
    ):
        super().__init__(session)
        self.profiles = profiles or TenantProfileRepository(session)

    async def _validated_metadata(self, tenant_id: str, metadata: Any) -> dict:
        business_type = await self.profiles.get_business_type(tenant_id)
        result = validate_metadata(business_type, metadata)
        if not result.is_valid:
            logger.info(
                "Rejected %s booking metadata for tenant %s: %s",
                result.vertical.value,
                tenant_id,
                [e.path for e in result.errors],
            )
            raise MetadataRejected(result.vertical, result.errors)
        return result.data or {}

    async def prepare_create(self, tenant_id: str, data: dict[str, Any]) -> dict[str, Any]:
        metadata = data.pop("metadata", None)
        data["record_metadata"] = await self._validated_metadata(tenant_id, metadata)
        return data

    async def prepare_update(
        self, item: Booking, tenant_id: str, data: dict[str, Any]
    ) -> dict[str, Any]:
        if "metadata" in data:
            metadata = data.pop("metadata")
            data["record_metadata"] = await self._validated_metadata(tenant_id, metadata)
        return data

    async def list_by_status(
        self, tenant_id: str, status: str | None = None, page: int = 1, limit: int = 50
    ) -> tuple[list[dict], int]:
        return await self.list(
            tenant_id=tenant_id, page=page, limit=limit, filters={"status": status}
        )


# ---------------------------------------------------------------------------
# FastAPI dependency factories
# ---------------------------------------------------------------------------

def get_profile_repository(
    session: AsyncSession = Depends(get_session),
) -> TenantProfileRepository:
    """FastAPI dependency for TenantProfileRepository."""
    return TenantProfileRepository(session)


def get_booking_repository(
    session: AsyncSession = Depends(get_session),
) -> BookingRepository:
    """FastAPI dependency for BookingRepository."""
    return BookingRepository(session)
