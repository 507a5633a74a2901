"""Async repository pattern for database access.

Provides a generic base repository with CRUD operations, tenant isolation
and pagination. Subclasses add domain queries and may override
``prepare_create`` / ``prepare_update`` to check or reshape a payload
before it is written (the booking store validates vertical metadata there).

Example: BookingRepository extending BaseRepository.
"""

from typing import Any, Generic, TypeVar
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from core.models.base import Base

# ---------------------------------------------------------------------------
# Type variable for model classes
# ---------------------------------------------------------------------------

ModelT = TypeVar("ModelT", bound=Base)

_PROTECTED_FIELDS = ("id", "tenant_id", "created_at")


# ---------------------------------------------------------------------------
# Base repository
# ---------------------------------------------------------------------------

class BaseRepository(Generic[ModelT]):
    """Generic async repository with CRUD + pagination + tenant isolation.

    Subclass and set `model` to your SQLAlchemy model::

        class BookingRepository(BaseRepository[Booking]):
            model = Booking

            async def prepare_create(self, tenant_id, data):
                data["status"] = data.get("status") or "confirmed"
                return data
    """

    model: type[ModelT]

    def __init__(self, session: AsyncSession):
        self.session = session

    # -- Write hooks --

    async def prepare_create(self, tenant_id: str, data: dict[str, Any]) -> dict[str, Any]:
        """Return the payload to insert. Raise to refuse the write."""
        return data

    async def prepare_update(
        self, item: ModelT, tenant_id: str, data: dict[str, Any]
    ) -> dict[str, Any]:
        """Return the changes to apply to ``item``. Raise to refuse the write."""
        return data

    # -- List with pagination --

    async def list(
        self,
        tenant_id: str,
        page: int = 1,
        limit: int = 50,
        filters: dict[str, Any] | None = None,
    ) -> tuple[list[dict], int]:
        """List items with pagination and optional filters.

        Returns (items, total_count).
        """
        stmt = select(self.model).where(self.model.tenant_id == tenant_id)
        count_stmt = select(func.count()).select_from(self.model).where(
            self.model.tenant_id == tenant_id
        )

        if filters:
            for col_name, value in filters.items():
                if hasattr(self.model, col_name) and value is not None:
                    stmt = stmt.where(getattr(self.model, col_name) == value)
                    count_stmt = count_stmt.where(getattr(self.model, col_name) == value)

        offset = (page - 1) * limit
        stmt = stmt.order_by(self.model.created_at.desc()).offset(offset).limit(limit)

        result = await self.session.execute(stmt)
        items = [row.to_dict() for row in result.scalars().all()]

        count_result = await self.session.execute(count_stmt)
        total = count_result.scalar() or 0

        return items, total

    # -- Get by ID --

    async def get_instance(self, item_id: str | UUID, tenant_id: str) -> ModelT | None:
        stmt = select(self.model).where(
            self.model.id == item_id,
            self.model.tenant_id == tenant_id,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get(self, item_id: str | UUID, tenant_id: str) -> dict | None:
        """Get a single item by ID with tenant isolation."""
        item = await self.get_instance(item_id, tenant_id)
        return item.to_dict() if item else None

    # -- Create --

    async def create(self, tenant_id: str, data: dict[str, Any]) -> dict:
        """Create a new item."""
        data = await self.prepare_create(tenant_id, dict(data))
        item = self.model(tenant_id=tenant_id, **data)
        self.session.add(item)
        await self.session.flush()
        return item.to_dict()

    # -- Update --

    async def update(
        self, item_id: str | UUID, tenant_id: str, data: dict[str, Any]
    ) -> dict | None:
        """Update an existing item. Returns None if not found."""
        item = await self.get_instance(item_id, tenant_id)
        if not item:
            return None

        data = await self.prepare_update(item, tenant_id, dict(data))
        for key, value in data.items():
            if hasattr(item, key) and key not in _PROTECTED_FIELDS:
                setattr(item, key, value)

        await self.session.flush()
        return item.to_dict()

    # -- Delete --

    async def delete(self, item_id: str | UUID, tenant_id: str) -> bool:
        """Delete an item. Returns True if deleted, False if not found."""
        item = await self.get_instance(item_id, tenant_id)
        if not item:
            return False

        await self.session.delete(item)
        await self.session.flush()
        return True
