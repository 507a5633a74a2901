"""Base model and mixins for the dashboard's SQLAlchemy models.

Provides:
- Base: Declarative base class for all models
- TenantMixin: Adds tenant_id, UUID primary key, and timestamps

Every record (tenant profile, booking) is scoped to a tenant; the tenant_id
column is indexed because every query filters on it.
"""

import uuid
from datetime import datetime

from sqlalchemy import DateTime, String, func
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Declarative base for all ReceptionAI models."""
    pass


class TenantMixin:
    """Mixin providing tenant isolation and audit columns."""

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )
    tenant_id: Mapped[str] = mapped_column(
        String(64),
        index=True,
        nullable=False,
        default="default",
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    def _audit_dict(self) -> dict:
        return {
            "id": str(self.id) if self.id else None,
            "tenant_id": self.tenant_id,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }
