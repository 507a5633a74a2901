"""SQLAlchemy models for the receptionist dashboard.

Each model inherits from Base and uses TenantMixin for multi-tenant
isolation. ``business_type`` and ``plan`` are stored exactly as the tenant
entered them; they are resolved by the vertical/tier engine on read, never
rewritten here. The to_dict() method is the serialisation interface used by
repositories and routers.
"""

from datetime import datetime

from sqlalchemy import JSON, DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from core.models.base import Base, TenantMixin


class TenantProfile(TenantMixin, Base):
    """Business profile of a tenant (one per tenant)."""

    __tablename__ = "tenant_profiles"

    company_name: Mapped[str] = mapped_column(String(200), nullable=False)
    business_type: Mapped[str] = mapped_column(String(50), nullable=False, default="restaurant")
    plan: Mapped[str] = mapped_column(String(20), nullable=False, default="starter")

    def to_dict(self) -> dict:
        return {
            **self._audit_dict(),
            "company_name": self.company_name,
            "business_type": self.business_type,
            "plan": self.plan,
        }


class Booking(TenantMixin, Base):
    """A booking taken by phone or from the dashboard.

    ``metadata`` is reserved on declarative models, so the JSON column is
    exposed as ``record_metadata`` and serialised back as ``metadata``.
    """

    __tablename__ = "bookings"

    customer_name: Mapped[str] = mapped_column(String(200), nullable=False)
    customer_phone: Mapped[str | None] = mapped_column(String(32), nullable=True)
    starts_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, index=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="confirmed")
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    record_metadata: Mapped[dict] = mapped_column("metadata", JSON, nullable=False, default=dict)

    def to_dict(self) -> dict:
        return {
            **self._audit_dict(),
            "customer_name": self.customer_name,
            "customer_phone": self.customer_phone,
            "starts_at": self.starts_at.isoformat() if self.starts_at else None,
            "status": self.status,
            "notes": self.notes,
            "metadata": self.record_metadata or {},
        }
