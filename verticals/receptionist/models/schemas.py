"""Pydantic schemas for API request/response validation."""

from datetime import datetime
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class BookingStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    COMPLETED = "completed"
    NO_SHOW = "no_show"


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------

class BookingCreate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    customer_name: str = Field(..., min_length=1, max_length=200)
    customer_phone: Optional[str] = Field(None, max_length=32)
    starts_at: datetime
    status: BookingStatus = BookingStatus.CONFIRMED
    notes: Optional[str] = None
    metadata: dict[str, Any] = Field(default_factory=dict)


class BookingUpdate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    customer_name: Optional[str] = Field(None, min_length=1, max_length=200)
    customer_phone: Optional[str] = None
    starts_at: Optional[datetime] = None
    status: Optional[BookingStatus] = None
    notes: Optional[str] = None
    metadata: Optional[dict[str, Any]] = None


class MetadataCheckRequest(BaseModel):
    # Defaults to the current tenant's vertical
    vertical: Optional[str] = None
    metadata: Any = None


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------

class FieldErrorResponse(BaseModel):
    path: str
    expected: str
    received: str
    message: str


class MetadataCheckResponse(BaseModel):
    vertical: str
    valid: bool
    data: Optional[dict[str, Any]] = None
    errors: list[FieldErrorResponse] = Field(default_factory=list)
    summary: Optional[dict[str, Any]] = None


class MenuItemResponse(BaseModel):
    icon: str
    label: str
    path: str
    minimum_tier: Optional[str] = None
    locked: bool = False
    required_tier_label: Optional[str] = None


class DashboardConfigResponse(BaseModel):
    tenant_id: str
    company_name: Optional[str] = None
    declared_vertical: Optional[str] = None
    declared_plan: Optional[str] = None
    vertical: str
    tier: str
    config: dict[str, Any]
    features: dict[str, bool]
    menu: list[MenuItemResponse]
