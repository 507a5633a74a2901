"""Receptionist dashboard API router.

Demonstrates the standard router pattern for the dashboard:
- Profile endpoints resolving vertical config, feature flags and menu
- Catalogue endpoints (verticals, plans)
- Metadata dry-run validation
- Booking CRUD with metadata validated against the tenant's vertical
- Booking writes gated on the tenant's plan (403 on a read-only calendar)
- Tenant isolation via middleware
- Repository injection via FastAPI Depends
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from api.middleware import get_current_tenant
from core.access.navigation import MenuMode
from core.access.plans import list_plans
from core.business.formatter import format_metadata
from core.business.metadata import MetadataRejected, validate_metadata
from core.business.registry import list_verticals
from core.config import settings
from verticals.receptionist.models.schemas import (
    BookingCreate,
    BookingStatus,
    BookingUpdate,
    DashboardConfigResponse,
    MetadataCheckRequest,
    MetadataCheckResponse,
)
from verticals.receptionist.profile import resolve_dashboard
from verticals.receptionist.repository import (
    BookingRepository,
    TenantProfileRepository,
    get_booking_repository,
    get_profile_repository,
)
from verticals.receptionist.rules import ROUTE_FEATURES, can_access_route, check_booking_write

router = APIRouter()


def _rejected(exc: MetadataRejected) -> HTTPException:
    return HTTPException(
        status_code=422,
        detail={
            "message": str(exc),
            "vertical": exc.vertical.value,
            "errors": [e.to_dict() for e in exc.errors],
        },
    )


async def require_booking_write(
    profiles: TenantProfileRepository = Depends(get_profile_repository),
) -> None:
    """Reject booking writes from plans with a read-only calendar."""
    profile = await profiles.get_for_tenant(get_current_tenant()) or {}
    result = check_booking_write(profile.get("plan"))
    if not result.passed:
        raise HTTPException(
            status_code=403,
            detail={"message": result.message, **result.details},
        )


# ============================================================================
# Profile Endpoints
# ============================================================================

@router.get("/profile/config", response_model=DashboardConfigResponse)
async def get_dashboard_config(
    mode: Optional[MenuMode] = None,
    profiles: TenantProfileRepository = Depends(get_profile_repository),
):
    """Resolved vertical, theme, vocabulary, modules, flags and menu.

    A tenant without a profile gets the defaults: restaurant, starter.
    """
    tenant_id = get_current_tenant()
    profile = await profiles.get_for_tenant(tenant_id) or {}
    resolved = resolve_dashboard(
        profile.get("business_type"),
        profile.get("plan"),
        mode or settings.default_menu_mode,
    )
    return {
        "tenant_id": tenant_id,
        "company_name": profile.get("company_name"),
        "declared_vertical": profile.get("business_type"),
        "declared_plan": profile.get("plan"),
        **resolved.to_dict(),
    }


@router.get("/profile/features")
async def get_features(
    profiles: TenantProfileRepository = Depends(get_profile_repository),
):
    """Feature flags for the current tenant's plan."""
    tenant_id = get_current_tenant()
    profile = await profiles.get_for_tenant(tenant_id) or {}
    resolved = resolve_dashboard(profile.get("business_type"), profile.get("plan"))
    return {
        "tier": resolved.tier.value,
        "features": resolved.features.as_dict(),
        "read_only": {
            "live_feed": resolved.features.live_feed_read_only,
            "calendar": resolved.features.calendar_read_only,
        },
        "routes": {path: can_access_route(resolved.tier, path) for path in ROUTE_FEATURES},
    }


@router.get("/profile/menu")
async def get_menu(
    mode: Optional[MenuMode] = None,
    profiles: TenantProfileRepository = Depends(get_profile_repository),
):
    """Sidebar entries for the current tenant."""
    tenant_id = get_current_tenant()
    profile = await profiles.get_for_tenant(tenant_id) or {}
    mode = mode or MenuMode(settings.default_menu_mode)
    resolved = resolve_dashboard(profile.get("business_type"), profile.get("plan"), mode)
    return {
        "mode": mode.value,
        "data": [item.to_dict() for item in resolved.menu],
    }


# ============================================================================
# Catalogue Endpoints
# ============================================================================

@router.get("/verticals")
async def get_verticals():
    """Canonical verticals offered at onboarding."""
    return {"data": list_verticals()}


@router.get("/plans")
async def get_plans():
    """Commercial plans, cheapest first."""
    return {"data": [plan.to_dict() for plan in list_plans()]}


# ============================================================================
# Metadata Endpoint
# ============================================================================

@router.post("/metadata/validate", response_model=MetadataCheckResponse)
async def check_metadata(
    request: MetadataCheckRequest,
    profiles: TenantProfileRepository = Depends(get_profile_repository),
):
    """Dry-run metadata validation (nothing is stored)."""
    vertical = request.vertical
    if vertical is None:
        vertical = await profiles.get_business_type(get_current_tenant())

    result = validate_metadata(vertical, request.metadata)
    return {
        "vertical": result.vertical.value,
        "valid": result.is_valid,
        "data": result.data,
        "errors": [e.to_dict() for e in result.errors],
        "summary": (
            format_metadata(result.vertical.value, result.data).to_dict()
            if result.is_valid
            else None
        ),
    }


# ============================================================================
# Booking Endpoints
# ============================================================================

@router.get("/bookings")
async def list_bookings(
    status: Optional[BookingStatus] = None,
    page: int = Query(1, ge=1),
    limit: int = Query(50, ge=1, le=100),
    repo: BookingRepository = Depends(get_booking_repository),
):
    """List bookings, newest first, optionally filtered by status."""
    tenant_id = get_current_tenant()
    bookings, total = await repo.list_by_status(
        tenant_id=tenant_id,
        status=status.value if status else None,
        page=page,
        limit=limit,
    )
    return {
        "data": bookings,
        "pagination": {
            "page": page,
            "limit": limit,
            "total": total,
            "total_pages": (total + limit - 1) // limit,
        },
    }


@router.get("/bookings/{booking_id}")
async def get_booking(
    booking_id: str,
    repo: BookingRepository = Depends(get_booking_repository),
):
    tenant_id = get_current_tenant()
    booking = await repo.get(item_id=booking_id, tenant_id=tenant_id)
    if not booking:
        raise HTTPException(status_code=404, detail="Booking not found")
    return booking


@router.post("/bookings", status_code=201, dependencies=[Depends(require_booking_write)])
async def create_booking(
    request: BookingCreate,
    repo: BookingRepository = Depends(get_booking_repository),
):
    """Create a booking. Metadata must match the tenant's vertical."""
    tenant_id = get_current_tenant()
    try:
        return await repo.create(tenant_id=tenant_id, data=request.model_dump())
    except MetadataRejected as exc:
        raise _rejected(exc)


@router.patch("/bookings/{booking_id}", dependencies=[Depends(require_booking_write)])
async def update_booking(
    booking_id: str,
    request: BookingUpdate,
    repo: BookingRepository = Depends(get_booking_repository),
):
    tenant_id = get_current_tenant()
    updates = request.model_dump(exclude_unset=True)
    try:
        booking = await repo.update(item_id=booking_id, tenant_id=tenant_id, data=updates)
    except MetadataRejected as exc:
        raise _rejected(exc)
    if not booking:
        raise HTTPException(status_code=404, detail="Booking not found")
    return booking


@router.delete("/bookings/{booking_id}", status_code=204, dependencies=[Depends(require_booking_write)])
async def delete_booking(
    booking_id: str,
    repo: BookingRepository = Depends(get_booking_repository),
):
    tenant_id = get_current_tenant()
    deleted = await repo.delete(item_id=booking_id, tenant_id=tenant_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Booking not found")
