"""Receptionist dashboard: the tenant-facing surface of ReceptionAI.

Wires the vertical/tier engine into the dashboard API:
- SQLAlchemy models for tenant profiles and bookings (TenantMixin)
- Async repositories; bookings validate vertical metadata before writing
- Per-tenant resolution of config, feature flags and menu
- FastAPI router under /api/dashboard
"""
