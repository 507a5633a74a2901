"""Tenant isolation middleware using ContextVar.

Every dashboard request is scoped to one tenant. The tenant ID comes from
the X-Tenant-ID header, else from the first subdomain
(``bistrot-lea.receptionai.fr``), else "default". It is stored in a
ContextVar so repositories and routers can call get_current_tenant()
without explicit parameter passing.
"""

import logging
from contextvars import ContextVar
from typing import Mapping

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger(__name__)

DEFAULT_TENANT = "default"
TENANT_HEADER = "X-Tenant-ID"
MAX_TENANT_ID_LENGTH = 64  # TenantMixin.tenant_id column size

# Subdomains that belong to the platform, not to a tenant
_RESERVED_SUBDOMAINS = frozenset({"www", "api", "app", "admin"})

# ---------------------------------------------------------------------------
# Context variable: task-safe tenant state
# ---------------------------------------------------------------------------

_current_tenant: ContextVar[str] = ContextVar("current_tenant", default=DEFAULT_TENANT)


def get_current_tenant() -> str:
    """Return the tenant ID for the current request."""
    return _current_tenant.get()


def tenant_from_headers(headers: Mapping[str, str]) -> str:
    """Resolve the tenant ID from request headers.

    Priority:
    1. X-Tenant-ID header (explicit)
    2. First subdomain segment, unless reserved (www, api, app, admin)
    3. "default"
    """
    tenant_id = (headers.get(TENANT_HEADER) or headers.get(TENANT_HEADER.lower()) or "").strip()

    if not tenant_id:
        host = (headers.get("host") or "").split(":")[0]
        parts = host.split(".")
        if len(parts) > 2 and parts[0].lower() not in _RESERVED_SUBDOMAINS:
            tenant_id = parts[0].lower()

    return tenant_id[:MAX_TENANT_ID_LENGTH] or DEFAULT_TENANT


# ---------------------------------------------------------------------------
# Middleware
# ---------------------------------------------------------------------------

class TenantMiddleware(BaseHTTPMiddleware):
    """Bind the request's tenant for the duration of the request."""

    async def dispatch(self, request: Request, call_next) -> Response:
        tenant_id = tenant_from_headers(request.headers)
        token = _current_tenant.set(tenant_id)
        try:
            logger.debug("%s %s tenant=%s", request.method, request.url.path, tenant_id)
            response = await call_next(request)
            response.headers[TENANT_HEADER] = tenant_id
            return response
        finally:
            _current_tenant.reset(token)
