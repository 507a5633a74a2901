"""ReceptionAI dashboard API: FastAPI entry point.

Registers middleware, routers, and lifecycle hooks. The receptionist
dashboard router is mounted under /api/dashboard/.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.middleware import TenantMiddleware
from core.config import settings
from core.logging_config import setup_logging

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Lifespan
# ---------------------------------------------------------------------------

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup/shutdown hooks."""
    from core.access.plans import PLANS
    from core.business.registry import VERTICAL_CONFIGS
    from core.database import close_db, init_db

    setup_logging(settings.log_level)
    if settings.debug:
        await init_db()
    logger.info(
        "%s %s started: %d verticals, %d plans",
        settings.app_name,
        settings.app_version,
        len(VERTICAL_CONFIGS),
        len(PLANS),
    )
    yield
    await close_db()
    logger.info("%s shutting down", settings.app_name)


# ---------------------------------------------------------------------------
# App
# ---------------------------------------------------------------------------

app = FastAPI(
    title=settings.app_name,
    description="Multi-tenant receptionist dashboard: vertical configuration and tiered feature access",
    version=settings.app_version,
    debug=settings.debug,
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Multi-tenant middleware
app.add_middleware(TenantMiddleware)

# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------

from verticals.receptionist.router import router as dashboard_router  # noqa: E402

app.include_router(dashboard_router, prefix="/api/dashboard", tags=["Dashboard"])


# ---------------------------------------------------------------------------
# Health & root
# ---------------------------------------------------------------------------

@app.get("/health")
async def health():
    return {"status": "healthy", "version": settings.app_version}


@app.get("/")
async def root():
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
    }
