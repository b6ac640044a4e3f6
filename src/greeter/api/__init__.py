from __future__ import annotations

from fastapi import APIRouter

from greeter.api.routes.admin import router as admin_router
from greeter.api.routes.greeting import root_router
from greeter.api.routes.greeting import router as greeting_router
from greeter.api.routes.health import router as health_router

# Versioned API router, mounted at /api/v1
router = APIRouter()

# Route composition
router.include_router(greeting_router)
router.include_router(health_router)
router.include_router(admin_router)

__all__ = ["root_router", "router"]
