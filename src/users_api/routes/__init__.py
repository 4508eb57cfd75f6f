"""Route initialization module."""

from fastapi import APIRouter

from users_api.routes.health import router as health_router
from users_api.routes.users import router as users_router

# Operational endpoints live under /api
api_router = APIRouter(prefix="/api")
api_router.include_router(health_router)

# The users resource is served from the application root
users_router_no_prefix = APIRouter()
users_router_no_prefix.include_router(users_router)


__all__ = ["api_router", "users_router_no_prefix"]
