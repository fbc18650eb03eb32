"""API Routes module"""
from fastapi import APIRouter, Depends

from ..deps import require_user_if_enabled
from .auth import router as auth_router
from .tasks import router as tasks_router
from .catalog import router as catalog_router

# Routes under /api; guarded only when AUTH_REQUIRED is set
api_router = APIRouter(dependencies=[Depends(require_user_if_enabled)])
api_router.include_router(tasks_router, tags=["Tasks"])
api_router.include_router(catalog_router, tags=["Catalog"])

__all__ = ["api_router", "auth_router"]
