from fastapi import APIRouter

from app.api.v1.routes_auth import router as auth_router
from app.api.v1.routes_protected import router as protected_router


# Mounted under settings.api_prefix ("/api")
api_router = APIRouter()

api_router.include_router(auth_router, prefix="/auth", tags=["auth"])
api_router.include_router(protected_router, prefix="/auth", tags=["auth"])

# Mounted at the application root, e.g. GET /admin-only
root_router = APIRouter()

root_router.include_router(protected_router, tags=["protected"])
