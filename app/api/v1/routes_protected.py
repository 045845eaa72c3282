# File: app/api/v1/routes_protected.py

from fastapi import APIRouter, Depends

from app.api.deps import authenticate_user, is_admin
from app.schemas.auth import MessageResponse
from app.services.route_guard import Identity

router = APIRouter()


@router.get("/protected", response_model=MessageResponse, summary="Any authenticated user")
def protected(identity: Identity = Depends(authenticate_user)):
    return {"message": "Protected route accessed successfully"}


@router.get("/admin-only", response_model=MessageResponse, summary="Admins only")
def admin_only(identity: Identity = Depends(is_admin)):
    return {"message": "Welcome Admin! You have access to this route."}
