"""Admin session API router."""

from fastapi import APIRouter, Depends

from app.middleware.auth_middleware import require_admin
from app.schemas.auth import AdminOut, LoginRequest, TokenResponse
from app.services.auth_service import admin_profile, create_access_token, verify_admin_password

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/login", response_model=TokenResponse)
def login(request: LoginRequest):
    verify_admin_password(request.password)
    token = create_access_token()
    return TokenResponse(access_token=token, user=AdminOut(**admin_profile()))


@router.post("/logout")
def logout(_admin: str = Depends(require_admin)):
    return {"success": True}


@router.get("/me", response_model=AdminOut)
def me(_admin: str = Depends(require_admin)):
    return admin_profile()
