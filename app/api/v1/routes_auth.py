# File: app/api/v1/routes_auth.py

"""
Auth API routes: registration, login and the current-user lookup.

Tokens are returned in the response body; clients send them back as
`Authorization: Bearer <token>`.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from app.api.deps import authenticate_user, get_auth_service, get_user_store
from app.core.errors import Unauthorized
from app.schemas.auth import LoginRequest, LoginResponse, RegisterResponse
from app.schemas.user import UserCreate, UserRead
from app.services.auth_service import AuthService
from app.services.route_guard import Identity
from app.services.user_store import UserStore

router = APIRouter()


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
)
def register(payload: UserCreate, auth: AuthService = Depends(get_auth_service)):
    """
    Create a plain "user" account and return it with a fresh access token.

    400 if the email is already registered.
    """
    try:
        user, token = auth.register(payload)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc))
    return RegisterResponse(user=user, access_token=token)


@router.post("/login", response_model=LoginResponse, summary="User login")
def login(payload: LoginRequest, auth: AuthService = Depends(get_auth_service)):
    """
    Exchange email + password for an access token.

    Any credential mismatch is a 400 "Invalid email or password".
    """
    user = auth.login(payload.email, payload.password)
    return LoginResponse(access_token=auth.issue_token(user))


@router.get("/me", response_model=UserRead, summary="Current user")
def read_me(
    identity: Identity = Depends(authenticate_user),
    store: UserStore = Depends(get_user_store),
):
    user = store.get_user_by_id(identity.user_id)
    if user is None:
        # Token outlived the account it was issued for.
        raise Unauthorized("Invalid token")
    return user
