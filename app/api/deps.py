# File: app/api/deps.py

"""
FastAPI dependencies: settings, store/service wiring and the route guards.

Guards compose in a fixed order. Any route that depends on `is_admin`
resolves `authenticate_user` first, so an anonymous caller gets a 401 and
never reaches the role check or the handler body.
"""

from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.core.config import Settings
from app.core.errors import Forbidden, Unauthorized
from app.db.session import get_db
from app.services.auth_service import AuthService
from app.services.route_guard import GuardDecision, GuardState, Identity, RouteGuard
from app.services.user_store import UserStore

_bearer = HTTPBearer(auto_error=False)


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_user_store(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
) -> UserStore:
    return UserStore(db, bcrypt_rounds=settings.bcrypt_rounds)


def get_auth_service(
    store: UserStore = Depends(get_user_store),
    settings: Settings = Depends(get_app_settings),
) -> AuthService:
    return AuthService(store, settings)


def authenticate_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer),
    settings: Settings = Depends(get_app_settings),
) -> Identity:
    token = credentials.credentials if credentials is not None else None
    guard = RouteGuard(secret=settings.secret_key, algorithm=settings.algorithm)

    decision = guard.evaluate(token)
    if not decision.allowed:
        if decision.reason == "missing_token":
            raise Unauthorized("Access denied. No token provided.")
        raise Unauthorized("Invalid token")

    request.state.identity = decision.identity
    return decision.identity


def is_admin(
    identity: Identity = Depends(authenticate_user),
    settings: Settings = Depends(get_app_settings),
) -> Identity:
    guard = RouteGuard(secret=settings.secret_key, algorithm=settings.algorithm, require_admin=True)

    decision = guard.authorize(GuardDecision(GuardState.AUTHENTICATED, identity=identity))
    if not decision.allowed:
        raise Forbidden()
    return identity
