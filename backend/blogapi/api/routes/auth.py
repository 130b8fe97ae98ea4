"""Auth Routes — registration, login, Google sign-in, current user and logout.

Invariants:
    - register/login answer {success, data: {token, user}}; user never carries a password hash
    - Google callback always redirects to the frontend: /auth/callback on success,
      /login?error=... on failure
    - logout is a stateless acknowledgement (tokens stay valid until expiry)
"""

import json
import logging
from urllib.parse import quote, urlencode

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import RedirectResponse
from sqlalchemy.ext.asyncio import AsyncSession

from blogapi.api.deps import get_current_user
from blogapi.config import get_settings
from blogapi.core.errors import BlogError
from blogapi.core.presenters import public_user
from blogapi.infrastructure.database import get_db
from blogapi.infrastructure.google_oauth import (
    fetch_google_profile, get_google_client,
)
from blogapi.models.user import User
from blogapi.schemas.auth import LoginRequest, ProviderProfile, RegisterRequest
from blogapi.services.accounts import AccountService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/auth", tags=["auth"])


def _session_response(user: User, token: str, message: str | None = None) -> dict:
    body = {"success": True, "data": {"token": token, "user": public_user(user)}}
    if message:
        body["message"] = message
    return body


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(body: RegisterRequest, db: AsyncSession = Depends(get_db)):
    user, token = await AccountService(db).register(
        body.email, body.password, body.name,
    )
    return _session_response(user, token, "User registered successfully")


@router.post("/login")
async def login(body: LoginRequest, db: AsyncSession = Depends(get_db)):
    user, token = await AccountService(db).login(body.email, body.password)
    return _session_response(user, token)


@router.get("/google")
async def google_login(request: Request):
    """Start the Google authorization-code flow."""
    client = get_google_client()
    redirect_uri = request.url_for("google_callback")
    return await client.authorize_redirect(request, str(redirect_uri))


@router.get("/google/callback", name="google_callback")
async def google_callback(request: Request, db: AsyncSession = Depends(get_db)):
    """Finish Google sign-in and hand the session to the frontend via redirect."""
    frontend_url = get_settings().frontend_url.rstrip("/")
    try:
        profile = ProviderProfile.model_validate(await fetch_google_profile(request))
        user, token = await AccountService(db).oauth_upsert(profile)
    except BlogError as e:
        logger.warning(f"Google sign-in failed: {e.message}", extra=e.log_extra())
        return RedirectResponse(
            f"{frontend_url}/login?error={quote(e.message)}",
            status_code=status.HTTP_302_FOUND,
        )

    query = urlencode({
        "token": token,
        "user": json.dumps(public_user(user), separators=(",", ":")),
    })
    return RedirectResponse(
        f"{frontend_url}/auth/callback?{query}",
        status_code=status.HTTP_302_FOUND,
    )


@router.get("/me")
async def me(user: User = Depends(get_current_user)):
    return {"success": True, "data": public_user(user)}


@router.post("/logout")
async def logout(user: User = Depends(get_current_user)):
    logger.info("User logged out", extra={"user_id": str(user.id)})
    return {"success": True, "message": "User logged out successfully"}
