"""Google OAuth Client — Authlib Starlette integration for "Sign in with Google".

Invariants:
    - The client is registered only when google_client_id and google_client_secret are set
    - get_google_client() raises ExternalAuthError when OAuth is not configured
    - fetch_google_profile() returns the OpenID userinfo dict or raises ExternalAuthError
    - Requires Starlette SessionMiddleware (state is kept in the signed session cookie)
"""

import logging

import httpx
from authlib.integrations.base_client import OAuthError
from authlib.integrations.starlette_client import OAuth, StarletteOAuth2App
from starlette.requests import Request

from blogapi.config import Settings
from blogapi.core.errors import ExternalAuthError

logger = logging.getLogger(__name__)

_oauth: OAuth | None = None


def configure_oauth(settings: Settings) -> OAuth | None:
    """Register the Google client from settings. Called once at app import."""
    global _oauth
    if not settings.google_oauth_enabled:
        logger.info("Google OAuth disabled (no client credentials configured)")
        _oauth = None
        return None
    oauth = OAuth()
    oauth.register(
        name="google",
        client_id=settings.google_client_id,
        client_secret=settings.google_client_secret,
        server_metadata_url=settings.google_metadata_url,
        client_kwargs={"scope": "openid email profile"},
    )
    _oauth = oauth
    return oauth


def get_google_client() -> StarletteOAuth2App:
    if _oauth is None:
        raise ExternalAuthError("Google sign-in is not configured")
    return _oauth.google


async def fetch_google_profile(request: Request) -> dict:
    """Exchange the authorization code on the callback request for the user profile."""
    client = get_google_client()
    try:
        token = await client.authorize_access_token(request)
    except OAuthError as e:
        raise ExternalAuthError(f"Google sign-in failed: {e.error}")
    except httpx.HTTPError as e:
        logger.error(f"Google token exchange failed: {e}")
        raise ExternalAuthError("Could not reach Google")
    profile = token.get("userinfo")
    if not profile:
        raise ExternalAuthError("Google did not return a user profile")
    return dict(profile)
