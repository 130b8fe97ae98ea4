"""Blog API Client — httpx wrapper over the REST API for scripts and frontends.

Invariants:
    - No process-wide session: register/login return a SessionContext and every
      authenticated call takes it explicitly
    - Non-2xx responses raise BlogClientError(status_code, message); message is the
      server's "message" field or FALLBACK_MESSAGE when the body has none
    - Successful calls return the decoded JSON envelope unchanged
"""

import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

logger = logging.getLogger(__name__)

FALLBACK_MESSAGE = "Something went wrong. Please try again."
DEFAULT_BASE_URL = "http://localhost:8000"


@dataclass
class SessionContext:
    """Token plus the user it was issued for."""
    token: str
    user: dict = field(default_factory=dict)

    @property
    def is_admin(self) -> bool:
        return self.user.get("role") == "admin"

    def auth_headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"}


class BlogClientError(Exception):
    """API call failed (non-2xx response or transport error)."""

    def __init__(self, status_code: int | None, message: str = FALLBACK_MESSAGE):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


class BlogClient:
    """Thin synchronous client for the blog API."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ):
        self._http = httpx.Client(
            base_url=base_url, timeout=timeout, transport=transport,
        )

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "BlogClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # ─── Auth ───────────────────────────────────────────────────

    def register(self, email: str, password: str, name: str) -> SessionContext:
        body = self._request(
            "POST", "/api/auth/register",
            json={"email": email, "password": password, "name": name},
        )
        return _session_from(body)

    def login(self, email: str, password: str) -> SessionContext:
        body = self._request(
            "POST", "/api/auth/login",
            json={"email": email, "password": password},
        )
        return _session_from(body)

    def me(self, session: SessionContext) -> dict:
        return self._request("GET", "/api/auth/me", session=session)["data"]

    def logout(self, session: SessionContext) -> dict:
        return self._request("POST", "/api/auth/logout", session=session)

    # ─── Blogs ──────────────────────────────────────────────────

    def list_blogs(
        self, page: int = 1, limit: int = 10,
        session: SessionContext | None = None,
    ) -> dict:
        return self._request(
            "GET", "/api/blogs",
            params={"page": page, "limit": limit}, session=session,
        )

    def list_author_blogs(
        self, author_id: str, page: int = 1, limit: int = 10,
        session: SessionContext | None = None,
    ) -> dict:
        return self._request(
            "GET", f"/api/blogs/author/{author_id}",
            params={"page": page, "limit": limit}, session=session,
        )

    def my_blogs(
        self, session: SessionContext, page: int = 1, limit: int = 10,
    ) -> dict:
        return self._request(
            "GET", "/api/blogs/user/my-blogs",
            params={"page": page, "limit": limit}, session=session,
        )

    def get_blog(self, blog_id: str, session: SessionContext | None = None) -> dict:
        return self._request("GET", f"/api/blogs/{blog_id}", session=session)["data"]

    def create_blog(self, session: SessionContext, title: str, content: str) -> dict:
        return self._request(
            "POST", "/api/blogs",
            json={"title": title, "content": content}, session=session,
        )["data"]

    def update_blog(self, session: SessionContext, blog_id: str, **changes) -> dict:
        return self._request(
            "PUT", f"/api/blogs/{blog_id}", json=changes, session=session,
        )["data"]

    def delete_blog(self, session: SessionContext, blog_id: str) -> dict:
        return self._request("DELETE", f"/api/blogs/{blog_id}", session=session)

    def like(self, session: SessionContext, blog_id: str) -> dict:
        return self._request(
            "POST", f"/api/blogs/{blog_id}/like", session=session,
        )["data"]

    def unlike(self, session: SessionContext, blog_id: str) -> dict:
        return self._request(
            "DELETE", f"/api/blogs/{blog_id}/like", session=session,
        )["data"]

    def add_comment(self, session: SessionContext, blog_id: str, text: str) -> dict:
        return self._request(
            "POST", f"/api/blogs/{blog_id}/comments",
            json={"text": text}, session=session,
        )["data"]

    def delete_comment(
        self, session: SessionContext, blog_id: str, comment_id: str,
    ) -> dict:
        return self._request(
            "DELETE", f"/api/blogs/{blog_id}/comments/{comment_id}",
            session=session,
        )["data"]

    # ─── Transport ──────────────────────────────────────────────

    def _request(
        self, method: str, path: str,
        session: SessionContext | None = None, **kwargs: Any,
    ) -> dict:
        headers = session.auth_headers() if session else {}
        try:
            response = self._http.request(method, path, headers=headers, **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"{method} {path} failed: {e}")
            raise BlogClientError(None, FALLBACK_MESSAGE) from e

        body = _json_or_none(response)
        if response.is_success:
            return body if isinstance(body, dict) else {}

        message = body.get("message") if isinstance(body, dict) else None
        raise BlogClientError(response.status_code, message or FALLBACK_MESSAGE)


def _json_or_none(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return None


def _session_from(body: dict) -> SessionContext:
    data = body.get("data") or {}
    return SessionContext(token=data["token"], user=data.get("user") or {})
