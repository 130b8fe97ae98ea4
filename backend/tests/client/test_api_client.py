"""Blog API Client — verifies request shaping and error surfacing against a mock transport.

Invariants:
    - register/login return a SessionContext; the client itself keeps no token
    - Authenticated calls send "Authorization: Bearer <token>" from the passed context
    - Failures raise BlogClientError with the server message or the generic fallback
"""

import json

import httpx
import pytest

from blogapi.client import (
    FALLBACK_MESSAGE, BlogClient, BlogClientError, SessionContext,
)

USER = {"id": "u1", "email": "ada@example.com", "name": "Ada", "role": "user"}


@pytest.fixture
def requests_seen():
    return []


@pytest.fixture
def api(requests_seen):
    def handler(request: httpx.Request) -> httpx.Response:
        requests_seen.append(request)
        path = request.url.path
        if path == "/api/auth/login":
            body = json.loads(request.content)
            if body["password"] != "secret1":
                return httpx.Response(
                    401, json={"success": False, "message": "Invalid email or password"},
                )
            return httpx.Response(
                200, json={"success": True, "data": {"token": "tok-1", "user": USER}},
            )
        if path == "/api/blogs" and request.method == "GET":
            return httpx.Response(200, json={
                "success": True, "data": [],
                "pagination": {"total": 0, "pages": 0, "currentPage": 1, "limit": 10},
            })
        if path == "/api/blogs/b1/like":
            return httpx.Response(
                200, json={"success": True, "data": {"likes": 1, "isLiked": True}},
            )
        if path == "/api/blogs/broken":
            return httpx.Response(500, text="<html>oops</html>")
        return httpx.Response(404, json={"success": False, "message": "Blog not found"})

    with BlogClient("http://api.test", transport=httpx.MockTransport(handler)) as c:
        yield c


def test_login_returns_session_context(api):
    session = api.login("ada@example.com", "secret1")
    assert session == SessionContext(token="tok-1", user=USER)
    assert not session.is_admin


def test_login_failure_surfaces_server_message(api):
    with pytest.raises(BlogClientError) as exc_info:
        api.login("ada@example.com", "wrong")
    assert exc_info.value.status_code == 401
    assert exc_info.value.message == "Invalid email or password"


def test_authenticated_call_sends_bearer_token(api, requests_seen):
    session = SessionContext(token="tok-1", user=USER)
    assert api.like(session, "b1") == {"likes": 1, "isLiked": True}
    assert requests_seen[-1].headers["Authorization"] == "Bearer tok-1"


def test_anonymous_call_sends_no_token(api, requests_seen):
    api.list_blogs(page=2, limit=5)
    request = requests_seen[-1]
    assert "Authorization" not in request.headers
    assert request.url.params["page"] == "2"
    assert request.url.params["limit"] == "5"


def test_not_found_raises_with_message(api):
    with pytest.raises(BlogClientError, match="Blog not found"):
        api.get_blog("missing")


def test_non_json_error_uses_fallback_message(api):
    with pytest.raises(BlogClientError) as exc_info:
        api.get_blog("broken")
    assert exc_info.value.status_code == 500
    assert exc_info.value.message == FALLBACK_MESSAGE


def test_transport_failure_uses_fallback_message():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with BlogClient(transport=httpx.MockTransport(handler)) as client:
        with pytest.raises(BlogClientError) as exc_info:
            client.list_blogs()
    assert exc_info.value.status_code is None
    assert exc_info.value.message == FALLBACK_MESSAGE
