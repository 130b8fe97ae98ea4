"""HTTP client for the blog API."""

from blogapi.client.api_client import (  # noqa: F401
    FALLBACK_MESSAGE, BlogClient, BlogClientError, SessionContext,
)
