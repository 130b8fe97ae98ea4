"""Blog Platform API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map BlogError → {success: false, message, code}
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup and disposed on shutdown via lifespan
    - SessionMiddleware is installed before any OAuth route can run (Authlib keeps
      the OAuth state in the signed session cookie)

Design Decisions:
    - Lifespan over @app.on_event; the engine is disposed on shutdown
    - Google OAuth client registered at import from settings; routes report
      ExternalAuthError when credentials are absent
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.sessions import SessionMiddleware

from blogapi import __version__
from blogapi.api.error_handlers import register_error_handlers
from blogapi.api.routes import auth, blogs, health
from blogapi.config import get_settings
from blogapi.infrastructure.database import init_db
from blogapi.infrastructure.google_oauth import configure_oauth
from blogapi.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.create_tables_on_startup:
        await manager.create_all()
    logger.info("Blog Platform API started")
    yield
    logger.info("Blog Platform API shutting down")
    await manager.dispose()


app = FastAPI(
    title="Blog Platform API", version=__version__, lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(SessionMiddleware, secret_key=settings.session_secret)
configure_oauth(settings)

# Routes: explicit registration
app.include_router(health.router)
app.include_router(auth.router)
app.include_router(blogs.router)

register_error_handlers(app)


@app.get("/", tags=["root"])
async def root():
    return {"success": True, "message": "Welcome to the Blog Platform API"}
