"""
Name: FastAPI Application Entry Point

Responsibilities:
  - Initialize FastAPI application with metadata (title, version)
  - Own the process-wide DB pool lifecycle (lifespan: init -> migrate -> close)
  - Publish the user repository built around that pool on app.state
  - Configure middleware (CORS, request context)
  - Mount the users router (no version prefix)
  - Expose health check endpoint

Collaborators:
  - FastAPI: ASGI web framework
  - CORSMiddleware: Cross-Origin Resource Sharing handler
  - RequestContextMiddleware: Request ID and logging context
  - router.build_router: users endpoints
  - infrastructure.db: pool + Alembic migrations

Constraints:
  - CORS configurable via ALLOWED_ORIGINS env var (comma-separated)
  - No rate limiting or authentication
  - A database that is missing or unreachable at startup is fatal

Notes:
  - Middleware order matters: RequestContext → CORS → routes
  - /healthz follows Kubernetes health check convention
  - In test/ci (APP_ENV) the in-memory repository is used and no pool is opened
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from pydantic import ValidationError

from .. import __version__
from ..container import (
    USER_REPOSITORY_STATE_KEY,
    build_user_repository,
    get_user_repository,
)
from ..crosscutting.config import get_settings
from ..crosscutting.exceptions import DatabaseError
from ..crosscutting.logger import logger
from ..crosscutting.middleware import REQUEST_ID_HEADER, RequestContextMiddleware
from ..infrastructure.db.migrations import run_migrations
from ..infrastructure.db.pool import close_pool, init_pool
from ..interfaces.api.http.router import build_router
from .exception_handlers import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle. Validates settings, opens pool, migrates."""
    settings = get_settings()

    if settings.is_test():
        setattr(app.state, USER_REPOSITORY_STATE_KEY, build_user_repository())
        logger.info("Users API starting up (in-memory)", extra={"app_env": settings.app_env})
        yield
        logger.info("Users API shutting down")
        return

    database_url = settings.get_database_url()
    if not database_url:
        raise DatabaseError("Database is not configured (DATABASE_URL / DATABASE_*)")

    # Pool antes que cualquier uso de repositorio
    pool = init_pool(
        database_url=database_url,
        min_size=settings.db_pool_min_size,
        max_size=settings.db_pool_max_size,
    )

    try:
        setattr(app.state, USER_REPOSITORY_STATE_KEY, build_user_repository(pool))

        if settings.db_auto_migrate:
            run_migrations(settings.alembic_config_path, database_url)

        logger.info(
            "Users API starting up",
            extra={
                "app_env": settings.app_env,
                "db_pool_min": settings.db_pool_min_size,
                "db_pool_max": settings.db_pool_max_size,
                "db_auto_migrate": settings.db_auto_migrate,
            },
        )

        yield

    finally:
        setattr(app.state, USER_REPOSITORY_STATE_KEY, None)
        close_pool()
        logger.info("Users API shutting down")


def _get_allowed_origins() -> list[str]:
    """CORS origins desde settings; fallback si el env es inválido al importar."""
    try:
        return get_settings().get_allowed_origins_list()
    except ValidationError:
        return ["http://localhost:3000"]


def _get_cors_allow_credentials() -> bool:
    try:
        return get_settings().cors_allow_credentials
    except ValidationError:
        return False


app = FastAPI(
    title="Users API",
    version=__version__,
    lifespan=lifespan,
    openapi_tags=[
        {"name": "users", "description": "CRUD over the users resource"},
    ],
)

# Middleware order (bottom = first to execute):
# 1. CORSMiddleware - handles preflight
# 2. RequestContextMiddleware - sets request_id
app.add_middleware(RequestContextMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=_get_allowed_origins(),
    allow_credentials=_get_cors_allow_credentials(),
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", REQUEST_ID_HEADER],
)

app.include_router(build_router())

register_exception_handlers(app)


@app.get("/healthz")
def healthz(request: Request):
    """
    Health check: verifica la base con un ping del repositorio.

    Returns:
        ok: True si la base responde
        db: "connected" o "disconnected"
        request_id: Correlation ID for this request
    """
    db_status = "disconnected"
    try:
        if get_user_repository(request).ping():
            db_status = "connected"
    except Exception as e:
        logger.warning("Health check: DB unavailable", extra={"error": str(e)})

    return {
        "ok": db_status == "connected",
        "db": db_status,
        "request_id": getattr(request.state, "request_id", None),
    }
