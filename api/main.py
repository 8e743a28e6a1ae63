import logging
from contextlib import asynccontextmanager

import asyncpg
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from starlette.responses import JSONResponse

from auth import middleware as auth_middleware
from auth.policy import AccessPolicy
from auth.security import BcryptCredentialVerifier, Principal
from blogposts import router as blogposts_router
from contact import router as contact_router
from core import db
from core.logs import configure_logging
from core.settings import Settings, load_settings
from projects import router as projects_router

logger = logging.getLogger(__name__)


def build_access_policy(settings: Settings) -> AccessPolicy:
    verifier = BcryptCredentialVerifier(
        principal=Principal(username=settings.auth_username, roles=(settings.auth_role,)),
        password_hash=settings.auth_password_hash,
    )
    return AccessPolicy.build(
        verifier,
        public_prefixes=settings.public_path_prefixes,
        realm=settings.auth_realm,
    )


async def database_error_handler(request: Request, exc: asyncpg.PostgresError) -> JSONResponse:
    logger.error("db_error method=%s path=%s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        {"detail": "Database error."},
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or load_settings()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        # Initialize the DB pool once per process.
        await db.init_pool(
            settings.database_url,
            min_size=settings.db_pool_min_size,
            max_size=settings.db_pool_max_size,
            command_timeout=settings.db_command_timeout,
        )
        try:
            if settings.db_create_schema:
                await db.ensure_schema()
            yield
        finally:
            await db.close_pool()

    app = FastAPI(
        title="portfolio-api",
        lifespan=lifespan,
        openapi_url="/v3/api-docs",
        docs_url="/swagger-ui",
        redoc_url=None,
    )
    app.state.settings = settings
    app.state.access_policy = build_access_policy(settings)

    # Added before CORS so CORS stays outermost and answers preflights itself.
    app.middleware("http")(auth_middleware.require_basic_auth)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(asyncpg.PostgresError, database_error_handler)

    app.include_router(projects_router.router, prefix=settings.api_prefix, tags=["projects"])
    app.include_router(blogposts_router.router, prefix=settings.api_prefix, tags=["blogposts"])
    app.include_router(contact_router.router, prefix=settings.api_prefix, tags=["contact"])

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    logger.info(
        "app_created api_prefix=%s auth_user=%s public_paths=%s",
        settings.api_prefix,
        settings.auth_username,
        ",".join(app.state.access_policy.public_prefixes),
    )
    return app


app = create_app()
