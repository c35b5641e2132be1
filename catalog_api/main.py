"""
FastAPI Application Entry Point

This module creates and configures the FastAPI application.

Key Concepts:
=============

1. Application Factory Pattern
   - create_app() returns a configured app
   - Tests import the module-level `app` and override dependencies

2. Lifespan Events
   - startup: create missing tables and seed the starter data
   - shutdown: dispose of the connection pool

3. Middleware Stack
   - CORS: Allow cross-origin requests

4. Exception Handlers
   - Domain errors (CatalogAPIError) → their own status code
   - Malformed query parameters → 400 (body errors stay 422)
   - Database errors → 500 with a generic message
   - Anything else → 500, details only in debug mode
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from catalog_api import __version__
from catalog_api.config import get_settings
from catalog_api.database import SessionLocal, create_tables, engine
from catalog_api.dependencies import DbSession
from catalog_api.exceptions import CatalogAPIError
from catalog_api.routers import auth_router, books_router
from catalog_api.seed import seed_database

# =============================================================================
# Logging Configuration
# =============================================================================
settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


# =============================================================================
# Lifespan Events
# =============================================================================
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Code before yield: Runs on startup
    Code after yield: Runs on shutdown
    """
    # ----- STARTUP -----
    logger.info(f"Starting {settings.app_name}...")
    logger.info(f"Debug mode: {settings.debug}")

    if settings.create_tables_on_startup:
        create_tables()
        logger.info("Database tables ensured")

    if settings.seed_on_startup:
        db = SessionLocal()
        try:
            seed_database(db)
        except SQLAlchemyError:
            db.rollback()
            logger.error("An error occurred seeding the database", exc_info=True)
            raise
        finally:
            db.close()

    yield  # Application runs here

    # ----- SHUTDOWN -----
    logger.info(f"Shutting down {settings.app_name}...")
    engine.dispose()


# =============================================================================
# Application Factory
# =============================================================================
def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title=settings.app_name,
        description="""
## Book Catalog API

A small catalog of books behind username/password authentication.

### Features
- **Auth**: Register, log in for a bearer token, reset a forgotten password
- **Books**: CRUD, case-insensitive search, paged listing
- **Users**: Paged listing with masked emails

### Authentication
Log in via `POST /api/auth/login` and send the returned token as
`Authorization: Bearer <token>` on every `/api/books` call and on
`/api/auth/users`.
        """,
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # -------------------------------------------------------------------------
    # CORS Middleware
    # -------------------------------------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -------------------------------------------------------------------------
    # Exception Handlers
    # -------------------------------------------------------------------------
    @app.exception_handler(CatalogAPIError)
    async def catalog_api_exception_handler(
        request: Request,
        exc: CatalogAPIError,
    ) -> JSONResponse:
        """
        Render domain errors raised by services and dependencies.

        Client errors are logged at INFO; 5xx at ERROR.
        """
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc.detail}")
        else:
            logger.info(
                f"{request.method} {request.url.path} -> {exc.status_code}: {exc.detail}"
            )

        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.detail},
            headers=exc.headers,
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """
        Report malformed query parameters as a plain 400.

        ?page=abc is a bad request like ?page=0; body validation errors
        keep FastAPI's default 422 response.
        """
        errors = exc.errors()
        if errors and all(error["loc"][0] == "query" for error in errors):
            names = sorted({str(error["loc"][-1]) for error in errors})
            detail = f"Invalid value for query parameter(s): {', '.join(names)}."
            logger.info(f"{request.method} {request.url.path} -> 400: {detail}")
            return JSONResponse(
                status_code=status.HTTP_400_BAD_REQUEST,
                content={"detail": detail},
            )

        return await request_validation_exception_handler(request, exc)

    @app.exception_handler(SQLAlchemyError)
    async def sqlalchemy_exception_handler(
        request: Request,
        exc: SQLAlchemyError,
    ) -> JSONResponse:
        """
        Handle SQLAlchemy database errors.

        Logs the actual error while hiding details from users.
        """
        logger.error(f"Database error: {exc}")
        return JSONResponse(
            status_code=500,
            content={
                "detail": "A database error occurred. Please try again later."
            },
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """
        Catch-all exception handler.

        In production, hide internal errors from users.
        In debug mode, show more details.
        """
        logger.error(f"Unhandled error: {exc}", exc_info=True)

        if settings.debug:
            return JSONResponse(
                status_code=500,
                content={"detail": str(exc)},
            )

        return JSONResponse(
            status_code=500,
            content={"detail": "An internal error occurred."},
        )

    # -------------------------------------------------------------------------
    # Register Routers
    # -------------------------------------------------------------------------
    api_prefix = "/api"

    app.include_router(auth_router, prefix=api_prefix)
    app.include_router(books_router, prefix=api_prefix)

    # -------------------------------------------------------------------------
    # Health Check Endpoint
    # -------------------------------------------------------------------------
    @app.get(
        "/health",
        tags=["Health"],
        summary="Health check",
        description="Check if the API is running and the database answers.",
    )
    def health_check(db: DbSession) -> dict:
        """
        Health check endpoint.

        Used by load balancers, container probes, and monitoring.
        """
        try:
            db.execute(text("SELECT 1"))
            database = "ok"
        except SQLAlchemyError as e:
            logger.warning(f"Health check database error: {e}")
            database = "unavailable"

        return {
            "status": "healthy" if database == "ok" else "degraded",
            "app": settings.app_name,
            "version": __version__,
            "database": database,
        }

    @app.get(
        "/",
        tags=["Root"],
        summary="API root",
        description="Welcome message and API information.",
    )
    async def root() -> dict:
        """Root endpoint with API information."""
        return {
            "message": f"Welcome to {settings.app_name}",
            "version": __version__,
            "docs": "/docs",
            "health": "/health",
        }

    return app


# =============================================================================
# Application Instance
# =============================================================================
# This is what uvicorn imports: uvicorn catalog_api.main:app

app = create_app()


# =============================================================================
# Development Server
# =============================================================================
# python -m catalog_api.main
# In production, use: uvicorn catalog_api.main:app --host 0.0.0.0 --port 8001

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "catalog_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,  # Auto-reload on code changes
    )
