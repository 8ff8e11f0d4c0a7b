"""
FastAPI Application Entry Point

This module creates and configures the FastAPI application.

Key Concepts:
=============

1. Application Factory Pattern
   - create_app() function returns configured app
   - Tests build the same app and swap the MongoDB client

2. Lifespan Events
   - startup: connect to MongoDB and build the BookRepository
   - shutdown: close the MongoDB client
   - A failed startup connection stops the process before it serves

3. Exception Handlers
   - RequestDecodeError becomes a plain-text 400
   - Anything unhandled becomes a JSON 500 and is logged
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from books_graphql import __version__
from books_graphql.config import get_settings
from books_graphql.database import connect_to_mongo, get_books_collection
from books_graphql.exceptions import RequestDecodeError
from books_graphql.routers import graphql_router
from books_graphql.services.books import BookRepository

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

    client = connect_to_mongo(settings)
    app.state.mongo_client = client
    app.state.books = BookRepository(
        get_books_collection(client, settings),
        timeout=settings.mongo_operation_timeout,
    )

    yield  # Application runs here

    # ----- SHUTDOWN -----
    logger.info(f"Shutting down {settings.app_name}...")
    client.close()


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
        description="GraphQL API for a MongoDB collection of books. "
        "Send operations to `/graphql`.",
        version=__version__,
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
    @app.exception_handler(RequestDecodeError)
    async def request_decode_exception_handler(
        request: Request,
        exc: RequestDecodeError,
    ) -> PlainTextResponse:
        """Reject requests that carry no usable GraphQL operation."""
        logger.info(f"Rejected GraphQL request: {exc}")
        return PlainTextResponse(str(exc), status_code=400)

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
    app.include_router(graphql_router)

    # -------------------------------------------------------------------------
    # Health Check Endpoint
    # -------------------------------------------------------------------------
    @app.get(
        "/health",
        tags=["Health"],
        summary="Health check",
        description="Check if the API is running.",
    )
    async def health_check() -> dict:
        """Report the service name, version and storage location."""
        return {
            "status": "healthy",
            "app": settings.app_name,
            "version": __version__,
            "graphql": "/graphql",
            "database": settings.mongo_database,
            "collection": settings.mongo_collection,
        }

    return app


# =============================================================================
# Application Instance
# =============================================================================
# This is what uvicorn imports: uvicorn books_graphql.main:app

app = create_app()


# =============================================================================
# Development Server
# =============================================================================
# This allows running the app directly with: python -m books_graphql.main

if __name__ == "__main__":
    import uvicorn

    logger.info(
        f"Server is running on http://{settings.host}:{settings.port}/graphql"
    )
    uvicorn.run(
        "books_graphql.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
