"""
Main FastAPI application for Taskboard backend
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..auth.factory import get_token_service
from ..auth.tokens import TokenService
from ..config import settings
from ..database.connection import close_client, create_client, create_store
from ..database.store import DocumentStore
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware

# Configure logging before creating logger
configure_logging(debug=settings.debug, log_level=settings.log_level)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager.

    Opens the single MongoDB client shared by all requests unless a store
    was injected through ``create_app``.
    """
    logger.info("Starting Taskboard API...")

    client = None
    if getattr(app.state, "store", None) is None:
        client = create_client()
        app.state.store = create_store(client)
        logger.info("Database initialized", database_name=settings.database_name)

    if getattr(app.state, "tokens", None) is None:
        # Fail fast without a signing secret
        app.state.tokens = get_token_service()

    from ..validation import (
        ValidationError,
        get_startup_recommendations,
        validate_startup_configuration,
    )

    try:
        validation_results = await validate_startup_configuration(app.state.store)

        if not validation_results["overall_valid"]:
            logger.error(
                "Application configuration validation failed - some features may not work",
                database_errors=validation_results["database"]["errors"],
                auth_errors=validation_results["auth"]["errors"],
            )
            if settings.environment.lower() in ("production", "prod"):
                raise ValidationError("Critical configuration validation failed in production")

        recommendations = get_startup_recommendations(validation_results)
        if recommendations:
            logger.info("Configuration recommendations", recommendations=recommendations)

        yield

    finally:
        logger.info("Shutting down Taskboard API...")
        if client is not None:
            await close_client(client)


def create_app(
    store: DocumentStore | None = None,
    tokens: TokenService | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        store: Document store to use instead of opening a MongoDB client
        tokens: Token service to use instead of building one from settings
    """

    app = FastAPI(
        title="Taskboard API",
        description="Projects, members and to-dos over GraphQL",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )
    app.state.store = store
    app.state.tokens = tokens

    app.add_middleware(LoggingContextMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    try:
        from ..graphql.schema import create_graphql_router, validate_schema

        logger.info("Validating GraphQL schema...")
        validate_schema()

        graphql_router = create_graphql_router(graphiql=settings.debug)
        app.include_router(graphql_router, prefix="")
        logger.info("GraphQL endpoint initialized successfully", endpoint="/graphql")
    except Exception as e:  # pragma: no cover
        logger.error("Failed to initialize GraphQL endpoint", error=str(e))
        raise

    return app


# Create the main application instance
app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "taskboard.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
