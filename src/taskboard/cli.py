#!/usr/bin/env python3
"""
Main CLI entry point for Taskboard backend server.
"""

import asyncio
import json
import os
import sys

import click
import uvicorn

from taskboard import __version__
from taskboard.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="taskboard")
def cli() -> None:
    """Taskboard CLI - run the server and manage the database."""
    pass


@cli.command()
@click.option(
    "--host",
    default=None,
    help="Host to bind to (default: TASKBOARD_API_HOST or 0.0.0.0)",
)
@click.option(
    "--port",
    default=None,
    type=int,
    help="Port to bind to (default: TASKBOARD_API_PORT or 4000)",
)
@click.option(
    "--reload",
    is_flag=True,
    default=False,
    help="Enable auto-reload for development",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(host: str | None, port: int | None, reload: bool, log_level: str) -> None:
    """Start the Taskboard API server."""
    from taskboard.config import settings

    host = host or settings.api_host
    port = port or settings.api_port

    configure_logging(debug=(log_level == "debug"), log_level=log_level)

    logger.info(
        "Starting Taskboard API server",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )

    # The app module reads these at import time, including in reload workers
    if log_level == "debug":
        os.environ["TASKBOARD_DEBUG"] = "true"
        os.environ["TASKBOARD_LOG_LEVEL"] = "debug"
    else:
        os.environ.setdefault("TASKBOARD_DEBUG", "false")
        os.environ.setdefault("TASKBOARD_LOG_LEVEL", log_level)

    try:
        if reload:
            uvicorn.run(
                "taskboard.api.app:app",
                host=host,
                port=port,
                reload=True,
                log_level=log_level,
                access_log=True,
            )
        else:
            from taskboard.api.app import app

            uvicorn.run(
                app,
                host=host,
                port=port,
                log_level=log_level,
                access_log=True,
            )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command("init-db")
def init_db() -> None:
    """Create the lookup indexes in the configured database."""
    from taskboard.database.connection import close_client, create_client, create_store

    configure_logging()

    async def do_init():
        client = create_client()
        try:
            await create_store(client).ensure_indexes()
            click.echo("✓ Indexes created")
        except Exception as e:
            logger.error("Failed to create indexes", error=str(e))
            click.echo(f"✗ Error creating indexes: {e}", err=True)
            sys.exit(1)
        finally:
            await close_client(client)

    asyncio.run(do_init())


@cli.command()
@click.option(
    "--output-format",
    default="table",
    type=click.Choice(["table", "json"]),
    help="Output format (default: table)",
)
def check(output_format: str) -> None:
    """Validate database connectivity and auth configuration."""
    from taskboard.database.connection import close_client, create_client, create_store
    from taskboard.validation import get_startup_recommendations, validate_startup_configuration

    configure_logging()

    async def do_check() -> dict:
        client = create_client()
        try:
            return await validate_startup_configuration(create_store(client))
        finally:
            await close_client(client)

    results = asyncio.run(do_check())

    if output_format == "json":
        click.echo(json.dumps(results, indent=2, default=str))
    else:
        for section in ("database", "auth"):
            section_results = results[section]
            mark = "✓" if section_results["valid"] else "✗"
            click.echo(f"{mark} {section}")
            for error in section_results["errors"]:
                click.echo(f"    error: {error}")
            for warning in section_results["warnings"]:
                click.echo(f"    warning: {warning}")
        for recommendation in get_startup_recommendations(results):
            click.echo(f"  • {recommendation}")

    if not results["overall_valid"]:
        sys.exit(1)


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    cli()
