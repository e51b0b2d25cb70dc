"""
Configuration validation for Taskboard application.

This module provides validation functions to ensure the application
is properly configured before startup.
"""

from __future__ import annotations

from typing import Any

from .config import Settings, settings
from .database.connection import check_database_connection
from .database.store import DocumentStore
from .logging import get_logger

logger = get_logger(__name__)

MIN_SECRET_LENGTH = 32
HMAC_ALGORITHMS = {"HS256", "HS384", "HS512"}


class ValidationError(Exception):
    """Raised when application validation fails."""

    pass


async def validate_database_connection(store: DocumentStore) -> dict[str, Any]:
    """
    Validate that the database is accessible and responsive.

    Returns a dictionary with validation results and connection details.
    """
    results: dict[str, Any] = {
        "valid": True,
        "warnings": [],
        "errors": [],
        "connection_info": None,
    }

    success, error_message = await check_database_connection(store)

    if success:
        results["connection_info"] = {
            "status": "connected",
            "message": "Database connection successful",
        }
        logger.info("Database connection validation successful")
    else:
        results["valid"] = False
        results["errors"].append(error_message)
        logger.error("Database connection validation failed", error=error_message)

    return results


def validate_auth_configuration(config: Settings | None = None) -> dict[str, Any]:
    """
    Validate token signing configuration.

    Returns validation results and security recommendations.
    """
    config = config or settings
    results: dict[str, Any] = {
        "valid": True,
        "warnings": [],
        "errors": [],
        "auth_info": {
            "algorithm": config.jwt_algorithm,
            "token_expiry_days": config.token_expiry_days,
        },
    }

    if not config.jwt_secret:
        error = "TASKBOARD_JWT_SECRET is not configured - tokens cannot be issued or verified"
        results["errors"].append(error)
        results["valid"] = False
        logger.error(error)
    elif len(config.jwt_secret) < MIN_SECRET_LENGTH:
        warning = f"JWT secret is shorter than {MIN_SECRET_LENGTH} characters"
        results["warnings"].append(warning)
        logger.warning(warning)

    if config.jwt_algorithm.upper() not in HMAC_ALGORITHMS:
        error = f"Unsupported JWT algorithm for a shared secret: {config.jwt_algorithm}"
        results["errors"].append(error)
        results["valid"] = False
        logger.error(error)

    if config.token_expiry_days <= 0:
        error = "TASKBOARD_TOKEN_EXPIRY_DAYS must be positive"
        results["errors"].append(error)
        results["valid"] = False
        logger.error(error)

    if results["valid"]:
        logger.info("Auth validation: JWT signing configured", algorithm=config.jwt_algorithm)

    return results


async def validate_startup_configuration(
    store: DocumentStore, config: Settings | None = None
) -> dict[str, Any]:
    """
    Comprehensive startup validation.

    This function should be called during application startup to ensure
    all critical configuration is valid.
    """
    config = config or settings
    logger.info("Starting application configuration validation")

    db_results = await validate_database_connection(store)
    auth_results = validate_auth_configuration(config)

    combined_results = {
        "overall_valid": db_results["valid"] and auth_results["valid"],
        "database": db_results,
        "auth": auth_results,
        "environment": {
            "environment": config.environment,
            "debug": config.debug,
            "database_name": config.database_name,
        },
    }

    if combined_results["overall_valid"]:
        logger.info("Application configuration validation completed successfully")
    else:
        logger.error(
            "Application configuration validation failed",
            errors=db_results["errors"] + auth_results["errors"],
        )

    all_warnings = db_results["warnings"] + auth_results["warnings"]
    if all_warnings:
        logger.warning("Configuration warnings detected", warnings=all_warnings)

    return combined_results


def get_startup_recommendations(validation_results: dict[str, Any]) -> list[str]:
    """
    Generate startup recommendations based on validation results.
    """
    recommendations = []

    if not validation_results.get("database", {}).get("valid", False):
        recommendations.append(
            "Database connection failed - check that MongoDB is running and "
            "TASKBOARD_MONGODB_URL points at it"
        )

    auth_results = validation_results.get("auth", {})
    if auth_results.get("warnings"):
        recommendations.append("Use a random JWT secret of at least 32 characters")

    environment = validation_results.get("environment", {})
    if environment.get("debug") and environment.get("environment", "").lower() in (
        "production",
        "prod",
    ):
        recommendations.append("Disable TASKBOARD_DEBUG in production (it enables GraphiQL)")

    if not validation_results.get("overall_valid", False):
        recommendations.append("Fix configuration errors before deploying to production")

    return recommendations
