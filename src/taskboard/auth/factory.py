"""Factory for creating the token service from configuration."""

from __future__ import annotations

from ..config import Settings, settings
from .tokens import TokenService


def get_token_service(config: Settings | None = None) -> TokenService:
    """Create the configured token service.

    Raises:
        ValueError: If no signing secret is configured
    """
    config = config or settings

    if not config.jwt_secret:
        raise ValueError(
            "JWT secret key is required. Set TASKBOARD_JWT_SECRET in the environment or .env."
        )

    return TokenService(
        secret_key=config.jwt_secret,
        algorithm=config.jwt_algorithm,
        issuer=config.jwt_issuer,
        audience=config.jwt_audience,
        token_expiry_days=config.token_expiry_days,
    )
