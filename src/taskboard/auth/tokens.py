"""JWT session tokens for signed-in users."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Any

import jwt
from jwt.exceptions import InvalidTokenError

from ..errors import InvalidToken
from ..logging import get_logger

logger = get_logger(__name__)


class TokenService:
    """Issues and verifies self-signed session tokens.

    A token binds a user id (the ``sub`` claim) to the server-held secret and
    expires after ``token_expiry_days``. Nothing in the token is trusted until
    the signature, issuer, audience and expiry all verify.
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        issuer: str = "taskboard",
        audience: str = "taskboard-api",
        token_expiry_days: int = 7,
    ):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.issuer = issuer
        self.audience = audience
        self.token_expiry_days = token_expiry_days

    def issue_token(self, user_id: str, now: datetime | None = None) -> str:
        """Issue a token for ``user_id``."""
        now = now or datetime.now(UTC)

        payload = {
            "sub": str(user_id),
            "iss": self.issuer,
            "aud": self.audience,
            "iat": now,
            "nbf": now,
            "exp": now + timedelta(days=self.token_expiry_days),
        }

        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    def decode_token(self, token: str) -> dict[str, Any]:
        """Verify a token and return its claims.

        Raises:
            InvalidToken: If the token is malformed, expired or mis-signed
        """
        try:
            return jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                issuer=self.issuer,
                audience=self.audience,
                options={
                    "verify_exp": True,
                    "verify_nbf": True,
                    "verify_iat": True,
                },
            )
        except InvalidTokenError as e:
            logger.warning("JWT token validation failed", error=str(e))
            raise InvalidToken() from e

    def user_id_from_token(self, token: str) -> str | None:
        """Return the user id a valid token carries, or None if it carries none."""
        subject = self.decode_token(token).get("sub")
        return str(subject) if subject else None
