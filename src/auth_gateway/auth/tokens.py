"""Bearer token issuance and verification using PyJWT."""

import logging
import time
from datetime import UTC, datetime
from typing import Any

import jwt
from jwt.exceptions import DecodeError, ExpiredSignatureError, PyJWTError
from pydantic import ValidationError

from auth_gateway.auth.models import Identity, TokenClaims
from auth_gateway.config import Settings, get_settings
from auth_gateway.errors import InternalError

logger = logging.getLogger(__name__)


class InvalidTokenError(Exception):
    """Exception raised when a bearer token fails verification."""

    pass


class TokenIssuer:
    """Signs and verifies HS256 bearer tokens with the process-wide secret."""

    def __init__(self, settings: Settings | None = None):
        """Initialize the token issuer.

        Args:
            settings: Application settings (uses default if not provided)
        """
        self._settings = settings or get_settings()

    @property
    def lifetime(self) -> int:
        """Get the token lifetime in seconds."""
        return self._settings.token_lifetime_seconds

    def issue(self, record_id: str, identifier: str) -> str:
        """Issue a signed token for a credential record.

        Args:
            record_id: Credential record ID
            identifier: Client identifier

        Returns:
            Encoded JWT string

        Raises:
            InternalError: If no signing secret is configured or signing fails
        """
        if not self._settings.jwt_secret:
            logger.error("Cannot issue token: JWT_SECRET is not configured")
            raise InternalError("Server error", "Token signing secret is not configured")

        now = int(time.time())
        claims = TokenClaims(id=record_id, uuid=identifier, iat=now, exp=now + self.lifetime)
        try:
            return jwt.encode(
                claims.model_dump(),
                self._settings.jwt_secret,
                algorithm=self._settings.jwt_algorithm,
            )
        except PyJWTError as e:
            logger.error("Failed to sign token: %s", e)
            raise InternalError("Server error", str(e)) from e

    def verify(self, token: str) -> TokenClaims:
        """Verify a token's signature and expiry.

        Args:
            token: Encoded JWT string

        Returns:
            Verified token claims

        Raises:
            InvalidTokenError: If the token is forged, malformed or expired
        """
        if not self._settings.jwt_secret:
            raise InvalidTokenError("Token signing secret is not configured")

        try:
            payload: dict[str, Any] = jwt.decode(
                token,
                self._settings.jwt_secret,
                algorithms=[self._settings.jwt_algorithm],
                leeway=0,
                options={"require": ["exp", "iat", "id", "uuid"]},
            )
        except ExpiredSignatureError as e:
            logger.debug("Token has expired")
            raise InvalidTokenError("Token has expired") from e
        except DecodeError as e:
            logger.debug("Failed to decode token: %s", e)
            raise InvalidTokenError(f"Failed to decode token: {e}") from e
        except PyJWTError as e:
            logger.debug("Token validation failed: %s", e)
            raise InvalidTokenError(f"Token validation failed: {e}") from e

        try:
            return TokenClaims(**payload)
        except ValidationError as e:
            raise InvalidTokenError(f"Malformed token claims: {e}") from e

    def identify(self, token: str) -> Identity:
        """Verify a token and convert its claims to an Identity."""
        claims = self.verify(token)
        return Identity(
            record_id=claims.id,
            identifier=claims.uuid,
            token_exp=datetime.fromtimestamp(claims.exp, tz=UTC),
        )


# Global issuer instance (lazily initialized)
_issuer: TokenIssuer | None = None


def get_token_issuer() -> TokenIssuer:
    """Get the global token issuer instance.

    Returns:
        TokenIssuer instance
    """
    global _issuer
    if _issuer is None:
        _issuer = TokenIssuer()
    return _issuer
