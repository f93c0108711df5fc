"""FastAPI dependencies guarding protected routes."""

import logging
from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from auth_gateway.auth.models import Identity
from auth_gateway.auth.tokens import InvalidTokenError, TokenIssuer, get_token_issuer
from auth_gateway.errors import UnauthorizedError

logger = logging.getLogger(__name__)

# HTTP Bearer authentication scheme
bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_identity(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
    token_issuer: Annotated[TokenIssuer, Depends(get_token_issuer)],
) -> Identity:
    """Extract and verify the bearer token on the request.

    Args:
        request: FastAPI request object
        credentials: HTTP Authorization credentials
        token_issuer: Token issuer used for verification

    Returns:
        Identity decoded from the token

    Raises:
        UnauthorizedError: If the token is missing or fails verification
    """
    if not credentials or not credentials.credentials:
        raise UnauthorizedError("No token provided")

    try:
        identity = token_issuer.identify(credentials.credentials)
    except InvalidTokenError as e:
        logger.warning("Token verification failed: %s", e)
        raise UnauthorizedError("Invalid token") from None

    request.state.identity = identity
    return identity


CurrentIdentity = Annotated[Identity, Depends(get_current_identity)]
