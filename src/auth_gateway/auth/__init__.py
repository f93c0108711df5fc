"""Bearer token issuance and the access guard for protected routes."""

from auth_gateway.auth.dependencies import CurrentIdentity, get_current_identity
from auth_gateway.auth.models import Identity, TokenClaims
from auth_gateway.auth.tokens import InvalidTokenError, TokenIssuer, get_token_issuer

__all__ = [
    # Dependencies
    "CurrentIdentity",
    "get_current_identity",
    # Models
    "Identity",
    "TokenClaims",
    # Tokens
    "InvalidTokenError",
    "TokenIssuer",
    "get_token_issuer",
]
