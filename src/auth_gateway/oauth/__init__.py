"""Brokered OAuth 2.0 Authorization Code logins for GitHub and Google.

The gateway never keeps provider tokens: after the code exchange the token
is handed to the frontend through a cookie and a redirect.
"""

from auth_gateway.oauth.broker import ACCESS_TOKEN_COOKIE, OAuthBroker
from auth_gateway.oauth.models import BodyEncoding, OAuthError, OAuthProvider, ProviderToken
from auth_gateway.oauth.providers import get_providers, github_provider, google_provider
from auth_gateway.oauth.router import create_oauth_router

__all__ = [
    # Broker
    "ACCESS_TOKEN_COOKIE",
    "OAuthBroker",
    # Models
    "BodyEncoding",
    "OAuthError",
    "OAuthProvider",
    "ProviderToken",
    # Providers
    "get_providers",
    "github_provider",
    "google_provider",
    # Router
    "create_oauth_router",
]
