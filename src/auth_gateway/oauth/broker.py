"""OAuth 2.0 Authorization Code exchange brokered on behalf of a frontend.

One OAuthBroker instance serves one provider. The flow is:

1. initiate: redirect the browser to the provider's authorization endpoint
2. handle_callback: receive the authorization code, exchange it
   server-to-server for a provider access token, then relay that token to
   the frontend in the `access_token` cookie while redirecting to the
   provider's profile page.

Provider tokens are never stored or inspected.
"""

import logging
from typing import Any
from urllib.parse import urlencode

import httpx
from fastapi import status
from fastapi.responses import JSONResponse, PlainTextResponse, RedirectResponse, Response

from auth_gateway.config import Settings, get_settings
from auth_gateway.oauth.models import BodyEncoding, OAuthError, OAuthProvider, ProviderToken

logger = logging.getLogger(__name__)

ACCESS_TOKEN_COOKIE = "access_token"


class OAuthBroker:
    """Authorization code broker for a single OAuth provider."""

    def __init__(self, provider: OAuthProvider, settings: Settings | None = None):
        """Initialize the broker.

        Args:
            provider: Descriptor of the authorization server
            settings: Application settings (uses default if not provided)
        """
        self._provider = provider
        self._settings = settings or get_settings()

    @property
    def provider(self) -> OAuthProvider:
        """Get the provider descriptor."""
        return self._provider

    @property
    def frontend_redirect_url(self) -> str:
        """Get the frontend URL that receives the relayed token."""
        return f"{self._settings.frontend_url.rstrip('/')}{self._provider.profile_path}"

    def build_authorize_url(self) -> str:
        """Build the provider authorization URL.

        Returns:
            Full authorization URL
        """
        params: dict[str, str] = {"client_id": self._provider.client_id}
        if self._provider.redirect_uri:
            params["redirect_uri"] = self._provider.redirect_uri
        params.update(self._provider.extra_authorize_params)
        params["scope"] = self._provider.scope
        return f"{self._provider.authorize_endpoint}?{urlencode(params)}"

    def initiate(self) -> RedirectResponse:
        """Redirect the browser to the provider's authorization endpoint."""
        logger.info("Redirecting to %s authorization endpoint", self._provider.display_name)
        return RedirectResponse(url=self.build_authorize_url(), status_code=status.HTTP_302_FOUND)

    async def exchange_code(self, code: str) -> ProviderToken | OAuthError:
        """Exchange an authorization code for a provider access token.

        Args:
            code: Authorization code from the callback

        Returns:
            ProviderToken on success, OAuthError on failure
        """
        data: dict[str, str] = {
            "client_id": self._provider.client_id,
            "client_secret": self._provider.client_secret,
            "code": code,
        }
        if self._provider.redirect_uri:
            data["redirect_uri"] = self._provider.redirect_uri
        data.update(self._provider.extra_token_params)

        request_kwargs: dict[str, Any] = {
            "headers": {"Accept": "application/json"},
            "timeout": self._settings.oauth_http_timeout,
        }
        if self._provider.body_encoding is BodyEncoding.JSON:
            request_kwargs["json"] = data
        else:
            request_kwargs["data"] = data

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(self._provider.token_endpoint, **request_kwargs)
        except httpx.HTTPError as e:
            logger.error(
                "HTTP error during %s token request: %s", self._provider.display_name, e
            )
            return OAuthError(
                error="server_error",
                error_description=f"Failed to communicate with token endpoint: {e}",
            )

        try:
            response_data = response.json()
        except ValueError:
            response_data = response.text

        if (
            response.is_success
            and isinstance(response_data, dict)
            and response_data.get("access_token")
        ):
            return ProviderToken(**response_data)

        logger.error(
            "%s token request failed: %s %s",
            self._provider.display_name,
            response.status_code,
            response_data,
        )
        if isinstance(response_data, dict):
            return OAuthError(
                error=response_data.get("error", "unknown_error"),
                error_description=response_data.get("error_description"),
                status_code=response.status_code,
                payload=response_data,
            )
        return OAuthError(
            error="unknown_error",
            status_code=response.status_code,
            payload=response_data,
        )

    async def handle_callback(self, code: str | None) -> Response:
        """Finish the flow for an authorization callback.

        Args:
            code: Authorization code from the provider, if any

        Returns:
            400 text response without a code, 500 JSON response when the
            exchange fails, otherwise a redirect to the frontend carrying the
            provider access token in a cookie
        """
        if not code:
            return PlainTextResponse(
                "Authorization code not provided.",
                status_code=status.HTTP_400_BAD_REQUEST,
            )

        result = await self.exchange_code(code)

        if isinstance(result, OAuthError):
            detail = result.payload if result.payload is not None else result.error_description
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={
                    "message": (
                        f"Failed to fetch access token from {self._provider.display_name}."
                    ),
                    "error": detail,
                },
            )

        logger.info(
            "Exchanged %s authorization code, relaying token to frontend",
            self._provider.display_name,
        )
        response = RedirectResponse(
            url=self.frontend_redirect_url,
            status_code=status.HTTP_302_FOUND,
        )
        response.set_cookie(
            ACCESS_TOKEN_COOKIE,
            result.access_token,
            secure=self._settings.cookie_secure,
            samesite="lax",
        )
        return response
