"""FastAPI router for brokered OAuth 2.0 provider logins."""

import logging
from typing import Annotated

from fastapi import APIRouter, Query
from fastapi.responses import RedirectResponse, Response

from auth_gateway.config import Settings, get_settings
from auth_gateway.oauth.broker import OAuthBroker
from auth_gateway.oauth.providers import get_providers

logger = logging.getLogger(__name__)


def _add_provider_routes(router: APIRouter, broker: OAuthBroker) -> None:
    """Register the initiate and callback routes for one provider."""
    name = broker.provider.name

    @router.get(f"/{name}", name=f"{name}_authorize")
    async def authorize() -> RedirectResponse:
        """Redirect to the provider's authorization endpoint."""
        return broker.initiate()

    @router.get(f"/{name}/callback", name=f"{name}_callback")
    async def callback(
        code: Annotated[str | None, Query()] = None,
        error: Annotated[str | None, Query()] = None,
        error_description: Annotated[str | None, Query()] = None,
    ) -> Response:
        """Exchange the authorization code and relay the token to the frontend."""
        if error:
            logger.warning(
                "Authorization error from %s: %s - %s",
                broker.provider.display_name,
                error,
                error_description,
            )
        return await broker.handle_callback(code)


def create_oauth_router(settings: Settings | None = None) -> APIRouter:
    """Create the router exposing /auth/{provider} and its callback.

    Args:
        settings: Application settings (uses default if not provided)

    Returns:
        APIRouter with routes for every configured provider
    """
    settings = settings or get_settings()
    router = APIRouter(prefix="/auth", tags=["OAuth 2.0"])

    for provider in get_providers(settings):
        _add_provider_routes(router, OAuthBroker(provider, settings))

    return router
