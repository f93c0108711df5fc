"""Provider descriptors for the supported OAuth 2.0 authorization servers."""

from auth_gateway.config import Settings, get_settings
from auth_gateway.oauth.models import BodyEncoding, OAuthProvider


def github_provider(settings: Settings | None = None) -> OAuthProvider:
    """GitHub: JSON token request, no redirect URI sent."""
    settings = settings or get_settings()
    return OAuthProvider(
        name="github",
        display_name="GitHub",
        authorize_endpoint=settings.github_authorize_url,
        token_endpoint=settings.github_token_url,
        body_encoding=BodyEncoding.JSON,
        client_id=settings.github_client_id,
        client_secret=settings.github_client_secret,
        scope=settings.github_scope,
        profile_path="/v1/profile/github",
    )


def google_provider(settings: Settings | None = None) -> OAuthProvider:
    """Google: form-encoded token request with matching redirect URI."""
    settings = settings or get_settings()
    return OAuthProvider(
        name="google",
        display_name="Google",
        authorize_endpoint=settings.google_authorize_url,
        token_endpoint=settings.google_token_url,
        body_encoding=BodyEncoding.FORM,
        client_id=settings.google_client_id,
        client_secret=settings.google_client_secret,
        scope=settings.google_scope,
        redirect_uri=settings.google_redirect_uri,
        extra_authorize_params={"response_type": "code"},
        extra_token_params={"grant_type": "authorization_code"},
        profile_path="/v1/profile/google",
    )


def get_providers(settings: Settings | None = None) -> list[OAuthProvider]:
    """Get all configured providers."""
    settings = settings or get_settings()
    return [github_provider(settings), google_provider(settings)]
