"""Pydantic models for brokered OAuth 2.0 code exchanges."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class BodyEncoding(str, Enum):
    """How a provider expects the token request body to be encoded."""

    JSON = "json"
    FORM = "form"


class OAuthProvider(BaseModel):
    """Descriptor for one third-party authorization server."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Provider slug used in route paths")
    display_name: str = Field(..., description="Human readable provider name")
    authorize_endpoint: str = Field(..., description="Authorization endpoint URL")
    token_endpoint: str = Field(..., description="Token endpoint URL")
    body_encoding: BodyEncoding = Field(..., description="Token request body encoding")
    client_id: str = Field(..., description="OAuth client ID")
    client_secret: str = Field(..., description="OAuth client secret")
    scope: str = Field(..., description="Requested scopes")
    redirect_uri: str | None = Field(default=None, description="Registered redirect URI")
    extra_authorize_params: dict[str, str] = Field(
        default_factory=dict,
        description="Additional authorization URL parameters",
    )
    extra_token_params: dict[str, str] = Field(
        default_factory=dict,
        description="Additional token request parameters",
    )
    profile_path: str = Field(..., description="Frontend path receiving the relayed token")


class ProviderToken(BaseModel):
    """Successful provider token response."""

    model_config = ConfigDict(extra="allow")

    access_token: str = Field(..., description="Provider access token")
    token_type: str | None = Field(default=None, description="Token type")
    scope: str | None = Field(default=None, description="Granted scope")
    expires_in: int | None = Field(default=None, description="Lifetime in seconds")


class OAuthError(BaseModel):
    """Failed provider token exchange."""

    error: str = Field(..., description="Error code")
    error_description: str | None = Field(default=None, description="Error description")
    status_code: int | None = Field(default=None, description="Provider HTTP status")
    payload: Any = Field(default=None, description="Raw provider response body")
