"""Pydantic models for client credentials."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class CredentialRecord(BaseModel):
    """A stored credential record."""

    record_id: str = Field(..., description="System-assigned record ID")
    identifier: str = Field(..., description="Client-supplied unique identifier")
    hashed_secret: str = Field(..., description="Salted hash of the secret key")
    created_at: datetime | None = Field(default=None, description="Creation time")
    updated_at: datetime | None = Field(default=None, description="Last update time")


class CredentialsRequest(BaseModel):
    """Body of register and login requests.

    Both fields are optional here so that missing values surface as 400
    from the service rather than as a validation error.
    """

    model_config = ConfigDict(populate_by_name=True)

    uuid: str | None = Field(default=None, description="Client identifier")
    secret_key: str | None = Field(
        default=None,
        alias="secretKey",
        description="Client secret key",
    )


class IssuedCredential(BaseModel):
    """Result of a successful register or login."""

    token: str = Field(..., description="Signed bearer token")
    identifier: str = Field(..., description="Client identifier")


class TokenGrantResponse(BaseModel):
    """Response body for register and login."""

    message: str
    token: str
    uuid: str


class ProtectedResponse(BaseModel):
    """Response body for the protected route."""

    message: str
    uuid: str
