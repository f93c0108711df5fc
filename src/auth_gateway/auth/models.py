"""Pydantic models for issued bearer tokens."""

from datetime import datetime

from pydantic import BaseModel, Field


class TokenClaims(BaseModel):
    """Claims carried by an issued bearer token."""

    id: str = Field(..., description="Credential record ID (subject)")
    uuid: str = Field(..., description="Client identifier")
    iat: int = Field(..., description="Issued at time (Unix timestamp)")
    exp: int = Field(..., description="Expiration time (Unix timestamp)")


class Identity(BaseModel):
    """Caller identity decoded from a verified bearer token."""

    record_id: str = Field(..., description="Credential record ID")
    identifier: str = Field(..., description="Client identifier")
    token_exp: datetime = Field(..., description="Token expiration time")
