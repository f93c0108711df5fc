"""FastAPI router for credential registration, login and protected access."""

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Request, status
from pydantic import ValidationError

from auth_gateway.auth import CurrentIdentity
from auth_gateway.credentials.models import (
    CredentialsRequest,
    ProtectedResponse,
    TokenGrantResponse,
)
from auth_gateway.credentials.service import CredentialService, get_credential_service
from auth_gateway.errors import BadRequestError, GatewayError, InternalError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Credentials"])

_CREDENTIALS_BODY: dict[str, Any] = {
    "requestBody": {
        "content": {
            "application/json": {"schema": CredentialsRequest.model_json_schema(by_alias=True)}
        },
        "required": False,
    }
}


async def read_credentials(request: Request) -> CredentialsRequest:
    """Parse the credentials body leniently.

    A missing, non-JSON or non-object body reads as empty so the service
    answers 400 for the missing fields instead of FastAPI answering 422.

    Raises:
        BadRequestError: If a field has the wrong type.
    """
    try:
        payload = await request.json()
    except ValueError:
        payload = {}
    if not isinstance(payload, dict):
        payload = {}

    try:
        return CredentialsRequest.model_validate(payload)
    except ValidationError:
        raise BadRequestError("Please provide UUID and secretKey") from None


Credentials = Annotated[CredentialsRequest, Depends(read_credentials)]


@router.post("/register", status_code=status.HTTP_201_CREATED, openapi_extra=_CREDENTIALS_BODY)
async def register(
    body: Credentials,
    service: Annotated[CredentialService, Depends(get_credential_service)],
) -> TokenGrantResponse:
    """Register a client identifier and secret key.

    Returns:
        The new client's token and identifier.
    """
    try:
        issued = await service.register(body.uuid, body.secret_key)
    except GatewayError:
        raise
    except Exception as e:
        logger.error("Registration error: %s", e)
        raise InternalError("Server Error", str(e)) from e

    return TokenGrantResponse(
        message="UUID registered successfully",
        token=issued.token,
        uuid=issued.identifier,
    )


@router.post("/login", openapi_extra=_CREDENTIALS_BODY)
async def login(
    body: Credentials,
    service: Annotated[CredentialService, Depends(get_credential_service)],
) -> TokenGrantResponse:
    """Exchange a client identifier and secret key for a fresh token."""
    try:
        issued = await service.login(body.uuid, body.secret_key)
    except GatewayError:
        raise
    except Exception as e:
        logger.error("Login error: %s", e)
        raise InternalError("Server error while login.", str(e)) from e

    return TokenGrantResponse(message="Logged in", token=issued.token, uuid=issued.identifier)


@router.get("/protected")
async def protected(
    identity: CurrentIdentity,
    service: Annotated[CredentialService, Depends(get_credential_service)],
) -> ProtectedResponse:
    """Return the caller's identifier after verifying its bearer token."""
    try:
        identifier = await service.get_protected_profile(identity)
    except GatewayError:
        raise
    except Exception as e:
        logger.error("Protected route error: %s", e)
        raise InternalError("Server error", str(e)) from e

    return ProtectedResponse(
        message="Protected route accessed successfully",
        uuid=identifier,
    )
