"""Error taxonomy shared by the credential and OAuth flows."""

from typing import Any

from fastapi import Request, status
from fastapi.responses import JSONResponse


class GatewayError(Exception):
    """Base class for errors that terminate a request with an HTTP status."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, detail: Any = None):
        super().__init__(message)
        self.message = message
        self.detail = detail

    def to_content(self) -> dict[str, Any]:
        """Render the JSON body for this error."""
        content: dict[str, Any] = {"message": self.message}
        if self.detail is not None:
            content["error"] = self.detail
        return content


class BadRequestError(GatewayError):
    """Missing fields or parameters."""

    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(GatewayError):
    """Identifier already registered."""

    status_code = status.HTTP_409_CONFLICT


class NotFoundError(GatewayError):
    """Unknown identifier or record."""

    status_code = status.HTTP_404_NOT_FOUND


class UnauthorizedError(GatewayError):
    """Missing or invalid bearer token."""

    status_code = status.HTTP_401_UNAUTHORIZED


class InvalidCredentialsError(UnauthorizedError):
    """Secret did not match the stored hash.

    Login answers this with 400 rather than 401, which existing clients
    depend on.
    """

    status_code = status.HTTP_400_BAD_REQUEST


class InternalError(GatewayError):
    """Store, signing or provider exchange failure."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


async def gateway_error_handler(request: Request, exc: GatewayError) -> JSONResponse:
    """Render a GatewayError as a JSON response."""
    headers = None
    if exc.status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_content(),
        headers=headers,
    )
