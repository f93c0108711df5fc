"""Credential service orchestrating registration, login and profile lookup."""

import asyncio
import logging

from auth_gateway.auth.models import Identity
from auth_gateway.auth.tokens import TokenIssuer, get_token_issuer
from auth_gateway.credentials.hasher import SecretHasher
from auth_gateway.credentials.models import CredentialRecord, IssuedCredential
from auth_gateway.credentials.repository import (
    CredentialRepository,
    get_credential_repository,
)
from auth_gateway.errors import (
    BadRequestError,
    ConflictError,
    InvalidCredentialsError,
    NotFoundError,
)

logger = logging.getLogger(__name__)


class CredentialService:
    """Service for the credential lifecycle.

    - register: check uniqueness, hash, persist, issue a token
    - login: load the record, verify the hash, issue a token
    - get_protected_profile: re-fetch the record behind a verified token
    """

    def __init__(
        self,
        repository: CredentialRepository | None = None,
        hasher: SecretHasher | None = None,
        token_issuer: TokenIssuer | None = None,
    ) -> None:
        """Initialize the credential service.

        Args:
            repository: Credential store (uses default if not provided).
            hasher: Secret hasher (uses default if not provided).
            token_issuer: Token issuer (uses default if not provided).
        """
        self._repository = repository or get_credential_repository()
        self._hasher = hasher or SecretHasher()
        self._token_issuer = token_issuer or get_token_issuer()

    async def register(self, identifier: str | None, secret: str | None) -> IssuedCredential:
        """Register a new client and issue its first token.

        Raises:
            BadRequestError: If either field is missing or empty.
            ConflictError: If the identifier is already registered.
        """
        if not identifier or not secret:
            raise BadRequestError("Please provide UUID and secretKey")

        if await self._repository.find_by_identifier(identifier) is not None:
            raise ConflictError("UUID already registered")

        hashed_secret = await asyncio.to_thread(self._hasher.hash, secret)
        record = await self._repository.create(identifier, hashed_secret)

        logger.info("Registered client %s", record.identifier)
        return self._issue(record)

    async def login(self, identifier: str | None, secret: str | None) -> IssuedCredential:
        """Verify a client's secret and issue a fresh token.

        Raises:
            BadRequestError: If either field is missing or empty.
            NotFoundError: If the identifier is not registered.
            InvalidCredentialsError: If the secret does not match.
        """
        if not identifier or not secret:
            raise BadRequestError("Please provide")

        record = await self._repository.find_by_identifier(identifier)
        if record is None:
            raise NotFoundError("UUID not found")

        matches = await asyncio.to_thread(self._hasher.verify, secret, record.hashed_secret)
        if not matches:
            logger.warning("Invalid secret key for %s", identifier)
            raise InvalidCredentialsError("Invalid Credentials")

        return self._issue(record)

    async def get_protected_profile(self, identity: Identity) -> str:
        """Resolve a verified identity back to its current identifier.

        Raises:
            NotFoundError: If the record no longer exists.
        """
        record = await self._repository.find_by_id(identity.record_id)
        if record is None:
            raise NotFoundError("UUID not found")
        return record.identifier

    def _issue(self, record: CredentialRecord) -> IssuedCredential:
        token = self._token_issuer.issue(record.record_id, record.identifier)
        return IssuedCredential(token=token, identifier=record.identifier)


# Global service instance
_credential_service: CredentialService | None = None


def get_credential_service() -> CredentialService:
    """Get the global credential service instance.

    Returns:
        CredentialService instance.
    """
    global _credential_service
    if _credential_service is None:
        _credential_service = CredentialService()
    return _credential_service
