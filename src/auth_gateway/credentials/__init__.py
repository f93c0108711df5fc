"""Client credential lifecycle: register, login and protected access.

Clients are identified by a `uuid` and a `secretKey`. Secrets are stored as
argon2 hashes and successful register/login calls return a signed bearer
token valid for four hours.
"""

from auth_gateway.credentials.hasher import SecretHasher
from auth_gateway.credentials.models import (
    CredentialRecord,
    CredentialsRequest,
    IssuedCredential,
    ProtectedResponse,
    TokenGrantResponse,
)
from auth_gateway.credentials.repository import (
    CredentialRepository,
    get_credential_repository,
)
from auth_gateway.credentials.router import router as credentials_router
from auth_gateway.credentials.service import CredentialService, get_credential_service

__all__ = [
    # Hashing
    "SecretHasher",
    # Models
    "CredentialRecord",
    "CredentialsRequest",
    "IssuedCredential",
    "ProtectedResponse",
    "TokenGrantResponse",
    # Repository
    "CredentialRepository",
    "get_credential_repository",
    # Service
    "CredentialService",
    "get_credential_service",
    # Router
    "credentials_router",
]
