"""Repository for client credentials with SQL persistence."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from auth_gateway.credentials.models import CredentialRecord
from auth_gateway.db import CredentialModel, Database, get_database
from auth_gateway.errors import ConflictError

logger = logging.getLogger(__name__)


class CredentialRepository:
    """Repository for storing and retrieving credential records.

    Identifier uniqueness is enforced by the unique index on the table;
    `create` also checks up front so the common case fails fast.
    """

    def __init__(self, database: Database | None = None):
        """Initialize the repository.

        Args:
            database: Database handle (uses the global one if not provided)
        """
        self._database = database or get_database()

    async def find_by_identifier(self, identifier: str) -> CredentialRecord | None:
        """Get a credential record by client identifier.

        Args:
            identifier: The client identifier.

        Returns:
            CredentialRecord if found, None otherwise.
        """
        async with self._database.session() as session:
            result = await session.execute(
                select(CredentialModel).where(CredentialModel.uuid == identifier)
            )
            model = result.scalar_one_or_none()
            if model:
                return self._model_to_entity(model)
            return None

    async def find_by_id(self, record_id: str) -> CredentialRecord | None:
        """Get a credential record by record ID.

        Args:
            record_id: The system-assigned record ID.

        Returns:
            CredentialRecord if found, None otherwise.
        """
        async with self._database.session() as session:
            model = await session.get(CredentialModel, record_id)
            if model:
                return self._model_to_entity(model)
            return None

    async def create(self, identifier: str, hashed_secret: str) -> CredentialRecord:
        """Create a new credential record.

        Args:
            identifier: The client identifier.
            hashed_secret: Output of the secret hasher.

        Returns:
            The created CredentialRecord.

        Raises:
            ConflictError: If the identifier is already registered.
        """
        if await self.find_by_identifier(identifier) is not None:
            raise ConflictError("UUID already registered")

        try:
            async with self._database.session() as session:
                model = CredentialModel(uuid=identifier, secret_key_hash=hashed_secret)
                session.add(model)
                await session.flush()
                await session.refresh(model)
                record = self._model_to_entity(model)
        except IntegrityError as e:
            # A concurrent registration won the race past the check above
            logger.info("Unique constraint rejected credential for %s", identifier)
            raise ConflictError("UUID already registered") from e

        logger.info("Created credential record: record_id=%s", record.record_id)
        return record

    def _model_to_entity(self, model: CredentialModel) -> CredentialRecord:
        """Convert ORM model to Pydantic entity."""
        return CredentialRecord(
            record_id=model.id,
            identifier=model.uuid,
            hashed_secret=model.secret_key_hash,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )


# Global repository instance
_credential_repo: CredentialRepository | None = None


def get_credential_repository() -> CredentialRepository:
    """Get the global credential repository instance.

    Returns:
        CredentialRepository instance.
    """
    global _credential_repo
    if _credential_repo is None:
        _credential_repo = CredentialRepository()
    return _credential_repo
