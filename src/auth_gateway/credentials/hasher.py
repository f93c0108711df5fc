"""Salted one-way hashing of client secret keys with argon2."""

import logging

from argon2 import PasswordHasher, Type
from argon2.exceptions import InvalidHashError, VerificationError

from auth_gateway.config import Settings, get_settings

logger = logging.getLogger(__name__)


class SecretHasher:
    """Hashes and verifies secret keys using argon2id.

    Each hash embeds its own random salt and cost parameters, so
    verification only needs the stored string.
    """

    def __init__(self, settings: Settings | None = None):
        """Initialize the hasher.

        Args:
            settings: Application settings (uses default if not provided)
        """
        settings = settings or get_settings()
        self._hasher = PasswordHasher(
            time_cost=settings.password_hash_time_cost,
            memory_cost=settings.password_hash_memory_cost,
            parallelism=settings.password_hash_parallelism,
            type=Type.ID,
        )

    def hash(self, secret: str) -> str:
        """Hash a secret with a fresh random salt."""
        return self._hasher.hash(secret)

    def verify(self, secret: str, hashed_secret: str) -> bool:
        """Check a secret against a stored hash in constant time.

        Returns:
            True if the secret matches, False on mismatch or unreadable hash
        """
        try:
            return self._hasher.verify(hashed_secret, secret)
        except VerificationError:
            return False
        except InvalidHashError:
            logger.warning("Stored secret hash could not be parsed")
            return False
