"""Database module for persistence.

Provides the SQLAlchemy async engine, session management, and ORM models
for PostgreSQL (production) or SQLite (development).
"""

from auth_gateway.db.base import Base, Database, get_database
from auth_gateway.db.models import CredentialModel

__all__ = [
    # Base and session management
    "Base",
    "Database",
    "get_database",
    # Models
    "CredentialModel",
]
