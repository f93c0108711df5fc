"""SQLAlchemy ORM models for database persistence."""

import uuid
from datetime import datetime

from sqlalchemy import TIMESTAMP, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from auth_gateway.db.base import Base


def _new_record_id() -> str:
    return uuid.uuid4().hex


class CredentialModel(Base):
    """ORM model for registered client credentials."""

    __tablename__ = "credentials"

    id: Mapped[str] = mapped_column(
        String(32),
        primary_key=True,
        default=_new_record_id,
    )
    uuid: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    # Unique on the hash mirrors the legacy schema; see DESIGN.md.
    secret_key_hash: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
    )
