"""
Roster Backend — Manager SQLAlchemy Model
===========================================

What:  ORM model for the `managers` table: the authenticated actors.
Who:   Written by AuthService on registration; read on login. Every
       department and employee is scoped to exactly one manager.
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, TIMESTAMP, text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


def new_id() -> str:
    """Generates a primary key value (UUID4 string, lowercase)."""
    return str(uuid.uuid4())


class Manager(Base):
    """A registered manager. Identified in tokens by `manager_id`."""

    __tablename__ = "managers"

    # String(36) holds a canonical UUID; stored as text so the same schema
    # runs on PostgreSQL and on the SQLite test database
    manager_id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=new_id,
        comment="Manager identifier (UUID string)",
    )

    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        comment="Login email, unique across all managers",
    )

    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="bcrypt hash of the manager's password",
    )

    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
    )

    def __repr__(self) -> str:
        return f"<Manager(manager_id={self.manager_id}, email='{self.email}')>"
