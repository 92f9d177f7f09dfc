"""
Roster Backend — Department SQLAlchemy Model
==============================================

What:  ORM model for the `departments` table.
Who:   Created through DepartmentService; referenced (never mutated) by the
       employee write path, which checks `manager_id` ownership.
"""

from datetime import datetime, timezone

from sqlalchemy import ForeignKey, Index, String, TIMESTAMP, text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.models.manager import new_id


class Department(Base):
    """A department owned by exactly one manager."""

    __tablename__ = "departments"

    department_id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=new_id,
        comment="Department identifier (UUID string)",
    )

    name: Mapped[str] = mapped_column(
        String(33),
        nullable=False,
        comment="Display name",
    )

    manager_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("managers.manager_id", ondelete="CASCADE"),
        nullable=False,
        comment="Owning manager",
    )

    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
    )

    # Ownership check probes (department_id, manager_id) together
    __table_args__ = (
        Index("idx_departments_manager_id", "manager_id", "department_id"),
    )

    def __repr__(self) -> str:
        return (
            f"<Department(department_id={self.department_id}, "
            f"manager_id={self.manager_id}, name='{self.name}')>"
        )
