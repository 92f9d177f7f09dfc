"""
Roster Backend — Employee SQLAlchemy Model
============================================

What:  ORM model for the `employees` table.
How:   Rows are only ever inserted through EmployeeService.create_employee,
       whose single INSERT ... SELECT copies `manager_id` from the owning
       department row. The model exists for schema management and typing.

Table Design:
    - manager_id is denormalized from departments.manager_id so that
      UNIQUE (manager_id, identity_number) can enforce "identity number is
      unique within a manager's scope" at the storage level.
    - gender is constrained to the values accepted by the API.
    - Employees are immutable here: no update or delete paths exist.
"""

from datetime import datetime, timezone

from sqlalchemy import (
    CheckConstraint,
    ForeignKey,
    Index,
    String,
    TIMESTAMP,
    UniqueConstraint,
    text,
)
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.models.manager import new_id

GENDERS = ("male", "female")


class Employee(Base):
    """An employee belonging to one department (and thereby one manager)."""

    __tablename__ = "employees"

    employee_id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=new_id,
    )

    identity_number: Mapped[str] = mapped_column(
        String(33),
        nullable=False,
        comment="Identity number, unique per manager",
    )

    name: Mapped[str] = mapped_column(String(33), nullable=False)

    employee_image_uri: Mapped[str] = mapped_column(
        String(2048),
        nullable=False,
        comment="Absolute http(s) URI of the employee's picture",
    )

    gender: Mapped[str] = mapped_column(String(6), nullable=False)

    department_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("departments.department_id", ondelete="CASCADE"),
        nullable=False,
    )

    manager_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("managers.manager_id", ondelete="CASCADE"),
        nullable=False,
    )

    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
    )

    __table_args__ = (
        UniqueConstraint(
            "manager_id",
            "identity_number",
            name="uq_employees_manager_identity_number",
        ),
        CheckConstraint(
            "gender IN ('male', 'female')",
            name="ck_employees_gender",
        ),
        Index("idx_employees_department_id", "department_id"),
    )

    def __repr__(self) -> str:
        return (
            f"<Employee(identity_number='{self.identity_number}', "
            f"department_id={self.department_id})>"
        )
