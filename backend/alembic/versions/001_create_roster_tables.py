"""Create managers, departments and employees tables

Revision ID: 001
Revises: None
Create Date: 2026-10-17 00:00:00.000000+00:00

What:  Initial schema. Column docs live on the models in app/models/.
Note:  employees.manager_id plus uq_employees_manager_identity_number is what
       makes identity numbers unique per manager under concurrent inserts.

Rollback: downgrade() drops all three tables (destructive).
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "managers",
        sa.Column("manager_id", sa.String(36), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("manager_id"),
        sa.UniqueConstraint("email"),
    )

    op.create_table(
        "departments",
        sa.Column("department_id", sa.String(36), nullable=False),
        sa.Column("name", sa.String(33), nullable=False),
        sa.Column("manager_id", sa.String(36), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("department_id"),
        sa.ForeignKeyConstraint(
            ["manager_id"], ["managers.manager_id"], ondelete="CASCADE"
        ),
    )
    op.create_index(
        "idx_departments_manager_id",
        "departments",
        ["manager_id", "department_id"],
    )

    op.create_table(
        "employees",
        sa.Column("employee_id", sa.String(36), nullable=False),
        sa.Column("identity_number", sa.String(33), nullable=False),
        sa.Column("name", sa.String(33), nullable=False),
        sa.Column("employee_image_uri", sa.String(2048), nullable=False),
        sa.Column("gender", sa.String(6), nullable=False),
        sa.Column("department_id", sa.String(36), nullable=False),
        sa.Column("manager_id", sa.String(36), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("employee_id"),
        sa.ForeignKeyConstraint(
            ["department_id"], ["departments.department_id"], ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(
            ["manager_id"], ["managers.manager_id"], ondelete="CASCADE"
        ),
        sa.UniqueConstraint(
            "manager_id",
            "identity_number",
            name="uq_employees_manager_identity_number",
        ),
        sa.CheckConstraint(
            "gender IN ('male', 'female')",
            name="ck_employees_gender",
        ),
    )
    op.create_index(
        "idx_employees_department_id",
        "employees",
        ["department_id"],
    )


def downgrade() -> None:
    op.drop_index("idx_employees_department_id", table_name="employees")
    op.drop_table("employees")
    op.drop_index("idx_departments_manager_id", table_name="departments")
    op.drop_table("departments")
    op.drop_table("managers")
