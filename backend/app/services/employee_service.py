"""
Roster Backend — Employee Service
===================================

What:  Ownership-checked employee creation and manager-scoped listing.
Who:   Called by the /v1/employee route handlers.

Create flow:
    One statement does both the ownership check and the write. The row to
    insert is read from the department row that matches BOTH the declared
    department and the acting manager; if there is none, nothing is written:

        INSERT INTO employees (...)
        SELECT :employee_id, ..., d.department_id, d.manager_id
        FROM departments AS d
        WHERE d.department_id = :department_id AND d.manager_id = :manager_id

    - 0 rows inserted              → InvalidDepartmentError
    - UNIQUE(manager_id, identity) → ConflictIdentityNumberError
    - any other driver failure     → QueryError (cause retained)

    The check and the insert cannot be separated by a concurrent request, so
    no caller-supplied transaction is needed. The session's transaction is
    rolled back by get_db_session whenever one of these errors propagates.

Listing:
    See app/services/employee_query.py for how the statement is rendered.
"""

import logging
from typing import List

from sqlalchemy import text
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import (
    ConflictIdentityNumberError,
    InvalidDepartmentError,
    QueryError,
)
from app.models.manager import new_id
from app.schemas.employee import EmployeeFilter, EmployeePayload, EmployeeResponse
from app.services.employee_query import build_employee_query

logger = logging.getLogger(__name__)

SELECT_OWNED_DEPARTMENT = text(
    "SELECT 1 FROM departments "
    "WHERE department_id = :department_id AND manager_id = :manager_id"
)

INSERT_OWNED_EMPLOYEE = text(
    """
    INSERT INTO employees (
        employee_id,
        identity_number,
        name,
        employee_image_uri,
        gender,
        department_id,
        manager_id
    )
    SELECT
        :employee_id,
        :identity_number,
        :name,
        :employee_image_uri,
        :gender,
        d.department_id,
        d.manager_id
    FROM departments AS d
    WHERE d.department_id = :department_id AND d.manager_id = :manager_id
    """
)


class EmployeeService:
    """Stateless; receives the request's session on every call."""

    async def validate_ownership(
        self,
        db: AsyncSession,
        department_id: str,
        manager_id: str,
    ) -> None:
        """
        Standalone ownership check: does `manager_id` own `department_id`?

        create_employee does NOT call this; it folds the same condition into
        its INSERT. Use this for read-only checks only, since a separate check
        followed by a write is not atomic.

        Raises:
            InvalidDepartmentError: no department row matches both ids
            QueryError: statement execution failed
        """
        try:
            result = await db.execute(
                SELECT_OWNED_DEPARTMENT,
                {"department_id": department_id, "manager_id": manager_id},
            )
            owned = result.first() is not None
        except SQLAlchemyError as e:
            raise QueryError(cause=e, context={"operation": "validate_ownership"}) from e

        if not owned:
            raise InvalidDepartmentError(
                department_id=department_id,
                context={"manager_id": manager_id},
            )

    async def create_employee(
        self,
        db: AsyncSession,
        payload: EmployeePayload,
        manager_id: str,
    ) -> None:
        """
        Insert one employee into a department owned by `manager_id`.

        Raises:
            InvalidDepartmentError: department missing or owned by another manager
            ConflictIdentityNumberError: identity number already used in this manager's scope
            QueryError: statement execution failed
        """
        try:
            result = await db.execute(
                INSERT_OWNED_EMPLOYEE,
                {
                    "employee_id": new_id(),
                    "identity_number": payload.identity_number,
                    "name": payload.name,
                    "employee_image_uri": payload.employee_image_uri,
                    "gender": payload.gender,
                    "department_id": payload.department_id,
                    "manager_id": manager_id,
                },
            )
        except IntegrityError as e:
            # The SELECT only yields a row for an owned department, so the
            # remaining constraint that can fire is the per-manager uniqueness
            raise ConflictIdentityNumberError(
                identity_number=payload.identity_number,
                context={"manager_id": manager_id},
            ) from e
        except SQLAlchemyError as e:
            raise QueryError(
                message="Could not create the employee. Please try again.",
                cause=e,
                context={"operation": "create_employee"},
            ) from e

        if result.rowcount < 1:
            raise InvalidDepartmentError(
                department_id=payload.department_id,
                context={"manager_id": manager_id},
            )

        logger.info(
            "Employee %s created in department %s",
            payload.identity_number,
            payload.department_id,
        )

    async def list_employees(
        self,
        db: AsyncSession,
        criteria: EmployeeFilter,
    ) -> List[EmployeeResponse]:
        """
        Return the employees matching `criteria`, always scoped to its manager.

        An empty list is a normal result. Execution failures are not retried.

        Raises:
            QueryError: statement execution failed
        """
        query = build_employee_query(criteria)
        try:
            result = await db.execute(text(query.sql), query.bind_params)
            rows = result.mappings().all()
        except SQLAlchemyError as e:
            raise QueryError(
                message="Could not retrieve employees. Please try again.",
                cause=e,
                context={"operation": "list_employees"},
            ) from e

        return [EmployeeResponse.model_validate(dict(row)) for row in rows]


employee_service = EmployeeService()
