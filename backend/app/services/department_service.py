"""
Roster Backend — Department Service
=====================================

What:  Create and list the departments owned by a manager.
How:   Plain SQLAlchemy ORM statements; every query is filtered by the
       acting manager, so departments of other managers are never visible.
"""

import logging
from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import QueryError
from app.models.department import Department
from app.schemas.department import DepartmentPayload, DepartmentResponse

logger = logging.getLogger(__name__)


class DepartmentService:

    async def create_department(
        self,
        db: AsyncSession,
        payload: DepartmentPayload,
        manager_id: str,
    ) -> DepartmentResponse:
        department = Department(name=payload.name, manager_id=manager_id)
        try:
            db.add(department)
            await db.flush()
        except SQLAlchemyError as e:
            raise QueryError(
                message="Could not create the department. Please try again.",
                cause=e,
                context={"operation": "create_department"},
            ) from e

        logger.info("Department %s created for manager %s", department.department_id, manager_id)
        return DepartmentResponse.model_validate(department)

    async def list_departments(
        self,
        db: AsyncSession,
        manager_id: str,
        limit: int,
        offset: int,
        name: Optional[str] = None,
    ) -> List[DepartmentResponse]:
        """List the manager's departments, optionally by case-insensitive name substring."""
        query = select(Department).where(Department.manager_id == manager_id)
        if name:
            query = query.where(func.lower(Department.name).contains(name.lower(), autoescape=True))
        query = (
            query.order_by(Department.created_at.desc(), Department.department_id)
            .limit(limit)
            .offset(offset)
        )

        try:
            result = await db.execute(query)
            departments = list(result.scalars().all())
        except SQLAlchemyError as e:
            raise QueryError(
                message="Could not retrieve departments. Please try again.",
                cause=e,
                context={"operation": "list_departments"},
            ) from e

        return [DepartmentResponse.model_validate(d) for d in departments]


department_service = DepartmentService()
