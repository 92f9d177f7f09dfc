"""
Roster Backend — Employee Route Handlers
==========================================

What:  POST /v1/employee (create) and GET /v1/employee (filtered list).
How:   Resolves the acting manager from the bearer token, shapes the input,
       delegates to EmployeeService. Typed service errors are turned into
       HTTP responses by the global handlers in main.py.

Query parameters of GET /v1/employee:
    identityNumber  case-insensitive prefix
    name            case-insensitive substring
    gender          exact match
    departmentId    exact match
    limit, offset   non-negative integers; absent, non-numeric, negative or
                    out-of-range values fall back to DEFAULT_LIMIT / DEFAULT_OFFSET

The four filter values are lower-cased before use. Stored gender values and
department ids (uuid4 strings) are always lower case.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.database import get_db_session
from app.schemas.common import ErrorResponse, parse_pagination_value
from app.schemas.employee import EmployeeFilter, EmployeePayload, EmployeeResponse
from app.security import get_current_manager_id
from app.services.employee_service import employee_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1", tags=["Employees"])


@router.post(
    "/employee",
    status_code=201,
    response_model=EmployeePayload,
    responses={
        201: {"description": "Employee created", "model": EmployeePayload},
        400: {"description": "Invalid payload or department", "model": ErrorResponse},
        401: {"description": "Missing or invalid token", "model": ErrorResponse},
        409: {"description": "Identity number already used", "model": ErrorResponse},
    },
    summary="Create an employee in one of the caller's departments",
)
async def create_employee(
    payload: EmployeePayload,
    manager_id: str = Depends(get_current_manager_id),
    db: AsyncSession = Depends(get_db_session),
) -> EmployeePayload:
    await employee_service.create_employee(db, payload, manager_id)
    return payload


@router.get(
    "/employee",
    response_model=List[EmployeeResponse],
    responses={
        200: {"description": "Matching employees (possibly empty)"},
        401: {"description": "Missing or invalid token", "model": ErrorResponse},
    },
    summary="List the caller's employees with optional filters",
)
async def list_employees(
    identity_number: Optional[str] = Query(default=None, alias="identityNumber"),
    name: Optional[str] = Query(default=None),
    gender: Optional[str] = Query(default=None),
    department_id: Optional[str] = Query(default=None, alias="departmentId"),
    # Raw strings so that bad values default instead of failing with 422
    limit: Optional[str] = Query(default=None),
    offset: Optional[str] = Query(default=None),
    manager_id: str = Depends(get_current_manager_id),
    db: AsyncSession = Depends(get_db_session),
) -> List[EmployeeResponse]:
    criteria = EmployeeFilter(
        manager_id=manager_id,
        identity_number=(identity_number or "").lower(),
        name=(name or "").lower(),
        gender=(gender or "").lower(),
        department_id=(department_id or "").lower(),
        limit=parse_pagination_value(limit, settings.default_limit),
        offset=parse_pagination_value(offset, settings.default_offset),
    )
    return await employee_service.list_employees(db, criteria)
