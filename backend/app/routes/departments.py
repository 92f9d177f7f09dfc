"""
Roster Backend — Department Route Handlers
============================================

What:  POST /v1/department and GET /v1/department for the calling manager.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.database import get_db_session
from app.schemas.common import ErrorResponse, parse_pagination_value
from app.schemas.department import DepartmentPayload, DepartmentResponse
from app.security import get_current_manager_id
from app.services.department_service import department_service

router = APIRouter(prefix="/v1", tags=["Departments"])


@router.post(
    "/department",
    status_code=201,
    response_model=DepartmentResponse,
    responses={
        400: {"description": "Invalid payload", "model": ErrorResponse},
        401: {"description": "Missing or invalid token", "model": ErrorResponse},
    },
    summary="Create a department owned by the caller",
)
async def create_department(
    payload: DepartmentPayload,
    manager_id: str = Depends(get_current_manager_id),
    db: AsyncSession = Depends(get_db_session),
) -> DepartmentResponse:
    return await department_service.create_department(db, payload, manager_id)


@router.get(
    "/department",
    response_model=List[DepartmentResponse],
    summary="List the caller's departments",
)
async def list_departments(
    name: Optional[str] = Query(default=None),
    limit: Optional[str] = Query(default=None),
    offset: Optional[str] = Query(default=None),
    manager_id: str = Depends(get_current_manager_id),
    db: AsyncSession = Depends(get_db_session),
) -> List[DepartmentResponse]:
    return await department_service.list_departments(
        db,
        manager_id=manager_id,
        limit=parse_pagination_value(limit, settings.default_limit),
        offset=parse_pagination_value(offset, settings.default_offset),
        name=name,
    )
