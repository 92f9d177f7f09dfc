"""
Roster Backend — Auth Route Handler
=====================================

What:  POST /v1/auth — one entry point that either registers a manager
       (action=create) or logs one in (action=login).
How:   Dispatches on the lower-cased `action` to AuthService.

Responses:
    201 {email, token}   account created
    200 {email, token}   logged in
    400                  bad body or unknown action
    401                  wrong password
    404                  unknown email (login)
    409                  email already registered (create)
"""

import logging

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.exceptions import ValidationError
from app.schemas.auth import ACTION_CREATE, ACTION_LOGIN, AuthRequest, AuthResponse
from app.schemas.common import ErrorResponse
from app.services.auth_service import auth_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1", tags=["Auth"])


@router.post(
    "/auth",
    response_model=AuthResponse,
    responses={
        200: {"description": "Logged in", "model": AuthResponse},
        201: {"description": "Manager registered", "model": AuthResponse},
        400: {"description": "Invalid request", "model": ErrorResponse},
        401: {"description": "Wrong password", "model": ErrorResponse},
        404: {"description": "Unknown email", "model": ErrorResponse},
        409: {"description": "Email already registered", "model": ErrorResponse},
    },
    summary="Register or log in a manager",
)
async def authenticate(
    body: AuthRequest,
    response: Response,
    db: AsyncSession = Depends(get_db_session),
) -> AuthResponse:
    action = body.action.strip().lower()

    if action == ACTION_CREATE:
        result = await auth_service.register(db, body)
        response.status_code = 201
        return result

    if action == ACTION_LOGIN:
        return await auth_service.login(db, body)

    raise ValidationError(message="Action not found", field="action")
