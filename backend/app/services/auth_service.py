"""
Roster Backend — Auth Service
===============================

What:  Registers managers and logs them in, returning an access token.
Who:   Called by POST /v1/auth.

Emails are compared case-insensitively (stored lower-cased).
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import AuthenticationError, EmailTakenError, NotFoundError, QueryError
from app.models.manager import Manager
from app.schemas.auth import AuthRequest, AuthResponse
from app.security import create_access_token, hash_password, verify_password

logger = logging.getLogger(__name__)


class AuthService:

    async def register(self, db: AsyncSession, request: AuthRequest) -> AuthResponse:
        """
        Create a manager account.

        Raises:
            EmailTakenError: a manager with this email already exists
            QueryError: database failure
        """
        email = request.email.lower()
        try:
            existing = await db.execute(select(Manager.manager_id).where(Manager.email == email))
            if existing.scalar_one_or_none() is not None:
                raise EmailTakenError(email)

            manager = Manager(email=email, password_hash=hash_password(request.password))
            db.add(manager)
            await db.flush()  # Assigns the row; commit happens in get_db_session
        except IntegrityError as e:
            # Lost a race with a concurrent registration of the same email
            raise EmailTakenError(email) from e
        except SQLAlchemyError as e:
            raise QueryError(cause=e, context={"operation": "register"}) from e

        logger.info("Manager registered: %s", manager.manager_id)
        return AuthResponse(email=email, token=create_access_token(manager.manager_id))

    async def login(self, db: AsyncSession, request: AuthRequest) -> AuthResponse:
        """
        Raises:
            NotFoundError: no manager with this email
            AuthenticationError: wrong password
            QueryError: database failure
        """
        email = request.email.lower()
        try:
            result = await db.execute(select(Manager).where(Manager.email == email))
            manager = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise QueryError(cause=e, context={"operation": "login"}) from e

        if manager is None:
            raise NotFoundError(resource="manager")
        if not verify_password(request.password, manager.password_hash):
            raise AuthenticationError("Invalid email or password")

        return AuthResponse(email=email, token=create_access_token(manager.manager_id))


auth_service = AuthService()
