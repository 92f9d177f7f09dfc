"""
Roster Backend — Password Hashing, Tokens and Caller Identity
===============================================================

What:  bcrypt password hashing, JWT issuing/verification, and the FastAPI
       dependency that resolves the acting manager from the request.
How:   Tokens are HS256 JWTs (PyJWT) with `sub` = manager id, `iat` and `exp`.
       The dependency reads `Authorization: Bearer <token>`, verifies it and
       returns the manager id; any problem raises AuthenticationError (401).
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
import jwt
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.config import settings
from app.exceptions import AuthenticationError

# auto_error=False: a missing header reaches our handler instead of
# FastAPI's default 403
bearer_scheme = HTTPBearer(auto_error=False)


# ── Passwords ─────────────────────────────────────────────────────────────

def hash_password(password: str) -> str:
    salt = bcrypt.gensalt(rounds=settings.bcrypt_rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


# ── Tokens ────────────────────────────────────────────────────────────────

def create_access_token(manager_id: str, expires_in: Optional[timedelta] = None) -> str:
    """
    Sign an access token for `manager_id`.

    Args:
        manager_id: Becomes the `sub` claim
        expires_in: Lifetime override (defaults to JWT_EXPIRY_HOURS)
    """
    now = datetime.now(timezone.utc)
    lifetime = expires_in if expires_in is not None else timedelta(hours=settings.jwt_expiry_hours)
    payload = {
        "sub": manager_id,
        "iat": now,
        "exp": now + lifetime,
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> str:
    """
    Verify `token` and return the manager id it was issued for.

    Raises:
        AuthenticationError: expired, tampered, malformed, or missing `sub`
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["sub", "exp"]},
        )
    except jwt.ExpiredSignatureError as e:
        raise AuthenticationError("Token has expired") from e
    except jwt.InvalidTokenError as e:
        raise AuthenticationError(
            "Invalid token",
            context={"reason": type(e).__name__},
        ) from e

    manager_id = claims.get("sub")
    if not isinstance(manager_id, str) or not manager_id:
        raise AuthenticationError("Invalid token")
    return manager_id


async def get_current_manager_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> str:
    """
    FastAPI dependency returning the acting manager's id.

    Usage:
        @router.get("/v1/employee")
        async def list_employees(manager_id: str = Depends(get_current_manager_id)):
            ...
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("Missing bearer token")
    return decode_access_token(credentials.credentials)
