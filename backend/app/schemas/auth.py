"""
Roster Backend — Auth Schemas
===============================

What:  Body and response of POST /v1/auth (register or login a manager).
"""

from pydantic import BaseModel, EmailStr, Field, field_validator

ACTION_CREATE = "create"
ACTION_LOGIN = "login"

# bcrypt only accepts passwords up to this many bytes
MAX_PASSWORD_BYTES = 72


class AuthRequest(BaseModel):
    """
    Example:
        {"email": "boss@example.com", "password": "s3cretpass", "action": "create"}

    `action` is matched case-insensitively by the route; anything other than
    create/login is rejected there with "Action not found".
    """
    email: EmailStr
    password: str = Field(min_length=8, max_length=32)
    action: str

    @field_validator("password")
    @classmethod
    def validate_password_bytes(cls, v: str) -> str:
        """32 characters of multibyte text can exceed what bcrypt hashes."""
        if len(v.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"password must be at most {MAX_PASSWORD_BYTES} bytes in UTF-8")
        return v


class AuthResponse(BaseModel):
    email: str
    token: str = Field(description="Bearer token for the Authorization header")
