"""
Roster Backend — Custom Exception Hierarchy
=============================================

What:  Application-specific exceptions for the failure modes of each operation.
How:   Each exception carries a message, an optional context dict and a
       machine-readable `error_code`. Global exception handlers (registered in
       main.py) map them to HTTP status codes and JSON error bodies.
Who:   Raised by services and the security layer; caught by global handlers.

Exception Hierarchy:
    RosterError (base)
    ├── ValidationError                   → 400 Bad Request
    │   └── InvalidDepartmentError        → 400 (department not owned by caller)
    ├── AuthenticationError               → 401 Unauthorized
    ├── NotFoundError                     → 404 Not Found
    ├── ConflictError                     → 409 Conflict
    │   ├── ConflictIdentityNumberError   (identity number taken in manager scope)
    │   └── EmailTakenError               (manager email already registered)
    └── QueryError                        → 500 Internal Server Error

Services never build HTTP responses themselves; they raise one of these and
let the caller decide how to present it.
"""

from typing import Any, Dict, Optional


class RosterError(Exception):
    """
    Base exception for all Roster application errors.

    Attributes:
        message:     User-facing error description (safe to return in API response)
        context:     Additional debug info (logged but NOT returned for 5xx errors)
        error_code:  Stable machine-readable code used in the JSON error body
    """

    error_code = "error"

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(RosterError):
    """
    Raised when client input fails a business-rule validation.

    HTTP: 400 Bad Request
    """

    error_code = "validation_error"

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class InvalidDepartmentError(ValidationError):
    """
    Raised when the declared department is not owned by the acting manager.

    Covers both "department does not exist" and "department belongs to someone
    else"; callers cannot tell the two apart, so no cross-manager information
    leaks.
    """

    error_code = "invalid_department"

    def __init__(
        self,
        department_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if department_id:
            ctx["department_id"] = department_id
        super().__init__(
            message="departmentId is not a valid department for this manager",
            field="departmentId",
            context=ctx,
        )
        self.department_id = department_id


class AuthenticationError(RosterError):
    """
    Raised when the caller's identity cannot be established.

    When: missing/malformed bearer token, expired or tampered JWT, wrong password.
    HTTP: 401 Unauthorized
    """

    error_code = "unauthorized"

    def __init__(
        self,
        message: str = "Authentication required",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class NotFoundError(RosterError):
    """
    Raised when a requested resource does not exist.

    HTTP: 404 Not Found
    """

    error_code = "not_found"

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class ConflictError(RosterError):
    """
    Raised when a write would violate a uniqueness rule.

    HTTP: 409 Conflict
    """

    error_code = "conflict"

    def __init__(
        self,
        message: str = "The resource already exists",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class ConflictIdentityNumberError(ConflictError):
    """Identity number already used by an employee in the acting manager's scope."""

    def __init__(
        self,
        identity_number: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if identity_number:
            ctx["identity_number"] = identity_number
        super().__init__(
            message="identityNumber is already used by another employee",
            context=ctx,
        )
        self.identity_number = identity_number


class EmailTakenError(ConflictError):
    """A manager with this email is already registered."""

    def __init__(self, email: Optional[str] = None):
        super().__init__(
            message="Email is already registered",
            context={"email": email} if email else None,
        )


class QueryError(RosterError):
    """
    Raised when statement execution fails (storage unreachable, malformed value, ...).

    HTTP: 500 Internal Server Error

    The underlying driver exception is kept on `cause` (and chained as
    `__cause__` by `raise ... from`) for server-side diagnostics only. The
    message returned to clients is always generic.
    """

    error_code = "server_error"

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        cause: Optional[BaseException] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if cause is not None:
            ctx.setdefault("error_type", type(cause).__name__)
        super().__init__(message=message, context=ctx)
        self.cause = cause
