"""
Roster Backend — Employee Schemas
===================================

What:  Create payload, list item, and the filter criteria consumed by the
       employee query builder.
"""

from typing import Literal
from urllib.parse import urlparse

from pydantic import BaseModel, Field, field_validator

from app.schemas.common import CamelModel

Gender = Literal["male", "female"]


class EmployeePayload(CamelModel):
    """
    Body of POST /v1/employee.

    Example:
        {
            "identityNumber": "3201012345",
            "name": "Ann Smith",
            "employeeImageUri": "https://cdn.example.com/ann.png",
            "gender": "female",
            "departmentId": "0b6f6c62-0c5e-4a43-9d59-1d3c1f7a2b11"
        }
    """
    identity_number: str = Field(min_length=5, max_length=33)
    name: str = Field(min_length=4, max_length=33)
    employee_image_uri: str = Field(max_length=2048)
    gender: Gender
    department_id: str = Field(min_length=1, max_length=36)

    @field_validator("employee_image_uri")
    @classmethod
    def validate_image_uri(cls, v: str) -> str:
        """Only absolute http(s) URIs with a host are accepted."""
        parsed = urlparse(v)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError("employeeImageUri must be an absolute http(s) URI")
        return v


class EmployeeResponse(CamelModel):
    """One row of GET /v1/employee."""
    identity_number: str
    name: str
    employee_image_uri: str
    gender: str
    department_id: str


class EmployeeFilter(BaseModel):
    """
    Filter criteria for listing employees.

    manager_id is the mandatory scope. The four string filters are optional:
    an empty string means "not supplied" and contributes no predicate.
    limit/offset must already be defaulted (see parse_pagination_value).
    """
    manager_id: str = Field(min_length=1)
    identity_number: str = ""
    name: str = ""
    gender: str = ""
    department_id: str = ""
    limit: int = Field(ge=0)
    offset: int = Field(ge=0)
