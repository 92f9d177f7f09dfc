"""Roster Backend — Department Schemas."""

from pydantic import Field

from app.schemas.common import CamelModel


class DepartmentPayload(CamelModel):
    name: str = Field(min_length=1, max_length=33)


class DepartmentResponse(CamelModel):
    department_id: str
    name: str
