"""
Roster Backend — ORM Models
=============================

Importing this package registers every table on `Base.metadata`
(used by Alembic autogenerate and by the test suite's create_all()).
"""

from app.models.department import Department
from app.models.employee import Employee, GENDERS
from app.models.manager import Manager

__all__ = ["Department", "Employee", "GENDERS", "Manager"]
