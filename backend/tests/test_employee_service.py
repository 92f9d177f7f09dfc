"""
Roster Backend — Employee Service Tests
=========================================

What:  Tests for EmployeeService (ownership-checked create, filtered list).
How:   Unit tests use mock sessions; the TestAgainstDatabase class runs the
       real statements on the in-memory SQLite database from conftest.

What we test:
    ✅ Zero inserted rows → InvalidDepartmentError
    ✅ IntegrityError → ConflictIdentityNumberError
    ✅ Other driver failures → QueryError with the cause retained
    ✅ Rows are mapped to EmployeeResponse; empty results are not errors
    ✅ M1 owns D1: create succeeds, repeat conflicts, M2 is rejected
    ✅ Failed creates leave the employees table unchanged
"""

import pytest
from unittest.mock import AsyncMock, MagicMock
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, OperationalError

from app.exceptions import (
    ConflictIdentityNumberError,
    InvalidDepartmentError,
    QueryError,
)
from app.models import Employee
from app.schemas.employee import EmployeeFilter, EmployeePayload
from app.services.employee_service import EmployeeService
from tests.conftest import DEPARTMENT_1, DEPARTMENT_2, MANAGER_1, MANAGER_2


def make_payload(**overrides) -> EmployeePayload:
    data = {
        "identity_number": "12345",
        "name": "Ann Smith",
        "employee_image_uri": "https://cdn.example.com/ann.png",
        "gender": "female",
        "department_id": DEPARTMENT_1,
    }
    data.update(overrides)
    return EmployeePayload(**data)


def make_filter(manager_id=MANAGER_1, **overrides) -> EmployeeFilter:
    return EmployeeFilter(manager_id=manager_id, limit=5, offset=0, **overrides)


class TestCreateEmployee:

    def setup_method(self):
        self.service = EmployeeService()

    @pytest.mark.asyncio
    async def test_one_row_inserted_succeeds(self, mock_db_session):
        mock_db_session.execute.return_value = MagicMock(rowcount=1)

        await self.service.create_employee(mock_db_session, make_payload(), MANAGER_1)

        mock_db_session.execute.assert_awaited_once()
        params = mock_db_session.execute.await_args.args[1]
        assert params["manager_id"] == MANAGER_1
        assert params["department_id"] == DEPARTMENT_1
        assert params["identity_number"] == "12345"

    @pytest.mark.asyncio
    async def test_zero_rows_raises_invalid_department(self, mock_db_session):
        mock_db_session.execute.return_value = MagicMock(rowcount=0)

        with pytest.raises(InvalidDepartmentError) as exc_info:
            await self.service.create_employee(mock_db_session, make_payload(), MANAGER_2)

        assert exc_info.value.department_id == DEPARTMENT_1
        assert exc_info.value.error_code == "invalid_department"

    @pytest.mark.asyncio
    async def test_integrity_error_raises_conflict(self, mock_db_session):
        mock_db_session.execute.side_effect = IntegrityError(
            "INSERT", {}, Exception("UNIQUE constraint failed")
        )

        with pytest.raises(ConflictIdentityNumberError) as exc_info:
            await self.service.create_employee(mock_db_session, make_payload(), MANAGER_1)

        assert exc_info.value.identity_number == "12345"
        assert isinstance(exc_info.value.__cause__, IntegrityError)

    @pytest.mark.asyncio
    async def test_driver_failure_raises_query_error_with_cause(self, mock_db_session):
        failure = OperationalError("INSERT", {}, Exception("connection reset"))
        mock_db_session.execute.side_effect = failure

        with pytest.raises(QueryError) as exc_info:
            await self.service.create_employee(mock_db_session, make_payload(), MANAGER_1)

        assert exc_info.value.cause is failure
        assert exc_info.value.__cause__ is failure
        assert exc_info.value.context["error_type"] == "OperationalError"


class TestValidateOwnership:

    def setup_method(self):
        self.service = EmployeeService()

    @pytest.mark.asyncio
    async def test_owned_department_passes(self, mock_db_session):
        result = MagicMock()
        result.first.return_value = (1,)
        mock_db_session.execute.return_value = result

        await self.service.validate_ownership(mock_db_session, DEPARTMENT_1, MANAGER_1)

    @pytest.mark.asyncio
    async def test_unowned_department_raises(self, mock_db_session):
        result = MagicMock()
        result.first.return_value = None
        mock_db_session.execute.return_value = result

        with pytest.raises(InvalidDepartmentError):
            await self.service.validate_ownership(mock_db_session, DEPARTMENT_1, MANAGER_2)

    @pytest.mark.asyncio
    async def test_driver_failure_raises_query_error(self, mock_db_session):
        mock_db_session.execute.side_effect = OperationalError("SELECT", {}, Exception("down"))

        with pytest.raises(QueryError):
            await self.service.validate_ownership(mock_db_session, DEPARTMENT_1, MANAGER_1)


class TestListEmployees:

    def setup_method(self):
        self.service = EmployeeService()

    @pytest.mark.asyncio
    async def test_rows_are_mapped(self, mock_db_session):
        result = MagicMock()
        result.mappings.return_value.all.return_value = [
            {
                "identity_number": "12345",
                "name": "Ann Smith",
                "employee_image_uri": "https://cdn.example.com/ann.png",
                "gender": "female",
                "department_id": DEPARTMENT_1,
            }
        ]
        mock_db_session.execute.return_value = result

        employees = await self.service.list_employees(mock_db_session, make_filter())

        assert len(employees) == 1
        assert employees[0].identity_number == "12345"
        assert employees[0].model_dump(by_alias=True)["departmentId"] == DEPARTMENT_1

    @pytest.mark.asyncio
    async def test_empty_result_is_success(self, mock_db_session):
        result = MagicMock()
        result.mappings.return_value.all.return_value = []
        mock_db_session.execute.return_value = result

        assert await self.service.list_employees(mock_db_session, make_filter()) == []

    @pytest.mark.asyncio
    async def test_statement_is_executed_once_with_bound_values(self, mock_db_session):
        result = MagicMock()
        result.mappings.return_value.all.return_value = []
        mock_db_session.execute.return_value = result

        await self.service.list_employees(mock_db_session, make_filter(gender="male"))

        mock_db_session.execute.assert_awaited_once()
        assert mock_db_session.execute.await_args.args[1] == {
            "p1": MANAGER_1, "p2": "male", "p3": 5, "p4": 0,
        }

    @pytest.mark.asyncio
    async def test_execution_failure_raises_query_error_without_retry(self, mock_db_session):
        failure = OperationalError("SELECT", {}, Exception("timeout"))
        mock_db_session.execute = AsyncMock(side_effect=failure)

        with pytest.raises(QueryError) as exc_info:
            await self.service.list_employees(mock_db_session, make_filter())

        assert exc_info.value.cause is failure
        assert mock_db_session.execute.await_count == 1


class TestAgainstDatabase:
    """The real INSERT ... SELECT and listing statements on SQLite."""

    def setup_method(self):
        self.service = EmployeeService()

    async def count_employees(self, session) -> int:
        result = await session.execute(select(func.count()).select_from(Employee))
        return result.scalar_one()

    @pytest.mark.asyncio
    async def test_owner_creates_then_conflicts_then_other_manager_rejected(self, seeded_db):
        payload = make_payload(identity_number="12345", name="Ann Smith")

        async with seeded_db() as session:
            await self.service.create_employee(session, payload, MANAGER_1)
            await session.commit()

        async with seeded_db() as session:
            with pytest.raises(ConflictIdentityNumberError):
                await self.service.create_employee(session, payload, MANAGER_1)
            await session.rollback()

        async with seeded_db() as session:
            with pytest.raises(InvalidDepartmentError):
                await self.service.create_employee(session, payload, MANAGER_2)
            await session.rollback()

        async with seeded_db() as session:
            assert await self.count_employees(session) == 1

    @pytest.mark.asyncio
    async def test_unknown_department_inserts_nothing(self, db_session):
        with pytest.raises(InvalidDepartmentError):
            await self.service.create_employee(
                db_session, make_payload(department_id="no-such-department"), MANAGER_1
            )
        assert await self.count_employees(db_session) == 0

    @pytest.mark.asyncio
    async def test_same_identity_number_allowed_for_different_managers(self, db_session):
        await self.service.create_employee(db_session, make_payload(), MANAGER_1)
        await self.service.create_employee(
            db_session, make_payload(department_id=DEPARTMENT_2), MANAGER_2
        )
        assert await self.count_employees(db_session) == 2

    @pytest.mark.asyncio
    async def test_validate_ownership_reads_departments(self, db_session):
        await self.service.validate_ownership(db_session, DEPARTMENT_1, MANAGER_1)
        with pytest.raises(InvalidDepartmentError):
            await self.service.validate_ownership(db_session, DEPARTMENT_2, MANAGER_1)

    @pytest.mark.asyncio
    async def test_listing_is_scoped_to_manager(self, db_session):
        await self.service.create_employee(db_session, make_payload(), MANAGER_1)
        await self.service.create_employee(
            db_session,
            make_payload(identity_number="99999", name="Bob Jones", gender="male",
                         department_id=DEPARTMENT_2),
            MANAGER_2,
        )

        mine = await self.service.list_employees(db_session, make_filter(MANAGER_1))
        theirs = await self.service.list_employees(db_session, make_filter(MANAGER_2))

        assert [e.identity_number for e in mine] == ["12345"]
        assert [e.identity_number for e in theirs] == ["99999"]

    @pytest.mark.asyncio
    async def test_filters_match_case_insensitively(self, db_session):
        await self.service.create_employee(
            db_session, make_payload(identity_number="ABC123", name="Ann Smith"), MANAGER_1
        )

        by_prefix = await self.service.list_employees(
            db_session, make_filter(identity_number="abc")
        )
        by_name = await self.service.list_employees(db_session, make_filter(name="SMI"))
        not_prefix = await self.service.list_employees(
            db_session, make_filter(identity_number="123")
        )

        assert len(by_prefix) == 1
        assert len(by_name) == 1
        assert not_prefix == []

    @pytest.mark.asyncio
    async def test_wildcard_characters_match_literally(self, db_session):
        await self.service.create_employee(
            db_session, make_payload(identity_number="A_123", name="Ann 100% Smith"), MANAGER_1
        )
        await self.service.create_employee(
            db_session, make_payload(identity_number="AB123", name="Ann 1000 Smith"), MANAGER_1
        )

        underscore = await self.service.list_employees(
            db_session, make_filter(identity_number="a_")
        )
        percent = await self.service.list_employees(db_session, make_filter(name="100%"))
        lone_percent = await self.service.list_employees(
            db_session, make_filter(identity_number="%")
        )

        assert [e.identity_number for e in underscore] == ["A_123"]
        assert [e.identity_number for e in percent] == ["A_123"]
        assert lone_percent == []
