"""
Roster Backend — Test Configuration (conftest.py)
===================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── mock_db_session: AsyncMock session (no real DB needed)
    ├── db_engine:       in-memory SQLite engine with all tables created
    ├── session_factory: async_sessionmaker bound to db_engine
    ├── seeded_db:       db_engine plus managers M1/M2 and departments D1/D2
    ├── db_session:      one AsyncSession on the seeded database
    ├── test_client:     HTTPX AsyncClient bound to a fresh app using seeded_db
    ├── auth_headers:    factory for "Authorization: Bearer <token>" headers
    └── employee_payload: valid POST /v1/employee body for D1
"""

import os
import tempfile

# Override settings for testing BEFORE any app imports
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///" + os.path.join(
    tempfile.mkdtemp(prefix="roster_test_"), "unused.db"
)
os.environ["JWT_SECRET"] = "test-secret-0123456789abcdef0123456789abcdef"
os.environ["BCRYPT_ROUNDS"] = "4"  # Fast hashing in tests
os.environ["LOG_LEVEL"] = "WARNING"

from typing import AsyncGenerator, Callable, Dict
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import app.models  # noqa: F401  (registers tables on Base.metadata)
from app.database import Base, get_db_session
from app.models import Department, Manager
from app.security import create_access_token, hash_password

MANAGER_1 = "11111111-1111-4111-8111-111111111111"
MANAGER_2 = "22222222-2222-4222-8222-222222222222"
DEPARTMENT_1 = "dddddddd-0001-4000-8000-000000000001"  # owned by MANAGER_1
DEPARTMENT_2 = "dddddddd-0002-4000-8000-000000000002"  # owned by MANAGER_2
PASSWORD = "password123"


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_x(mock_db_session):
            mock_db_session.execute.return_value = MagicMock(rowcount=1)
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest_asyncio.fixture
async def db_engine():
    """In-memory SQLite database shared by every session of one test."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(db_engine):
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def seeded_db(session_factory):
    """Managers M1 and M2; D1 belongs to M1, D2 belongs to M2."""
    async with session_factory() as session:
        password_hash = hash_password(PASSWORD)
        session.add_all([
            Manager(manager_id=MANAGER_1, email="m1@example.com", password_hash=password_hash),
            Manager(manager_id=MANAGER_2, email="m2@example.com", password_hash=password_hash),
        ])
        await session.flush()
        session.add_all([
            Department(department_id=DEPARTMENT_1, name="Engineering", manager_id=MANAGER_1),
            Department(department_id=DEPARTMENT_2, name="Sales", manager_id=MANAGER_2),
        ])
        await session.commit()
    return session_factory


@pytest_asyncio.fixture
async def db_session(seeded_db) -> AsyncGenerator[AsyncSession, None]:
    async with seeded_db() as session:
        yield session


@pytest_asyncio.fixture
async def test_client(seeded_db) -> AsyncGenerator[AsyncClient, None]:
    """
    HTTPX AsyncClient talking to a fresh app whose sessions use seeded_db.

    Usage:
        async def test_list(test_client, auth_headers):
            response = await test_client.get("/v1/employee", headers=auth_headers(MANAGER_1))
    """
    from app.main import create_app

    app = create_app()

    async def override_session() -> AsyncGenerator[AsyncSession, None]:
        # Same commit/rollback contract as app.database.get_db_session
        async with seeded_db() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_session

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def auth_headers() -> Callable[[str], Dict[str, str]]:
    def make(manager_id: str) -> Dict[str, str]:
        return {"Authorization": f"Bearer {create_access_token(manager_id)}"}
    return make


@pytest.fixture
def employee_payload() -> Dict[str, str]:
    """Valid POST /v1/employee body for DEPARTMENT_1."""
    return {
        "identityNumber": "12345",
        "name": "Ann Smith",
        "employeeImageUri": "https://cdn.example.com/ann.png",
        "gender": "female",
        "departmentId": DEPARTMENT_1,
    }
