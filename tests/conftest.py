"""
Employee API — Test Configuration (conftest.py)
=================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── mock_pool:    AsyncMock standing in for ConnectionPool (service unit tests)
    ├── pool:         Real ConnectionPool on a fresh SQLite file with the
    │                 employee table created from Base.metadata
    ├── test_client:  HTTPX AsyncClient talking to create_app(pool=pool)
    └── sample_employee_data: Consistent payloads
"""

import os

# Set before the application modules read their settings
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///./test.db"
os.environ["PASS"] = "test-password-not-real"
os.environ["LOG_LEVEL"] = "WARNING"

from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from employee_api.database import Base, ConnectionPool, ResultMetadata
from employee_api.models.employee import Employee  # noqa: F401


@pytest.fixture
def mock_pool():
    """
    Provides a mock connection pool.

    Usage:
        async def test_get(mock_pool):
            mock_pool.execute.return_value = ([{"id": 1, ...}], meta)
            result = await EmployeeService(mock_pool).get_employee(1)
    """
    pool = AsyncMock(spec=ConnectionPool)
    pool.execute = AsyncMock(return_value=([], ResultMetadata(affected_rows=0, returns_rows=True)))
    return pool


@pytest_asyncio.fixture
async def pool(tmp_path):
    """
    Provides a ConnectionPool bound to an empty SQLite database.

    The employee table is created from the SQLAlchemy declarations and the
    pool is disposed after the test.
    """
    db_pool = ConnectionPool(f"sqlite+aiosqlite:///{tmp_path / 'employees.db'}")
    async with db_pool.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield db_pool
    await db_pool.dispose()


@pytest_asyncio.fixture
async def test_client(pool):
    """
    Provides an async HTTP test client for endpoint testing.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/employees")
            assert response.status_code == 200
    """
    from employee_api.main import create_app
    app = create_app(pool=pool)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def sample_employee_data():
    """Payload used by create/read tests."""
    return {"name": "Ada", "salary": 9000}
