from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest
from httpx import ASGITransport, AsyncClient
from starlette.testclient import TestClient

from app.core.dependencies import get_employee_api_client
from app.main import app
from app.models.employee import Employee
from app.services.employee_api_client import EmployeeApiClient

SAMPLE_EMPLOYEES = [
    Employee(id="e-1", name="Ann", salary=50000, age=30, title="Engineer"),
    Employee(id="e-2", name="Bo", salary=90000, age=41, title="Director"),
    Employee(id="e-3", name=None, salary=70000),
]


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def mock_api_client() -> MagicMock:
    client = MagicMock(spec=EmployeeApiClient)
    client.list_all = AsyncMock()
    client.get_by_id = AsyncMock()
    client.create = AsyncMock()
    client.delete_by_name = AsyncMock()
    client.check_connection = AsyncMock(return_value=False)
    return client


@pytest.fixture
def client(mock_api_client):
    app.dependency_overrides[get_employee_api_client] = lambda: mock_api_client
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
async def async_client(mock_api_client):
    app.dependency_overrides[get_employee_api_client] = lambda: mock_api_client
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
