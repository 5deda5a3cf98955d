from __future__ import annotations

from fastapi import Depends

from app.core.config import settings
from app.services.employee_api_client import EmployeeApiClient
from app.services.employee_query_service import EmployeeQueryService


def get_employee_api_client() -> EmployeeApiClient:
    return EmployeeApiClient(settings.EMPLOYEE_API_URL, timeout=settings.EMPLOYEE_API_TIMEOUT)


def get_employee_query_service(
    client: EmployeeApiClient = Depends(get_employee_api_client),  # noqa: B008
) -> EmployeeQueryService:
    return EmployeeQueryService(client)
