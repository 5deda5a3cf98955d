from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import JSONResponse

from app.core.config import settings
from app.core.dependencies import get_employee_query_service
from app.models.employee import Employee, EmployeeInput
from app.models.outcome import DeletionNotConfirmed, Invalid, NotFound, Ok
from app.services.employee_query_service import EmployeeQueryService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/employee", tags=["employee"])


def _server_error(content: object = None) -> Response:
    if content is None:
        return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=content)


@router.get("", response_model=list[Employee])
async def get_all_employees(
    service: EmployeeQueryService = Depends(get_employee_query_service),  # noqa: B008
):
    result = await service.get_all()
    if isinstance(result, Ok):
        return result.value
    logger.error("Failed to list employees: %s", result.reason)
    return _server_error([])


@router.get("/search/{search_string}", response_model=list[Employee])
async def search_employees_by_name(
    search_string: str,
    service: EmployeeQueryService = Depends(get_employee_query_service),  # noqa: B008
):
    result = await service.search_by_name(search_string)
    if isinstance(result, Ok):
        return result.value
    logger.error("Failed to search employees by %r: %s", search_string, result.reason)
    return _server_error([])


@router.get("/highestSalary", response_model=int)
async def get_highest_salary(
    service: EmployeeQueryService = Depends(get_employee_query_service),  # noqa: B008
):
    result = await service.highest_salary()
    if isinstance(result, Ok):
        return result.value
    logger.error("Failed to compute highest salary: %s", result.reason)
    return _server_error(0)


@router.get("/topTenHighestEarningEmployeeNames", response_model=list[str])
async def get_top_ten_highest_earning_employee_names(
    service: EmployeeQueryService = Depends(get_employee_query_service),  # noqa: B008
):
    result = await service.top_earning_names(settings.TOP_EARNERS_LIMIT)
    if isinstance(result, Ok):
        return result.value
    logger.error("Failed to rank top earners: %s", result.reason)
    return _server_error([])


@router.get("/{employee_id}", response_model=Employee)
async def get_employee_by_id(
    employee_id: str,
    service: EmployeeQueryService = Depends(get_employee_query_service),  # noqa: B008
):
    result = await service.get_by_id(employee_id)
    if isinstance(result, Ok):
        return result.value
    if isinstance(result, NotFound):
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    logger.error("Failed to get employee %s: %s", employee_id, result.reason)
    return _server_error()


@router.post("", response_model=Employee)
async def create_employee(
    employee_input: EmployeeInput,
    service: EmployeeQueryService = Depends(get_employee_query_service),  # noqa: B008
):
    result = await service.create_employee(employee_input)
    if isinstance(result, Ok):
        return result.value
    if isinstance(result, Invalid):
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": result.errors})
    logger.error("Failed to create employee %s: %s", employee_input.name, result.reason)
    return _server_error()


@router.delete("/{employee_id}", response_model=str)
async def delete_employee_by_id(
    employee_id: str,
    service: EmployeeQueryService = Depends(get_employee_query_service),  # noqa: B008
):
    result = await service.delete_by_id(employee_id)
    if isinstance(result, Ok):
        return result.value
    if isinstance(result, NotFound):
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    logger.error("Failed to delete employee %s: %s", employee_id, result.reason)
    if isinstance(result, DeletionNotConfirmed):
        return _server_error("Failed to delete employee")
    return _server_error("Error deleting employee")
