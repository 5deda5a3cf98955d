from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import ValidationError

from app.models.employee import Employee, EmployeeInput
from app.models.outcome import DeletionNotConfirmed, Failure, Invalid, NotFound, Ok
from app.services.employee_api_client import EmployeeApiClient

logger = logging.getLogger(__name__)

DEFAULT_TOP_EARNERS = 10


def search_by_name(employees: Iterable[Employee], fragment: str) -> list[Employee]:
    needle = fragment.lower()
    return [e for e in employees if e.name is not None and needle in e.name.lower()]


def highest_salary(employees: Iterable[Employee]) -> int:
    return max((e.salary for e in employees if e.salary is not None), default=0)


def top_earning_names(employees: Iterable[Employee], n: int = DEFAULT_TOP_EARNERS) -> list[str]:
    if n <= 0:
        return []
    ranked = [e for e in employees if e.name is not None and e.salary is not None]
    # sorted() is stable, so equal salaries keep their source order
    ranked = sorted(ranked, key=lambda e: e.salary, reverse=True)
    return [e.name for e in ranked[:n]]


class EmployeeQueryService:
    def __init__(self, client: EmployeeApiClient) -> None:
        self.client = client

    async def get_all(self) -> Ok[list[Employee]] | Failure:
        return await self.client.list_all()

    async def search_by_name(self, fragment: str) -> Ok[list[Employee]] | Failure:
        result = await self.client.list_all()
        if isinstance(result, Failure):
            return result
        matches = search_by_name(result.value, fragment)
        logger.info("Found %d employees matching %r", len(matches), fragment)
        return Ok(matches)

    async def highest_salary(self) -> Ok[int] | Failure:
        result = await self.client.list_all()
        if isinstance(result, Failure):
            return result
        salary = highest_salary(result.value)
        logger.info("Highest salary: %d", salary)
        return Ok(salary)

    async def top_earning_names(self, n: int = DEFAULT_TOP_EARNERS) -> Ok[list[str]] | Failure:
        result = await self.client.list_all()
        if isinstance(result, Failure):
            return result
        names = top_earning_names(result.value, n)
        logger.info("Found %d top earning employees", len(names))
        return Ok(names)

    async def get_by_id(self, employee_id: str) -> Ok[Employee] | NotFound | Failure:
        return await self.client.get_by_id(employee_id)

    async def create_employee(
        self,
        employee_input: EmployeeInput | Mapping[str, Any],
    ) -> Ok[Employee] | Invalid | Failure:
        if not isinstance(employee_input, EmployeeInput):
            try:
                employee_input = EmployeeInput.model_validate(employee_input)
            except ValidationError as e:
                logger.warning("Rejected employee input: %s", e)
                return Invalid(e.errors(include_url=False, include_context=False))
        return await self.client.create(employee_input)

    async def delete_by_id(self, employee_id: str) -> Ok[str] | NotFound | Failure:
        found = await self.client.get_by_id(employee_id)
        if not isinstance(found, Ok):
            if isinstance(found, NotFound):
                logger.warning("Employee not found for deletion id=%s", employee_id)
            return found

        name = found.value.name
        if name is None:
            logger.error("Employee id=%s has no name, cannot delete by name", employee_id)
            return Failure("Employee has no name to delete by")

        deleted = await self.client.delete_by_name(name)
        if isinstance(deleted, Failure):
            return deleted
        if not deleted.value:
            logger.error("Upstream did not confirm deletion of %s", name)
            return DeletionNotConfirmed("Failed to delete employee", name=name)

        logger.info("Deleted employee id=%s name=%s", employee_id, name)
        return Ok(name)
