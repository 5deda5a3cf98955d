from __future__ import annotations

import asyncio
import logging
from typing import Any
from urllib.parse import quote

import aiohttp
from pydantic import TypeAdapter, ValidationError

from app.models.employee import DeleteEmployeeInput, Employee, EmployeeInput, UpstreamResponse
from app.models.outcome import Failure, NotFound, Ok

logger = logging.getLogger(__name__)

_EMPLOYEE_LIST = TypeAdapter(list[Employee])


class EmployeeApiClient:
    def __init__(self, base_url: str, timeout: float = 30.0) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    async def _exchange(
        self,
        method: str,
        url: str,
        payload: dict[str, Any] | None = None,
    ) -> tuple[int, UpstreamResponse | None] | Failure:
        """Send one request; the envelope is only parsed on HTTP 200."""
        try:
            timeout = aiohttp.ClientTimeout(total=self.timeout)
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.request(method, url, json=payload) as response:
                    if response.status != 200:
                        return response.status, None
                    body = await response.json(content_type=None)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error("%s %s failed: %s", method, url, e)
            return Failure(f"Upstream request failed: {e}")
        except ValueError as e:
            logger.error("%s %s returned an unreadable body: %s", method, url, e)
            return Failure("Upstream returned an unreadable body", 200)

        if not isinstance(body, dict):
            logger.error("%s %s returned a non-object body", method, url)
            return Failure("Upstream returned an unexpected body", 200)
        return 200, UpstreamResponse.model_validate(body)

    async def list_all(self) -> Ok[list[Employee]] | Failure:
        logger.info("Fetching all employees")
        result = await self._exchange("GET", self.base_url)
        if isinstance(result, Failure):
            return result

        status_code, envelope = result
        if envelope is None or envelope.data is None:
            logger.warning("Unexpected response fetching employees: status=%s", status_code)
            return Failure("Failed to fetch employees", status_code)

        try:
            employees = _EMPLOYEE_LIST.validate_python(envelope.data)
        except ValidationError as e:
            logger.error("Malformed employee list from upstream: %s", e)
            return Failure("Malformed employee list", status_code)

        logger.info("Fetched %d employees", len(employees))
        return Ok(employees)

    async def get_by_id(self, employee_id: str) -> Ok[Employee] | NotFound | Failure:
        logger.info("Fetching employee id=%s", employee_id)
        result = await self._exchange("GET", f"{self.base_url}/{quote(employee_id, safe='')}")
        if isinstance(result, Failure):
            return result

        status_code, envelope = result
        if status_code == 404:
            logger.warning("Employee not found id=%s", employee_id)
            return NotFound(employee_id)
        if envelope is None:
            logger.warning("Unexpected response fetching employee id=%s: status=%s", employee_id, status_code)
            return Failure("Failed to fetch employee", status_code)
        if envelope.data is None:
            logger.warning("Employee not found id=%s", employee_id)
            return NotFound(employee_id)

        try:
            employee = Employee.model_validate(envelope.data)
        except ValidationError as e:
            logger.error("Malformed employee id=%s from upstream: %s", employee_id, e)
            return Failure("Malformed employee record", status_code)

        return Ok(employee)

    async def create(self, employee_input: EmployeeInput) -> Ok[Employee] | Failure:
        logger.info("Creating employee name=%s", employee_input.name)
        result = await self._exchange(
            "POST",
            self.base_url,
            employee_input.model_dump(exclude_none=True),
        )
        if isinstance(result, Failure):
            return result

        status_code, envelope = result
        if envelope is None or envelope.data is None:
            logger.error("Failed to create employee name=%s: status=%s", employee_input.name, status_code)
            return Failure("Failed to create employee", status_code)

        try:
            employee = Employee.model_validate(envelope.data)
        except ValidationError as e:
            logger.error("Malformed created employee from upstream: %s", e)
            return Failure("Malformed employee record", status_code)

        logger.info("Created employee id=%s name=%s", employee.id, employee.name)
        return Ok(employee)

    async def delete_by_name(self, name: str) -> Ok[bool] | Failure:
        logger.info("Deleting employee name=%s", name)
        result = await self._exchange(
            "DELETE",
            self.base_url,
            DeleteEmployeeInput(name=name).model_dump(),
        )
        if isinstance(result, Failure):
            return result

        status_code, envelope = result
        if envelope is None:
            logger.warning("Unexpected response deleting employee name=%s: status=%s", name, status_code)
            return Failure("Failed to delete employee", status_code)

        deleted = envelope.data is True
        logger.info("Deletion result for %s: %s", name, deleted)
        return Ok(deleted)

    async def check_connection(self) -> bool:
        try:
            timeout = aiohttp.ClientTimeout(total=min(self.timeout, 10))
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.request("GET", self.base_url) as response:
                    return response.status == 200
        except Exception:
            logger.exception("Employee API connection check failed")
            return False
