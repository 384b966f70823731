"""Employee queries derived from the upstream employee API."""

from __future__ import annotations

import logging

from employee_api.models.employee import Employee, EmployeeInput
from employee_api.services.employee_client import EmployeeApiClient
from employee_api.services.errors import (
    EmployeeDeletionError,
    EmployeeServiceError,
    InvalidArgumentError,
)

logger = logging.getLogger(__name__)

TOP_EARNERS_LIMIT = 10


class EmployeeService:
    def __init__(self, client: EmployeeApiClient) -> None:
        self.client = client

    async def list_all(self) -> list[Employee]:
        logger.info("Fetching all employees")
        return await self.client.fetch_all()

    async def search_by_name(self, query: str | None) -> list[Employee]:
        logger.info("Searching employees by name %r", query)
        if not query:
            return []

        needle = query.lower()
        employees = await self.list_all()
        matches = [e for e in employees if e.name is not None and needle in e.name.lower()]

        logger.info("Found %d of %d employees matching %r", len(matches), len(employees), query)
        return matches

    async def get_by_id(self, employee_id: str | None) -> Employee:
        logger.info("Fetching employee by id %s", employee_id)
        if not employee_id:
            raise InvalidArgumentError("Employee ID is null or empty")

        employee = await self.client.fetch_by_id(employee_id)
        logger.info("Fetched employee %s with id %s", employee.name, employee.id)
        return employee

    async def highest_salary(self) -> int:
        employees = await self.list_all()
        salaries = [e.salary for e in employees if e.salary is not None]
        if not salaries:
            logger.warning("No employee salaries available")
            return 0

        highest = max(salaries)
        logger.info("Highest salary is %d", highest)
        return highest

    async def top_ten_earner_names(self) -> list[str]:
        employees = await self.list_all()
        earners = [e for e in employees if e.salary is not None and e.name is not None]
        # sorted() is stable with reverse=True, so equal salaries keep input order
        earners = sorted(earners, key=lambda e: e.salary, reverse=True)
        names = [e.name for e in earners[:TOP_EARNERS_LIMIT]]

        logger.info("Top earning employees: %s", names)
        return names

    async def create(self, employee_input: EmployeeInput | None) -> Employee:
        logger.info("Creating employee %r", employee_input)
        if employee_input is None:
            raise InvalidArgumentError("Employee input cannot be null")

        employee = await self.client.create(employee_input)
        logger.info("Created employee %s with id %s", employee.name, employee.id)
        return employee

    async def delete_by_id(self, employee_id: str | None) -> str:
        """Soft delete: verify the employee exists and report its name.

        The upstream API has no delete operation, so nothing is removed.
        """
        logger.info("Deleting employee with id %s", employee_id)
        if not employee_id:
            raise InvalidArgumentError("Employee ID cannot be null or empty")

        try:
            employee = await self.get_by_id(employee_id)
        except EmployeeServiceError as e:
            logger.error("Employee with id %s could not be deleted: %s", employee_id, e)
            raise EmployeeDeletionError(employee_id, e) from e

        logger.info("Deleted employee %s", employee.name)
        return employee.name or ""
