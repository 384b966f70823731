from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from employee_api.models.employee import EmployeeInput


class EmployeeServiceError(Exception):
    pass


class InvalidArgumentError(EmployeeServiceError):
    pass


class UpstreamError(EmployeeServiceError):
    pass


class EmployeeNotFoundError(EmployeeServiceError):
    def __init__(self, employee_id: str) -> None:
        super().__init__(f"Employee not found with ID: {employee_id}")
        self.employee_id = employee_id


class EmployeeCreationError(EmployeeServiceError):
    def __init__(self, employee_input: EmployeeInput) -> None:
        super().__init__(f"Failed to create employee {employee_input!r}")
        self.employee_input = employee_input


class EmployeeDeletionError(EmployeeServiceError):
    def __init__(self, employee_id: str, cause: EmployeeServiceError) -> None:
        super().__init__(f"Failed to delete employee with ID {employee_id}: {cause}")
        self.employee_id = employee_id
        self.cause = cause
