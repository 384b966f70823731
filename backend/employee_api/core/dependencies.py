from __future__ import annotations

from fastapi import HTTPException, Request, status

from employee_api.services.employee_client import EmployeeApiClient
from employee_api.services.employee_service import EmployeeService


def get_employee_client(request: Request) -> EmployeeApiClient | None:
    return getattr(request.app.state, "employee_client", None)


def get_employee_service(request: Request) -> EmployeeService:
    service = getattr(request.app.state, "employee_service", None)
    if service is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Employee service not initialized",
        )
    return service
