from __future__ import annotations

import logging

from fastapi import APIRouter, Body, Depends, HTTPException, status

from employee_api.core.dependencies import get_employee_service
from employee_api.models.employee import Employee, EmployeeInput
from employee_api.services.employee_service import EmployeeService
from employee_api.services.errors import (
    EmployeeDeletionError,
    EmployeeNotFoundError,
    EmployeeServiceError,
    InvalidArgumentError,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/employee", tags=["employee"])


def _internal_error(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)


@router.get("", response_model=list[Employee])
async def list_employees(service: EmployeeService = Depends(get_employee_service)):  # noqa: B008
    try:
        return await service.list_all()
    except EmployeeServiceError as err:
        logger.exception("Failed to list employees")
        raise _internal_error("Failed to retrieve employees") from err


@router.get("/search/{search_string}", response_model=list[Employee])
async def search_employees(
    search_string: str,
    service: EmployeeService = Depends(get_employee_service),  # noqa: B008
):
    try:
        return await service.search_by_name(search_string)
    except EmployeeServiceError as err:
        logger.exception("Failed to search employees by name %r", search_string)
        raise _internal_error("Failed to search employees") from err


@router.get("/highestSalary", response_model=int)
async def highest_salary(service: EmployeeService = Depends(get_employee_service)):  # noqa: B008
    try:
        return await service.highest_salary()
    except EmployeeServiceError as err:
        logger.exception("Failed to compute highest salary")
        raise _internal_error("Failed to retrieve highest salary") from err


@router.get("/topTenHighestEarningEmployeeNames", response_model=list[str])
async def top_ten_earner_names(service: EmployeeService = Depends(get_employee_service)):  # noqa: B008
    try:
        return await service.top_ten_earner_names()
    except EmployeeServiceError as err:
        logger.exception("Failed to compute top earning employees")
        raise _internal_error("Failed to retrieve top earning employees") from err


@router.get("/{employee_id}", response_model=Employee)
async def get_employee(
    employee_id: str,
    service: EmployeeService = Depends(get_employee_service),  # noqa: B008
):
    try:
        return await service.get_by_id(employee_id)
    except InvalidArgumentError as err:
        logger.warning("Invalid employee id %r", employee_id)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(err)) from err
    except EmployeeNotFoundError as err:
        logger.warning("Employee %s not found", employee_id)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(err)) from err
    except EmployeeServiceError as err:
        logger.exception("Failed to get employee %s", employee_id)
        raise _internal_error("Failed to retrieve employee") from err


@router.post("", response_model=Employee)
async def create_employee(
    employee_input: EmployeeInput | None = Body(default=None),  # noqa: B008
    service: EmployeeService = Depends(get_employee_service),  # noqa: B008
):
    try:
        return await service.create(employee_input)
    except InvalidArgumentError as err:
        logger.warning("Invalid employee input %r", employee_input)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(err)) from err
    except EmployeeServiceError as err:
        logger.exception("Failed to create employee %r", employee_input)
        raise _internal_error("Failed to create employee") from err


@router.delete("/{employee_id}", response_model=str)
async def delete_employee(
    employee_id: str,
    service: EmployeeService = Depends(get_employee_service),  # noqa: B008
):
    try:
        return await service.delete_by_id(employee_id)
    except InvalidArgumentError as err:
        logger.warning("Invalid employee id %r", employee_id)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(err)) from err
    except EmployeeDeletionError as err:
        if isinstance(err.cause, EmployeeNotFoundError):
            logger.warning("Employee %s not found for deletion", employee_id)
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(err.cause)) from err
        logger.exception("Failed to delete employee %s", employee_id)
        raise _internal_error("Failed to delete employee") from err
