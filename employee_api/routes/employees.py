"""
Employee API — Employee Route Handlers
========================================

What:  The five CRUD endpoints under /employees.
How:   Each handler extracts path/body values, calls one EmployeeService
       method and returns its result. Not-found and store errors are raised
       as exceptions and rendered by the global handlers in main.py.

Route Inventory:
    GET        /employees          → 200 list
    GET        /employees/{id}     → 200 | 404
    POST       /employees          → 201 {id, name, salary}
    PATCH/PUT  /employees/{id}     → 200 | 404
    DELETE     /employees/{id}     → 204 | 404
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Response, status

from employee_api.schemas.employee import (
    EmployeeCreate,
    EmployeeResponse,
    EmployeeUpdate,
    ErrorResponse,
)
from employee_api.services.employee_service import EmployeeService, get_employee_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/employees", tags=["Employees"])

NOT_FOUND = {404: {"description": "Employee not found", "model": ErrorResponse}}
SERVER_ERROR = {500: {"description": "Server error", "model": ErrorResponse}}


@router.get(
    "",
    response_model=List[EmployeeResponse],
    responses={**SERVER_ERROR},
    summary="List all employees",
)
async def list_employees(
    service: EmployeeService = Depends(get_employee_service),
) -> List[EmployeeResponse]:
    return await service.list_employees()


@router.get(
    "/{employee_id}",
    response_model=EmployeeResponse,
    responses={**NOT_FOUND, **SERVER_ERROR},
    summary="Get a single employee by ID",
)
async def get_employee(
    employee_id: int,
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeResponse:
    return await service.get_employee(employee_id)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=EmployeeResponse,
    responses={**SERVER_ERROR},
    summary="Create an employee",
)
async def create_employee(
    payload: EmployeeCreate,
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeResponse:
    """
    Create an employee.

    The response carries the id assigned by the database together with the
    submitted name and salary.
    """
    return await service.create_employee(payload)


@router.api_route(
    "/{employee_id}",
    methods=["PATCH", "PUT"],
    response_model=EmployeeResponse,
    responses={**NOT_FOUND, **SERVER_ERROR},
    summary="Update an employee",
)
async def update_employee(
    employee_id: int,
    payload: EmployeeUpdate,
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeResponse:
    """
    Partially update an employee.

    Fields left out of the body keep their stored value, so PUT and PATCH
    behave the same way.
    """
    return await service.update_employee(employee_id, payload)


@router.delete(
    "/{employee_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={**NOT_FOUND, **SERVER_ERROR},
    summary="Delete an employee",
)
async def delete_employee(
    employee_id: int,
    service: EmployeeService = Depends(get_employee_service),
) -> Response:
    await service.delete_employee(employee_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
