"""
Employee Controller
===================

FastAPI controller for employee management endpoints.

Handlers are plain functions: FastAPI runs them on its threadpool, one
worker thread per in-flight request, so blocking driver calls never stall
the event loop. The update handler is the exception: it reads the raw body
itself so the path id is checked before the body is decoded, then hands off
to the threadpool. Errors are raised as AppError subclasses and rendered by
the registered exception handlers.
"""
from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, Request, status
from starlette.concurrency import run_in_threadpool

from employee_api.application.dto.employee_dto import (
    EmployeeRequest,
    EmployeeResponse,
    ErrorResponse,
    MessageResponse,
)
from employee_api.application.services.employee_service import EmployeeService
from employee_api.api.v1.dependencies import get_employee_service

router = APIRouter(tags=["employees"])

_CLIENT_ERRORS = {400: {"model": ErrorResponse}}
_SERVER_ERRORS = {500: {"model": ErrorResponse}, 504: {"model": ErrorResponse}}


@router.get(
    "",
    response_model=List[EmployeeResponse],
    responses=_SERVER_ERRORS,
    summary="List employees",
    description="Get every stored employee, in the store's natural order.",
)
def list_employees(
    service: EmployeeService = Depends(get_employee_service),
) -> List[EmployeeResponse]:
    """List all employees."""
    employees = service.list_employees()
    return [EmployeeResponse.from_entity(employee) for employee in employees]


@router.get(
    "/{employee_id}",
    response_model=EmployeeResponse,
    responses={**_CLIENT_ERRORS, 404: {"model": ErrorResponse}, **_SERVER_ERRORS},
    summary="Get employee by ID",
)
def get_employee(
    employee_id: str,
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeResponse:
    """Get a specific employee by ID."""
    return EmployeeResponse.from_entity(service.get_employee(employee_id))


@router.post(
    "",
    response_model=EmployeeResponse,
    status_code=status.HTTP_201_CREATED,
    responses={**_CLIENT_ERRORS, **_SERVER_ERRORS},
    summary="Create an employee",
    description="""
    Create a new employee.

    Every field is validated before anything is stored. The identifier is
    generated by the database and returned as `_id`.
    """
)
def create_employee(
    payload: Dict[str, Any] = Body(...),
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeResponse:
    """Create a new employee."""
    employee = service.create_employee(payload)
    return EmployeeResponse.from_entity(employee)


@router.put(
    "/{employee_id}",
    response_model=MessageResponse,
    responses={**_CLIENT_ERRORS, **_SERVER_ERRORS},
    summary="Replace an employee",
    description="""
    Replace every field of an employee. Any id in the body is ignored.

    The path id is checked before the body is decoded. Reports success even
    when no employee has the given id.
    """,
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": EmployeeRequest.model_json_schema()}},
        }
    },
)
async def update_employee(
    employee_id: str,
    request: Request,
    service: EmployeeService = Depends(get_employee_service),
) -> MessageResponse:
    """Update an employee."""
    # Raw bytes only; decoding happens in the use case after the id check
    body = await request.body()
    await run_in_threadpool(service.update_employee, employee_id, body)
    return MessageResponse(message="Employee updated successfully")


@router.delete(
    "/{employee_id}",
    response_model=MessageResponse,
    responses={**_CLIENT_ERRORS, **_SERVER_ERRORS},
    summary="Delete an employee",
    description="Delete an employee. Deleting an id that doesn't exist also reports success.",
)
def delete_employee(
    employee_id: str,
    service: EmployeeService = Depends(get_employee_service),
) -> MessageResponse:
    """Delete an employee."""
    service.delete_employee(employee_id)
    return MessageResponse(message="Employee deleted successfully")
