"""
API Routes for the Employee Record Manager

FastAPI endpoints for:
- Listing employees
- Creating, updating and deleting employee records
- Health check
"""
from fastapi import APIRouter, Depends, HTTPException, Response
from typing import List

from .schemas import EmployeeRecord, EmployeePayload, ErrorResponse, HealthResponse

from models.store import EmployeeStore, get_employee_store, NOT_FOUND_MESSAGE
from models.validation import DIGITS_PATTERN
import config

router = APIRouter()


def parse_employee_id(employee_id: str) -> int:
    """Path ids that are not plain ASCII digit strings cannot match any record"""
    if DIGITS_PATTERN.fullmatch(employee_id) is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND_MESSAGE)
    return int(employee_id)


def raise_for_result(result: dict):
    """Translate a failed store result into an HTTP error"""
    if result['success']:
        return
    if result.get('reason') == 'not_found':
        raise HTTPException(status_code=404, detail=result['message'])
    raise HTTPException(status_code=400, detail=result['message'])


@router.get("/health", response_model=HealthResponse)
async def health_check(store: EmployeeStore = Depends(get_employee_store)):
    """
    Health check endpoint
    """
    return HealthResponse(
        status="healthy",
        version=config.API_VERSION,
        employees=store.count()
    )


@router.get("/employees", response_model=List[EmployeeRecord])
async def list_employees(store: EmployeeStore = Depends(get_employee_store)):
    """
    Return every employee in store order
    """
    return store.list_employees()


@router.post(
    "/employees",
    response_model=EmployeeRecord,
    status_code=201,
    responses={400: {"model": ErrorResponse}}
)
async def create_employee(
    payload: EmployeePayload,
    store: EmployeeStore = Depends(get_employee_store)
):
    """
    Create a new employee

    All fields are validated; on any failure nothing is stored and the
    messages are returned joined in a single error string.
    """
    result = store.create_employee(payload.to_fields())
    raise_for_result(result)
    return result['employee']


@router.put(
    "/employees/{employee_id}",
    response_model=EmployeeRecord,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}}
)
async def update_employee(
    employee_id: str,
    payload: EmployeePayload,
    store: EmployeeStore = Depends(get_employee_store)
):
    """
    Replace an employee's fields (the full record must be resupplied)
    """
    result = store.update_employee(parse_employee_id(employee_id), payload.to_fields())
    raise_for_result(result)
    return result['employee']


@router.delete(
    "/employees/{employee_id}",
    status_code=204,
    responses={404: {"model": ErrorResponse}}
)
async def delete_employee(
    employee_id: str,
    store: EmployeeStore = Depends(get_employee_store)
):
    """
    Delete an employee; success has no response body
    """
    result = store.delete_employee(parse_employee_id(employee_id))
    raise_for_result(result)
    return Response(status_code=204)
