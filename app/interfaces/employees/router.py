"""
FastAPI router for the employees bounded context.

All routes delegate to use cases. No business logic here.
JSON types are checked by Pydantic schemas, field rules by the domain
validator. Error mapping is handled by centralized error handlers.
"""

from fastapi import APIRouter, Depends, Query, Response, status
from fastapi.responses import PlainTextResponse

from app.application.employees.create_employee import CreateEmployeeUseCase
from app.application.employees.delete_employee import DeleteEmployeeUseCase
from app.application.employees.dtos import (
    CreateEmployeeCommand,
    DeleteEmployeeCommand,
    GetEmployeeQuery,
    ListEmployeesQuery,
    UpdateEmployeeCommand,
)
from app.application.employees.get_employee import GetEmployeeUseCase
from app.application.employees.list_employees import ListEmployeesUseCase
from app.application.employees.update_employee import UpdateEmployeeUseCase
from app.core.config import Settings
from app.domain.employees.entities import Employee, EmployeePayload, Page
from app.interfaces.employees.dependencies import (
    get_create_employee_use_case,
    get_delete_employee_use_case,
    get_get_employee_use_case,
    get_list_employees_use_case,
    get_settings,
    get_update_employee_use_case,
)
from app.interfaces.employees.schemas import (
    EmployeePageResponse,
    EmployeeRequest,
    EmployeeResponse,
    ErrorResponse,
    SortResponse,
)

router = APIRouter(prefix="/employees", tags=["employees"])

FIELD_ERRORS_RESPONSE = {
    "description": "Invalid payload: field name to violation message",
    "content": {"application/json": {"example": {"firstName": "First name is mandatory"}}},
}


def _to_payload(request: EmployeeRequest) -> EmployeePayload:
    return EmployeePayload(
        first_name=request.first_name,
        last_name=request.last_name,
        email=request.email,
        department=request.department,
        salary=request.salary,
    )


def _to_response(employee: Employee) -> EmployeeResponse:
    return EmployeeResponse(
        id=employee.id,
        first_name=employee.first_name,
        last_name=employee.last_name,
        email=employee.email,
        department=employee.department,
        salary=employee.salary,
    )


def _parse_sort(sort: str) -> tuple[str, str]:
    """Split ``field,direction``; a bare field sorts ascending."""
    field, _, direction = sort.partition(",")
    return field.strip(), direction.strip() or "asc"


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_class=PlainTextResponse,
    responses={400: FIELD_ERRORS_RESPONSE},
    summary="Add an employee",
)
def add_employee(
    request: EmployeeRequest,
    use_case: CreateEmployeeUseCase = Depends(get_create_employee_use_case),
) -> PlainTextResponse:
    """Validate and store a new employee."""
    employee = use_case.execute(CreateEmployeeCommand(payload=_to_payload(request)))
    if employee is None:
        return PlainTextResponse(
            "Failed to add employee", status_code=status.HTTP_400_BAD_REQUEST
        )
    return PlainTextResponse(
        "Employee added successfully", status_code=status.HTTP_201_CREATED
    )


@router.get(
    "",
    response_model=EmployeePageResponse,
    responses={400: {"model": ErrorResponse}},
    summary="List employees",
    description="Page through employees. `sort` is `field,direction`, e.g. `lastName,desc`.",
)
def list_employees(
    page: int = Query(0, description="Zero-based page index"),
    size: int | None = Query(None, description="Page length"),
    sort: str = Query("id,asc", description="Sort field and direction"),
    use_case: ListEmployeesUseCase = Depends(get_list_employees_use_case),
    settings: Settings = Depends(get_settings),
) -> EmployeePageResponse:
    """Return one page of employees."""
    sort_field, sort_direction = _parse_sort(sort)
    result: Page = use_case.execute(
        ListEmployeesQuery(
            page=page,
            size=size if size is not None else settings.default_page_size,
            sort_field=sort_field,
            sort_direction=sort_direction,
        )
    )
    return EmployeePageResponse(
        content=[_to_response(e) for e in result.items],
        number=result.number,
        size=result.size,
        total_elements=result.total_elements,
        total_pages=result.total_pages,
        number_of_elements=result.number_of_elements,
        first=result.is_first,
        last=result.is_last,
        empty=result.is_empty,
        sort=SortResponse(
            field=sort_field,
            direction=result.request.direction.value,
        ),
    )


@router.get(
    "/{employee_id}",
    response_model=EmployeeResponse,
    responses={404: {"description": "Employee not found (empty body)"}},
    summary="Get an employee",
)
def get_employee(
    employee_id: int,
    use_case: GetEmployeeUseCase = Depends(get_get_employee_use_case),
):
    """Return one employee, or 404 with an empty body."""
    employee = use_case.execute(GetEmployeeQuery(employee_id=employee_id))
    if employee is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return _to_response(employee)


@router.put(
    "/{employee_id}",
    response_class=PlainTextResponse,
    responses={400: FIELD_ERRORS_RESPONSE, 404: {"description": "Employee not found"}},
    summary="Replace an employee",
)
def update_employee(
    employee_id: int,
    request: EmployeeRequest,
    use_case: UpdateEmployeeUseCase = Depends(get_update_employee_use_case),
) -> PlainTextResponse:
    """Overwrite every field of an existing employee."""
    updated = use_case.execute(
        UpdateEmployeeCommand(employee_id=employee_id, payload=_to_payload(request))
    )
    if not updated:
        return PlainTextResponse(
            "Failed to update employee", status_code=status.HTTP_404_NOT_FOUND
        )
    return PlainTextResponse("Employee updated successfully")


@router.delete(
    "/{employee_id}",
    response_class=PlainTextResponse,
    responses={404: {"description": "Employee not found"}},
    summary="Delete an employee",
)
def delete_employee(
    employee_id: int,
    use_case: DeleteEmployeeUseCase = Depends(get_delete_employee_use_case),
) -> PlainTextResponse:
    """Remove an employee."""
    deleted = use_case.execute(DeleteEmployeeCommand(employee_id=employee_id))
    if not deleted:
        return PlainTextResponse(
            "Failed to delete employee", status_code=status.HTTP_404_NOT_FOUND
        )
    return PlainTextResponse("Employee deleted successfully")
