"""
Data Transfer Objects for the employees application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass

from app.domain.employees.entities import EmployeePayload


@dataclass(frozen=True)
class CreateEmployeeCommand:
    """Input DTO for adding an employee.

    Attributes:
        payload: Submitted employee fields.
    """

    payload: EmployeePayload


@dataclass(frozen=True)
class UpdateEmployeeCommand:
    """Input DTO for fully replacing an employee.

    Attributes:
        employee_id: Id taken from the request path.
        payload: Submitted employee fields; every field overwrites the target.
    """

    employee_id: int
    payload: EmployeePayload


@dataclass(frozen=True)
class DeleteEmployeeCommand:
    """Input DTO for removing an employee."""

    employee_id: int


@dataclass(frozen=True)
class GetEmployeeQuery:
    """Input DTO for fetching a single employee."""

    employee_id: int


@dataclass(frozen=True)
class ListEmployeesQuery:
    """Input DTO for a paginated, sorted listing.

    Attributes:
        page: Zero-based page index.
        size: Page length.
        sort_field: Field name, wire (firstName) or attribute (first_name)
            spelling.
        sort_direction: "asc" or "desc", case-insensitive.
    """

    page: int = 0
    size: int = 10
    sort_field: str = "id"
    sort_direction: str = "asc"
