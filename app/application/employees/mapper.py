"""
Mapping between submitted payloads and employee records.
"""

from typing import Optional

from app.domain.employees.entities import Employee, EmployeePayload


def payload_to_employee(
    payload: EmployeePayload, employee_id: Optional[int] = None
) -> Employee:
    """Build a record from a validated payload.

    Args:
        payload: A payload that passed validation.
        employee_id: Id of the record being replaced, or None for a new one.

    Returns:
        An Employee carrying every payload field.
    """
    return Employee(
        id=employee_id,
        first_name=payload.first_name,
        last_name=payload.last_name,
        email=payload.email,
        department=payload.department,
        salary=payload.salary,
    )
