"""
Use case: Fetch one employee by id.

Input: GetEmployeeQuery (employee_id)
Output: Employee, or None when no record has that id.
Side effects: None (read-only query).
Failure cases: None.
"""

import logging
from typing import Optional

from app.application.employees.dtos import GetEmployeeQuery
from app.domain.employees.entities import Employee
from app.domain.employees.ports import EmployeeRepository

logger = logging.getLogger(__name__)


class GetEmployeeUseCase:
    """Read-only lookup of a single employee."""

    def __init__(self, employee_repo: EmployeeRepository) -> None:
        self._employee_repo = employee_repo

    def execute(self, query: GetEmployeeQuery) -> Optional[Employee]:
        """Return the employee with the requested id, or None."""
        employee = self._employee_repo.find_by_id(query.employee_id)
        if employee is None:
            logger.warning("Employee not found: id=%d", query.employee_id)
        return employee
