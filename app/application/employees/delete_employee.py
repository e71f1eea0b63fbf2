"""
Use case: Remove an employee.

Input: DeleteEmployeeCommand (employee_id)
Output: True if the employee existed and was removed, False otherwise.
Side effects: Deletes one record.
Failure cases: None.
"""

import logging

from app.application.employees.dtos import DeleteEmployeeCommand
from app.domain.employees.ports import EmployeeRepository

logger = logging.getLogger(__name__)


class DeleteEmployeeUseCase:
    """Removes an employee after checking that it exists."""

    def __init__(self, employee_repo: EmployeeRepository) -> None:
        self._employee_repo = employee_repo

    def execute(self, command: DeleteEmployeeCommand) -> bool:
        """Delete the employee; return False if there was nothing to delete."""
        if not self._employee_repo.exists_by_id(command.employee_id):
            logger.warning("Delete skipped, employee not found: id=%d", command.employee_id)
            return False

        self._employee_repo.delete_by_id(command.employee_id)
        logger.info("Employee deleted: id=%d", command.employee_id)
        return True
