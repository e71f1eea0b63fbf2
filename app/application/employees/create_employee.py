"""
Use case: Add a new employee.

Input: CreateEmployeeCommand (payload)
Output: Employee (with store-assigned id)
Side effects: Inserts one record.
Failure cases: EmployeeValidationError if the payload violates a field rule.
"""

import logging

from app.application.employees.dtos import CreateEmployeeCommand
from app.application.employees.mapper import payload_to_employee
from app.domain.employees.entities import Employee
from app.domain.employees.ports import EmployeeRepository
from app.domain.employees.validator import ensure_valid_payload

logger = logging.getLogger(__name__)


class CreateEmployeeUseCase:
    """Orchestrates validating and persisting a new employee."""

    def __init__(self, employee_repo: EmployeeRepository) -> None:
        """Initialize the use case.

        Args:
            employee_repo: Repository the new record is saved to.
        """
        self._employee_repo = employee_repo

    def execute(self, command: CreateEmployeeCommand) -> Employee:
        """Run the create employee use case.

        Args:
            command: Carries the submitted payload.

        Returns:
            The stored employee.

        Raises:
            EmployeeValidationError: If any field constraint is violated.
        """
        ensure_valid_payload(command.payload)
        saved = self._employee_repo.save(payload_to_employee(command.payload))
        logger.info("Employee created: id=%s", saved.id if saved else None)
        return saved
