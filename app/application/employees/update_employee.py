"""
Use case: Fully replace an existing employee.

Input: UpdateEmployeeCommand (employee_id, payload)
Output: True if the employee existed and was replaced, False otherwise.
Side effects: Overwrites every field except the id of one record.
Failure cases: EmployeeValidationError if the payload violates a field rule.
"""

import logging

from app.application.employees.dtos import UpdateEmployeeCommand
from app.application.employees.mapper import payload_to_employee
from app.domain.employees.ports import EmployeeRepository
from app.domain.employees.validator import ensure_valid_payload

logger = logging.getLogger(__name__)


class UpdateEmployeeUseCase:
    """Orchestrates a full-replace update identified by the path id.

    The update is not a patch: fields absent from the payload fail
    validation rather than keeping their stored values.
    """

    def __init__(self, employee_repo: EmployeeRepository) -> None:
        """Initialize the use case.

        Args:
            employee_repo: Repository holding the record to replace.
        """
        self._employee_repo = employee_repo

    def execute(self, command: UpdateEmployeeCommand) -> bool:
        """Run the update employee use case.

        Args:
            command: Target id and replacement payload.

        Returns:
            True when the record was replaced, False when no record has
            the target id (nothing is written in that case).

        Raises:
            EmployeeValidationError: If any field constraint is violated.
        """
        ensure_valid_payload(command.payload)

        if not self._employee_repo.exists_by_id(command.employee_id):
            logger.warning("Update skipped, employee not found: id=%d", command.employee_id)
            return False

        self._employee_repo.save(
            payload_to_employee(command.payload, employee_id=command.employee_id)
        )
        logger.info("Employee updated: id=%d", command.employee_id)
        return True
