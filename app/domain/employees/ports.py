"""
Port interfaces (ABCs) for the employees bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Optional

from app.domain.employees.entities import Employee, Page, PageRequest


class EmployeeRepository(ABC):
    """Port for persisting and retrieving employee records."""

    @abstractmethod
    def save(self, employee: Employee) -> Employee:
        """Insert or fully replace an employee.

        Args:
            employee: Record to persist. When ``id`` is None a new record is
                inserted and the store assigns its id; otherwise the record
                with that id is overwritten.

        Returns:
            The stored record, always carrying an id.
        """
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, employee_id: int) -> Optional[Employee]:
        """Return an employee by its ID, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    def find_all(self, page_request: PageRequest) -> Page:
        """Return one page of employees.

        Records are ordered by ``page_request.sort_field`` in the requested
        direction, ties broken by ascending id. A page past the end is empty.
        """
        raise NotImplementedError

    @abstractmethod
    def exists_by_id(self, employee_id: int) -> bool:
        """Return True if an employee with this ID is stored."""
        raise NotImplementedError

    @abstractmethod
    def delete_by_id(self, employee_id: int) -> None:
        """Remove the employee with this ID."""
        raise NotImplementedError
