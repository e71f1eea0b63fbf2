"""
Adapter: Process-local employee store.

Implements the EmployeeRepository port with a dict guarded by a lock.
Data lives only as long as the process. Used for local runs
(STORAGE_BACKEND=memory) and tests.
"""

import itertools
import threading
from dataclasses import replace
from typing import Optional

from app.domain.employees.entities import Employee, Page, PageRequest, SortDirection
from app.domain.employees.ports import EmployeeRepository


class InMemoryEmployeeRepository(EmployeeRepository):
    """Keeps employees in memory, assigning ids from 1 upwards."""

    def __init__(self) -> None:
        self._employees: dict[int, Employee] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def save(self, employee: Employee) -> Employee:
        with self._lock:
            if employee.id is None:
                employee = replace(employee, id=next(self._ids))
            self._employees[employee.id] = employee
            return employee

    def find_by_id(self, employee_id: int) -> Optional[Employee]:
        with self._lock:
            return self._employees.get(employee_id)

    def find_all(self, page_request: PageRequest) -> Page:
        """Sort a snapshot of all employees and slice out the page.

        Python's sort is stable, so ordering by id first leaves ties on the
        sort field in ascending id order for both directions.
        """
        with self._lock:
            employees = sorted(self._employees.values(), key=lambda e: e.id)

        employees.sort(
            key=lambda e: getattr(e, page_request.sort_field),
            reverse=page_request.direction is SortDirection.DESC,
        )
        start = page_request.offset
        return Page(
            items=employees[start:start + page_request.size],
            request=page_request,
            total_elements=len(employees),
        )

    def exists_by_id(self, employee_id: int) -> bool:
        with self._lock:
            return employee_id in self._employees

    def delete_by_id(self, employee_id: int) -> None:
        with self._lock:
            self._employees.pop(employee_id, None)
