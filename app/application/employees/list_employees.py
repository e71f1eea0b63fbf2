"""
Use case: List employees one page at a time.

Input: ListEmployeesQuery (page, size, sort_field, sort_direction)
Output: Page of employees with total-count metadata.
Side effects: None (read-only query).
Failure cases: InvalidPageRequestError for page < 0 or size <= 0,
InvalidSortError for an unknown field or direction.
"""

import logging

from app.application.employees.dtos import ListEmployeesQuery
from app.domain.employees.entities import (
    SORTABLE_FIELDS,
    Page,
    PageRequest,
    SortDirection,
)
from app.domain.employees.errors import InvalidPageRequestError, InvalidSortError
from app.domain.employees.ports import EmployeeRepository

logger = logging.getLogger(__name__)


class ListEmployeesUseCase:
    """Orchestrates a paginated, sorted employee listing."""

    def __init__(self, employee_repo: EmployeeRepository) -> None:
        """Initialize the use case.

        Args:
            employee_repo: Repository queried for the page.
        """
        self._employee_repo = employee_repo

    def execute(self, query: ListEmployeesQuery) -> Page:
        """Run the list employees use case.

        Args:
            query: Page index, page length and ordering.

        Returns:
            The requested page. A page past the last one is empty.
        """
        page_request = self._to_page_request(query)
        logger.info(
            "Listing employees: page=%d, size=%d, sort=%s,%s",
            page_request.page,
            page_request.size,
            page_request.sort_field,
            page_request.direction.value,
        )
        return self._employee_repo.find_all(page_request)

    @staticmethod
    def _to_page_request(query: ListEmployeesQuery) -> PageRequest:
        if query.page < 0 or query.size <= 0:
            raise InvalidPageRequestError(query.page, query.size)

        sort_field = SORTABLE_FIELDS.get(query.sort_field.strip())
        if sort_field is None:
            raise InvalidSortError(f"{query.sort_field},{query.sort_direction}")

        try:
            direction = SortDirection(query.sort_direction.strip().lower())
        except ValueError:
            raise InvalidSortError(
                f"{query.sort_field},{query.sort_direction}"
            ) from None

        return PageRequest(
            page=query.page,
            size=query.size,
            sort_field=sort_field,
            direction=direction,
        )
