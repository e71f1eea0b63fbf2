"""
Domain entities for the employees bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

import math
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Optional


class SortDirection(Enum):
    """Ordering applied to a paginated listing."""

    ASC = "asc"
    DESC = "desc"


# Wire (camelCase) and attribute (snake_case) spellings of every sortable field.
SORTABLE_FIELDS: dict[str, str] = {
    "id": "id",
    "firstName": "first_name",
    "first_name": "first_name",
    "lastName": "last_name",
    "last_name": "last_name",
    "email": "email",
    "department": "department",
    "salary": "salary",
}


@dataclass(frozen=True)
class Employee:
    """A persisted employee record.

    ``id`` is None until the store assigns one on first save.
    """

    first_name: str
    last_name: str
    email: str
    department: str
    salary: Decimal
    id: Optional[int] = None


@dataclass(frozen=True)
class EmployeePayload:
    """Submitted employee data for a create or update, before validation.

    Carries no id. Every field may be missing so that validation can
    report all of them at once.
    """

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    department: Optional[str] = None
    salary: Optional[Decimal] = None


@dataclass(frozen=True)
class PageRequest:
    """Offset pagination and ordering for a listing.

    Attributes:
        page: Zero-based page index.
        size: Maximum number of records per page.
        sort_field: Attribute name of the Employee field to order by.
        direction: Ascending or descending order.
    """

    page: int = 0
    size: int = 10
    sort_field: str = "id"
    direction: SortDirection = SortDirection.ASC

    @property
    def offset(self) -> int:
        return self.page * self.size


@dataclass(frozen=True)
class Page:
    """A bounded, ordered slice of employees plus total-count metadata."""

    items: list[Employee]
    request: PageRequest
    total_elements: int = 0

    @property
    def number(self) -> int:
        return self.request.page

    @property
    def size(self) -> int:
        return self.request.size

    @property
    def total_pages(self) -> int:
        if self.request.size <= 0:
            return 0
        return math.ceil(self.total_elements / self.request.size)

    @property
    def number_of_elements(self) -> int:
        return len(self.items)

    @property
    def is_first(self) -> bool:
        return self.request.page == 0

    @property
    def is_last(self) -> bool:
        return self.request.page + 1 >= self.total_pages

    @property
    def is_empty(self) -> bool:
        return not self.items
