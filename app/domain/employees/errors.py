"""
Domain-specific errors for the employees bounded context.

All errors raised from the domain layer must be defined here.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.

A missing employee is not an error: operations report it through a
None or False result.
"""


class EmployeeDomainError(Exception):
    """Base error for all employee domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class EmployeeValidationError(EmployeeDomainError):
    """Raised when a payload violates one or more field constraints.

    Attributes:
        errors: Mapping of wire field name to violation message, one entry
            per violated field.
    """

    def __init__(self, errors: dict[str, str]) -> None:
        super().__init__(f"Invalid employee payload: {', '.join(sorted(errors))}")
        self.errors = dict(errors)


class InvalidPageRequestError(EmployeeDomainError):
    """Raised when a listing asks for a negative page or a non-positive size."""

    def __init__(self, page: int, size: int) -> None:
        super().__init__(
            f"Invalid page request: page={page}, size={size}. "
            "Page must be >= 0 and size must be > 0."
        )
        self.page = page
        self.size = size


class InvalidSortError(EmployeeDomainError):
    """Raised when a listing names an unknown sort field or direction."""

    def __init__(self, sort: str) -> None:
        super().__init__(f"Invalid sort criteria: {sort}")
        self.sort = sort
