"""
Pydantic schemas for employee API request/response bodies.

Field names are snake_case in Python and camelCase on the wire.
Request schemas only enforce JSON types: every field is optional so that
field rules are checked, and reported together, by the domain validator.
No business logic belongs here.
"""

from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel

# Salaries travel as JSON numbers, not strings.
JsonDecimal = Annotated[
    Decimal, PlainSerializer(float, return_type=float, when_used="json")
]


class CamelModel(BaseModel):
    """Base schema exposing camelCase aliases."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class EmployeeRequest(CamelModel):
    """Request schema for creating or replacing an employee.

    Attributes:
        first_name: Given name (2-50 chars).
        last_name: Family name (2-50 chars).
        email: Contact email address.
        department: Department name.
        salary: Non-negative amount, up to 10 integer and 2 fraction digits.
    """

    first_name: str | None = Field(default=None, examples=["John"])
    last_name: str | None = Field(default=None, examples=["Doe"])
    email: str | None = Field(default=None, examples=["johndoe@gmail.com"])
    department: str | None = Field(default=None, examples=["Marketing"])
    salary: Decimal | None = Field(default=None, examples=[50000.00])


class EmployeeResponse(CamelModel):
    """A stored employee."""

    id: int
    first_name: str
    last_name: str
    email: str
    department: str
    salary: JsonDecimal


class SortResponse(BaseModel):
    """Ordering applied to a page."""

    field: str
    direction: str


class EmployeePageResponse(CamelModel):
    """Response schema for the paginated employee listing."""

    content: list[EmployeeResponse]
    number: int
    size: int
    total_elements: int
    total_pages: int
    number_of_elements: int
    first: bool
    last: bool
    empty: bool
    sort: SortResponse


class ErrorResponse(BaseModel):
    """Error body for malformed requests and server faults."""

    error: str
    message: str | None = None


class HealthResponse(BaseModel):
    """Response schema for the health endpoint."""

    status: str
    version: str
    storage: str
