"""
Field validation for employee payloads.

Every field is checked independently and all violations are reported in one
pass, keyed by the field name clients send. Each field reports only its first
failing rule. Validation is a pure function: it never touches the store and
never raises for a parseable payload.
"""

from decimal import Decimal
from typing import Optional

from email_validator import EmailNotValidError, validate_email

from app.domain.employees.entities import EmployeePayload
from app.domain.employees.errors import EmployeeValidationError

NAME_MIN_LEN = 2
NAME_MAX_LEN = 50
SALARY_MAX_INTEGER_DIGITS = 10
SALARY_MAX_FRACTION_DIGITS = 2


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def _check_name(value: Optional[str], label: str) -> Optional[str]:
    if _is_blank(value):
        return f"{label} is mandatory"
    if not NAME_MIN_LEN <= len(value) <= NAME_MAX_LEN:
        return f"{label} must be between {NAME_MIN_LEN} and {NAME_MAX_LEN} characters"
    return None


def _check_email(value: Optional[str]) -> Optional[str]:
    if _is_blank(value):
        return "Email is mandatory"
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return "Email should be valid"
    return None


def _check_department(value: Optional[str]) -> Optional[str]:
    if _is_blank(value):
        return "Department is mandatory"
    return None


def _salary_digits(value: Decimal) -> tuple[int, int]:
    """Return (integer digits, fraction digits) ignoring trailing zeros."""
    _, digits, exponent = value.normalize().as_tuple()
    fraction = max(-exponent, 0)
    integer = max(len(digits) + exponent, 0)
    return integer, fraction


def _check_salary(value: Optional[Decimal]) -> Optional[str]:
    if value is None:
        return "Salary is mandatory"
    if not value.is_finite():
        return "Salary must have maximum 10 digits and 2 decimals"
    if value < 0:
        return "Salary must be positive"
    integer, fraction = _salary_digits(value)
    if integer > SALARY_MAX_INTEGER_DIGITS or fraction > SALARY_MAX_FRACTION_DIGITS:
        return "Salary must have maximum 10 digits and 2 decimals"
    return None


def validate_employee_payload(payload: EmployeePayload) -> dict[str, str]:
    """Check a payload against every field constraint.

    Args:
        payload: The submitted employee data.

    Returns:
        An empty dict when the payload is valid, otherwise a mapping of
        field name (firstName, lastName, email, department, salary) to a
        human-readable violation message.
    """
    checks = {
        "firstName": _check_name(payload.first_name, "First name"),
        "lastName": _check_name(payload.last_name, "Last name"),
        "email": _check_email(payload.email),
        "department": _check_department(payload.department),
        "salary": _check_salary(payload.salary),
    }
    return {name: message for name, message in checks.items() if message}


def ensure_valid_payload(payload: EmployeePayload) -> None:
    """Raise EmployeeValidationError unless the payload is valid."""
    errors = validate_employee_payload(payload)
    if errors:
        raise EmployeeValidationError(errors)
