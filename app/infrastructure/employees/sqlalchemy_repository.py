"""
Adapter: Employee persistence over SQLAlchemy Core.

Implements the EmployeeRepository port.
Works with any database SQLAlchemy supports (SQLite, PostgreSQL, ...).
Each call runs in its own transaction.
"""

import logging
from dataclasses import replace
from typing import Optional

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.engine import Engine, Row

from app.domain.employees.entities import Employee, Page, PageRequest, SortDirection
from app.domain.employees.ports import EmployeeRepository
from app.infrastructure.employees.schema import employees_table

logger = logging.getLogger(__name__)

# Bounds of a signed 64-bit SQL integer; larger Python ints overflow the driver.
SQL_INTEGER_MIN = -(2**63)
SQL_INTEGER_MAX = 2**63 - 1


def _row_to_employee(row: Row) -> Employee:
    return Employee(
        id=row.id,
        first_name=row.first_name,
        last_name=row.last_name,
        email=row.email,
        department=row.department,
        salary=row.salary,
    )


def _fits_sql_integer(value: int) -> bool:
    return SQL_INTEGER_MIN <= value <= SQL_INTEGER_MAX


def _employee_values(employee: Employee) -> dict:
    return {
        "first_name": employee.first_name,
        "last_name": employee.last_name,
        "email": employee.email,
        "department": employee.department,
        "salary": employee.salary,
    }


class SqlAlchemyEmployeeRepository(EmployeeRepository):
    """Stores employees in the ``employees`` table.

    Implements the EmployeeRepository port defined in the domain layer.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def save(self, employee: Employee) -> Employee:
        """Insert a new employee or overwrite the row with the same id.

        Args:
            employee: Record to persist.

        Returns:
            The stored record carrying its id.
        """
        values = _employee_values(employee)
        with self._engine.begin() as conn:
            if employee.id is None:
                result = conn.execute(insert(employees_table).values(**values))
                employee_id = result.inserted_primary_key[0]
                logger.debug("Inserted employee row id=%s", employee_id)
                return replace(employee, id=employee_id)

            result = conn.execute(
                update(employees_table)
                .where(employees_table.c.id == employee.id)
                .values(**values)
            )
            if result.rowcount == 0:
                conn.execute(insert(employees_table).values(id=employee.id, **values))
        return employee

    def find_by_id(self, employee_id: int) -> Optional[Employee]:
        if not _fits_sql_integer(employee_id):
            return None
        query = select(employees_table).where(employees_table.c.id == employee_id)
        with self._engine.connect() as conn:
            row = conn.execute(query).first()
        return _row_to_employee(row) if row is not None else None

    def find_all(self, page_request: PageRequest) -> Page:
        """Return one page ordered by the requested column, then by id.

        An offset beyond the largest SQL integer lies past any stored row and
        yields an empty page; a larger size is capped at that integer.

        Args:
            page_request: Offset, limit and ordering.

        Returns:
            Page holding at most ``page_request.size`` employees.
        """
        column = employees_table.c[page_request.sort_field]
        ordering = column.desc() if page_request.direction is SortDirection.DESC else column.asc()
        query = (
            select(employees_table)
            .order_by(ordering, employees_table.c.id.asc())
            .limit(min(page_request.size, SQL_INTEGER_MAX))
            .offset(page_request.offset)
        )
        count_query = select(func.count()).select_from(employees_table)

        with self._engine.connect() as conn:
            total = conn.execute(count_query).scalar_one()
            if page_request.offset > SQL_INTEGER_MAX:
                rows = []
            else:
                rows = conn.execute(query).fetchall()

        return Page(
            items=[_row_to_employee(row) for row in rows],
            request=page_request,
            total_elements=total,
        )

    def exists_by_id(self, employee_id: int) -> bool:
        if not _fits_sql_integer(employee_id):
            return False
        query = select(employees_table.c.id).where(employees_table.c.id == employee_id)
        with self._engine.connect() as conn:
            return conn.execute(query).first() is not None

    def delete_by_id(self, employee_id: int) -> None:
        if not _fits_sql_integer(employee_id):
            return
        with self._engine.begin() as conn:
            conn.execute(delete(employees_table).where(employees_table.c.id == employee_id))
