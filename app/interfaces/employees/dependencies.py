"""
Dependency injection for the employees bounded context.

Builds the repository once per application and hands it to use cases via
constructor injection. The repository lives on ``app.state`` so that tests
can supply their own when creating the app.
"""

from fastapi import Depends, Request
from sqlalchemy.engine import Engine

from app.application.employees.create_employee import CreateEmployeeUseCase
from app.application.employees.delete_employee import DeleteEmployeeUseCase
from app.application.employees.get_employee import GetEmployeeUseCase
from app.application.employees.list_employees import ListEmployeesUseCase
from app.application.employees.update_employee import UpdateEmployeeUseCase
from app.core.config import Settings
from app.domain.employees.ports import EmployeeRepository
from app.infrastructure.employees.in_memory_repository import InMemoryEmployeeRepository
from app.infrastructure.employees.schema import build_engine
from app.infrastructure.employees.sqlalchemy_repository import SqlAlchemyEmployeeRepository


def build_employee_repository(
    settings: Settings,
) -> tuple[EmployeeRepository, Engine | None]:
    """Build the configured repository.

    Returns:
        The repository and, for the SQL backend, the engine behind it so the
        application can create the schema on startup and dispose of it on
        shutdown.
    """
    if settings.storage_backend == "memory":
        return InMemoryEmployeeRepository(), None
    engine = build_engine(settings.database_url, echo=settings.database_echo)
    return SqlAlchemyEmployeeRepository(engine), engine


def get_settings(request: Request) -> Settings:
    """Return the settings the running application was built with."""
    return request.app.state.settings


def get_employee_repository(request: Request) -> EmployeeRepository:
    """Return the repository shared by every request of this application."""
    return request.app.state.employee_repository


def get_create_employee_use_case(
    repo: EmployeeRepository = Depends(get_employee_repository),
) -> CreateEmployeeUseCase:
    """Build CreateEmployeeUseCase with its infrastructure dependencies."""
    return CreateEmployeeUseCase(employee_repo=repo)


def get_list_employees_use_case(
    repo: EmployeeRepository = Depends(get_employee_repository),
) -> ListEmployeesUseCase:
    """Build ListEmployeesUseCase with its infrastructure dependencies."""
    return ListEmployeesUseCase(employee_repo=repo)


def get_get_employee_use_case(
    repo: EmployeeRepository = Depends(get_employee_repository),
) -> GetEmployeeUseCase:
    """Build GetEmployeeUseCase with its infrastructure dependencies."""
    return GetEmployeeUseCase(employee_repo=repo)


def get_update_employee_use_case(
    repo: EmployeeRepository = Depends(get_employee_repository),
) -> UpdateEmployeeUseCase:
    """Build UpdateEmployeeUseCase with its infrastructure dependencies."""
    return UpdateEmployeeUseCase(employee_repo=repo)


def get_delete_employee_use_case(
    repo: EmployeeRepository = Depends(get_employee_repository),
) -> DeleteEmployeeUseCase:
    """Build DeleteEmployeeUseCase with its infrastructure dependencies."""
    return DeleteEmployeeUseCase(employee_repo=repo)
