"""
Shared fixtures for the employee service tests.
"""

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.domain.employees.entities import Employee, EmployeePayload
from app.infrastructure.employees.in_memory_repository import InMemoryEmployeeRepository
from app.infrastructure.employees.schema import build_engine, init_schema
from app.infrastructure.employees.sqlalchemy_repository import SqlAlchemyEmployeeRepository
from app.main import create_app


def make_payload(**overrides) -> EmployeePayload:
    """Build a valid John Doe payload, overriding any field."""
    fields = {
        "first_name": "John",
        "last_name": "Doe",
        "email": "johndoe@gmail.com",
        "department": "Marketing",
        "salary": Decimal("50000.00"),
    }
    fields.update(overrides)
    return EmployeePayload(**fields)


def make_employee(**overrides) -> Employee:
    """Build an unsaved John Doe record, overriding any field."""
    fields = {
        "first_name": "John",
        "last_name": "Doe",
        "email": "johndoe@gmail.com",
        "department": "Marketing",
        "salary": Decimal("50000.00"),
    }
    fields.update(overrides)
    return Employee(**fields)


@pytest.fixture
def test_settings() -> Settings:
    """Settings for an in-memory app with rate limiting off."""
    return Settings(storage_backend="memory", rate_limit_enabled=False, log_level="WARNING")


@pytest.fixture
def memory_repo() -> InMemoryEmployeeRepository:
    return InMemoryEmployeeRepository()


@pytest.fixture
def sql_repo() -> SqlAlchemyEmployeeRepository:
    """SQLAlchemy repository over a private in-memory SQLite database."""
    engine = build_engine("sqlite://")
    init_schema(engine)
    yield SqlAlchemyEmployeeRepository(engine)
    engine.dispose()


@pytest.fixture(params=["memory", "sql"])
def any_repo(request, memory_repo, sql_repo):
    """Each repository adapter in turn."""
    return memory_repo if request.param == "memory" else sql_repo


@pytest.fixture
def client(test_settings, memory_repo) -> TestClient:
    """API client backed by an empty in-memory store."""
    app = create_app(settings=test_settings, repository=memory_repo)
    with TestClient(app) as test_client:
        yield test_client
