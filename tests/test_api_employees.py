"""
Tests for the employee API endpoints.

Runs the FastAPI app through TestClient with an injected in-memory store.
Validates status codes, bodies, error mapping and middleware.
"""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.domain.employees.ports import EmployeeRepository
from app.main import create_app

JOHN = {
    "firstName": "John",
    "lastName": "Doe",
    "email": "johndoe@gmail.com",
    "department": "Marketing",
    "salary": 50000.00,
}

JANE = {
    "firstName": "Jane",
    "lastName": "Smith",
    "email": "janesmith@gmail.com",
    "department": "Sales",
    "salary": 60000.00,
}


def _only_id(client: TestClient) -> int:
    body = client.get("/api/employees").json()
    assert body["totalElements"] == 1
    return body["content"][0]["id"]


class TestEmployeeLifecycle:
    """End-to-end create, list, update, get and delete."""

    def test_full_scenario(self, client: TestClient) -> None:
        created = client.post("/api/employees", json=JOHN)
        assert created.status_code == 201
        assert created.text == "Employee added successfully"

        listing = client.get("/api/employees", params={"page": 0, "size": 10})
        assert listing.status_code == 200
        content = listing.json()["content"]
        assert len(content) == 1
        employee_id = content[0]["id"]
        assert content[0] == {"id": employee_id, **JOHN}

        updated = client.put(f"/api/employees/{employee_id}", json=JANE)
        assert updated.status_code == 200
        assert updated.text == "Employee updated successfully"

        fetched = client.get(f"/api/employees/{employee_id}")
        assert fetched.status_code == 200
        assert fetched.json() == {"id": employee_id, **JANE}

        deleted = client.delete(f"/api/employees/{employee_id}")
        assert deleted.status_code == 200
        assert deleted.text == "Employee deleted successfully"

        missing = client.get(f"/api/employees/{employee_id}")
        assert missing.status_code == 404
        assert missing.content == b""

    def test_payload_id_is_ignored(self, client: TestClient) -> None:
        client.post("/api/employees", json={**JOHN, "id": 999})
        assert _only_id(client) != 999

    def test_long_department_on_sqlite(self, sql_repo, test_settings: Settings) -> None:
        department = "Research and Development " * 20
        with TestClient(create_app(settings=test_settings, repository=sql_repo)) as client:
            created = client.post("/api/employees", json={**JOHN, "department": department})
            assert created.status_code == 201
            employee_id = _only_id(client)
            assert client.get(f"/api/employees/{employee_id}").json()["department"] == department


class TestValidationErrors:
    """Field rule violations return 400 with every failing field."""

    def test_create_reports_all_fields(self, client: TestClient) -> None:
        response = client.post(
            "/api/employees",
            json={"firstName": "J", "lastName": "", "email": "bad", "salary": -5},
        )
        assert response.status_code == 400
        assert response.json() == {
            "firstName": "First name must be between 2 and 50 characters",
            "lastName": "Last name is mandatory",
            "email": "Email should be valid",
            "department": "Department is mandatory",
            "salary": "Salary must be positive",
        }

    def test_salary_precision(self, client: TestClient) -> None:
        response = client.post("/api/employees", json={**JOHN, "salary": 12.345})
        assert response.status_code == 400
        assert response.json() == {"salary": "Salary must have maximum 10 digits and 2 decimals"}

    def test_update_validates_before_lookup(self, client: TestClient) -> None:
        response = client.put("/api/employees/42", json={**JANE, "email": ""})
        assert response.status_code == 400
        assert response.json() == {"email": "Email is mandatory"}


class TestMalformedRequests:
    """Bodies that cannot be read return 400 with an error/message pair."""

    def test_broken_json(self, client: TestClient) -> None:
        response = client.post(
            "/api/employees",
            content='{"firstName": "John",',
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        body = response.json()
        assert body["message"] == "Please provide the correct data type for each field."
        assert body["error"]

    def test_wrong_field_type(self, client: TestClient) -> None:
        response = client.post("/api/employees", json={**JOHN, "salary": "lots"})
        assert response.status_code == 400
        body = response.json()
        assert "salary" in body["error"]
        assert body["message"] == "Please provide the correct data type for each field."

    def test_non_numeric_path_id(self, client: TestClient) -> None:
        assert client.get("/api/employees/abc").status_code == 400

    def test_undecodable_body(self, client: TestClient) -> None:
        response = client.post(
            "/api/employees",
            content=b'{"firstName": "\xff\xfe"}',
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        body = response.json()
        assert body["error"]
        assert body["message"] == "Please provide the correct data type for each field."
        assert response.headers["X-Content-Type-Options"] == "nosniff"

    def test_unknown_route_keeps_stock_response(self, client: TestClient) -> None:
        response = client.get("/api/nowhere")
        assert response.status_code == 404
        assert response.json() == {"detail": "Not Found"}


class TestNotFound:
    """Operations on unknown ids answer 404 with fixed messages."""

    def test_get_missing(self, client: TestClient) -> None:
        response = client.get("/api/employees/77")
        assert response.status_code == 404
        assert response.content == b""

    def test_update_missing(self, client: TestClient) -> None:
        response = client.put("/api/employees/77", json=JANE)
        assert response.status_code == 404
        assert response.text == "Failed to update employee"

    def test_delete_missing(self, client: TestClient) -> None:
        response = client.delete("/api/employees/77")
        assert response.status_code == 404
        assert response.text == "Failed to delete employee"


class TestListing:
    """Pagination and sorting through the query string."""

    @pytest.fixture
    def seeded(self, client: TestClient) -> TestClient:
        for first, salary in [("Anna", 300), ("Bert", 100), ("Cleo", 200)]:
            client.post("/api/employees", json={**JOHN, "firstName": first, "salary": salary})
        return client

    def test_defaults(self, seeded: TestClient) -> None:
        body = seeded.get("/api/employees").json()
        assert body["number"] == 0
        assert body["size"] == 10
        assert body["totalElements"] == 3
        assert body["totalPages"] == 1
        assert body["first"] is True
        assert body["last"] is True
        assert body["sort"] == {"field": "id", "direction": "asc"}
        assert [e["firstName"] for e in body["content"]] == ["Anna", "Bert", "Cleo"]

    def test_sort_descending(self, seeded: TestClient) -> None:
        body = seeded.get("/api/employees", params={"sort": "salary,desc"}).json()
        assert [e["salary"] for e in body["content"]] == [300, 200, 100]

    def test_sort_without_direction_is_ascending(self, seeded: TestClient) -> None:
        body = seeded.get("/api/employees", params={"sort": "firstName"}).json()
        assert [e["firstName"] for e in body["content"]] == ["Anna", "Bert", "Cleo"]

    def test_second_page(self, seeded: TestClient) -> None:
        body = seeded.get("/api/employees", params={"page": 1, "size": 2}).json()
        assert [e["firstName"] for e in body["content"]] == ["Cleo"]
        assert body["numberOfElements"] == 1
        assert body["totalPages"] == 2
        assert body["last"] is True

    def test_out_of_range_page_is_empty(self, seeded: TestClient) -> None:
        response = seeded.get("/api/employees", params={"page": 9})
        assert response.status_code == 200
        assert response.json()["content"] == []
        assert response.json()["empty"] is True

    def test_unknown_sort_field(self, client: TestClient) -> None:
        response = client.get("/api/employees", params={"sort": "password,asc"})
        assert response.status_code == 400
        assert response.json()["error"] == "Invalid sort"

    def test_zero_size(self, client: TestClient) -> None:
        response = client.get("/api/employees", params={"size": 0})
        assert response.status_code == 400
        assert response.json()["error"] == "Invalid page request"


class TestCreateFailure:
    """Create reports failure when the store hands nothing back."""

    def test_store_returning_nothing(self, test_settings: Settings) -> None:
        repo = MagicMock(spec=EmployeeRepository)
        repo.save.return_value = None
        with TestClient(create_app(settings=test_settings, repository=repo)) as client:
            response = client.post("/api/employees", json=JOHN)
        assert response.status_code == 400
        assert response.text == "Failed to add employee"


class TestUnhandledFaults:
    """Store failures surface as 500 with the raw message."""

    def test_store_failure(self, test_settings: Settings) -> None:
        repo = MagicMock(spec=EmployeeRepository)
        repo.find_by_id.side_effect = RuntimeError("database is unavailable")
        app = create_app(settings=test_settings, repository=repo)
        with TestClient(app, raise_server_exceptions=False) as client:
            response = client.get("/api/employees/1")
        assert response.status_code == 500
        assert response.json() == {
            "error": "Internal server error",
            "message": "database is unavailable",
        }

    def test_store_failure_without_message(self, test_settings: Settings) -> None:
        repo = MagicMock(spec=EmployeeRepository)
        repo.find_by_id.side_effect = RuntimeError()
        app = create_app(settings=test_settings, repository=repo)
        with TestClient(app, raise_server_exceptions=False) as client:
            response = client.get("/api/employees/1")
        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error", "message": "RuntimeError"}

    def test_failure_response_carries_security_headers(self, test_settings: Settings) -> None:
        repo = MagicMock(spec=EmployeeRepository)
        repo.find_by_id.side_effect = RuntimeError("database is unavailable")
        app = create_app(settings=test_settings, repository=repo)
        with TestClient(app, raise_server_exceptions=False) as client:
            response = client.get("/api/employees/1")
        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "DENY"
        assert response.headers["Cache-Control"] == "no-store"


class TestSqlBackend:
    """The configured SQL backend creates its schema on startup."""

    def test_scenario_on_sqlite(self, tmp_path) -> None:
        settings = Settings(
            storage_backend="sql",
            database_url=f"sqlite:///{tmp_path / 'api.db'}",
            rate_limit_enabled=False,
        )
        with TestClient(create_app(settings=settings)) as client:
            assert client.post("/api/employees", json=JOHN).status_code == 201
            employee_id = _only_id(client)
            assert client.get(f"/api/employees/{employee_id}").json()["salary"] == 50000.0

    def test_values_beyond_integer_range_on_sqlite(self, sql_repo, test_settings: Settings) -> None:
        with TestClient(create_app(settings=test_settings, repository=sql_repo)) as client:
            assert client.post("/api/employees", json=JOHN).status_code == 201

            far_page = client.get("/api/employees", params={"page": 10**18, "size": 10})
            assert far_page.status_code == 200
            assert far_page.json()["content"] == []
            assert far_page.json()["totalElements"] == 1

            huge_size = client.get("/api/employees", params={"size": 10**19})
            assert huge_size.status_code == 200
            assert len(huge_size.json()["content"]) == 1

            assert client.get(f"/api/employees/{10**20}").status_code == 404
            assert client.put(f"/api/employees/{10**20}", json=JANE).status_code == 404
            assert client.delete(f"/api/employees/{10**20}").status_code == 404
            assert client.get("/api/employees").json()["totalElements"] == 1


class TestHealthAndMiddleware:
    """Health endpoint, security headers and rate limiting."""

    def test_health(self, client: TestClient) -> None:
        response = client.get("/api/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok", "version": "0.1.0", "storage": "memory"}

    def test_security_headers_present(self, client: TestClient) -> None:
        response = client.get("/api/health")
        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "DENY"
        assert "Content-Security-Policy" in response.headers

    def test_rate_limit_returns_429(self, memory_repo) -> None:
        settings = Settings(
            storage_backend="memory", rate_limit_enabled=True, rate_limit_default="2/minute"
        )
        with TestClient(create_app(settings=settings, repository=memory_repo)) as client:
            statuses = [client.get("/api/health").status_code for _ in range(3)]
        assert statuses == [200, 200, 429]

    def test_rate_limit_covers_employee_routes(self, memory_repo) -> None:
        settings = Settings(
            storage_backend="memory", rate_limit_enabled=True, rate_limit_default="2/minute"
        )
        with TestClient(create_app(settings=settings, repository=memory_repo)) as client:
            client.get("/api/health")
            client.get("/api/employees")
            response = client.get("/api/employees/1")
        assert response.status_code == 429
        body = response.json()
        assert body["error"] == "Rate limit exceeded"
        assert body["message"].endswith("exceeded")
        assert response.headers["X-Content-Type-Options"] == "nosniff"

    def test_rate_limit_disabled(self, client: TestClient) -> None:
        statuses = {client.get("/api/health").status_code for _ in range(5)}
        assert statuses == {200}
