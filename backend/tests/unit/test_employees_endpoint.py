from __future__ import annotations

from employee_api.models.employee import Employee, EmployeeInput
from employee_api.services.errors import (
    EmployeeCreationError,
    EmployeeDeletionError,
    EmployeeNotFoundError,
    InvalidArgumentError,
    UpstreamError,
)

JOHN = Employee(id="1", name="John Doe", salary=50000, age=30, title="Developer", email="john@company.com")


def test_list_employees(service_client, fake_service):
    fake_service.list_all.return_value = [JOHN]

    response = service_client.get("/api/v1/employee")

    assert response.status_code == 200
    assert response.json() == [
        {"id": "1", "name": "John Doe", "salary": 50000, "age": 30, "title": "Developer", "email": "john@company.com"}
    ]


def test_list_employees_upstream_error(service_client, fake_service):
    fake_service.list_all.side_effect = UpstreamError("connection refused")

    response = service_client.get("/api/v1/employee")

    assert response.status_code == 500
    assert response.json()["detail"] == "Failed to retrieve employees"


def test_search_employees(service_client, fake_service):
    fake_service.search_by_name.return_value = [JOHN]

    response = service_client.get("/api/v1/employee/search/john")

    assert response.status_code == 200
    assert response.json()[0]["name"] == "John Doe"
    fake_service.search_by_name.assert_awaited_once_with("john")


def test_highest_salary(service_client, fake_service):
    fake_service.highest_salary.return_value = 75000

    response = service_client.get("/api/v1/employee/highestSalary")

    assert response.status_code == 200
    assert response.json() == 75000
    fake_service.get_by_id.assert_not_awaited()


def test_top_ten_names(service_client, fake_service):
    fake_service.top_ten_earner_names.return_value = ["Jane Smith", "John Doe"]

    response = service_client.get("/api/v1/employee/topTenHighestEarningEmployeeNames")

    assert response.status_code == 200
    assert response.json() == ["Jane Smith", "John Doe"]


def test_top_ten_names_upstream_error(service_client, fake_service):
    fake_service.top_ten_earner_names.side_effect = UpstreamError("timeout")

    response = service_client.get("/api/v1/employee/topTenHighestEarningEmployeeNames")

    assert response.status_code == 500


def test_get_employee(service_client, fake_service):
    fake_service.get_by_id.return_value = JOHN

    response = service_client.get("/api/v1/employee/1")

    assert response.status_code == 200
    assert response.json()["id"] == "1"


def test_get_employee_invalid_id(service_client, fake_service):
    fake_service.get_by_id.side_effect = InvalidArgumentError("Employee ID is null or empty")

    response = service_client.get("/api/v1/employee/%20")

    assert response.status_code == 400


def test_get_employee_not_found(service_client, fake_service):
    fake_service.get_by_id.side_effect = EmployeeNotFoundError("missing-id")

    response = service_client.get("/api/v1/employee/missing-id")

    assert response.status_code == 404
    assert "missing-id" in response.json()["detail"]


def test_get_employee_upstream_error(service_client, fake_service):
    fake_service.get_by_id.side_effect = UpstreamError("connection refused")

    response = service_client.get("/api/v1/employee/1")

    assert response.status_code == 500
    assert response.json()["detail"] == "Failed to retrieve employee"


def test_create_employee(service_client, fake_service):
    fake_service.create.return_value = JOHN
    body = {"name": "John Doe", "salary": 50000, "age": 30, "title": "Developer"}

    response = service_client.post("/api/v1/employee", json=body)

    assert response.status_code == 200
    assert response.json()["id"] == "1"
    fake_service.create.assert_awaited_once_with(EmployeeInput(**body))


def test_create_employee_missing_body(service_client, fake_service):
    fake_service.create.side_effect = InvalidArgumentError("Employee input cannot be null")

    response = service_client.post("/api/v1/employee")

    assert response.status_code == 400
    fake_service.create.assert_awaited_once_with(None)


def test_create_employee_invalid_body(service_client, fake_service):
    response = service_client.post("/api/v1/employee", json={"name": "John Doe", "salary": "lots"})

    assert response.status_code == 400
    fake_service.create.assert_not_awaited()


def test_create_employee_upstream_error(service_client, fake_service):
    fake_service.create.side_effect = UpstreamError("connection refused")

    response = service_client.post("/api/v1/employee", json={"name": "John Doe"})

    assert response.status_code == 500


def test_create_employee_creation_failed(service_client, fake_service):
    employee_input = EmployeeInput(name="John Doe")
    fake_service.create.side_effect = EmployeeCreationError(employee_input)

    response = service_client.post("/api/v1/employee", json={"name": "John Doe"})

    assert response.status_code == 500
    assert response.json()["detail"] == "Failed to create employee"


def test_delete_employee(service_client, fake_service):
    fake_service.delete_by_id.return_value = "John Doe"

    response = service_client.delete("/api/v1/employee/1")

    assert response.status_code == 200
    assert response.json() == "John Doe"


def test_delete_employee_invalid_id(service_client, fake_service):
    fake_service.delete_by_id.side_effect = InvalidArgumentError("Employee ID cannot be null or empty")

    response = service_client.delete("/api/v1/employee/%20")

    assert response.status_code == 400
    assert response.json()["detail"] == "Employee ID cannot be null or empty"


def test_delete_employee_not_found(service_client, fake_service):
    fake_service.delete_by_id.side_effect = EmployeeDeletionError("missing-id", EmployeeNotFoundError("missing-id"))

    response = service_client.delete("/api/v1/employee/missing-id")

    assert response.status_code == 404
    assert "missing-id" in response.json()["detail"]


def test_delete_employee_upstream_error(service_client, fake_service):
    fake_service.delete_by_id.side_effect = EmployeeDeletionError("1", UpstreamError("connection refused"))

    response = service_client.delete("/api/v1/employee/1")

    assert response.status_code == 500
    assert response.json()["detail"] == "Failed to delete employee"
