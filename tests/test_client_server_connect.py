from fastapi.testclient import TestClient

from tests.conftest import auth_headers


def test_health_endpoint_is_available_for_client(app_client: TestClient):
    response = app_client.get("/health")
    assert response.status_code == 200
    payload = response.json()
    assert payload.get("status") == "ok"
    assert isinstance(payload.get("version"), str)


def test_system_info_reports_store_backend(app_client: TestClient):
    response = app_client.get("/system/info")
    assert response.status_code == 200
    payload = response.json()
    assert isinstance(payload.get("app_name"), str)
    assert isinstance(payload.get("app_env"), str)
    assert payload.get("store_backend") in {"sql", "memory"}


def test_class_contract_for_client_parsing(app_client: TestClient):
    headers = auth_headers(app_client)
    response = app_client.post(
        "/classes",
        headers=headers,
        json={"name": "Contrato", "subject": "Ciências", "grade": "8º Ano", "students_count": "20"},
    )
    assert response.status_code == 201, response.text
    item = response.json()

    for key in ("id", "name", "subject", "grade", "created_at"):
        assert isinstance(item.get(key), str)
    assert item["students_count"] == 20
    assert item["description"] is None
    assert item["color"] is None


def test_activity_contract_for_client_parsing(app_client: TestClient):
    headers = auth_headers(app_client)
    class_id = app_client.post(
        "/classes",
        headers=headers,
        json={"name": "Contrato", "subject": "Ciências", "grade": "8º Ano", "students_count": 20},
    ).json()["id"]

    response = app_client.post(f"/classes/{class_id}/activities", headers=headers, json={"title": "Experimento"})
    assert response.status_code == 201, response.text
    item = response.json()
    assert item["class_id"] == class_id
    assert item["status"] == "pending"
    assert item["due_date"] is None
    assert isinstance(item["created_at"], str)
