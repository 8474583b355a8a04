from fastapi.testclient import TestClient

from tests.conftest import auth_headers


def test_health_endpoint_is_available_for_client(app_client: TestClient):
    response = app_client.get("/health")
    assert response.status_code == 200
    payload = response.json()
    assert payload.get("status") == "ok"
    assert isinstance(payload.get("version"), str)


def test_system_info_endpoint_returns_backend_version(app_client: TestClient):
    auth_headers(app_client)
    response = app_client.get("/system/info")
    assert response.status_code == 200
    payload = response.json()
    assert isinstance(payload.get("app_name"), str)
    assert isinstance(payload.get("app_env"), str)
    assert isinstance(payload.get("app_version"), str)
    assert payload["teachers"] == 1
    assert payload["classes"] == 0


def test_group_work_contract_for_client_parsing(app_client: TestClient):
    headers = auth_headers(app_client)
    class_id = app_client.post("/classes", headers=headers, json={"name": "4A"}).json()["id"]

    create_response = app_client.post(
        "/group-works",
        headers=headers,
        json={"name": "Contract draft", "class_id": class_id, "groups": [], "behavior_ids": []},
    )
    assert create_response.status_code == 201, create_response.text

    items = app_client.get("/group-works", headers=headers).json()
    item = next((entry for entry in items if entry["id"] == create_response.json()["id"]), None)
    assert item is not None
    for key in ("id", "name", "teacher_id", "created_at"):
        assert isinstance(item.get(key), str)
    assert item["school_class"]["id"] == class_id
    assert item["groups"] == []
    assert item["behaviors"] == []


def test_error_body_shape_for_unknown_resource(app_client: TestClient):
    headers = auth_headers(app_client)
    response = app_client.get("/group-works/does-not-exist", headers=headers)
    assert response.status_code == 404
    payload = response.json()
    assert set(payload) == {"error", "code"}
    assert payload["code"] == "not_found"
