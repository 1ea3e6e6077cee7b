# 라우터 테스트 (TestClient, 의존성 오버라이드로 DB 없이 실행)
import pytest
from fastapi.testclient import TestClient

from users_api.main import app
from users_api.services.user_service import get_user_service

@pytest.fixture
def client(service):
    app.dependency_overrides[get_user_service] = lambda: service
    # with 블록 없이 생성하면 startup(MongoDB 연결)은 실행되지 않는다
    yield TestClient(app)
    app.dependency_overrides.clear()

PAYLOAD = {
    "name": "Jane",
    "email": "jane@example.com",
    "password": "Hunter2Hunter2",
    "phones": [{"number": "12345678", "citycode": "1", "countrycode": "57"}],
}

def test_health(client):
    assert client.get("/health").json()["status"] == "ok"

def test_register_and_fetch(client):
    resp = client.post("/api/v1/users", json=PAYLOAD)
    assert resp.status_code == 201
    body = resp.json()
    assert body["token"]
    assert body["is_active"] is True
    assert "password" not in body

    fetched = client.get(f"/api/v1/users/{body['id']}")
    assert fetched.status_code == 200
    assert fetched.json()["email"] == "jane@example.com"
    assert "password" not in fetched.json()

def test_register_invalid_email(client):
    resp = client.post("/api/v1/users", json={**PAYLOAD, "email": "nope"})
    assert resp.status_code == 400
    assert resp.json() == {"message": "Invalid email"}

def test_register_duplicate(client):
    client.post("/api/v1/users", json=PAYLOAD)
    resp = client.post("/api/v1/users", json=PAYLOAD)
    assert resp.status_code == 400
    assert resp.json() == {"message": "Email already registered"}

def test_get_malformed_id_is_404(client):
    assert client.get("/api/v1/users/not-a-uuid").status_code == 404
