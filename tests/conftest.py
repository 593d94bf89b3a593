# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from app.core.database import Store, get_store
from app.main import app


@pytest.fixture
def store():
    fresh = Store("sqlite://")
    yield fresh
    fresh.dispose()


@pytest.fixture
def client(store):
    # Every test starts from an empty store, ids counting from 1
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(client):
    def _make(name="João Silva", email="joao.silva@empresa.com"):
        r = client.post("/users", json={"name": name, "email": email})
        assert r.status_code == 201
        return r.json()
    return _make


@pytest.fixture
def make_ticket(client):
    def _make(user_id, description="Sistema lento"):
        r = client.post("/tickets", json={"userId": user_id, "description": description})
        assert r.status_code == 201
        return r.json()
    return _make
