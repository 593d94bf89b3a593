# tests/test_workflow.py
import asyncio
from concurrent.futures import ThreadPoolExecutor

import httpx

from app.core.database import get_store
from app.main import app


def test_full_helpdesk_flow(client):
    r = client.post("/users", json={"name": "João Silva", "email": "joao.silva@empresa.com"})
    assert r.status_code == 201
    assert r.json()["id"] == 1

    r = client.post("/tickets", json={"userId": 1, "description": "Sistema lento"})
    assert r.status_code == 201
    ticket = r.json()
    assert ticket["id"] == 1
    assert ticket["status"] == "Open"

    r = client.put("/tickets/1/status", json={"status": "In Progress"})
    assert r.status_code == 200
    assert r.json()["ticket"]["status"] == "In Progress"

    assert client.delete("/users/1").status_code == 200

    # The ticket outlives its user
    r = client.get("/tickets/1")
    assert r.status_code == 200
    assert r.json() == {**ticket, "status": "In Progress"}

    r = client.get("/users/1")
    assert r.status_code == 404
    assert r.json() == {"error": "User not found."}


def test_orphaned_ticket_stays_usable(client, make_user, make_ticket):
    user = make_user()
    ticket = make_ticket(user["id"])
    client.delete(f"/users/{user['id']}")

    r = client.get(f"/tickets/{ticket['id']}")
    assert r.status_code == 200
    assert r.json()["userId"] == user["id"]

    r = client.put(f"/tickets/{ticket['id']}/status", json={"status": "Closed"})
    assert r.status_code == 200
    assert r.json()["ticket"]["userId"] == user["id"]

    assert client.delete(f"/tickets/{ticket['id']}").status_code == 200


def test_created_at_survives_status_updates(client, make_user, make_ticket):
    ticket = make_ticket(make_user()["id"])
    for status in ["In Progress", "Pending", "Closed"]:
        r = client.put(f"/tickets/{ticket['id']}/status", json={"status": status})
        assert r.json()["ticket"]["createdAt"] == ticket["createdAt"]


def test_users_list_reflects_changes(client, make_user):
    user = make_user()
    assert [u["id"] for u in client.get("/users").json()] == [user["id"]]

    client.put(f"/users/{user['id']}", json={"name": "Renomeado"})
    assert client.get("/users").json()[0]["name"] == "Renomeado"

    client.delete(f"/users/{user['id']}")
    assert client.get("/users").json() == []


def test_errors_do_not_disturb_state(client, make_user, make_ticket):
    user = make_user()
    ticket = make_ticket(user["id"])

    client.post("/users", json={})
    client.post("/users", json={"name": user["name"], "email": "x@example.com"})
    client.post("/tickets", json={"userId": 999, "description": "D"})
    client.put("/tickets/999/status", json={"status": "Closed"})
    client.put(f"/tickets/{ticket['id']}/status", json={"status": ""})

    assert client.get("/users").json() == [user]
    assert client.get(f"/tickets/{ticket['id']}").json() == ticket
    # Rejected creates do not consume ids
    assert make_user("Novo", "novo@example.com")["id"] == 2
    assert make_ticket(user["id"])["id"] == 2


def test_concurrent_creates_get_distinct_ids(client):
    def create(i):
        return client.post("/users", json={"name": f"User {i}", "email": f"user{i}@example.com"})

    with ThreadPoolExecutor(max_workers=8) as pool:
        responses = list(pool.map(create, range(20)))

    assert all(r.status_code == 201 for r in responses)
    ids = sorted(r.json()["id"] for r in responses)
    assert ids == list(range(1, 21))


def test_unknown_path_uses_error_shape(client):
    r = client.get("/nope")
    assert r.status_code == 404
    assert r.json() == {"error": "Not found."}


def test_many_concurrent_creates_finish(store):
    # More requests in flight than the worker threadpool has threads
    count = 60

    async def create_all():
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as ac:
            return await asyncio.gather(
                *(ac.post("/users", json={"name": f"User {i}", "email": f"user{i}@example.com"}) for i in range(count))
            )

    app.dependency_overrides[get_store] = lambda: store
    try:
        responses = asyncio.run(asyncio.wait_for(create_all(), timeout=15))
    finally:
        app.dependency_overrides.clear()

    assert all(r.status_code == 201 for r in responses)
    assert sorted(r.json()["id"] for r in responses) == list(range(1, count + 1))
