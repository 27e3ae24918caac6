import pytest

pytestmark = pytest.mark.anyio


async def test_profile_without_tasks(client):
    res = await client.get("/profile")
    assert res.status_code == 200
    assert res.json() == {
        "email": "alice@example.com",
        "name": "Alice",
        "totalTasks": 0,
        "completedTasks": 0,
        "completionRate": 0,
        "categories": {},
    }


async def test_profile_stats(client):
    milk = (await client.post("/tasks", json={"text": "Buy milk", "category": "Personal"})).json()
    report = (await client.post("/tasks", json={"text": "Finish report", "category": "Work"})).json()
    await client.post("/tasks", json={"text": "Stretch"})
    await client.patch("/tasks", json={"id": milk["id"], "completed": True})

    data = (await client.get("/profile")).json()
    assert data["totalTasks"] == 3
    assert data["completedTasks"] == 1
    assert data["completionRate"] == 33
    assert data["categories"] == {"Personal": 1, "Work": 1, "Uncategorized": 1}

    await client.request("DELETE", "/tasks", json={"id": report["id"]})
    data = (await client.get("/profile")).json()
    assert data["categories"] == {"Personal": 1, "Uncategorized": 1}
    assert data["completionRate"] == 50
