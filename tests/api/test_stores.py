from sqlalchemy.ext.asyncio import AsyncSession

from retail_planner.db.models import Store

AUSTIN = {"id": "ST1", "label": "Austin Flagship", "city": "Austin", "state": "TX"}

def test_list_stores(client, seed):
    seed(
        Store(id="ST2", label="Dallas", city="Dallas", state="TX"),
        Store(id="ST1", label="Austin Flagship", city="Austin", state="TX"),
    )
    response = client.get("/stores")
    assert response.status_code == 200
    assert [store["id"] for store in response.json()] == ["ST1", "ST2"]
    assert response.json()[0] == AUSTIN

def test_read_store(client, seed):
    seed(Store(**AUSTIN))
    assert client.get("/stores/ST1").json() == AUSTIN
    assert client.get("/stores/nope").status_code == 404

def test_create_and_delete_store(client):
    assert client.post("/stores", json=AUSTIN).status_code == 201
    assert client.post("/stores", json=AUSTIN).status_code == 409

    assert client.delete("/stores/ST1").status_code == 204
    assert client.get("/stores").json() == []
    assert client.delete("/stores/ST1").status_code == 404

def test_create_store_requires_fields(client):
    response = client.post("/stores", json={"id": "ST9", "label": "No city"})
    assert response.status_code == 422

def test_root_banner(client):
    response = client.get("/")
    assert response.status_code == 200
    assert "message" in response.json()

def test_create_store_conflict_after_stale_check(client, monkeypatch):
    assert client.post("/stores", json=AUSTIN).status_code == 201

    async def stale_get(self, *args, **kwargs):
        return None

    monkeypatch.setattr(AsyncSession, "get", stale_get)
    response = client.post("/stores", json=dict(AUSTIN, label="Austin Again"))
    monkeypatch.undo()

    assert response.status_code == 409
    assert client.get("/stores/ST1").json()["label"] == "Austin Flagship"
