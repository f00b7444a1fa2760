"""Project routes — CRUD over /api/projects with the {"error": ...} envelope.

Invariants:
    - Create returns 201 with id, createdAt and defaults filled in
    - Partial update leaves unsent fields untouched
    - Missing ids → 404 {"error": "Project not found"}
    - Invalid bodies → 400 {"error": "Invalid project data"}
"""


async def _create(client, **overrides):
    body = {"name": "Substation expansion", "budget": "1200000", **overrides}
    res = await client.post("/api/projects", json=body)
    assert res.status_code == 201
    return res.json()


async def test_list_empty(client):
    res = await client.get("/api/projects")
    assert res.status_code == 200
    assert res.json() == []


async def test_create_returns_record_with_defaults(client):
    project = await _create(client)
    assert project["id"] == 1
    assert project["name"] == "Substation expansion"
    assert project["status"] == "planning"
    assert project["progress"] == 0
    assert project["priority"] == "medium"
    assert project["category"] == "general"
    assert project["objectives"] == []
    assert project["createdAt"] is not None


async def test_create_accepts_numeric_budget(client):
    project = await _create(client, budget=750000)
    assert project["budget"] == "750000"


async def test_create_then_get_round_trip(client):
    created = await _create(client, riskAssessment="moderate", stakeholders=["EPC"])
    res = await client.get(f"/api/projects/{created['id']}")
    assert res.status_code == 200
    assert res.json() == created


async def test_create_invalid_returns_400(client):
    res = await client.post("/api/projects", json={"description": "no name"})
    assert res.status_code == 400
    assert res.json() == {"error": "Invalid project data"}
    assert (await client.get("/api/projects")).json() == []


async def test_create_invalid_status_returns_400(client):
    res = await client.post("/api/projects", json={"name": "X", "status": "paused"})
    assert res.status_code == 400


async def test_get_missing_returns_404(client):
    res = await client.get("/api/projects/99")
    assert res.status_code == 404
    assert res.json() == {"error": "Project not found"}


async def test_non_integer_id_returns_400(client):
    res = await client.get("/api/projects/abc")
    assert res.status_code == 400
    assert res.json() == {"error": "Invalid request data"}


async def test_partial_update_keeps_other_fields(client):
    created = await _create(client, description="Phase 2")
    res = await client.put(f"/api/projects/{created['id']}", json={"progress": 40})
    assert res.status_code == 200
    updated = res.json()
    assert updated["progress"] == 40
    assert updated["name"] == created["name"]
    assert updated["description"] == "Phase 2"
    assert updated["budget"] == "1200000"
    assert updated["createdAt"] == created["createdAt"]


async def test_update_invalid_returns_400(client):
    created = await _create(client)
    res = await client.put(f"/api/projects/{created['id']}", json={"progress": 150})
    assert res.status_code == 400
    assert res.json() == {"error": "Invalid project data"}


async def test_update_null_name_returns_400(client):
    created = await _create(client)
    res = await client.put(f"/api/projects/{created['id']}", json={"name": None})
    assert res.status_code == 400


async def test_update_missing_returns_404(client):
    res = await client.put("/api/projects/42", json={"progress": 10})
    assert res.status_code == 404
    assert res.json() == {"error": "Project not found"}


async def test_delete_then_get_404(client):
    created = await _create(client)
    res = await client.delete(f"/api/projects/{created['id']}")
    assert res.status_code == 204
    assert res.content == b""
    assert (await client.get(f"/api/projects/{created['id']}")).status_code == 404


async def test_delete_missing_returns_404(client):
    res = await client.delete("/api/projects/7")
    assert res.status_code == 404


async def test_ids_not_reused_after_delete(client):
    first = await _create(client)
    await client.delete(f"/api/projects/{first['id']}")
    second = await _create(client)
    assert second["id"] == first["id"] + 1
