"""Procurement routes — orders (/api/procurement) and requests (/api/procurement-requests).

Invariants:
    - orderNumber / requestNumber unique: 409 on create, and on update unless
      the record keeps its own number
    - Decimal amounts accepted as numbers or strings, always returned as strings
"""


def _order(**overrides):
    return {
        "vendorName": "Siemens", "orderNumber": "PO-001", "amount": "45000.00",
        "projectId": 1, **overrides,
    }


def _request(**overrides):
    return {
        "requestNumber": "PR-001", "itemName": "Transformer", "category": "electrical",
        "projectId": 1, **overrides,
    }


async def test_create_order(client):
    res = await client.post("/api/procurement", json=_order(amount=45000))
    assert res.status_code == 201
    order = res.json()
    assert order["orderNumber"] == "PO-001"
    assert order["amount"] == "45000"
    assert order["status"] == "pending"


async def test_order_requires_amount(client):
    body = _order()
    del body["amount"]
    res = await client.post("/api/procurement", json=body)
    assert res.status_code == 400
    assert res.json() == {"error": "Invalid procurement order data"}


async def test_duplicate_order_number_returns_409(client):
    await client.post("/api/procurement", json=_order())
    res = await client.post("/api/procurement", json=_order(vendorName="ABB"))
    assert res.status_code == 409
    assert "PO-001" in res.json()["error"]
    assert len((await client.get("/api/procurement")).json()) == 1


async def test_update_order_keeping_own_number(client):
    order = (await client.post("/api/procurement", json=_order())).json()
    res = await client.put(
        f"/api/procurement/{order['id']}",
        json={"orderNumber": "PO-001", "status": "approved"},
    )
    assert res.status_code == 200
    assert res.json()["status"] == "approved"


async def test_update_order_to_taken_number_returns_409(client):
    await client.post("/api/procurement", json=_order())
    other = (await client.post("/api/procurement", json=_order(orderNumber="PO-002"))).json()
    res = await client.put(f"/api/procurement/{other['id']}", json={"orderNumber": "PO-001"})
    assert res.status_code == 409


async def test_orders_filter_by_project(client):
    await client.post("/api/procurement", json=_order())
    await client.post("/api/procurement", json=_order(orderNumber="PO-002", projectId=2))
    res = await client.get("/api/procurement", params={"projectId": 2})
    assert [o["orderNumber"] for o in res.json()] == ["PO-002"]


async def test_order_missing_returns_404(client):
    res = await client.get("/api/procurement/3")
    assert res.status_code == 404
    assert res.json() == {"error": "Procurement order not found"}
    assert (await client.delete("/api/procurement/3")).status_code == 404


async def test_delete_order(client):
    order = (await client.post("/api/procurement", json=_order())).json()
    assert (await client.delete(f"/api/procurement/{order['id']}")).status_code == 204
    assert (await client.get(f"/api/procurement/{order['id']}")).status_code == 404


async def test_create_request_defaults(client):
    res = await client.post("/api/procurement-requests", json=_request())
    assert res.status_code == 201
    req = res.json()
    assert req["status"] == "draft"
    assert req["urgency"] == "medium"
    assert req["quantity"] == 1
    assert req["specifications"] == {}
    assert req["preferredVendors"] == []


async def test_request_rejects_zero_quantity(client):
    res = await client.post("/api/procurement-requests", json=_request(quantity=0))
    assert res.status_code == 400
    assert res.json() == {"error": "Invalid procurement request data"}


async def test_duplicate_request_number_returns_409(client):
    await client.post("/api/procurement-requests", json=_request())
    res = await client.post("/api/procurement-requests", json=_request(itemName="Cable"))
    assert res.status_code == 409


async def test_request_approval_flow(client):
    req = (await client.post(
        "/api/procurement-requests",
        json=_request(estimatedCost=12500.5, specifications={"rating": "40MVA"}),
    )).json()
    assert req["estimatedCost"] == "12500.5"

    res = await client.put(
        f"/api/procurement-requests/{req['id']}",
        json={"status": "approved", "approvedBy": 1},
    )
    assert res.status_code == 200
    approved = res.json()
    assert approved["status"] == "approved"
    assert approved["approvedBy"] == 1
    assert approved["specifications"] == {"rating": "40MVA"}


async def test_requests_filter_and_missing(client):
    await client.post("/api/procurement-requests", json=_request())
    assert (await client.get("/api/procurement-requests", params={"projectId": 5})).json() == []
    res = await client.put("/api/procurement-requests/9", json={"status": "submitted"})
    assert res.status_code == 404
    assert res.json() == {"error": "Procurement request not found"}


async def test_blank_project_filter_on_every_scoped_collection(client):
    await client.post("/api/procurement", json=_order())
    await client.post("/api/procurement-requests", json=_request())
    await client.post("/api/project-phases", json={"projectId": 1, "phaseName": "Design"})
    await client.post("/api/engineering", json={"title": "SLD", "documentType": "drawing"})
    for path in (
        "/api/procurement", "/api/procurement-requests",
        "/api/project-phases", "/api/engineering",
    ):
        res = await client.get(f"{path}?projectId=")
        assert res.status_code == 200, path
        assert len(res.json()) == 1, path
