"""File import routes — upload validation and background processing outcome.

Invariants:
    - Accepted upload → 201 with status "processing"; the job then settles
      the record to "completed" (or "failed") before the next read
    - No file → 400, disallowed type → 415, oversize → 413; no record created
"""

from httpx import ASGITransport, AsyncClient

from pmis.main import create_app
from pmis.services.import_processor import ImportProcessor

CSV = ("boq.csv", b"item,qty\ncable,10\n", "text/csv")


async def test_upload_accepted_as_processing(client):
    res = await client.post("/api/import", files={"file": CSV})
    assert res.status_code == 201
    record = res.json()
    assert record["status"] == "processing"
    assert record["fileName"] == "boq.csv"
    assert record["fileType"] == "text/csv"
    assert record["fileSize"] == len(CSV[1])
    assert record["uploadedBy"] == 1


async def test_upload_completes_in_background(client, processor):
    record = (await client.post("/api/import", files={"file": CSV})).json()

    res = await client.get(f"/api/import/{record['id']}")
    assert res.status_code == 200
    done = res.json()
    assert done["status"] == "completed"
    assert 1 <= done["processedData"]["records"] <= 100
    assert done["errorMessage"] is None
    assert processor.jobs[record["id"]].state == "succeeded"


async def test_processing_failure_marks_file_failed(storage, settings):
    async def explode(record, content):
        raise RuntimeError("corrupt workbook")

    failing = ImportProcessor(storage.imported_files, process=explode, delay_seconds=0)
    app = create_app(settings=settings, storage=storage, import_processor=failing)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        record = (await c.post("/api/import", files={"file": CSV})).json()
        res = await c.get(f"/api/import/{record['id']}")

    failed = res.json()
    assert failed["status"] == "failed"
    assert failed["errorMessage"] == "corrupt workbook"
    assert failed["processedData"] is None
    assert failing.jobs[record["id"]].state == "failed"


async def test_excel_and_pdf_accepted(client):
    xlsx = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
    for name, ctype in (("plan.xlsx", xlsx), ("old.xls", "application/vnd.ms-excel"),
                        ("datasheet.pdf", "application/pdf")):
        res = await client.post("/api/import", files={"file": (name, b"data", ctype)})
        assert res.status_code == 201, name


async def test_missing_file_returns_400(client):
    res = await client.post("/api/import", data={"note": "nothing attached"})
    assert res.status_code == 400
    assert res.json() == {"error": "No file uploaded"}
    assert (await client.get("/api/import")).json() == []


async def test_unsupported_type_returns_415(client):
    res = await client.post(
        "/api/import", files={"file": ("photo.png", b"\x89PNG", "image/png")},
    )
    assert res.status_code == 415
    assert "image/png" in res.json()["error"]
    assert (await client.get("/api/import")).json() == []


async def test_oversize_returns_413(storage, settings):
    small = settings.model_copy(update={"import_max_bytes": 8})
    app = create_app(settings=small, storage=storage)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        res = await c.post("/api/import", files={"file": CSV})
        assert res.status_code == 413
        assert (await c.get("/api/import")).json() == []


async def test_get_missing_import_returns_404(client):
    res = await client.get("/api/import/12")
    assert res.status_code == 404
    assert res.json() == {"error": "File not found"}


async def test_list_imports(client):
    await client.post("/api/import", files={"file": CSV})
    await client.post("/api/import", files={"file": ("b.pdf", b"%PDF", "application/pdf")})
    names = [f["fileName"] for f in (await client.get("/api/import")).json()]
    assert names == ["boq.csv", "b.pdf"]
