"""Import Processor — job lifecycle and the ImportedFile outcome it records.

Invariants:
    - queued on submit, succeeded or failed after run
    - success: status "completed" with processedData
    - failure: status "failed" with errorMessage, exception never propagates
"""

import pytest

from pmis.core.domain_types import ImportJobState
from pmis.infrastructure.storage import build_memory_storage
from pmis.services.import_processor import ImportProcessor, simulate_processing


@pytest.fixture
async def files():
    storage = build_memory_storage()
    return storage.imported_files


@pytest.fixture
async def record(files):
    return await files.create({
        "file_name": "boq.csv", "file_type": "text/csv", "file_size": 12,
    })


async def test_submit_queues_job(files, record):
    processor = ImportProcessor(files, delay_seconds=0)
    job = processor.submit(record.id)
    assert job.state == ImportJobState.QUEUED
    assert processor.jobs[record.id] is job


async def test_successful_run_completes_record(files, record):
    async def process(rec, content):
        return {"records": len(content.splitlines())}

    processor = ImportProcessor(files, process=process, delay_seconds=0)
    processor.submit(record.id)
    job = await processor.run(record.id, b"a,b\n1,2\n")

    assert job.state == ImportJobState.SUCCEEDED
    stored = await files.get(record.id)
    assert stored.status == "completed"
    assert stored.processed_data == {"records": 2}
    assert stored.error_message is None


async def test_failing_run_marks_record_failed(files, record):
    async def process(rec, content):
        raise ValueError("unreadable spreadsheet")

    processor = ImportProcessor(files, process=process, delay_seconds=0)
    job = await processor.run(record.id, b"")

    assert job.state == ImportJobState.FAILED
    assert job.error == "unreadable spreadsheet"
    stored = await files.get(record.id)
    assert stored.status == "failed"
    assert stored.error_message == "unreadable spreadsheet"
    assert stored.processed_data is None


async def test_missing_record_fails_job(files):
    processor = ImportProcessor(files, delay_seconds=0)
    job = await processor.run(404, b"")
    assert job.state == ImportJobState.FAILED


async def test_simulate_processing_reports_record_count(record):
    data = await simulate_processing(record, b"")
    assert 1 <= data["records"] <= 100
    assert "processed" in data


async def test_default_processor_completes(files, record):
    processor = ImportProcessor(files, delay_seconds=0)
    await processor.run(record.id, b"x")
    stored = await files.get(record.id)
    assert stored.status == "completed"
    assert 1 <= stored.processed_data["records"] <= 100


async def test_finished_jobs_are_bounded(files):
    processor = ImportProcessor(files, delay_seconds=0, max_finished_jobs=2)
    ids = []
    for n in range(5):
        rec = await files.create({
            "file_name": f"f{n}.csv", "file_type": "text/csv", "file_size": 1,
        })
        ids.append(rec.id)
        processor.submit(rec.id)
        await processor.run(rec.id, b"x")

    assert sorted(processor.jobs) == ids[-2:]
    for file_id in ids:
        assert (await files.get(file_id)).status == "completed"


async def test_pending_jobs_survive_eviction(files):
    processor = ImportProcessor(files, delay_seconds=0, max_finished_jobs=1)
    waiting = processor.submit(999)
    for n in range(3):
        rec = await files.create({
            "file_name": f"f{n}.csv", "file_type": "text/csv", "file_size": 1,
        })
        await processor.run(rec.id, b"x")
    assert processor.jobs[999] is waiting
    assert len(processor.jobs) == 2
