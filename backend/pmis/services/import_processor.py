"""Import Processor — runs uploaded files through an injectable processing step.

Invariants:
    - Job lifecycle: queued -> processing -> succeeded | failed (no retries, no cancel)
    - The ImportedFile record mirrors the job: "processing" until the job ends,
      then "completed" with processedData or "failed" with errorMessage
    - A failing process function never propagates: the outcome is recorded instead
    - At most max_finished_jobs finished jobs are retained, oldest evicted first;
      the ImportedFile record keeps the durable outcome

Design Decisions:
    - run() is scheduled as a FastAPI background task after the 201 response
    - The processing function is injected so tests can force either outcome
      and set delay_seconds=0 instead of waiting on a timer
    - Default simulate_processing keeps the prototype behaviour: no parsing,
      a random record count
"""

import asyncio
import logging
import random
from collections import deque
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Awaitable, Callable

from pmis.core.domain_types import ImportJobState, ImportStatus
from pmis.core.repository_protocols import EntityRepository
from pmis.schemas.imports import ImportedFile

logger = logging.getLogger(__name__)

ProcessFn = Callable[[ImportedFile, bytes], Awaitable[dict[str, Any]]]


async def simulate_processing(record: ImportedFile, content: bytes) -> dict[str, Any]:
    """Pretend to parse the file: report a random record count."""
    return {
        "records": random.randint(1, 100),
        "processed": datetime.now(timezone.utc).isoformat(),
    }


@dataclass
class ImportJob:
    file_id: int
    state: ImportJobState = ImportJobState.QUEUED
    error: str | None = None


class ImportProcessor:
    """Tracks import jobs and applies their outcome to ImportedFile records."""

    def __init__(
        self,
        files: EntityRepository[ImportedFile],
        process: ProcessFn = simulate_processing,
        delay_seconds: float = 2.0,
        max_finished_jobs: int = 100,
    ):
        self._files = files
        self._process = process
        self._delay_seconds = delay_seconds
        self._max_finished_jobs = max_finished_jobs
        self._finished: deque[int] = deque()
        self.jobs: dict[int, ImportJob] = {}

    def submit(self, file_id: int) -> ImportJob:
        job = ImportJob(file_id=file_id)
        self.jobs[file_id] = job
        return job

    async def run(self, file_id: int, content: bytes) -> ImportJob:
        job = self.jobs.get(file_id) or self.submit(file_id)
        job.state = ImportJobState.PROCESSING
        if self._delay_seconds > 0:
            await asyncio.sleep(self._delay_seconds)

        record = await self._files.get(file_id)
        if record is None:
            return self._finish(
                job, ImportJobState.FAILED, "Imported file record disappeared",
            )

        try:
            processed = await self._process(record, content)
        except Exception as e:
            logger.warning(
                f"Import processing failed: {e}",
                extra={"file_id": file_id, "job_state": ImportJobState.FAILED.value},
                exc_info=True,
            )
            await self._files.update(file_id, {
                "status": ImportStatus.FAILED.value, "error_message": str(e),
            })
            return self._finish(job, ImportJobState.FAILED, str(e))

        await self._files.update(file_id, {
            "status": ImportStatus.COMPLETED.value, "processed_data": processed,
        })
        logger.info(
            "Import processing completed",
            extra={"file_id": file_id, "job_state": ImportJobState.SUCCEEDED.value},
        )
        return self._finish(job, ImportJobState.SUCCEEDED)

    def _finish(
        self, job: ImportJob, state: ImportJobState, error: str | None = None,
    ) -> ImportJob:
        job.state = state
        job.error = error
        self._finished.append(job.file_id)
        while len(self._finished) > self._max_finished_jobs:
            evicted = self._finished.popleft()
            if evicted in self.jobs and self.jobs[evicted].state in (
                ImportJobState.SUCCEEDED, ImportJobState.FAILED,
            ):
                del self.jobs[evicted]
        return job
