"""Domain vocabularies — wire values the dashboard depends on."""

from pmis.core.domain_types import (
    ACTIVE_PROJECT_STATUSES, ALLOWED_IMPORT_TYPES, ImportJobState, ImportStatus,
    PhaseStatus, ProjectStatus,
)


def test_project_status_values():
    assert [s.value for s in ProjectStatus] == [
        "planning", "in-progress", "review", "completed", "cancelled",
    ]


def test_active_statuses():
    assert ACTIVE_PROJECT_STATUSES == {"planning", "in-progress"}


def test_phase_status_uses_hyphenated_values():
    assert PhaseStatus.NOT_STARTED == "not-started"
    assert PhaseStatus.ON_HOLD == "on-hold"


def test_import_status_and_job_state_are_distinct_vocabularies():
    assert {s.value for s in ImportStatus} == {"processing", "completed", "failed"}
    assert ImportJobState.SUCCEEDED.value == "succeeded"
    assert "succeeded" not in {s.value for s in ImportStatus}


def test_allowed_import_types():
    assert "text/csv" in ALLOWED_IMPORT_TYPES
    assert "application/pdf" in ALLOWED_IMPORT_TYPES
    assert "image/png" not in ALLOWED_IMPORT_TYPES
