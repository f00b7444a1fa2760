"""Entity schemas — camelCase wire format, decimal coercion, partial updates."""

import pytest
from pydantic import ValidationError

from pmis.schemas.procurement import ProcurementRequestCreate
from pmis.schemas.projects import ProjectCreate, ProjectUpdate
from pmis.schemas.tasks import TaskCreate
from pmis.schemas.users import UserCreate


def test_project_requires_name():
    with pytest.raises(ValidationError):
        ProjectCreate.model_validate({"description": "no name"})


def test_project_accepts_camel_case_and_applies_defaults():
    project = ProjectCreate.model_validate({"name": "Plant", "riskAssessment": "low"})
    assert project.risk_assessment == "low"
    assert project.status == "planning"
    assert project.progress == 0
    assert project.category == "general"
    assert project.objectives == []


def test_numeric_budget_is_stored_as_string():
    project = ProjectCreate.model_validate({"name": "Plant", "budget": 2000000})
    assert project.budget == "2000000"


def test_progress_is_bounded():
    with pytest.raises(ValidationError):
        ProjectCreate.model_validate({"name": "Plant", "progress": 101})


def test_unknown_status_rejected():
    with pytest.raises(ValidationError):
        TaskCreate.model_validate({"title": "Pour", "status": "blocked"})


def test_update_changes_contain_only_sent_fields():
    update = ProjectUpdate.model_validate({"progress": 40})
    assert update.changes() == {"progress": 40}


def test_update_allows_nulling_nullable_field():
    update = ProjectUpdate.model_validate({"description": None})
    assert update.changes() == {"description": None}


def test_update_rejects_null_for_required_field():
    with pytest.raises(ValidationError):
        ProjectUpdate.model_validate({"name": None})


def test_serialization_uses_camel_case():
    request = ProcurementRequestCreate.model_validate({
        "requestNumber": "PR-1", "itemName": "Valve", "category": "mechanical",
        "estimatedCost": 125.5,
    })
    dumped = request.model_dump(by_alias=True)
    assert dumped["requestNumber"] == "PR-1"
    assert dumped["estimatedCost"] == "125.5"
    assert dumped["preferredVendors"] == []


def test_user_email_must_look_like_an_address():
    with pytest.raises(ValidationError):
        UserCreate.model_validate({
            "username": "jo", "password": "x", "email": "nope", "fullName": "Jo",
        })
