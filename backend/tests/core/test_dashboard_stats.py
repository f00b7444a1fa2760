"""Tests for compute_dashboard_stats — pure aggregation, no IO."""

from types import SimpleNamespace

from pmis.core.dashboard_stats import (
    compute_dashboard_stats, format_millions, parse_amount, round_half_up,
)


def _project(status="planning", budget=None, progress=0):
    return SimpleNamespace(status=status, budget=budget, progress=progress)


def test_no_projects_returns_zero_stats():
    stats = compute_dashboard_stats([], team_members=1)
    assert stats == {
        "active_projects": 0,
        "total_budget": "$0.0M",
        "completion_rate": 0,
        "team_members": 1,
    }


def test_active_counts_planning_and_in_progress_only():
    projects = [
        _project("planning"), _project("in-progress"), _project("review"),
        _project("completed"), _project("cancelled"),
    ]
    assert compute_dashboard_stats(projects, 1)["active_projects"] == 2


def test_total_budget_sums_in_millions():
    projects = [_project(budget="2000000"), _project(budget="1000000.00")]
    assert compute_dashboard_stats(projects, 1)["total_budget"] == "$3.0M"


def test_missing_and_unparsable_budgets_count_as_zero():
    projects = [
        _project(budget="1500000"), _project(budget=None),
        _project(budget="n/a"), _project(budget="inf"),
    ]
    assert compute_dashboard_stats(projects, 1)["total_budget"] == "$1.5M"


def test_completion_rate_is_mean_progress():
    projects = [_project(progress=0), _project(progress=50), _project(progress=100)]
    assert compute_dashboard_stats(projects, 1)["completion_rate"] == 50


def test_completion_rate_rounds_half_up():
    projects = [_project(progress=50), _project(progress=51)]
    assert compute_dashboard_stats(projects, 1)["completion_rate"] == 51


def test_status_enum_members_are_recognised():
    from pmis.core.domain_types import ProjectStatus
    projects = [_project(ProjectStatus.IN_PROGRESS)]
    assert compute_dashboard_stats(projects, 3)["active_projects"] == 1


def test_parse_amount_accepts_numbers_and_strings():
    assert parse_amount(12) == 12.0
    assert parse_amount("12.50") == 12.5
    assert parse_amount("") == 0.0
    assert parse_amount(object()) == 0.0


def test_format_millions_uses_one_decimal():
    assert format_millions(0) == "$0.0M"
    assert format_millions(2_340_000) == "$2.3M"


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(2.49) == 2
    assert round_half_up(0) == 0
