"""Dashboard Stats — pure aggregation of portfolio figures for the dashboard cards.

Invariants:
    - activeProjects counts projects in "planning" or "in-progress"
    - totalBudget is the sum of parsable budgets, rendered "$X.XM"
    - completionRate is the mean progress rounded half up; 0 with no projects
    - Never raises — missing or unparsable numbers count as 0
"""

import math
from collections.abc import Iterable
from typing import Any

from pmis.core.domain_types import ACTIVE_PROJECT_STATUSES


def parse_amount(value: Any) -> float:
    """Decimal string (or number) to float; anything unparsable is 0."""
    if value is None:
        return 0.0
    try:
        amount = float(value)
    except (TypeError, ValueError):
        return 0.0
    return amount if math.isfinite(amount) else 0.0


def format_millions(amount: float) -> str:
    return f"${amount / 1_000_000:.1f}M"


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def compute_dashboard_stats(projects: Iterable[Any], team_members: int) -> dict:
    """Compute dashboard figures from project records. Pure, no IO."""
    projects = list(projects)
    active = sum(1 for p in projects if _status_value(p.status) in ACTIVE_PROJECT_STATUSES)
    total_budget = sum(parse_amount(p.budget) for p in projects)
    if projects:
        mean_progress = sum(p.progress or 0 for p in projects) / len(projects)
    else:
        mean_progress = 0.0

    return {
        "active_projects": active,
        "total_budget": format_millions(total_budget),
        "completion_rate": round_half_up(mean_progress),
        "team_members": team_members,
    }


def _status_value(status: Any) -> Any:
    return getattr(status, "value", status)
