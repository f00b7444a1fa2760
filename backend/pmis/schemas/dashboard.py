"""Dashboard Schemas — aggregate figures shown on the dashboard cards."""

from pmis.schemas.base import ApiModel


class DashboardStats(ApiModel):
    active_projects: int
    total_budget: str
    completion_rate: int
    team_members: int
