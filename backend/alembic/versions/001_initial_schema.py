"""Initial schema — users, projects, tasks, procurement, phases, documents, imports, notifications.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-17

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

_AUTOINCREMENT = {"sqlite_autoincrement": True}

_INDEXED = (
    ("users", "username"),
    ("tasks", "project_id"),
    ("procurement_orders", "project_id"),
    ("procurement_orders", "order_number"),
    ("procurement_requests", "project_id"),
    ("procurement_requests", "request_number"),
    ("project_phases", "project_id"),
    ("engineering_documents", "project_id"),
    ("notifications", "user_id"),
)


def _id() -> sa.Column:
    return sa.Column("id", sa.Integer, primary_key=True, autoincrement=True)


def _created_at() -> sa.Column:
    return sa.Column("created_at", sa.DateTime(timezone=True), nullable=True)


def upgrade() -> None:
    op.create_table(
        "users",
        _id(),
        sa.Column("username", sa.String(100), nullable=False),
        sa.Column("password", sa.Text, nullable=False),
        sa.Column("email", sa.String(320), nullable=False),
        sa.Column("full_name", sa.Text, nullable=False),
        sa.Column("role", sa.String(50), nullable=False, server_default="user"),
        sa.Column("avatar", sa.Text, nullable=True),
        _created_at(),
        **_AUTOINCREMENT,
    )

    op.create_table(
        "projects",
        _id(),
        sa.Column("name", sa.String(500), nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("status", sa.String(20), nullable=False, server_default="planning"),
        sa.Column("progress", sa.Integer, nullable=False, server_default="0"),
        sa.Column("budget", sa.String(32), nullable=True),
        sa.Column("due_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("start_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("created_by", sa.Integer, nullable=True),
        sa.Column("category", sa.String(100), nullable=False, server_default="general"),
        sa.Column("priority", sa.String(20), nullable=False, server_default="medium"),
        sa.Column("objectives", sa.JSON, nullable=False),
        sa.Column("stakeholders", sa.JSON, nullable=False),
        sa.Column("milestones", sa.JSON, nullable=False),
        sa.Column("requirements", sa.Text, nullable=True),
        sa.Column("risk_assessment", sa.Text, nullable=True),
        _created_at(),
        **_AUTOINCREMENT,
    )

    op.create_table(
        "tasks",
        _id(),
        sa.Column("project_id", sa.Integer, nullable=True),
        sa.Column("title", sa.String(500), nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("status", sa.String(20), nullable=False, server_default="pending"),
        sa.Column("assigned_to", sa.Integer, nullable=True),
        sa.Column("due_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("priority", sa.String(20), nullable=False, server_default="medium"),
        _created_at(),
        **_AUTOINCREMENT,
    )

    op.create_table(
        "procurement_orders",
        _id(),
        sa.Column("project_id", sa.Integer, nullable=True),
        sa.Column("vendor_name", sa.Text, nullable=False),
        sa.Column("order_number", sa.String(100), nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("amount", sa.String(32), nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="pending"),
        sa.Column("order_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("expected_delivery", sa.DateTime(timezone=True), nullable=True),
        _created_at(),
        **_AUTOINCREMENT,
    )

    op.create_table(
        "procurement_requests",
        _id(),
        sa.Column("project_id", sa.Integer, nullable=True),
        sa.Column("request_number", sa.String(100), nullable=False),
        sa.Column("item_name", sa.Text, nullable=False),
        sa.Column("item_description", sa.Text, nullable=True),
        sa.Column("category", sa.String(100), nullable=False),
        sa.Column("quantity", sa.Integer, nullable=False, server_default="1"),
        sa.Column("estimated_cost", sa.String(32), nullable=True),
        sa.Column("urgency", sa.String(20), nullable=False, server_default="medium"),
        sa.Column("justification", sa.Text, nullable=True),
        sa.Column("budget_code", sa.String(100), nullable=True),
        sa.Column("specifications", sa.JSON, nullable=False),
        sa.Column("preferred_vendors", sa.JSON, nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="draft"),
        sa.Column("requested_by", sa.Integer, nullable=True),
        sa.Column("approved_by", sa.Integer, nullable=True),
        sa.Column("required_date", sa.DateTime(timezone=True), nullable=True),
        _created_at(),
        **_AUTOINCREMENT,
    )

    op.create_table(
        "project_phases",
        _id(),
        sa.Column("project_id", sa.Integer, nullable=False),
        sa.Column("phase_name", sa.Text, nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("start_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("end_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("dependencies", sa.JSON, nullable=False),
        sa.Column("deliverables", sa.JSON, nullable=False),
        sa.Column("budget", sa.String(32), nullable=True),
        sa.Column("progress", sa.Integer, nullable=False, server_default="0"),
        sa.Column("status", sa.String(20), nullable=False, server_default="not-started"),
        _created_at(),
        **_AUTOINCREMENT,
    )

    op.create_table(
        "engineering_documents",
        _id(),
        sa.Column("project_id", sa.Integer, nullable=True),
        sa.Column("title", sa.Text, nullable=False),
        sa.Column("document_type", sa.String(100), nullable=False),
        sa.Column("version", sa.String(20), nullable=False, server_default="1.0"),
        sa.Column("file_path", sa.Text, nullable=True),
        sa.Column("status", sa.String(20), nullable=False, server_default="draft"),
        sa.Column("created_by", sa.Integer, nullable=True),
        _created_at(),
        **_AUTOINCREMENT,
    )

    op.create_table(
        "imported_files",
        _id(),
        sa.Column("file_name", sa.Text, nullable=False),
        sa.Column("file_type", sa.String(200), nullable=False),
        sa.Column("file_size", sa.Integer, nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="processing"),
        sa.Column("processed_data", sa.JSON, nullable=True),
        sa.Column("error_message", sa.Text, nullable=True),
        sa.Column("uploaded_by", sa.Integer, nullable=True),
        _created_at(),
        **_AUTOINCREMENT,
    )

    op.create_table(
        "notifications",
        _id(),
        sa.Column("user_id", sa.Integer, nullable=True),
        sa.Column("title", sa.Text, nullable=False),
        sa.Column("message", sa.Text, nullable=False),
        sa.Column("type", sa.String(50), nullable=False, server_default="info"),
        sa.Column("read", sa.Boolean, nullable=False, server_default=sa.false()),
        _created_at(),
        **_AUTOINCREMENT,
    )

    for table, column in _INDEXED:
        op.create_index(f"ix_{table}_{column}", table, [column])


def downgrade() -> None:
    op.drop_table("notifications")
    op.drop_table("imported_files")
    op.drop_table("engineering_documents")
    op.drop_table("project_phases")
    op.drop_table("procurement_requests")
    op.drop_table("procurement_orders")
    op.drop_table("tasks")
    op.drop_table("projects")
    op.drop_table("users")
