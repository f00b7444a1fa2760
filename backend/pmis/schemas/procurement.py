"""Procurement Schemas — purchase orders and the requests that precede them.

Invariants:
    - orderNumber and requestNumber are unique (checked by the routes, 409 on clash)
    - amount / estimatedCost are decimal strings
    - quantity >= 1
"""

from datetime import datetime
from typing import Any

from pydantic import Field

from pmis.core.domain_types import OrderStatus, RequestStatus, Urgency
from pmis.schemas.base import ApiModel, DecimalString, PartialModel, RecordMixin


# --- Orders ------------------------------------------------------------------

class ProcurementOrderCreate(ApiModel):
    project_id: int | None = None
    vendor_name: str = Field(min_length=1)
    order_number: str = Field(min_length=1, max_length=100)
    description: str | None = None
    amount: DecimalString
    status: OrderStatus = OrderStatus.PENDING
    order_date: datetime | None = None
    expected_delivery: datetime | None = None


class ProcurementOrderUpdate(PartialModel):
    non_nullable = frozenset({"vendor_name", "order_number", "amount", "status"})

    project_id: int | None = None
    vendor_name: str | None = Field(None, min_length=1)
    order_number: str | None = Field(None, min_length=1, max_length=100)
    description: str | None = None
    amount: DecimalString | None = None
    status: OrderStatus | None = None
    order_date: datetime | None = None
    expected_delivery: datetime | None = None


class ProcurementOrder(RecordMixin, ProcurementOrderCreate):
    pass


# --- Requests ----------------------------------------------------------------

class ProcurementRequestCreate(ApiModel):
    project_id: int | None = None
    request_number: str = Field(min_length=1, max_length=100)
    item_name: str = Field(min_length=1)
    item_description: str | None = None
    category: str = Field(min_length=1)
    quantity: int = Field(1, ge=1)
    estimated_cost: DecimalString | None = None
    urgency: Urgency = Urgency.MEDIUM
    justification: str | None = None
    budget_code: str | None = None
    specifications: dict[str, Any] = Field(default_factory=dict)
    preferred_vendors: list[str] = Field(default_factory=list)
    status: RequestStatus = RequestStatus.DRAFT
    requested_by: int | None = None
    approved_by: int | None = None
    required_date: datetime | None = None


class ProcurementRequestUpdate(PartialModel):
    non_nullable = frozenset({
        "request_number", "item_name", "category", "quantity", "urgency",
        "specifications", "preferred_vendors", "status",
    })

    project_id: int | None = None
    request_number: str | None = Field(None, min_length=1, max_length=100)
    item_name: str | None = Field(None, min_length=1)
    item_description: str | None = None
    category: str | None = Field(None, min_length=1)
    quantity: int | None = Field(None, ge=1)
    estimated_cost: DecimalString | None = None
    urgency: Urgency | None = None
    justification: str | None = None
    budget_code: str | None = None
    specifications: dict[str, Any] | None = None
    preferred_vendors: list[str] | None = None
    status: RequestStatus | None = None
    requested_by: int | None = None
    approved_by: int | None = None
    required_date: datetime | None = None


class ProcurementRequest(RecordMixin, ProcurementRequestCreate):
    pass
