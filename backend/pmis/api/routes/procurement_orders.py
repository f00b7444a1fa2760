"""Procurement Order Routes — CRUD over /api/procurement.

Invariants:
    - orderNumber is unique across orders: 409 on create/update clash
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, Response, status

from pmis.api.dependencies import get_storage
from pmis.api.routes.route_helpers import (
    ensure_unique, get_or_404, parse_body, project_id_filter,
)
from pmis.core.errors import ResourceNotFoundError
from pmis.infrastructure.storage import Storage
from pmis.schemas.procurement import (
    ProcurementOrder, ProcurementOrderCreate, ProcurementOrderUpdate,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/procurement", tags=["procurement"])

_LABEL = "procurement order"


@router.get("", response_model=list[ProcurementOrder])
async def list_orders(
    project_id: int | None = Depends(project_id_filter),
    storage: Storage = Depends(get_storage),
):
    return await storage.procurement_orders.list(project_id=project_id)


@router.get("/{order_id}", response_model=ProcurementOrder)
async def get_order(order_id: int, storage: Storage = Depends(get_storage)):
    return await get_or_404(storage.procurement_orders, order_id, "Procurement order")


@router.post("", response_model=ProcurementOrder, status_code=status.HTTP_201_CREATED)
async def create_order(
    payload: Any = Body(...), storage: Storage = Depends(get_storage),
):
    body = parse_body(ProcurementOrderCreate, payload, _LABEL)
    await ensure_unique(
        storage.procurement_orders, "order_number", body.order_number, "Order number",
    )
    order = await storage.procurement_orders.create(body.model_dump())
    logger.info(
        f"Procurement order {order.order_number} created",
        extra={"entity": "ProcurementOrder", "entity_id": order.id},
    )
    return order


@router.put("/{order_id}", response_model=ProcurementOrder)
async def update_order(
    order_id: int,
    payload: Any = Body(...),
    storage: Storage = Depends(get_storage),
):
    body = parse_body(ProcurementOrderUpdate, payload, _LABEL)
    changes = body.changes()
    await get_or_404(storage.procurement_orders, order_id, "Procurement order")
    await ensure_unique(
        storage.procurement_orders, "order_number", changes.get("order_number"),
        "Order number", exclude_id=order_id,
    )
    order = await storage.procurement_orders.update(order_id, changes)
    if order is None:
        raise ResourceNotFoundError("Procurement order", order_id)
    return order


@router.delete("/{order_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_order(order_id: int, storage: Storage = Depends(get_storage)):
    if not await storage.procurement_orders.delete(order_id):
        raise ResourceNotFoundError("Procurement order", order_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
