# routes.py
import json
import logging
import re
from typing import Optional

from fastapi import APIRouter, Request, Response
from pydantic import ValidationError

from inventory_api.schemas import ItemCreate, to_public

LOG = logging.getLogger("inventory")

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def parse_int(raw: str) -> Optional[int]:
    """Parse the leading integer of raw ("5abc" -> 5). None when there is none."""
    m = _LEADING_INT.match(raw)
    if m is None:
        return None
    return int(m.group(1))


def build_router(store) -> APIRouter:
    """Item routes bound to one data-access store."""
    router = APIRouter(tags=["items"])

    @router.post("/item")
    async def create_item(request: Request):
        body = await request.body()
        try:
            item = json.loads(body) if body else {}
        except ValueError as e:
            LOG.warning("Rejected item: malformed JSON body (%s)", e)
            return Response(status_code=400)

        try:
            validated = ItemCreate.model_validate(item)
        except ValidationError as e:
            LOG.warning("Rejected item %r: %s", item, e)
            return Response(status_code=400)

        # same keys as sent; whole-number floats arrive as ints
        item = validated.model_dump(exclude_unset=True)
        result = await store.insert_item(item)
        if not result.ok:
            LOG.error("Insert failed for item %r", item, exc_info=result.error)
            return Response(status_code=500)
        return Response(status_code=200)

    @router.get("/items")
    async def list_items():
        result = await store.get_items()
        if not result.ok:
            LOG.error("Listing items failed", exc_info=result.error)
            return Response(status_code=500)
        return [to_public(record) for record in result.value]

    @router.put("/item/{item_id}/quantity/{quantity}")
    async def update_quantity(item_id: str, quantity: str):
        delta = parse_int(quantity)
        if delta is None:
            LOG.warning("Rejected quantity update for %s: %r is not an integer", item_id, quantity)
            return Response(status_code=400)

        # applied as an increment, not a replacement
        result = await store.update_quantity(item_id, delta)
        if not result.ok:
            LOG.error("Quantity update failed for %s (delta=%d)", item_id, delta, exc_info=result.error)
            return Response(status_code=500)
        return Response(status_code=200)

    @router.delete("/item/{item_id}")
    async def delete_item(item_id: str):
        result = await store.delete_item(item_id)
        if not result.ok:
            LOG.error("Delete failed for %s", item_id, exc_info=result.error)
            return Response(status_code=500)
        return Response(status_code=200)

    return router
