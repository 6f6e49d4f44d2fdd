import logging
from typing import Optional

from fastapi import APIRouter, HTTPException

from .. import schemas
from ..calculators.line_items import add_item, remove_item, retotal, update_item
from ..config import settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/line-items", tags=["line-items"])


def _tax_rate(tax_rate: Optional[float]) -> float:
    return tax_rate if tax_rate is not None else settings.DEFAULT_TAX_RATE


def _dump_items(items) -> list:
    return [item.model_dump(exclude_none=True) for item in items]


@router.post("/add", response_model=schemas.EstimateResult)
def add_line_item(request: schemas.LineItemAddRequest):
    try:
        items = add_item(
            _dump_items(request.items),
            request.item.model_dump(exclude_none=True),
            use_rooms=request.use_rooms,
            rooms=request.rooms,
        )
    except ValueError as e:
        logger.warning("Line item rejected: %s", e)
        raise HTTPException(status_code=400, detail=str(e))
    return retotal(items, _tax_rate(request.tax_rate))


@router.post("/update", response_model=schemas.EstimateResult)
def update_line_item(request: schemas.LineItemUpdateRequest):
    items = _dump_items(request.items)
    if not any(item["id"] == request.item.id for item in items):
        raise HTTPException(status_code=404, detail="Line item not found")
    try:
        items = update_item(items, request.item.model_dump(exclude_none=True), use_rooms=request.use_rooms)
    except ValueError as e:
        logger.warning("Line item update rejected: %s", e)
        raise HTTPException(status_code=400, detail=str(e))
    return retotal(items, _tax_rate(request.tax_rate))


@router.post("/remove", response_model=schemas.EstimateResult)
def remove_line_item(request: schemas.LineItemRemoveRequest):
    items = remove_item(_dump_items(request.items), request.item_id)
    return retotal(items, _tax_rate(request.tax_rate))


@router.post("/retotal", response_model=schemas.EstimateResult)
def retotal_line_items(request: schemas.RetotalRequest):
    """Subtotal / tax / total for an item list as submitted."""
    return retotal(_dump_items(request.items), _tax_rate(request.tax_rate))
