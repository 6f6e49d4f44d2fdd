"""
Estimate pricing engine.

Turns rooms + dimensions + a PricingConfig into priced line items and totals.
Pure math: quantity × unit price per item, sum, tax, grand total.

Input:
    rooms: ["Living Room", "Kitchen", ...]
    dimensions: {"Living Room": {"length": 10, "width": 20, "sqft": 200}, ...}
    config: {"material_price": 8.0, "install_rate": 4.0, "tax_rate": 0.08}
Output:
    {"items": [EstimateItem, ...], "subtotal": float, "tax": float, "total": float}

Rounding happens at every step (item total → subtotal → tax → total),
never once at the end. Sequential rounding can move a result by a cent.
"""

import math
import uuid
from typing import Optional

MAX_ROOM_DIMENSION_FT = 200
SQFT_PER_LABOR_HOUR = 100


def round2(value: float) -> float:
    """Round half-up to the cent. NaN/inf, and values too large to scale, pass through unchanged."""
    scaled = value * 100
    if not math.isfinite(scaled):
        return value
    return math.floor(scaled + 0.5) / 100


def new_item_id() -> str:
    """Random UUID4 hex. Unique within a calculation, not stable across calls."""
    return uuid.uuid4().hex


def estimate_labor_hours(sqft: float):
    """One install hour per 100 sqft, rounded up."""
    hours = sqft / SQFT_PER_LABOR_HOUR
    if not math.isfinite(hours):
        return hours
    return math.ceil(hours)


def apply_ai_recommendation(config: dict, ai_recommendation: Optional[dict] = None) -> dict:
    """
    Scale material price and install rate by the AI adjustments.

    tax_rate is always copied from the original config. AI input never
    touches tax. Missing adjustments count as 0.
    """
    if not ai_recommendation:
        return dict(config)

    materials = ai_recommendation.get("materials") or {}
    labor = ai_recommendation.get("labor") or {}
    price_adjustment = materials.get("price_adjustment") or 0
    rate_adjustment = labor.get("rate_adjustment") or 0

    return {
        "material_price": config["material_price"] * (1 + price_adjustment),
        "install_rate": config["install_rate"] * (1 + rate_adjustment),
        "tax_rate": config["tax_rate"],
    }


def _room_sqft(dimensions: dict, room: str) -> float:
    dims = (dimensions or {}).get(room)
    if dims is None:
        return 0
    sqft = dims.get("sqft")
    return 0 if sqft is None else sqft


def _material_item(room: str, sqft: float, material_price: float,
                   material_type: str, material_grade: str) -> dict:
    return {
        "id": new_item_id(),
        "description": f"{material_type} Hardwood Flooring - {room}",
        "area": sqft,
        "unit_price": material_price,
        "quantity": sqft,
        "total": round2(sqft * material_price),
        "type": "material",
        "room": room,
        "material_type": material_type,
        "brand": f"Premium {material_grade}",
    }


def _labor_item(room: str, sqft: float, install_rate: float) -> dict:
    return {
        "id": new_item_id(),
        "description": f"Professional Installation - {room}",
        "area": sqft,
        "unit_price": install_rate,
        "quantity": sqft,
        "total": round2(sqft * install_rate),
        "type": "labor",
        "room": room,
        "labor_type": "Installation",
        "hourly_rate": install_rate,
        "hours": estimate_labor_hours(sqft),
    }


def calculate_estimate_items(rooms, dimensions, config, material_type,
                             material_grade, ai_recommendation=None) -> dict:
    """
    Price every room and total the estimate.

    Args:
        rooms: ordered room names. Empty/None → empty estimate.
        dimensions: {room: {"length", "width", "sqft"}}. A room with no entry
            prices at 0 sqft; validation is the caller's job (validate_estimate).
        config: {"material_price", "install_rate", "tax_rate"}.
        material_type: species label, e.g. "White Oak".
        material_grade: grade label, e.g. "Select".
        ai_recommendation: optional
            {"materials": {"price_adjustment"}, "labor": {"rate_adjustment"}}.

    Returns:
        {"items", "subtotal", "tax", "total"}: all material items (room order)
        followed by all labor items (room order).
    """
    if not rooms:
        return {"items": [], "subtotal": 0, "tax": 0, "total": 0}

    effective = apply_ai_recommendation(config, ai_recommendation)

    material_items = []
    labor_items = []
    for room in rooms:
        sqft = _room_sqft(dimensions, room)
        material_items.append(_material_item(
            room, sqft, effective["material_price"], material_type, material_grade,
        ))
        labor_items.append(_labor_item(room, sqft, effective["install_rate"]))

    items = material_items + labor_items
    subtotal = round2(sum(item["total"] for item in items))
    tax = round2(subtotal * config["tax_rate"])
    total = round2(subtotal + tax)

    return {
        "items": items,
        "subtotal": subtotal,
        "tax": tax,
        "total": total,
    }


def is_positive_number(value) -> bool:
    # bool is an int subclass; a checkbox value is not a measurement
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return value > 0


def validate_estimate(rooms, dimensions) -> dict:
    """
    Check every room has usable length/width before pricing.

    Stops at the first problem and returns a message naming the room.
    An empty room list is valid; pricing it yields an empty estimate.

    Returns:
        {"is_valid": True} or {"is_valid": False, "error": str}
    """
    if not rooms:
        return {"is_valid": True}

    dimensions = dimensions or {}
    for room in rooms:
        dims = dimensions.get(room)
        if dims is None:
            return {"is_valid": False, "error": f"Please add dimensions for {room}"}

        length = dims.get("length")
        width = dims.get("width")

        if not is_positive_number(length):
            return {"is_valid": False, "error": f"Please enter a valid length for {room}"}

        if not is_positive_number(width):
            return {"is_valid": False, "error": f"Please enter a valid width for {room}"}

        if length > MAX_ROOM_DIMENSION_FT or width > MAX_ROOM_DIMENSION_FT:
            return {
                "is_valid": False,
                "error": (
                    f"Room dimensions for {room} seem unusually large "
                    f"(max {MAX_ROOM_DIMENSION_FT}ft). Please verify."
                ),
            }

    return {"is_valid": True}
