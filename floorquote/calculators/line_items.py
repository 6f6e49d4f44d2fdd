"""
Manual line item edits on an existing estimate.

Add, update and remove EstimateItem dicts by id, re-deriving each item's
total as round2(quantity × unit_price), and re-total the estimate with the
same step-wise rounding as calculate_estimate_items.

All functions return new lists; the items passed in are never mutated.
"""

from typing import Optional

from .estimate_calculator import is_positive_number, new_item_id, round2

DEFAULT_ROOM = "Main Room"


def item_total(quantity: float, unit_price: float) -> float:
    """Line total, rounded to the cent."""
    return round2(quantity * unit_price)


def validate_item(item: dict, use_rooms: bool = False) -> None:
    """Raises ValueError with a user-facing message for the first bad field."""
    if not item.get("description"):
        raise ValueError("Description is required")
    if not is_positive_number(item.get("quantity")):
        raise ValueError("Quantity must be greater than 0")
    if not is_positive_number(item.get("unit_price")):
        raise ValueError("Unit price must be greater than 0")
    if use_rooms and not item.get("room"):
        raise ValueError("Room selection is required")


def add_item(items: list, item: dict, use_rooms: bool = False,
             rooms: Optional[list] = None) -> list:
    """
    Append a new item after filling defaults and pricing it.

    Defaults: fresh id, area 0, quantity 1, unit_price 0. A missing room is
    the first estimate room when pricing by room, otherwise "Main Room".
    Raises ValueError if the completed item fails validate_item.
    """
    if use_rooms and rooms:
        default_room = rooms[0]
    else:
        default_room = DEFAULT_ROOM

    new_item = {
        **item,
        "id": item.get("id") or new_item_id(),
        "area": item.get("area") or 0,
        "quantity": item.get("quantity") or 1,
        "unit_price": item.get("unit_price") or 0,
        "room": item.get("room") or default_room,
    }
    new_item["total"] = item_total(new_item["quantity"], new_item["unit_price"])

    validate_item(new_item, use_rooms)
    return [*items, new_item]


def update_item(items: list, updated: dict, use_rooms: bool = False) -> list:
    """
    Replace the item with the same id and recompute its total.

    Raises ValueError if the update fails validate_item or no item has that id.
    """
    validate_item(updated, use_rooms)

    item_id = updated.get("id")
    if not any(item["id"] == item_id for item in items):
        raise ValueError(f"Line item not found: {item_id}")

    total = item_total(updated["quantity"], updated["unit_price"])
    return [
        {**updated, "total": total} if item["id"] == item_id else item
        for item in items
    ]


def remove_item(items: list, item_id: str) -> list:
    """Drop the item with this id. Unknown ids are a no-op."""
    return [item for item in items if item["id"] != item_id]


def retotal(items: list, tax_rate: float) -> dict:
    """
    Subtotal, tax and total for an edited item list.

    Item totals are taken as stored; callers go through add_item/update_item
    to keep them in step with quantity × unit_price.
    """
    subtotal = round2(sum(item["total"] for item in items)) if items else 0
    tax = round2(subtotal * tax_rate)
    total = round2(subtotal + tax)
    return {
        "items": list(items),
        "subtotal": subtotal,
        "tax": tax,
        "total": total,
    }
