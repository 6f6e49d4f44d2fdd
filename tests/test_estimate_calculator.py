"""
Estimate pricing engine tests (calculate_estimate_items).

Tests:
1.    Empty room list returns an empty estimate
2-4.  Single room, whole numbers: items, hours, totals
5-6.  AI adjustment scales price/rate but never tax
7.    Missing dimensions price as 0 sqft, item still emitted
8.    Material items precede labor items, room order kept
9.    Aggregation is deterministic apart from ids
10-12. Step-wise rounding
13-15. Malformed or oversized numbers propagate instead of raising
"""

import math

from floorquote.calculators.estimate_calculator import (
    apply_ai_recommendation,
    calculate_estimate_items,
    estimate_labor_hours,
    round2,
)


# --- Fixtures ---

def _config():
    return {"material_price": 8, "install_rate": 4, "tax_rate": 0.08}


def _living_room():
    return {"Living Room": {"length": 10, "width": 20, "sqft": 200}}


def _ai_ten_percent():
    return {
        "materials": {"price_adjustment": 0.1},
        "labor": {"rate_adjustment": 0.1},
    }


def _three_rooms():
    rooms = ["Living Room", "Kitchen", "Hall"]
    dimensions = {
        "Living Room": {"length": 10, "width": 20, "sqft": 200},
        "Kitchen": {"length": 12, "width": 12, "sqft": 144},
        "Hall": {"length": 3, "width": 15, "sqft": 45},
    }
    return rooms, dimensions


# ============================================================
# 1. Empty input
# ============================================================

def test_empty_rooms_returns_empty_estimate():
    result = calculate_estimate_items([], {}, _config(), "Oak", "Select")
    assert result == {"items": [], "subtotal": 0, "tax": 0, "total": 0}


def test_none_rooms_returns_empty_estimate():
    result = calculate_estimate_items(None, None, _config(), "Oak", "Select")
    assert result == {"items": [], "subtotal": 0, "tax": 0, "total": 0}


# ============================================================
# 2-4. Single room
# ============================================================

def test_single_room_material_item():
    result = calculate_estimate_items(
        ["Living Room"], _living_room(), _config(), "White Oak", "Select",
    )
    material = result["items"][0]
    assert material["type"] == "material"
    assert material["description"] == "White Oak Hardwood Flooring - Living Room"
    assert material["material_type"] == "White Oak"
    assert material["brand"] == "Premium Select"
    assert material["area"] == 200
    assert material["quantity"] == 200
    assert material["unit_price"] == 8
    assert material["total"] == 1600.00
    assert material["room"] == "Living Room"


def test_single_room_labor_item():
    result = calculate_estimate_items(
        ["Living Room"], _living_room(), _config(), "White Oak", "Select",
    )
    labor = result["items"][1]
    assert labor["type"] == "labor"
    assert labor["description"] == "Professional Installation - Living Room"
    assert labor["labor_type"] == "Installation"
    assert labor["hourly_rate"] == 4
    assert labor["unit_price"] == 4
    assert labor["hours"] == 2
    assert labor["total"] == 800.00
    assert labor["room"] == "Living Room"
    assert "brand" not in labor


def test_single_room_totals():
    result = calculate_estimate_items(
        ["Living Room"], _living_room(), _config(), "White Oak", "Select",
    )
    assert len(result["items"]) == 2
    assert result["subtotal"] == 2400.00
    assert result["tax"] == 192.00
    assert result["total"] == 2592.00


# ============================================================
# 5-6. AI adjustment
# ============================================================

def test_ai_adjustment_applies_to_price_and_rate():
    result = calculate_estimate_items(
        ["Living Room"], _living_room(), _config(), "White Oak", "Select",
        _ai_ten_percent(),
    )
    material, labor = result["items"]
    assert math.isclose(material["unit_price"], 8.8)
    assert math.isclose(labor["unit_price"], 4.4)
    assert math.isclose(labor["hourly_rate"], 4.4)
    assert material["total"] == 1760.00
    assert labor["total"] == 880.00
    assert result["subtotal"] == 2640.00
    # Tax stays at the original 8%
    assert result["tax"] == 211.20
    assert result["total"] == 2851.20


def test_ai_adjustment_never_touches_tax_rate():
    effective = apply_ai_recommendation(_config(), _ai_ten_percent())
    assert effective["tax_rate"] == 0.08


def test_ai_adjustment_missing_values_count_as_zero():
    effective = apply_ai_recommendation(_config(), {"materials": {}, "labor": {"rate_adjustment": None}})
    assert effective == _config()


def test_ai_adjustment_does_not_mutate_config():
    config = _config()
    apply_ai_recommendation(config, _ai_ten_percent())
    assert config == _config()


# ============================================================
# 7. Missing dimension
# ============================================================

def test_missing_dimension_defaults_to_zero():
    result = calculate_estimate_items(
        ["Living Room", "Closet"], _living_room(), _config(), "White Oak", "Select",
    )
    closet_items = [i for i in result["items"] if i["room"] == "Closet"]
    assert len(closet_items) == 2
    for item in closet_items:
        assert item["area"] == 0
        assert item["quantity"] == 0
        assert item["total"] == 0
    closet_labor = [i for i in closet_items if i["type"] == "labor"][0]
    assert closet_labor["hours"] == 0
    assert result["subtotal"] == 2400.00


# ============================================================
# 8. Ordering
# ============================================================

def test_material_items_precede_labor_items():
    rooms, dimensions = _three_rooms()
    result = calculate_estimate_items(rooms, dimensions, _config(), "Maple", "Clear")
    items = result["items"]
    assert [i["type"] for i in items] == ["material"] * 3 + ["labor"] * 3
    assert [i["room"] for i in items[:3]] == rooms
    assert [i["room"] for i in items[3:]] == rooms


def test_item_ids_unique_within_call():
    rooms, dimensions = _three_rooms()
    result = calculate_estimate_items(rooms, dimensions, _config(), "Maple", "Clear")
    ids = [i["id"] for i in result["items"]]
    assert len(set(ids)) == len(ids)
    assert all(isinstance(i, str) and i for i in ids)


# ============================================================
# 9. Determinism
# ============================================================

def test_repeat_calculation_is_identical_except_ids():
    rooms, dimensions = _three_rooms()
    first = calculate_estimate_items(rooms, dimensions, _config(), "Maple", "Clear", _ai_ten_percent())
    second = calculate_estimate_items(rooms, dimensions, _config(), "Maple", "Clear", _ai_ten_percent())
    assert (first["subtotal"], first["tax"], first["total"]) == (
        second["subtotal"], second["tax"], second["total"],
    )
    strip = lambda items: [{k: v for k, v in i.items() if k != "id"} for i in items]
    assert strip(first["items"]) == strip(second["items"])


def test_inputs_are_not_mutated():
    rooms, dimensions = _three_rooms()
    config = _config()
    calculate_estimate_items(rooms, dimensions, config, "Maple", "Clear")
    assert (rooms, dimensions) == _three_rooms()
    assert config == _config()


# ============================================================
# 10-12. Rounding
# ============================================================

def test_round2_half_up():
    assert round2(0.125) == 0.13
    assert round2(0.375) == 0.38
    assert round2(1.5) == 1.5
    assert round2(1600) == 1600
    assert round2(-0.125) == -0.12


def test_item_totals_are_rounded_per_item():
    dimensions = {"Nook": {"length": 3.3, "width": 3.3, "sqft": 10.89}}
    config = {"material_price": 7.55, "install_rate": 3.35, "tax_rate": 0.0825}
    result = calculate_estimate_items(["Nook"], dimensions, config, "Red Oak", "#1 Common")
    material, labor = result["items"]
    assert material["total"] == round2(10.89 * 7.55)
    assert labor["total"] == round2(10.89 * 3.35)
    assert result["subtotal"] == round2(material["total"] + labor["total"])
    assert result["tax"] == round2(result["subtotal"] * 0.0825)
    assert result["total"] == round2(result["subtotal"] + result["tax"])


def test_hours_round_up_per_hundred_sqft():
    assert estimate_labor_hours(0) == 0
    assert estimate_labor_hours(1) == 1
    assert estimate_labor_hours(100) == 1
    assert estimate_labor_hours(101) == 2
    assert estimate_labor_hours(250.5) == 3


# ============================================================
# 13-14. Malformed input
# ============================================================

def test_nan_sqft_propagates():
    dimensions = {"Den": {"length": 0, "width": 0, "sqft": float("nan")}}
    result = calculate_estimate_items(["Den"], dimensions, _config(), "Walnut", "Select")
    assert math.isnan(result["items"][0]["total"])
    assert math.isnan(result["items"][1]["hours"])
    assert math.isnan(result["total"])


def test_huge_sqft_does_not_overflow():
    dimensions = {"Barn": {"length": 0, "width": 0, "sqft": 1e306}}
    config = {"material_price": 10, "install_rate": 4, "tax_rate": 0.08}
    result = calculate_estimate_items(["Barn"], dimensions, config, "Oak", "Select")
    # Too large to scale to cents: passed through unrounded
    assert result["items"][0]["total"] == 1e306 * 10
    assert result["items"][1]["total"] == 1e306 * 4
    assert math.isfinite(result["subtotal"])
    assert math.isfinite(result["total"])
    assert result["total"] > result["subtotal"]


def test_round2_passes_through_unscalable_values():
    assert round2(1e307) == 1e307
    assert round2(float("inf")) == float("inf")
    assert math.isnan(round2(float("nan")))


def test_negative_sqft_gives_negative_totals():
    dimensions = {"Den": {"length": -10, "width": 10, "sqft": -100}}
    result = calculate_estimate_items(["Den"], dimensions, _config(), "Walnut", "Select")
    assert result["items"][0]["total"] == -800.00
    assert result["items"][1]["total"] == -400.00
    assert result["subtotal"] == -1200.00
    assert result["tax"] == -96.00
    assert result["total"] == -1296.00
