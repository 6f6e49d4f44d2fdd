"""
Room list + dimension map bookkeeping.

The estimate calculator trusts the sqft it is handed. This module is the
one place that derives it: sqft = length × width, recomputed on every edit.
All functions return new containers and leave their inputs untouched.
"""

DIMENSION_FIELDS = ("length", "width")


def new_room_dimension(length: float = 0, width: float = 0) -> dict:
    """Dimension entry with sqft derived from length × width."""
    return {"length": length, "width": width, "sqft": length * width}


def add_room(rooms: list, dimensions: dict, room: str) -> tuple[list, dict]:
    """Append a room with zeroed dimensions. Raises ValueError on blank or duplicate names."""
    name = (room or "").strip()
    if not name:
        raise ValueError("Room name is required")
    if name in rooms:
        raise ValueError(f"Room already added: {name}")

    new_dimensions = dict(dimensions)
    new_dimensions[name] = new_room_dimension()
    return [*rooms, name], new_dimensions


def remove_room(rooms: list, dimensions: dict, room: str) -> tuple[list, dict]:
    """Drop a room from both the list and the map. Unknown rooms are a no-op."""
    new_rooms = [r for r in rooms if r != room]
    new_dimensions = {k: v for k, v in dimensions.items() if k != room}
    return new_rooms, new_dimensions


def update_room_dimension(dimensions: dict, room: str, field: str, value: float) -> dict:
    """
    Set length or width for a room and recompute its sqft.

    A room without an entry yet starts from zeroed dimensions.
    """
    if field not in DIMENSION_FIELDS:
        raise ValueError(
            f"Unknown dimension field: {field}. Expected one of {list(DIMENSION_FIELDS)}"
        )

    current = dimensions.get(room) or new_room_dimension()
    updated = {**current, field: value}
    updated["sqft"] = updated["length"] * updated["width"]

    new_dimensions = dict(dimensions)
    new_dimensions[room] = updated
    return new_dimensions


def total_area(rooms: list, dimensions: dict) -> float:
    """Sum of sqft across the listed rooms. Rooms without an entry count 0."""
    return sum((dimensions.get(room) or {}).get("sqft") or 0 for room in rooms or [])
