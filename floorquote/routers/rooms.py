from fastapi import APIRouter

from .. import schemas
from ..calculators.room_dimensions import new_room_dimension

router = APIRouter(prefix="/rooms", tags=["rooms"])


@router.post("/dimension", response_model=schemas.RoomDimension)
def room_dimension(request: schemas.DimensionRequest):
    """Square footage for a measured room."""
    return new_room_dimension(request.length, request.width)
