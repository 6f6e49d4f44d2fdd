import logging

from fastapi import APIRouter, HTTPException

from .. import schemas
from ..calculators.estimate_calculator import calculate_estimate_items, validate_estimate
from ..calculators.room_dimensions import new_room_dimension
from ..config import settings
from ..pricing_tiers import build_material_descriptor, build_pricing_config

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/estimates", tags=["estimates"])


@router.post("/validate", response_model=schemas.ValidationResult)
def validate(request: schemas.RoomsRequest):
    return validate_estimate(request.rooms, request.dimensions)


@router.post("/calculate", response_model=schemas.EstimateResult)
def calculate(request: schemas.CalculateRequest):
    """Price rooms with an explicit config. No validation, call /validate first."""
    dimensions = {room: dims.model_dump() for room, dims in request.dimensions.items()}
    ai_recommendation = request.ai_recommendation.model_dump() if request.ai_recommendation else None
    return calculate_estimate_items(
        request.rooms,
        dimensions,
        request.config.model_dump(),
        request.material_type,
        request.material_grade,
        ai_recommendation,
    )


@router.post("/quote", response_model=schemas.QuoteResult)
def quote(request: schemas.QuoteRequest):
    """
    Full estimate from a package tier + species selection.

    Resolves the PricingConfig (defaults from settings), validates dimensions,
    derives sqft from length × width, then prices.
    """
    tier = request.tier or settings.DEFAULT_TIER
    species = request.species or settings.DEFAULT_SPECIES
    tax_rate = request.tax_rate if request.tax_rate is not None else settings.DEFAULT_TAX_RATE

    try:
        config = build_pricing_config(tier, species, tax_rate)
        material_type, material_grade = build_material_descriptor(tier, species)
    except ValueError as e:
        logger.warning("Quote rejected: %s", e)
        raise HTTPException(status_code=404, detail=str(e))

    validation = validate_estimate(request.rooms, request.dimensions)
    if not validation["is_valid"]:
        logger.warning("Quote rejected: %s", validation["error"])
        raise HTTPException(status_code=400, detail=validation["error"])

    dimensions = {
        room: new_room_dimension(request.dimensions[room]["length"], request.dimensions[room]["width"])
        for room in request.rooms
    }
    ai_recommendation = request.ai_recommendation.model_dump() if request.ai_recommendation else None

    result = calculate_estimate_items(
        request.rooms, dimensions, config, material_type, material_grade, ai_recommendation,
    )
    logger.info(
        "Quoted %d room(s) at %s/%s: total %.2f",
        len(request.rooms), tier, material_type, result["total"],
    )
    return {
        **result,
        "tier": tier.strip().lower(),
        "species": material_type,
        "material_grade": material_grade,
        "config": config,
    }
