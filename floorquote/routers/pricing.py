import logging
from typing import List, Optional

from fastapi import APIRouter, HTTPException

from .. import schemas
from ..config import settings
from ..pricing_tiers import HARDWOOD_SPECIES, PRICING_TIERS, build_pricing_config

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/pricing", tags=["pricing"])


@router.get("/tiers", response_model=List[schemas.PricingTier])
def list_pricing_tiers():
    return [{"key": key, **tier} for key, tier in PRICING_TIERS.items()]


@router.get("/species", response_model=List[schemas.HardwoodSpecies])
def list_hardwood_species():
    return [{"name": name, "prices": prices} for name, prices in HARDWOOD_SPECIES.items()]


@router.get("/config", response_model=schemas.PricingConfig)
def get_pricing_config(tier: str, species: str, tax_rate: Optional[float] = None):
    """Resolve material price / install rate for a tier + species."""
    if tax_rate is None:
        tax_rate = settings.DEFAULT_TAX_RATE
    try:
        return build_pricing_config(tier, species, tax_rate)
    except ValueError as e:
        logger.warning("Pricing lookup failed: %s", e)
        raise HTTPException(status_code=404, detail=str(e))
