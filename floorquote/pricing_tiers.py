"""
Package tiers and hardwood species price tables.

Plain configuration data. The estimate calculator never reads these.
Callers resolve a PricingConfig here and pass it in explicitly.
"""

import logging

logger = logging.getLogger(__name__)

# Installed-package tiers. install_rate / trim_rate are $ per sqft.
PRICING_TIERS = {
    "basic": {
        "name": "Basic",
        "description": "Quality hardwood flooring essentials",
        "features": [
            "Select Red Oak or White Oak",
            "Standard finish options",
            "Basic installation ($3.50/sqft)",
            "Standard warranty",
            "1-year finish guarantee",
        ],
        "price_range": "$8-10/sqft",
        "material_grade": "#1 Common",
        "install_rate": 3.50,
        "trim_rate": 4.50,
    },
    "premium": {
        "name": "Premium",
        "description": "Enhanced quality and customization",
        "features": [
            "Premium Oak, Maple, or Hickory",
            "Custom stain options",
            "Professional installation ($4.50/sqft)",
            "Extended warranty",
            "3-year finish guarantee",
            "Free maintenance kit",
        ],
        "price_range": "$11-13/sqft",
        "material_grade": "Select",
        "install_rate": 4.50,
        "trim_rate": 5.50,
    },
    "elite": {
        "name": "Elite",
        "description": "Luxury materials and premium service",
        "features": [
            "Exotic hardwoods available",
            "Custom patterns and inlays",
            "White glove installation ($5.50/sqft)",
            "Lifetime warranty",
            "5-year finish guarantee",
            "Annual maintenance service",
            "Priority support",
        ],
        "price_range": "$14-18/sqft",
        "material_grade": "Clear",
        "install_rate": 5.50,
        "trim_rate": 6.50,
    },
}

# Material $ per sqft by species and tier
HARDWOOD_SPECIES = {
    "White Oak": {"basic": 8.0, "premium": 11.0, "elite": 14.0},
    "Red Oak": {"basic": 7.5, "premium": 10.5, "elite": 13.5},
    "Maple": {"basic": 8.5, "premium": 11.5, "elite": 14.5},
    "Hickory": {"basic": 9.0, "premium": 12.0, "elite": 15.0},
    "Walnut": {"basic": 10.0, "premium": 13.0, "elite": 16.0},
}


def list_tiers() -> list[str]:
    """Tier keys in display order."""
    return list(PRICING_TIERS.keys())


def list_species() -> list[str]:
    """Species names in display order."""
    return list(HARDWOOD_SPECIES.keys())


def get_tier(tier: str) -> dict:
    """Tier definition by key, or raises ValueError."""
    key = (tier or "").strip().lower()
    if key not in PRICING_TIERS:
        raise ValueError(
            f"Unknown pricing tier: {tier}. Available: {list_tiers()}"
        )
    return PRICING_TIERS[key]


def resolve_species_name(species: str) -> str:
    """Canonical species name (case-insensitive match), or raises ValueError."""
    wanted = (species or "").strip().lower()
    for name in HARDWOOD_SPECIES:
        if name.lower() == wanted:
            return name
    raise ValueError(
        f"Unknown hardwood species: {species}. Available: {list_species()}"
    )


def get_species(species: str) -> dict:
    """Per-tier material prices for a species, or raises ValueError."""
    return HARDWOOD_SPECIES[resolve_species_name(species)]


def build_pricing_config(tier: str, species: str, tax_rate: float) -> dict:
    """
    Resolve the PricingConfig for a tier/species pair.

    Returns: {"material_price", "install_rate", "tax_rate"}
    """
    tier_key = (tier or "").strip().lower()
    tier_data = get_tier(tier_key)
    prices = get_species(species)
    config = {
        "material_price": prices[tier_key],
        "install_rate": tier_data["install_rate"],
        "tax_rate": tax_rate,
    }
    logger.debug("Resolved pricing config for %s/%s: %s", tier_key, species, config)
    return config


def build_material_descriptor(tier: str, species: str) -> tuple[str, str]:
    """(material_type, material_grade) labels for the line item descriptions."""
    return resolve_species_name(species), get_tier(tier)["material_grade"]
