from pydantic import BaseModel
from typing import Optional, List, Dict, Literal


class RoomDimension(BaseModel):
    length: float = 0.0
    width: float = 0.0
    sqft: float = 0.0


class PricingConfig(BaseModel):
    material_price: float
    install_rate: float
    tax_rate: float


class MaterialAdjustment(BaseModel):
    price_adjustment: float = 0.0


class LaborAdjustment(BaseModel):
    rate_adjustment: float = 0.0


class AIRecommendation(BaseModel):
    materials: MaterialAdjustment = MaterialAdjustment()
    labor: LaborAdjustment = LaborAdjustment()


class EstimateItem(BaseModel):
    id: str
    description: str
    area: float
    unit_price: float
    quantity: float
    total: float
    type: Literal["material", "labor"]
    room: str
    # Material fields
    material_type: Optional[str] = None
    brand: Optional[str] = None
    # Labor fields
    labor_type: Optional[str] = None
    hourly_rate: Optional[float] = None
    hours: Optional[float] = None


class EstimateResult(BaseModel):
    items: List[EstimateItem] = []
    subtotal: float
    tax: float
    total: float


class ValidationResult(BaseModel):
    is_valid: bool
    error: Optional[str] = None


# --- Requests ---

class RoomsRequest(BaseModel):
    rooms: List[str] = []
    # Values stay loose so the validator, not pydantic, reports bad entries
    dimensions: Dict[str, Optional[Dict]] = {}


class CalculateRequest(BaseModel):
    rooms: List[str] = []
    dimensions: Dict[str, RoomDimension] = {}
    config: PricingConfig
    material_type: str
    material_grade: str
    ai_recommendation: Optional[AIRecommendation] = None


class QuoteRequest(BaseModel):
    rooms: List[str] = []
    dimensions: Dict[str, Optional[Dict]] = {}
    tier: Optional[str] = None
    species: Optional[str] = None
    tax_rate: Optional[float] = None
    ai_recommendation: Optional[AIRecommendation] = None


class QuoteResult(EstimateResult):
    tier: str
    species: str
    material_grade: str
    config: PricingConfig


class DimensionRequest(BaseModel):
    length: float
    width: float


# --- Pricing tables ---

class PricingTier(BaseModel):
    key: str
    name: str
    description: str
    features: List[str] = []
    price_range: str
    material_grade: str
    install_rate: float
    trim_rate: float


class HardwoodSpecies(BaseModel):
    name: str
    prices: Dict[str, float]


# --- Line item edits ---

class LineItemInput(BaseModel):
    id: Optional[str] = None
    description: str = ""
    area: Optional[float] = None
    unit_price: Optional[float] = None
    quantity: Optional[float] = None
    type: Literal["material", "labor"] = "material"
    room: Optional[str] = None
    material_type: Optional[str] = None
    brand: Optional[str] = None
    labor_type: Optional[str] = None
    hourly_rate: Optional[float] = None
    hours: Optional[float] = None


class LineItemAddRequest(BaseModel):
    items: List[EstimateItem] = []
    item: LineItemInput
    use_rooms: bool = False
    rooms: List[str] = []
    tax_rate: Optional[float] = None


class LineItemUpdateRequest(BaseModel):
    items: List[EstimateItem] = []
    item: LineItemInput
    use_rooms: bool = False
    tax_rate: Optional[float] = None


class LineItemRemoveRequest(BaseModel):
    items: List[EstimateItem] = []
    item_id: str
    tax_rate: Optional[float] = None


class RetotalRequest(BaseModel):
    items: List[EstimateItem] = []
    tax_rate: Optional[float] = None
