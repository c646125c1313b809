from pydantic import BaseModel, Field
from typing import Optional, Any, Dict, List

from models.enums import DifficultyTier, Direction, RoofCondition


class RoomDimensionsIn(BaseModel):
    # Positivity is checked by the normalizer so the error shape matches other input errors
    length: float = Field(..., description="Room length in feet")
    breadth: float = Field(..., description="Room breadth in feet")
    height: float = Field(..., description="Ceiling height in feet")


class EnvelopeElementIn(BaseModel):
    area: float = Field(..., description="Area in square feet")
    direction: Optional[Direction] = Field(None, description="Facing direction (N, NE, E, SE, S, SW, W, NW)")


class CalculatorRequest(BaseModel):
    difficulty_tier: DifficultyTier = DifficultyTier.low
    room: RoomDimensionsIn
    city: str = Field(..., description="City name, exactly as listed in the reference data")
    windows: Optional[List[EnvelopeElementIn]] = None
    walls: Optional[List[EnvelopeElementIn]] = None
    roof_condition: Optional[RoofCondition] = None
    occupants: Optional[int] = None
    appliances: Optional[Dict[str, int]] = Field(None, description="Appliance name to unit count")
    ventilation_cfm: Optional[float] = Field(None, description="Infiltration/ventilation override in CFM")


class RoomSensibleOut(BaseModel):
    glass: float
    wall: float
    floor: float
    roof: float
    people: float
    equipment: float
    lighting: float
    duct_gain: float
    fan_heat: float
    total: float


class RoomLatentOut(BaseModel):
    people: float
    infiltration: float
    total: float


class OutsideAirOut(BaseModel):
    sensible: float
    latent: float
    total: float


class GrandTotalOut(BaseModel):
    subtotal: float
    safety_margin: float
    final: float


class BreakdownOut(BaseModel):
    room_sensible: RoomSensibleOut
    room_latent: RoomLatentOut
    outside_air: OutsideAirOut
    grand_total: GrandTotalOut
    tonnage: float


class EquipmentMatch(BaseModel):
    rating: str
    explanation: str


class CalculationResponse(BaseModel):
    breakdown: BreakdownOut
    ventilation_cfm: float
    delta_t_f: float
    delta_grains: float
    recommended_tons: float
    equipment_match: EquipmentMatch
    ignored_appliances: List[str] = Field(default_factory=list)
    normalized_input: Dict[str, Any]


class ErrorDetail(BaseModel):
    type: str
    message: str
    details: Optional[Dict[str, Any]] = None


class ErrorResponse(BaseModel):
    error: ErrorDetail
