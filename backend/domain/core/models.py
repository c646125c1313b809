"""
Data models for single-room cooling-load calculations
Inputs are immutable once built; results are values, never updated in place
"""

from dataclasses import asdict, dataclass, field
from typing import Dict, Any, Mapping, Optional, Tuple, Union

from models.enums import Appliance, DifficultyTier, Direction, RoofCondition


@dataclass(frozen=True)
class RoomGeometry:
    """Room dimensions in feet"""
    length_ft: float
    breadth_ft: float
    height_ft: float

    @property
    def floor_area(self) -> float:
        return self.length_ft * self.breadth_ft

    @property
    def volume(self) -> float:
        return self.floor_area * self.height_ft

    @property
    def perimeter_wall_area(self) -> float:
        """Gross area of all four walls, used when no wall list is given"""
        return 2 * (self.length_ft + self.breadth_ft) * self.height_ft

    def to_json(self) -> Dict[str, Any]:
        return {
            "length": self.length_ft,
            "breadth": self.breadth_ft,
            "height": self.height_ft,
            "floor_area": self.floor_area,
            "volume": self.volume,
        }


@dataclass(frozen=True)
class ClimateRecord:
    """Summer design conditions for one city"""
    city: str
    dry_bulb_f: float
    wet_bulb_f: float
    diurnal_range_f: float
    relative_humidity_pct: float
    dew_point_f: float
    grains_per_lb: float

    def to_json(self) -> Dict[str, Any]:
        return {
            "city": self.city,
            "dry_bulb_f": self.dry_bulb_f,
            "wet_bulb_f": self.wet_bulb_f,
            "diurnal_range_f": self.diurnal_range_f,
            "relative_humidity_pct": self.relative_humidity_pct,
            "dew_point_f": self.dew_point_f,
            "grains_per_lb": self.grains_per_lb,
        }


@dataclass(frozen=True)
class EnvelopeElement:
    """A window or wall: area in ft² and the direction it faces"""
    area_sqft: float
    direction: Optional[Union[Direction, str]] = None

    def to_json(self) -> Dict[str, Any]:
        direction = self.direction.value if isinstance(self.direction, Direction) else self.direction
        return {"area": self.area_sqft, "direction": direction}


@dataclass(frozen=True)
class CalculatorInput:
    """
    Raw calculator input as submitted by a caller.

    Only geometry and city are always required; the rest is optional and
    filled in per difficulty tier by the normalizer.
    """
    difficulty_tier: Union[DifficultyTier, str]
    geometry: RoomGeometry
    city: str
    windows: Optional[Tuple[EnvelopeElement, ...]] = None
    walls: Optional[Tuple[EnvelopeElement, ...]] = None
    roof_condition: Optional[Union[RoofCondition, str]] = None
    occupants: Optional[int] = None
    appliances: Optional[Mapping[str, int]] = None
    ventilation_cfm: Optional[float] = None


@dataclass(frozen=True)
class NormalizedInput:
    """Fully resolved input; every stage can read it without None checks"""
    difficulty_tier: DifficultyTier
    geometry: RoomGeometry
    climate: ClimateRecord
    windows: Tuple[EnvelopeElement, ...]
    walls: Tuple[EnvelopeElement, ...]
    roof_condition: RoofCondition
    occupants: int
    appliances: Tuple[Tuple[Appliance, int], ...]
    ignored_appliances: Tuple[str, ...] = ()
    ventilation_cfm: Optional[float] = None

    def to_json(self) -> Dict[str, Any]:
        return {
            "difficulty_tier": self.difficulty_tier.value,
            "room": self.geometry.to_json(),
            "city": self.climate.city,
            "windows": [w.to_json() for w in self.windows],
            "walls": [w.to_json() for w in self.walls],
            "roof_condition": self.roof_condition.value,
            "occupants": self.occupants,
            "appliances": {appliance.value: count for appliance, count in self.appliances},
            "ventilation_cfm_override": self.ventilation_cfm,
        }


@dataclass(frozen=True)
class RoomSensibleLoad:
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

    @property
    def subtotal(self) -> float:
        """Sum of the seven gains before duct and fan allowances"""
        return (
            self.glass + self.wall + self.floor + self.roof +
            self.people + self.equipment + self.lighting
        )


@dataclass(frozen=True)
class RoomLatentLoad:
    people: float
    infiltration: float
    total: float


@dataclass(frozen=True)
class OutsideAirLoad:
    sensible: float
    latent: float
    total: float


@dataclass(frozen=True)
class GrandTotal:
    subtotal: float
    safety_margin: float
    final: float


@dataclass(frozen=True)
class HeatBreakdown:
    """Itemized result of one calculation, BTU/hr except tonnage"""
    room_sensible: RoomSensibleLoad
    room_latent: RoomLatentLoad
    outside_air: OutsideAirLoad
    grand_total: GrandTotal
    tonnage: float
    ventilation_cfm: float = 0.0
    ignored_appliances: Tuple[str, ...] = field(default_factory=tuple)

    def to_json(self) -> Dict[str, Any]:
        return {
            "room_sensible": asdict(self.room_sensible),
            "room_latent": asdict(self.room_latent),
            "outside_air": asdict(self.outside_air),
            "grand_total": asdict(self.grand_total),
            "tonnage": self.tonnage,
        }
