"""
Reference data for room cooling-load calculations
City design conditions, material U-factors, appliance ratings and the
physical constants used by every calculation stage.

All tables are read-only; results are reproducible only with these exact values.
"""

from dataclasses import asdict, dataclass
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from models.enums import Appliance, Direction, RoofCondition
from domain.core.models import ClimateRecord


def _city(name: str, db: float, wb: float, dr: float, rh: float, dp: float, gr: float) -> ClimateRecord:
    return ClimateRecord(
        city=name,
        dry_bulb_f=db,
        wet_bulb_f=wb,
        diurnal_range_f=dr,
        relative_humidity_pct=rh,
        dew_point_f=dp,
        grains_per_lb=gr,
    )


# Summer design conditions (°F, %, gr/lb)
_CITY_DATA = {
    "Ahmedabad": _city("Ahmedabad", 109, 78, 25, 25, 67, 98),
    "Mumbai": _city("Mumbai", 92, 81, 12, 62, 77, 142),
    "Pune": _city("Pune", 102, 74, 28, 26, 63, 86),
    "Jabalpur": _city("Jabalpur", 108, 75, 30, 21, 62, 83),
    "Delhi": _city("Delhi", 110, 80, 24, 28, 70, 110),
    "Chennai": _city("Chennai", 100, 83, 16, 48, 78, 147),
    "Kolkata": _city("Kolkata", 98, 83, 15, 55, 79, 151),
    "Bengaluru": _city("Bengaluru", 93, 72, 22, 38, 64, 89),
    "Hyderabad": _city("Hyderabad", 104, 75, 23, 26, 64, 89),
    "Jaipur": _city("Jaipur", 109, 76, 26, 22, 63, 86),
}
CITY_DATA: Mapping[str, ClimateRecord] = MappingProxyType(_CITY_DATA)

# BTU/hr·ft²·°F
U_FACTORS: Mapping[str, float] = MappingProxyType({
    "glass": 0.30,
    "wall": 0.16,
    "floor": 0.02,
})

ROOF_U_FACTORS: Mapping[RoofCondition, float] = MappingProxyType({
    RoofCondition.exposed: 0.46,
    RoofCondition.insulated: 0.135,
    RoofCondition.shaded: 0.15,
    RoofCondition.water_covered: 0.10,
})

# kW per unit
APPLIANCE_KW: Mapping[Appliance, float] = MappingProxyType({
    Appliance.lights: 0.05,
    Appliance.oven_microwave: 1.5,
    Appliance.fridge: 0.20,
    Appliance.pc_laptop: 0.125,
    Appliance.tv: 0.1,
    Appliance.fan: 0.05,
})

# Peak July solar heat gain through clear glass, BTU/hr·ft², low latitudes.
# Published with the reference data only; the glass stage is conduction-only.
SOLAR_HEAT_GAIN: Mapping[Direction, int] = MappingProxyType({
    Direction.N: 38,
    Direction.NE: 89,
    Direction.E: 216,
    Direction.SE: 161,
    Direction.S: 97,
    Direction.SW: 161,
    Direction.W: 216,
    Direction.NW: 89,
})


@dataclass(frozen=True)
class LoadConstants:
    """Physical constants and allowances for the load procedure"""
    person_sensible_btu: float = 255      # BTU/hr per person
    person_latent_btu: float = 245        # BTU/hr per person
    equipment_factor: float = 3410        # BTU/hr per kW
    lighting_load_factor: float = 1.2
    lighting_constant: float = 3.4
    ventilation_factor: float = 0.42      # air changes per hour
    bypass_factor: float = 0.12
    sensible_constant: float = 1.08       # BTU/hr·CFM·°F
    latent_constant: float = 0.68         # BTU/hr·CFM·(gr/lb)
    cfm_per_person: float = 10
    indoor_temp_f: float = 75
    indoor_grains: float = 60             # gr/lb
    duct_gain_fraction: float = 0.02
    fan_heat_fraction: float = 0.05
    safety_fraction: float = 0.03
    btu_per_ton: float = 12000

    def to_json(self) -> Dict[str, float]:
        return asdict(self)


CONSTANTS = LoadConstants()


def get_climate_record(city: str) -> Optional[ClimateRecord]:
    """Exact-name city lookup; None when the city is not supported"""
    return CITY_DATA.get(city)


def get_roof_u_factor(condition: RoofCondition) -> float:
    return ROOF_U_FACTORS[condition]


def get_appliance_kw(appliance: Appliance) -> float:
    return APPLIANCE_KW[appliance]


def reference_tables_json() -> Dict[str, object]:
    """Serializable snapshot of every reference table"""
    return {
        "cities": {name: record.to_json() for name, record in CITY_DATA.items()},
        "u_factors": {
            **U_FACTORS,
            **{f"roof_{condition.value}": u for condition, u in ROOF_U_FACTORS.items()},
        },
        "appliances_kw": {appliance.value: kw for appliance, kw in APPLIANCE_KW.items()},
        "solar_heat_gain": {direction.value: shg for direction, shg in SOLAR_HEAT_GAIN.items()},
        "constants": CONSTANTS.to_json(),
    }
