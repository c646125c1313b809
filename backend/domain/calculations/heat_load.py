"""
Room Cooling Load Calculator
Simplified ASHRAE-style procedure: envelope conduction, internal gains,
infiltration latent heat and outside-air load, summed into tons of refrigeration.

Stages run in a fixed order over one normalized input. Only the temperature and
moisture differences and the ventilation rate are shared between stages.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Tuple

from domain.calculations.normalizer import normalize_input
from domain.core.models import (
    CalculatorInput, ClimateRecord, EnvelopeElement, GrandTotal, HeatBreakdown,
    NormalizedInput, OutsideAirLoad, RoomGeometry, RoomLatentLoad, RoomSensibleLoad
)
from domain.core.reference_data import (
    CONSTANTS, LoadConstants, U_FACTORS, get_appliance_kw, get_roof_u_factor
)
from models.enums import Appliance, RoofCondition

logger = logging.getLogger(__name__)

# Window area assumed when a room has no window list
FALLBACK_WINDOW_AREA = 15
FALLBACK_WINDOW_COUNT = 2


@dataclass(frozen=True)
class LoadDrivers:
    """Quantities computed once and reused by several stages"""
    delta_t: float          # °F, outdoor minus indoor dry bulb
    delta_grains: float     # gr/lb, outdoor minus indoor moisture
    ventilation_cfm: float


def temperature_difference(climate: ClimateRecord, constants: LoadConstants = CONSTANTS) -> float:
    return climate.dry_bulb_f - constants.indoor_temp_f


def moisture_difference(climate: ClimateRecord, constants: LoadConstants = CONSTANTS) -> float:
    return climate.grains_per_lb - constants.indoor_grains


def ventilation_rate(
    geometry: RoomGeometry,
    occupants: int,
    override_cfm: Optional[float] = None,
    constants: LoadConstants = CONSTANTS,
) -> float:
    """
    Outside air in CFM: the override when given, otherwise the larger of the
    air-change rate and the per-person requirement.
    """
    if override_cfm is not None:
        return override_cfm
    return max(
        geometry.volume * constants.ventilation_factor / 60,
        occupants * constants.cfm_per_person,
    )


# Sensible stages

def glass_heat_gain(windows: Optional[Sequence[EnvelopeElement]], delta_t: float) -> float:
    u_glass = U_FACTORS["glass"]
    if windows is None:
        return FALLBACK_WINDOW_COUNT * (FALLBACK_WINDOW_AREA * delta_t * u_glass)
    return sum(window.area_sqft * delta_t * u_glass for window in windows)


def wall_heat_gain(
    walls: Optional[Sequence[EnvelopeElement]],
    geometry: RoomGeometry,
    delta_t: float,
) -> float:
    u_wall = U_FACTORS["wall"]
    if walls is None:
        return geometry.perimeter_wall_area * delta_t * u_wall
    return sum(wall.area_sqft * delta_t * u_wall for wall in walls)


def floor_heat_gain(geometry: RoomGeometry, delta_t: float) -> float:
    return geometry.floor_area * delta_t * U_FACTORS["floor"]


def roof_heat_gain(geometry: RoomGeometry, roof_condition: RoofCondition, delta_t: float) -> float:
    return geometry.floor_area * delta_t * get_roof_u_factor(roof_condition)


def people_sensible_heat(occupants: int, constants: LoadConstants = CONSTANTS) -> float:
    return occupants * constants.person_sensible_btu


def equipment_heat_gain(
    appliances: Iterable[Tuple[Appliance, int]],
    constants: LoadConstants = CONSTANTS,
) -> float:
    return sum(
        get_appliance_kw(appliance) * count * constants.equipment_factor
        for appliance, count in appliances
    )


def lighting_heat_gain(geometry: RoomGeometry, constants: LoadConstants = CONSTANTS) -> float:
    return constants.lighting_load_factor * geometry.floor_area * constants.lighting_constant


def room_sensible_load(
    normalized: NormalizedInput,
    delta_t: float,
    constants: LoadConstants = CONSTANTS,
) -> RoomSensibleLoad:
    geometry = normalized.geometry
    glass = glass_heat_gain(normalized.windows, delta_t)
    wall = wall_heat_gain(normalized.walls, geometry, delta_t)
    floor = floor_heat_gain(geometry, delta_t)
    roof = roof_heat_gain(geometry, normalized.roof_condition, delta_t)
    people = people_sensible_heat(normalized.occupants, constants)
    equipment = equipment_heat_gain(normalized.appliances, constants)
    lighting = lighting_heat_gain(geometry, constants)

    subtotal = glass + wall + floor + roof + people + equipment + lighting
    return RoomSensibleLoad(
        glass=glass,
        wall=wall,
        floor=floor,
        roof=roof,
        people=people,
        equipment=equipment,
        lighting=lighting,
        duct_gain=subtotal * constants.duct_gain_fraction,
        fan_heat=subtotal * constants.fan_heat_fraction,
        total=subtotal * (1 + constants.duct_gain_fraction + constants.fan_heat_fraction),
    )


# Latent and outside-air stages

def room_latent_load(
    occupants: int,
    drivers: LoadDrivers,
    constants: LoadConstants = CONSTANTS,
) -> RoomLatentLoad:
    """People latent heat plus the bypassed share of ventilation moisture"""
    people = occupants * constants.person_latent_btu
    infiltration = (
        drivers.ventilation_cfm * drivers.delta_grains *
        constants.bypass_factor * constants.latent_constant
    )
    return RoomLatentLoad(people=people, infiltration=infiltration, total=people + infiltration)


def outside_air_load(drivers: LoadDrivers, constants: LoadConstants = CONSTANTS) -> OutsideAirLoad:
    """Load of the ventilation air that passes through the coil"""
    coil_fraction = 1 - constants.bypass_factor
    sensible = drivers.ventilation_cfm * drivers.delta_t * coil_fraction * constants.sensible_constant
    latent = drivers.ventilation_cfm * drivers.delta_grains * coil_fraction * constants.latent_constant
    return OutsideAirLoad(sensible=sensible, latent=latent, total=sensible + latent)


def assemble_breakdown(
    sensible: RoomSensibleLoad,
    latent: RoomLatentLoad,
    outside_air: OutsideAirLoad,
    constants: LoadConstants = CONSTANTS,
    ventilation_cfm: float = 0.0,
    ignored_appliances: Tuple[str, ...] = (),
) -> HeatBreakdown:
    """Apply the safety allowance and convert the grand total to tons"""
    subtotal = sensible.total + latent.total + outside_air.total
    final = subtotal * (1 + constants.safety_fraction)
    return HeatBreakdown(
        room_sensible=sensible,
        room_latent=latent,
        outside_air=outside_air,
        grand_total=GrandTotal(
            subtotal=subtotal,
            safety_margin=subtotal * constants.safety_fraction,
            final=final,
        ),
        tonnage=final / constants.btu_per_ton,
        ventilation_cfm=ventilation_cfm,
        ignored_appliances=ignored_appliances,
    )


def load_drivers(normalized: NormalizedInput, constants: LoadConstants = CONSTANTS) -> LoadDrivers:
    return LoadDrivers(
        delta_t=temperature_difference(normalized.climate, constants),
        delta_grains=moisture_difference(normalized.climate, constants),
        ventilation_cfm=ventilation_rate(
            normalized.geometry,
            normalized.occupants,
            normalized.ventilation_cfm,
            constants,
        ),
    )


def calculate_heat_load(normalized: NormalizedInput, constants: LoadConstants = CONSTANTS) -> HeatBreakdown:
    """
    Run every stage over a normalized input.

    Never raises for a NormalizedInput produced by normalize_input().
    """
    drivers = load_drivers(normalized, constants)
    sensible = room_sensible_load(normalized, drivers.delta_t, constants)
    latent = room_latent_load(normalized.occupants, drivers, constants)
    outside_air = outside_air_load(drivers, constants)

    breakdown = assemble_breakdown(
        sensible,
        latent,
        outside_air,
        constants,
        ventilation_cfm=drivers.ventilation_cfm,
        ignored_appliances=normalized.ignored_appliances,
    )
    logger.debug(
        f"{normalized.climate.city}: sensible {sensible.total:.0f}, latent {latent.total:.0f}, "
        f"outside air {outside_air.total:.0f} BTU/hr -> {breakdown.tonnage:.3f} tons"
    )
    return breakdown


def compute(raw: CalculatorInput, constants: LoadConstants = CONSTANTS) -> HeatBreakdown:
    """
    Calculate the cooling load of one room.

    Args:
        raw: Calculator input as submitted
        constants: Load constants (the reference set unless testing)

    Returns:
        Complete HeatBreakdown

    Raises:
        ValidationError: the input is invalid; no partial result is produced
    """
    return calculate_heat_load(normalize_input(raw), constants)
