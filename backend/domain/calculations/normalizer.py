"""
Calculator Input Normalizer
Applies difficulty-tier defaults and rejects invalid room descriptions so the
load stages always receive a complete, consistent input.
"""

import logging
import math
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from domain.core.models import (
    CalculatorInput, ClimateRecord, EnvelopeElement, NormalizedInput, RoomGeometry
)
from domain.core.reference_data import get_climate_record
from models.enums import Appliance, DifficultyTier, Direction, RoofCondition
from services.error_types import DataQualityError, ValidationError, log_error_with_context

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TierPreset:
    """What a difficulty tier fixes, and what it fills in when left blank"""
    preset_envelope: bool
    occupants: int
    roof_condition: RoofCondition
    appliances: Optional[Tuple[Tuple[Appliance, int], ...]]
    appliances_editable: bool


PRESET_WINDOWS: Tuple[EnvelopeElement, ...] = (
    EnvelopeElement(15, Direction.W),
    EnvelopeElement(15, Direction.E),
)

TIER_PRESETS: Dict[DifficultyTier, TierPreset] = {
    DifficultyTier.low: TierPreset(
        preset_envelope=True,
        occupants=2,
        roof_condition=RoofCondition.exposed,
        appliances=((Appliance.lights, 2),),
        appliances_editable=False,
    ),
    DifficultyTier.medium: TierPreset(
        preset_envelope=True,
        occupants=3,
        roof_condition=RoofCondition.exposed,
        appliances=((Appliance.lights, 2), (Appliance.fan, 1)),
        appliances_editable=True,
    ),
    DifficultyTier.high: TierPreset(
        preset_envelope=False,
        occupants=3,
        roof_condition=RoofCondition.exposed,
        appliances=None,
        appliances_editable=True,
    ),
}


def preset_walls(geometry: RoomGeometry) -> Tuple[EnvelopeElement, ...]:
    """Four walls sized from the room, long sides facing north and south"""
    long_side = geometry.length_ft * geometry.height_ft
    short_side = geometry.breadth_ft * geometry.height_ft
    return (
        EnvelopeElement(long_side, Direction.N),
        EnvelopeElement(short_side, Direction.E),
        EnvelopeElement(long_side, Direction.S),
        EnvelopeElement(short_side, Direction.W),
    )


def _is_positive(value) -> bool:
    return (
        isinstance(value, (int, float)) and not isinstance(value, bool)
        and math.isfinite(value) and value > 0
    )


def _resolve_tier(tier) -> DifficultyTier:
    try:
        return DifficultyTier(tier)
    except ValueError:
        raise ValidationError(f"Unknown difficulty tier: {tier!r}", {"allowed": [t.value for t in DifficultyTier]})


def _validate_geometry(geometry: Optional[RoomGeometry]) -> RoomGeometry:
    if geometry is None:
        raise ValidationError("Room dimensions are required")
    for name in ("length_ft", "breadth_ft", "height_ft"):
        value = getattr(geometry, name)
        if not _is_positive(value):
            raise ValidationError(
                f"Room {name.replace('_ft', '')} must be a positive number of feet",
                {"field": name, "value": value},
            )
    return geometry


def _resolve_climate(city: Optional[str]) -> ClimateRecord:
    if not city:
        raise ValidationError("City selection is required")
    climate = get_climate_record(city)
    if climate is None:
        raise ValidationError(f"City not found in reference data: {city!r}", {"city": city})
    return climate


def _validate_elements(kind: str, elements: Sequence[EnvelopeElement]) -> Tuple[EnvelopeElement, ...]:
    validated = []
    for index, element in enumerate(elements):
        if not _is_positive(element.area_sqft):
            raise ValidationError(
                f"{kind.capitalize()} {index + 1} must have a positive area",
                {"kind": kind, "index": index, "area": element.area_sqft},
            )
        if element.direction is None or element.direction == "":
            raise ValidationError(
                f"{kind.capitalize()} {index + 1} is missing a direction",
                {"kind": kind, "index": index},
            )
        try:
            direction = Direction(element.direction)
        except ValueError:
            raise ValidationError(
                f"{kind.capitalize()} {index + 1} has an unknown direction: {element.direction!r}",
                {"kind": kind, "index": index, "allowed": [d.value for d in Direction]},
            )
        validated.append(EnvelopeElement(element.area_sqft, direction))
    return tuple(validated)


def _resolve_roof(condition, preset: TierPreset) -> RoofCondition:
    if condition is None or condition == "":
        return preset.roof_condition
    try:
        return RoofCondition(condition)
    except ValueError:
        raise ValidationError(
            f"Unknown roof condition: {condition!r}",
            {"allowed": [c.value for c in RoofCondition]},
        )


def _resolve_occupants(occupants, preset: TierPreset) -> int:
    if occupants is None:
        return preset.occupants
    if isinstance(occupants, bool) or not isinstance(occupants, int) or occupants < 0:
        raise ValidationError("Occupant count must be a non-negative whole number", {"occupants": occupants})
    return occupants


def resolve_appliances(
    appliances: Mapping[str, int],
) -> Tuple[Tuple[Tuple[Appliance, int], ...], Tuple[str, ...]]:
    """
    Match appliance names against the catalog.

    Returns:
        (catalog entries with counts, names that matched nothing)
    """
    resolved: List[Tuple[Appliance, int]] = []
    ignored: List[str] = []
    for name, count in appliances.items():
        if isinstance(count, bool) or not isinstance(count, int) or count < 0:
            raise ValidationError(
                f"Appliance count for {name!r} must be a non-negative whole number",
                {"appliance": name, "count": count},
            )
        appliance = Appliance.lookup(name)
        if appliance is None:
            ignored.append(name)
            continue
        resolved.append((appliance, count))
    return tuple(resolved), tuple(ignored)


def _resolve_tier_appliances(
    tier: DifficultyTier,
    appliances: Optional[Mapping[str, int]],
    preset: TierPreset,
) -> Tuple[Tuple[Tuple[Appliance, int], ...], Tuple[str, ...]]:
    if not preset.appliances_editable:
        return preset.appliances, ()
    if preset.appliances is None:
        if not appliances:
            raise ValidationError(f"At least one appliance is required for {tier.value} difficulty")
        return resolve_appliances(appliances)
    # An explicit empty map means the room has no appliances; only None takes the preset
    if appliances is None:
        return preset.appliances, ()
    return resolve_appliances(appliances)


def _resolve_ventilation(ventilation_cfm) -> Optional[float]:
    if ventilation_cfm is None:
        return None
    if not _is_positive(ventilation_cfm):
        raise ValidationError(
            "Ventilation override must be a positive CFM value",
            {"ventilation_cfm": ventilation_cfm},
        )
    return float(ventilation_cfm)


def normalize_input(raw: CalculatorInput) -> NormalizedInput:
    """
    Resolve a raw calculator input into a NormalizedInput.

    Low tier ignores any supplied windows, walls and appliances and uses
    presets. Medium keeps the envelope presets but takes occupants, roof and
    appliances from the caller. High requires windows, walls and appliances.

    Raises:
        ValidationError: the input cannot describe a room
    """
    tier = _resolve_tier(raw.difficulty_tier)
    preset = TIER_PRESETS[tier]
    geometry = _validate_geometry(raw.geometry)
    climate = _resolve_climate(raw.city)

    if preset.preset_envelope:
        windows = PRESET_WINDOWS
        walls = preset_walls(geometry)
    else:
        if not raw.windows:
            raise ValidationError(f"Window details are required for {tier.value} difficulty")
        if not raw.walls:
            raise ValidationError(f"Wall details are required for {tier.value} difficulty")
        windows = _validate_elements("window", raw.windows)
        walls = _validate_elements("wall", raw.walls)

    appliances, ignored = _resolve_tier_appliances(tier, raw.appliances, preset)
    if ignored:
        log_error_with_context(
            DataQualityError("Appliances not in catalog contribute no load", {"ignored": list(ignored)}),
            {"city": climate.city, "tier": tier.value},
        )

    normalized = NormalizedInput(
        difficulty_tier=tier,
        geometry=geometry,
        climate=climate,
        windows=windows,
        walls=walls,
        roof_condition=_resolve_roof(raw.roof_condition, preset),
        occupants=_resolve_occupants(raw.occupants, preset),
        appliances=appliances,
        ignored_appliances=ignored,
        ventilation_cfm=_resolve_ventilation(raw.ventilation_cfm),
    )
    logger.debug(
        f"Normalized {tier.value} input for {climate.city}: {len(windows)} windows, "
        f"{len(walls)} walls, {normalized.occupants} occupants"
    )
    return normalized
