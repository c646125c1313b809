"""
Cooling load service
Bridges API requests to the room load engine and adds the sizing recommendation
"""

import logging

from domain.calculations.heat_load import calculate_heat_load, load_drivers
from domain.calculations.normalizer import normalize_input
from domain.core.models import CalculatorInput, EnvelopeElement, RoomGeometry
from models.schemas import CalculationResponse, CalculatorRequest
from services.equipment import equipment_match_rating, recommend_nominal_tons
from utils.logging_utils import log_operation

logger = logging.getLogger(__name__)


def _elements(items):
    if items is None:
        return None
    return tuple(EnvelopeElement(item.area, item.direction) for item in items)


def to_calculator_input(request: CalculatorRequest) -> CalculatorInput:
    """Convert a validated request body into the engine's input record"""
    return CalculatorInput(
        difficulty_tier=request.difficulty_tier,
        geometry=RoomGeometry(
            length_ft=request.room.length,
            breadth_ft=request.room.breadth,
            height_ft=request.room.height,
        ),
        city=request.city,
        windows=_elements(request.windows),
        walls=_elements(request.walls),
        roof_condition=request.roof_condition,
        occupants=request.occupants,
        appliances=dict(request.appliances) if request.appliances is not None else None,
        ventilation_cfm=request.ventilation_cfm,
    )


def run_calculation(request: CalculatorRequest) -> CalculationResponse:
    """
    Calculate one room and attach the recommended unit size.

    Raises:
        ValidationError: propagated unchanged from the normalizer
    """
    context = {"city": request.city, "tier": request.difficulty_tier.value}
    with log_operation("cooling_load_calculation", context, logger):
        normalized = normalize_input(to_calculator_input(request))
        breakdown = calculate_heat_load(normalized)

    drivers = load_drivers(normalized)
    recommended = recommend_nominal_tons(breakdown.tonnage)
    logger.info(
        f"{normalized.climate.city} ({normalized.difficulty_tier.value}): "
        f"{breakdown.grand_total.final:.0f} BTU/hr, {breakdown.tonnage:.3f} tons -> {recommended} ton unit"
    )

    return CalculationResponse(
        breakdown=breakdown.to_json(),
        ventilation_cfm=breakdown.ventilation_cfm,
        delta_t_f=drivers.delta_t,
        delta_grains=drivers.delta_grains,
        recommended_tons=recommended,
        equipment_match=equipment_match_rating(recommended, breakdown.tonnage),
        ignored_appliances=list(breakdown.ignored_appliances),
        normalized_input=normalized.to_json(),
    )
