from fastapi import APIRouter, HTTPException
import logging

from domain.core.reference_data import get_climate_record, reference_tables_json
from models.schemas import CalculationResponse, CalculatorRequest, ErrorResponse
from services.load_calculator import run_calculation

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/compute",
    response_model=CalculationResponse,
    responses={422: {"model": ErrorResponse}},
)
def compute_room_load(request: CalculatorRequest):
    """Calculate the cooling load of one room and the recommended AC size"""
    return run_calculation(request)


@router.get("/reference")
def get_reference_data():
    """Cities, U-factors, appliance ratings, solar gains and load constants"""
    return reference_tables_json()


@router.get("/cities/{city}")
def get_city(city: str):
    record = get_climate_record(city)
    if record is None:
        logger.warning(f"City lookup failed: {city}")
        raise HTTPException(status_code=404, detail=f"City not found: {city}")
    return record.to_json()
