"""
Pytest configuration and fixtures
"""
import pytest
from fastapi.testclient import TestClient

from domain.core.models import CalculatorInput, EnvelopeElement, RoomGeometry
from models.enums import DifficultyTier, Direction, RoofCondition


@pytest.fixture
def standard_room():
    """15 x 12 x 10 ft room, the calculator's default"""
    return RoomGeometry(length_ft=15, breadth_ft=12, height_ft=10)


@pytest.fixture
def low_tier_input(standard_room):
    """Low tier Mumbai room; everything else comes from presets"""
    return CalculatorInput(
        difficulty_tier=DifficultyTier.low,
        geometry=standard_room,
        city="Mumbai",
    )


@pytest.fixture
def high_tier_input(standard_room):
    """High tier room with every envelope element supplied"""
    return CalculatorInput(
        difficulty_tier=DifficultyTier.high,
        geometry=standard_room,
        city="Delhi",
        windows=(
            EnvelopeElement(20, Direction.S),
            EnvelopeElement(10, Direction.W),
        ),
        walls=(
            EnvelopeElement(150, Direction.N),
            EnvelopeElement(120, Direction.E),
            EnvelopeElement(150, Direction.S),
            EnvelopeElement(120, Direction.W),
        ),
        roof_condition=RoofCondition.shaded,
        occupants=4,
        appliances={"Fridge": 1, "PC/Laptop": 2, "TV": 1, "Lights": 4},
    )


@pytest.fixture
def client():
    from app.main import app
    with TestClient(app) as test_client:
        yield test_client
