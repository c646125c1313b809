"""
Tests for difficulty-tier defaults and input validation
"""

from dataclasses import replace

import pytest

from domain.calculations.normalizer import (
    PRESET_WINDOWS,
    TIER_PRESETS,
    normalize_input,
    preset_walls,
    resolve_appliances,
)
from domain.core.models import EnvelopeElement, RoomGeometry
from models.enums import Appliance, DifficultyTier, Direction, RoofCondition
from services.error_types import ValidationError


class TestTierDefaults:

    def test_low_tier_uses_presets(self, low_tier_input):
        normalized = normalize_input(low_tier_input)

        assert normalized.windows == PRESET_WINDOWS
        assert [w.direction for w in normalized.windows] == [Direction.W, Direction.E]
        assert [w.area_sqft for w in normalized.walls] == [150, 120, 150, 120]
        assert [w.direction for w in normalized.walls] == [Direction.N, Direction.E, Direction.S, Direction.W]
        assert normalized.occupants == 2
        assert normalized.roof_condition == RoofCondition.exposed
        assert normalized.appliances == ((Appliance.lights, 2),)

    def test_low_tier_ignores_supplied_envelope_and_appliances(self, low_tier_input):
        raw = replace(
            low_tier_input,
            windows=(EnvelopeElement(80, Direction.S),),
            walls=(EnvelopeElement(10, Direction.N),),
            appliances={"Oven/Microwave": 3},
        )
        normalized = normalize_input(raw)

        assert normalized.windows == PRESET_WINDOWS
        assert normalized.walls == preset_walls(raw.geometry)
        assert normalized.appliances == ((Appliance.lights, 2),)

    def test_low_tier_keeps_explicit_occupants_and_roof(self, low_tier_input):
        normalized = normalize_input(replace(low_tier_input, occupants=4, roof_condition="insulated"))
        assert normalized.occupants == 4
        assert normalized.roof_condition == RoofCondition.insulated

    def test_medium_tier_defaults(self, low_tier_input):
        normalized = normalize_input(replace(low_tier_input, difficulty_tier="medium"))

        assert normalized.windows == PRESET_WINDOWS
        assert normalized.occupants == 3
        assert normalized.roof_condition == RoofCondition.exposed
        assert dict(normalized.appliances) == {Appliance.lights: 2, Appliance.fan: 1}

    def test_medium_tier_accepts_user_appliances(self, low_tier_input):
        raw = replace(low_tier_input, difficulty_tier=DifficultyTier.medium, appliances={"TV": 1, "Fridge": 1})
        normalized = normalize_input(raw)
        assert dict(normalized.appliances) == {Appliance.tv: 1, Appliance.fridge: 1}

    def test_medium_tier_empty_appliance_map_means_none(self, low_tier_input):
        raw = replace(low_tier_input, difficulty_tier=DifficultyTier.medium, appliances={})
        normalized = normalize_input(raw)

        assert normalized.appliances == ()
        assert normalized.to_json()["appliances"] == {}

    def test_high_tier_keeps_supplied_values(self, high_tier_input):
        normalized = normalize_input(high_tier_input)

        assert [w.area_sqft for w in normalized.windows] == [20, 10]
        assert normalized.occupants == 4
        assert normalized.roof_condition == RoofCondition.shaded
        assert dict(normalized.appliances)[Appliance.pc_laptop] == 2

    def test_high_tier_falls_back_for_occupants_and_roof(self, high_tier_input):
        normalized = normalize_input(replace(high_tier_input, occupants=None, roof_condition=None))
        assert normalized.occupants == TIER_PRESETS[DifficultyTier.high].occupants
        assert normalized.roof_condition == RoofCondition.exposed

    def test_string_directions_are_resolved(self, high_tier_input):
        raw = replace(high_tier_input, windows=(EnvelopeElement(12, "NE"),))
        assert normalize_input(raw).windows[0].direction is Direction.NE

    def test_ventilation_override_is_carried(self, low_tier_input):
        assert normalize_input(replace(low_tier_input, ventilation_cfm=45)).ventilation_cfm == 45.0


class TestValidation:

    @pytest.mark.parametrize("dimensions", [
        (0, 12, 10),
        (15, -1, 10),
        (15, 12, 0),
        (15, 12, float("nan")),
    ])
    def test_non_positive_dimension(self, low_tier_input, dimensions):
        with pytest.raises(ValidationError):
            normalize_input(replace(low_tier_input, geometry=RoomGeometry(*dimensions)))

    def test_missing_geometry(self, low_tier_input):
        with pytest.raises(ValidationError, match="dimensions"):
            normalize_input(replace(low_tier_input, geometry=None))

    @pytest.mark.parametrize("city", ["", "Atlantis", "mumbai"])
    def test_unknown_city(self, low_tier_input, city):
        with pytest.raises(ValidationError):
            normalize_input(replace(low_tier_input, city=city))

    def test_unknown_tier(self, low_tier_input):
        with pytest.raises(ValidationError, match="tier"):
            normalize_input(replace(low_tier_input, difficulty_tier="expert"))

    @pytest.mark.parametrize("field,value", [
        ("windows", ()),
        ("windows", None),
        ("walls", ()),
        ("walls", None),
        ("appliances", {}),
        ("appliances", None),
    ])
    def test_high_tier_requires_envelope_and_appliances(self, high_tier_input, field, value):
        with pytest.raises(ValidationError):
            normalize_input(replace(high_tier_input, **{field: value}))

    @pytest.mark.parametrize("element", [
        EnvelopeElement(0, Direction.S),
        EnvelopeElement(-5, Direction.S),
        EnvelopeElement(10, None),
        EnvelopeElement(10, "UP"),
    ])
    def test_invalid_window(self, high_tier_input, element):
        with pytest.raises(ValidationError) as exc_info:
            normalize_input(replace(high_tier_input, windows=(element,)))
        assert exc_info.value.details["kind"] == "window"

    def test_invalid_wall(self, high_tier_input):
        with pytest.raises(ValidationError, match="Wall 2"):
            normalize_input(replace(
                high_tier_input,
                walls=(EnvelopeElement(100, Direction.N), EnvelopeElement(0, Direction.E)),
            ))

    @pytest.mark.parametrize("occupants", [-1, 2.5, True])
    def test_invalid_occupants(self, low_tier_input, occupants):
        with pytest.raises(ValidationError):
            normalize_input(replace(low_tier_input, occupants=occupants))

    def test_unknown_roof_condition(self, high_tier_input):
        with pytest.raises(ValidationError, match="roof"):
            normalize_input(replace(high_tier_input, roof_condition="green"))

    @pytest.mark.parametrize("cfm", [0, -10])
    def test_non_positive_ventilation_override(self, low_tier_input, cfm):
        with pytest.raises(ValidationError):
            normalize_input(replace(low_tier_input, ventilation_cfm=cfm))


class TestApplianceCatalog:

    def test_known_names_resolve(self):
        resolved, ignored = resolve_appliances({"Lights": 3, "Oven/Microwave": 1})
        assert resolved == ((Appliance.lights, 3), (Appliance.oven_microwave, 1))
        assert ignored == ()

    def test_unknown_names_are_reported_not_raised(self):
        resolved, ignored = resolve_appliances({"Lights": 1, "Toaster": 2})
        assert resolved == ((Appliance.lights, 1),)
        assert ignored == ("Toaster",)

    @pytest.mark.parametrize("count", [-1, 1.5])
    def test_invalid_counts(self, count):
        with pytest.raises(ValidationError):
            resolve_appliances({"Fan": count})

    def test_zero_count_is_allowed(self):
        resolved, _ = resolve_appliances({"Fan": 0})
        assert resolved == ((Appliance.fan, 0),)
