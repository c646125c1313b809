"""
Tests for the reference tables the load procedure depends on
"""

import pytest

from domain.core.reference_data import (
    APPLIANCE_KW,
    CITY_DATA,
    CONSTANTS,
    ROOF_U_FACTORS,
    SOLAR_HEAT_GAIN,
    U_FACTORS,
    get_climate_record,
)
from models.enums import Appliance, Direction, RoofCondition


class TestCityData:

    def test_ten_cities(self):
        assert len(CITY_DATA) == 10
        for name, record in CITY_DATA.items():
            assert record.city == name

    @pytest.mark.parametrize("city", sorted(CITY_DATA))
    def test_cooling_design_conditions(self, city):
        record = CITY_DATA[city]
        assert record.dry_bulb_f > CONSTANTS.indoor_temp_f
        assert record.wet_bulb_f < record.dry_bulb_f
        assert record.dew_point_f <= record.wet_bulb_f
        assert record.grains_per_lb > CONSTANTS.indoor_grains
        assert 0 < record.relative_humidity_pct < 100

    def test_mumbai_design_dry_bulb(self):
        assert get_climate_record("Mumbai").dry_bulb_f == 92

    def test_lookup_is_exact(self):
        assert get_climate_record("MUMBAI") is None

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            CITY_DATA["Nowhere"] = CITY_DATA["Mumbai"]


class TestMaterialAndApplianceTables:

    def test_u_factors(self):
        assert U_FACTORS == {"glass": 0.30, "wall": 0.16, "floor": 0.02}
        assert ROOF_U_FACTORS[RoofCondition.exposed] == 0.46
        assert ROOF_U_FACTORS[RoofCondition.insulated] == 0.135
        assert ROOF_U_FACTORS[RoofCondition.shaded] == 0.15
        assert ROOF_U_FACTORS[RoofCondition.water_covered] == 0.10

    def test_every_catalog_appliance_has_a_rating(self):
        assert set(APPLIANCE_KW) == set(Appliance)
        assert APPLIANCE_KW[Appliance.lights] == 0.05
        assert APPLIANCE_KW[Appliance.pc_laptop] == 0.125

    def test_solar_gain_covers_all_directions(self):
        assert set(SOLAR_HEAT_GAIN) == set(Direction)

    def test_catalog_lookup(self):
        assert Appliance.lookup("TV") is Appliance.tv
        assert Appliance.lookup("tv") is None


def test_constants():
    assert CONSTANTS.person_sensible_btu == 255
    assert CONSTANTS.person_latent_btu == 245
    assert CONSTANTS.equipment_factor == 3410
    assert CONSTANTS.bypass_factor == 0.12
    assert CONSTANTS.safety_fraction == 0.03
    assert CONSTANTS.btu_per_ton == 12000
