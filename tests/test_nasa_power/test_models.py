"""Testes para modelos e constantes NASA POWER."""

import pytest
from pydantic import ValidationError

from powerclima.nasa_power.models import (
    AGRO_PARAMS,
    DEFAULT_REGION_PARAMS,
    LEGACY_FIELD_MAP,
    MODERN_FIELD_MAP,
    PARAM_FIELD_MAP,
    REGION_COORDS,
    DailyWeatherRecord,
    GeoCoordinates,
    MeteoParam,
    Region,
)


class TestRegionCoords:
    def test_all_regions_have_coords(self):
        assert set(REGION_COORDS) == set(Region)
        assert len(REGION_COORDS) == 19

    def test_madrid(self):
        coords = REGION_COORDS[Region.MADRID]
        assert coords.latitude == pytest.approx(40.4)
        assert coords.longitude == pytest.approx(-3.7)

    def test_castilla_y_leon(self):
        coords = REGION_COORDS[Region.CASTILLA_Y_LEON]
        assert coords.latitude == pytest.approx(41.8)
        assert coords.longitude == pytest.approx(-4.5)

    def test_coords_inside_spain(self):
        for coords in REGION_COORDS.values():
            assert 27.0 < coords.latitude < 44.0
            assert -19.0 < coords.longitude < 5.0

    def test_table_is_immutable(self):
        with pytest.raises(TypeError):
            REGION_COORDS[Region.MADRID] = GeoCoordinates(latitude=0, longitude=0)

    def test_region_display_names(self):
        assert Region.CATALUNA.value == "Cataluña"
        assert Region.PAIS_VASCO.value == "País Vasco"


class TestGeoCoordinates:
    def test_valid(self):
        coords = GeoCoordinates(latitude=-90, longitude=180)
        assert coords.latitude == -90

    def test_latitude_out_of_range(self):
        with pytest.raises(ValidationError):
            GeoCoordinates(latitude=91, longitude=0)

    def test_longitude_out_of_range(self):
        with pytest.raises(ValidationError):
            GeoCoordinates(latitude=0, longitude=-181)


class TestParameterSets:
    def test_default_region_params(self):
        assert len(DEFAULT_REGION_PARAMS) == 10
        assert MeteoParam.PRECTOTCORR in DEFAULT_REGION_PARAMS
        assert MeteoParam.EVLAND in DEFAULT_REGION_PARAMS

    def test_agro_params_within_api_limit(self):
        assert len(AGRO_PARAMS) == 18
        assert len(AGRO_PARAMS) <= 20
        assert len(set(AGRO_PARAMS)) == len(AGRO_PARAMS)

    def test_every_meteo_param_has_field(self):
        for param in MeteoParam:
            assert param in MODERN_FIELD_MAP

    def test_legacy_applied_before_modern(self):
        codes = [code for code, _ in PARAM_FIELD_MAP]
        assert codes.index("PRECTOT") < codes.index("PRECTOTCORR")
        assert codes.index("T_SOIL") < codes.index("TSOIL1")

    def test_legacy_and_modern_share_fields(self):
        assert LEGACY_FIELD_MAP["PRECTOT"] == MODERN_FIELD_MAP[MeteoParam.PRECTOTCORR]
        assert LEGACY_FIELD_MAP["T_SOIL"] == MODERN_FIELD_MAP[MeteoParam.TSOIL1]


class TestDailyWeatherRecord:
    def test_only_date(self):
        record = DailyWeatherRecord(date="20240101")
        assert record.temperature is None
        assert record.measurements() == {}

    def test_measurements_skip_none(self):
        record = DailyWeatherRecord(date="20240101", temperature=12.5, precipitation=None)
        assert record.measurements() == {"temperature": 12.5}

    def test_keeps_fill_value(self):
        record = DailyWeatherRecord(date="20240101", soil_moisture=-999.0)
        assert record.soil_moisture == -999.0

    @pytest.mark.parametrize("value", ["2024-01-01", "2024011", "units", "202401011"])
    def test_invalid_date(self, value):
        with pytest.raises(ValidationError):
            DailyWeatherRecord(date=value)

    def test_frozen(self):
        record = DailyWeatherRecord(date="20240101", temperature=10.0)
        with pytest.raises(ValidationError):
            record.temperature = 11.0
