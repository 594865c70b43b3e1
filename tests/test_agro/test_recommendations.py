"""Testes para o gerador de recomendacoes agricolas."""

import pytest

from powerclima.agro.indices import calculate_indices
from powerclima.agro.models import UNDETERMINED, AgroClimateIndices, HarvestCondition, RiskLevel
from powerclima.agro.recommendations import generate_recommendations, round_half_up
from powerclima.nasa_power.models import DailyWeatherRecord

EMPTY_DAY = DailyWeatherRecord(date="20240101")


def _recs(record=EMPTY_DAY, **indices):
    return generate_recommendations(record, AgroClimateIndices(**indices))


class TestRoundHalfUp:
    @pytest.mark.parametrize("value,expected", [(4.5, 5), (5.5, 6), (4.49, 4), (3.0, 3)])
    def test_values(self, value, expected):
        assert round_half_up(value) == expected


class TestIrrigation:
    def test_needed(self):
        irrigation = _recs(irrigation_need=12.5).irrigation

        assert irrigation.recommended is True
        assert irrigation.amount == 13
        assert "13 mm" in irrigation.message

    def test_threshold_not_included(self):
        irrigation = _recs(irrigation_need=3.0).irrigation

        assert irrigation.recommended is False
        assert irrigation.amount == 0
        assert irrigation.message == "No es necesario regar hoy."

    def test_undetermined(self):
        irrigation = _recs().irrigation

        assert irrigation.recommended is False
        assert "No hay datos suficientes" in irrigation.message


class TestPestControl:
    @pytest.mark.parametrize(
        "risk,level,recommended",
        [
            (0.9, RiskLevel.HIGH, True),
            (0.5, RiskLevel.MEDIUM, True),
            (0.4, RiskLevel.LOW, False),
            (0.0, RiskLevel.LOW, False),
        ],
    )
    def test_tiers(self, risk, level, recommended):
        pest = _recs(disease_risk=risk).pest_control

        assert pest.risk_level == level
        assert pest.recommended is recommended

    def test_undetermined(self):
        pest = _recs().pest_control

        assert pest.risk_level == UNDETERMINED
        assert pest.recommended is False


class TestFertilization:
    def test_recommended(self):
        record = DailyWeatherRecord(date="20240101", precipitation=1.0, soil_moisture=35.0)
        assert _recs(record).fertilization.recommended is True

    def test_rainy(self):
        record = DailyWeatherRecord(date="20240101", precipitation=8.0, soil_moisture=35.0)
        assert _recs(record).fertilization.recommended is False

    def test_missing_values_count_as_zero(self):
        assert _recs().fertilization.recommended is False


class TestFieldOperations:
    def test_can_work(self):
        assert _recs().field_operations.can_work is True

    def test_wet_soil(self):
        record = DailyWeatherRecord(date="20240101", soil_moisture=85.0)
        assert _recs(record).field_operations.can_work is False

    def test_heavy_rain(self):
        record = DailyWeatherRecord(date="20240101", precipitation=5.5)
        field_ops = _recs(record).field_operations

        assert field_ops.can_work is False
        assert "posponer" in field_ops.message


class TestPlanting:
    @pytest.mark.parametrize("optimal", [True, False])
    def test_mirrors_index(self, optimal):
        assert _recs(optimal_planting_conditions=optimal).planting.recommended is optimal

    def test_undetermined(self):
        assert _recs().planting.recommended == UNDETERMINED


class TestHarvesting:
    def test_good(self):
        harvesting = _recs(harvest_conditions=HarvestCondition.GOOD).harvesting

        assert harvesting.recommended is True
        assert harvesting.message.startswith("Condiciones de cosecha: Buenas.")
        assert "Aproveche" in harvesting.message

    def test_fair(self):
        harvesting = _recs(harvest_conditions=HarvestCondition.FAIR).harvesting

        assert harvesting.recommended is False
        assert harvesting.message == "Condiciones de cosecha: Regulares."

    def test_poor(self):
        harvesting = _recs(harvest_conditions=HarvestCondition.POOR).harvesting

        assert harvesting.recommended is False
        assert "posponer la cosecha" in harvesting.message

    def test_undetermined(self):
        harvesting = _recs().harvesting

        assert harvesting.recommended is False
        assert harvesting.message == "Condiciones de cosecha: no definido."


class TestGenerateRecommendations:
    def test_from_calculated_indices(self, mild_day):
        recs = generate_recommendations(mild_day, calculate_indices(mild_day))

        assert recs.irrigation.recommended is True
        assert recs.irrigation.amount == 6
        assert recs.pest_control.risk_level == RiskLevel.LOW
        assert recs.fertilization.recommended is True
        assert recs.field_operations.can_work is True
        assert recs.planting.recommended is True
        assert recs.harvesting.recommended is True
