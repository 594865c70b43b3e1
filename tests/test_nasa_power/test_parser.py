"""Testes para o parser NASA POWER."""

import math

import pandas as pd
import pytest

from powerclima.nasa_power.parser import (
    PARSER_VERSION,
    aggregate_monthly,
    normalize_response,
    to_dataframe,
)


def _nasa_response(parameters):
    return {
        "type": "Feature",
        "geometry": {"type": "Point", "coordinates": [-4.5, 37.5, 400.0]},
        "properties": {"parameter": parameters},
    }


class TestNormalizeResponse:
    def test_one_record_per_date_sorted(self, sample_nasa_payload):
        records = normalize_response(sample_nasa_payload)

        assert [r.date for r in records] == ["20240101", "20240102"]

    def test_field_mapping(self, sample_nasa_payload):
        first = normalize_response(sample_nasa_payload)[0]

        assert first.temperature == pytest.approx(8.0)
        assert first.max_temperature == pytest.approx(13.2)
        assert first.min_temperature == pytest.approx(2.1)
        assert first.precipitation == 0.0
        assert first.humidity == pytest.approx(71.0)
        assert first.evapotranspiration == pytest.approx(1.2)

    def test_fill_value_preserved(self, sample_nasa_payload):
        second = normalize_response(sample_nasa_payload)[1]
        assert second.min_temperature == -999.0

    def test_n_dates_n_records(self):
        dates = [f"202403{d:02d}" for d in range(1, 11)]
        data = _nasa_response({"T2M": dict.fromkeys(dates, 15.0)})

        records = normalize_response(data)

        assert len(records) == 10
        assert [r.date for r in records] == sorted(dates)

    def test_unsorted_keys_are_sorted(self):
        data = _nasa_response({"T2M": {"20240103": 3.0, "20240101": 1.0, "20240102": 2.0}})

        records = normalize_response(data)

        assert [r.temperature for r in records] == [1.0, 2.0, 3.0]

    def test_non_date_keys_excluded(self):
        data = _nasa_response(
            {"T2M": {"20240101": 10.0, "units": "C", "longname": "Temp", "2024011": 1.0}}
        )

        records = normalize_response(data)

        assert len(records) == 1
        assert records[0].date == "20240101"

    def test_unknown_params_ignored(self):
        data = _nasa_response({"FOO": {"20240101": 1.0}, "T2M": {"20240101": 10.0}})

        records = normalize_response(data)

        assert records[0].measurements() == {"temperature": 10.0}

    def test_date_without_measurements_skipped(self):
        data = _nasa_response({"FOO": {"20240101": 1.0}})

        assert normalize_response(data) == []

    def test_missing_value_for_date(self):
        data = _nasa_response(
            {"T2M": {"20240101": 10.0, "20240102": 11.0}, "RH2M": {"20240101": 55.0}}
        )

        records = normalize_response(data)

        assert records[0].humidity == pytest.approx(55.0)
        assert records[1].humidity is None

    def test_non_numeric_value_skipped(self):
        data = _nasa_response({"T2M": {"20240101": "abc"}, "RH2M": {"20240101": 40.0}})

        records = normalize_response(data)

        assert records[0].temperature is None
        assert records[0].humidity == pytest.approx(40.0)

    @pytest.mark.parametrize(
        "data",
        [
            None,
            {},
            {"properties": {}},
            {"properties": {"parameter": {}}},
            {"properties": {"parameter": None}},
            {"messages": ["error"]},
        ],
    )
    def test_empty_response_returns_empty_list(self, data):
        assert normalize_response(data) == []

    def test_unexpected_format_returns_empty_list(self):
        data = _nasa_response({"T2M": [1.0, 2.0]})
        assert normalize_response(data) == []

    def test_modern_code_overrides_legacy(self):
        data = _nasa_response(
            {
                "PRECTOT": {"20240101": 1.0},
                "PRECTOTCORR": {"20240101": 2.5},
                "T_SOIL": {"20240101": 9.0},
                "TSOIL1": {"20240101": 11.0},
            }
        )

        record = normalize_response(data)[0]

        assert record.precipitation == pytest.approx(2.5)
        assert record.soil_temperature == pytest.approx(11.0)

    def test_legacy_only_codes(self):
        data = _nasa_response(
            {
                "PRECTOT": {"20240101": 1.0},
                "SOIL_M": {"20240101": 35.0},
                "GDD10": {"20240101": 4.0},
            }
        )

        record = normalize_response(data)[0]

        assert record.precipitation == pytest.approx(1.0)
        assert record.soil_moisture == pytest.approx(35.0)
        assert record.growing_degree_days == pytest.approx(4.0)

    def test_parser_version(self):
        assert PARSER_VERSION >= 1


class TestToDataFrame:
    def test_basic(self, sample_nasa_payload):
        df = to_dataframe(normalize_response(sample_nasa_payload))

        assert len(df) == 2
        assert "date" in df.columns
        assert "temperature" in df.columns
        assert pd.api.types.is_datetime64_any_dtype(df["date"])

    def test_fill_value_becomes_nan(self, sample_nasa_payload):
        df = to_dataframe(normalize_response(sample_nasa_payload))

        assert math.isnan(df.iloc[1]["min_temperature"])
        assert df.iloc[0]["min_temperature"] == pytest.approx(2.1)

    def test_empty(self):
        assert to_dataframe([]).empty


class TestAggregateMonthly:
    def _frame(self):
        jan = [f"202401{d:02d}" for d in range(1, 4)]
        feb = [f"202402{d:02d}" for d in range(1, 3)]
        data = _nasa_response(
            {
                "T2M": {**dict.fromkeys(jan, 10.0), **dict.fromkeys(feb, 14.0)},
                "PRECTOTCORR": {**dict.fromkeys(jan, 2.0), **dict.fromkeys(feb, 5.0)},
                "EVLAND": {**dict.fromkeys(jan, 1.0), **dict.fromkeys(feb, -999.0)},
            }
        )
        return to_dataframe(normalize_response(data))

    def test_one_row_per_month(self):
        monthly = aggregate_monthly(self._frame())
        assert len(monthly) == 2

    def test_precipitation_summed(self):
        monthly = aggregate_monthly(self._frame())

        assert monthly.iloc[0]["precipitation_sum"] == pytest.approx(6.0)
        assert monthly.iloc[1]["precipitation_sum"] == pytest.approx(10.0)

    def test_temperature_averaged(self):
        monthly = aggregate_monthly(self._frame())

        assert monthly.iloc[0]["temperature_mean"] == pytest.approx(10.0)
        assert monthly.iloc[1]["temperature_mean"] == pytest.approx(14.0)

    def test_fill_value_not_summed(self):
        monthly = aggregate_monthly(self._frame())

        assert monthly.iloc[0]["evapotranspiration_sum"] == pytest.approx(3.0)
        assert math.isnan(monthly.iloc[1]["evapotranspiration_sum"])

    def test_all_missing_month_differs_from_measured_zero(self):
        data = _nasa_response(
            {
                "PRECTOTCORR": {
                    "20240101": 0.0,
                    "20240102": 0.0,
                    "20240201": -999.0,
                    "20240202": -999.0,
                },
            }
        )
        monthly = aggregate_monthly(to_dataframe(normalize_response(data)))

        assert monthly.iloc[0]["precipitation_sum"] == pytest.approx(0.0)
        assert math.isnan(monthly.iloc[1]["precipitation_sum"])

    def test_empty(self):
        assert aggregate_monthly(pd.DataFrame()).empty
