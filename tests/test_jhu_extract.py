"""
Tests for JHU daily report row extraction.
"""

import pytest

from pipelines.ingest.jhu_extract import extract_location, parse_count


class TestParseCount:
    def test_plain_integer(self) -> None:
        assert parse_count("10") == 10

    def test_leading_whitespace_and_sign(self) -> None:
        assert parse_count("  -3") == -3
        assert parse_count("+7") == 7

    def test_trailing_text_ignored(self) -> None:
        assert parse_count("10.9") == 10
        assert parse_count("42abc") == 42

    @pytest.mark.parametrize("value", ["", "   ", "abc", "NaN", ".5", None])
    def test_invalid_values_return_none(self, value) -> None:
        assert parse_count(value) is None

    def test_int_passthrough(self) -> None:
        assert parse_count(5) == 5


class TestExtractLocation:
    def test_province_row(self) -> None:
        """Province-level row maps every position and leaves county empty."""
        row = ["", "", "ProvinceX", "CountryY", "t0", "1.0", "2.0", "10", "2", "1"]
        loc = extract_location(row)
        assert loc.country == "CountryY"
        assert loc.province == "ProvinceX"
        assert loc.county is None
        assert loc.updated_at == "t0"
        assert loc.stats.confirmed == 10
        assert loc.stats.deaths == 2
        assert loc.stats.recovered == 1
        assert loc.coordinates.latitude == "1.0"
        assert loc.coordinates.longitude == "2.0"
        assert loc.is_county is False

    def test_county_row(self) -> None:
        row = [
            "06059", "Orange", "California", "US", "2020-04-01 21:58:49",
            "33.70147516", "-117.7645998", "502", "7", "0", "495", "Orange, California, US",
        ]
        loc = extract_location(row)
        assert loc.county == "Orange"
        assert loc.province == "California"
        assert loc.country == "US"
        assert loc.is_county is True
        assert loc.coordinates.longitude == "-117.7645998"

    def test_empty_strings_become_none(self) -> None:
        row = ["", "", "", "Italy", "t", "41.87", "12.56", "7", "1", "2"]
        loc = extract_location(row)
        assert loc.province is None
        assert loc.county is None

    def test_non_numeric_stats_are_invalid(self) -> None:
        row = ["", "", "P", "C", "t", "0", "0", "n/a", "", "x"]
        loc = extract_location(row)
        assert loc.stats.confirmed is None
        assert loc.stats.deaths is None
        assert loc.stats.recovered is None

    def test_short_row_does_not_raise(self) -> None:
        """Missing trailing positions come back as None."""
        loc = extract_location(["", "", "Hubei", "China"])
        assert loc.country == "China"
        assert loc.province == "Hubei"
        assert loc.updated_at is None
        assert loc.stats.confirmed is None
        assert loc.coordinates.latitude is None

    def test_empty_row(self) -> None:
        loc = extract_location([])
        assert loc.country is None
        assert loc.county is None

    def test_wire_shape_uses_camel_case(self) -> None:
        row = ["", "", "ProvinceX", "CountryY", "t0", "1.0", "2.0", "10", "2", "1"]
        dumped = extract_location(row).model_dump(by_alias=True)
        assert dumped == {
            "country": "CountryY",
            "province": "ProvinceX",
            "county": None,
            "updatedAt": "t0",
            "stats": {"confirmed": 10, "deaths": 2, "recovered": 1},
            "coordinates": {"latitude": "1.0", "longitude": "2.0"},
        }
