"""
Tests for climate models, positional merge and columns.
"""

from datetime import date

import pytest

from routesheet.features.climate import (
    ClimateQuery,
    Observation,
    build_climate_spreadsheet,
    format_cell,
    merge_observations,
)
from routesheet.shared.errors import AlignmentError, ValidationError


QUERIES = [
    ClimateQuery(lat=44.0, long=-110.0, date=date(2019, 6, 29)),
    ClimateQuery(lat=45.0, long=-111.0, date=date(2019, 6, 30)),
]


class TestClimateQuery:
    """Tests for ClimateQuery validation."""

    def test_from_dict_with_iso_date(self):
        query = ClimateQuery.from_dict({"latitude": "44.1", "longitude": -110, "date": "2019-06-29"})
        assert query.lat == 44.1
        assert query.long == -110.0
        assert query.date == date(2019, 6, 29)

    def test_datetime_string_truncated_to_day(self):
        query = ClimateQuery.from_dict({"lat": 1, "long": 2, "date": "2019-06-29T08:00:00"})
        assert query.date == date(2019, 6, 29)

    @pytest.mark.parametrize("lat,long", [(91, 0), (0, 181), ("north", 0), (None, 0)])
    def test_bad_coordinates(self, lat, long):
        with pytest.raises(ValidationError):
            ClimateQuery(lat=lat, long=long, date=date(2019, 1, 1))

    def test_bad_date(self):
        with pytest.raises(ValidationError):
            ClimateQuery.from_dict({"lat": 1, "long": 2, "date": "June 29"})


class TestMergeObservations:
    """Tests for merge_observations."""

    def test_merged_by_position(self):
        observations = [Observation(max_temperature=10.0), Observation(max_temperature=20.0)]
        rows = merge_observations(QUERIES, observations)

        assert [r.lat for r in rows] == [44.0, 45.0]
        assert [r.max_temperature for r in rows] == [10.0, 20.0]
        assert rows[1].date == date(2019, 6, 30)

    def test_shorter_response_raises(self):
        with pytest.raises(AlignmentError) as exc_info:
            merge_observations(QUERIES, [Observation()])

        assert exc_info.value.expected == 2
        assert exc_info.value.actual == 1

    def test_longer_response_raises(self):
        with pytest.raises(AlignmentError):
            merge_observations(QUERIES, [Observation()] * 3)

    def test_empty(self):
        assert merge_observations([], []) == []


class TestClimateSpreadsheet:
    """Tests for climate column selection and formatting."""

    def test_empty_variables_dropped(self):
        rows = merge_observations(QUERIES, [Observation(max_temperature=10.0), Observation()])
        keys = [c.key for c in build_climate_spreadsheet(rows).columns]
        assert keys == ["lat", "long", "date", "maxTemperature"]

    def test_point_columns_always_present(self):
        keys = [c.key for c in build_climate_spreadsheet([]).columns]
        assert keys == ["lat", "long", "date"]

    def test_format_cell(self):
        assert format_cell("dayLength", 55987.2) == "15:33"
        assert format_cell("maxTemperature", 12.345) == "12.3"
        assert format_cell("date", date(2019, 6, 29)) == "2019-06-29"
        assert format_cell("precipitation", None) == ""

    def test_formatted_matrix(self):
        rows = merge_observations(QUERIES[:1], [Observation(precipitation=2.0)])
        matrix = build_climate_spreadsheet(rows).to_matrix(format_cell)
        assert matrix == [["44.000000", "-110.000000", "2019-06-29", "2.0"]]
