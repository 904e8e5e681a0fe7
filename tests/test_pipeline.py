"""
Tests for RoutePipeline and ClimatePipeline.

External services are replaced with deterministic stubs.
"""

import asyncio
from datetime import date

import pytest

from routesheet.features.climate import ClimateQuery, Observation
from routesheet.features.segments import Segment
from routesheet.features.spreadsheet import RowConvention
from routesheet.services import ClimatePipeline, RoutePipeline, StageEvent
from routesheet.shared.errors import AlignmentError, NetworkError, ParseError


# =============================================================================
# Stubs
# =============================================================================

class StubElevation:
    """Adds a steady 30 m climb to every feature."""

    def __init__(self):
        self.calls = []

    async def augment(self, geojson):
        self.calls.append(geojson)
        features = []
        for feature in geojson["features"]:
            positions = feature["geometry"]["coordinates"]
            step = 30.0 / (len(positions) - 1)
            features.append({
                "type": "Feature",
                "properties": feature["properties"],
                "geometry": {
                    "type": "LineString",
                    "coordinates": [p + [1000.0 + i * step] for i, p in enumerate(positions)],
                },
            })
        return {"type": "FeatureCollection", "features": features}


class FailingElevation:
    async def augment(self, geojson):
        raise NetworkError("Query to Elevation Service failed: Bad Gateway", 502, "Bad Gateway")


class MalformedElevation:
    """Returns features whose geometry is not an object."""

    async def augment(self, geojson):
        return {"type": "FeatureCollection", "features": ["oops"] * len(geojson["features"])}


class StubClimate:
    def __init__(self, observations):
        self.observations = observations

    async def augment(self, queries):
        return self.observations


LINE = [[0.0, 0.0], [0.001, 0.001], [0.002, 0.002]]


@pytest.fixture
def segments():
    return [
        Segment("10 - Summit", distance=1609.34, coordinates=LINE),
        Segment("2 - Ridge", distance=1609.34, coordinates=LINE),
        Segment("1 - Trailhead", distance=804.67),
    ]


# =============================================================================
# Test Route Pipeline
# =============================================================================

class TestRoutePipeline:
    """Tests for RoutePipeline.run."""

    def test_sorts_and_aggregates(self, segments):
        pipeline = RoutePipeline(elevation=StubElevation())
        result = asyncio.run(pipeline.run(segments, strip_prefix=True))

        records = result.spreadsheet.to_records()
        assert [r["from"] for r in records] == ["Trailhead", "Ridge", "Summit"]
        assert [r["cumulativeDistance"] for r in records] == [0.5, 1.5, 2.5]

    def test_elevation_skipped_by_default(self, segments):
        elevation = StubElevation()
        result = asyncio.run(RoutePipeline(elevation=elevation).run(segments))

        assert elevation.calls == []
        assert "gain" not in [c.key for c in result.spreadsheet.columns]

    def test_elevation_applied(self, segments):
        elevation = StubElevation()
        result = asyncio.run(
            RoutePipeline(elevation=elevation).run(segments, add_elevation=True)
        )

        assert len(elevation.calls) == 1
        assert len(elevation.calls[0]["features"]) == 2
        records = result.spreadsheet.to_records()
        assert records[0]["gain"] is None  # Trailhead has no geometry
        assert records[1]["gain"] == 98    # 30 m
        assert result.elevation_error is None

    def test_elevation_failure_degrades(self, segments):
        result = asyncio.run(
            RoutePipeline(elevation=FailingElevation()).run(segments, add_elevation=True)
        )

        assert isinstance(result.elevation_error, NetworkError)
        assert result.warnings == ["Query to Elevation Service failed: Bad Gateway"]
        assert len(result.spreadsheet.rows) == 3
        assert StageEvent("elevation", "failed") in result.events

    def test_malformed_response_degrades(self, segments):
        result = asyncio.run(
            RoutePipeline(elevation=MalformedElevation()).run(segments, add_elevation=True)
        )

        assert isinstance(result.elevation_error, ParseError)
        assert len(result.spreadsheet.rows) == 3

    def test_no_geometry_no_request(self):
        elevation = StubElevation()
        result = asyncio.run(
            RoutePipeline(elevation=elevation).run([Segment("A", distance=5)], add_elevation=True)
        )
        assert elevation.calls == []
        assert result.elevation_error is None

    def test_observer_sees_stages_in_order(self, segments):
        events = []
        asyncio.run(
            RoutePipeline(elevation=StubElevation()).run(segments, observer=events.append)
        )
        assert [e.stage for e in events] == ["sort", "elevation", "aggregate", "columns"]
        assert events[1].detail == "skipped"

    def test_convention_override(self, segments):
        pipeline = RoutePipeline(elevation=StubElevation())
        result = asyncio.run(pipeline.run(segments, convention=RowConvention.LOCATIONS))

        assert len(result.spreadsheet.rows) == 4
        assert pipeline.convention is RowConvention.LEGS

    def test_empty(self):
        result = asyncio.run(RoutePipeline(elevation=StubElevation()).run([]))
        assert result.spreadsheet.rows == []


# =============================================================================
# Test Climate Pipeline
# =============================================================================

QUERIES = [
    ClimateQuery(lat=44.0, long=-110.0, date=date(2019, 6, 29)),
    ClimateQuery(lat=45.0, long=-111.0, date=date(2019, 6, 30)),
]


class TestClimatePipeline:
    """Tests for ClimatePipeline.run."""

    def test_merges_observations(self):
        climate = StubClimate([Observation(max_temperature=20.0), Observation(max_temperature=22.0)])
        sheet = asyncio.run(ClimatePipeline(climate=climate).run(QUERIES))

        records = sheet.to_records()
        assert [r["maxTemperature"] for r in records] == [20.0, 22.0]
        assert records[0]["lat"] == 44.0

    def test_short_response_aborts(self):
        climate = StubClimate([Observation(max_temperature=20.0)])
        with pytest.raises(AlignmentError):
            asyncio.run(ClimatePipeline(climate=climate).run(QUERIES))

    def test_observer(self):
        events = []
        climate = StubClimate([Observation(), Observation()])
        asyncio.run(ClimatePipeline(climate=climate).run(QUERIES, observer=events.append))
        assert [e.stage for e in events] == ["climate", "merge", "columns"]
