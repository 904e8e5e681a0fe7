"""
Tests for the segment aggregator.

Covers both row conventions: legs (from/to, default) and locations.
"""

import pytest

from routesheet.features.segments import Segment
from routesheet.features.spreadsheet import (
    RowConvention,
    create_leg_rows,
    create_location_rows,
    create_rows,
)
from routesheet.shared.errors import ValidationError
from routesheet.shared.units import meters_to_miles


MILE = 1609.34


# =============================================================================
# Test Data
# =============================================================================

@pytest.fixture
def route():
    return [
        Segment("Trailhead", distance=MILE, gain=100, loss=10, surface="dirt",
                description="Parking"),
        Segment("Junction", distance=MILE / 2, gain=None, users="bikes"),
        Segment("Summit", distance=2 * MILE, gain=300, loss=0, locomotion="scramble"),
    ]


# =============================================================================
# Test Leg Rows
# =============================================================================

class TestCreateLegRows:
    """Tests for create_leg_rows (default convention)."""

    def test_one_row_per_segment(self, route):
        assert len(create_leg_rows(route)) == len(route)

    def test_empty(self):
        assert create_leg_rows([]) == []

    def test_from_to_pairs(self, route):
        rows = create_leg_rows(route)
        assert [(r.from_title, r.to_title) for r in rows] == [
            ("Trailhead", "Junction"),
            ("Junction", "Summit"),
            ("Summit", "The End"),
        ]

    def test_cumulative_includes_own_leg(self, route):
        rows = create_leg_rows(route)
        assert [r.cumulative_distance for r in rows] == [1.0, 1.5, 3.5]

    def test_last_cumulative_is_total(self, route):
        rows = create_leg_rows(route)
        total = sum(s.distance for s in route)
        assert rows[-1].cumulative_distance == pytest.approx(meters_to_miles(total), abs=0.1)

    def test_units(self, route):
        row = create_leg_rows(route)[0]
        assert row.distance == 1.0
        assert row.gain == 328
        assert row.loss == 33

    def test_blank_stays_blank(self, route):
        """Missing gain is None; zero loss stays zero."""
        rows = create_leg_rows(route)
        assert rows[1].gain is None
        assert rows[2].loss == 0

    def test_descriptive_fields_carried(self, route):
        rows = create_leg_rows(route)
        assert rows[0].surface == "dirt"
        assert rows[0].description == "Parking"
        assert rows[1].users == "bikes"
        assert rows[2].locomotion == "scramble"

    def test_missing_distance(self):
        """Missing distance accumulates as zero but displays blank."""
        rows = create_leg_rows([Segment("A"), Segment("B", distance=MILE)])
        assert rows[0].distance is None
        assert rows[0].cumulative_distance == 0.0
        assert rows[1].cumulative_distance == 1.0

    def test_single_segment(self):
        rows = create_leg_rows([Segment("Only", distance=MILE)])
        assert len(rows) == 1
        assert rows[0].to_title == "The End"

    def test_not_a_segment(self):
        with pytest.raises(ValidationError):
            create_leg_rows([{"title": "A", "distance": 5}])

    def test_three_leg_route(self):
        """Two one-mile legs, the second without gain."""
        rows = create_leg_rows([
            Segment("A", distance=1609.34, gain=100),
            Segment("B", distance=1609.34, gain=None),
        ])
        assert len(rows) == 2
        assert rows[0].distance == 1.0
        assert rows[0].gain == 328
        assert rows[1].distance == 1.0
        assert rows[1].gain is None
        assert [r.cumulative_distance for r in rows] == [1.0, 2.0]


# =============================================================================
# Test Location Rows
# =============================================================================

class TestCreateLocationRows:
    """Tests for create_location_rows (alternative convention)."""

    def test_start_row_plus_one_per_segment(self, route):
        assert len(create_location_rows(route)) == len(route) + 1

    def test_empty(self):
        assert create_location_rows([]) == []

    def test_first_row_is_start(self, route):
        rows = create_location_rows(route)
        assert rows[0].location == "Start"
        assert rows[0].cumulative_distance == 0.0
        assert rows[0].distance == 0.0
        assert rows[0].gain is None

    def test_locations(self, route):
        rows = create_location_rows(route)
        assert [r.location for r in rows] == ["Start", "Junction", "Summit", "End"]

    def test_metrics_from_previous_segment(self, route):
        rows = create_location_rows(route)
        assert rows[1].distance == 1.0
        assert rows[1].gain == 328
        assert rows[2].gain is None
        assert [r.cumulative_distance for r in rows] == [0.0, 1.0, 1.5, 3.5]

    def test_descriptions_from_current_segment(self, route):
        rows = create_location_rows(route)
        assert rows[0].description == "Parking"
        assert rows[0].surface == "dirt"
        assert rows[-1].description is None


class TestCreateRows:
    """Tests for create_rows dispatch."""

    def test_default_is_legs(self, route):
        assert len(create_rows(route)) == 3

    def test_locations_by_value(self, route):
        assert len(create_rows(route, "locations")) == 4

    def test_locations_by_enum(self, route):
        assert create_rows(route, RowConvention.LOCATIONS)[0].location == "Start"
