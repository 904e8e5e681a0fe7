"""
Segment Aggregator

Walks an ordered segment sequence and produces spreadsheet rows with
cumulative distance, converted to display units (miles, feet).

Two row conventions exist:

- LEGS (default): one row per segment with "from" and "to" points. A
  trailing sentinel supplies the last segment's "to". The cumulative
  distance of a row includes its own leg.
- LOCATIONS: one row per point along the route, starting with a row
  labelled "Start". The sentinel bounds both ends; distance, gain and loss
  on a row describe the leg arriving at that point, so the walk yields one
  row more than there are segments.
"""

import logging
from enum import Enum
from typing import Iterable, List, Sequence

from routesheet.features.segments import DummySegment, Segment
from routesheet.shared.errors import ValidationError
from routesheet.shared.units import meters_to_feet, meters_to_miles

from .models import LegRow, LocationRow

logger = logging.getLogger(__name__)

LEGS_END_TITLE = "The End"
LOCATIONS_END_TITLE = "End"
START_LABEL = "Start"


class RowConvention(str, Enum):
    """How segments map onto rows."""
    LEGS = "legs"
    LOCATIONS = "locations"


def _checked(segments: Iterable[Segment]) -> List[Segment]:
    segments = list(segments)
    for segment in segments:
        if not isinstance(segment, Segment):
            raise ValidationError(f"Expected a Segment, got {segment!r}")
    return segments


def create_leg_rows(real_segments: Sequence[Segment]) -> List[LegRow]:
    """
    Build one row per segment.

    Args:
        real_segments: Segments in traversal order

    Returns:
        Rows aligned 1:1 with the input; empty input gives no rows
    """
    real_segments = _checked(real_segments)
    if not real_segments:
        return []

    segments = real_segments + [DummySegment(title=LEGS_END_TITLE)]
    cumulative = 0.0
    rows = []

    for segment, next_segment in zip(segments, segments[1:]):
        cumulative += segment.leg_distance
        rows.append(LegRow(
            cumulative_distance=meters_to_miles(cumulative),
            from_title=segment.title,
            to_title=next_segment.title,
            distance=meters_to_miles(segment.distance),
            gain=meters_to_feet(segment.gain),
            loss=meters_to_feet(segment.loss),
            description=segment.description,
            users=segment.users,
            surface=segment.surface,
            locomotion=segment.locomotion,
        ))

    logger.debug(f"Aggregated {len(rows)} leg rows")
    return rows


def create_location_rows(real_segments: Sequence[Segment]) -> List[LocationRow]:
    """
    Build one row per point along the route.

    The first row is always labelled "Start", whatever the first segment
    is called. Empty input gives no rows.
    """
    real_segments = _checked(real_segments)
    if not real_segments:
        return []

    segments = (
        [DummySegment(title=START_LABEL)]
        + real_segments
        + [DummySegment(title=LOCATIONS_END_TITLE)]
    )
    cumulative = 0.0
    rows = []

    for index, (prev_segment, segment) in enumerate(zip(segments, segments[1:])):
        cumulative += prev_segment.leg_distance
        rows.append(LocationRow(
            location=START_LABEL if index == 0 else segment.title,
            cumulative_distance=meters_to_miles(cumulative),
            distance=meters_to_miles(prev_segment.distance),
            gain=meters_to_feet(prev_segment.gain),
            loss=meters_to_feet(prev_segment.loss),
            description=segment.description,
            users=segment.users,
            surface=segment.surface,
            locomotion=segment.locomotion,
        ))

    logger.debug(f"Aggregated {len(rows)} location rows")
    return rows


def create_rows(
    segments: Sequence[Segment],
    convention: RowConvention = RowConvention.LEGS
) -> list:
    """Aggregate with the chosen convention."""
    if RowConvention(convention) is RowConvention.LOCATIONS:
        return create_location_rows(segments)
    return create_leg_rows(segments)
