"""
Fold elevation-service output back into segments.

The request is a FeatureCollection with one LineString feature per
segment that has geometry; the response is matched to segments by
position.
"""

import logging
from dataclasses import replace
from typing import Any, List, Sequence, Tuple

from routesheet.features.segments import Segment
from routesheet.shared.elevation import calculate_elevation_changes, profile_from_positions
from routesheet.shared.errors import ParseError, ValidationError

logger = logging.getLogger(__name__)


def route_feature_collection(
    segments: Sequence[Segment]
) -> Tuple[dict, List[int]]:
    """
    Build the elevation request body.

    Returns:
        (FeatureCollection, indices) where indices[i] is the position in
        `segments` of the i-th feature. Segments without geometry are left
        out.
    """
    features = []
    indices = []

    for index, segment in enumerate(segments):
        if not segment.has_geometry:
            continue
        features.append({
            "type": "Feature",
            "properties": {"title": segment.title},
            "geometry": {
                "type": "LineString",
                "coordinates": [list(p) for p in segment.coordinates],
            },
        })
        indices.append(index)

    return {"type": "FeatureCollection", "features": features}, indices


def _enriched_positions(feature: Any) -> List[List[float]]:
    if not isinstance(feature, dict):
        raise ParseError("Elevation response feature is not an object")
    geometry = feature.get("geometry")
    if not isinstance(geometry, dict):
        raise ParseError("Elevation response feature has no geometry")
    positions = geometry.get("coordinates")
    if not isinstance(positions, list):
        raise ParseError("Elevation response feature has no coordinates")
    return positions


def apply_elevation(
    segments: Sequence[Segment],
    enriched: Any,
    indices: Sequence[int]
) -> List[Segment]:
    """
    Return new segments carrying the enriched geometry.

    Gain/loss are filled in from the elevation profile only where the
    segment has none of its own.

    Raises:
        ParseError: If the response is not a FeatureCollection with one
            feature per requested segment
    """
    if not isinstance(enriched, dict) or not isinstance(enriched.get("features"), list):
        raise ParseError("Elevation response is not a FeatureCollection")

    features = enriched["features"]
    if len(features) != len(indices):
        raise ParseError(
            f"Elevation response has {len(features)} features, expected {len(indices)}"
        )

    result = list(segments)

    for feature, index in zip(features, indices):
        segment = result[index]
        positions = _enriched_positions(feature)
        try:
            profile = profile_from_positions(positions)
        except (TypeError, ValueError, IndexError) as e:
            raise ParseError(f"Elevation response for {segment.title!r} is malformed: {e}") from e

        changes = {"coordinates": positions}
        if len(profile) >= 2 and (segment.gain is None or segment.loss is None):
            gain, loss = calculate_elevation_changes(profile)
            if segment.gain is None:
                changes["gain"] = gain
            if segment.loss is None:
                changes["loss"] = loss

        try:
            result[index] = replace(segment, **changes)
        except ValidationError as e:
            raise ParseError(f"Elevation response for {segment.title!r} is malformed: {e}") from e

    logger.debug(f"Applied elevation to {len(indices)} of {len(result)} segments")
    return result
