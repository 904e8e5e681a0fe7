"""
Segment model.

One leg of a route, as handed over by the file parser. Segments are
immutable: enrichment always produces a new value.
"""

import math
from dataclasses import dataclass
from typing import Any, Optional, Tuple

from routesheet.shared.errors import ValidationError
from routesheet.shared.units import is_blank

Position = Tuple[float, ...]

# Numeric fields, all in meters
METRIC_FIELDS = ("distance", "gain", "loss")

# Free-form descriptive fields
TEXT_FIELDS = ("surface", "locomotion", "users", "description")


def _check_metric(name: str, value: Any) -> Optional[float]:
    """Validate a metric field: None or a finite, non-negative number."""
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"{name} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise ValidationError(f"{name} must be finite, got {value!r}")
    if value < 0:
        raise ValidationError(f"{name} must be non-negative, got {value!r}")
    return float(value)


def _coerce_metric(name: str, value: Any) -> Optional[float]:
    """Parser-side coercion: numeric strings are accepted, blanks become None."""
    if isinstance(value, str):
        if not value.strip():
            return None
        try:
            return float(value)
        except ValueError:
            raise ValidationError(f"{name} is not a number: {value!r}")
    return value


def _coerce_text(value: Any) -> Optional[str]:
    """Tag lists are joined; blank strings become None."""
    if value is None:
        return None
    if isinstance(value, (list, tuple)):
        value = ", ".join(str(v) for v in value if not is_blank(v))
    text = str(value).strip()
    return text or None


@dataclass(frozen=True)
class Segment:
    """
    One edge of the route.

    distance/gain/loss are meters. A missing distance accumulates as zero
    but is still reported as blank; missing optional fields stay None.
    """
    title: str
    distance: Optional[float] = None
    gain: Optional[float] = None
    loss: Optional[float] = None
    surface: Optional[str] = None
    locomotion: Optional[str] = None
    users: Optional[str] = None
    description: Optional[str] = None
    coordinates: Optional[Tuple[Position, ...]] = None

    def __post_init__(self):
        if not isinstance(self.title, str):
            raise ValidationError(f"title must be a string, got {self.title!r}")
        for name in METRIC_FIELDS:
            object.__setattr__(self, name, _check_metric(name, getattr(self, name)))
        if self.coordinates is not None:
            try:
                positions = tuple(tuple(float(c) for c in p) for p in self.coordinates)
            except (TypeError, ValueError):
                raise ValidationError(f"Malformed coordinates in segment {self.title!r}")
            object.__setattr__(self, "coordinates", positions)

    @property
    def leg_distance(self) -> float:
        """Distance used for accumulation (missing counts as zero)."""
        return self.distance or 0.0

    @property
    def has_geometry(self) -> bool:
        return bool(self.coordinates)

    @classmethod
    def from_dict(cls, record: dict) -> "Segment":
        """
        Build a Segment from a parsed record.

        Args:
            record: Mapping with title/name, distance, gain, loss and the
                descriptive fields. Unknown keys are ignored.

        Raises:
            ValidationError: If a field cannot be interpreted
        """
        if not isinstance(record, dict):
            raise ValidationError(f"Segment record must be a mapping, got {record!r}")

        title = record.get("title")
        if title is None:
            title = record.get("name", "")

        values = {}
        for name in METRIC_FIELDS:
            values[name] = _coerce_metric(name, record.get(name))
        for name in TEXT_FIELDS:
            values[name] = _coerce_text(record.get(name))
        values["coordinates"] = record.get("coordinates") or None

        return cls(title=str(title), **values)

    @classmethod
    def from_feature(cls, feature: dict) -> "Segment":
        """
        Build a Segment from a GeoJSON Feature.

        Properties carry the metadata; LineString and MultiLineString
        geometries supply the coordinates (MultiLineString parts are
        concatenated in order).
        """
        if not isinstance(feature, dict) or feature.get("type") != "Feature":
            raise ValidationError("Expected a GeoJSON Feature")

        record = dict(feature.get("properties") or {})
        geometry = feature.get("geometry") or {}
        if not isinstance(geometry, dict):
            raise ValidationError("Feature geometry must be an object")
        kind = geometry.get("type")

        if kind == "LineString":
            record["coordinates"] = geometry.get("coordinates") or None
        elif kind == "MultiLineString":
            parts = geometry.get("coordinates") or []
            record["coordinates"] = [p for part in parts for p in part] or None
        else:
            record["coordinates"] = None

        return cls.from_dict(record)


@dataclass(frozen=True)
class DummySegment(Segment):
    """Zero-metric sentinel bounding an aggregation walk."""
    title: str = "The End"
    distance: Optional[float] = 0.0
