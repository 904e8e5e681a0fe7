"""
Route segments.

Usage:
    from routesheet.features.segments import Segment, sort_segments

Components:
- Segment: one leg of the route (immutable)
- DummySegment: zero-metric sentinel used to bound aggregation walks
- sort_segments: title ordering with optional numeric-prefix stripping
"""

from .models import Segment, DummySegment
from .sorter import sort_segments, natural_key, split_prefix

__all__ = [
    "Segment",
    "DummySegment",
    "sort_segments",
    "natural_key",
    "split_prefix",
]
