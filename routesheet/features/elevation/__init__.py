"""
Elevation augmentation.

Usage:
    from routesheet.features.elevation import ElevationClient, apply_elevation
"""

from .client import ElevationClient, ElevationService
from .enrich import route_feature_collection, apply_elevation

__all__ = [
    "ElevationClient",
    "ElevationService",
    "route_feature_collection",
    "apply_elevation",
]
