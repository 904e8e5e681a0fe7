"""
Shared utilities (NOT business logic).

Usage:
    from routesheet.shared import meters_to_miles, is_blank
    from routesheet.shared.errors import NetworkError
"""
from .units import (
    is_blank,
    as_number,
    round_to,
    meters_to_miles,
    meters_to_feet,
    METERS_TO_MILES,
    METERS_TO_FEET,
)
from .elevation import (
    smooth_elevations,
    calculate_elevation_changes,
    profile_from_positions,
)
from .errors import (
    RoutesheetError,
    NetworkError,
    ParseError,
    AlignmentError,
    ValidationError,
)

__all__ = [
    # units
    "is_blank",
    "as_number",
    "round_to",
    "meters_to_miles",
    "meters_to_feet",
    "METERS_TO_MILES",
    "METERS_TO_FEET",
    # elevation
    "smooth_elevations",
    "calculate_elevation_changes",
    "profile_from_positions",
    # errors
    "RoutesheetError",
    "NetworkError",
    "ParseError",
    "AlignmentError",
    "ValidationError",
]
