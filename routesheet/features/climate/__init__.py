"""
Climate augmentation (Daymet).

Usage:
    from routesheet.features.climate import ClimateQuery, DaymetClient, merge_observations

Components:
- ClimateQuery / Observation / ClimateRow: point-day lookups and results
- DaymetClient: one observation per query, in order
- merge_observations: positional merge, AlignmentError on length mismatch
- build_climate_spreadsheet: climate columns with data
"""

from .models import ClimateQuery, Observation, ClimateRow, DAYMET_VARIABLES
from .client import DaymetClient, ClimateService, parse_observation
from .merge import merge_observations
from .columns import CLIMATE_COLUMNS, FORMATTERS, format_cell, build_climate_spreadsheet

__all__ = [
    # Models
    "ClimateQuery",
    "Observation",
    "ClimateRow",
    "DAYMET_VARIABLES",
    # Client
    "DaymetClient",
    "ClimateService",
    "parse_observation",
    # Merge
    "merge_observations",
    # Columns
    "CLIMATE_COLUMNS",
    "FORMATTERS",
    "format_cell",
    "build_climate_spreadsheet",
]
