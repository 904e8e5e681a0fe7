"""
Route spreadsheet: aggregation and column selection.

Usage:
    from routesheet.features.spreadsheet import build_spreadsheet, RowConvention

Components:
- create_leg_rows / create_location_rows: the two aggregation walks
- select_columns: drop optional columns with no values
- Spreadsheet: realized columns + rows, as records or a matrix
"""

from .models import Column, LegRow, LocationRow, Spreadsheet
from .aggregator import (
    RowConvention,
    create_leg_rows,
    create_location_rows,
    create_rows,
)
from .columns import (
    LEG_COLUMNS,
    LOCATION_COLUMNS,
    CANDIDATE_COLUMNS,
    select_columns,
    build_spreadsheet,
)

__all__ = [
    # Models
    "Column",
    "LegRow",
    "LocationRow",
    "Spreadsheet",
    # Aggregation
    "RowConvention",
    "create_leg_rows",
    "create_location_rows",
    "create_rows",
    # Columns
    "LEG_COLUMNS",
    "LOCATION_COLUMNS",
    "CANDIDATE_COLUMNS",
    "select_columns",
    "build_spreadsheet",
]
