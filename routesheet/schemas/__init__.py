from .spreadsheet import (
    RowLayout,
    SegmentIn,
    RouteSpreadsheetRequest,
    ClimateQueryIn,
    ClimateSpreadsheetRequest,
    ColumnOut,
    SpreadsheetResponse,
)

__all__ = [
    "RowLayout",
    "SegmentIn",
    "RouteSpreadsheetRequest",
    "ClimateQueryIn",
    "ClimateSpreadsheetRequest",
    "ColumnOut",
    "SpreadsheetResponse",
]
