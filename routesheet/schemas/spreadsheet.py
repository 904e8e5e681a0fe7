"""
Spreadsheet schemas.

Pydantic models for the spreadsheet endpoints.
"""

import datetime
from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, Field

from routesheet.features.spreadsheet import RowConvention


class RowLayout(str, Enum):
    """How rows are shaped in a response."""
    RECORDS = "records"  # objects keyed by column key
    MATRIX = "matrix"    # arrays aligned with columns


class SegmentIn(BaseModel):
    """One parsed route segment."""

    title: str
    distance: Optional[float] = Field(default=None, description="Meters")
    gain: Optional[float] = Field(default=None, description="Meters")
    loss: Optional[float] = Field(default=None, description="Meters")
    surface: Optional[str] = None
    locomotion: Optional[str] = None
    users: Optional[str] = None
    description: Optional[str] = None
    coordinates: Optional[List[List[float]]] = Field(
        default=None,
        description="[lon, lat(, ele)] positions"
    )


class RouteSpreadsheetRequest(BaseModel):
    """Request for a route spreadsheet."""

    segments: List[SegmentIn]
    strip_prefix: bool = False
    add_elevation: bool = False
    convention: RowConvention = RowConvention.LEGS
    layout: RowLayout = RowLayout.RECORDS


class ClimateQueryIn(BaseModel):
    """One point/day to look up."""

    lat: float
    long: float
    date: datetime.date


class ClimateSpreadsheetRequest(BaseModel):
    """Request for a climate spreadsheet."""

    queries: List[ClimateQueryIn]
    layout: RowLayout = RowLayout.MATRIX


class ColumnOut(BaseModel):
    """Column header."""

    key: str
    name: str


class SpreadsheetResponse(BaseModel):
    """Columns plus rows, shaped by the requested layout."""

    columns: List[ColumnOut]
    rows: List[Any]
    warnings: List[str] = Field(default_factory=list)
