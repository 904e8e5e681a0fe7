"""
Column Selector

Candidate column lists for each row convention, and the rule that drops
optional columns nobody filled in.
"""

from typing import Any, List, Sequence

from routesheet.features.segments import Segment
from routesheet.shared.units import is_blank

from .aggregator import RowConvention, create_rows
from .models import Column, LegRow, LocationRow, Spreadsheet

LEG_COLUMNS: List[Column[LegRow]] = [
    Column(
        "cumulativeDistance",
        "Cumulative distance to ending point (mi)",
        lambda row: row.cumulative_distance,
    ),
    Column("from", "Starting point", lambda row: row.from_title),
    Column("to", "Ending point", lambda row: row.to_title),
    Column("distance", "Distance (mi)", lambda row: row.distance),
    Column("gain", "Elevation gain (feet)", lambda row: row.gain, optional=True),
    Column("loss", "Elevation loss (feet)", lambda row: row.loss, optional=True),
    Column("description", "Notes about starting point", lambda row: row.description),
    Column("users", "Users", lambda row: row.users, optional=True),
    Column("surface", "Surface", lambda row: row.surface, optional=True),
    Column("locomotion", "Locomotion", lambda row: row.locomotion, optional=True),
]

LOCATION_COLUMNS: List[Column[LocationRow]] = [
    Column(
        "cumulativeDistance",
        "Cumulative distance (mi)",
        lambda row: row.cumulative_distance,
    ),
    Column("location", "Location", lambda row: row.location),
    Column("distance", "Distance from previous location (mi)", lambda row: row.distance),
    Column("gain", "Elevation gain (feet)", lambda row: row.gain),
    Column("loss", "Elevation loss (feet)", lambda row: row.loss),
    Column("description", "Notes about location", lambda row: row.description),
    Column("users", "Users", lambda row: row.users, optional=True),
    Column("surface", "Surface", lambda row: row.surface, optional=True),
    Column("locomotion", "Locomotion", lambda row: row.locomotion, optional=True),
]

CANDIDATE_COLUMNS = {
    RowConvention.LEGS: LEG_COLUMNS,
    RowConvention.LOCATIONS: LOCATION_COLUMNS,
}


def has_value(column: Column, rows: Sequence[Any]) -> bool:
    """True if at least one row has a non-blank value for the column."""
    return any(not is_blank(column.value(row)) for row in rows)


def select_columns(rows: Sequence[Any], candidates: Sequence[Column]) -> List[Column]:
    """
    Pick the columns worth displaying.

    Mandatory columns are always kept. An optional column is dropped only
    when every row is blank for it. Candidate order is preserved.
    """
    return [
        column for column in candidates
        if not column.optional or has_value(column, rows)
    ]


def build_spreadsheet(
    segments: Sequence[Segment],
    convention: RowConvention = RowConvention.LEGS
) -> Spreadsheet:
    """Aggregate segments and select the columns to show."""
    convention = RowConvention(convention)
    rows = create_rows(segments, convention)
    columns = select_columns(rows, CANDIDATE_COLUMNS[convention])
    return Spreadsheet(columns=columns, rows=rows)
