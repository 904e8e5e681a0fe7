"""
Spreadsheet Routes

Endpoints turning route segments or climate queries into spreadsheets.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from routesheet.features.climate import ClimateQuery, format_cell
from routesheet.features.segments import Segment
from routesheet.schemas.spreadsheet import (
    ClimateSpreadsheetRequest,
    RouteSpreadsheetRequest,
    RowLayout,
    SpreadsheetResponse,
)
from routesheet.services import ClimatePipeline, RoutePipeline
from routesheet.shared.errors import RoutesheetError, ValidationError

logger = logging.getLogger(__name__)

router = APIRouter()


def get_route_pipeline() -> RoutePipeline:
    return RoutePipeline()


def get_climate_pipeline() -> ClimatePipeline:
    return ClimatePipeline()


def _raise_http(error: RoutesheetError):
    if isinstance(error, ValidationError):
        raise HTTPException(status_code=422, detail=str(error))
    logger.error(f"Spreadsheet request failed: {error}")
    raise HTTPException(status_code=502, detail=str(error))


@router.post("/route", response_model=SpreadsheetResponse)
async def route_spreadsheet(
    request: RouteSpreadsheetRequest,
    pipeline: RoutePipeline = Depends(get_route_pipeline)
):
    """
    Build a route spreadsheet from parsed segments.

    Elevation failures are reported in `warnings`; the rows are still
    returned.
    """
    try:
        segments = [Segment.from_dict(s.model_dump()) for s in request.segments]
        result = await pipeline.run(
            segments,
            strip_prefix=request.strip_prefix,
            add_elevation=request.add_elevation,
            convention=request.convention,
        )
    except RoutesheetError as e:
        _raise_http(e)

    spreadsheet = result.spreadsheet
    if request.layout == RowLayout.MATRIX:
        rows = spreadsheet.to_matrix()
    else:
        rows = spreadsheet.to_records()

    return SpreadsheetResponse(
        columns=spreadsheet.headers(),
        rows=rows,
        warnings=result.warnings,
    )


@router.post("/climate", response_model=SpreadsheetResponse)
async def climate_spreadsheet(
    request: ClimateSpreadsheetRequest,
    pipeline: ClimatePipeline = Depends(get_climate_pipeline)
):
    """Add Daymet climate data to point/day queries."""
    try:
        queries = [ClimateQuery.from_dict(q.model_dump()) for q in request.queries]
        spreadsheet = await pipeline.run(queries)
    except RoutesheetError as e:
        _raise_http(e)

    if request.layout == RowLayout.MATRIX:
        rows = spreadsheet.to_matrix(format_cell)
    else:
        rows = spreadsheet.to_records()

    return SpreadsheetResponse(columns=spreadsheet.headers(), rows=rows)
