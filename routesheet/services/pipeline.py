"""
Spreadsheet Pipelines

Orchestrates the segment processing stages:
- Sort segments by title
- Add elevation from the elevation service (optional, degradable)
- Aggregate into rows
- Select the columns that carry data

and the climate variant:
- Look up Daymet observations for every query
- Merge them into rows by position
- Select the columns that carry data

Only the network stages await. Progress is reported as StageEvents to an
optional observer, called synchronously after each stage.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence

from routesheet.features.climate import (
    ClimateQuery,
    ClimateService,
    DaymetClient,
    build_climate_spreadsheet,
    merge_observations,
)
from routesheet.features.elevation import (
    ElevationClient,
    ElevationService,
    apply_elevation,
    route_feature_collection,
)
from routesheet.features.segments import Segment, sort_segments
from routesheet.features.spreadsheet import RowConvention, Spreadsheet, build_spreadsheet
from routesheet.shared.errors import NetworkError, ParseError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StageEvent:
    """A pipeline stage has completed."""
    stage: str
    detail: Optional[str] = None


Observer = Callable[[StageEvent], None]


@dataclass
class PipelineResult:
    """Spreadsheet plus what happened on the way."""
    spreadsheet: Spreadsheet
    segments: List[Segment]
    elevation_error: Optional[Exception] = None
    events: List[StageEvent] = field(default_factory=list)

    @property
    def warnings(self) -> List[str]:
        if self.elevation_error is None:
            return []
        return [str(self.elevation_error)]


class _Stages:
    """Records events and forwards them to the observer."""

    def __init__(self, observer: Optional[Observer]):
        self.observer = observer
        self.events: List[StageEvent] = []

    def done(self, stage: str, detail: Optional[str] = None) -> None:
        event = StageEvent(stage, detail)
        self.events.append(event)
        logger.debug(f"Stage {stage} done" + (f" ({detail})" if detail else ""))
        if self.observer:
            self.observer(event)


class RoutePipeline:
    """
    Segments in, route spreadsheet out.

    Example usage:
        pipeline = RoutePipeline(elevation=ElevationClient())
        result = await pipeline.run(segments, strip_prefix=True, add_elevation=True)
        result.spreadsheet.to_records()
    """

    def __init__(
        self,
        elevation: Optional[ElevationService] = None,
        convention: RowConvention = RowConvention.LEGS
    ):
        self.elevation = elevation if elevation is not None else ElevationClient()
        self.convention = RowConvention(convention)

    async def run(
        self,
        segments: Sequence[Segment],
        strip_prefix: bool = False,
        add_elevation: bool = False,
        convention: Optional[RowConvention] = None,
        observer: Optional[Observer] = None
    ) -> PipelineResult:
        """
        Run every stage in order.

        Elevation failures (NetworkError/ParseError) do not abort the run:
        the rows are built without elevation and the error is kept on the
        result. `convention` overrides the pipeline default for this run.
        """
        stages = _Stages(observer)

        ordered = sort_segments(segments, strip_prefix=strip_prefix)
        stages.done("sort", f"{len(ordered)} segments")

        elevation_error = None
        if add_elevation:
            ordered, elevation_error = await self._add_elevation(ordered)
            stages.done("elevation", "failed" if elevation_error else "applied")
        else:
            stages.done("elevation", "skipped")

        spreadsheet = build_spreadsheet(ordered, convention or self.convention)
        stages.done("aggregate", f"{len(spreadsheet.rows)} rows")
        stages.done("columns", f"{len(spreadsheet.columns)} columns")

        logger.info(
            f"Route spreadsheet: {len(spreadsheet.rows)} rows, "
            f"{len(spreadsheet.columns)} columns"
        )
        return PipelineResult(
            spreadsheet=spreadsheet,
            segments=ordered,
            elevation_error=elevation_error,
            events=stages.events,
        )

    async def _add_elevation(self, segments: List[Segment]):
        geojson, indices = route_feature_collection(segments)
        if not indices:
            logger.info("No segment geometry, elevation not requested")
            return segments, None

        try:
            enriched = await self.elevation.augment(geojson)
            return apply_elevation(segments, enriched, indices), None
        except (NetworkError, ParseError) as e:
            logger.warning(f"Continuing without elevation data: {e}")
            return segments, e


class ClimatePipeline:
    """
    Queries in, climate spreadsheet out.

    Any service or alignment failure aborts the run; no partial merge is
    ever produced.
    """

    def __init__(self, climate: Optional[ClimateService] = None):
        self.climate = climate if climate is not None else DaymetClient()

    async def run(
        self,
        queries: Sequence[ClimateQuery],
        observer: Optional[Observer] = None
    ) -> Spreadsheet:
        stages = _Stages(observer)
        queries = list(queries)

        observations = await self.climate.augment(queries)
        stages.done("climate", f"{len(observations)} observations")

        rows = merge_observations(queries, observations)
        stages.done("merge", f"{len(rows)} rows")

        spreadsheet = build_climate_spreadsheet(rows)
        stages.done("columns", f"{len(spreadsheet.columns)} columns")
        return spreadsheet
