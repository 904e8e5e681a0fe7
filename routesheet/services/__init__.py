"""
Services orchestrating the features.

Usage:
    from routesheet.services import RoutePipeline, ClimatePipeline
"""

from .pipeline import (
    ClimatePipeline,
    PipelineResult,
    RoutePipeline,
    StageEvent,
)

__all__ = [
    "ClimatePipeline",
    "PipelineResult",
    "RoutePipeline",
    "StageEvent",
]
