"""
Error hierarchy for the segment pipeline.

Network-touching stages raise NetworkError/ParseError; the climate merge
raises AlignmentError; model construction raises ValidationError.
"""

from typing import Optional


class RoutesheetError(Exception):
    """Base routesheet error."""
    pass


class NetworkError(RoutesheetError):
    """Transport failure or non-success status from an external service."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        reason: Optional[str] = None
    ):
        self.status_code = status_code
        self.reason = reason
        super().__init__(message)


class ParseError(RoutesheetError):
    """External service answered with a body we cannot use."""
    pass


class AlignmentError(RoutesheetError):
    """Response count does not match request count."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Expected {expected} observations, got {actual}"
        )


class ValidationError(RoutesheetError, ValueError):
    """Malformed input record."""
    pass
