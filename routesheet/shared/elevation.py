"""
Elevation processing utilities.

Turns an elevation profile (as returned by the elevation service) into
gain/loss totals in meters.
"""
from typing import List, Sequence, Tuple

# Default smoothing window size (should be odd)
DEFAULT_SMOOTHING_WINDOW = 5


def smooth_elevations(
    elevations: List[float],
    window_size: int = DEFAULT_SMOOTHING_WINDOW
) -> List[float]:
    """
    Smooth elevation data using moving average.

    Args:
        elevations: Raw elevation values
        window_size: Size of smoothing window (odd number recommended)

    Returns:
        Smoothed elevation values
    """
    if len(elevations) <= window_size:
        return elevations

    half_window = window_size // 2
    smoothed = []

    for i in range(len(elevations)):
        start = max(0, i - half_window)
        end = min(len(elevations), i + half_window + 1)
        smoothed.append(sum(elevations[start:end]) / (end - start))

    return smoothed


def calculate_elevation_changes(
    elevations: List[float],
    smoothing_window: int = DEFAULT_SMOOTHING_WINDOW
) -> Tuple[float, float]:
    """
    Calculate total elevation gain and loss.

    Args:
        elevations: Elevation profile in meters, in traversal order
        smoothing_window: Window size for smoothing

    Returns:
        Tuple of (gain_m, loss_m)
    """
    if len(elevations) < 2:
        return 0.0, 0.0

    elevations = smooth_elevations(elevations, smoothing_window)

    gain = 0.0
    loss = 0.0

    for i in range(1, len(elevations)):
        diff = elevations[i] - elevations[i - 1]
        if diff > 0:
            gain += diff
        else:
            loss += abs(diff)

    return gain, loss


def profile_from_positions(positions: Sequence[Sequence[float]]) -> List[float]:
    """
    Extract the elevation profile from GeoJSON positions.

    Positions without a third (elevation) value are skipped.
    """
    return [float(p[2]) for p in positions if len(p) > 2 and p[2] is not None]
