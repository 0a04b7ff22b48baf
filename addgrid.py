import logging
import math
from typing import Iterable, List, NamedTuple

import numpy as np

from coord import spherical_to_cartesian_vectorized
from settings import GRID_LATITUDES, GRID_LONGITUDES, GRID_STEP, RADIUS

logger = logging.getLogger(__name__)

MERIDIAN = "meridian"
PARALLEL = "parallel"


class GridLine(NamedTuple):
    kind: str        # MERIDIAN or PARALLEL
    degrees: float   # Longitude of a meridian, latitude of a parallel
    points: np.ndarray


def _unique(values: Iterable[float]) -> List[float]:
    # Sets have no order of their own
    if isinstance(values, (set, frozenset)):
        return sorted(values)
    return list(dict.fromkeys(values))


def _check_step(step: float) -> None:
    if step <= 0:
        raise ValueError(f"Grid step must be positive, got {step}")


def meridian(longitude: float, radius: float = RADIUS,
             step: float = GRID_STEP) -> np.ndarray:
    """Points of constant longitude from latitude -90 up to 90 inclusive."""
    _check_step(step)
    count = int(math.floor(180.0 / step + 1e-9)) + 1
    latitudes = -90.0 + step * np.arange(count)
    lat_lon = np.column_stack([latitudes, np.full(count, float(longitude))])
    return spherical_to_cartesian_vectorized(lat_lon, radius)


def parallel(latitude: float, radius: float = RADIUS,
             step: float = GRID_STEP) -> np.ndarray:
    """Points of constant latitude from longitude 0 up to (but excluding) 360."""
    _check_step(step)
    count = int(math.ceil(360.0 / step - 1e-9))
    longitudes = step * np.arange(count)
    lat_lon = np.column_stack([np.full(count, float(latitude)), longitudes])
    return spherical_to_cartesian_vectorized(lat_lon, radius)


def grid_lines(latitudes: Iterable[float] = GRID_LATITUDES,
               longitudes: Iterable[float] = GRID_LONGITUDES,
               radius: float = RADIUS, step: float = GRID_STEP) -> List[GridLine]:
    """
    Build latitude/longitude grid lines on the sphere.

    Meridians come first, in the order the longitudes are given, followed
    by the parallels. Repeated values are drawn once; sets are drawn in
    ascending order.

    Args:
        latitudes: Latitudes of the parallels (degrees)
        longitudes: Longitudes of the meridians (degrees)
        radius: Sphere radius
        step: Sampling step along each line (degrees)

    Returns:
        List of GridLine
    """
    _check_step(step)
    lines = []

    # Longitude lines (south to north)
    for lon in _unique(longitudes):
        lines.append(GridLine(MERIDIAN, lon, meridian(lon, radius, step)))

    # Latitude lines (constant latitude)
    for lat in _unique(latitudes):
        lines.append(GridLine(PARALLEL, lat, parallel(lat, radius, step)))

    logger.debug("Generated %d grid lines (step=%s)", len(lines), step)
    return lines
