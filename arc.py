import logging
import math
from typing import List, Sequence, Tuple

import numpy as np

from settings import ARC_SEGMENTS, RADIUS

logger = logging.getLogger(__name__)

# |sin(angle)| below this means the endpoints are (anti)parallel
PARALLEL_TOLERANCE = 1e-9


class DegenerateArcError(ValueError):
    """The arc endpoints do not define a unique great circle."""


def _unit(vector) -> np.ndarray:
    vector = np.asarray(vector, dtype=float)
    norm = np.linalg.norm(vector)
    if norm == 0.0:
        raise DegenerateArcError("Arc endpoint is the zero vector.")
    return vector / norm


def rotate_about_axis(vector: np.ndarray, axis: np.ndarray,
                      angles: np.ndarray) -> np.ndarray:
    """
    Rotate one vector about a unit axis by each of several angles.

    Rodrigues' formula:
        v' = v cos(a) + (k x v) sin(a) + k (k . v)(1 - cos(a))

    Args:
        vector: Vector to rotate, shape (3,)
        axis: Unit rotation axis, shape (3,)
        angles: Rotation angles in radians, shape (N,)

    Returns:
        Rotated vectors, shape (N, 3)
    """
    angles = np.asarray(angles, dtype=float)
    cos_a = np.cos(angles)[:, None]
    sin_a = np.sin(angles)[:, None]

    return (vector * cos_a
            + np.cross(axis, vector) * sin_a
            + axis * np.dot(axis, vector) * (1 - cos_a))


def great_circle_arc(start, end, segments: int = ARC_SEGMENTS,
                     radius: float = RADIUS) -> np.ndarray:
    """
    Sample the great circle between the directions of two points.

    Args:
        start: Start point (any non-zero length)
        end: End point (any non-zero length)
        segments: Number of segments; segments + 1 points are returned
        radius: Radius of the returned points

    Returns:
        (segments + 1, 3) array from start to end on the sphere

    Raises:
        DegenerateArcError: If the endpoints are antiparallel or zero
    """
    if segments < 1:
        raise ValueError(f"segments must be >= 1, got {segments}")

    start_unit = _unit(start)
    end_unit = _unit(end)

    cross = np.cross(start_unit, end_unit)
    sin_angle = float(np.linalg.norm(cross))
    cos_angle = float(np.dot(start_unit, end_unit))

    if sin_angle < PARALLEL_TOLERANCE:
        if cos_angle > 0:
            # Same direction: zero-length arc
            return np.tile(start_unit * radius, (segments + 1, 1))
        raise DegenerateArcError(
            f"Antiparallel endpoints {np.asarray(start).tolist()} and "
            f"{np.asarray(end).tolist()} do not define a unique great circle.")

    axis = cross / sin_angle
    angle = math.atan2(sin_angle, cos_angle)

    t_values = np.linspace(0, 1, segments + 1)
    return rotate_about_axis(start_unit, axis, angle * t_values) * radius


def edge_arcs(vertices: np.ndarray, edges: Sequence[Tuple[int, int]],
              segments: int = ARC_SEGMENTS, radius: float = RADIUS) -> List[np.ndarray]:
    """One great-circle arc per (i, j) edge."""
    arcs = [great_circle_arc(vertices[i], vertices[j], segments, radius)
            for i, j in edges]
    logger.debug("Generated %d arcs with %d segments each", len(arcs), segments)
    return arcs
