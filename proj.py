from typing import Tuple

import numpy as np

from coord import spherical_to_cartesian


def view_basis(view_lat: float, view_lon: float) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Orthonormal screen basis for a viewer looking at the origin from (view_lat, view_lon).

    Returns:
        (right, up, back) unit vectors; back points from the origin toward the viewer
    """
    back = spherical_to_cartesian(view_lat, view_lon, 1.0)
    right = spherical_to_cartesian(0.0, view_lon - 90.0, 1.0)
    up = np.cross(back, right)
    return right, up, back


def orthographic(points, view_lat: float, view_lon: float) -> Tuple[np.ndarray, np.ndarray]:
    """
    Orthographic projection of 3D points onto the view plane.

    Args:
        points: (N, 3) array of points
        view_lat: Latitude of the view center (degrees)
        view_lon: Longitude of the view center (degrees)

    Returns:
        ((N, 2) plane coordinates, (N,) mask of points on the near hemisphere)
    """
    points = np.asarray(points, dtype=float).reshape(-1, 3)
    right, up, back = view_basis(view_lat, view_lon)

    projected = np.column_stack([points @ right, points @ up])
    visible = points @ back >= 0
    return projected, visible
