import math
from typing import NamedTuple, Tuple

import numpy as np

from settings import RADIUS


class SphericalPoint(NamedTuple):
    latitude: float
    longitude: float


def degrees_to_radians(deg):
    """Convert degrees to radians (scalar or array)."""
    return deg * math.pi / 180


def spherical_to_cartesian(latitude: float, longitude: float,
                           radius: float = RADIUS) -> np.ndarray:
    """
    Convert latitude/longitude to a 3D point on the sphere surface.

    The y axis points to the north pole; longitude 0 lies on +x and
    longitude 90 on +z.

    Args:
        latitude: Latitude in degrees
        longitude: Longitude in degrees
        radius: Sphere radius

    Returns:
        3D point (x, y, z)
    """
    lat_rad = degrees_to_radians(latitude)
    lon_rad = degrees_to_radians(longitude)

    x = math.cos(lat_rad) * math.cos(lon_rad) * radius
    y = math.sin(lat_rad) * radius
    z = math.cos(lat_rad) * math.sin(lon_rad) * radius

    return np.array([x, y, z])


def spherical_to_cartesian_vectorized(lat_lon: np.ndarray,
                                      radius: float = RADIUS) -> np.ndarray:
    """
    Convert an (N, 2) array of [latitude, longitude] degrees to (N, 3) points.
    """
    lat_lon = np.asarray(lat_lon, dtype=float).reshape(-1, 2)
    lat_rad = degrees_to_radians(lat_lon[:, 0])
    lon_rad = degrees_to_radians(lat_lon[:, 1])

    cos_lat = np.cos(lat_rad)
    x = cos_lat * np.cos(lon_rad) * radius
    y = np.sin(lat_rad) * radius
    z = cos_lat * np.sin(lon_rad) * radius

    return np.column_stack([x, y, z])


def cartesian_to_spherical(point) -> Tuple[float, float, float]:
    """Convert a 3D point back to (latitude, longitude, radius), longitude in [0, 360)."""
    x, y, z = (float(c) for c in point)
    radius = math.sqrt(x * x + y * y + z * z)
    if radius == 0.0:
        raise ValueError("Cannot convert the origin to spherical coordinates.")

    latitude = math.degrees(math.asin(max(-1.0, min(1.0, y / radius))))
    longitude = math.degrees(math.atan2(z, x)) % 360.0
    if longitude >= 360.0:
        # Tiny negative angles round up to 360 under the modulo
        longitude = 0.0
    return latitude, longitude, radius
