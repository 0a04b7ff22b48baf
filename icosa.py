"""
Distorted icosahedron on the sphere.

Vertex order is fixed and matches EDGES:
    0       north pole
    1       south pole
    2 - 6   upper band (longitudes 0, 72, 144, 216, 288)
    7 - 11  lower band (longitudes 36, 108, 180, 252, 324)
"""
import itertools as it
import logging
from typing import List, NamedTuple, Optional, Tuple, Union

import numpy as np

from coord import SphericalPoint, spherical_to_cartesian
from settings import (BAND_OFFSET, BAND_SPACING, DISTORTION_FACTOR,
                      GOLDEN_LATITUDE, RADIUS)

logger = logging.getLogger(__name__)

RandomSource = Optional[Union[int, np.random.Generator]]

EDGES: Tuple[Tuple[int, int], ...] = (
    # North pole to upper band
    (0, 2), (0, 3), (0, 4), (0, 5), (0, 6),
    # South pole to lower band
    (1, 7), (1, 8), (1, 9), (1, 10), (1, 11),
    # Upper pentagon
    (2, 3), (3, 4), (4, 5), (5, 6), (6, 2),
    # Lower pentagon
    (7, 8), (8, 9), (9, 10), (10, 11), (11, 7),
    # Zigzag between the bands
    (2, 7), (3, 8), (4, 9), (5, 10), (6, 11), (3, 7),
    (2, 11), (6, 10), (5, 9), (4, 8),
)


class Vertex(NamedTuple):
    index: int
    position: np.ndarray

    @property
    def label(self) -> str:
        return vertex_label(self.index)


def vertex_label(index: int) -> str:
    if index == 0:
        return "N (0)"
    if index == 1:
        return "S (1)"
    return str(index)


def apply_distortion(value: float, distortion_factor: float = DISTORTION_FACTOR,
                     rng: RandomSource = None) -> float:
    """
    Add a uniform random perturbation in [-distortion_factor, distortion_factor].

    Args:
        value: Value to perturb (degrees)
        distortion_factor: Half-width of the perturbation range
        rng: Seed or numpy Generator; None draws from a fresh generator

    Returns:
        Perturbed value
    """
    if distortion_factor < 0:
        raise ValueError(f"distortion_factor must be >= 0, got {distortion_factor}")
    if distortion_factor == 0:
        return value

    rng = np.random.default_rng(rng)
    return value + rng.uniform(-distortion_factor, distortion_factor)


def canonical_layout() -> List[SphericalPoint]:
    """Undistorted icosahedron vertices as latitude/longitude, in vertex order."""
    layout = [
        SphericalPoint(90.0, 0.0),
        SphericalPoint(-90.0, 0.0),
    ]
    for i in range(5):
        layout.append(SphericalPoint(GOLDEN_LATITUDE, i * BAND_SPACING))
    for i in range(5):
        layout.append(SphericalPoint(-GOLDEN_LATITUDE, i * BAND_SPACING + BAND_OFFSET))
    return layout


def compute_vertices(radius: float = RADIUS,
                     distortion_factor: float = DISTORTION_FACTOR,
                     rng: RandomSource = None) -> np.ndarray:
    """
    Compute the 12 icosahedron vertices with random distortion.

    Latitude and longitude of every vertex are perturbed independently,
    latitude first, all drawn from the same generator so a seed
    reproduces the whole set.

    Args:
        radius: Sphere radius
        distortion_factor: Maximum perturbation in degrees (0 disables it)
        rng: Seed or numpy Generator

    Returns:
        (12, 3) array of vertex positions
    """
    rng = np.random.default_rng(rng)

    points = []
    for latitude, longitude in canonical_layout():
        latitude = apply_distortion(latitude, distortion_factor, rng)
        longitude = apply_distortion(longitude, distortion_factor, rng)
        points.append(spherical_to_cartesian(latitude, longitude, radius))

    vertices = np.array(points)
    logger.debug("Computed %d vertices (radius=%s, distortion=%s)",
                 len(vertices), radius, distortion_factor)
    return vertices


def edge_list() -> List[Tuple[int, int]]:
    return list(EDGES)


def face_list() -> List[Tuple[int, int, int]]:
    """Triangles of the icosahedron, found as the 3-cliques of the edge table."""
    edges = {frozenset(e) for e in EDGES}
    faces = []
    for i, j, k in it.combinations(range(12), 3):
        if {frozenset((i, j)), frozenset((j, k)), frozenset((i, k))} <= edges:
            faces.append((i, j, k))
    return faces


def vertex_records(vertices: np.ndarray) -> List[Vertex]:
    return [Vertex(i, np.asarray(p, dtype=float)) for i, p in enumerate(vertices)]
