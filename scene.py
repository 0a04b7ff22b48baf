"""
Retained scene description for the spherical icosahedron.

The scene is plain data built from the geometry functions; renderers
(PyVista in icosa_globe.py, SVG in svgscene.py) only read it.
"""
import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

import numpy as np

from addgrid import grid_lines
from arc import edge_arcs
from icosa import RandomSource, compute_vertices, edge_list, vertex_records
import settings

logger = logging.getLogger(__name__)

Vec3 = Tuple[float, float, float]

GRID = "grid"
EDGE = "edge"


@dataclass
class SphereMesh:
    radius: float
    resolution: int = settings.SPHERE_RESOLUTION
    color: str = settings.SPHERE_COLOR


@dataclass
class Polyline:
    name: str
    kind: str  # GRID or EDGE
    points: np.ndarray
    color: str
    line_width: float


@dataclass
class Marker:
    name: str
    position: np.ndarray
    radius: float = settings.MARKER_RADIUS
    color: str = settings.MARKER_COLOR


@dataclass
class Label:
    text: str
    position: np.ndarray
    font_size: float = settings.LABEL_FONT_SIZE
    color: str = settings.LABEL_COLOR
    anchor: str = "center"


@dataclass
class Light:
    kind: str  # "ambient" or "point"
    intensity: float
    position: Optional[Vec3] = None


@dataclass
class CameraRig:
    position: Vec3 = settings.CAMERA_POSITION
    focal_point: Vec3 = settings.CAMERA_FOCAL_POINT
    view_up: Vec3 = settings.CAMERA_VIEW_UP
    enable_pan: bool = True
    enable_zoom: bool = True


@dataclass
class Scene:
    sphere: SphereMesh
    background: str = settings.BACKGROUND_COLOR
    polylines: List[Polyline] = field(default_factory=list)
    markers: List[Marker] = field(default_factory=list)
    labels: List[Label] = field(default_factory=list)
    lights: List[Light] = field(default_factory=list)
    camera: CameraRig = field(default_factory=CameraRig)

    @property
    def radius(self) -> float:
        return self.sphere.radius

    def polylines_of(self, kind: str) -> List[Polyline]:
        return [p for p in self.polylines if p.kind == kind]

    def summary(self) -> Dict[str, int]:
        return {
            "grid_lines": len(self.polylines_of(GRID)),
            "edges": len(self.polylines_of(EDGE)),
            "markers": len(self.markers),
            "labels": len(self.labels),
            "lights": len(self.lights),
        }


def build_scene(radius: float = settings.RADIUS,
                distortion_factor: float = settings.DISTORTION_FACTOR,
                rng: RandomSource = None,
                segments: int = settings.ARC_SEGMENTS,
                latitudes: Iterable[float] = settings.GRID_LATITUDES,
                longitudes: Iterable[float] = settings.GRID_LONGITUDES,
                grid_step: float = settings.GRID_STEP) -> Scene:
    """
    Compose the full scene: sphere, grid, icosahedron edges, vertex
    markers and labels, lights and camera.

    Args:
        radius: Sphere radius
        distortion_factor: Vertex perturbation in degrees
        rng: Seed or numpy Generator for the distortion
        segments: Segments per great-circle edge
        latitudes: Grid parallels (degrees)
        longitudes: Grid meridians (degrees)
        grid_step: Sampling step along grid lines (degrees)

    Returns:
        Scene
    """
    # Keep the default framing when the radius changes
    scale = radius / settings.RADIUS
    camera = CameraRig(position=tuple(c * scale for c in settings.CAMERA_POSITION))
    scene = Scene(sphere=SphereMesh(radius=radius), camera=camera)

    # Grid lines
    for i, line in enumerate(grid_lines(latitudes, longitudes, radius, grid_step)):
        scene.polylines.append(Polyline(
            name=f"grid-line-{i}",
            kind=GRID,
            points=line.points,
            color=settings.GRID_COLOR,
            line_width=settings.GRID_LINE_WIDTH,
        ))

    # Icosahedron edges as great-circle arcs
    vertices = compute_vertices(radius, distortion_factor, rng)
    for i, points in enumerate(edge_arcs(vertices, edge_list(), segments, radius)):
        scene.polylines.append(Polyline(
            name=f"line-{i}",
            kind=EDGE,
            points=points,
            color=settings.EDGE_COLOR,
            line_width=settings.EDGE_LINE_WIDTH,
        ))

    # Vertex markers and labels
    for vertex in vertex_records(vertices):
        scene.markers.append(Marker(name=f"vertex-{vertex.index}", position=vertex.position))
        scene.labels.append(Label(text=vertex.label,
                                  position=vertex.position * settings.LABEL_OFFSET))

    scene.lights.append(Light("ambient", settings.AMBIENT_INTENSITY))
    scene.lights.append(Light("point", settings.POINT_LIGHT_INTENSITY,
                              settings.POINT_LIGHT_POSITION))

    logger.info("Built scene: %s", scene.summary())
    return scene
