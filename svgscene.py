"""
Static SVG snapshot of a scene, seen orthographically from one direction.

Polylines are cut where they pass behind the sphere, so only the near
hemisphere is drawn.
"""
import logging
from pathlib import Path
from typing import List
from xml.sax.saxutils import escape

import numpy as np

from proj import orthographic
from scene import Scene
import settings

logger = logging.getLogger(__name__)

# Sphere occupies this fraction of half the canvas, leaving room for labels
FILL_FRACTION = 0.8


def visible_runs(projected: np.ndarray, visible: np.ndarray) -> List[np.ndarray]:
    """Split projected points into runs of consecutive visible points."""
    visible = np.asarray(visible, dtype=bool)
    if len(visible) == 0:
        return []

    # Indices where visibility flips start a new run
    breaks = np.flatnonzero(np.diff(visible.astype(int))) + 1
    runs = np.split(projected, breaks)
    flags = np.split(visible, breaks)
    return [run for run, flag in zip(runs, flags) if flag[0] and len(run) >= 2]


def path_data(points_2d: np.ndarray) -> str:
    """SVG path 'd' attribute for a polyline."""
    first, rest = points_2d[0], points_2d[1:]
    d = f"M{first[0]:.3f} {first[1]:.3f}"
    for x, y in rest:
        d += f"L{x:.3f} {y:.3f}"
    return d


def scene_to_svg(scene: Scene, view_lat: float = settings.SVG_VIEW_LATITUDE,
                 view_lon: float = settings.SVG_VIEW_LONGITUDE,
                 size: int = settings.SVG_SIZE) -> str:
    """
    Render a scene to SVG text.

    Args:
        scene: Scene to draw
        view_lat: Latitude the viewer looks down on (degrees)
        view_lon: Longitude the viewer looks down on (degrees)
        size: Width and height of the square canvas in pixels

    Returns:
        SVG document as a string
    """
    center = size / 2
    scale = center * FILL_FRACTION / scene.radius

    def to_canvas(projected: np.ndarray) -> np.ndarray:
        # SVG y grows downward
        return np.column_stack([center + projected[:, 0] * scale,
                                center - projected[:, 1] * scale])

    out = [f'<svg height="{size}" viewBox="0 0 {size} {size}" width="{size}" '
           f'xmlns="http://www.w3.org/2000/svg">\n']
    out.append(f'<rect fill="{scene.background}" height="{size}" width="{size}"/>\n')
    out.append(f'<circle cx="{center}" cy="{center}" fill="{scene.sphere.color}" '
               f'r="{scene.radius * scale:.3f}"/>\n')

    n_paths = 0
    for polyline in scene.polylines:
        projected, visible = orthographic(polyline.points, view_lat, view_lon)
        for run in visible_runs(to_canvas(projected), visible):
            out.append(f'<path d="{path_data(run)}" fill="none" stroke="{polyline.color}" '
                       f'stroke-linecap="round" stroke-linejoin="round" '
                       f'stroke-width="{polyline.line_width}"/>\n')
            n_paths += 1

    for marker in scene.markers:
        projected, visible = orthographic(marker.position, view_lat, view_lon)
        if visible[0]:
            x, y = to_canvas(projected)[0]
            out.append(f'<circle cx="{x:.3f}" cy="{y:.3f}" fill="{marker.color}" '
                       f'r="{marker.radius * scale:.3f}"/>\n')

    for label in scene.labels:
        projected, visible = orthographic(label.position, view_lat, view_lon)
        if visible[0]:
            x, y = to_canvas(projected)[0]
            out.append(f'<text dominant-baseline="middle" fill="{label.color}" '
                       f'font-size="{label.font_size * scale:.3f}" text-anchor="middle" '
                       f'x="{x:.3f}" y="{y:.3f}">{escape(label.text)}</text>\n')

    out.append('</svg>\n')
    logger.debug("SVG snapshot: %d visible path runs", n_paths)
    return "".join(out)


def write_svg(scene: Scene, path, **kwargs) -> Path:
    """Write scene_to_svg output to path and return it."""
    path = Path(path)
    with open(path, "w", encoding="utf-8") as f:
        f.write(scene_to_svg(scene, **kwargs))
    logger.info("Wrote SVG snapshot to %s", path)
    return path
