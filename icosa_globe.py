#!/usr/bin/env python3
"""
Interactive Spherical Icosahedron
Renders a sphere overlaid with a randomly distorted icosahedron (edges
drawn as great-circle arcs), a latitude/longitude grid and labelled
vertices, using PyVista.

Usage:
    pip install -e .
    python icosa_globe.py [--seed N] [--distortion DEG] [--svg out.svg]
"""
import argparse
import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple

import numpy as np
import pyvista as pv

from logging_config import setup_logging
from scene import Scene, build_scene
from svgscene import write_svg
import settings

logger = logging.getLogger(__name__)


# ============================================================================
# SCENE TO PYVISTA
# ============================================================================

def scene_to_actors(scene: Scene) -> List[Tuple[pv.PolyData, Dict[str, Any]]]:
    """
    Convert the scene's meshes and lines to PyVista geometry.

    Args:
        scene: Scene to convert

    Returns:
        List of (mesh, add_mesh keyword arguments)
    """
    actors = []

    sphere = pv.Sphere(
        radius=scene.sphere.radius,
        theta_resolution=scene.sphere.resolution,
        phi_resolution=scene.sphere.resolution
    )
    actors.append((sphere, dict(color=scene.sphere.color, smooth_shading=True, name='sphere')))

    for polyline in scene.polylines:
        if len(polyline.points) < 2:
            logger.debug("Skipping %s: fewer than 2 points", polyline.name)
            continue
        line = pv.lines_from_points(np.asarray(polyline.points))
        actors.append((line, dict(
            color=polyline.color,
            line_width=polyline.line_width,
            render_lines_as_tubes=True,
            name=polyline.name
        )))

    for marker in scene.markers:
        dot = pv.Sphere(
            radius=marker.radius,
            center=tuple(marker.position),
            theta_resolution=settings.MARKER_RESOLUTION,
            phi_resolution=settings.MARKER_RESOLUTION
        )
        actors.append((dot, dict(color=marker.color, smooth_shading=True, name=marker.name)))

    return actors


def to_pyvista_light(kind: str, intensity: float,
                     position: Optional[Sequence[float]] = None) -> pv.Light:
    """Map a scene light onto a PyVista light."""
    if kind == "ambient":
        # Follows the camera, so every visible face gets the same share
        return pv.Light(light_type='headlight', intensity=intensity)
    if kind == "point":
        return pv.Light(
            position=tuple(position),
            focal_point=(0.0, 0.0, 0.0),
            light_type='scene light',
            intensity=intensity,
            positional=True,
            cone_angle=90.0
        )
    raise ValueError(f"No such light kind: {kind}")


def setup_plotter(scene: Scene, off_screen: bool = False) -> pv.Plotter:
    """
    Create a PyVista plotter showing the scene.

    Args:
        scene: Scene to draw
        off_screen: Render without opening a window

    Returns:
        Configured PyVista Plotter
    """
    plotter = pv.Plotter(window_size=settings.WINDOW_SIZE, off_screen=off_screen)
    plotter.set_background(scene.background)

    for mesh, kwargs in scene_to_actors(scene):
        plotter.add_mesh(mesh, **kwargs)

    if scene.labels:
        font_size = int(round(scene.labels[0].font_size * settings.LABEL_PIXELS_PER_UNIT))
        plotter.add_point_labels(
            np.array([label.position for label in scene.labels]),
            [label.text for label in scene.labels],
            font_size=font_size,
            text_color=scene.labels[0].color,
            shape=None,
            show_points=False,
            justification_horizontal='center',
            justification_vertical='center',
            name='labels'
        )

    plotter.remove_all_lights()
    for light in scene.lights:
        plotter.add_light(to_pyvista_light(light.kind, light.intensity, light.position))

    camera = scene.camera
    plotter.camera_position = [camera.position, camera.focal_point, camera.view_up]

    # Terrain style keeps the north axis upright while orbiting
    plotter.enable_terrain_style(mouse_wheel_zooms=camera.enable_zoom,
                                 shift_pans=camera.enable_pan)

    logger.info("Plotter ready (%d actors)", len(plotter.actors))
    return plotter


# ============================================================================
# COMMAND LINE
# ============================================================================

def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Render a sphere with a distorted icosahedral network and lat/lon grid."
    )
    parser.add_argument('--seed', type=int, default=None,
                        help='seed for the vertex distortion (default: random)')
    parser.add_argument('--distortion', type=float, default=settings.DISTORTION_FACTOR,
                        help='maximum vertex perturbation in degrees (0 disables it)')
    parser.add_argument('--segments', type=int, default=settings.ARC_SEGMENTS,
                        help='segments per great-circle edge')
    parser.add_argument('--radius', type=float, default=settings.RADIUS,
                        help='sphere radius')
    parser.add_argument('--svg', metavar='PATH',
                        help='write a static SVG snapshot instead of opening a window')
    parser.add_argument('--screenshot', metavar='PATH',
                        help='render off screen and save a PNG instead of opening a window')
    parser.add_argument('--log-level', default='INFO',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'])
    parser.add_argument('--log-file', default=None, help='also write logs to this file')
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point."""
    args = parse_args(argv)
    setup_logging(getattr(logging, args.log_level), args.log_file)

    scene = build_scene(
        radius=args.radius,
        distortion_factor=args.distortion,
        rng=args.seed,
        segments=args.segments
    )

    if args.svg:
        write_svg(scene, args.svg)

    if args.screenshot:
        plotter = setup_plotter(scene, off_screen=True)
        plotter.screenshot(args.screenshot)
        plotter.close()
        logger.info("Saved screenshot to %s", args.screenshot)

    if args.svg or args.screenshot:
        return

    plotter = setup_plotter(scene)

    print("\n" + "=" * 60)
    print("CONTROLS (Terrain Style):")
    print("  Left-drag:        Orbit (north stays up)")
    print("  Shift+Left-drag:  Pan view")
    print("  Scroll:           Zoom in/out")
    print("  Q or ESC:         Close window")
    print("=" * 60)

    plotter.show(title="Spherical Icosahedron")


if __name__ == "__main__":
    main()
