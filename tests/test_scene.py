"""Tests for scene assembly."""

import numpy as np
import pytest

import settings
from scene import EDGE, GRID, CameraRig, Scene, SphereMesh, build_scene


@pytest.fixture
def scene():
    return build_scene(rng=2024)


class TestBuildScene:
    def test_summary(self, scene):
        assert scene.summary() == {
            "grid_lines": 17,
            "edges": 30,
            "markers": 12,
            "labels": 12,
            "lights": 2,
        }

    def test_sphere(self, scene):
        assert scene.sphere.radius == settings.RADIUS
        assert scene.sphere.resolution == 64
        assert scene.sphere.color == "lightgray"
        assert scene.background == "#222222"

    def test_polyline_styles(self, scene):
        grid = scene.polylines_of(GRID)
        edges = scene.polylines_of(EDGE)
        assert all(p.color == "white" and p.line_width == 1 for p in grid)
        assert all(p.color == "blue" and p.line_width == 2 for p in edges)
        assert [p.name for p in edges][:2] == ["line-0", "line-1"]
        assert all(p.points.shape == (65, 3) for p in edges)

    def test_labels_offset_from_markers(self, scene):
        assert [label.text for label in scene.labels[:3]] == ["N (0)", "S (1)", "2"]
        for marker, label in zip(scene.markers, scene.labels):
            np.testing.assert_allclose(label.position, marker.position * 1.1)
            assert marker.radius == 0.05

    def test_edges_start_at_markers(self, scene):
        edges = scene.polylines_of(EDGE)
        np.testing.assert_allclose(edges[0].points[0], scene.markers[0].position, atol=1e-9)
        np.testing.assert_allclose(edges[0].points[-1], scene.markers[2].position, atol=1e-9)

    def test_lights_and_camera(self, scene):
        ambient, point = scene.lights
        assert (ambient.kind, ambient.intensity) == ("ambient", 0.5)
        assert (point.kind, point.position) == ("point", (10.0, 10.0, 10.0))
        assert scene.camera.view_up == (0.0, 1.0, 0.0)
        assert scene.camera.enable_pan and scene.camera.enable_zoom

    def test_seeded_scene_is_reproducible(self):
        first = build_scene(rng=5)
        second = build_scene(rng=5)
        for a, b in zip(first.markers, second.markers):
            np.testing.assert_array_equal(a.position, b.position)

    def test_radius_scales_everything(self):
        scene = build_scene(radius=4.0, distortion_factor=0.0, segments=8)
        assert scene.radius == 4.0
        for polyline in scene.polylines:
            np.testing.assert_allclose(np.linalg.norm(polyline.points, axis=1), 4.0)
        assert scene.camera.position == pytest.approx((0.0, 0.0, 10.0))

    def test_custom_grid(self):
        scene = build_scene(latitudes=[0], longitudes=[0, 90], grid_step=30)
        grid = scene.polylines_of(GRID)
        assert len(grid) == 3
        assert grid[0].points.shape == (7, 3)
        assert grid[2].points.shape == (12, 3)


class TestSceneDefaults:
    def test_empty_scene(self):
        scene = Scene(sphere=SphereMesh(radius=1.0))
        assert scene.radius == 1.0
        assert scene.summary()["edges"] == 0
        assert isinstance(scene.camera, CameraRig)
