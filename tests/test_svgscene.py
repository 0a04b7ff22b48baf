"""Tests for the orthographic projection and SVG snapshot."""

import xml.etree.ElementTree as ET

import numpy as np
import pytest

from proj import orthographic, view_basis
from scene import build_scene
from svgscene import path_data, scene_to_svg, visible_runs, write_svg

SVG_NS = "{http://www.w3.org/2000/svg}"


class TestOrthographic:
    def test_basis_is_orthonormal(self):
        basis = np.array(view_basis(35.0, 120.0))
        np.testing.assert_allclose(basis @ basis.T, np.eye(3), atol=1e-12)

    def test_view_from_prime_meridian(self):
        points = np.array([[2, 0, 0], [0, 2, 0], [0, 0, 2], [-2, 0, 0]], dtype=float)
        projected, visible = orthographic(points, 0.0, 0.0)

        np.testing.assert_allclose(projected[0], [0, 0], atol=1e-12)
        np.testing.assert_allclose(projected[1], [0, 2], atol=1e-12)
        # Positive longitude appears on the viewer's left
        np.testing.assert_allclose(projected[2], [-2, 0], atol=1e-12)
        assert visible.tolist() == [True, True, True, False]

    def test_single_point(self):
        projected, visible = orthographic([0.0, 0.0, 1.0], 0.0, 90.0)
        assert projected.shape == (1, 2)
        assert visible[0]


class TestVisibleRuns:
    def test_split(self):
        projected = np.arange(16, dtype=float).reshape(8, 2)
        visible = np.array([True, True, False, True, True, True, False, True])
        runs = visible_runs(projected, visible)
        assert [len(run) for run in runs] == [2, 3]
        np.testing.assert_array_equal(runs[1][0], projected[3])

    def test_run_reaching_the_end(self):
        projected = np.arange(8, dtype=float).reshape(4, 2)
        runs = visible_runs(projected, np.array([False, False, True, True]))
        assert len(runs) == 1
        np.testing.assert_array_equal(runs[0], projected[2:])

    def test_empty(self):
        assert visible_runs(np.zeros((0, 2)), np.zeros(0, dtype=bool)) == []

    def test_all_hidden(self):
        assert visible_runs(np.zeros((4, 2)), np.zeros(4, dtype=bool)) == []

    def test_path_data(self):
        assert path_data(np.array([[0.0, 1.0], [2.5, 3.0]])) == "M0.000 1.000L2.500 3.000"


class TestSceneToSvg:
    @pytest.fixture
    def scene(self):
        return build_scene(rng=1, segments=16)

    def test_well_formed(self, scene):
        root = ET.fromstring(scene_to_svg(scene, size=400))
        assert root.tag == SVG_NS + "svg"
        assert root.get("viewBox") == "0 0 400 400"
        assert len(root.findall(SVG_NS + "path")) > 0

    def test_only_near_side_markers(self, scene):
        # Looking straight down on the north pole
        root = ET.fromstring(scene_to_svg(scene, view_lat=90.0, view_lon=0.0))
        texts = [t.text for t in root.findall(SVG_NS + "text")]
        assert "N (0)" in texts
        assert "S (1)" not in texts
        assert len(texts) == 6
        # Sphere disk plus one circle per visible marker
        assert len(root.findall(SVG_NS + "circle")) == 1 + 6

    def test_write_svg(self, scene, tmp_path):
        path = write_svg(scene, tmp_path / "icosa.svg", size=300)
        assert path.exists()
        assert ET.parse(path).getroot().get("width") == "300"
