"""Tests for Camera."""

import math

import pytest

from tinyraytracer.camera import Camera
from tinyraytracer.vectors import Vector3


def assert_direction_matches(v, w):
    assert v.to_array() == pytest.approx(w.normalize().to_array())


class TestCamera:

    def test_center_ray_looks_down_minus_z(self):
        cam = Camera(5, 5)
        assert_direction_matches(cam.ray_direction(2, 2), Vector3(0, 0, -1))

    def test_corner_rays_with_90_degree_fov(self):
        # Square image, fov 90: image plane spans [-1, 1] at z = -1
        cam = Camera(2, 2)
        assert_direction_matches(cam.ray_direction(0, 0), Vector3(-0.5, 0.5, -1))
        assert_direction_matches(cam.ray_direction(1, 0), Vector3(0.5, 0.5, -1))
        assert_direction_matches(cam.ray_direction(0, 1), Vector3(-0.5, -0.5, -1))
        assert_direction_matches(cam.ray_direction(1, 1), Vector3(0.5, -0.5, -1))

    def test_fov_scales_plane(self):
        cam = Camera(2, 2, fov=math.radians(60))
        s = math.tan(math.radians(30))
        assert_direction_matches(cam.ray_direction(1, 0), Vector3(0.5 * s, 0.5 * s, -1))

    def test_aspect_ratio_stretches_x(self):
        cam = Camera(4, 2)
        assert cam.aspect_ratio == 2.0
        assert_direction_matches(cam.ray_direction(3, 0), Vector3(1.5, 0.5, -1))

    def test_directions_are_unit_length(self):
        cam = Camera(8, 6, fov=1.0)
        for _, _, _, direction in cam.rays():
            assert direction.norm() == pytest.approx(1.0)

    def test_rays_row_major(self):
        cam = Camera(3, 2, origin=Vector3(1, 2, 3))
        pixels = [(i, j) for i, j, _, _ in cam.rays()]
        assert pixels == [(0, 0), (1, 0), (2, 0), (0, 1), (1, 1), (2, 1)]
        assert all(origin == Vector3(1, 2, 3) for _, _, origin, _ in cam.rays())

    @pytest.mark.parametrize("width, height, fov", [
        (0, 10, 1.0),
        (10, -1, 1.0),
        (10, 10, 0.0),
        (10, 10, math.pi),
    ])
    def test_invalid_arguments(self, width, height, fov):
        with pytest.raises(ValueError):
            Camera(width, height, fov=fov)
