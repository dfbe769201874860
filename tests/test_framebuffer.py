"""Tests for framebuffers and image writers."""

import numpy as np
import pytest
from PIL import Image

from tinyraytracer.framebuffer import (
    OutputWriteError,
    create_framebuffer,
    set_pixel,
    to_bytes,
    write_image,
    write_ppm,
)
from tinyraytracer.vectors import Vector3


class TestFramebuffer:

    def test_create(self):
        fb = create_framebuffer(4, 3)
        assert fb.shape == (3, 4, 3)
        assert fb.dtype == np.float64
        assert not fb.any()

    def test_set_pixel_uses_column_row(self):
        fb = create_framebuffer(4, 3)
        set_pixel(fb, 3, 1, Vector3(0.1, 0.2, 0.3))
        np.testing.assert_allclose(fb[1, 3], [0.1, 0.2, 0.3])

    def test_to_bytes_clamps_and_truncates(self):
        fb = np.array([[[0.5, 1.0, 0.0], [-0.3, 2.0, 0.999]]])
        np.testing.assert_array_equal(to_bytes(fb), [[[127, 255, 0], [0, 255, 254]]])
        assert to_bytes(fb).dtype == np.uint8


class TestWriters:

    def test_write_ppm(self, tmp_path):
        fb = create_framebuffer(2, 1)
        fb[0, 0] = (1.0, 0.0, 0.0)
        fb[0, 1] = (0.0, 0.5, 1.0)
        path = tmp_path / "out.ppm"

        write_ppm(fb, str(path))

        assert path.read_bytes() == b"P6\n2 1\n255\n" + bytes([255, 0, 0, 0, 127, 255])

    def test_write_image_ppm(self, tmp_path):
        path = tmp_path / "out.ppm"
        write_image(create_framebuffer(3, 2), str(path))
        data = path.read_bytes()
        assert data.startswith(b"P6\n3 2\n255\n")
        assert len(data) == len(b"P6\n3 2\n255\n") + 3 * 3 * 2

    def test_write_image_png(self, tmp_path):
        fb = create_framebuffer(3, 2)
        fb[1, 2] = (0.2, 0.7, 0.8)
        path = tmp_path / "out.png"

        write_image(fb, str(path))

        with Image.open(path) as image:
            assert image.size == (3, 2)
            assert image.getpixel((2, 1)) == (51, 178, 204)

    def test_missing_directory(self, tmp_path):
        path = tmp_path / "missing" / "out.ppm"
        with pytest.raises(OutputWriteError, match="output write failed"):
            write_ppm(create_framebuffer(1, 1), str(path))

    def test_unknown_format(self, tmp_path):
        with pytest.raises(OutputWriteError):
            write_image(create_framebuffer(1, 1), str(tmp_path / "out.unknownformat"))
