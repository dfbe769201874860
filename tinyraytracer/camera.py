"""
camera.py - Pinhole camera for primary ray generation

The camera sits at its origin looking down -z with +y up. The image
plane is placed at distance 1 and spans the vertical field of view;
its horizontal extent follows from the aspect ratio.

Each pixel (i, j), column i and row j counted from the top-left
corner, is sampled once through its center.

Project: Tiny Ray Tracer
"""

import math
import numpy as np
from typing import Iterator, Optional, Tuple

from .vectors import Vector3


class Camera:
    """
    Pinhole camera mapping pixels to unit ray directions.

    Attributes
    ----------
    width : int
        Image width in pixels
    height : int
        Image height in pixels
    fov : float
        Vertical field of view in radians
    origin : Vector3
        Position of the pinhole
    """

    def __init__(
        self,
        width: int,
        height: int,
        fov: float = math.pi / 2,
        origin: Optional[Vector3] = None
    ):
        """
        Initialize a Camera.

        Parameters
        ----------
        width : int
            Image width in pixels
        height : int
            Image height in pixels
        fov : float, optional
            Vertical field of view in radians (default: pi/2)
        origin : Vector3, optional
            Position of the pinhole (default: world origin)

        Raises
        ------
        ValueError
            If the image size is not positive or fov is outside (0, pi)
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Image size must be positive, got {width}x{height}")
        if not 0.0 < fov < math.pi:
            raise ValueError(f"Field of view must be in (0, pi) radians, got {fov}")

        self.width = int(width)
        self.height = int(height)
        self.fov = float(fov)
        self.origin = origin.copy() if origin is not None else Vector3.zero()

        self._half_height = math.tan(self.fov / 2.0)

    @property
    def aspect_ratio(self) -> float:
        """Width over height."""
        return self.width / self.height

    def ray_direction(self, i: int, j: int) -> Vector3:
        """
        Compute the unit direction of the ray through a pixel.

        Parameters
        ----------
        i : int
            Pixel column, 0 at the left edge
        j : int
            Pixel row, 0 at the top edge

        Returns
        -------
        Vector3
            Unit direction through the pixel center
        """
        x = (2.0 * (i + 0.5) / self.width - 1.0) * self._half_height * self.aspect_ratio
        y = -(2.0 * (j + 0.5) / self.height - 1.0) * self._half_height
        return Vector3(x, y, -1.0).normalize()

    def rays(self) -> Iterator[Tuple[int, int, Vector3, Vector3]]:
        """
        Generate the primary rays of the whole image in row-major order.

        Yields
        ------
        tuple of (int, int, Vector3, Vector3)
            (i, j, origin, direction) for every pixel
        """
        for j in range(self.height):
            for i in range(self.width):
                yield i, j, self.origin, self.ray_direction(i, j)

    def __repr__(self) -> str:
        """String representation."""
        return (
            f"{self.__class__.__name__}("
            f"{self.width}x{self.height}, "
            f"fov={np.degrees(self.fov):.1f}°, "
            f"origin={self.origin})"
        )
