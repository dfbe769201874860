"""
framebuffer.py - Pixel buffers and image output

A framebuffer is a float64 array of shape (height, width, 3) holding
linear RGB colors, conventionally in [0, 1]. Writing it out:
    - Clamps each channel to [0, 1]
    - Scales to [0, 255] and truncates to 8-bit integers
    - Serializes as binary PPM (P6), or through Pillow for other formats

Project: Tiny Ray Tracer
"""

import logging
import os
import numpy as np
from PIL import Image

from .vectors import Vector3


logger = logging.getLogger(__name__)


class OutputWriteError(Exception):
    """Raised when a rendered image cannot be written."""


def create_framebuffer(width: int, height: int) -> np.ndarray:
    """
    Allocate a black framebuffer.

    Parameters
    ----------
    width : int
        Image width in pixels
    height : int
        Image height in pixels

    Returns
    -------
    np.ndarray
        Zero-filled float64 array of shape (height, width, 3)
    """
    return np.zeros((height, width, 3), dtype=np.float64)


def set_pixel(framebuffer: np.ndarray, i: int, j: int, color: Vector3) -> None:
    """Store a color at column i, row j."""
    framebuffer[j, i] = (color.x, color.y, color.z)


def to_bytes(framebuffer: np.ndarray) -> np.ndarray:
    """
    Quantize a framebuffer to 8-bit RGB.

    Parameters
    ----------
    framebuffer : np.ndarray
        Float colors of shape (height, width, 3)

    Returns
    -------
    np.ndarray
        uint8 array of the same shape, channel = trunc(255 * clamp(c, 0, 1))
    """
    clipped = np.clip(framebuffer, 0.0, 1.0)
    return (255.0 * clipped).astype(np.uint8)


def write_ppm(framebuffer: np.ndarray, path: str) -> None:
    """
    Write a framebuffer as a binary PPM (P6) file.

    Parameters
    ----------
    framebuffer : np.ndarray
        Float colors of shape (height, width, 3)
    path : str
        Output file path

    Raises
    ------
    OutputWriteError
        If the file cannot be written
    """
    height, width = framebuffer.shape[:2]
    header = f"P6\n{width} {height}\n255\n".encode("ascii")
    pixels = to_bytes(framebuffer)

    try:
        with open(path, "wb") as f:
            f.write(header)
            f.write(pixels.tobytes())
    except OSError as e:
        raise OutputWriteError(f"output write failed: {path}: {e}") from e

    logger.debug("Wrote %dx%d PPM to %s", width, height, path)


def write_image(framebuffer: np.ndarray, path: str) -> None:
    """
    Write a framebuffer, choosing the format from the file extension.

    ``.ppm`` files are written directly; every other extension is
    encoded by Pillow (PNG, BMP, ...).

    Parameters
    ----------
    framebuffer : np.ndarray
        Float colors of shape (height, width, 3)
    path : str
        Output file path

    Raises
    ------
    OutputWriteError
        If the file cannot be encoded or written
    """
    extension = os.path.splitext(path)[1].lower()
    if extension == ".ppm":
        write_ppm(framebuffer, path)
        return

    image = Image.fromarray(to_bytes(framebuffer))
    try:
        image.save(path)
    except (OSError, ValueError) as e:
        # Pillow raises ValueError for unknown extensions
        raise OutputWriteError(f"output write failed: {path}: {e}") from e

    logger.debug("Wrote %dx%d image to %s", framebuffer.shape[1], framebuffer.shape[0], path)
