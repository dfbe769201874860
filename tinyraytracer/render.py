"""
render.py - Image rendering

Turns a scene and a camera into a framebuffer by casting one primary
ray per pixel. Also holds the fixed demo scene and the gradient test
pattern used to check the output pipeline without any geometry.

Project: Tiny Ray Tracer
"""

import logging
import time
import numpy as np

from .camera import Camera
from .framebuffer import create_framebuffer, set_pixel
from .materials import IVORY, RED_RUBBER
from .scene import Scene
from .surfaces import Sphere
from .vectors import Vector3


logger = logging.getLogger(__name__)


def create_default_scene() -> Scene:
    """
    Build the demo scene: two ivory and two red rubber spheres.

    Returns
    -------
    Scene
        Four spheres in front of the camera on the default background
    """
    return Scene(
        spheres=[
            Sphere(Vector3(-3.0, 0.0, -16.0), 2.0, IVORY),
            Sphere(Vector3(-1.0, -1.5, -12.0), 2.0, RED_RUBBER),
            Sphere(Vector3(1.5, -0.5, -18.0), 3.0, RED_RUBBER),
            Sphere(Vector3(7.0, 5.0, -18.0), 4.0, IVORY),
        ],
    )


def render(scene: Scene, camera: Camera) -> np.ndarray:
    """
    Render a scene.

    Parameters
    ----------
    scene : Scene
        Spheres and background to render
    camera : Camera
        Camera producing one primary ray per pixel

    Returns
    -------
    np.ndarray
        Framebuffer of shape (camera.height, camera.width, 3)
    """
    logger.info(
        "Rendering %d spheres at %dx%d", len(scene), camera.width, camera.height
    )
    start = time.perf_counter()

    framebuffer = create_framebuffer(camera.width, camera.height)
    for i, j, origin, direction in camera.rays():
        set_pixel(framebuffer, i, j, scene.cast_ray(origin, direction))

    logger.info("Rendered in %.2f s", time.perf_counter() - start)
    return framebuffer


def render_gradient(width: int, height: int) -> np.ndarray:
    """
    Render the gradient test pattern.

    Pixel (i, j) gets the color (j / height, i / width, 0): red grows
    downwards and green grows to the right.

    Parameters
    ----------
    width : int
        Image width in pixels
    height : int
        Image height in pixels

    Returns
    -------
    np.ndarray
        Framebuffer of shape (height, width, 3)
    """
    framebuffer = create_framebuffer(width, height)
    rows = np.arange(height, dtype=np.float64) / height
    cols = np.arange(width, dtype=np.float64) / width
    framebuffer[:, :, 0] = rows[:, np.newaxis]
    framebuffer[:, :, 1] = cols[np.newaxis, :]
    return framebuffer
