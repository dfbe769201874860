"""
tinyraytracer - A minimal ray tracer in Python

Casts one ray per pixel into a scene of spheres and paints every pixel
with the flat color of the nearest sphere, or the background color.
"""

from .vectors import Vector3, cross, dot, normalize

from .materials import Material, IVORY, RED_RUBBER
from .surfaces import Sphere
from .scene import Hit, Scene, scene_intersect, cast_ray
from .scene import BACKGROUND_COLOR, MAX_DISTANCE

from .camera import Camera
from .framebuffer import OutputWriteError, create_framebuffer, write_image, write_ppm
from .render import create_default_scene, render, render_gradient

__version__ = "0.1.0"

__all__ = [
    # Vectors
    "Vector3",
    "cross",
    "dot",
    "normalize",
    # Scene
    "Material",
    "IVORY",
    "RED_RUBBER",
    "Sphere",
    "Hit",
    "Scene",
    "scene_intersect",
    "cast_ray",
    "BACKGROUND_COLOR",
    "MAX_DISTANCE",
    # Rendering
    "Camera",
    "OutputWriteError",
    "create_framebuffer",
    "write_image",
    "write_ppm",
    "create_default_scene",
    "render",
    "render_gradient",
]
