"""
scene.py - Nearest-hit scene queries

A scene is an ordered collection of spheres. For a ray it answers:
    - Which sphere is hit first (scene_intersect)
    - What color the ray resolves to (cast_ray)

The color of a hit is the material color of the sphere, unmodified.
There is no lighting, no shadowing and no secondary rays; a ray that
hits nothing gets the background color.

Project: Tiny Ray Tracer
"""

import math
from typing import Iterable, Iterator, List, NamedTuple, Optional

from .materials import Material
from .surfaces import Sphere
from .vectors import Vector3


# Far plane: hits at or beyond this distance are not visible
MAX_DISTANCE = 1000.0

# RGB of rays that hit nothing, kept as a tuple so it cannot change
BACKGROUND_COLOR = (0.2, 0.7, 0.8)

# Allowed deviation of |direction| from 1 in cast_ray
UNIT_TOLERANCE = 1e-6


class Hit(NamedTuple):
    """
    Nearest intersection of a ray with a scene.

    Attributes
    ----------
    distance : float
        Distance from the ray origin to the hit point
    point : Vector3
        World-space hit point, origin + direction * distance
    normal : Vector3
        Outward unit surface normal at the hit point
    material : Material
        Copy of the material of the sphere that was hit
    """
    distance: float
    point: Vector3
    normal: Vector3
    material: Material


def scene_intersect(
    origin: Vector3,
    direction: Vector3,
    spheres: Iterable[Sphere],
    max_distance: float = MAX_DISTANCE
) -> Optional[Hit]:
    """
    Find the nearest sphere hit by a ray.

    Every sphere is tested; the smallest distance strictly below
    ``max_distance`` wins. When two spheres are hit at exactly the same
    distance, the one that comes first in ``spheres`` is kept.

    Parameters
    ----------
    origin : Vector3
        Ray origin
    direction : Vector3
        Unit ray direction (not checked here)
    spheres : iterable of Sphere
        Scene contents, read only
    max_distance : float, optional
        Far plane (default: MAX_DISTANCE)

    Returns
    -------
    Hit or None
        The nearest hit, or None if nothing visible is hit
    """
    nearest: Optional[Sphere] = None
    nearest_distance = math.inf

    for sphere in spheres:
        is_hit, distance = sphere.ray_intersect(origin, direction)
        if is_hit and distance < nearest_distance and distance < max_distance:
            nearest = sphere
            nearest_distance = distance

    if nearest is None:
        return None

    point = origin + direction * nearest_distance
    return Hit(
        distance=nearest_distance,
        point=point,
        normal=nearest.normal_at(point),
        material=nearest.material.copy(),
    )


def check_unit_direction(direction: Vector3, tolerance: float = UNIT_TOLERANCE) -> None:
    """
    Reject ray directions that are not unit length.

    Raises
    ------
    ValueError
        If |direction| differs from 1 by more than ``tolerance``
    """
    length = direction.norm()
    # NaN length fails the comparison and is rejected too
    if not abs(length - 1.0) <= tolerance:
        raise ValueError(
            f"Ray direction must be a unit vector, got {direction} (norm {length})"
        )


def cast_ray(
    origin: Vector3,
    direction: Vector3,
    spheres: Iterable[Sphere],
    background: Optional[Vector3] = None,
    max_distance: float = MAX_DISTANCE
) -> Vector3:
    """
    Resolve a single ray to a color.

    Parameters
    ----------
    origin : Vector3
        Ray origin
    direction : Vector3
        Unit ray direction
    spheres : iterable of Sphere
        Scene contents
    background : Vector3, optional
        Color returned when nothing is hit (default: BACKGROUND_COLOR)
    max_distance : float, optional
        Far plane (default: MAX_DISTANCE)

    Returns
    -------
    Vector3
        Material color of the nearest sphere, or the background color

    Raises
    ------
    ValueError
        If direction is not a unit vector
    """
    check_unit_direction(direction)

    hit = scene_intersect(origin, direction, spheres, max_distance)
    if hit is None:
        if background is None:
            return Vector3(*BACKGROUND_COLOR)
        return background.copy()
    return hit.material.diffuse_color.copy()


class Scene:
    """
    Ordered collection of spheres with a background color.

    Attributes
    ----------
    spheres : list of Sphere
        Scene contents, in evaluation order
    background : Vector3
        Color of rays that hit nothing
    max_distance : float
        Far plane distance
    """

    def __init__(
        self,
        spheres: Optional[Iterable[Sphere]] = None,
        background: Optional[Vector3] = None,
        max_distance: float = MAX_DISTANCE
    ):
        self.spheres: List[Sphere] = list(spheres) if spheres is not None else []
        if background is None:
            background = Vector3(*BACKGROUND_COLOR)
        self.background = background.copy()
        self.max_distance = max_distance

    def add(self, sphere: Sphere) -> None:
        """Append a sphere to the scene."""
        self.spheres.append(sphere)

    def intersect(self, origin: Vector3, direction: Vector3) -> Optional[Hit]:
        """Nearest hit of a ray with this scene, see ``scene_intersect``."""
        return scene_intersect(origin, direction, self.spheres, self.max_distance)

    def cast_ray(self, origin: Vector3, direction: Vector3) -> Vector3:
        """Color of a ray in this scene, see ``cast_ray``."""
        return cast_ray(
            origin, direction, self.spheres, self.background, self.max_distance
        )

    def __len__(self) -> int:
        return len(self.spheres)

    def __iter__(self) -> Iterator[Sphere]:
        return iter(self.spheres)

    def __repr__(self) -> str:
        """String representation."""
        return (
            f"{self.__class__.__name__}("
            f"{len(self.spheres)} spheres, "
            f"background={self.background})"
        )
