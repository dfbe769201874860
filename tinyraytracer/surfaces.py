"""
surfaces.py - Scene geometry for the ray tracer

The only primitive is the sphere. Each sphere knows:
    - Its center and radius
    - The material it is painted with
    - How to intersect itself with a ray
    - Its outward surface normal at a point

Ray directions are expected to be unit vectors: the distances returned
by ``Sphere.ray_intersect`` are only correct for unit-length directions.

Project: Tiny Ray Tracer
"""

import math
from typing import Optional, Tuple

from .materials import Material
from .vectors import Vector3


class Sphere:
    """
    Sphere primitive.

    The sphere owns copies of the center and material it was built
    with, so later changes to the caller's objects never leak into the
    scene.

    Attributes
    ----------
    center : Vector3
        Center of the sphere
    radius : float
        Radius, strictly positive
    material : Material
        Material used for every point of the surface
    """

    def __init__(
        self,
        center: Vector3,
        radius: float,
        material: Optional[Material] = None
    ):
        """
        Initialize a Sphere.

        Parameters
        ----------
        center : Vector3
            Center of the sphere
        radius : float
            Radius of the sphere
        material : Material, optional
            Surface material (default: black)

        Raises
        ------
        ValueError
            If radius is not strictly positive
        """
        radius = float(radius)
        # Also rejects NaN
        if not radius > 0.0:
            raise ValueError(f"Sphere radius must be positive, got {radius}")

        self.center = center.copy()
        self.radius = radius
        self.material = material.copy() if material is not None else Material()

    def ray_intersect(self, origin: Vector3, direction: Vector3) -> Tuple[bool, float]:
        """
        Intersect a ray with the sphere.

        With L = center - origin, the projection of L on the ray is
        tca = L . direction and the squared distance from the center to
        the ray line is d² = L . L - tca². The line misses when d² > r².
        Otherwise the half chord is thc = sqrt(r² - d²) and the entry
        and exit distances are t0 = tca - thc and t1 = tca + thc.

        The entry point t0 is preferred. When it lies behind the origin
        (origin inside the sphere) the exit point t1 is used instead,
        and when both are behind the origin there is no hit. A hit at
        distance exactly 0 is accepted. Tangent rays hit with t0 == t1.

        Parameters
        ----------
        origin : Vector3
            Ray origin
        direction : Vector3
            Unit ray direction

        Returns
        -------
        tuple of (bool, float)
            (True, distance) on a hit, (False, inf) on a miss
        """
        L = self.center - origin
        tca = L * direction
        d2 = L * L - tca * tca
        r2 = self.radius * self.radius

        if d2 > r2:
            return False, math.inf

        thc = math.sqrt(r2 - d2)
        t0 = tca - thc
        t1 = tca + thc

        if t0 < 0.0:
            t0 = t1
        if t0 < 0.0:
            return False, math.inf

        return True, t0

    def normal_at(self, point: Vector3) -> Vector3:
        """
        Calculate outward surface normal at a point of the sphere.

        Parameters
        ----------
        point : Vector3
            Point on the surface

        Returns
        -------
        Vector3
            Unit normal pointing away from the center
        """
        return (point - self.center).normalize()

    def __repr__(self) -> str:
        """String representation."""
        return (
            f"{self.__class__.__name__}("
            f"center={self.center}, "
            f"radius={self.radius}, "
            f"color={self.material.diffuse_color})"
        )
