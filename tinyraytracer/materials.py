"""
materials.py - Surface materials

A material carries a single flat diffuse color. There is no lighting
model: whatever color the material holds is the color the pixel gets.

Project: Tiny Ray Tracer
"""

from typing import Optional

from .vectors import Vector3


class Material:
    """
    Flat-colored surface material.

    Attributes
    ----------
    diffuse_color : Vector3
        RGB color, each channel conventionally in [0, 1] (not enforced)
    """

    def __init__(self, diffuse_color: Optional[Vector3] = None):
        """
        Initialize a Material.

        Parameters
        ----------
        diffuse_color : Vector3, optional
            RGB color (default: black). The vector is copied.
        """
        if diffuse_color is None:
            diffuse_color = Vector3.zero()
        self.diffuse_color = diffuse_color.copy()

    def copy(self) -> 'Material':
        """Return an independent copy of the material."""
        return Material(self.diffuse_color)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Material):
            return NotImplemented
        return self.diffuse_color == other.diffuse_color

    __hash__ = None

    def __repr__(self) -> str:
        """String representation."""
        return f"Material(diffuse_color={self.diffuse_color})"


# Materials of the demo scene
IVORY = Material(Vector3(0.4, 0.4, 0.3))
RED_RUBBER = Material(Vector3(0.3, 0.1, 0.1))
