"""
vectors.py - 3D vector algebra for the ray tracer

A Vector3 is a plain value made of three double-precision components:
    - x, y, z addressable by name or by index 0, 1, 2
    - Arithmetic (+, -, unary -, scalar * and /) returns new vectors
    - Vector * Vector is the dot product, as in the usual textbook notation

Project: Tiny Ray Tracer
"""

import math
import numbers
import numpy as np
from typing import Iterator, Sequence


_AXES = ("x", "y", "z")


class Vector3:
    """
    Three-component vector with value semantics.

    Two vectors are equal when their components are equal. Every
    arithmetic operation builds a new vector; the only in-place change
    allowed is per-component index assignment (``v[0] = 1.0``), which is
    why vectors are not hashable.

    NaN and infinity are not rejected and propagate per IEEE-754.

    Attributes
    ----------
    x : float
        First component
    y : float
        Second component
    z : float
        Third component

    Examples
    --------
    >>> a = Vector3(1, 0, 0)
    >>> b = Vector3(0, 1, 0)
    >>> print(a.cross(b))
    (0.0, 0.0, 1.0)
    >>> a * b
    0.0
    """

    __slots__ = ("x", "y", "z")

    # Makes numpy scalars on the left defer to __rmul__ instead of
    # treating the vector as a 3-element array
    __array_ufunc__ = None

    def __init__(self, x: float, y: float, z: float):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    @classmethod
    def zero(cls) -> 'Vector3':
        """Return the vector (0, 0, 0)."""
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def from_array(cls, values: Sequence[float] | np.ndarray) -> 'Vector3':
        """
        Build a vector from any length-3 sequence or array.

        Parameters
        ----------
        values : array-like
            Exactly three numbers [x, y, z]

        Returns
        -------
        Vector3
            New vector holding the three values

        Raises
        ------
        ValueError
            If ``values`` does not hold exactly three numbers
        """
        array = np.asarray(values, dtype=np.float64).ravel()
        if array.shape != (3,):
            raise ValueError(f"Expected 3 components, got {array.size}")
        return cls(array[0], array[1], array[2])

    def to_array(self) -> np.ndarray:
        """Return the components as a float64 array [x, y, z]."""
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def copy(self) -> 'Vector3':
        """Return an independent vector with the same components."""
        return Vector3(self.x, self.y, self.z)

    # -------------------------------------------------------------------------
    # Products and length
    # -------------------------------------------------------------------------

    def dot(self, other: 'Vector3') -> float:
        """
        Dot product with another vector.

        a . b = ax*bx + ay*by + az*bz

        Parameters
        ----------
        other : Vector3
            Right-hand operand

        Returns
        -------
        float
            Scalar dot product
        """
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: 'Vector3') -> 'Vector3':
        """
        Right-handed cross product with another vector.

        a x b = (ay*bz - az*by, az*bx - ax*bz, ax*by - ay*bx)

        The result is anti-commutative and is the zero vector when the
        operands are parallel.

        Parameters
        ----------
        other : Vector3
            Right-hand operand

        Returns
        -------
        Vector3
            Vector perpendicular to both operands
        """
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def norm(self) -> float:
        """Euclidean length sqrt(x² + y² + z²); 0 for the zero vector."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self) -> 'Vector3':
        """
        Return the unit vector pointing in the same direction.

        Returns
        -------
        Vector3
            This vector divided by its norm

        Raises
        ------
        ValueError
            If the vector has zero length
        """
        magnitude = self.norm()
        if magnitude == 0.0:
            raise ValueError("Cannot normalize zero vector")
        return self / magnitude

    # -------------------------------------------------------------------------
    # Operators
    # -------------------------------------------------------------------------

    def __add__(self, other: 'Vector3') -> 'Vector3':
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: 'Vector3') -> 'Vector3':
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> 'Vector3':
        return Vector3(-self.x, -self.y, -self.z)

    def __mul__(self, other):
        """Dot product for a vector operand, scaling for a scalar operand."""
        if isinstance(other, Vector3):
            return self.dot(other)
        if isinstance(other, numbers.Real):
            return Vector3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, numbers.Real):
            return Vector3(other * self.x, other * self.y, other * self.z)
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, numbers.Real):
            return Vector3(self.x / other, self.y / other, self.z / other)
        return NotImplemented

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    # Mutable through index assignment, so never usable as a dict key
    __hash__ = None

    # -------------------------------------------------------------------------
    # Component access
    # -------------------------------------------------------------------------

    @staticmethod
    def _axis(index: int) -> str:
        # bool is an int subclass but never a meaningful axis
        if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
            raise IndexError(f"Vector3 index must be 0, 1 or 2, got {index!r}")
        if not 0 <= index <= 2:
            raise IndexError(f"Vector3 index out of range: {index}")
        return _AXES[index]

    def __getitem__(self, index: int) -> float:
        """
        Component by index: 0 -> x, 1 -> y, 2 -> z.

        Raises
        ------
        IndexError
            For any other index, negative indices included. This is a
            caller bug and is never handled inside the package.
        """
        return getattr(self, self._axis(index))

    def __setitem__(self, index: int, value: float) -> None:
        setattr(self, self._axis(index), float(value))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __len__(self) -> int:
        return 3

    def __repr__(self) -> str:
        """String representation."""
        return f"Vector3({self.x}, {self.y}, {self.z})"

    def __str__(self) -> str:
        """Human-readable string representation."""
        return f"({self.x}, {self.y}, {self.z})"


# =============================================================================
# Functional Helpers
# =============================================================================

def dot(a: Vector3, b: Vector3) -> float:
    """Dot product a . b."""
    return a.dot(b)


def cross(a: Vector3, b: Vector3) -> Vector3:
    """Right-handed cross product a x b."""
    return a.cross(b)


def normalize(vector: Vector3) -> Vector3:
    """
    Function form of ``Vector3.normalize``, handy with ``map``.

    Parameters
    ----------
    vector : Vector3
        Vector of non-zero length

    Returns
    -------
    Vector3
        New vector of length 1, the input is left untouched

    Raises
    ------
    ValueError
        If the norm of ``vector`` is 0
    """
    return vector.normalize()
