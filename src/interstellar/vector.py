'''Immutable three-component vector used for positions and velocities'''

import math
import numpy as np
from .config import config


class Vector3:
    """
    Immutable 3-D vector of double-precision components.

    Used for positions [m], velocities [m/s] and directions. Equality is
    approximate (component-wise absolute difference below
    config.VECTOR_ATOL) to absorb floating-point noise from the
    iterative Kepler solvers.

    Parameters
    ----------
    x, y, z : float
        Cartesian components
    """
    __slots__ = ('_x', '_y', '_z')

    # ========== CONSTRUCTION ==========
    def __init__(self, x: float, y: float, z: float):
        object.__setattr__(self, '_x', float(x))
        object.__setattr__(self, '_y', float(y))
        object.__setattr__(self, '_z', float(z))

    @classmethod
    def from_numpy(cls, array) -> "Vector3":
        """Create a Vector3 from any 3-element array-like."""
        array = np.asarray(array, dtype=float)
        if array.shape != (3,):
            raise ValueError(f"Vector3 requires 3 components, got shape {array.shape}")
        return cls(array[0], array[1], array[2])

    def __setattr__(self, name, value):
        raise AttributeError("Vector3 is immutable")

    def __delattr__(self, name):
        raise AttributeError("Vector3 is immutable")

    # ========== PROPERTY ACCESS ==========
    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    @property
    def z(self) -> float:
        return self._z

    # ========== VECTOR ALGEBRA ==========
    def magnitude(self) -> float:
        """Euclidean norm."""
        return math.sqrt(self._x * self._x + self._y * self._y + self._z * self._z)

    def magnitude_squared(self) -> float:
        """Squared norm (no square root)."""
        return self._x * self._x + self._y * self._y + self._z * self._z

    def normalized(self) -> "Vector3":
        """
        Unit vector in the same direction.

        The zero vector normalizes to the zero vector instead of dividing
        by zero.
        """
        mag = self.magnitude()
        if mag > 0:
            return Vector3(self._x / mag, self._y / mag, self._z / mag)
        return Vector3.ZERO

    def dot(self, other: "Vector3") -> float:
        return self._x * other._x + self._y * other._y + self._z * other._z

    def cross(self, other: "Vector3") -> "Vector3":
        return Vector3(
            self._y * other._z - self._z * other._y,
            self._z * other._x - self._x * other._z,
            self._x * other._y - self._y * other._x,
        )

    def distance_to(self, other: "Vector3") -> float:
        """Euclidean distance between two points."""
        return (self - other).magnitude()

    # ========== CONVERSION ==========
    def to_numpy(self) -> np.ndarray:
        """Return components as a new float array of shape (3,)."""
        return np.array([self._x, self._y, self._z])

    def to_tuple(self) -> tuple:
        return (self._x, self._y, self._z)

    # ========== OPERATORS ==========
    def __add__(self, other):
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self._x + other._x, self._y + other._y, self._z + other._z)

    def __sub__(self, other):
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self._x - other._x, self._y - other._y, self._z - other._z)

    def __mul__(self, scalar):
        if isinstance(scalar, Vector3):
            return NotImplemented
        return Vector3(self._x * scalar, self._y * scalar, self._z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        if isinstance(scalar, Vector3):
            return NotImplemented
        return Vector3(self._x / scalar, self._y / scalar, self._z / scalar)

    def __neg__(self):
        return Vector3(-self._x, -self._y, -self._z)

    # ========== SPECIAL METHODS ==========
    def __len__(self):
        return 3

    def __iter__(self):
        return iter((self._x, self._y, self._z))

    def __getitem__(self, key):
        return (self._x, self._y, self._z)[key]

    def __eq__(self, other):
        #Component-wise absolute tolerance
        if not isinstance(other, Vector3):
            return NotImplemented
        atol = config.VECTOR_ATOL
        return (abs(self._x - other._x) < atol and
                abs(self._y - other._y) < atol and
                abs(self._z - other._z) < atol)

    def __hash__(self):
        #Hash with rounding to roughly match equality
        decimals = config.HASH_DECIMALS
        return hash((round(self._x, decimals),
                     round(self._y, decimals),
                     round(self._z, decimals)))

    def __repr__(self):
        return f"Vector3({self._x!r}, {self._y!r}, {self._z!r})"

    def __str__(self):
        return f"({self._x:.2f}, {self._y:.2f}, {self._z:.2f})"


Vector3.ZERO = Vector3(0.0, 0.0, 0.0)
Vector3.UNIT_X = Vector3(1.0, 0.0, 0.0)
Vector3.UNIT_Y = Vector3(0.0, 1.0, 0.0)
Vector3.UNIT_Z = Vector3(0.0, 0.0, 1.0)
