"""
Geometric Primitives for mesh sampling.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence, Union, TYPE_CHECKING
import numpy as np
import math

if TYPE_CHECKING:
    import numpy.typing as npt

@dataclass(frozen=True)
class Vector:
    """
    An immutable vector (or position) in 3D space.
    """
    x: float
    y: float
    z: float = 0.0

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector) -> Vector:
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vector:
        return Vector(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    @property
    def magnitude(self) -> float:
        return math.sqrt(self.sqr_magnitude)

    @property
    def sqr_magnitude(self) -> float:
        return self.x**2 + self.y**2 + self.z**2

    def dot(self, other: Vector) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector) -> Vector:
        return Vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def project(self, onto: Vector) -> Vector:
        """Orthogonal projection of this vector onto the line spanned by `onto`."""
        denominator = onto.sqr_magnitude
        if denominator == 0.0: return Vector(0.0, 0.0, 0.0)
        return onto * (self.dot(onto) / denominator)

    def project_on_plane(self, normal: Vector) -> Vector:
        """Orthogonal projection onto the plane through the origin with the given normal."""
        return self - self.project(normal)

    def distance_to(self, other: Vector) -> float:
        return (self - other).magnitude

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y, self.z])

    @classmethod
    def from_array(cls, values: Union[Vector, Sequence[float], npt.ArrayLike]) -> Vector:
        """Build a Vector from any length-3 array-like (or pass a Vector through)."""
        if isinstance(values, Vector):
            return values
        arr = np.asarray(values, dtype=np.float64).reshape(-1)
        if arr.shape != (3,):
            raise ValueError(f"Expected 3 coordinates, got shape {np.shape(values)}.")
        return cls(float(arr[0]), float(arr[1]), float(arr[2]))


@dataclass(frozen=True)
class Triangle:
    """
    Three vertices of one mesh face. Vertex order defines the normal
    direction and the barycentric parameterization (v1 is the origin).
    """
    v1: Vector
    v2: Vector
    v3: Vector

    @property
    def edge1(self) -> Vector:
        return self.v2 - self.v1

    @property
    def edge2(self) -> Vector:
        return self.v3 - self.v1

    @property
    def normal(self) -> Vector:
        """Unnormalized normal, its magnitude is twice the area."""
        return self.edge1.cross(self.edge2)

    @property
    def area(self) -> float:
        return self.normal.magnitude / 2.0

    def point_at(self, x: float, y: float) -> Vector:
        """Returns v1 + x * (v2 - v1) + y * (v3 - v1)."""
        return self.v1 + self.edge1 * x + self.edge2 * y


@dataclass(frozen=True)
class Sphere:
    """Query sphere. A zero radius degenerates to a point query."""
    center: Vector
    radius: float

    def __post_init__(self) -> None:
        if not math.isfinite(self.radius) or self.radius < 0.0:
            raise ValueError(f"Sphere radius must be a finite non-negative number, got {self.radius}.")

    def contains(self, point: Vector) -> bool:
        """Strict containment: squared distance to the center below radius squared."""
        return (point - self.center).sqr_magnitude < self.radius ** 2
