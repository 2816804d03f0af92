"""
Point Sampler
=============
Picks a random position on the part of a triangle mesh that lies inside a sphere.

Triangles in range of the sphere are collected once and weighted by area.
Each attempt selects a triangle, draws a uniform point on it and accepts the
point if it lies strictly inside the sphere; otherwise a new triangle is
selected. When nothing is in range, or the attempts run out, the sphere
center is returned.

Example:
    >>> point = sample_position_on_mesh_in_sphere(
    ...     vertices=[(0, 0, 0), (1, 0, 0), (1, 1, 0), (0, 1, 0)],
    ...     indices=[0, 1, 2, 0, 2, 3],
    ...     center=(0.5, 0.5, 0.0),
    ...     radius=0.1,
    ...     rng=42,
    ... )
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Optional, Sequence, Union, TYPE_CHECKING

import numpy as np

from meshsampler.config import DEFAULT_MAX_ATTEMPTS
from meshsampler.model.geometry_primitives import Vector, Sphere
from meshsampler.sampling.triangle_filter import VertexInput, as_vectors, as_indices, build_triangles, filter_triangles
from meshsampler.sampling.weighted import CandidateSet

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

RandomSource = Union[np.random.Generator, int, None]


def make_rng(rng: RandomSource = None) -> np.random.Generator:
    """Return `rng` if it already is a Generator, otherwise seed a new one from it."""
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


def sample_barycentric(rng: np.random.Generator) -> tuple[float, float]:
    """
    Draw edge weights (x, y) uniformly over the simplex x >= 0, y >= 0, x + y <= 1.

    Two uniform values are drawn from the unit square; pairs landing in the
    upper half are reflected through (0.5, 0.5), which maps that half onto
    the simplex without rejection.
    """
    x, y = rng.random(), rng.random()
    if x + y > 1.0:
        x, y = 1.0 - x, 1.0 - y
    return x, y


@dataclass(frozen=True)
class SampleResult:
    """
    Outcome of one sampling query.

    Attributes:
        point: The sampled position, or the sphere center on fallback.
        triangle_index: Mesh position of the triangle the point lies on (None on fallback).
        attempts: Number of triangle selections made.
        fallback: True when no point was found and `point` is the sphere center.
    """
    point: Vector
    triangle_index: Optional[int]
    attempts: int
    fallback: bool


class MeshSphereSampler:
    """
    Samples positions on the part of a mesh inside a sphere.

    The candidate set is computed once in the constructor, so repeated calls
    to `sample` only pay for selection and rejection.
    """
    def __init__(
        self,
        vertices: VertexInput,
        indices: Union[Sequence[int], npt.ArrayLike],
        center: Union[Vector, Sequence[float]],
        radius: float,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ) -> None:
        """
        Args:
            vertices: Mesh vertices, Vector objects or an (N, 3) array-like.
            indices: Flat vertex indices, three per triangle.
            center: Sphere center.
            radius: Sphere radius (>= 0).
            max_attempts: Cap on triangle selections per sample.

        Raises:
            ValueError: On malformed input, negative radius or non-positive `max_attempts`.
            IndexError: If an index does not name a vertex.
        """
        if isinstance(max_attempts, bool) or not isinstance(max_attempts, (int, np.integer)) or max_attempts < 1:
            raise ValueError(f"max_attempts must be a positive integer, got {max_attempts!r}.")

        self.sphere = Sphere(center=Vector.from_array(center), radius=float(radius))
        self.max_attempts = int(max_attempts)

        triangles = build_triangles(as_vectors(vertices), as_indices(indices))
        in_range = filter_triangles(triangles, self.sphere)
        self.candidates = CandidateSet.from_triangles([triangles[i] for i in in_range], in_range)

        logger.debug(f"Candidate set: {len(self.candidates)} triangles, "
                     f"total area {self.candidates.total_area:.6g}.")

    def _fallback(self, attempts: int) -> SampleResult:
        return SampleResult(point=self.sphere.center, triangle_index=None, attempts=attempts, fallback=True)

    def sample(self, rng: RandomSource = None) -> SampleResult:
        """
        Draw one position.

        Args:
            rng: Generator, integer seed or None.

        Returns:
            A SampleResult; `fallback` is set when the center was returned.
        """
        rng = make_rng(rng)

        if not self.candidates.candidates:
            logger.debug("No triangles in range, returning sphere center.")
            return self._fallback(attempts=0)

        for attempt in range(1, self.max_attempts + 1):
            candidate = self.candidates.select(rng)
            if candidate is None:
                logger.debug("Candidate triangles have zero total area, returning sphere center.")
                return self._fallback(attempts=attempt)

            x, y = sample_barycentric(rng)
            point = candidate.triangle.point_at(x, y)
            if self.sphere.contains(point):
                return SampleResult(point=point, triangle_index=candidate.index, attempts=attempt, fallback=False)

        logger.debug(f"No point inside the sphere after {self.max_attempts} attempts, returning sphere center.")
        return self._fallback(attempts=self.max_attempts)

    def sample_many(self, count: int, rng: RandomSource = None) -> list[SampleResult]:
        """Draw `count` independent positions from one generator."""
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}.")
        rng = make_rng(rng)
        return [self.sample(rng) for _ in range(count)]


def sample_position_on_mesh_in_sphere(
    vertices: VertexInput,
    indices: Union[Sequence[int], npt.ArrayLike],
    center: Union[Vector, Sequence[float]],
    radius: float,
    *,
    rng: RandomSource = None,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> Vector:
    """
    Sample a point, approximately uniform by area, on the mesh within the sphere.

    Args:
        vertices: Mesh vertices, Vector objects or an (N, 3) array-like.
        indices: Flat vertex indices, three per triangle.
        center: Sphere center.
        radius: Sphere radius (>= 0).
        rng: Generator, integer seed or None.
        max_attempts: Cap on triangle selections.

    Returns:
        A point on the mesh strictly inside the sphere, or exactly `center`
        when none was found.
    """
    sampler = MeshSphereSampler(vertices, indices, center, radius, max_attempts=max_attempts)
    return sampler.sample(rng).point


def sample_positions_on_mesh_in_sphere(
    vertices: VertexInput,
    indices: Union[Sequence[int], npt.ArrayLike],
    center: Union[Vector, Sequence[float]],
    radius: float,
    count: int,
    *,
    rng: RandomSource = None,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> npt.NDArray[np.float64]:
    """
    Batch variant of `sample_position_on_mesh_in_sphere` sharing one candidate set.

    Returns:
        Array of shape (count, 3).
    """
    sampler = MeshSphereSampler(vertices, indices, center, radius, max_attempts=max_attempts)
    results = sampler.sample_many(count, rng)
    if not results:
        return np.empty((0, 3))
    return np.array([r.point.to_array() for r in results])
