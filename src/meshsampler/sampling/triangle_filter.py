"""
Triangle Filter
===============
Builds triangles from raw vertex/index arrays and keeps the ones that are
"in range" of a query sphere.

The range test is conservative: a triangle qualifies when one of its edges
passes closer to the center than the radius, or when the center projects
into the triangle at less than the radius from its plane. It does not prove
that any sampled point of the triangle lies inside the sphere; the point
sampler rejects those.
"""
from __future__ import annotations

import logging
from typing import Sequence, Union, TYPE_CHECKING

import numpy as np

from meshsampler.model.geometry_primitives import Vector, Triangle, Sphere
from meshsampler.model.geometry_utils import distance_to_segment, distance_to_projected_point_on_triangle

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

VertexInput = Union[Sequence[Vector], "npt.ArrayLike"]


def as_vectors(vertices: VertexInput) -> list[Vector]:
    """
    Normalize the vertex input into a list of Vector.

    Accepts a sequence of Vector or anything numpy can turn into an (N, 3) array.
    """
    if len(vertices) == 0:
        return []
    if all(isinstance(v, Vector) for v in vertices):
        return list(vertices)

    arr = np.asarray(vertices, dtype=np.float64)
    if arr.ndim != 2 or arr.shape[1] != 3:
        raise ValueError(f"Expected vertices of shape (N, 3), got {arr.shape}.")
    return [Vector(float(x), float(y), float(z)) for x, y, z in arr]


def as_indices(indices: Union[Sequence[int], npt.ArrayLike]) -> list[int]:
    """Flatten the index input into a list of ints, checking it groups into triples."""
    arr = np.asarray(indices).reshape(-1)
    if arr.size and not np.issubdtype(arr.dtype, np.integer):
        raise ValueError(f"Indices must be integers, got dtype {arr.dtype}.")
    if arr.size % 3 != 0:
        raise ValueError(f"Index count must be a multiple of 3, got {arr.size}.")
    return [int(i) for i in arr]


def build_triangles(vertices: Sequence[Vector], indices: Sequence[int]) -> list[Triangle]:
    """
    Group consecutive index triples into triangles.

    Args:
        vertices: Mesh vertices.
        indices: Flat index list, three per triangle.

    Raises:
        ValueError: If the index count is not a multiple of 3.
        IndexError: If an index does not name a vertex.

    Returns:
        One Triangle per index triple, in input order.
    """
    if len(indices) % 3 != 0:
        raise ValueError(f"Index count must be a multiple of 3, got {len(indices)}.")

    n_vertices = len(vertices)
    triangles: list[Triangle] = []
    for start in range(0, len(indices), 3):
        triple = indices[start:start + 3]
        for index in triple:
            if not 0 <= index < n_vertices:
                raise IndexError(
                    f"Index {index} of triangle {start // 3} is out of range "
                    f"for {n_vertices} vertices."
                )
        i1, i2, i3 = triple
        triangles.append(Triangle(vertices[i1], vertices[i2], vertices[i3]))
    return triangles


def is_triangle_in_range(triangle: Triangle, sphere: Sphere) -> bool:
    """
    In-range test of a single triangle against the sphere.

    Edge distances must be strictly below the radius; the plane projection
    distance counts only when the center projects inside the triangle.
    """
    center, radius = sphere.center, sphere.radius
    v1, v2, v3 = triangle.v1, triangle.v2, triangle.v3

    if (distance_to_segment(center, v1, v2) < radius
            or distance_to_segment(center, v2, v3) < radius
            or distance_to_segment(center, v3, v1) < radius):
        return True

    # Covers a center inside a triangle whose edges are all out of reach
    plane_distance = distance_to_projected_point_on_triangle(v1, v2, v3, center)
    return plane_distance is not None and plane_distance < radius


def filter_triangles(triangles: Sequence[Triangle], sphere: Sphere) -> list[int]:
    """
    Returns the positions (into `triangles`) of every triangle in range of the sphere,
    preserving mesh order.
    """
    in_range = [i for i, triangle in enumerate(triangles) if is_triangle_in_range(triangle, sphere)]
    logger.debug(f"{len(in_range)} of {len(triangles)} triangles in range of sphere "
                 f"(center={sphere.center}, radius={sphere.radius}).")
    return in_range
