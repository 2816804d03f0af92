from __future__ import annotations

from typing import Optional

from meshsampler.config import DEGENERATE_EPSILON
from meshsampler.model.geometry_primitives import Vector


def distance_to_segment(point: Vector, a: Vector, b: Vector) -> float:
    """
    Euclidean distance from a point to the closed segment AB.

    The point is projected onto the infinite line through A and B and the
    line parameter is clamped to [0, 1]. A zero-length segment is treated as
    the single point A.

    Args:
        point: The query point.
        a: Segment start.
        b: Segment end.

    Returns:
        Distance from `point` to the closest point of the segment.
    """
    ab = b - a
    length_sq = ab.sqr_magnitude
    if length_sq == 0.0:
        t = 0.0
    else:
        t = (point - a).dot(ab) / length_sq
        t = min(1.0, max(0.0, t))
    closest = a + ab * t
    return point.distance_to(closest)


def _determinant(c1: Vector, c2: Vector, c3: Vector) -> float:
    """Determinant of the 3x3 matrix with columns c1, c2, c3 (scalar triple product)."""
    return c1.dot(c2.cross(c3))


def solve_basis(
    edge1: Vector,
    edge2: Vector,
    normal: Vector,
    point: Vector,
    eps: float = DEGENERATE_EPSILON
) -> Optional[tuple[float, float, float]]:
    """
    Express `point` in the basis [edge1 | edge2 | normal].

    Solves M @ (a, b, c) = point for the matrix M with the three basis vectors
    as columns. The inverse is written out through the adjugate:
    M^-1 = adj(M) / det(M), whose rows are the pairwise cross products of the
    columns, so each coordinate reduces to a triple product (Cramer's rule).

    Args:
        edge1: First basis vector (v2 - v1).
        edge2: Second basis vector (v3 - v1).
        normal: Third basis vector (edge1 x edge2).
        point: Vector to re-express.
        eps: Relative threshold: M is singular when det(M)^2 is at most
            eps times the product of the squared column lengths.

    Returns:
        Local coordinates (a, b, c), or None if the basis is singular.
    """
    det = _determinant(edge1, edge2, normal)
    # Hadamard's bound |det| <= |c1| |c2| |c3| makes the test independent of scale
    bound_sq = edge1.sqr_magnitude * edge2.sqr_magnitude * normal.sqr_magnitude
    if det == 0.0 or det * det <= eps * bound_sq:
        return None

    a = _determinant(point, edge2, normal) / det
    b = _determinant(edge1, point, normal) / det
    c = _determinant(edge1, edge2, point) / det
    return a, b, c


def is_point_in_triangle(a: float, b: float) -> bool:
    """
    Point-in-triangle test on local edge coordinates.

    `a` and `b` are the weights along edge1 and edge2 (see `solve_basis`);
    the point is inside (or on the border) when 0 <= a <= 1 and 0 <= b <= 1 - a.
    """
    return 0.0 <= a <= 1.0 and 0.0 <= b <= 1.0 - a


def is_degenerate_triangle(edge1: Vector, edge2: Vector, eps: float = DEGENERATE_EPSILON) -> bool:
    """
    Zero-area test that does not depend on the mesh units.

    |edge1 x edge2|^2 = |edge1|^2 |edge2|^2 sin^2(angle), so comparing against
    eps * |edge1|^2 |edge2|^2 thresholds the squared sine of the angle at v1.
    A zero-length edge always counts as degenerate.
    """
    scale = edge1.sqr_magnitude * edge2.sqr_magnitude
    return scale == 0.0 or edge1.cross(edge2).sqr_magnitude <= eps * scale


def distance_to_projected_point_on_triangle(
    v1: Vector,
    v2: Vector,
    v3: Vector,
    point: Vector,
    eps: float = DEGENERATE_EPSILON
) -> Optional[float]:
    """
    Distance from `point` to its orthogonal projection onto the triangle's plane,
    if that projection falls inside the triangle.

    The offset of `point` from v1 is projected onto the plane and expressed in
    the local basis (edge1, edge2, normal), so the local coordinates (a, b) are
    measured from v1 along the two edges. When they pass `is_point_in_triangle`,
    the in-plane projection is moved back into world space by adding v1 (which
    carries the plane's offset along the normal), and its distance to `point`
    is returned.

    Args:
        v1, v2, v3: Triangle vertices.
        point: The query point (typically the sphere center).
        eps: Squared-sine threshold for zero-area triangles (see `is_degenerate_triangle`).

    Returns:
        The distance, or None when the projection lies outside the triangle or
        the triangle is degenerate. None compares as +infinity for callers.
    """
    edge1 = v2 - v1
    edge2 = v3 - v1
    if is_degenerate_triangle(edge1, edge2, eps):
        return None

    normal = edge1.cross(edge2)
    projected = (point - v1).project_on_plane(normal)
    local = solve_basis(edge1, edge2, normal, projected, eps)
    if local is None:
        return None

    a, b, _ = local
    if not is_point_in_triangle(a, b):
        return None

    world = v1 + projected
    return world.distance_to(point)
