import dataclasses

import numpy as np
import pytest

from meshsampler.model.geometry_primitives import Vector, Triangle, Sphere


def test_vector_arithmetic():
    a = Vector(1.0, 2.0, 3.0)
    b = Vector(4.0, 5.0, 6.0)

    assert a + b == Vector(5.0, 7.0, 9.0)
    assert b - a == Vector(3.0, 3.0, 3.0)
    assert a * 2.0 == Vector(2.0, 4.0, 6.0)
    assert 2.0 * a == Vector(2.0, 4.0, 6.0)
    assert a.dot(b) == 32.0


def test_vector_cross_is_right_handed():
    x = Vector(1.0, 0.0, 0.0)
    y = Vector(0.0, 1.0, 0.0)
    assert x.cross(y) == Vector(0.0, 0.0, 1.0)
    assert y.cross(x) == Vector(0.0, 0.0, -1.0)


def test_vector_magnitude():
    v = Vector(3.0, 4.0, 12.0)
    assert v.sqr_magnitude == 169.0
    assert v.magnitude == 13.0


def test_vector_projection():
    v = Vector(2.0, 3.0, 4.0)
    normal = Vector(0.0, 0.0, 5.0)

    assert v.project(normal) == Vector(0.0, 0.0, 4.0)
    assert v.project_on_plane(normal) == Vector(2.0, 3.0, 0.0)
    assert v.project(Vector(0.0, 0.0, 0.0)) == Vector(0.0, 0.0, 0.0)


def test_vector_is_immutable():
    v = Vector(1.0, 2.0, 3.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        v.x = 5.0


def test_vector_from_array():
    assert Vector.from_array([1, 2, 3]) == Vector(1.0, 2.0, 3.0)
    assert Vector.from_array(np.array([1.5, 2.5, 3.5])) == Vector(1.5, 2.5, 3.5)
    v = Vector(1.0, 1.0, 1.0)
    assert Vector.from_array(v) is v
    np.testing.assert_array_equal(v.to_array(), [1.0, 1.0, 1.0])


def test_vector_from_array_rejects_wrong_length():
    with pytest.raises(ValueError):
        Vector.from_array([1.0, 2.0])


def test_triangle_area_and_point_at():
    triangle = Triangle(Vector(0.0, 0.0, 0.0), Vector(3.0, 0.0, 0.0), Vector(0.0, 4.0, 0.0))

    assert triangle.area == 6.0
    assert triangle.normal == Vector(0.0, 0.0, 12.0)
    assert triangle.point_at(0.0, 0.0) == triangle.v1
    assert triangle.point_at(1.0, 0.0) == triangle.v2
    assert triangle.point_at(0.0, 1.0) == triangle.v3
    assert triangle.point_at(0.5, 0.25) == Vector(1.5, 1.0, 0.0)


def test_degenerate_triangle_has_zero_area():
    v = Vector(1.0, 1.0, 1.0)
    assert Triangle(v, v, Vector(2.0, 0.0, 0.0)).area == 0.0


def test_sphere_rejects_negative_radius():
    with pytest.raises(ValueError):
        Sphere(center=Vector(0.0, 0.0, 0.0), radius=-1.0)
    with pytest.raises(ValueError):
        Sphere(center=Vector(0.0, 0.0, 0.0), radius=float("nan"))


def test_sphere_containment_is_strict():
    sphere = Sphere(center=Vector(0.0, 0.0, 0.0), radius=1.0)
    assert sphere.contains(Vector(0.5, 0.0, 0.0))
    assert not sphere.contains(Vector(1.0, 0.0, 0.0))
    assert not Sphere(center=Vector(0.0, 0.0, 0.0), radius=0.0).contains(Vector(0.0, 0.0, 0.0))
