"""
Mesh Sampler
============
Random positions on the part of a triangle mesh that lies inside a sphere,
e.g. to pick a navigation destination around an agent.
"""
from meshsampler.model.geometry_primitives import Vector, Triangle, Sphere
from meshsampler.sampling.point_sampler import (
    MeshSphereSampler,
    SampleResult,
    sample_position_on_mesh_in_sphere,
    sample_positions_on_mesh_in_sphere,
)

__all__ = [
    "Vector",
    "Triangle",
    "Sphere",
    "MeshSphereSampler",
    "SampleResult",
    "sample_position_on_mesh_in_sphere",
    "sample_positions_on_mesh_in_sphere",
]
