"""
Configuration
=============
Central registry of the sampler's tuning constants and bundled resources.

Exports:
    DEFAULT_MAX_ATTEMPTS (int): Retry cap of the point sampler.
    DEGENERATE_EPSILON (float): Squared-sine threshold below which a triangle
        counts as zero-area. Relative to the edge lengths, so it holds for
        meshes in any unit.
    ASSETS_PATH (str): Directory of the data files shipped with the package.
    DEFAULT_MESH_PATH (str): The bundled demo mesh (unit square, two triangles).
"""
from importlib.resources import files

DEFAULT_MAX_ATTEMPTS: int = 100
DEGENERATE_EPSILON: float = 1e-12

ASSETS_PATH: str = str(files(__package__) / "assets")
DEFAULT_MESH_PATH: str = str(files(__package__) / "assets" / "unit_square.obj")
