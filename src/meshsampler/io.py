"""
Input/Output
Reads triangle meshes with PyVista and stores sampled points in HDF5 files.
"""
import logging
import os
from typing import Sequence, Union

import h5py
import numpy as np
import numpy.typing as npt
import pyvista as pv

from meshsampler.model.geometry_primitives import Vector

# Get module logger
logger = logging.getLogger(__name__)

SAMPLES_GROUP = "samples"


def load_mesh(filepath: str) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.int64]]:
    """
    Read a surface mesh and return it as flat triangle arrays.

    Any format PyVista can read (OBJ, STL, PLY, VTK, ...) is accepted. The
    surface is extracted and triangulated, so quads and polygons are split.

    Args:
        filepath: Path to the mesh file.

    Raises:
        FileNotFoundError: If the file does not exist.

    Returns:
        Vertices of shape (N, 3) and a flat index array of length 3 * M.
    """
    if not os.path.exists(filepath):
        raise FileNotFoundError(f"Mesh file not found: {filepath}")

    logger.info(f"Loading mesh from: {filepath}")
    mesh = pv.read(filepath)
    surface = mesh.extract_surface().triangulate()

    vertices = np.asarray(surface.points, dtype=np.float64)
    # Triangulated faces are stored as [3, i, j, k, 3, i, j, k, ...]
    faces = np.asarray(surface.faces, dtype=np.int64).reshape(-1, 4)
    indices = faces[:, 1:].reshape(-1)

    logger.info(f"Loaded {len(vertices)} vertices and {len(faces)} triangles.")
    return vertices, indices


def save_samples(
    filepath: str,
    points: npt.ArrayLike,
    center: Union[Vector, Sequence[float]],
    radius: float,
) -> None:
    """
    Write sampled points and the query sphere to an HDF5 file.

    Layout: dataset `samples/points` of shape (K, 3); the group carries
    `center` and `radius` attributes.
    """
    data = np.asarray(points, dtype=np.float64).reshape(-1, 3)
    logger.info(f"Saving {len(data)} samples to: {filepath}")
    try:
        with h5py.File(filepath, "w") as f:
            grp = f.create_group(SAMPLES_GROUP)
            grp.create_dataset("points", data=data, compression="gzip")
            grp.attrs["center"] = Vector.from_array(center).to_array()
            grp.attrs["radius"] = float(radius)
    except Exception as e:
        logger.exception(f"Failed to save samples: {e}")
        raise e


def load_samples(filepath: str) -> tuple[npt.NDArray[np.float64], Vector, float]:
    """
    Read a file written by `save_samples`.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If it is not an HDF5 file or holds no samples.

    Returns:
        The points (K, 3), the sphere center and the radius.
    """
    if not os.path.exists(filepath):
        raise FileNotFoundError(f"Samples file not found: {filepath}")
    if not h5py.is_hdf5(filepath):
        msg = f"File '{filepath}' is not a valid HDF5 file."
        logger.error(msg)
        raise ValueError(msg)

    with h5py.File(filepath, "r") as f:
        if SAMPLES_GROUP not in f or "points" not in f[SAMPLES_GROUP]:
            raise ValueError(f"File '{filepath}' contains no samples.")
        grp = f[SAMPLES_GROUP]
        points = np.asarray(grp["points"][:], dtype=np.float64)
        center = Vector.from_array(grp.attrs["center"])
        radius = float(grp.attrs["radius"])

    logger.debug(f"Loaded {len(points)} samples from: {filepath}")
    return points, center, radius
