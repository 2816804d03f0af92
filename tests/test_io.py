import h5py
import numpy as np
import pytest
import pyvista as pv

from meshsampler.config import DEFAULT_MESH_PATH
from meshsampler.io import load_mesh, load_samples, save_samples
from meshsampler.model.geometry_primitives import Vector
from meshsampler.sampling.triangle_filter import as_vectors, build_triangles


def total_area(vertices, indices) -> float:
    return sum(t.area for t in build_triangles(as_vectors(vertices), [int(i) for i in indices]))


def test_load_bundled_mesh():
    vertices, indices = load_mesh(DEFAULT_MESH_PATH)

    assert vertices.shape[1] == 3
    assert len(indices) == 6
    assert total_area(vertices, indices) == pytest.approx(1.0)


def test_load_mesh_triangulates_quads(tmp_path):
    path = str(tmp_path / "plane.vtk")
    pv.Plane(i_resolution=2, j_resolution=2).save(path)

    vertices, indices = load_mesh(path)

    assert len(indices) == 8 * 3
    assert indices.max() < len(vertices)
    assert total_area(vertices, indices) == pytest.approx(1.0)


def test_load_mesh_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_mesh(str(tmp_path / "missing.obj"))


def test_samples_survive_save_and_load(tmp_path):
    path = str(tmp_path / "samples.h5")
    points = np.array([[0.1, 0.2, 0.0], [0.4, 0.5, 0.0]])

    save_samples(path, points, Vector(0.5, 0.5, 0.0), 0.3)
    loaded, center, radius = load_samples(path)

    np.testing.assert_array_equal(loaded, points)
    assert center == Vector(0.5, 0.5, 0.0)
    assert radius == 0.3


def test_load_samples_rejects_non_hdf5(tmp_path):
    path = tmp_path / "samples.h5"
    path.write_text("not hdf5")
    with pytest.raises(ValueError):
        load_samples(str(path))


def test_load_samples_rejects_file_without_samples(tmp_path):
    path = str(tmp_path / "empty.h5")
    with h5py.File(path, "w") as f:
        f.create_group("other")
    with pytest.raises(ValueError):
        load_samples(path)


def test_load_samples_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_samples(str(tmp_path / "missing.h5"))
