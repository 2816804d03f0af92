import numpy as np
import pytest

from meshsampler.model.geometry_primitives import Vector


@pytest.fixture
def unit_square():
    """Unit square in the XY plane split along its diagonal into two equal triangles."""
    vertices = [
        Vector(0.0, 0.0, 0.0),
        Vector(1.0, 0.0, 0.0),
        Vector(1.0, 1.0, 0.0),
        Vector(0.0, 1.0, 0.0),
    ]
    indices = [0, 1, 2, 0, 2, 3]
    return vertices, indices


@pytest.fixture
def rng():
    return np.random.default_rng(12345)


class FixedDraw:
    """Random source stub returning preset values from `uniform`."""
    def __init__(self, *values: float) -> None:
        self.values = list(values)

    def uniform(self, low: float, high: float) -> float:
        return self.values.pop(0)


@pytest.fixture
def fixed_draw():
    return FixedDraw
