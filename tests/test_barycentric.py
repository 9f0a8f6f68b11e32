import numpy as np
import pytest

from pmpcore.barycentric import barycentric_coordinates

# triangles whose normals are dominated by x, y and z respectively
TRIANGLES = [
    ((0.0, 0.0, 0.0), (0.0, 1.0, 0.1), (0.1, 0.0, 1.0)),
    ((0.0, 0.0, 0.0), (1.0, 0.1, 0.0), (0.0, 0.1, 1.0)),
    ((0.0, 0.0, 0.0), (1.0, 0.0, 0.1), (0.0, 1.0, 0.1)),
    ((1.0, 2.0, 3.0), (4.0, 0.0, 2.0), (-1.0, 5.0, 0.0)),
]


@pytest.mark.parametrize("tri", TRIANGLES)
def test_corners(tri):
    u, v, w = tri
    assert np.allclose(barycentric_coordinates(u, u, v, w), [1.0, 0.0, 0.0])
    assert np.allclose(barycentric_coordinates(v, u, v, w), [0.0, 1.0, 0.0])
    assert np.allclose(barycentric_coordinates(w, u, v, w), [0.0, 0.0, 1.0])


@pytest.mark.parametrize("tri", TRIANGLES)
@pytest.mark.parametrize("weights", [(0.2, 0.3, 0.5), (0.6, -0.1, 0.5), (1.0 / 3, 1.0 / 3, 1.0 / 3)])
def test_reconstruction(tri, weights):
    u, v, w = (np.asarray(x) for x in tri)
    p = weights[0] * u + weights[1] * v + weights[2] * w
    b = barycentric_coordinates(p, u, v, w)
    assert np.allclose(b, weights)
    assert b.sum() == pytest.approx(1.0)


def test_degenerate_triangle_gives_barycenter():
    u = (0.0, 0.0, 0.0)
    v = (1.0, 0.0, 0.0)
    w = (2.0, 0.0, 0.0)
    b = barycentric_coordinates((5.0, 5.0, 5.0), u, v, w)
    assert np.allclose(b, [1.0 / 3.0] * 3)


def test_point_off_plane_is_projected():
    u, v, w = (0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (0.0, 1.0, 0.0)
    in_plane = barycentric_coordinates((0.25, 0.25, 0.0), u, v, w)
    lifted = barycentric_coordinates((0.25, 0.25, 7.0), u, v, w)
    assert np.allclose(in_plane, lifted)