import math

import numpy as np
import pytest

from pmpcore.normal_cone import NormalCone


def angle_between(a, b):
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    c = np.dot(a, b) / (np.linalg.norm(a) * np.linalg.norm(b))
    return math.acos(max(-1.0, min(1.0, c)))


def test_defaults():
    cone = NormalCone((0.0, 0.0, 1.0))
    assert cone.angle == 0.0
    assert cone.center_normal.tolist() == [0.0, 0.0, 1.0]


def test_same_direction_keeps_larger_angle():
    cone = NormalCone((0.0, 0.0, 1.0), 0.1)
    cone.merge(NormalCone((0.0, 0.0, 1.0), 0.3))
    assert cone.angle == pytest.approx(0.3)
    assert cone.center_normal.tolist() == [0.0, 0.0, 1.0]


def test_opposite_direction_covers_everything():
    cone = NormalCone((0.0, 0.0, 1.0))
    cone.merge((0.0, 0.0, -1.0))
    assert cone.angle == pytest.approx(2.0 * math.pi)


def test_orthogonal_normals():
    cone = NormalCone((1.0, 0.0, 0.0))
    result = cone.merge((0.0, 1.0, 0.0))
    assert result is cone
    assert cone.angle == pytest.approx(math.pi / 4)
    expected = np.array([1.0, 1.0, 0.0]) / math.sqrt(2.0)
    assert np.allclose(cone.center_normal, expected)


@pytest.mark.parametrize(
    "n1, a1, n2, a2",
    [
        ((1.0, 0.0, 0.0), 0.0, (0.0, 0.0, 1.0), 0.2),
        ((0.0, 0.6, 0.8), 0.1, (0.8, 0.6, 0.0), 0.05),
        ((0.0, 1.0, 0.0), 0.3, (0.6, 0.8, 0.0), 0.0),
    ],
)
def test_merged_cone_encloses_both(n1, a1, n2, a2):
    cone = NormalCone(n1, a1)
    cone.merge(NormalCone(n2, a2))
    assert np.linalg.norm(cone.center_normal) == pytest.approx(1.0)
    assert angle_between(cone.center_normal, n1) + a1 <= cone.angle + 1e-9
    assert angle_between(cone.center_normal, n2) + a2 <= cone.angle + 1e-9


def test_merge_is_incremental():
    normals = [(1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.6, 0.8, 0.0)]
    cone = NormalCone(normals[0])
    for n in normals[1:]:
        cone.merge(n)
    for n in normals:
        assert angle_between(cone.center_normal, n) <= cone.angle + 1e-9