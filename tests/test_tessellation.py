import math

import pytest

from pmpcore.tessellation import squared_area, tessellate

L_SHAPE = [
    (0.0, 0.0, 0.0),
    (2.0, 0.0, 0.0),
    (2.0, 1.0, 0.0),
    (1.0, 1.0, 0.0),
    (1.0, 2.0, 0.0),
    (0.0, 2.0, 0.0),
]


def _regular_polygon(n, radius=1.0):
    return [
        (radius * math.cos(2 * math.pi * k / n), radius * math.sin(2 * math.pi * k / n), 0.0)
        for k in range(n)
    ]


def _signed_area_z(points, tri):
    (ax, ay, _), (bx, by, _), (cx, cy, _) = (points[i] for i in tri)
    return 0.5 * ((bx - ax) * (cy - ay) - (by - ay) * (cx - ax))


def test_squared_area_unit_right_triangle():
    assert squared_area((0, 0, 0), (1, 0, 0), (0, 1, 0)) == pytest.approx(1.0)


def test_squared_area_collinear_is_zero():
    assert squared_area((0, 0, 0), (1, 1, 1), (2, 2, 2)) == pytest.approx(0.0)


def test_squared_area_scales_with_fourth_power():
    p = [(0.3, -1.0, 2.0), (1.5, 0.2, -0.7), (-0.4, 2.2, 1.1)]
    base = squared_area(*p)
    scaled = squared_area(*[tuple(2 * c for c in q) for q in p])
    assert scaled == pytest.approx(16 * base)


def test_squared_area_invariant_under_cyclic_permutation():
    p = [(0.3, -1.0, 2.0), (1.5, 0.2, -0.7), (-0.4, 2.2, 1.1)]
    assert squared_area(p[1], p[2], p[0]) == pytest.approx(squared_area(*p))


def test_triangle_is_returned_unchanged():
    assert tessellate([(0, 0, 0), (1, 0, 0), (0, 1, 0)]) == [(0, 1, 2)]


def test_square_with_tied_diagonals_uses_second_split():
    square = [(0, 0, 0), (1, 0, 0), (1, 1, 0), (0, 1, 0)]
    assert tessellate(square) == [(0, 1, 3), (1, 2, 3)]


def test_nonconvex_quad_uses_diagonal_through_reflex_corner():
    dart = [(0, 0, 0), (1, 0, 0), (0.2, 0.2, 0), (0, 1, 0)]
    assert tessellate(dart) == [(0, 1, 2), (0, 2, 3)]


@pytest.mark.parametrize("n", [0, 1, 2])
def test_too_few_points_raise(n):
    with pytest.raises(ValueError):
        tessellate([(float(i), 0.0, 0.0) for i in range(n)])


@pytest.mark.parametrize("n", [5, 6, 7, 8, 12])
def test_ngon_has_n_minus_two_ordered_triangles(n):
    triangles = tessellate(_regular_polygon(n))
    assert len(triangles) == n - 2
    assert all(0 <= a < b < c < n for a, b, c in triangles)
    assert triangles[0][0] == 0 and triangles[0][2] == n - 1


@pytest.mark.parametrize("n", [5, 6, 9])
def test_ngon_triangles_cover_every_corner_and_edge(n):
    triangles = tessellate(_regular_polygon(n))
    used = {i for tri in triangles for i in tri}
    assert used == set(range(n))
    edges = {frozenset(e) for a, b, c in triangles for e in ((a, b), (b, c), (a, c))}
    for k in range(n):
        assert frozenset((k, (k + 1) % n)) in edges


def test_regular_hexagon_area_is_preserved():
    points = _regular_polygon(6)
    triangles = tessellate(points)
    total = sum(abs(_signed_area_z(points, t)) for t in triangles)
    assert total == pytest.approx(3 * math.sqrt(3) / 2)


def test_l_shape_triangles_do_not_fold():
    triangles = tessellate(L_SHAPE)
    areas = [_signed_area_z(L_SHAPE, t) for t in triangles]
    assert len(triangles) == 4
    assert all(a > 0 for a in areas)
    assert sum(areas) == pytest.approx(3.0)


def test_tessellation_is_deterministic():
    points = _regular_polygon(10, radius=2.5)
    assert tessellate(points) == tessellate(list(points))