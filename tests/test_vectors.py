import math

import numpy as np
import pytest

from pmpcore.vectors import (
    IOFlags,
    add,
    all_finite,
    cross,
    dot,
    norm,
    scale,
    sqrnorm,
    sub,
)


def test_all_finite():
    assert all_finite([0.0, 0.0, 0.0]) is True


def test_non_finite_inf():
    assert all_finite([math.inf] * 3) is False


def test_non_finite_nan():
    assert all_finite([math.nan] * 3) is False


def test_dot_orthogonal_and_parallel():
    assert dot([1, 0, 0], [0, 1, 0]) == 0.0
    assert dot([1, 2, 3], [1, 2, 3]) == pytest.approx(sqrnorm([1, 2, 3]))


def test_cross_of_axes():
    assert np.allclose(cross([1, 0, 0], [0, 1, 0]), [0, 0, 1])
    assert np.allclose(cross([0, 1, 0], [1, 0, 0]), [0, 0, -1])


def test_cross_is_orthogonal_to_inputs():
    a, b = [1.0, 2.0, 3.0], [-2.0, 0.5, 4.0]
    c = cross(a, b)
    assert dot(c, a) == pytest.approx(0.0, abs=1e-12)
    assert dot(c, b) == pytest.approx(0.0, abs=1e-12)


def test_norm_and_sqrnorm():
    assert norm([3, 4, 0]) == pytest.approx(5.0)
    assert sqrnorm([3, 4, 0]) == pytest.approx(25.0)


def test_add_sub_round_trip():
    a, b = [1.0, 2.0, 3.0], [0.5, -1.0, 7.0]
    assert np.allclose(sub(add(a, b), b), a)


def test_scale():
    assert np.allclose(scale([1, -2, 3], 2.0), [2, -4, 6])
    assert norm(scale([3, 4, 0], 0.5)) == pytest.approx(2.5)


def test_ioflags_defaults_are_false():
    flags = IOFlags()
    assert flags.use_binary is False
    assert flags.use_halfedge_texcoords is False
    assert IOFlags(use_binary=True).use_binary is True