"""
Tests for the orientation predicates.

The near-collinear configuration used throughout:
    r = (0.5, 0.5 + 2**-53), q = (12, 12), p = (24, 24)
Exactly, orient(r, q, p) = -12 * 2**-53. In floats both differences round
away the 2**-53 and the naive determinant is a false zero.
"""

import math

import numpy as np
import pytest

from cg2d import (
    InvalidGeometryError, PREDICATES, Pt, get_predicate, orient2d_naive, orient2d_robust, sign, sign_grid,
)

D = 2.0 ** -53
R = Pt(0.5, 0.5 + D)
Q = Pt(12.0, 12.0)
P = Pt(24.0, 24.0)


@pytest.mark.parametrize("pred", [orient2d_naive, orient2d_robust])
def test_basic_signs(pred):
    o, x, y = Pt(0, 0), Pt(1, 0), Pt(0, 1)
    assert pred(o, x, y) == -1.0
    assert pred(o, y, x) == 1.0
    # cyclic permutation keeps the sign
    assert sign(pred(x, y, o)) == sign(pred(o, x, y))
    assert pred(Pt(0, 0), Pt(1, 1), Pt(2, 2)) == 0.0


@pytest.mark.parametrize("pred", [orient2d_naive, orient2d_robust])
def test_value_is_twice_signed_area(pred):
    assert pred(Pt(0, 0), Pt(4, 0), Pt(0, 3)) == -12.0
    assert pred(Pt(1, 1), Pt(1, 5), Pt(4, 1)) == 12.0


def test_naive_false_zero():
    assert orient2d_naive(R, Q, P) == 0.0


def test_robust_exact_sign_near_collinear():
    assert orient2d_robust(R, Q, P) == -12 * D
    assert orient2d_robust(Q, P, R) < 0
    assert orient2d_robust(R, P, Q) > 0


@pytest.mark.parametrize("k", [-40, -20, -5, 0, 5, 20, 40])
def test_robust_sign_stable_under_scaling(k):
    s = 2.0 ** k
    r, q, p = (Pt(a.x * s, a.y * s) for a in (R, Q, P))
    assert sign(orient2d_robust(r, q, p)) == -1


def test_naive_disagrees_with_exact_sign():
    assert sign(orient2d_naive(R, Q, P)) != sign(orient2d_robust(R, Q, P))


def test_robust_handles_overflow():
    r, q, p = Pt(0, 0), Pt(1e200, 1e200), Pt(-1e200, 1e200)
    assert sign(orient2d_robust(r, q, p)) == -1
    # same point twice: naive turns inf - inf into NaN
    p = Pt(1e200, 1e200)
    assert math.isnan(orient2d_naive(r, q, p))
    assert orient2d_robust(r, q, p) == 0.0


def test_robust_handles_underflow():
    r, q, p = Pt(0, 0), Pt(1e-200, 1e-200), Pt(-1e-200, 1e-200)
    assert orient2d_naive(r, q, p) == 0.0
    assert sign(orient2d_robust(r, q, p)) == -1
    assert sign(orient2d_robust(r, p, q)) == 1


def test_sign():
    assert sign(3.5) == 1
    assert sign(-1e-300) == -1
    assert sign(0.0) == 0
    assert sign(-0.0) == 0
    with pytest.raises(InvalidGeometryError):
        sign(math.nan)


def test_get_predicate():
    assert get_predicate("naive") is orient2d_naive
    assert get_predicate("robust") is orient2d_robust
    assert set(PREDICATES) == {"naive", "robust"}

    def custom(r, q, p):
        return 1.0

    assert get_predicate(custom) is custom
    with pytest.raises(ValueError, match="Unknown predicate"):
        get_predicate("adaptive")


def test_sign_grid_robust_is_exact():
    # orient((0.5 + i*d, 0.5 + j*d), q, p) == 12*d*(i - j)
    grid = sign_grid("robust", nx=8, ny=8)
    expected = np.sign(np.subtract.outer(np.arange(8), np.arange(8))).astype(np.int8)
    assert grid.shape == (8, 8)
    assert grid.dtype == np.int8
    np.testing.assert_array_equal(grid, expected)


def test_sign_grid_naive_misclassifies():
    naive = sign_grid(orient2d_naive, nx=8, ny=8)
    robust = sign_grid(orient2d_robust, nx=8, ny=8)
    assert naive[0, 1] == 0
    assert robust[0, 1] == -1
    assert (naive != robust).any()
