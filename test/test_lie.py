import casadi as ca
import numpy as np
import pytest

from pyso3 import Dcm, Euler, Mrp, Quat, RotVec
from pyso3.lie import util

eps = 1e-10


def test_hat():
    X = Dcm.hat([1, 0, 0])
    assert np.array_equal(X.full(), np.array([[0, 0, 0], [0, 0, -1], [0, 1, 0]]))
    assert np.array_equal(Dcm.vee(X).full(), np.array([[1], [0], [0]]))


def test_hat_vee():
    rng = np.random.default_rng(0)
    for _ in range(10):
        v = ca.DM(rng.normal(size=3))
        X = Quat.hat(v)
        assert np.array_equal((X + X.T).full(), np.zeros((3, 3)))
        assert np.array_equal(Quat.vee(X).full(), v.full())
        # hat(v) u = v x u
        u = ca.DM(rng.normal(size=3))
        assert ca.norm_2(ca.mtimes(X, u) - ca.cross(v, u)) < eps


def test_vee_of_non_skew():
    M = ca.DM([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
    v = Dcm.vee(M)
    assert np.array_equal(v.full(), np.array([[8], [3], [4]]))
    X = Dcm.hat(v)
    assert np.array_equal(Dcm.hat(Dcm.vee((M - M.T) / 2)).full(), ((M - M.T) / 2).full())
    assert not np.array_equal(X.full(), M.full())


def test_wedge_and_ad_are_hat():
    v = ca.DM([0.1, 0.2, 0.3])
    for G in [Dcm, Quat, RotVec, Mrp, Euler]:
        assert np.array_equal(G.wedge(v).full(), G.hat(v).full())
        assert np.array_equal(G.ad(v).full(), G.hat(v).full())


@pytest.mark.parametrize("f,g,switch", [
    (util.C1, lambda x: np.sin(x) / x, util.EPS),
    (util.C2, lambda x: (1 - np.cos(x)) / x**2, util.EPS),
    (util.C4, lambda x: (1 - x * np.sin(x) / (2 * (1 - np.cos(x)))) / x**2, util.EPS_C4),
])
def test_series(f, g, switch):
    for x in [0.5, 1.0, 2.0]:
        assert abs(float(f(x)) - g(x)) < eps
    # both sides of the switch to the taylor series agree
    assert abs(float(f(switch * (1 - 1e-9))) - float(f(switch * (1 + 1e-9)))) < 1e-9
    assert np.isfinite(float(f(0)))
