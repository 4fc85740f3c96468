import casadi as ca
import numpy as np
from scipy.spatial.transform import Rotation

from pyso3 import Dcm, Quat
from pyso3.so3 import quat

tol = 1e-5  # tolerance
eps = 1e-10

# Analytical Mechanics of Space Systems, Shaub pg. 97
dcm_check = ca.DM([
    [0.892539, 0.157379, -0.422618],
    [-0.275451, 0.932257, -0.234570],
    [0.357073, 0.325773, 0.875426]
]).T  # transpose from Schaub dcm convention
# direction of transform is reversed
q_check = ca.DM([0.961798, -0.14565, 0.202665, 0.112505])
a = Quat([1, 0, 0, 0])
b = Quat([0, 1, 0, 0])


def test_to_from_dcm():
    assert ca.norm_fro(quat.from_dcm(dcm_check) - q_check) < tol
    assert ca.norm_fro(quat.to_dcm(q_check) - dcm_check) < tol
    assert Quat(Dcm(dcm_check)).is_approx(Quat(q_check), tol)


def test_from_dcm_all_branches():
    # one rotation for each pivot of the conversion
    for v in [[0.1, 0.2, 0.3], [3.0, 0.1, 0.2], [0.1, 3.0, 0.2], [0.1, 0.2, 3.0]]:
        R = Rotation.from_rotvec(v).as_matrix()
        q = quat.from_dcm(ca.DM(R))
        assert abs(float(ca.norm_2(q)) - 1) < eps
        assert np.allclose(quat.to_dcm(q).full(), R, atol=eps)


def test_product():
    assert ca.norm_fro((a * b).to_rotation_matrix() - ca.mtimes(a.to_rotation_matrix(), b.to_rotation_matrix())) < tol
    rng = np.random.default_rng(3)
    for _ in range(5):
        p = Quat.random(rng)
        r = Quat.random(rng)
        Rp = Rotation.from_matrix(p.to_rotation_matrix().full())
        Rr = Rotation.from_matrix(r.to_rotation_matrix().full())
        assert np.allclose((p * r).to_rotation_matrix().full(), (Rp * Rr).as_matrix(), atol=eps)


def test_inv_is_conjugate():
    q = Quat.random(1)
    assert ca.norm_2(q.inv().rep_data - ca.vertcat(q.rep_data[0], -q.rep_data[1:])) < eps
    q.invert()
    assert q == Quat.random(1).inv()


def test_no_normalization():
    q = Quat([2, 0, 0, 0])
    q *= Quat.identity()
    assert q == Quat([2, 0, 0, 0])


def test_kinematics():
    w = ca.DM([0.1, 0.2, 0.3])
    assert ca.norm_2(a.kinematics(w) - ca.vertcat(0, w / 2)) < eps
