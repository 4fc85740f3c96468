import casadi as ca
import numpy as np
from scipy.spatial.transform import Rotation

from pyso3 import Dcm, Euler, Mrp, Quat
from pyso3.so3 import euler

eps = 1e-10

e = ca.DM([0.1, 0.2, 0.3])


def test_matches_scipy():
    R = Rotation.from_euler("ZYX", [0.3, 0.2, 0.1]).as_matrix()
    assert np.allclose(euler.to_dcm(e).full(), R, atol=eps)
    assert np.allclose(quat_to_dcm(euler.to_quat(e)), R, atol=eps)


def quat_to_dcm(q):
    return Quat(q).to_rotation_matrix().full()


def test_from_dcm_and_quat():
    R = euler.to_dcm(e)
    assert ca.norm_2(euler.from_dcm(R) - e) < eps
    assert ca.norm_2(euler.from_quat(euler.to_quat(e)) - e) < eps


def test_gimbal_lock_is_clamped():
    # pure pitch of pi/2, round off can push the asin argument past 1
    R = Dcm.exp([0, np.pi / 2, 0]).rep_data
    angles = euler.from_dcm(R)
    assert np.all(np.isfinite(angles.full()))
    assert abs(float(angles[1]) - np.pi / 2) < 1e-6
    assert Euler(angles).is_approx(Dcm(R))


def test_product_and_inv():
    a = Euler(e)
    b = Euler([-0.3, 0.1, 0.5])
    assert (a * b).is_approx(Dcm(a) * Dcm(b))
    assert ca.norm_2((a * a.inv()).rep_data) < eps


def test_kinematics_pure_yaw_rate():
    w = ca.DM([0, 0, 0.5])
    # level attitude, body z rate is heading rate
    assert ca.norm_2(Euler.identity().kinematics(w) - w) < eps


def test_gimbal_lock_with_roll():
    # R_y(pi/2) @ R_x(pi/2) and R_y(-pi/2) @ R_x(pi/2), roll and heading are coupled
    for R in [
        ca.DM([[0, 1, 0], [0, 0, -1], [-1, 0, 0]]),
        ca.DM([[0, -1, 0], [0, 0, -1], [1, 0, 0]]),
    ]:
        angles = euler.from_dcm(R)
        assert float(angles[0]) == 0
        assert ca.norm_fro(euler.to_dcm(angles) - R) < 1e-6
        a = Euler()
        a.from_rotation_matrix(R)
        assert ca.norm_fro(a.to_rotation_matrix() - R) < 1e-6
        q = Quat(Dcm(R))
        assert ca.norm_2(euler.from_quat(q.rep_data) - angles) < 1e-6
        assert Euler(q).is_approx(q)
        assert Euler(Mrp(q)).is_approx(q)
