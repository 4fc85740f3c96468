"""
A module for rotation vectors (axis times angle).

These are the coordinates of the Lie algebra so(3), so the exponential and logarithm maps of every
representation are conversions to and from this one. There are 3 parameters. Any vector is accepted,
vectors longer than pi are not wrapped. Conversions back from other representations return the short
vector, with angle in [0, pi].

Near the origin the coefficients are evaluated with taylor series. The logarithm goes through the
quaternion (largest pivot, then atan2) so it stays well conditioned at an angle of pi, where the
classic (R - R^T) / (2 sin(theta)) formula breaks down.
"""
import casadi as ca

from pyso3.lie.util import EPS, C1, C2, C4, hat
from . import quat
from .convert import register
from .rep import QuaternionRep, RotationMatrixRep, RotationVectorRep


def identity(expr=ca.DM):
    return expr([0, 0, 0])


def product(a, b):
    assert a.shape == (3, 1)
    assert b.shape == (3, 1)
    return from_quat(quat.product(to_quat(a), to_quat(b)))


def inv(v):
    assert v.shape == (3, 1)
    return -v


def kinematics(v, w):
    """
    The time derivative of the rotation vector given the angular velocity in the body frame,
    v_dot = J_r^-1(v) w.
    :param v: The rotation vector.
    :param w: The angular velocity in the body frame.
    :return: The time derivative of the rotation vector.
    """
    assert v.shape == (3, 1)
    assert w.shape == (3, 1)
    theta = ca.norm_2(v)
    X = hat(v)
    return w + 0.5 * ca.mtimes(X, w) + C4(theta) * ca.mtimes(X, ca.mtimes(X, w))


@register(RotationVectorRep, RotationMatrixRep)
def to_dcm(v):
    assert v.shape == (3, 1)
    theta = ca.norm_2(v)
    X = hat(v)
    return ca.densify(ca.DM.eye(3)) + C1(theta) * X + C2(theta) * ca.mtimes(X, X)


@register(RotationMatrixRep, RotationVectorRep)
def from_dcm(R):
    assert R.shape == (3, 3)
    return from_quat(quat.from_dcm(R))


@register(RotationVectorRep, QuaternionRep)
def to_quat(v):
    assert v.shape == (3, 1)
    theta = ca.norm_2(v)
    # sin(theta/2)/theta = C1(theta/2)/2
    return ca.vertcat(ca.cos(theta / 2), 0.5 * C1(theta / 2) * v)


@register(QuaternionRep, RotationVectorRep)
def from_quat(q):
    assert q.shape == (4, 1)
    # use the hemisphere with w >= 0 so the angle is in [0, pi]
    s = ca.if_else(q[0] < 0, -1, 1)
    w = s * q[0]
    u = s * q[1:]
    n = ca.norm_2(u)
    theta = 2 * ca.atan2(n, w)
    k = ca.if_else(n > EPS, theta / n, 2 / w * (1 - n**2 / (3 * w**2)))
    return k * u
