"""
A module for Modified Rodrigues Parameters (MRPs)

This is a representation of SO(3). It has 3 parameters, r = tan(theta/4) * axis. There is a
singularity at a rotation of 2*pi. This singularity can be avoided by switching to the shadow set.
One of the two sets will always have magnitude less than one, every function here returns that one.
"""
import casadi as ca

from pyso3.lie.util import hat
from . import quat
from .convert import register
from .rep import MrpRep, QuaternionRep, RotationMatrixRep


def identity(expr=ca.DM):
    return expr([0, 0, 0])


def product(a, b):
    """
    Take the product of two MRPs, representing successive rotations such that:
    to_dcm(product(a, b)) = to_dcm(a) @ to_dcm(b)
    The product is taken on the quaternions, Schaub's closed form is 0/0 when
    both MRPs are half turns about the same axis.
    :param a: The MRP on the left.
    :param b: The MRP on the right.
    :return: The resultant MRP, on the |r| <= 1 set.
    """
    assert a.shape == (3, 1)
    assert b.shape == (3, 1)
    return from_quat(quat.product(to_quat(a), to_quat(b)))


def inv(r):
    """
    The multiplicative inverse for MRPs. It happens to be equal to the negative of the MRPs.
    """
    assert r.shape == (3, 1)
    return -r


def shadow(r):
    """
    Convert MRPs to their shadow (the MRPs corresponding to the quaternion with opposite sign). Both the MRPs and
    shadow MRPs represent the same attitude, but one of the two's magnitude is always less than 1, while the other's
    magnitude can approach inf near a rotation of 2*pi.
    :param r: The MRP.
    :return: The shadow MRP.
    """
    assert r.shape == (3, 1)
    return -r / ca.dot(r, r)


def B(r):
    """
    A matrix used to compute the MRPs kinematics.
    """
    assert r.shape == (3, 1)
    n_sq = ca.dot(r, r)
    X = hat(r)
    return 0.25 * ((1 - n_sq) * ca.DM.eye(3) + 2 * X + 2 * ca.mtimes(r, r.T))


def kinematics(r, w):
    """
    The kinematic equation relating the time derivative of MRPs given the current MRPs and the angular velocity.
    :param r: The MRPs.
    :param w: The angular velocity in the body frame.
    :return: The time derivative of the MRPs.
    """
    assert w.shape == (3, 1)
    return ca.mtimes(B(r), w)


@register(MrpRep, QuaternionRep)
def to_quat(r):
    assert r.shape == (3, 1)
    n_sq = ca.dot(r, r)
    den = 1 + n_sq
    return ca.vertcat((1 - n_sq) / den, 2 * r / den)


@register(QuaternionRep, MrpRep)
def from_quat(q):
    assert q.shape == (4, 1)
    # pick the sign of q with w >= 0, this gives |r| <= 1
    s = ca.if_else(q[0] < 0, -1, 1)
    return s * q[1:] / (1 + s * q[0])


@register(MrpRep, RotationMatrixRep)
def to_dcm(r):
    assert r.shape == (3, 1)
    X = hat(r)
    n_sq = ca.dot(r, r)
    return ca.DM.eye(3) + (8 * ca.mtimes(X, X) + 4 * (1 - n_sq) * X) / (1 + n_sq) ** 2


@register(RotationMatrixRep, MrpRep)
def from_dcm(R):
    assert R.shape == (3, 3)
    return from_quat(quat.from_dcm(R))
