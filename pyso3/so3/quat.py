"""
A module for quaternions (Euler parameters)

Hamilton convention, scalar first: q = [w, x, y, z], so that dcm(a * b) = dcm(a) @ dcm(b).
q and -q represent the same rotation. Unit norm is not enforced, to_dcm of a non unit
quaternion is not orthonormal.
"""
import casadi as ca

from .convert import register
from .rep import QuaternionRep, RotationMatrixRep


def identity(expr=ca.DM):
    return expr([1, 0, 0, 0])


def product(a, b):
    assert a.shape == (4, 1)
    assert b.shape == (4, 1)
    r1 = a[0]
    v1 = a[1:]
    r2 = b[0]
    v2 = b[1:]
    return ca.vertcat(r1 * r2 - ca.dot(v1, v2), r1 * v2 + r2 * v1 + ca.cross(v1, v2))


def inv(q):
    """
    The conjugate, the inverse of a unit quaternion.
    """
    assert q.shape == (4, 1)
    return ca.vertcat(q[0], -q[1:])


def kinematics(q, w):
    """
    The kinematic equation relating the time derivative of quat given the current quat and the angular velocity
    in the body frame.
    :param q: The quaternion
    :param w: The angular velocity in the body frame.
    :return: The time derivative of the quat.
    """
    assert q.shape == (4, 1)
    assert w.shape == (3, 1)
    return 0.5 * product(q, ca.vertcat(0, w))


@register(QuaternionRep, RotationMatrixRep)
def to_dcm(q):
    assert q.shape == (4, 1)
    a = q[0]
    b = q[1]
    c = q[2]
    d = q[3]
    aa = a * a
    ab = a * b
    ac = a * c
    ad = a * d
    bb = b * b
    bc = b * c
    bd = b * d
    cc = c * c
    cd = c * d
    dd = d * d
    return ca.vertcat(
        ca.horzcat(aa + bb - cc - dd, 2 * (bc - ad), 2 * (bd + ac)),
        ca.horzcat(2 * (bc + ad), aa + cc - bb - dd, 2 * (cd - ab)),
        ca.horzcat(2 * (bd - ac), 2 * (cd + ab), aa + dd - bb - cc),
    )


@register(RotationMatrixRep, QuaternionRep)
def from_dcm(R):
    """
    Converts a direction cosine matrix to a quaternion, picking the largest of the four
    candidate pivots so the division is well conditioned. For trace > 0 the scalar part is positive.
    :param R: A direction cosine matrix.
    :return: The quaternion.
    """
    assert R.shape == (3, 3)
    b1 = 0.5 * ca.sqrt(1 + R[0, 0] + R[1, 1] + R[2, 2])
    b2 = 0.5 * ca.sqrt(1 + R[0, 0] - R[1, 1] - R[2, 2])
    b3 = 0.5 * ca.sqrt(1 - R[0, 0] + R[1, 1] - R[2, 2])
    b4 = 0.5 * ca.sqrt(1 - R[0, 0] - R[1, 1] + R[2, 2])

    q1 = ca.vertcat(
        b1,
        (R[2, 1] - R[1, 2]) / (4 * b1),
        (R[0, 2] - R[2, 0]) / (4 * b1),
        (R[1, 0] - R[0, 1]) / (4 * b1),
    )
    q2 = ca.vertcat(
        (R[2, 1] - R[1, 2]) / (4 * b2),
        b2,
        (R[0, 1] + R[1, 0]) / (4 * b2),
        (R[0, 2] + R[2, 0]) / (4 * b2),
    )
    q3 = ca.vertcat(
        (R[0, 2] - R[2, 0]) / (4 * b3),
        (R[0, 1] + R[1, 0]) / (4 * b3),
        b3,
        (R[1, 2] + R[2, 1]) / (4 * b3),
    )
    q4 = ca.vertcat(
        (R[1, 0] - R[0, 1]) / (4 * b4),
        (R[0, 2] + R[2, 0]) / (4 * b4),
        (R[1, 2] + R[2, 1]) / (4 * b4),
        b4,
    )
    return ca.if_else(
        ca.trace(R) > 0,
        q1,
        ca.if_else(
            ca.logic_and(R[0, 0] > R[1, 1], R[0, 0] > R[2, 2]),
            q2,
            ca.if_else(R[1, 1] > R[2, 2], q3, q4),
        ),
    )
