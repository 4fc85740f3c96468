"""
A module for Direction Cosine Matrices (DCMs).

This is the canonical representation of SO(3). There are 9 parameters and no singularities.
The matrix is active: R @ v rotates the vector v. Orthonormality is not checked.
"""
import casadi as ca

from pyso3.lie.util import hat


def identity(expr=ca.DM):
    return ca.densify(expr.eye(3))


def product(a, b):
    assert a.shape == (3, 3)
    assert b.shape == (3, 3)
    return ca.mtimes(a, b)


def inv(R):
    assert R.shape == (3, 3)
    return R.T


def kinematics(R, w):
    """
    The kinematic equation relating the time derivative of the DCM to the angular velocity.
    :param R: The DCM.
    :param w: The angular velocity in the body frame.
    :return: The time derivative of the DCM.
    """
    assert R.shape == (3, 3)
    assert w.shape == (3, 1)
    return ca.mtimes(R, hat(w))
