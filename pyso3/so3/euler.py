"""
A module for Body 321 Euler angles.

This is a representation of SO(3). There are 3 parameters (phi [roll], theta [pitch], psi [heading]),
with dcm = R_z(psi) @ R_y(theta) @ R_x(phi). It is singular at theta = +/- pi/2, where only
phi - psi (or phi + psi) is determined. Conversions back from other representations return
phi, psi in [-pi, pi] and theta in [-pi/2, pi/2], with phi = 0 at the singularity.
"""
import casadi as ca

from . import dcm, quat
from .convert import register
from .rep import EulerRep, QuaternionRep, RotationMatrixRep

EPS_GIMBAL = 1e-8  # cos(theta) below which phi is set to zero


def identity(expr=ca.DM):
    return expr([0, 0, 0])


def product(a, b):
    return from_dcm(dcm.product(to_dcm(a), to_dcm(b)))


def inv(e):
    return from_dcm(dcm.inv(to_dcm(e)))


def kinematics(e, w):
    """
    The euler angle rates given the angular velocity in the body frame.
    :param e: The euler angles.
    :param w: The angular velocity in the body frame.
    :return: The time derivative of the euler angles.
    """
    assert e.shape == (3, 1)
    assert w.shape == (3, 1)
    phi = e[0]
    theta = e[1]
    cphi = ca.cos(phi)
    sphi = ca.sin(phi)
    ctheta = ca.cos(theta)
    ttheta = ca.tan(theta)
    return ca.vertcat(
        w[0] + (sphi * w[1] + cphi * w[2]) * ttheta,
        cphi * w[1] - sphi * w[2],
        (sphi * w[1] + cphi * w[2]) / ctheta,
    )


def _asin(x):
    # round off can push |x| past 1 at the singularity
    return ca.asin(ca.fmin(ca.fmax(x, -1), 1))


@register(EulerRep, RotationMatrixRep)
def to_dcm(e):
    assert e.shape == (3, 1)
    cphi = ca.cos(e[0])
    sphi = ca.sin(e[0])
    ctheta = ca.cos(e[1])
    stheta = ca.sin(e[1])
    cpsi = ca.cos(e[2])
    spsi = ca.sin(e[2])
    return ca.vertcat(
        ca.horzcat(cpsi * ctheta, cpsi * stheta * sphi - spsi * cphi, cpsi * stheta * cphi + spsi * sphi),
        ca.horzcat(spsi * ctheta, spsi * stheta * sphi + cpsi * cphi, spsi * stheta * cphi - cpsi * sphi),
        ca.horzcat(-stheta, ctheta * sphi, ctheta * cphi),
    )


@register(RotationMatrixRep, EulerRep)
def from_dcm(R):
    """
    Converts a direction cosine matrix to euler angles. At gimbal lock (cos(theta) = 0) only
    phi -/+ psi is determined, there phi = 0 is chosen and psi carries the whole rotation.
    :param R: A direction cosine matrix.
    :return: The euler angles.
    """
    assert R.shape == (3, 3)
    locked = R[2, 1] ** 2 + R[2, 2] ** 2 < EPS_GIMBAL**2
    return ca.vertcat(
        ca.if_else(locked, 0, ca.atan2(R[2, 1], R[2, 2])),
        _asin(-R[2, 0]),
        ca.if_else(locked, ca.atan2(-R[0, 1], R[1, 1]), ca.atan2(R[1, 0], R[0, 0])),
    )


@register(EulerRep, QuaternionRep)
def to_quat(e):
    assert e.shape == (3, 1)
    cosPhi_2 = ca.cos(e[0] / 2)
    cosTheta_2 = ca.cos(e[1] / 2)
    cosPsi_2 = ca.cos(e[2] / 2)
    sinPhi_2 = ca.sin(e[0] / 2)
    sinTheta_2 = ca.sin(e[1] / 2)
    sinPsi_2 = ca.sin(e[2] / 2)
    return ca.vertcat(
        cosPhi_2 * cosTheta_2 * cosPsi_2 + sinPhi_2 * sinTheta_2 * sinPsi_2,
        sinPhi_2 * cosTheta_2 * cosPsi_2 - cosPhi_2 * sinTheta_2 * sinPsi_2,
        cosPhi_2 * sinTheta_2 * cosPsi_2 + sinPhi_2 * cosTheta_2 * sinPsi_2,
        cosPhi_2 * cosTheta_2 * sinPsi_2 - sinPhi_2 * sinTheta_2 * cosPsi_2,
    )


@register(QuaternionRep, EulerRep)
def from_quat(q):
    assert q.shape == (4, 1)
    return from_dcm(quat.to_dcm(q))
