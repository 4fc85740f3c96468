"""
Representation tags for SO(3).

A tag is a class used only as a marker: it names a way of storing a rotation
and carries the shape of that storage. Tags are never instantiated.
"""
import collections


RepTraits = collections.namedtuple("RepTraits", ["shape", "params", "is_canonical", "canonical"])


class Rep:

    SHAPE = None
    CANONICAL = False

    def __init__(self):
        raise RuntimeError('this class is just for scoping, do not instantiate')


class RotationMatrixRep(Rep):
    """3x3 direction cosine matrix, 9 parameters, no singularities."""

    SHAPE = (3, 3)
    CANONICAL = True


class QuaternionRep(Rep):
    """Hamilton quaternion [w, x, y, z], 4 parameters, double cover."""

    SHAPE = (4, 1)


class RotationVectorRep(Rep):
    """Axis times angle, 3 parameters, the coordinates of the Lie algebra."""

    SHAPE = (3, 1)


class MrpRep(Rep):
    """Modified Rodrigues parameters, 3 parameters, kept on the |r| <= 1 set."""

    SHAPE = (3, 1)


class EulerRep(Rep):
    """Body 3-2-1 Euler angles [phi, theta, psi], singular at theta = +/- pi/2."""

    SHAPE = (3, 1)


CanonicalRep = RotationMatrixRep

_REPS = [RotationMatrixRep, QuaternionRep, RotationVectorRep, MrpRep, EulerRep]


def all_reps():
    return list(_REPS)


def is_canonical(rep) -> bool:
    return rep.CANONICAL


def rep_traits(rep) -> RepTraits:
    """
    Look up the traits of a representation tag.
    :param rep: The tag class.
    :return: The storage shape, number of parameters, whether the tag is canonical and the canonical tag.
    """
    assert isinstance(rep, type) and issubclass(rep, Rep) and rep is not Rep
    rows, cols = rep.SHAPE
    return RepTraits(rep.SHAPE, rows * cols, rep.CANONICAL, CanonicalRep)
