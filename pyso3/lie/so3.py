"""
SO(3) group elements, independent of how the rotation is stored.

SO3Base implements the group operations once for every representation. A concrete class picks a
representation tag and supplies four raw data functions (identity, product, inverse, kinematics);
everything that involves a second representation (assignment, products and comparisons across
representations, exp, log) goes through the conversion engine in pyso3.so3.convert.

The raw data is a casadi DM (numeric) or SX (symbolic). Formulas keep the type, so the same
element classes can be used to build expression graphs for code generation. Comparisons need
numeric data.
"""
import abc

import casadi as ca
import numpy as np
from scipy.spatial.transform import Rotation

from pyso3.so3 import dcm, quat, rotvec, mrp, euler
from pyso3.so3.convert import convert, convert_from_canonical, convert_to_canonical
from pyso3.so3.rep import (
    CanonicalRep,
    EulerRep,
    MrpRep,
    QuaternionRep,
    RotationMatrixRep,
    RotationVectorRep,
    rep_traits,
)
from .lie_group import LieGroup
from . import util

DEFAULT_TOL = 1e-6
IDENTITY_TOL = 1e-12

_ELEMENT_TYPES = {}


def element_type(rep=CanonicalRep):
    """
    The element class storing rotations with the given representation.
    :param rep: A representation tag, defaults to the canonical one.
    :return: The SO3Base subclass registered for the tag.
    """
    try:
        return _ELEMENT_TYPES[rep]
    except KeyError:
        raise KeyError("no element type registered for {:s}".format(rep.__name__))


def _as_expr(data):
    # copies, elements never share raw data
    if isinstance(data, (ca.DM, ca.SX)):
        return type(data)(data)
    return ca.DM(data)


def _numeric(data):
    if isinstance(data, ca.DM):
        return data.full()
    return ca.evalf(data).full()


def _random_quat(rng):
    x, y, z, w = Rotation.random(None, np.random.default_rng(rng)).as_quat()
    return ca.DM([float(w), float(x), float(y), float(z)])


class SO3Base(LieGroup):

    rep = None
    algebra_params = 3

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if "rep" not in cls.__dict__:
            return
        traits = rep_traits(cls.rep)
        cls.group_shape = traits.shape
        cls.group_params = traits.params
        # resolved once per class, never from the data
        cls._canonical = cls._canonical_self if traits.is_canonical else cls._canonical_converted
        _ELEMENT_TYPES[cls.rep] = cls

    def __init__(self, data=None):
        """
        :param data: None for zero raw data (not a valid rotation for every representation), raw data
            of this representation (list, numpy array, DM or SX), or any SO(3) element, which is copied
            or converted.
        """
        if data is None:
            data = ca.DM.zeros(*self.group_shape)
        elif isinstance(data, SO3Base):
            data = _as_expr(convert(data._data, data.rep, self.rep))
        else:
            data = _as_expr(data)
        self.assert_size_group_shape(data)
        self._data = data

    # raw data operations supplied by each representation

    @staticmethod
    @abc.abstractmethod
    def _identity(expr):
        ...

    @staticmethod
    @abc.abstractmethod
    def _product(a, b):
        ...

    @staticmethod
    @abc.abstractmethod
    def _inv(a):
        ...

    @staticmethod
    @abc.abstractmethod
    def _kinematics(a, w):
        ...

    def __repr__(self):
        return "{:s}({:s})".format(type(self).__name__, str(self._data))

    @property
    def expr(self):
        """The casadi matrix type of the raw data, DM or SX."""
        return type(self._data)

    # raw data access

    @property
    def rep_data(self):
        return self._data

    def get_rep_data(self):
        return self._data

    def set_rep_data(self, data):
        """
        Replace the raw data. The data is not checked to be a valid rotation.
        """
        data = _as_expr(data)
        self.assert_size_group_shape(data)
        self._data = data

    def assign(self, other: 'SO3Base') -> 'SO3Base':
        """
        Set this element to the rotation of another element, of any representation.
        :param other: The element to copy.
        :return: self
        """
        self._data = _as_expr(convert(other._data, other.rep, self.rep))
        return self

    # group operations

    def __mul__(self, other):
        """
        Group product, the rotation other followed by self, so that
        (a * b).to_rotation_matrix() = a.to_rotation_matrix() @ b.to_rotation_matrix().
        The result has the representation of self.
        """
        if not isinstance(other, SO3Base):
            return NotImplemented
        res = type(self)(self)
        res *= other
        return res

    def __imul__(self, other):
        if not isinstance(other, SO3Base):
            return NotImplemented
        self._data = self._product(self._data, convert(other._data, other.rep, self.rep))
        return self

    def invert(self):
        self._data = self._inv(self._data)

    def inv(self) -> 'SO3Base':
        return type(self)(self._inv(self._data))

    def set_identity(self):
        self._data = self._identity(self.expr)

    def is_identity(self, tol=IDENTITY_TOL) -> bool:
        R = _numeric(self.to_rotation_matrix())
        return bool(np.max(np.abs(R - np.eye(3))) <= tol)

    @classmethod
    def identity(cls, expr=ca.DM) -> 'SO3Base':
        return cls(cls._identity(expr))

    def set_random(self, rng=None):
        """
        Set to a rotation drawn uniformly from SO(3).
        :param rng: None, a seed or a numpy Generator.
        """
        data = convert(_random_quat(rng), QuaternionRep, self.rep)
        self._data = _as_expr(data) if self.expr is ca.DM else ca.SX(data)

    @classmethod
    def random(cls, rng=None, expr=ca.DM) -> 'SO3Base':
        res = cls.identity(expr)
        res.set_random(rng)
        return res

    # comparison

    def __eq__(self, other):
        """
        Exact equality. The raw data is compared for the same representation, otherwise the
        rotation matrices are compared.
        """
        if not isinstance(other, SO3Base):
            return NotImplemented
        if other.rep is self.rep:
            return bool(np.array_equal(_numeric(self._data), _numeric(other._data)))
        return bool(np.array_equal(_numeric(self.to_rotation_matrix()), _numeric(other.to_rotation_matrix())))

    def is_approx(self, other: 'SO3Base', tol=DEFAULT_TOL) -> bool:
        """
        Equality up to tol, independent of the representations involved: the largest absolute
        difference between the two rotation matrices must not exceed tol. q and -q, or an MRP and
        its shadow, are approximately equal.
        """
        Ra = _numeric(self.to_rotation_matrix())
        Rb = _numeric(other.to_rotation_matrix())
        return bool(np.max(np.abs(Ra - Rb)) <= tol)

    # lie algebra

    @classmethod
    def exp(cls, v) -> 'SO3Base':
        """
        The exponential map from the Lie algebra element components to the Lie group.
        :param v: The Lie algebra, represented by a rotation vector.
        :return: The Lie group element, in the representation of cls.
        """
        v = _as_expr(v)
        cls.assert_size_algebra_params(v)
        return cls(convert(v, RotationVectorRep, cls.rep))

    def log(self):
        """
        The inverse exponential map form the Lie group to the Lie algebra element components.
        :return: The Lie algebra, represented by a rotation vector.
        """
        return _as_expr(convert(self._data, self.rep, RotationVectorRep))

    @staticmethod
    def hat(v):
        return util.hat(_as_expr(v))

    wedge = hat

    @staticmethod
    def vee(X):
        return util.vee(_as_expr(X))

    @staticmethod
    def ad(v):
        return util.hat(_as_expr(v))

    def Ad(self):
        """The adjoint of SO(3) acting on so(3) components, the rotation matrix itself."""
        return self.to_rotation_matrix()

    def kinematics(self, w):
        """
        The kinematic equation relating the time derivative of the raw data to the angular velocity.
        :param w: The angular velocity in the body frame.
        :return: The time derivative of the raw data.
        """
        w = _as_expr(w)
        self.assert_size_algebra_params(w)
        return self._kinematics(self._data, w)

    def rotate(self, v):
        v = _as_expr(v)
        assert v.shape == (3, 1)
        return ca.mtimes(self.to_rotation_matrix(), v)

    # representation conversions

    def to_rotation_matrix(self):
        return _as_expr(convert_to_canonical(self._data, self.rep))

    def from_rotation_matrix(self, R):
        R = _as_expr(R)
        assert R.shape == (3, 3)
        self._data = _as_expr(convert_from_canonical(R, self.rep))

    def coordinates(self, rep):
        """
        The raw data of this rotation in another representation.
        :param rep: The target representation tag.
        """
        return _as_expr(convert(self._data, self.rep, rep))

    def canonical(self):
        """
        This rotation in the canonical representation: self if this class is canonical,
        otherwise a new element.
        """
        return self._canonical()

    @classmethod
    def is_canonical(cls) -> bool:
        return rep_traits(cls.rep).is_canonical

    def _canonical_self(self):
        return self

    def _canonical_converted(self):
        return element_type(CanonicalRep)(self)


class Dcm(SO3Base):
    rep = RotationMatrixRep
    _identity = staticmethod(dcm.identity)
    _product = staticmethod(dcm.product)
    _inv = staticmethod(dcm.inv)
    _kinematics = staticmethod(dcm.kinematics)


class Quat(SO3Base):
    rep = QuaternionRep
    _identity = staticmethod(quat.identity)
    _product = staticmethod(quat.product)
    _inv = staticmethod(quat.inv)
    _kinematics = staticmethod(quat.kinematics)


class RotVec(SO3Base):
    rep = RotationVectorRep
    _identity = staticmethod(rotvec.identity)
    _product = staticmethod(rotvec.product)
    _inv = staticmethod(rotvec.inv)
    _kinematics = staticmethod(rotvec.kinematics)


class Mrp(SO3Base):
    rep = MrpRep
    _identity = staticmethod(mrp.identity)
    _product = staticmethod(mrp.product)
    _inv = staticmethod(mrp.inv)
    _kinematics = staticmethod(mrp.kinematics)

    def shadow(self) -> 'Mrp':
        """
        The same rotation on the shadow set, with magnitude >= 1.
        """
        return Mrp(mrp.shadow(self._data))


class Euler(SO3Base):
    rep = EulerRep
    _identity = staticmethod(euler.identity)
    _product = staticmethod(euler.product)
    _inv = staticmethod(euler.inv)
    _kinematics = staticmethod(euler.kinematics)
