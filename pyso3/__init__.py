"""
Representation agnostic SO(3) rotations built on casadi.
"""
from .so3.rep import (  # noqa: F401
    CanonicalRep,
    EulerRep,
    MrpRep,
    QuaternionRep,
    RotationMatrixRep,
    RotationVectorRep,
)
from .so3.convert import convert, convert_from_canonical, convert_to_canonical, register  # noqa: F401
from .lie.so3 import SO3Base, Dcm, Quat, RotVec, Mrp, Euler, element_type  # noqa: F401

__version__ = "0.1.0"
