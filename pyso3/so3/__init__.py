"""
This package contains a set of representations for SO(3). The 3D rotation Lie Group.

dcm: 9 parameters, no singularities, the canonical representation
euler: 3 parameters, singularity at pitch = +/- pi/2
mrp: 3 parameters, singularity at rotation of 2*pi, but can be avoided using shadow set
quat: 4 parameters, no singularities
rotvec: 3 parameters, the Lie algebra coordinates

Importing the package registers every converter with the conversion engine.
"""
from . import rep, convert, dcm, quat, rotvec, mrp, euler  # noqa: F401
