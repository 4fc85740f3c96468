#!/usr/bin/env python
"""Representation agnostic SO(3) rotations for Casadi

This is a library of 3D rotation group elements that share one interface
for group algebra, exp/log maps and conversion between representations
(rotation matrix, quaternion, rotation vector, MRPs, Euler angles).
"""

from setuptools import setup, find_packages
import sys

if sys.version_info < (3, 7):
    raise SystemExit("requires  Python >= 3.7")

DOCLINES = __doc__.split("\n")

CLASSIFIERS = """\
Development Status :: 3 - Alpha
Intended Audience :: Science/Research
Intended Audience :: Developers
License :: OSI Approved :: BSD License
Programming Language :: Python
Programming Language :: Python :: 3
Topic :: Software Development
Topic :: Scientific/Engineering :: Mathematics
Topic :: Scientific/Engineering :: Physics
Operating System :: Microsoft :: Windows
Operating System :: POSIX
Operating System :: Unix
Operating System :: MacOS
"""

# pylint: disable=invalid-name

package_name = "pyso3"

setup(
    name=package_name,
    description=DOCLINES[0],
    long_description="\n".join(DOCLINES[2:]),
    license="BSD 3-Clause",
    classifiers=[_f for _f in CLASSIFIERS.split("\n") if _f],
    platforms=["Windows", "Linux", "Solaris", "Mac OS-X", "Unix"],
    python_requires=">=3.7",
    install_requires=[
        "scipy>=1.6",
        "numpy",
        "casadi>=3.5.5",
    ],
    extras_require={"test": ["pytest"]},
    packages=find_packages(include=["pyso3", "pyso3.*"]),
    version="0.1.0",
    zip_safe=True,
)
