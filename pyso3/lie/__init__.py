"""
Lie group element classes.

lie_group: the abstract element interface
so3: SO(3) elements for every representation in pyso3.so3
util: coefficient functions with taylor series near the origin, hat and vee
"""
