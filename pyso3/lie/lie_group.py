import abc


class LieGroup(abc.ABC):
    """
    This is a generic Lie Group element class. It does NOT assume matrix
    lie groups. This is because matrix Lie groups often are not the
    most efficient way to implement group operations. For instance,
    SO3 could be represented by the Matrix Lie group of direction
    cosine matrices, but with 4 elements, the product of quaternion,
    kinematics, exponential, log etc, can be more efficiently
    implemented directly with the 4 quaternions instead of using all
    9 elements of the DCM.

    Subclasses set the class attributes:

    group_params: The number of parameters in the group, (e.g. for quaternion this would be 4,
        for DCM this would be 9)
    algebra_params: The number of parameters for the Lie algebra (e.g. for SO3 this would be 3)
    group_shape: The shape of the raw data of an element
    """

    group_params = None
    algebra_params = None
    group_shape = None

    @classmethod
    def assert_size_group_shape(cls, a):
        """
        Checks the group shape
        """
        assert a.shape == cls.group_shape, "expected shape {:s}, got {:s}".format(
            str(cls.group_shape), str(a.shape))

    @classmethod
    def assert_size_algebra_params(cls, v):
        """
        Checks the size of the algebra parameters
        """
        assert v.shape == (cls.algebra_params, 1), "expected shape {:s}, got {:s}".format(
            str((cls.algebra_params, 1)), str(v.shape))

    @classmethod
    @abc.abstractmethod
    def identity(cls):
        ...

    @abc.abstractmethod
    def __mul__(self, other):
        ...

    @abc.abstractmethod
    def inv(self):
        ...

    @classmethod
    @abc.abstractmethod
    def exp(cls, v):
        ...

    @abc.abstractmethod
    def log(self):
        ...

    @staticmethod
    @abc.abstractmethod
    def vee(X):
        ...

    @staticmethod
    @abc.abstractmethod
    def hat(v):
        ...

    @staticmethod
    @abc.abstractmethod
    def ad(v):
        ...

    @abc.abstractmethod
    def Ad(self):
        ...
