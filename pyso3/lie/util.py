import casadi as ca

EPS = 1e-3  # switch to taylor series below this magnitude
EPS_C4 = 0.1

x = ca.SX.sym("x")

# sin(x)/x
C1 = ca.Function(
    "C1",
    [x],
    [ca.if_else(ca.fabs(x) < EPS, 1 - x**2 / 6 + x**4 / 120, ca.sin(x) / x)],
)

# (1 - cos(x))/x^2
C2 = ca.Function(
    "C2",
    [x],
    [
        ca.if_else(
            ca.fabs(x) < EPS,
            0.5 - x**2 / 24 + x**4 / 720,
            (1 - ca.cos(x)) / x**2,
        )
    ],
)

# (1 - x sin(x) / (2 (1 - cos(x))))/x^2, used by the inverse right jacobian
# the closed form cancels badly, so the series is used up to EPS_C4
C4 = ca.Function(
    "C4",
    [x],
    [
        ca.if_else(
            ca.fabs(x) < EPS_C4,
            1 / 12 + x**2 / 720 + x**4 / 30240 + x**6 / 1209600,
            (1 - x * ca.sin(x) / (2 * (1 - ca.cos(x)))) / x**2,
        )
    ],
)

# delete temp variable used to create functions
del x


def hat(v):
    """
    Take Lie algebra components and build the skew symmetric Lie algebra element.
    :param v: 3 vector
    :return: 3x3 skew symmetric matrix, so that hat(v) @ u = cross(v, u)
    """
    assert v.shape == (3, 1)
    return ca.vertcat(
        ca.horzcat(0, -v[2], v[1]),
        ca.horzcat(v[2], 0, -v[0]),
        ca.horzcat(-v[1], v[0], 0),
    )


def vee(X):
    """
    Take a Lie algebra element and extract its components. X is assumed skew symmetric, only
    the entries below and above the diagonal used here are read.
    :param X: 3x3 matrix
    :return: 3 vector
    """
    assert X.shape == (3, 3)
    return ca.vertcat(X[2, 1], X[0, 2], X[1, 0])
