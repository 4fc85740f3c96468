"""
Conversion between SO(3) representations.

Each representation registers two converters against the canonical
representation (the rotation matrix), and optionally direct converters to any
other representation. A pair without a direct converter is routed through the
canonical representation, so k representations need only 2k converters.
"""
import functools
import logging

from .rep import Rep, CanonicalRep

_LOGGER: logging.Logger = logging.getLogger(__name__)

_CONVERTERS = {}


def register(from_rep, to_rep):
    """
    Decorator registering a converter from one representation's raw data to another's.
    :param from_rep: The source tag.
    :param to_rep: The target tag.
    :return: The decorator, which returns the function unchanged.
    """
    assert issubclass(from_rep, Rep) and issubclass(to_rep, Rep)
    assert from_rep is not to_rep

    def decorator(f):
        _CONVERTERS[(from_rep, to_rep)] = f
        route.cache_clear()
        _LOGGER.debug("registered converter %s -> %s: %s", from_rep.__name__, to_rep.__name__, f.__qualname__)
        return f

    return decorator


def has_converter(from_rep, to_rep) -> bool:
    return (from_rep, to_rep) in _CONVERTERS


def _identity(data):
    return data


def _hub_converter(from_rep, to_rep):
    try:
        return _CONVERTERS[(from_rep, to_rep)]
    except KeyError:
        raise KeyError("no converter registered from {:s} to {:s}".format(from_rep.__name__, to_rep.__name__))


@functools.lru_cache(maxsize=None)
def route(from_rep, to_rep):
    """
    Resolve the function converting raw data from one representation to another.
    :param from_rep: The source tag.
    :param to_rep: The target tag.
    :return: A function of the raw data.
    """
    if from_rep is to_rep:
        return _identity
    if (from_rep, to_rep) in _CONVERTERS:
        _LOGGER.debug("route %s -> %s: direct", from_rep.__name__, to_rep.__name__)
        return _CONVERTERS[(from_rep, to_rep)]
    to_canonical = _identity if from_rep is CanonicalRep else _hub_converter(from_rep, CanonicalRep)
    from_canonical = _identity if to_rep is CanonicalRep else _hub_converter(CanonicalRep, to_rep)
    _LOGGER.debug("route %s -> %s: through %s", from_rep.__name__, to_rep.__name__, CanonicalRep.__name__)

    def two_hop(data):
        return from_canonical(to_canonical(data))

    return two_hop


def convert(data, from_rep, to_rep):
    """
    Convert raw data between representations. When both tags are the same the input is returned as is.
    :param data: Raw data in the source representation.
    :param from_rep: The source tag.
    :param to_rep: The target tag.
    :return: Raw data in the target representation.
    """
    return route(from_rep, to_rep)(data)


def convert_to_canonical(data, from_rep):
    return convert(data, from_rep, CanonicalRep)


def convert_from_canonical(data, to_rep):
    return convert(data, CanonicalRep, to_rep)
