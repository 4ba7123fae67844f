import numpy as np
import numbers
import warnings

from trajmetrics.commons.types import DEFAULTS
INT, FLOAT = DEFAULTS
from trajmetrics.commons.errors import EmptyInputError, DimensionMismatchError

# float types the kernels are compiled for
SUPPORTED_FLOATS = (np.float32, np.float64)


def sanitize_trajectory(obj, name):
    """
    Reads `obj` as an (n, d) array of points.

    Float32 and float64 arrays keep their dtype, integer arrays are cast to the
    default float. A 1-d sequence is read as n points of dimension 1.
    The caller's object is never written to.
    """
    if not is_array_like(obj):
        raise TypeError(f"'{name}' expected array-like. Got: {type(obj)}")
    if len(obj) == 0:
        raise EmptyInputError(f"'{name}' must contain at least one point. Got: 0 points")
    try:
        arr = np.asarray(obj)
    except ValueError as e:
        raise ValueError(f"'{name}' could not be read as an (n, d) array of points. "\
                         f"Are the points of unequal length? ({e})") from e

    if arr.dtype.kind not in ("i", "u", "f"):
        raise TypeError(f"'{name}' expected numeric coordinates. Got dtype: {arr.dtype}")
    if arr.ndim == 1:
        arr = arr.reshape(-1, 1)
    elif arr.ndim != 2:
        raise ValueError(f"'{name}' expected an (n, d) array of points. Got shape: {arr.shape}")
    if arr.shape[1] == 0:
        raise ValueError(f"'{name}' has points of dimension 0")

    if arr.dtype.kind != "f":
        arr = arr.astype(FLOAT)
    elif arr.dtype.type not in SUPPORTED_FLOATS:
        warnings.warn(f"'{name}' has unsupported dtype {arr.dtype} and is cast to {np.dtype(FLOAT)}",
                      RuntimeWarning)
        arr = arr.astype(FLOAT)

    if not np.isfinite(arr).all():
        raise ValueError(f"'{name}' contains non-finite coordinates")
    return np.ascontiguousarray(arr)


def sanitize_trajectory_pair(a, b, names=("a", "b")):
    """
    Sanitizes two trajectories for one distance query.
    Both are returned with the same float dtype.
    """
    a = sanitize_trajectory(a, names[0])
    b = sanitize_trajectory(b, names[1])
    if a.shape[1] != b.shape[1]:
        raise DimensionMismatchError(f"'{names[0]}' and '{names[1]}' expected points of equal dimension. "\
                                     f"Got: {a.shape[1]} and {b.shape[1]}")
    dtype = np.result_type(a.dtype, b.dtype)
    return a.astype(dtype, copy=False), b.astype(dtype, copy=False)


def sanitize_rng(rng, name="rng"):
    """
    Returns a numpy Generator.
    Accepts a Generator, an integer seed or None (fresh entropy).
    """
    sanitize_type(rng, (np.random.Generator, "integer", "none"), name)
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


def sanitize_type(obj, dtype, name):
    if isinstance(dtype, (tuple, list)):
        check = max((is_dtype(obj, dt) for dt in dtype))
        if not check:
            raise TypeError(f"'{name}' expected type one of {dtype}. Got: '{type(obj)}'")
    else:
        if not is_dtype(obj, dtype):
            raise TypeError(f"{name} expected type: '{dtype}'. Got: '{type(obj)}'")
    return True


def is_dtype(obj, dtype):
    if isinstance(dtype, type):
        return isinstance(obj, dtype)
    if dtype not in func_dict.keys():
        raise NotImplementedError(f"string dtype: {dtype} not Implemented. Supported: {func_dict.keys()}")
    return func_dict[dtype](obj)


def is_none(obj):
    """
    check whether object is None
    """
    return obj is None


def is_integer(obj):
    """
    check whether object is an integer
    """
    return isinstance(obj, numbers.Integral) and not is_boolean(obj)


def is_boolean(obj):
    """
    check whether object is boolean
    """
    return isinstance(obj, (bool, np.bool_))


def is_array_like(obj):
    """
    check whether object is array-like.
    """
    if isinstance(obj, (str, dict)):
        return False
    if not hasattr(obj, "__len__"):
        return False
    if not hasattr(obj, "__iter__"):
        return False
    if not hasattr(obj, "__getitem__"):
        return False
    return True


func_dict = {
    "integer": is_integer,
    "none": is_none,
}
