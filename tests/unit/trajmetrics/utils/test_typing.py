import pytest
import numpy as np

from trajmetrics.utils import typing
from trajmetrics.commons.errors import EmptyInputError, DimensionMismatchError

integers = [0, -1, np.int16(-2.0), np.int32(3.0), np.int64(4), np.uint32(6_000)]
booleans = [True, False, np.True_, np.False_]


# tests
@pytest.mark.parametrize("obj", integers)
def test_is_integer(obj):
    assert typing.is_integer(obj)


@pytest.mark.parametrize("obj", booleans)
def test_booleans_are_not_integers(obj):
    assert typing.is_boolean(obj)
    assert not typing.is_integer(obj)


@pytest.mark.parametrize("obj", [[], (), np.array([]), [[0.0]], range(3)])
def test_is_array_like(obj):
    assert typing.is_array_like(obj)


@pytest.mark.parametrize("obj", ["abc", {"a": 1}, 1.0, None])
def test_is_not_array_like(obj):
    assert not typing.is_array_like(obj)


def test_sanitize_list():
    arr = typing.sanitize_trajectory([[0, 1], [2, 3]], "a")
    assert arr.shape == (2, 2)
    assert arr.dtype == typing.FLOAT, f"integer input should be cast to {typing.FLOAT}, got {arr.dtype}"


@pytest.mark.parametrize("dtype", [np.float32, np.float64])
def test_sanitize_keeps_float_precision(dtype):
    arr = typing.sanitize_trajectory(np.zeros((3, 2), dtype), "a")
    assert arr.dtype == dtype


def test_sanitize_unsupported_float_warns():
    with pytest.warns(RuntimeWarning):
        arr = typing.sanitize_trajectory(np.zeros((3, 2), np.float16), "a")
    assert arr.dtype == typing.FLOAT


def test_sanitize_one_dimensional():
    arr = typing.sanitize_trajectory([0.0, 1.0, 2.0], "a")
    assert arr.shape == (3, 1), "1d input should be read as points of dimension 1"


def test_sanitize_does_not_modify_input():
    obj = np.array([[1, 2], [3, 4]])
    typing.sanitize_trajectory(obj, "a")
    assert obj.dtype.kind == "i" and (obj == [[1, 2], [3, 4]]).all()


@pytest.mark.parametrize("obj", [[], (), np.empty((0, 2))])
def test_sanitize_empty(obj):
    with pytest.raises(EmptyInputError, match="'traj'"):
        typing.sanitize_trajectory(obj, "traj")


@pytest.mark.parametrize("obj", ["points", {0: [0.0]}, 3.0, [["a", "b"]], [[True, False]]])
def test_sanitize_bad_type(obj):
    with pytest.raises(TypeError):
        typing.sanitize_trajectory(obj, "a")


@pytest.mark.parametrize("obj", [
    [[0.0, 1.0], [2.0]],            # ragged
    np.zeros((2, 2, 2)),            # too many axes
    np.zeros((2, 0)),               # dimension 0
    [[0.0, np.nan]],                # non-finite
    [[np.inf, 0.0]],
])
def test_sanitize_bad_value(obj):
    with pytest.raises(ValueError):
        typing.sanitize_trajectory(obj, "a")


def test_sanitize_pair_promotes():
    a, b = typing.sanitize_trajectory_pair(np.zeros((2, 2), np.float32), np.zeros((3, 2), np.float64))
    assert a.dtype == b.dtype == np.float64


def test_sanitize_pair_keeps_float32():
    a, b = typing.sanitize_trajectory_pair(np.zeros((2, 2), np.float32), np.ones((3, 2), np.float32))
    assert a.dtype == b.dtype == np.float32


def test_sanitize_pair_dimension_mismatch():
    with pytest.raises(DimensionMismatchError, match="Got: 2 and 3"):
        typing.sanitize_trajectory_pair([[0.0, 0.0]], [[0.0, 0.0, 0.0]])


def test_sanitize_rng(rng):
    assert typing.sanitize_rng(rng) is rng
    assert isinstance(typing.sanitize_rng(None), np.random.Generator)
    seeded = typing.sanitize_rng(np.int64(5))
    assert seeded.integers(1000) == np.random.default_rng(5).integers(1000)


@pytest.mark.parametrize("obj", [1.5, "5", True, np.random.RandomState(0)])
def test_sanitize_rng_bad(obj):
    with pytest.raises(TypeError, match="'rng' expected type one of"):
        typing.sanitize_rng(obj)


def test_sanitize_type():
    assert typing.sanitize_type("frechet", str, "metric")
    assert typing.sanitize_type(3, ("integer", "none"), "n")
    with pytest.raises(TypeError):
        typing.sanitize_type(3.0, ("integer", "none"), "n")
    with pytest.raises(NotImplementedError):
        typing.is_dtype(3, "complex")
