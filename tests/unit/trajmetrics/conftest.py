import pytest
import numpy as np

# fixtures
@pytest.fixture
def rng():
    yield np.random.default_rng()


@pytest.fixture
def diagonal_line():
    """Three points along the line y = x"""
    yield np.array([[0.0, 0.0], [1.0, 1.0], [2.0, 2.0]])


@pytest.fixture
def parallel_lines():
    """Two sampled parallel lines 0.1 apart, 50 points each"""
    x = np.arange(50, dtype=float)
    a = np.column_stack((x, np.zeros(50)))
    b = np.column_stack((x, np.full(50, 0.1)))
    yield a, b
