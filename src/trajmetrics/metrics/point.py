import numpy as np
from numba import njit

# API functions

@njit
def squared_euclidean(p, q):
    """
    Squared Euclidean distance between two points of equal dimension.
    Used wherever distances are only compared against a threshold.
    """
    acc = 0.0
    for k in range(p.shape[0]):
        diff = p[k] - q[k]
        acc += diff * diff
    return acc

@njit
def euclidean(p, q):
    """Euclidean distance"""
    return np.sqrt(squared_euclidean(p, q))
