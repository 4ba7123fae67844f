import numpy as np
from numba import njit

from trajmetrics.metrics.point import squared_euclidean
from trajmetrics.utils.typing import sanitize_trajectory_pair, sanitize_rng

# API functions

def hausdorff_distance(a, b, rng=None):
    """
    Symmetric Hausdorff distance between two trajectories.

    Points are visited in random order so that the early break in the inner 
    loop triggers as soon as possible. The result does not depend on the order; 
    only the amount of work does. Sorted or adversarial inputs degrade towards 
    the full n*m double loop.

    Args:
        a, b: array-like of shape (n, d) and (m, d).
        rng: numpy Generator, integer seed or None.

    Returns:
        The distance as a scalar of the working float dtype.

    Raises:
        EmptyInputError: either trajectory has no points.
        DimensionMismatchError: the points of a and b differ in dimension.
    """
    a, b = sanitize_trajectory_pair(a, b)
    order_a, order_b = _draw_orders(a.shape[0], b.shape[0], sanitize_rng(rng))
    c_max = _directed_pass(a, b, order_a, order_b, 0.0)
    # the reverse pass starts from the bound of the forward pass
    c_max = _directed_pass(b, a, order_b, order_a, c_max)
    return a.dtype.type(np.sqrt(c_max))

def directed_hausdorff_distance(a, b, rng=None):
    """
    Directed Hausdorff distance h(a, b): the largest distance from a point of 
    `a` to its nearest neighbour in `b`. Not symmetric.
    """
    a, b = sanitize_trajectory_pair(a, b)
    order_a, order_b = _draw_orders(a.shape[0], b.shape[0], sanitize_rng(rng))
    c_max = _directed_pass(a, b, order_a, order_b, 0.0)
    return a.dtype.type(np.sqrt(c_max))

# private helper functions

def _draw_orders(n, m, rng):
    """independent random visiting orders for both trajectories"""
    return rng.permutation(n), rng.permutation(m)

@njit
def _directed_pass(a, b, order_a, order_b, c_max):
    """
    Raises `c_max` (a squared distance) to the directed Hausdorff distance 
    h(a, b)**2 if that is larger.
    A point of `a` with any neighbour in `b` closer than `c_max` cannot raise 
    the bound, so its inner loop is abandoned at that neighbour.
    """
    for ia in order_a:
        c_min = np.inf
        broken = False
        for ib in order_b:
            d = squared_euclidean(a[ia], b[ib])
            if d < c_max:
                broken = True
                break
            if d < c_min:
                c_min = d
        if not broken and np.isfinite(c_min) and c_min >= c_max:
            c_max = c_min
    return c_max
