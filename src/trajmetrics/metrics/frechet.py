"""
Discrete Frechet distance on a pruned distance matrix.

The distance matrix is only filled around a 'core diagonal' coupling, following
Devogele, T., Esnault, M., Etienne, L., & Lardy, F. (2017). Optimized Discrete
Frechet Distance between trajectories. The largest distance on that diagonal
bounds the Frechet distance from above, so cells at least that far apart are
never needed by an optimal coupling and are left unset.
"""
import numpy as np
from numba import njit

from trajmetrics.commons.errors import InternalInconsistencyError
from trajmetrics.metrics.point import euclidean
from trajmetrics.utils.typing import sanitize_trajectory_pair, SUPPORTED_FLOATS

# marks cells of the distance and accumulated matrices that were not computed.
# distances are never negative so a computed zero stays distinguishable
UNSET = -1.0

# API functions

def frechet_distance(a, b):
    """
    Discrete Frechet distance between two trajectories.

    Args:
        a, b: array-like of shape (n, d) and (m, d).

    Returns:
        The distance as a scalar of the working float dtype. Symmetric in a and b.

    Raises:
        EmptyInputError: either trajectory has no points.
        DimensionMismatchError: the points of a and b differ in dimension.
        InternalInconsistencyError: the pruned matrix lost its corridor (a defect).
    """
    a, b = sanitize_trajectory_pair(a, b)
    dist, _ = _build_distance_matrix(a, b)
    accum = _build_frechet_matrix(dist)
    return dist.dtype.type(accum[-1, -1])

def compute_distance_matrix(a, b):
    """
    Pruned distance matrix between two trajectories.

    Rows index the longer trajectory, so the matrix has shape (n, m) with n >= m
    regardless of argument order. Cells that were not computed hold `UNSET`.

    Returns:
        (dist, diag_max) where diag_max is the largest distance on the core diagonal.
    """
    a, b = sanitize_trajectory_pair(a, b)
    return _build_distance_matrix(a, b)

def compute_frechet_matrix(dist):
    """
    Accumulated coupling matrix of a pruned distance matrix.
    accum[i, j] is the smallest achievable largest distance over monotone
    couplings from (0, 0) to (i, j) that only visit computed cells.
    """
    dist = np.asarray(dist)
    if dist.ndim != 2 or dist.size == 0:
        raise ValueError(f"'dist' expected a non-empty 2d matrix. Got shape: {dist.shape}")
    if dist.dtype.type not in SUPPORTED_FLOATS:
        raise TypeError(f"'dist' expected a float32 or float64 matrix. Got dtype: {dist.dtype}")
    if dist[0, 0] < 0 or dist[-1, -1] < 0:
        raise InternalInconsistencyError("first and last cell of the distance matrix must be computed")
    return _build_frechet_matrix(dist)

def core_diagonal(n, m):
    """
    Column matched to each of the n rows by the core diagonal of an (n, m)
    matrix, n >= m >= 1. Spreads the n rows as evenly as possible over the m
    columns: the first n % m columns take n // m + 1 rows, the rest n // m.
    """
    if n < m or m < 1:
        raise ValueError(f"core diagonal requires n >= m >= 1. Got: n={n}, m={m}")
    return _core_diagonal(n, m)

# private helper functions

def _build_distance_matrix(a, b):
    if a.shape[0] < b.shape[0]:
        a, b = b, a
    n, m = a.shape[0], b.shape[0]
    diag_col = _core_diagonal(n, m)
    dist = np.full((n, m), UNSET, dtype=a.dtype)
    diag_max = _fill_diagonal(a, b, diag_col, dist)
    _extend_upper_band(a, b, diag_col, diag_max, dist)
    _extend_lower_band(a, b, diag_col, diag_max, dist)
    return dist, a.dtype.type(diag_max)

def _build_frechet_matrix(dist):
    accum = np.full(dist.shape, UNSET, dtype=dist.dtype)
    row = _accumulate(dist, accum)
    if row >= 0:
        raise InternalInconsistencyError(f"row {row} of the pruned distance matrix is not connected "\
                                         "to the corridor from the first cell")
    return accum

@njit
def _core_diagonal(n, m):
    q = n // m
    r = n % m
    diag_col = np.empty(n, dtype=np.int64)
    for i in range(n):
        if i < r * (q + 1):
            diag_col[i] = i // (q + 1)
        else:
            diag_col[i] = (i - r) // q
    return diag_col

@njit
def _fill_diagonal(a, b, diag_col, dist):
    """stores every diagonal distance and returns the largest"""
    diag_max = 0.0
    for i in range(a.shape[0]):
        d = euclidean(a[i], b[diag_col[i]])
        dist[i, diag_col[i]] = d
        if d > diag_max:
            diag_max = d
    return diag_max

@njit
def _extend_upper_band(a, b, diag_col, diag_max, dist):
    """
    Fills cells right of the diagonal, row by row.

    A cell is probed only if a monotone step enters it from a computed cell:
    its left neighbour, or the cell above or above-left. It is kept only if its
    distance is below `diag_max`. A row stops once the current cell cannot be
    entered and lies past the reach of the previous row.
    """
    n, m = dist.shape
    prev_last = -1
    for i in range(n):
        last = diag_col[i]
        for j in range(diag_col[i] + 1, m):
            enterable = dist[i, j - 1] >= 0.0
            if i > 0 and not enterable:
                enterable = dist[i - 1, j - 1] >= 0.0 or dist[i - 1, j] >= 0.0
            if not enterable:
                if j > prev_last + 1:
                    break
                continue
            d = euclidean(a[i], b[j])
            if d < diag_max:
                dist[i, j] = d
                last = j
        prev_last = last

@njit
def _extend_lower_band(a, b, diag_col, diag_max, dist):
    """Mirror of `_extend_upper_band`: fills cells below the diagonal, column by column."""
    n, m = dist.shape
    diag_row = np.empty(m, dtype=np.int64)
    for i in range(n):
        diag_row[diag_col[i]] = i  # last diagonal row of each column
    prev_last = -1
    for j in range(m):
        last = diag_row[j]
        for i in range(diag_row[j] + 1, n):
            enterable = dist[i - 1, j] >= 0.0
            if j > 0 and not enterable:
                enterable = dist[i - 1, j - 1] >= 0.0 or dist[i, j - 1] >= 0.0
            if not enterable:
                if i > prev_last + 1:
                    break
                continue
            d = euclidean(a[i], b[j])
            if d < diag_max:
                dist[i, j] = d
                last = i
        prev_last = last

@njit
def _accumulate(dist, accum):
    """
    Min-max dynamic programme over the computed cells of `dist`, written to `accum`.
    Returns -1 on success, otherwise the first row that breaks the corridor.
    """
    n, m = dist.shape
    accum[0, 0] = dist[0, 0]
    j_min = 0
    for i in range(n):
        # a computed cell left of the previous row's first one has no predecessor
        for j in range(j_min):
            if dist[i, j] >= 0.0:
                return i
        while j_min < m and dist[i, j_min] < 0.0:
            j_min += 1
        if j_min == m:
            return i
        for j in range(j_min, m):
            d = dist[i, j]
            if d < 0.0 or (i == 0 and j == 0):
                continue
            best = np.inf
            if i > 0 and j > 0 and accum[i - 1, j - 1] >= 0.0:
                best = accum[i - 1, j - 1]
            if i > 0 and accum[i - 1, j] >= 0.0 and accum[i - 1, j] < best:
                best = accum[i - 1, j]
            if j > 0 and accum[i, j - 1] >= 0.0 and accum[i, j - 1] < best:
                best = accum[i, j - 1]
            if best == np.inf:
                return i
            accum[i, j] = best if best > d else d
    return -1
