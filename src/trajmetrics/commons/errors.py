class TrajectoryError(Exception):
    """Base class for errors raised by trajmetrics"""


class EmptyInputError(TrajectoryError, ValueError):
    """A trajectory passed to a distance function has no points"""


class DimensionMismatchError(TrajectoryError, ValueError):
    """The points of the two trajectories do not share a dimension"""


class InternalInconsistencyError(TrajectoryError, RuntimeError):
    """
    The pruned distance matrix does not form a connected corridor from the 
    first to the last cell. This indicates a defect rather than bad input.
    """
