from trajmetrics.utils.typing import sanitize_type
from trajmetrics.metrics.hausdorff import hausdorff_distance, directed_hausdorff_distance
from trajmetrics.metrics.frechet import frechet_distance

METRICS = {
    "hausdorff": hausdorff_distance,
    "directed_hausdorff": directed_hausdorff_distance,
    "frechet": frechet_distance,
}


def trajectory_distance(a, b, metric: str = "frechet", **kwargs):
    """
    Distance between two trajectories under the named metric.
    Keyword arguments are passed on to the metric, e.g. `rng` for the Hausdorff metrics.
    """
    sanitize_type(metric, str, "metric")
    key = metric.lower()
    if key not in METRICS:
        raise ValueError(f"'metric' should be one of {tuple(METRICS.keys())}. Received: '{metric}'")
    return METRICS[key](a, b, **kwargs)
