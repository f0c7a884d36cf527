"""Distance metrics for clustering algorithms."""

from ..base.interfaces import DistanceMetric
from .euclidean import EuclideanDistance, distance, closest_center_distance
from .manhattan import ManhattanDistance


def get_metric(metric) -> DistanceMetric:
    """Resolve a metric name ('euclidean', 'manhattan') or pass an instance through."""
    if isinstance(metric, DistanceMetric):
        return metric
    if metric == 'euclidean':
        return EuclideanDistance(squared=True)
    if metric == 'manhattan':
        return ManhattanDistance()
    raise ValueError(f"Unknown metric: {metric}")


__all__ = [
    'EuclideanDistance',
    'ManhattanDistance',
    'distance',
    'closest_center_distance',
    'get_metric'
]
