"""
Distance kernels and clustering dispersion metrics.

The dispersion functions here are the statistics reported on a
:class:`~kplusplus.base.data_structures.FitResult`: within-cluster sum of
squares for mean-based clustering and within-cluster sum of absolute
deviations for the median/medoid variants.
"""

from typing import Optional
import torch
from torch import Tensor


METRICS = ('euclidean', 'manhattan')


def pairwise_distances(X: Tensor, Y: Optional[Tensor] = None,
                       metric: str = 'euclidean',
                       squared: bool = False) -> Tensor:
    """Compute pairwise distances between points.

    Differences are formed explicitly rather than through the
    ||x||² + ||y||² - 2<x,y> expansion, so coincident points get exactly 0.

    Args:
        X: (n, d) first set of points
        Y: (m, d) second set of points (if None, uses X)
        metric: 'euclidean' or 'manhattan'
        squared: Return squared Euclidean distances (ignored for manhattan)

    Returns:
        (n, m) distance matrix
    """
    if Y is None:
        Y = X

    diff = X.unsqueeze(1) - Y.unsqueeze(0)  # (n, m, d)

    if metric == 'euclidean':
        distances = torch.sum(diff * diff, dim=2)
        return distances if squared else torch.sqrt(distances)

    elif metric == 'manhattan':
        return torch.sum(torch.abs(diff), dim=2)

    else:
        raise ValueError(f"Unknown metric: {metric}, expected one of {list(METRICS)}")


def inertia(X: Tensor, labels: Tensor, centers: Tensor) -> float:
    """Compute sum of squared distances to assigned centers (inertia).

    Args:
        X: (n, d) data points
        labels: (n,) cluster labels
        centers: (k, d) cluster centers

    Returns:
        Total inertia (lower is better)
    """
    diff = X - centers[labels]
    return float(torch.sum(diff * diff).item())


def absolute_deviation(X: Tensor, labels: Tensor, centers: Tensor) -> float:
    """Sum of L1 distances from every point to its assigned center."""
    return float(torch.sum(torch.abs(X - centers[labels])).item())


def cluster_sizes(labels: Tensor, n_clusters: int) -> Tensor:
    """Number of points carrying each label, including empty clusters."""
    return torch.bincount(labels.long(), minlength=n_clusters)
