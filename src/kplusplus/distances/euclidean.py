"""
Euclidean distance metric for clustering.

The metric used for K-means++ seeding and, unless a fit says otherwise, for
nearest-center assignment.
"""

import torch
from torch import Tensor

from ..base.interfaces import DistanceMetric
from ..base.errors import EmptyCenterSetError, DimensionMismatchError
from ..utils.metrics import pairwise_distances


class EuclideanDistance(DistanceMetric):
    """Squared Euclidean distance metric.

    Computes ||x - μ||² where μ is the cluster center.
    """

    name = 'euclidean'

    def __init__(self, squared: bool = True):
        """
        Args:
            squared: If True, return squared distances (default).
                    If False, return actual Euclidean distances.
        """
        self.squared = squared

    def compute(self, points: Tensor, center: Tensor, **kwargs) -> Tensor:
        """Compute Euclidean distances from points to one center.

        Args:
            points: (n, d) tensor of points
            center: (d,) cluster center

        Returns:
            (n,) tensor of distances
        """
        diff = points - center.unsqueeze(0)
        squared_distances = torch.sum(diff * diff, dim=1)

        if self.squared:
            return squared_distances
        else:
            return torch.sqrt(squared_distances)

    def pairwise(self, points: Tensor, centers: Tensor) -> Tensor:
        return pairwise_distances(points, centers, metric='euclidean', squared=self.squared)


def _as_point(x) -> Tensor:
    t = torch.as_tensor(x, dtype=torch.float64)
    return t.reshape(-1) if t.dim() == 0 else t


def distance(a, b) -> float:
    """Euclidean distance between two points."""
    a = _as_point(a)
    b = _as_point(b)
    if a.shape != b.shape:
        raise DimensionMismatchError(f"Points have dimensions {tuple(a.shape)} and {tuple(b.shape)}")
    return float(torch.sqrt(torch.sum((a - b) ** 2)).item())


def closest_center_distance(x, centers) -> float:
    """Euclidean distance from ``x`` to the nearest of ``centers``.

    Raises:
        EmptyCenterSetError: If ``centers`` holds no rows
    """
    x = _as_point(x)
    centers = torch.as_tensor(centers, dtype=torch.float64)
    if centers.numel() == 0:
        raise EmptyCenterSetError("closest_center_distance called with no centers")
    if centers.dim() == 1:
        centers = centers.unsqueeze(0)
    if centers.shape[1] != x.shape[0]:
        raise DimensionMismatchError(f"Point has dimension {x.shape[0]}, "
                                     f"centers have dimension {centers.shape[1]}")
    distances = EuclideanDistance(squared=False).compute(centers, x)
    return float(distances.min().item())
