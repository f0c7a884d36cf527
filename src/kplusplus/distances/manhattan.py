"""
Manhattan (L1) distance metric.

Sum of absolute coordinate differences; the dissimilarity the median and
medoid refiners minimise.
"""

import torch
from torch import Tensor

from ..base.interfaces import DistanceMetric
from ..utils.metrics import pairwise_distances


class ManhattanDistance(DistanceMetric):
    """Computes sum_i |x_i - μ_i|."""

    name = 'manhattan'

    def compute(self, points: Tensor, center: Tensor, **kwargs) -> Tensor:
        return torch.sum(torch.abs(points - center.unsqueeze(0)), dim=1)

    def pairwise(self, points: Tensor, centers: Tensor) -> Tensor:
        return pairwise_distances(points, centers, metric='manhattan')
