"""
Within-cluster dispersion objectives.
"""

import torch
from torch import Tensor

from ..base.interfaces import ClusteringObjective


class SumOfSquaresObjective(ClusteringObjective):
    """K-means objective: sum of squared distances to centroids."""

    def compute(self, points: Tensor, centers: Tensor,
                assignments: Tensor) -> Tensor:
        """Compute within-cluster sum of squares."""
        diff = points - centers[assignments]
        return torch.sum(diff * diff)


class AbsoluteDeviationObjective(ClusteringObjective):
    """K-medoids objective: sum of absolute (L1) deviations from representatives."""

    def compute(self, points: Tensor, centers: Tensor,
                assignments: Tensor) -> Tensor:
        return torch.sum(torch.abs(points - centers[assignments]))
