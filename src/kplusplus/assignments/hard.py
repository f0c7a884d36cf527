"""
Hard assignment strategy for clustering algorithms.

Assigns each point to its nearest cluster based on the distance metric.
"""

from typing import Union
import torch
from torch import Tensor

from ..base.interfaces import AssignmentStrategy, DistanceMetric
from ..base.errors import EmptyCenterSetError
from ..distances import get_metric


class HardAssignment(AssignmentStrategy):
    """Hard (discrete) assignment to nearest cluster.

    Each point is assigned to exactly one cluster based on minimum distance.
    Ties go to the lowest center index. Shared by the Lloyd and medoid
    refiners.
    """

    def __init__(self, metric: Union[str, DistanceMetric] = 'euclidean'):
        """
        Args:
            metric: Dissimilarity used to pick the nearest center, fixed per fit
        """
        super().__init__()
        self.metric = get_metric(metric)

    def compute_assignments(self, points: Tensor, centers: Tensor,
                            **kwargs) -> Tensor:
        """Assign each point to nearest cluster.

        Args:
            points: (n, d) data points
            centers: (K, d) cluster representatives
            **kwargs: Ignored for basic hard assignment

        Returns:
            (n,) tensor of cluster indices
        """
        if centers.dim() != 2 or centers.shape[0] == 0:
            raise EmptyCenterSetError("Cannot assign points to an empty center set")

        # (n, K); argmin returns the first minimal index on ties
        distances = self.metric.pairwise(points, centers)
        return torch.argmin(distances, dim=1)
