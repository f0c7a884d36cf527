"""
Random initialization strategy for clustering algorithms.

Selects random points from the dataset as initial cluster centers.
"""

from typing import Optional
import torch
from torch import Tensor

from ..base.interfaces import InitializationStrategy
from ..utils.validation import check_n_clusters, check_random_state


class RandomInit(InitializationStrategy):
    """Random initialization by selecting points from the dataset.

    Selects n_clusters random points (without replacement) as initial centers.
    """

    def select(self, points: Tensor, n_clusters: int,
               generator: Optional[torch.Generator] = None) -> Tensor:
        n_points = points.shape[0]
        check_n_clusters(n_clusters, n_points)
        if generator is None:
            generator = check_random_state(None)

        return torch.randperm(n_points, generator=generator)[:n_clusters]
