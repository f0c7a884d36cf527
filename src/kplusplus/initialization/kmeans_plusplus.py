"""
K-means++ initialization strategy.

Selects initial cluster centers using the K-means++ algorithm, which chooses
centers that are far apart to improve convergence speed and quality.
"""

from typing import Optional, Union
import torch
from torch import Tensor

from ..base.interfaces import InitializationStrategy
from ..distances.euclidean import EuclideanDistance
from ..utils.validation import check_n_clusters, check_random_state, validate_data


class KMeansPlusPlusInit(InitializationStrategy):
    """K-means++ initialization for better starting positions.

    Algorithm:
    1. Choose first center uniformly at random
    2. For each remaining center:
       - Weight each point by its squared distance to the nearest chosen center
       - Choose next center with probability proportional to that weight
         (uniformly if every weight is zero)

    Each point's nearest squared distance is kept in a running minimum that is
    only compared against the newest center, so seeding costs O(n·k) distance
    evaluations. Chosen points have weight zero from then on, which gives
    sampling without replacement while keeping dataset indices stable.
    """

    def __init__(self, n_local_trials: int = 1):
        """
        Args:
            n_local_trials: Number of candidates drawn for each center; the one
                           giving the lowest total potential is kept. 1 is
                           classic K-means++.
        """
        if n_local_trials < 1:
            raise ValueError(f"n_local_trials must be >= 1, got {n_local_trials}")
        self.n_local_trials = n_local_trials
        self._metric = EuclideanDistance(squared=True)

    def select(self, points: Tensor, n_clusters: int,
               generator: Optional[torch.Generator] = None) -> Tensor:
        """Choose the dataset rows that become initial centers.

        Args:
            points: (n, d) data points
            n_clusters: Number of clusters
            generator: Random source

        Returns:
            (n_clusters,) long tensor of row indices, in selection order
        """
        n_points = points.shape[0]
        check_n_clusters(n_clusters, n_points)
        if generator is None:
            generator = check_random_state(None)

        # Weights are scale invariant; rescaling keeps squared distances of
        # very large or very small coordinates finite and nonzero
        scale = points.abs().max()
        if scale > 0:
            points = points / scale

        first_idx = int(torch.randint(n_points, (1,), generator=generator).item())
        indices = [first_idx]

        closest_sq = self._metric.compute(points, points[first_idx])

        for _ in range(1, n_clusters):
            weights = closest_sq.detach().cpu()
            total = weights.sum().item()
            if total > 0:
                probabilities = weights / total
            else:
                # Every point sits on a chosen center
                probabilities = torch.full((n_points,), 1.0 / n_points, dtype=torch.float64)

            candidates = torch.multinomial(probabilities, self.n_local_trials,
                                           replacement=True, generator=generator)

            best_idx = None
            best_distances = None
            best_potential = float('inf')

            for idx in candidates.tolist():
                candidate_distances = torch.minimum(
                    closest_sq, self._metric.compute(points, points[idx])
                )
                if self.n_local_trials == 1:
                    best_idx, best_distances = idx, candidate_distances
                    break
                potential = candidate_distances.sum().item()
                if potential < best_potential:
                    best_potential = potential
                    best_idx, best_distances = idx, candidate_distances

            indices.append(best_idx)
            closest_sq = best_distances

        return torch.tensor(indices, dtype=torch.long)


def seed(data, k: int,
         random_state: Optional[Union[int, torch.Generator]] = None,
         n_local_trials: int = 1) -> Tensor:
    """Run K-means++ seeding on ``data`` and return the (k, d) initial centers.

    >>> centers = seed([[0.0, 0.0], [0.0, 1.0], [10.0, 0.0]], k=2, random_state=0)
    >>> centers.shape
    torch.Size([2, 2])
    """
    points = validate_data(data)
    check_n_clusters(k, points.shape[0])
    generator = check_random_state(random_state)
    return KMeansPlusPlusInit(n_local_trials=n_local_trials).initialize(points, k, generator)
