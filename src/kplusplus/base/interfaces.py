"""
Core interfaces for the kplusplus clustering components.

This module defines the abstract base classes that the seeding, assignment,
update and convergence pieces implement, so that the Lloyd and medoid
refiners can share one alternating loop.
"""

from abc import ABC, abstractmethod
from typing import Optional, Dict, Any
import torch
from torch import Tensor


class DistanceMetric(ABC):
    """Abstract base class for point-to-center dissimilarities."""

    @abstractmethod
    def compute(self, points: Tensor, center: Tensor, **kwargs) -> Tensor:
        """Compute distances from points to a single center.

        Args:
            points: (n, d) data rows
            center: (d,) tensor
            **kwargs: Unused by the built-in metrics

        Returns:
            (n,) tensor of distances
        """
        pass

    @abstractmethod
    def pairwise(self, points: Tensor, centers: Tensor) -> Tensor:
        """Compute the (n, k) distance matrix between points and centers."""
        pass


class AssignmentStrategy(ABC):
    """Maps every data row to the index of a representative."""

    @abstractmethod
    def compute_assignments(self, points: Tensor, centers: Tensor,
                            **kwargs) -> Tensor:
        """Label each point with its nearest representative.

        Args:
            points: (n, d) data rows
            centers: (k, d) tensor of current cluster representatives
            **kwargs: Unused by the built-in strategies

        Returns:
            (n,) long tensor of cluster indices
        """
        pass


class ParameterUpdater(ABC):
    """Abstract base class for cluster representative update strategies."""

    @abstractmethod
    def update(self, points: Tensor, current: Tensor, **kwargs) -> Tensor:
        """Compute a new representative from the points assigned to a cluster.

        Args:
            points: (m, d) points currently assigned to the cluster, m >= 1
            current: (d,) current representative
            **kwargs: Unused by the built-in updaters

        Returns:
            (d,) new representative
        """
        pass


class InitializationStrategy(ABC):
    """Picks the starting representatives before refinement.

    Strategies that draw centers from the dataset report the chosen rows
    through ``select``; ``initialize`` then copies those rows. Strategies
    whose centers come from elsewhere return None from ``select`` and
    override ``initialize``.
    """

    @abstractmethod
    def select(self, points: Tensor, n_clusters: int,
               generator: Optional[torch.Generator] = None) -> Optional[Tensor]:
        """Choose the dataset rows that become initial centers.

        Args:
            points: (n, d) data rows
            n_clusters: Number of representatives to pick
            generator: Random source; strategies never touch global RNG state

        Returns:
            (n_clusters,) long tensor of row indices in selection order, or
            None when the centers are not dataset rows
        """
        pass

    def initialize(self, points: Tensor, n_clusters: int,
                   generator: Optional[torch.Generator] = None,
                   **kwargs) -> Tensor:
        """Choose initial centers.

        Args:
            points: (n, d) data rows
            n_clusters: Number of representatives to pick
            generator: Random source; strategies never touch global RNG state
            **kwargs: Unused by the built-in strategies

        Returns:
            (n_clusters, d) tensor of initial centers
        """
        indices = self.select(points, n_clusters, generator)
        return points[indices.to(points.device)].clone()


class ConvergenceCriterion(ABC):
    """Decides when the alternating loop may stop."""

    def __init__(self):
        self.history = []

    @abstractmethod
    def check(self, current_state: Dict[str, Any]) -> bool:
        """Record the latest state and report whether to stop.

        Args:
            current_state: Mapping with at least 'iteration', 'centers' and 'previous_centers'

        Returns:
            True once the stopping condition holds
        """
        pass

    def reset(self):
        """Forget previous checks before a new run."""
        self.history = []


class ClusteringObjective(ABC):
    """Abstract base class for within-cluster dispersion statistics."""

    @abstractmethod
    def compute(self, points: Tensor, centers: Tensor,
                assignments: Tensor) -> Tensor:
        """Total dispersion of the points around their representatives.

        Args:
            points: (n, d) data rows
            centers: (k, d) tensor of cluster representatives
            assignments: (n,) hard cluster assignments

        Returns:
            0-dim tensor
        """
        pass
