"""
Core data structures for the kplusplus clustering algorithms.

This module provides the containers passed between the refiners and their
callers: the hard assignment wrapper, the refinement strategy tag and the
immutable fit result.
"""

from enum import Enum
from typing import Optional, Sequence
import torch
from torch import Tensor


class RefinementStrategy(Enum):
    """How a refiner recomputes a cluster representative.

    - MEAN: coordinate-wise arithmetic mean (Lloyd's algorithm)
    - MEDIAN: coordinate-wise median
    - MEDOID: the cluster member minimising total L1 distance to the others
    """
    MEAN = 'mean'
    MEDIAN = 'median'
    MEDOID = 'medoid'

    @classmethod
    def parse(cls, value) -> 'RefinementStrategy':
        """Accept either a member or its string value."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            valid = [member.value for member in cls]
            raise ValueError(f"Unknown refinement strategy {value!r}, "
                             f"expected one of {valid}") from None


class Assignment:
    """Hard assignment of every point to exactly one cluster.

    Wraps an (n,) long tensor of labels in [0, n_clusters) and offers the
    per-cluster views the update step needs.
    """

    def __init__(self, labels: Tensor, n_clusters: int):
        """
        Args:
            labels: (n,) tensor of cluster indices
            n_clusters: Number of clusters K
        """
        self.n_clusters = n_clusters
        self._validate_and_store(labels)

    def _validate_and_store(self, labels: Tensor):
        assert labels.dim() == 1
        if labels.numel() > 0:
            assert labels.max() < self.n_clusters
            assert labels.min() >= 0
        self._labels = labels.long()

    @property
    def labels(self) -> Tensor:
        return self._labels

    @property
    def n_points(self) -> int:
        """Number of data points."""
        return self._labels.shape[0]

    def cluster_indices(self, cluster_idx: int) -> Tensor:
        """Get indices of points assigned to a specific cluster."""
        return torch.where(self._labels == cluster_idx)[0]

    def counts(self) -> Tensor:
        """Count points per cluster."""
        return torch.bincount(self._labels, minlength=self.n_clusters)


class FitResult:
    """Final state of one seed + refine run.

    Immutable once produced: attributes cannot be reassigned, and ``centers``
    and ``labels`` hand out copies so the stored snapshot cannot be edited
    in place.

    Attributes:
        centers: (k, d) final cluster representatives
        labels: (n,) label of every point against ``centers``
        n_clusters: Realized k
        dispersion: Within-cluster sum of squared distances (MEAN) or sum of
            absolute deviations (MEDIAN, MEDOID)
        converged: False when the iteration limit was reached first
        n_iter: Number of update steps performed
        strategy: Which refinement produced the result
        history: Dispersion after each update step
        seed_indices: Dataset rows chosen as initial centers, if seeded
    """

    __slots__ = ('_centers', '_labels', 'n_clusters', 'dispersion', 'converged',
                 'n_iter', 'strategy', 'history', 'seed_indices')

    def __init__(self,
                 centers: Tensor,
                 labels: Tensor,
                 n_clusters: int,
                 dispersion: float,
                 converged: bool,
                 n_iter: int,
                 strategy: RefinementStrategy = RefinementStrategy.MEAN,
                 history: Sequence[float] = (),
                 seed_indices: Optional[Sequence[int]] = None):
        assert centers.shape[0] == n_clusters
        values = {
            '_centers': centers.detach().clone(),
            '_labels': labels.detach().clone().long(),
            'n_clusters': int(n_clusters),
            'dispersion': float(dispersion),
            'converged': bool(converged),
            'n_iter': int(n_iter),
            'strategy': strategy,
            'history': tuple(float(h) for h in history),
            'seed_indices': tuple(int(i) for i in seed_indices) if seed_indices is not None else None,
        }
        for name, value in values.items():
            object.__setattr__(self, name, value)

    def __setattr__(self, name, value):
        raise AttributeError(f"FitResult is immutable, cannot set {name!r}")

    def __delattr__(self, name):
        raise AttributeError(f"FitResult is immutable, cannot delete {name!r}")

    @property
    def centers(self) -> Tensor:
        return self._centers.clone()

    @property
    def labels(self) -> Tensor:
        return self._labels.clone()

    @property
    def assignment(self) -> Assignment:
        return Assignment(self._labels, self.n_clusters)

    @property
    def dimension(self) -> int:
        return self._centers.shape[1]

    def cluster_sizes(self) -> Tensor:
        """Number of points in each cluster."""
        return self.assignment.counts()

    def __repr__(self) -> str:
        return (f"FitResult(n_clusters={self.n_clusters}, strategy={self.strategy.value}, "
                f"dispersion={self.dispersion:.6g}, converged={self.converged}, "
                f"n_iter={self.n_iter})")
