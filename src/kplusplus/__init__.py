"""
kplusplus: K-means++ seeding with Lloyd and K-medoids refinement.

This package implements:
- K-means++ seeding (distance-squared weighted sampling)
- Lloyd's K-means refinement
- K-medoids refinement (coordinate-wise median or strict medoid)
- Best-of-n independent restarts

Example usage:
    >>> import torch
    >>> from kplusplus import KMeans, fit_best_of
    >>>
    >>> X = torch.randn(1000, 10)
    >>>
    >>> # Fit K-means
    >>> kmeans = KMeans(n_clusters=5, random_state=0)
    >>> kmeans.fit(X)
    >>> labels = kmeans.labels_
    >>>
    >>> # Keep the best of 10 restarts of the median variant
    >>> result = fit_best_of(X, n_clusters=5, strategy='median', random_state=0)
    >>> result.dispersion
"""

__version__ = '0.1.0'

from .base import (
    FitResult,
    Assignment,
    RefinementStrategy,
    ClusteringError,
    InvalidKError,
    EmptyDatasetError,
    DimensionMismatchError,
    EmptyCenterSetError,
    ConvergenceWarning
)

from .distances import distance, closest_center_distance
from .initialization import seed, KMeansPlusPlusInit
from .algorithms import KMeans, KMedoids, refine, fit_best_of

__all__ = [
    # Algorithms
    'KMeans',
    'KMedoids',
    'seed',
    'refine',
    'fit_best_of',
    'KMeansPlusPlusInit',

    # Distance engine
    'distance',
    'closest_center_distance',

    # Core data structures
    'FitResult',
    'Assignment',
    'RefinementStrategy',

    # Errors
    'ClusteringError',
    'InvalidKError',
    'EmptyDatasetError',
    'DimensionMismatchError',
    'EmptyCenterSetError',
    'ConvergenceWarning',

    # Version
    '__version__'
]
