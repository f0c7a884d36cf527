"""
Exceptions and warnings raised by kplusplus.

All argument errors derive from ``ValueError`` so that callers catching the
generic error keep working.
"""


class ClusteringError(ValueError):
    """Base class for invalid clustering requests."""


class InvalidKError(ClusteringError):
    """Requested number of clusters is outside [1, n_samples]."""


class EmptyDatasetError(ClusteringError):
    """Dataset contains no points."""


class DimensionMismatchError(ClusteringError):
    """Points (or centers) do not share one dimensionality."""


class EmptyCenterSetError(ClusteringError):
    """A nearest-center query was made against zero centers.

    Fit entry points validate k before any distance is computed, so seeing
    this outside of direct distance calls indicates a bug.
    """


class ConvergenceWarning(UserWarning):
    """Refinement stopped at the iteration limit before the centers settled."""
