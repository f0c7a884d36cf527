"""Utility functions for kplusplus algorithms."""

from .convergence import CenterShift

from .metrics import (
    pairwise_distances,
    inertia,
    absolute_deviation,
    cluster_sizes
)

from .validation import (
    validate_data,
    check_n_clusters,
    check_random_state,
    check_iteration_params,
    validate_centers,
    validate_init_params,
    validate_clustering_input
)

__all__ = [
    # Convergence criteria
    'CenterShift',

    # Metrics
    'pairwise_distances',
    'inertia',
    'absolute_deviation',
    'cluster_sizes',

    # Validation
    'validate_data',
    'check_n_clusters',
    'check_random_state',
    'check_iteration_params',
    'validate_centers',
    'validate_init_params',
    'validate_clustering_input'
]
