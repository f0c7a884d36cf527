"""
Lloyd and medoid refinement from a given set of initial centers.

Both refiners share the hard nearest-center assignment; a
:class:`RefinementStrategy` picks the update step and dispersion statistic:

==========  ======================  ==============================
strategy    representative          dispersion
==========  ======================  ==============================
MEAN        coordinate-wise mean    sum of squared distances
MEDIAN      coordinate-wise median  sum of absolute deviations
MEDOID      best cluster member     sum of absolute deviations
==========  ======================  ==============================
"""

from typing import Union
import torch

from ..base.clustering_base import Refiner
from ..base.data_structures import FitResult, RefinementStrategy
from ..base.interfaces import DistanceMetric
from ..assignments.hard import HardAssignment
from ..updates import MeanUpdater, MedianUpdater, MedoidUpdater
from ..utils.convergence import CenterShift
from ..utils.validation import (
    validate_data, validate_centers, check_n_clusters, check_iteration_params
)
from .objectives import SumOfSquaresObjective, AbsoluteDeviationObjective


_UPDATERS = {
    RefinementStrategy.MEAN: MeanUpdater,
    RefinementStrategy.MEDIAN: MedianUpdater,
    RefinementStrategy.MEDOID: MedoidUpdater,
}


def build_refiner(strategy: Union[str, RefinementStrategy] = RefinementStrategy.MEAN,
                  max_iter: int = 100,
                  tol: float = 1e-9,
                  metric: Union[str, DistanceMetric] = 'euclidean',
                  verbose: int = 0) -> Refiner:
    """Assemble a :class:`Refiner` for the given strategy."""
    strategy = RefinementStrategy.parse(strategy)
    check_iteration_params(max_iter, tol)

    if strategy is RefinementStrategy.MEAN:
        objective = SumOfSquaresObjective()
    else:
        objective = AbsoluteDeviationObjective()

    return Refiner(
        assignment_strategy=HardAssignment(metric),
        update_strategy=_UPDATERS[strategy](),
        objective=objective,
        convergence_criterion=CenterShift(tol=tol),
        max_iter=max_iter,
        strategy=strategy,
        verbose=verbose
    )


def refine(data, initial_centers,
           max_iterations: int = 100,
           strategy: Union[str, RefinementStrategy] = RefinementStrategy.MEAN,
           tol: float = 1e-9,
           metric: Union[str, DistanceMetric] = 'euclidean',
           verbose: int = 0,
           dtype: torch.dtype = torch.float64) -> FitResult:
    """Refine ``initial_centers`` on ``data`` until convergence or the iteration limit.

    Args:
        data: (n, d) dataset
        initial_centers: (k, d) starting centers, 1 <= k <= n
        max_iterations: Maximum number of update steps
        strategy: MEAN (Lloyd), MEDIAN or MEDOID
        tol: Largest per-coordinate center shift still counted as converged
        metric: Dissimilarity for nearest-center assignment
        verbose: Verbosity level
        dtype: Floating point type used for computation

    Returns:
        FitResult; ``converged`` is False when the limit was hit first
    """
    X = validate_data(data, dtype=dtype)
    centers = validate_centers(initial_centers, X.shape[1], dtype=dtype, device=X.device)
    check_n_clusters(centers.shape[0], X.shape[0])

    refiner = build_refiner(strategy, max_iter=max_iterations, tol=tol,
                            metric=metric, verbose=verbose)
    return refiner.run(X, centers)
