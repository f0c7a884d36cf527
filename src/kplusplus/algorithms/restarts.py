"""
Independent restarts of the seed + refine pipeline.

K-means++ seeding is randomized, so a single run can land in a poor local
optimum. ``fit_best_of`` runs several independent pipelines, each with its own
generator, and keeps the result with the lowest dispersion. Runs share only
the read-only dataset, so they can execute concurrently on a thread pool
(torch releases the GIL inside its kernels).
"""

from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Union
import torch
from torch import Tensor

from ..base.data_structures import FitResult, RefinementStrategy
from ..initialization.kmeans_plusplus import KMeansPlusPlusInit
from ..initialization.random import RandomInit
from ..distances import get_metric
from ..utils.validation import (
    validate_clustering_input, check_iteration_params, check_random_state
)
from .refine import build_refiner


def _restart_seeds(random_state, n_init: int) -> List[int]:
    """Derive one integer seed per restart."""
    if isinstance(random_state, torch.Generator):
        draws = torch.randint(0, 2 ** 62, (n_init,), generator=random_state)
        return [int(s) for s in draws.tolist()]
    if random_state is None:
        draws = torch.randint(0, 2 ** 62, (n_init,), generator=check_random_state(None))
        return [int(s) for s in draws.tolist()]
    return [int(random_state) + i for i in range(n_init)]


def fit_best_of(X,
                n_clusters: int,
                n_init: int = 10,
                strategy: Union[str, RefinementStrategy] = RefinementStrategy.MEAN,
                random_state: Optional[Union[int, torch.Generator]] = None,
                n_jobs: int = 1,
                max_iter: int = 100,
                tol: float = 1e-9,
                metric: str = 'euclidean',
                init: str = 'k-means++',
                n_local_trials: int = 1,
                verbose: int = 0,
                dtype: torch.dtype = torch.float64) -> FitResult:
    """Run ``n_init`` independent seed + refine pipelines and keep the best.

    Args:
        X: (n, d) dataset
        n_clusters: Number of clusters
        n_init: Number of independent restarts
        strategy: MEAN, MEDIAN or MEDOID refinement
        random_state: Int seed (restart i uses seed + i), Generator, or None
        n_jobs: Worker threads; 1 runs the restarts in order
        max_iter: Maximum iterations per restart
        tol: Convergence tolerance per restart
        metric: Assignment dissimilarity
        init: 'k-means++' or 'random'
        n_local_trials: Candidates per K-means++ step
        verbose: Verbosity level
        dtype: Floating point type used for computation

    Returns:
        The FitResult with the lowest dispersion (earliest restart on ties)
    """
    if n_init < 1:
        raise ValueError(f"n_init must be >= 1, got {n_init}")
    if n_jobs < 1:
        raise ValueError(f"n_jobs must be >= 1, got {n_jobs}")
    if init not in ('k-means++', 'random'):
        raise ValueError(f"init must be 'k-means++' or 'random', got {init!r}")
    check_iteration_params(max_iter, tol)
    strategy = RefinementStrategy.parse(strategy)
    get_metric(metric)
    if init == 'random':
        initializer = RandomInit()
    else:
        initializer = KMeansPlusPlusInit(n_local_trials=n_local_trials)

    validated = validate_clustering_input(X, n_clusters, random_state=0, dtype=dtype)
    data: Tensor = validated['X']
    n_clusters = validated['n_clusters']
    seeds = _restart_seeds(random_state, n_init)

    def run_one(seed_value: int) -> FitResult:
        generator = check_random_state(seed_value)
        indices = initializer.select(data, n_clusters, generator)
        refiner = build_refiner(strategy, max_iter=max_iter, tol=tol,
                                metric=metric, verbose=verbose)
        return refiner.run(data, data[indices].clone(), seed_indices=indices.tolist())

    if n_jobs == 1:
        results = [run_one(s) for s in seeds]
    else:
        with ThreadPoolExecutor(max_workers=n_jobs) as pool:
            results = list(pool.map(run_one, seeds))

    best = min(range(len(results)), key=lambda i: results[i].dispersion)
    if verbose:
        print(f"Best of {n_init} restarts: #{best} with dispersion "
              f"{results[best].dispersion:.6f}")
    return results[best]
