"""
Base classes for clustering algorithms in kplusplus.

Provides the alternating assign/update loop shared by the Lloyd and medoid
refiners, and the estimator skeleton the public algorithms build on.
"""

from abc import abstractmethod
from typing import Optional, Dict, Any, Sequence, Union
import torch
from torch import Tensor
import time
import warnings

from .interfaces import (
    AssignmentStrategy, ParameterUpdater, ConvergenceCriterion, ClusteringObjective
)
from .data_structures import Assignment, FitResult, RefinementStrategy
from .errors import ConvergenceWarning, DimensionMismatchError
from ..utils.validation import (
    validate_data, validate_clustering_input, validate_init_params, check_iteration_params
)


class Refiner:
    """Alternating optimization between assignment and update steps.

    States: Assigning -> Updating -> (Converged | IterationLimitReached), or
    back to Assigning. Reaching the iteration limit is a normal outcome,
    reported through ``FitResult.converged``.
    """

    def __init__(self,
                 assignment_strategy: AssignmentStrategy,
                 update_strategy: ParameterUpdater,
                 objective: ClusteringObjective,
                 convergence_criterion: ConvergenceCriterion,
                 max_iter: int = 100,
                 strategy: RefinementStrategy = RefinementStrategy.MEAN,
                 verbose: int = 0):
        """
        Args:
            assignment_strategy: Nearest-center assignment (Assigning phase)
            update_strategy: Representative update (Updating phase)
            objective: Dispersion statistic reported per iteration
            convergence_criterion: Decides when centers have settled
            max_iter: Maximum number of update steps
            strategy: Tag recorded on the result
            verbose: Verbosity level (0=silent, 1=progress, 2=detailed)
        """
        self.assignment_strategy = assignment_strategy
        self.update_strategy = update_strategy
        self.objective = objective
        self.convergence_criterion = convergence_criterion
        self.max_iter = max_iter
        self.strategy = strategy
        self.verbose = verbose

    def run(self, X: Tensor, initial_centers: Tensor,
            seed_indices: Optional[Sequence[int]] = None) -> FitResult:
        """Refine ``initial_centers`` on validated data ``X``.

        Args:
            X: (n, d) data tensor; read, never written
            initial_centers: (k, d) starting representatives; copied
            seed_indices: Dataset rows the centers came from, if any

        Returns:
            FitResult whose labels are computed against the final centers
        """
        n_clusters = initial_centers.shape[0]
        centers = initial_centers.clone()

        self.convergence_criterion.reset()
        history = []
        converged = False
        n_iter = 0
        start_time = time.time()

        for iteration in range(self.max_iter):
            iter_start_time = time.time()

            # Assignment step
            labels = self.assignment_strategy.compute_assignments(X, centers)
            assignment = Assignment(labels, n_clusters)

            # Update step; an empty cluster keeps its representative
            new_centers = centers.clone()
            for k in range(n_clusters):
                cluster_indices = assignment.cluster_indices(k)
                if len(cluster_indices) > 0:
                    new_centers[k] = self.update_strategy.update(X[cluster_indices], centers[k])

            objective_value = float(self.objective.compute(X, new_centers, labels))
            history.append(objective_value)
            n_iter = iteration + 1

            converged = self.convergence_criterion.check({
                'iteration': iteration,
                'objective': objective_value,
                'assignments': labels,
                'previous_centers': centers,
                'centers': new_centers
            })
            centers = new_centers

            iter_time = time.time() - iter_start_time
            if self.verbose >= 2 or (self.verbose >= 1 and iteration % 10 == 0):
                print(f"Iteration {iteration:3d}: dispersion = {objective_value:.6f} "
                      f"({iter_time:.3f}s)")

            if converged:
                if self.verbose:
                    print(f"Converged at iteration {iteration}")
                break

        # Labels must describe the centers being returned
        labels = self.assignment_strategy.compute_assignments(X, centers)
        dispersion = float(self.objective.compute(X, centers, labels))

        if self.verbose:
            if not converged:
                warnings.warn(f"Failed to converge after {self.max_iter} iterations",
                              ConvergenceWarning)
            print(f"Total refinement time: {time.time() - start_time:.3f}s")

        return FitResult(
            centers=centers,
            labels=labels,
            n_clusters=n_clusters,
            dispersion=dispersion,
            converged=converged,
            n_iter=n_iter,
            strategy=self.strategy,
            history=tuple(history),
            seed_indices=tuple(int(i) for i in seed_indices) if seed_indices is not None else None
        )


class BaseClusteringAlgorithm:
    """Estimator skeleton: validation, seeding and refinement.

    Subclasses need to implement ``_create_components`` and set:
    - self.refiner (a configured :class:`Refiner`)
    - self.initialization_strategy (an :class:`InitializationStrategy`)
    """

    def __init__(self,
                 n_clusters: int,
                 init: Union[str, Tensor] = 'k-means++',
                 max_iter: int = 100,
                 tol: float = 1e-9,
                 verbose: int = 0,
                 random_state: Optional[Union[int, torch.Generator]] = None,
                 device: Optional[torch.device] = None,
                 dtype: torch.dtype = torch.float64):
        """
        Args:
            n_clusters: Number of clusters K
            init: 'k-means++', 'random', or an explicit (K, d) array of centers
            max_iter: Maximum iterations
            tol: Largest per-coordinate center shift still counted as converged
            verbose: Verbosity level (0=silent, 1=progress, 2=detailed)
            random_state: Seed or torch.Generator; global RNG state is never touched
            device: Torch device (None for CPU)
            dtype: Floating point type used for all computation
        """
        self.n_clusters = n_clusters
        self.init = init
        self.max_iter = max_iter
        self.tol = tol
        self.verbose = verbose
        self.random_state = random_state
        self.device = torch.device('cpu') if device is None else torch.device(device)
        self.dtype = dtype

        self.refiner: Optional[Refiner] = None
        self.initialization_strategy = None

        self.fitted_ = False
        self.result_: Optional[FitResult] = None

    @abstractmethod
    def _create_components(self) -> None:
        """Create algorithm-specific components.

        Subclasses must implement this to instantiate:
        - self.refiner
        - self.initialization_strategy
        """
        pass

    def fit(self, X, y=None) -> 'BaseClusteringAlgorithm':
        """Fit the clustering model.

        Args:
            X: (n, d) data (tensor, ndarray, or nested sequence)
            y: Ignored (for sklearn compatibility)

        Returns:
            Self
        """
        check_iteration_params(self.max_iter, self.tol)
        validated = validate_clustering_input(
            X, self.n_clusters, random_state=self.random_state,
            dtype=self.dtype, device=self.device
        )
        X = validated['X']
        n_clusters = validated['n_clusters']
        validate_init_params(self.init, n_clusters, validated['n_features'],
                             dtype=self.dtype, device=self.device)

        self._create_components()

        if self.verbose:
            print(f"Initializing {n_clusters} clusters...")

        generator = validated['generator']
        seed_indices = self.initialization_strategy.select(X, n_clusters, generator)
        if seed_indices is not None:
            initial_centers = X[seed_indices.to(X.device)].clone()
        else:
            initial_centers = self.initialization_strategy.initialize(X, n_clusters, generator)

        self.result_ = self.refiner.run(X, initial_centers, seed_indices=seed_indices)
        self.fitted_ = True
        return self

    def fit_predict(self, X, y=None) -> Tensor:
        """Fit and return cluster assignments.

        Args:
            X: (n, d) data
            y: Ignored

        Returns:
            (n,) tensor of cluster assignments
        """
        self.fit(X)
        return self.labels_

    def predict(self, X) -> Tensor:
        """Predict cluster assignments for new data.

        Args:
            X: (n, d) data

        Returns:
            (n,) tensor of cluster assignments
        """
        X = self._validate_new_data(X)
        return self.refiner.assignment_strategy.compute_assignments(X, self.result_.centers)

    def score(self, X, y=None) -> float:
        """Opposite of the dispersion of X around the fitted centers."""
        X = self._validate_new_data(X)
        labels = self.refiner.assignment_strategy.compute_assignments(X, self.result_.centers)
        return -float(self.refiner.objective.compute(X, self.result_.centers, labels))

    def _validate_new_data(self, X) -> Tensor:
        self._check_fitted()
        X = validate_data(X, dtype=self.dtype, device=self.device)
        if X.shape[1] != self.result_.dimension:
            raise DimensionMismatchError(f"Expected dimension {self.result_.dimension}, "
                                         f"got {X.shape[1]}")
        return X

    def _check_fitted(self) -> None:
        if not self.fitted_:
            raise RuntimeError("Model must be fitted first")

    @property
    def cluster_centers_(self) -> Tensor:
        """Get cluster centers/representatives."""
        self._check_fitted()
        return self.result_.centers

    @property
    def labels_(self) -> Tensor:
        """Cluster assignments of the training data."""
        self._check_fitted()
        return self.result_.labels

    @property
    def inertia_(self) -> float:
        """Get final dispersion value."""
        self._check_fitted()
        return self.result_.dispersion

    @property
    def n_iter_(self) -> int:
        self._check_fitted()
        return self.result_.n_iter

    @property
    def converged_(self) -> bool:
        self._check_fitted()
        return self.result_.converged

    def get_params(self, deep: bool = True) -> Dict[str, Any]:
        """Get parameters (sklearn compatibility)."""
        return {
            'n_clusters': self.n_clusters,
            'init': self.init,
            'max_iter': self.max_iter,
            'tol': self.tol,
            'verbose': self.verbose,
            'random_state': self.random_state,
            'device': self.device,
            'dtype': self.dtype
        }

    def set_params(self, **params) -> 'BaseClusteringAlgorithm':
        """Set parameters (sklearn compatibility)."""
        valid = self.get_params()
        for key, value in params.items():
            if key not in valid:
                raise ValueError(f"Invalid parameter {key!r} for {type(self).__name__}")
            setattr(self, key, value)
        return self
