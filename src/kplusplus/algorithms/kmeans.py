"""
K-means clustering algorithm.

K-means++ seeding followed by Lloyd refinement.
"""

from typing import Optional, Union
import torch
from torch import Tensor

from ..base.clustering_base import BaseClusteringAlgorithm
from ..base.data_structures import RefinementStrategy
from ..initialization.kmeans_plusplus import KMeansPlusPlusInit
from ..initialization.random import RandomInit
from ..initialization.from_previous import FromPreviousInit
from .refine import build_refiner


class KMeans(BaseClusteringAlgorithm):
    """K-means clustering algorithm.

    Classic K-means that partitions data into K clusters by minimizing
    within-cluster sum of squared distances.

    Parameters
    ----------
    n_clusters : int
        Number of clusters
    init : str or array-like, default='k-means++'
        Initialization method:
        - 'k-means++' : K-means++ initialization
        - 'random' : Random initialization
        - array of shape (n_clusters, n_features) : Use as initial centers
    max_iter : int, default=100
        Maximum number of iterations
    tol : float, default=1e-9
        Convergence tolerance on the per-coordinate center shift
    n_local_trials : int, default=1
        Candidates drawn per K-means++ step (1 is classic K-means++)
    verbose : int, default=0
        Verbosity level
    random_state : int or torch.Generator, optional
        Random seed for reproducibility
    device : torch.device, optional
        Device for computation (defaults to CPU)
    dtype : torch.dtype, default=torch.float64
        Floating point type used for computation

    Attributes
    ----------
    cluster_centers_ : Tensor of shape (n_clusters, n_features)
        Cluster centroids
    labels_ : Tensor of shape (n_samples,)
        Cluster assignments for training data
    inertia_ : float
        Sum of squared distances to nearest cluster center
    n_iter_ : int
        Number of iterations run
    converged_ : bool
        Whether the centers settled before max_iter
    result_ : FitResult
        Complete result of the last fit
    """

    strategy = RefinementStrategy.MEAN

    def __init__(self,
                 n_clusters: int,
                 init: Union[str, Tensor] = 'k-means++',
                 max_iter: int = 100,
                 tol: float = 1e-9,
                 n_local_trials: int = 1,
                 verbose: int = 0,
                 random_state: Optional[Union[int, torch.Generator]] = None,
                 device: Optional[torch.device] = None,
                 dtype: torch.dtype = torch.float64):
        """Initialize K-means algorithm."""
        super().__init__(
            n_clusters=n_clusters,
            init=init,
            max_iter=max_iter,
            tol=tol,
            verbose=verbose,
            random_state=random_state,
            device=device,
            dtype=dtype
        )
        self.n_local_trials = n_local_trials

    def _create_initialization(self):
        if not isinstance(self.init, str):
            return FromPreviousInit(self.init)
        if self.init == 'random':
            return RandomInit()
        return KMeansPlusPlusInit(n_local_trials=self.n_local_trials)

    def _create_components(self) -> None:
        """Create K-means specific components."""
        self.initialization_strategy = self._create_initialization()
        self.refiner = build_refiner(
            self.strategy,
            max_iter=self.max_iter,
            tol=self.tol,
            metric='euclidean',
            verbose=self.verbose
        )

    def get_params(self, deep: bool = True):
        params = super().get_params(deep)
        params['n_local_trials'] = self.n_local_trials
        return params
