"""
K-medoids clustering algorithm.

K-means++ seeding followed by refinement that minimises absolute deviation,
which keeps representatives away from outliers.
"""

from typing import Optional, Union
import torch
from torch import Tensor

from ..base.data_structures import RefinementStrategy
from .kmeans import KMeans
from .refine import build_refiner


class KMedoids(KMeans):
    """K-medoids clustering.

    Parameters
    ----------
    n_clusters : int
        Number of clusters
    method : {'median', 'medoid'}, default='median'
        - 'median' : coordinate-wise median of each cluster
        - 'medoid' : cluster member with least total L1 distance to the others
    metric : {'euclidean', 'manhattan'}, default='euclidean'
        Dissimilarity used for nearest-representative assignment
    **others
        As for :class:`KMeans`

    Attributes
    ----------
    inertia_ : float
        Within-cluster sum of absolute deviations from the representatives
    """

    def __init__(self,
                 n_clusters: int,
                 method: str = 'median',
                 metric: str = 'euclidean',
                 init: Union[str, Tensor] = 'k-means++',
                 max_iter: int = 100,
                 tol: float = 1e-9,
                 n_local_trials: int = 1,
                 verbose: int = 0,
                 random_state: Optional[Union[int, torch.Generator]] = None,
                 device: Optional[torch.device] = None,
                 dtype: torch.dtype = torch.float64):
        super().__init__(
            n_clusters=n_clusters,
            init=init,
            max_iter=max_iter,
            tol=tol,
            n_local_trials=n_local_trials,
            verbose=verbose,
            random_state=random_state,
            device=device,
            dtype=dtype
        )
        self.method = method
        self.metric = metric

    @property
    def strategy(self) -> RefinementStrategy:
        if self.method not in ('median', 'medoid'):
            raise ValueError(f"method must be 'median' or 'medoid', got {self.method!r}")
        return RefinementStrategy.parse(self.method)

    def _create_components(self) -> None:
        self.initialization_strategy = self._create_initialization()
        self.refiner = build_refiner(
            self.strategy,
            max_iter=self.max_iter,
            tol=self.tol,
            metric=self.metric,
            verbose=self.verbose
        )

    def get_params(self, deep: bool = True):
        params = super().get_params(deep)
        params['method'] = self.method
        params['metric'] = self.metric
        return params
