"""
Median and medoid update strategies.

Both minimise absolute rather than squared deviation, which keeps a cluster's
representative from being dragged toward outliers. The coordinate-wise median
is the default; the strict medoid is available when the representative has to
be an actual data point.
"""

import torch
from torch import Tensor

from ..base.interfaces import ParameterUpdater
from ..utils.metrics import pairwise_distances


class MedianUpdater(ParameterUpdater):
    """Updates a representative to the coordinate-wise median.

    For an even number of points the median of a coordinate is the midpoint
    of the two middle values. Costs O(m log m) per cluster.
    """

    def update(self, points: Tensor, current: Tensor, **kwargs) -> Tensor:
        if len(points) == 0:
            return current
        return torch.quantile(points, 0.5, dim=0, interpolation='linear')


class MedoidUpdater(ParameterUpdater):
    """Updates a representative to the cluster member with the smallest total
    L1 distance to the other members.

    Ties go to the member that comes first in dataset order. Costs O(m²) per
    cluster.
    """

    def update(self, points: Tensor, current: Tensor, **kwargs) -> Tensor:
        if len(points) == 0:
            return current
        costs = pairwise_distances(points, metric='manhattan').sum(dim=1)
        return points[torch.argmin(costs)].clone()
