"""
Mean update strategy for centroid-based clustering.
"""

from torch import Tensor

from ..base.interfaces import ParameterUpdater


class MeanUpdater(ParameterUpdater):
    """Updates a cluster center to the arithmetic mean of its assigned points."""

    def update(self, points: Tensor, current: Tensor, **kwargs) -> Tensor:
        """Compute the new centroid.

        Args:
            points: (m, d) points assigned to this cluster (already filtered)
            current: (d,) current centroid, kept when no points are assigned
            **kwargs: Ignored

        Returns:
            (d,) new centroid
        """
        if len(points) == 0:
            return current
        return points.mean(dim=0)
