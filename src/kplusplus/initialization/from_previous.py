"""
Initialization from previous solution or custom centers.

Useful for warm starts or when you have good initial guesses.
"""

from typing import Optional, Union
import torch
from torch import Tensor

from ..base.interfaces import InitializationStrategy
from ..base.data_structures import FitResult
from ..utils.validation import validate_centers


class FromPreviousInit(InitializationStrategy):
    """Initialize from previous cluster centers or custom starting points.

    Accepts either:
    - An array of shape (n_clusters, dimension) with initial centers
    - A FitResult from a previous run
    """

    def __init__(self, initial_state: Union[Tensor, FitResult, list]):
        """
        Args:
            initial_state: Previous solution to use for initialization
        """
        self.initial_state = initial_state

    def select(self, points: Tensor, n_clusters: int,
               generator: Optional[torch.Generator] = None) -> None:
        """Explicit centers are not dataset rows."""
        return None

    def initialize(self, points: Tensor, n_clusters: int,
                   generator: Optional[torch.Generator] = None,
                   **kwargs) -> Tensor:
        """Initialize from previous state.

        Args:
            points: (n, d) data points (used for validation)
            n_clusters: Expected number of clusters
            generator: Unused

        Returns:
            (n_clusters, d) tensor of centers
        """
        if isinstance(self.initial_state, FitResult):
            centers = self.initial_state.centers
        else:
            centers = self.initial_state

        return validate_centers(centers, points.shape[1], n_clusters,
                                dtype=points.dtype, device=points.device).clone()
