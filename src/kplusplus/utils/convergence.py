"""
Convergence criteria for the refinement loop.
"""

from typing import Dict, Any
import torch

from ..base.interfaces import ConvergenceCriterion


class CenterShift(ConvergenceCriterion):
    """Convergence when no center coordinate moved by more than ``tol``.

    The check compares each update's centers with the centers the update
    started from, so the first call can already report convergence (e.g. when
    refinement restarts from a fixed point).
    """

    def __init__(self, tol: float = 1e-9):
        """
        Args:
            tol: Maximum absolute per-coordinate change still counted as stable
        """
        super().__init__()
        self.tol = tol

    def check(self, current_state: Dict[str, Any]) -> bool:
        """Check if centers have stabilized.

        Expects ``previous_centers`` and ``centers`` (both (k, d)) in the state.
        """
        previous = current_state['previous_centers']
        current = current_state['centers']

        shift = torch.max(torch.abs(current - previous)).item()

        self.history.append({
            'iteration': current_state.get('iteration', len(self.history)),
            'max_shift': shift
        })

        return shift <= self.tol
