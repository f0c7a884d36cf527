"""Representative update strategies for clustering algorithms."""

from .mean import MeanUpdater
from .median import MedianUpdater, MedoidUpdater

__all__ = [
    'MeanUpdater',
    'MedianUpdater',
    'MedoidUpdater'
]
