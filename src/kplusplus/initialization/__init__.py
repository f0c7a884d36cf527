"""Initialization strategies for clustering algorithms."""

from .random import RandomInit
from .kmeans_plusplus import KMeansPlusPlusInit, seed
from .from_previous import FromPreviousInit

__all__ = [
    'RandomInit',
    'KMeansPlusPlusInit',
    'FromPreviousInit',
    'seed'
]
