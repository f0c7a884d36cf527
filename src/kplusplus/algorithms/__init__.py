"""Clustering algorithms."""

from .objectives import SumOfSquaresObjective, AbsoluteDeviationObjective
from .refine import refine, build_refiner
from .kmeans import KMeans
from .kmedoids import KMedoids
from .restarts import fit_best_of

__all__ = [
    'SumOfSquaresObjective',
    'AbsoluteDeviationObjective',
    'refine',
    'build_refiner',
    'KMeans',
    'KMedoids',
    'fit_best_of'
]
