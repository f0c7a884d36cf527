"""Base classes and interfaces for kplusplus clustering algorithms."""

from .errors import (
    ClusteringError,
    InvalidKError,
    EmptyDatasetError,
    DimensionMismatchError,
    EmptyCenterSetError,
    ConvergenceWarning
)

from .interfaces import (
    AssignmentStrategy,
    ParameterUpdater,
    DistanceMetric,
    InitializationStrategy,
    ConvergenceCriterion,
    ClusteringObjective
)

from .data_structures import (
    Assignment,
    FitResult,
    RefinementStrategy
)

from .clustering_base import BaseClusteringAlgorithm, Refiner

__all__ = [
    # Errors
    'ClusteringError',
    'InvalidKError',
    'EmptyDatasetError',
    'DimensionMismatchError',
    'EmptyCenterSetError',
    'ConvergenceWarning',

    # Interfaces
    'AssignmentStrategy',
    'ParameterUpdater',
    'DistanceMetric',
    'InitializationStrategy',
    'ConvergenceCriterion',
    'ClusteringObjective',

    # Data structures
    'Assignment',
    'FitResult',
    'RefinementStrategy',

    # Base algorithm
    'BaseClusteringAlgorithm',
    'Refiner'
]
