"""
Input validation utilities.

Every fit entry point runs these checks before doing any work, so invalid
requests fail fast with the typed errors from :mod:`kplusplus.base.errors`.
"""

from numbers import Number
from typing import Optional, Union, Sequence
import torch
from torch import Tensor
import numpy as np

from ..base.errors import (
    InvalidKError, EmptyDatasetError, DimensionMismatchError
)


ArrayLike = Union[Tensor, np.ndarray, Sequence]


def _is_scalar(value) -> bool:
    if isinstance(value, (Tensor, np.ndarray)):
        return value.ndim == 0
    return isinstance(value, Number)


def _check_rows(X: Sequence) -> None:
    """Reject ragged nested sequences before tensor conversion."""
    if len(X) == 0:
        raise EmptyDatasetError("Dataset contains no points")
    if all(_is_scalar(row) for row in X):
        return
    lengths = set()
    for i, row in enumerate(X):
        if _is_scalar(row):
            raise DimensionMismatchError(f"Point {i} is a scalar but other points are sequences")
        lengths.add(len(row))
    if len(lengths) > 1:
        raise DimensionMismatchError(f"Points have differing dimensionality: {sorted(lengths)}")


def validate_data(X: ArrayLike,
                  dtype: torch.dtype = torch.float64,
                  device: Optional[torch.device] = None,
                  ensure_finite: bool = True) -> Tensor:
    """Validate and convert input data to a 2D tensor.

    1D input is treated as n points of dimension 1. The caller's object is
    never modified; a new tensor is produced whenever dtype or device change.

    Args:
        X: Input data (tensor, numpy array, or nested sequence)
        dtype: Target data type
        device: Target device
        ensure_finite: Whether to check for inf/nan

    Returns:
        Validated (n, d) tensor

    Raises:
        EmptyDatasetError: If there are no points
        DimensionMismatchError: If rows are ragged or have no coordinates
    """
    if isinstance(X, Tensor):
        X = X.to(dtype=dtype, device=device)
    elif isinstance(X, np.ndarray):
        if X.dtype == object:
            _check_rows(X.tolist())
            X = np.asarray(X.tolist())
        X = torch.from_numpy(np.ascontiguousarray(X)).to(dtype=dtype, device=device)
    elif isinstance(X, (list, tuple)):
        _check_rows(X)
        if any(isinstance(row, (Tensor, np.ndarray)) for row in X):
            # Rows given as Point tensors or arrays
            X = torch.stack([torch.as_tensor(row, dtype=dtype, device=device) for row in X])
        else:
            X = torch.tensor(X, dtype=dtype, device=device)
    else:
        raise TypeError(f"Cannot convert {type(X)} to tensor")

    if X.dim() == 1:
        X = X.unsqueeze(1)
    elif X.dim() != 2:
        raise DimensionMismatchError(f"Expected 2D array of points, got {X.dim()}D")

    n_samples, n_features = X.shape
    if n_samples == 0:
        raise EmptyDatasetError("Dataset contains no points")
    if n_features == 0:
        raise DimensionMismatchError("Points must have at least one coordinate")

    if ensure_finite:
        if torch.isnan(X).any():
            raise ValueError("Input contains NaN values")
        if torch.isinf(X).any():
            raise ValueError("Input contains infinite values")

    return X


def check_n_clusters(n_clusters: int, n_samples: int) -> None:
    """Validate number of clusters.

    Raises:
        InvalidKError: If k is not an int in [1, n_samples]
    """
    if isinstance(n_clusters, bool) or not isinstance(n_clusters, (int, np.integer)):
        raise InvalidKError(f"n_clusters must be int, got {type(n_clusters)}")

    if n_clusters <= 0:
        raise InvalidKError(f"n_clusters must be positive, got {n_clusters}")

    if n_clusters > n_samples:
        raise InvalidKError(f"n_clusters ({n_clusters}) cannot be larger than "
                            f"n_samples ({n_samples})")


def check_random_state(random_state: Optional[Union[int, torch.Generator]]) -> torch.Generator:
    """Create generator from random state.

    Args:
        random_state: Seed, generator, or None for a nondeterministic seed

    Returns:
        Generator owned by the caller's run
    """
    if random_state is None:
        generator = torch.Generator()
        generator.seed()
        return generator
    elif isinstance(random_state, torch.Generator):
        return random_state
    elif isinstance(random_state, (int, np.integer)) and not isinstance(random_state, bool):
        generator = torch.Generator()
        generator.manual_seed(int(random_state))
        return generator
    else:
        raise TypeError(f"random_state must be int or Generator, got {type(random_state)}")


def check_iteration_params(max_iter: int, tol: float) -> None:
    """Validate the refinement budget."""
    if not isinstance(max_iter, (int, np.integer)) or max_iter < 1:
        raise ValueError(f"max_iter must be a positive int, got {max_iter!r}")
    if tol < 0:
        raise ValueError(f"tol must be non-negative, got {tol}")


def validate_centers(centers: ArrayLike, n_features: int,
                     n_clusters: Optional[int] = None,
                     dtype: torch.dtype = torch.float64,
                     device: Optional[torch.device] = None) -> Tensor:
    """Validate explicit initial centers against the dataset.

    Raises:
        DimensionMismatchError: If center dimensionality differs from the data
        InvalidKError: If the number of centers differs from ``n_clusters``
    """
    if isinstance(centers, Tensor) and centers.dim() == 2 and centers.shape[0] == 0:
        raise InvalidKError("Initial centers must contain at least one center")
    if isinstance(centers, (list, tuple)) and len(centers) == 0:
        raise InvalidKError("Initial centers must contain at least one center")

    try:
        centers = validate_data(centers, dtype=dtype, device=device)
    except EmptyDatasetError:
        raise InvalidKError("Initial centers must contain at least one center") from None

    if centers.shape[1] != n_features:
        raise DimensionMismatchError(f"Centers have dimension {centers.shape[1]}, "
                                     f"but data has dimension {n_features}")
    if n_clusters is not None and centers.shape[0] != n_clusters:
        raise InvalidKError(f"Got {centers.shape[0]} initial centers, "
                            f"but n_clusters={n_clusters}")
    return centers


def validate_init_params(init: Union[str, ArrayLike],
                         n_clusters: int,
                         n_features: int,
                         dtype: torch.dtype = torch.float64,
                         device: Optional[torch.device] = None) -> Union[str, Tensor]:
    """Validate initialization parameters.

    Returns:
        The init method name, or the validated (n_clusters, n_features) centers
    """
    if isinstance(init, str):
        valid_methods = ['k-means++', 'random']
        if init not in valid_methods:
            raise ValueError(f"init must be one of {valid_methods}, got '{init}'")
        return init

    if isinstance(init, (Tensor, np.ndarray, list, tuple)):
        return validate_centers(init, n_features, n_clusters, dtype=dtype, device=device)

    raise TypeError(f"init must be str, array, or list, got {type(init)}")


def validate_clustering_input(X: ArrayLike,
                              n_clusters: int,
                              random_state: Optional[Union[int, torch.Generator]] = None,
                              dtype: torch.dtype = torch.float64,
                              device: Optional[torch.device] = None) -> dict:
    """Comprehensive validation for a clustering request.

    Returns:
        Dictionary with validated inputs
    """
    X = validate_data(X, dtype=dtype, device=device)
    n_samples, n_features = X.shape

    check_n_clusters(n_clusters, n_samples)
    generator = check_random_state(random_state)

    return {
        'X': X,
        'n_clusters': int(n_clusters),
        'n_samples': n_samples,
        'n_features': n_features,
        'generator': generator
    }
