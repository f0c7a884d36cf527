"""
Lloyd and median refinement from fixed initial centers.

Covers totality of labels, monotone dispersion, fixed points, boundary k,
empty-cluster policy, the iteration limit, and input immutability.
"""

from __future__ import annotations

import numpy as np
import pytest
import torch

from kplusplus import refine, seed, FitResult, RefinementStrategy, InvalidKError, DimensionMismatchError
from kplusplus.updates import MeanUpdater, MedianUpdater, MedoidUpdater


LINE = torch.tensor([[0.0], [1.0], [2.0], [10.0], [11.0], [12.0]], dtype=torch.float64)


@pytest.mark.parametrize("strategy", list(RefinementStrategy))
def test_every_point_gets_exactly_one_label(blobs, strategy):
    centers = seed(blobs, 4, random_state=0)
    result = refine(blobs, centers, strategy=strategy)
    assert isinstance(result, FitResult)
    assert result.labels.shape == (blobs.shape[0],)
    assert int(result.labels.min()) >= 0
    assert int(result.labels.max()) < 4
    assert int(result.cluster_sizes().sum()) == blobs.shape[0]


def test_lloyd_dispersion_is_non_increasing(rng):
    X = rng.normal(size=(300, 3))
    centers = seed(X, 6, random_state=5)
    result = refine(X, centers, max_iterations=200)
    history = np.array(result.history)
    assert len(history) == result.n_iter
    assert np.all(np.diff(history) <= 1e-9 * max(1.0, history[0]))
    assert result.dispersion <= history[-1] + 1e-9


@pytest.mark.parametrize("strategy", list(RefinementStrategy))
def test_refining_converged_output_is_a_fixed_point(blobs, strategy):
    first = refine(blobs, seed(blobs, 3, random_state=11), strategy=strategy)
    assert first.converged

    second = refine(blobs, first.centers, strategy=strategy)
    assert second.converged
    assert second.n_iter == 1
    assert torch.allclose(second.centers, first.centers, rtol=0.0, atol=1e-9)
    assert torch.equal(second.labels, first.labels)
    assert second.dispersion == pytest.approx(first.dispersion)


def test_k1_lloyd_center_is_global_mean(blobs):
    X = torch.from_numpy(blobs)
    result = refine(X, X[:1], strategy='mean')
    assert torch.all(result.labels == 0)
    assert torch.allclose(result.centers[0], X.mean(dim=0))
    expected = torch.sum((X - X.mean(dim=0)) ** 2).item()
    assert result.dispersion == pytest.approx(expected)


def test_k1_median_center_is_per_coordinate_median():
    X = torch.tensor([[0.0, 5.0], [1.0, 0.0], [7.0, 2.0]], dtype=torch.float64)
    result = refine(X, X[:1], strategy='median')
    assert result.centers[0].tolist() == [1.0, 2.0]
    # (|0-1|+|5-2|) + (|1-1|+|0-2|) + (|7-1|+|2-2|)
    assert result.dispersion == pytest.approx(4.0 + 2.0 + 6.0)


def test_k_equals_n_gives_zero_dispersion():
    X = torch.tensor([[0.0, 0.0], [1.0, 3.0], [4.0, 1.0], [2.0, 2.0]], dtype=torch.float64)
    result = refine(X, X.clone())
    assert result.dispersion == 0.0
    assert sorted(result.labels.tolist()) == [0, 1, 2, 3]
    assert result.converged


def test_empty_cluster_keeps_its_center():
    X = torch.tensor([[0.0], [1.0], [2.0]], dtype=torch.float64)
    result = refine(X, [[1.0], [100.0]])
    assert result.labels.tolist() == [0, 0, 0]
    assert result.centers[:, 0].tolist() == [1.0, 100.0]
    assert result.converged


def test_iteration_limit_is_reported_not_raised():
    result = refine(LINE, [[0.0], [1.0]], max_iterations=1)
    assert result.converged is False
    assert result.n_iter == 1

    full = refine(LINE, [[0.0], [1.0]], max_iterations=100)
    assert full.converged
    assert full.centers[:, 0].tolist() == [1.0, 11.0]
    assert full.dispersion == pytest.approx(4.0)


def test_final_labels_match_final_centers():
    result = refine(LINE, [[0.0], [1.0]], max_iterations=1)
    nearest = torch.argmin(torch.abs(LINE - result.centers.T), dim=1)
    assert torch.equal(result.labels, nearest)


def test_input_is_not_mutated(blobs):
    X = torch.from_numpy(blobs.copy())
    X_before = X.clone()
    centers = X[:3].clone()
    centers_before = centers.clone()
    refine(X, centers)
    assert torch.equal(X, X_before)
    assert torch.equal(centers, centers_before)


def test_result_is_a_snapshot():
    centers = torch.tensor([[0.0], [1.0]], dtype=torch.float64)
    result = refine(LINE, centers)
    with pytest.raises(AttributeError):
        result.dispersion = 0.0
    assert result.seed_indices is None


def test_refine_validates_centers():
    with pytest.raises(DimensionMismatchError):
        refine(LINE, [[0.0, 1.0]])
    with pytest.raises(InvalidKError):
        refine(LINE[:2], [[0.0], [1.0], [2.0]])
    with pytest.raises(ValueError):
        refine(LINE, [[0.0]], max_iterations=0)
    with pytest.raises(ValueError):
        refine(LINE, [[0.0]], strategy='mode')


def test_updaters():
    pts = torch.tensor([[0.0, 0.0], [1.0, 0.0], [10.0, 3.0], [11.0, 1.0]], dtype=torch.float64)
    current = torch.zeros(2, dtype=torch.float64)

    assert MeanUpdater().update(pts, current).tolist() == [5.5, 1.0]
    assert MedianUpdater().update(pts, current).tolist() == [5.5, 0.5]
    # Totals of L1 distances to the other members: 26, 24, 28, 26
    assert MedoidUpdater().update(pts, current).tolist() == [1.0, 0.0]

    empty = pts[:0]
    assert torch.equal(MedianUpdater().update(empty, current), current)
