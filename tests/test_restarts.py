"""
Best-of-n restarts.
"""

from __future__ import annotations

import pytest
import torch

from kplusplus import fit_best_of, refine, RefinementStrategy, InvalidKError
from kplusplus.utils.validation import check_random_state
from kplusplus.initialization import KMeansPlusPlusInit


def test_best_restart_has_lowest_dispersion(blobs):
    X = torch.from_numpy(blobs)
    best = fit_best_of(X, 3, n_init=4, random_state=10)

    # Rebuild every restart by hand: restart i is seeded with random_state + i
    dispersions = []
    for i in range(4):
        idx = KMeansPlusPlusInit().select(X, 3, check_random_state(10 + i))
        dispersions.append(refine(X, X[idx]).dispersion)

    assert best.dispersion == pytest.approx(min(dispersions))
    assert best.seed_indices is not None and len(best.seed_indices) == 3


def test_generator_random_state_is_reproducible(blobs):
    a = fit_best_of(blobs, 3, n_init=3, random_state=torch.Generator().manual_seed(5))
    b = fit_best_of(blobs, 3, n_init=3, random_state=torch.Generator().manual_seed(5))
    assert torch.equal(a.centers, b.centers)


def test_median_strategy(four_points):
    result = fit_best_of(four_points, 2, n_init=3, strategy='median', random_state=0)
    assert result.strategy is RefinementStrategy.MEDIAN
    assert result.dispersion == pytest.approx(2.0)


def test_random_init_restarts(blobs):
    result = fit_best_of(blobs, 3, n_init=3, init='random', random_state=0)
    assert result.labels.shape == (blobs.shape[0],)


@pytest.mark.parametrize("kwargs", [
    {"n_init": 0}, {"n_jobs": 0}, {"init": "forgy"}, {"max_iter": 0}, {"strategy": "mode"}
])
def test_bad_arguments(four_points, kwargs):
    with pytest.raises(ValueError):
        fit_best_of(four_points, 2, **kwargs)


def test_invalid_k(four_points):
    with pytest.raises(InvalidKError):
        fit_best_of(four_points, 5)


@pytest.mark.parametrize("kwargs", [{"metric": "chebyshev"}, {"n_local_trials": 0}])
def test_arguments_rejected_before_any_seeding(monkeypatch, four_points, kwargs):
    calls = []
    original = KMeansPlusPlusInit.select

    def counting_select(self, *args, **kw):
        calls.append(1)
        return original(self, *args, **kw)

    monkeypatch.setattr(KMeansPlusPlusInit, "select", counting_select)
    with pytest.raises(ValueError):
        fit_best_of(four_points, 2, n_init=2, random_state=0, **kwargs)
    assert calls == []


def test_manhattan_metric_is_accepted(four_points):
    result = fit_best_of(four_points, 2, n_init=5, metric='manhattan', random_state=0)
    assert result.dispersion == pytest.approx(1.0)
