import numpy as np
import pytest
import torch

from kplusplus import KMeans, ConvergenceWarning, DimensionMismatchError, InvalidKError
from kplusplus.initialization import FromPreviousInit
from utils import labels_equal_up_to_perm, sorted_rows


def test_kmeans_fits_simple_blobs():
    rng = np.random.default_rng(0)
    X1 = rng.normal(loc=0.0, scale=0.3, size=(100, 2))
    X2 = rng.normal(loc=3.0, scale=0.3, size=(100, 2))
    X = np.vstack([X1, X2])

    km = KMeans(n_clusters=2, n_local_trials=3, random_state=0)
    km.fit(X)

    assert hasattr(km, "labels_"), "Expected labels_ after fit"
    assert len(km.labels_) == X.shape[0]
    assert km.cluster_centers_.shape == (2, 2)
    assert km.converged_
    y_true = np.repeat([0, 1], 100)
    assert labels_equal_up_to_perm(km.labels_, y_true, K=2)

    centers = sorted_rows(km.cluster_centers_)
    assert np.allclose(centers[0], X1.mean(axis=0))
    assert np.allclose(centers[1], X2.mean(axis=0))


def test_fit_predict_matches_labels(blobs):
    km = KMeans(n_clusters=3, random_state=1)
    labels = km.fit_predict(blobs)
    assert torch.equal(labels, km.labels_)
    assert torch.equal(km.predict(blobs), km.labels_)


def test_same_random_state_same_result(blobs):
    a = KMeans(n_clusters=3, random_state=123).fit(blobs)
    b = KMeans(n_clusters=3, random_state=123).fit(blobs)
    assert torch.equal(a.cluster_centers_, b.cluster_centers_)
    assert torch.equal(a.labels_, b.labels_)
    assert a.result_.seed_indices == b.result_.seed_indices


def test_inertia_and_score(blobs):
    km = KMeans(n_clusters=3, random_state=2).fit(blobs)
    X = torch.from_numpy(blobs)
    centers = km.cluster_centers_
    expected = torch.sum((X - centers[km.labels_]) ** 2).item()
    assert km.inertia_ == pytest.approx(expected)
    assert km.score(blobs) == pytest.approx(-expected)


def test_explicit_and_random_init():
    X = [[0.0], [1.0], [2.0], [10.0], [11.0], [12.0]]
    km = KMeans(n_clusters=2, init=np.array([[0.0], [1.0]])).fit(X)
    assert km.cluster_centers_[:, 0].tolist() == [1.0, 11.0]
    assert km.result_.seed_indices is None
    assert isinstance(km.initialization_strategy, FromPreviousInit)

    km_rand = KMeans(n_clusters=2, init='random', random_state=0).fit(X)
    assert len(km_rand.result_.seed_indices) == 2


def test_invalid_init():
    X = [[0.0], [1.0], [2.0]]
    with pytest.raises(ValueError):
        KMeans(n_clusters=2, init='forgy').fit(X)
    with pytest.raises(InvalidKError):
        KMeans(n_clusters=2, init=[[0.0]]).fit(X)
    with pytest.raises(DimensionMismatchError):
        KMeans(n_clusters=1, init=[[0.0, 0.0]]).fit(X)


def test_verbose_warns_on_iteration_limit(capsys):
    X = [[0.0], [1.0], [2.0], [10.0], [11.0], [12.0]]
    km = KMeans(n_clusters=2, init=[[0.0], [1.0]], max_iter=1, verbose=1)
    with pytest.warns(ConvergenceWarning):
        km.fit(X)
    assert km.converged_ is False
    assert km.n_iter_ == 1
    assert "Iteration" in capsys.readouterr().out


def test_not_fitted_raises():
    km = KMeans(n_clusters=2)
    with pytest.raises(RuntimeError):
        km.predict([[0.0, 0.0]])
    with pytest.raises(RuntimeError):
        _ = km.cluster_centers_


def test_predict_dimension_mismatch(blobs):
    km = KMeans(n_clusters=2, random_state=0).fit(blobs)
    with pytest.raises(DimensionMismatchError):
        km.predict([[0.0, 0.0, 0.0]])


def test_get_set_params():
    km = KMeans(n_clusters=4, n_local_trials=3)
    params = km.get_params()
    assert params['n_clusters'] == 4
    assert params['n_local_trials'] == 3
    km.set_params(n_clusters=2)
    assert km.n_clusters == 2
    with pytest.raises(ValueError):
        km.set_params(bogus=1)


def test_greedy_seeding_runs(blobs):
    km = KMeans(n_clusters=3, n_local_trials=4, random_state=0).fit(blobs)
    assert km.converged_
    assert int(km.result_.cluster_sizes().min()) > 0
