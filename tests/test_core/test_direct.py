"""
Тесты классической реализации и согласованности с демпфированной.
"""

import numpy as np
import pytest

from damped_kmeans.core.damped import KMeansDamped
from damped_kmeans.core.direct import KMeansDirect


def _as_partition(groups):
    return {frozenset(tuple(p) for p in group) for group in groups}


class TestKMeansDirect:
    """Тесты KMeansDirect."""

    def test_update_jumps_to_mean(self, simple_2d_dataset, rng):
        model = KMeansDirect(n_clusters=2, data=simple_2d_dataset, rng=rng)
        X = np.array(simple_2d_dataset)
        centroids = np.array([[0.0, 0.0], [20.0, 20.0]])

        new_centroids, moved = model.update_centroids(X, np.array([0, 0, 0, 1, 1, 1]), centroids)

        assert moved is True
        np.testing.assert_allclose(new_centroids, [[1.0, 1.0], [11.0, 11.0]], rtol=1e-10)

    def test_update_reports_no_move(self, simple_2d_dataset, rng):
        model = KMeansDirect(n_clusters=2, data=simple_2d_dataset, rng=rng)
        X = np.array(simple_2d_dataset)
        centroids = np.array([[1.0, 1.0], [11.0, 11.0]])

        _, moved = model.update_centroids(X, np.array([0, 0, 0, 1, 1, 1]), centroids)

        assert moved is False

    def test_empty_cluster_reseeded_within_extents(self, rng):
        data = [[0.0, 0.0], [1.0, 1.0], [2.0, 2.0]]
        model = KMeansDirect(n_clusters=3, data=data, rng=rng)

        new_centroids, moved = model.update_centroids(
            np.array(data), np.array([0, 0, 0]), np.zeros((3, 2))
        )

        assert moved is True
        assert np.all((new_centroids >= 0.0) & (new_centroids <= 2.0))

    @pytest.mark.parametrize("seed", [0, 1, 2, 3])
    def test_more_clusters_than_points_terminates(self, seed):
        """Кластер, пустой на каждом проходе, не мешает сходимости без лимита итераций."""
        data = [[0, 0], [10, 10]]
        model = KMeansDirect(n_clusters=3, data=data, rng=np.random.default_rng(seed))

        groups = model.run()

        assert model.converged
        assert sorted(p for group in groups for p in group) == data

    def test_run_converges_to_means(self, simple_2d_dataset, rng):
        model = KMeansDirect(n_clusters=2, data=simple_2d_dataset, rng=rng)

        model.run()

        assert model.converged
        centroids = model.centroids
        np.testing.assert_allclose(
            centroids[np.argsort(centroids[:, 0])], [[1.0, 1.0], [11.0, 11.0]], rtol=1e-10
        )


class TestImplementationConsistency:
    """Обе реализации находят одно и то же разбиение на хорошо разделённых данных."""

    def test_damped_vs_direct(self, rng):
        cluster1 = rng.normal(size=(30, 2)) * 0.5 + [0, 0]
        cluster2 = rng.normal(size=(30, 2)) * 0.5 + [8, 8]
        data = np.vstack([cluster1, cluster2])

        damped = KMeansDamped(
            n_clusters=2, data=data, rng=np.random.default_rng(1)
        )
        direct = KMeansDirect(
            n_clusters=2, data=data, rng=np.random.default_rng(1)
        )

        assert _as_partition(damped.run()) == _as_partition(direct.run())
        assert _as_partition(direct.run()) == {
            frozenset(map(tuple, cluster1)),
            frozenset(map(tuple, cluster2)),
        }
