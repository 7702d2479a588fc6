# core/direct.py
from __future__ import annotations

from typing import Any, Sequence, Tuple

import numpy as np

from .base import KMeansBase


class KMeansDirect(KMeansBase):
    """
    Классический KMeans: центроид сразу переносится в среднее своего кластера.

    Сходимость: максимальное изменение координаты центроида меньше tol.
    Пустые кластеры обрабатываются так же, как в KMeansDamped.
    """

    def __init__(
        self,
        n_clusters: int,
        data: Sequence[Any],
        max_iters: int | None = None,
        rng: np.random.Generator | None = None,
        tol: float = 1e-9,
        logger: Any | None = None,
    ):
        super().__init__(
            n_clusters=n_clusters,
            data=data,
            max_iters=max_iters,
            rng=rng,
            logger=logger,
        )
        self.tol = tol  # Порог сходимости (максимальное изменение центроидов)

    def update_centroids(
        self, X: np.ndarray, labels: np.ndarray, centroids: np.ndarray
    ) -> Tuple[np.ndarray, bool]:
        new_centroids = np.empty_like(centroids)
        reseeded = np.zeros(self.K, dtype=bool)

        for k in range(self.K):
            points = X[labels == k]
            if len(points) > 0:
                new_centroids[k] = points.mean(axis=0)
            else:
                new_centroids[k] = self.random_point()
                reseeded[k] = True

        # Переставленные пустые кластеры в проверку сходимости не входят
        kept = ~reseeded
        max_change = float(np.max(np.abs(new_centroids[kept] - centroids[kept])))
        return new_centroids, max_change >= self.tol
