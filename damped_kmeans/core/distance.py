# core/distance.py
from __future__ import annotations

import numpy as np


def euclidean_distances(X: np.ndarray, centroids: np.ndarray) -> np.ndarray:
    """
    Матрица евклидовых расстояний точек до центроидов.

    Квадраты разностей суммируются по всем измерениям,
    а не только по последнему.

    :param X: точки формы (N, D)
    :param centroids: центроиды формы (K, D)
    :return: расстояния формы (N, K)
    """
    # (N, K, D) → (N, K)
    diff = X[:, None, :] - centroids[None, :, :]
    return np.sqrt(np.sum(diff * diff, axis=2))


def nearest_centroid(X: np.ndarray, centroids: np.ndarray) -> np.ndarray:
    """
    Шаг назначения: индекс ближайшего центроида для каждой точки.

    np.argmin возвращает первый минимум, поэтому при точном равенстве
    расстояний выбирается центроид с меньшим индексом.
    """
    return np.argmin(euclidean_distances(X, centroids), axis=1)
