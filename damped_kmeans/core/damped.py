# core/damped.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence, Tuple

import numpy as np

from .base import KMeansBase


@dataclass(frozen=True)
class DampingConfig:
    """Параметры демпфированного сдвига центроидов."""

    step_divisor: float = 10.0  # за проход центроид проходит 1/step_divisor пути до цели
    snap_threshold: float = 0.1  # при |diff| <= порога центроид встаёт прямо в цель
    decimals: int = 2


def round_half_up(values: np.ndarray, decimals: int) -> np.ndarray:
    """Округление до ``decimals`` знаков с половиной вверх (np.round округляет к чётному)."""
    scale = 10.0 ** decimals
    return np.floor(values * scale + 0.5) / scale


class KMeansDamped(KMeansBase):
    """
    KMeans с демпфированным обновлением центроидов.

    Вместо прыжка в среднее кластера центроид на каждом проходе сдвигается
    на десятую часть расстояния до цели (среднего, округлённого до 0.01),
    пока разница не станет <= 0.1; после этого он встаёт прямо в цель.
    Сходимость наступает, когда цели всех центроидов совпадают с их текущими
    положениями.

    Пустой кластер получает новый случайный центроид в границах всего
    датасета (без демпфирования); такая перестановка сдвигом не считается.
    """

    def __init__(
        self,
        n_clusters: int,
        data: Sequence[Any],
        max_iters: int | None = None,
        rng: np.random.Generator | None = None,
        damping: DampingConfig = DampingConfig(),
        logger: Any | None = None,
    ):
        super().__init__(
            n_clusters=n_clusters,
            data=data,
            max_iters=max_iters,
            rng=rng,
            logger=logger,
        )
        self.damping = damping

    def update_centroids(
        self, X: np.ndarray, labels: np.ndarray, centroids: np.ndarray
    ) -> Tuple[np.ndarray, bool]:
        decimals = self.damping.decimals
        targets = np.empty_like(centroids)
        reseeded = np.zeros(self.K, dtype=bool)

        for k in range(self.K):
            points = X[labels == k]
            if len(points) > 0:
                targets[k] = round_half_up(points.mean(axis=0), decimals)
            else:
                targets[k] = round_half_up(self.random_point(), decimals)
                reseeded[k] = True

        if self.logger and reseeded.any():
            self.logger.debug(f"  Re-seeded empty clusters: {np.flatnonzero(reseeded).tolist()}")

        # Сравнение целиком по непустым кластерам; переставленные пустые
        # центроиды занимают новое место, но сдвигом не считаются
        kept = ~reseeded
        if np.array_equal(targets[kept], centroids[kept]):
            new_centroids = centroids.copy()
            new_centroids[reseeded] = targets[reseeded]
            return new_centroids, False

        diff = targets - centroids
        stepped = round_half_up(centroids + diff / self.damping.step_divisor, decimals)
        new_centroids = np.where(np.abs(diff) > self.damping.snap_threshold, stepped, targets)
        new_centroids[reseeded] = targets[reseeded]

        return new_centroids, True
