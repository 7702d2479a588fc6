from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence, Tuple

import numpy as np

from damped_kmeans.core.distance import nearest_centroid
from damped_kmeans.data.points import Extent, prepare_points
from damped_kmeans.errors import InvalidClusterCountError
from damped_kmeans.metrics.timers import Timer
from damped_kmeans.utils.logging import format_run_prefix


@dataclass
class KMeansState:
    """
    Состояние одного запуска: принадлежит ровно одному экземпляру модели.

    Обновляется по значению на каждом проходе цикла (новые массивы,
    а не мутация старых).
    """

    centroids: np.ndarray
    labels: np.ndarray = field(default_factory=lambda: np.empty(0, dtype=np.intp))
    iterations: int = 0
    converged: bool = False


class KMeansBase(ABC):
    """
    Базовый класс для реализаций KMeans.

    Отвечает за:
    - проверку входных данных и количества кластеров (в конструкторе);
    - случайную инициализацию центроидов в границах данных;
    - цикл итераций «назначение → обновление» до сходимости;
    - сбор таймингов по шагам:
      T_назначения (assign_clusters), T_обновления (update_centroids),
      T_итерации (сумма двух предыдущих).

    Правило обновления центроидов задаёт подкласс.
    """

    def __init__(
        self,
        n_clusters: int,
        data: Sequence[Any],
        max_iters: int | None = None,
        rng: np.random.Generator | None = None,
        logger: Any | None = None,
    ):
        if (
            isinstance(n_clusters, bool)
            or not isinstance(n_clusters, (int, np.integer))
            or n_clusters < 1
        ):
            raise InvalidClusterCountError(
                f"n_clusters must be a positive integer, got {n_clusters!r}"
            )
        if max_iters is not None and (
            isinstance(max_iters, bool)
            or not isinstance(max_iters, (int, np.integer))
            or max_iters < 1
        ):
            raise ValueError(f"max_iters must be a positive integer or None, got {max_iters!r}")

        self.K = int(n_clusters)
        self.max_iters = max_iters  # None: без ограничения
        self.rng = rng if rng is not None else np.random.default_rng()
        self.logger = logger

        self.points = prepare_points(data)
        self._mins = np.array([e.min for e in self.points.extents], dtype=np.float64)
        self._ranges = np.array(self.points.ranges, dtype=np.float64)

        self._state = KMeansState(centroids=self.init_centroids())

        self._assign_timer = Timer()
        self._update_timer = Timer()
        self._result: List[List[Any]] | None = None

    # --- Состояние, доступное снаружи (только копии) ---

    @property
    def extents(self) -> List[Extent]:
        return list(self.points.extents)

    @property
    def ranges(self) -> List[float]:
        return list(self.points.ranges)

    @property
    def n_dims(self) -> int:
        return self.points.n_dims

    @property
    def centroids(self) -> np.ndarray:
        return self._state.centroids.copy()

    @property
    def labels(self) -> np.ndarray:
        return self._state.labels.copy()

    @property
    def iterations(self) -> int:
        return self._state.iterations

    @property
    def converged(self) -> bool:
        return self._state.converged

    @property
    def t_assign_total(self) -> float:
        return self._assign_timer.total

    @property
    def t_update_total(self) -> float:
        return self._update_timer.total

    @property
    def t_iter_total(self) -> float:
        return self._assign_timer.total + self._update_timer.total

    # --- Инициализация ---

    def random_point(self) -> np.ndarray:
        """Случайная точка: по каждому измерению равномерно в [min, max]."""
        return self._mins + self.rng.random(self.n_dims) * self._ranges

    def init_centroids(self) -> np.ndarray:
        """K случайных центроидов в границах данных."""
        return np.vstack([self.random_point() for _ in range(self.K)])

    # --- Основной цикл ---

    def run(self) -> List[List[Any]]:
        """
        Цикл KMeans до сходимости.

        Каждый проход: счётчик итераций +1 → назначение → обновление.
        Остановка, когда update_centroids сообщает, что центроиды не сдвинулись,
        либо (если задан max_iters) при исчерпании лимита итераций.

        Модель одноразовая: повторный вызов возвращает уже полученную
        группировку без новых итераций.

        Returns:
            Группы исходных точек по возрастанию индекса кластера;
            кластеры без точек пропускаются.
        """
        if self._result is not None:
            return self._result

        X = self.points.X
        prefix = format_run_prefix(self.points.n_points, self.n_dims, self.K)

        while not self._state.converged:
            if self.max_iters is not None and self._state.iterations >= self.max_iters:
                if self.logger:
                    self.logger.warning(
                        f"{prefix} Stopped after {self._state.iterations} iterations "
                        f"without convergence (max_iters={self.max_iters})"
                    )
                break

            self._state.iterations += 1
            i = self._state.iterations

            with self._assign_timer:
                labels = self.assign_clusters(X, self._state.centroids)
            with self._update_timer:
                centroids, moved = self.update_centroids(X, labels, self._state.centroids)

            self._state.labels = labels
            self._state.centroids = centroids
            self._state.converged = not moved

            if self.logger and (i == 1 or i % 10 == 0 or not moved):
                status = " (converged)" if not moved else ""
                self.logger.info(
                    f"{prefix} Iteration {i}{status} "
                    f"(T_assign={self._assign_timer.elapsed:.6f}s, "
                    f"T_update={self._update_timer.elapsed:.6f}s)"
                )

        if self.logger and self._state.converged:
            passes = self._assign_timer.count
            self.logger.info(
                f"{prefix} Convergence reached after {passes} iterations "
                f"(T_assign_avg={self._assign_timer.total / passes:.6f}s, "
                f"T_update_avg={self._update_timer.total / passes:.6f}s)"
            )

        self._result = self._group()
        return self._result

    def _group(self) -> List[List[Any]]:
        groups: Dict[int, List[Any]] = {}
        for point, label in zip(self.points.points, self._state.labels):
            groups.setdefault(int(label), []).append(point)
        return [groups[c] for c in sorted(groups)]

    def assign_clusters(self, X: np.ndarray, centroids: np.ndarray) -> np.ndarray:
        """Шаг назначения точек ближайшим (по евклиду) центроидам."""
        return nearest_centroid(X, centroids)

    @abstractmethod
    def update_centroids(
        self, X: np.ndarray, labels: np.ndarray, centroids: np.ndarray
    ) -> Tuple[np.ndarray, bool]:
        """
        Шаг обновления центроидов по присвоенным меткам.

        Не изменяет переданный ``centroids``.

        :return: (новые центроиды, сдвинулся ли хотя бы один центроид)
        """
        raise NotImplementedError
