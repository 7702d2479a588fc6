"""
Подготовка входных точек для K-means.

Модуль проверяет форму датасета и за один проход вычисляет границы
(extents) и диапазоны (ranges) значений по каждому измерению.

Поддерживаются два представления точек:
- скаляры (одномерный датасет): ``[1, 3, 4, 5]``;
- последовательности одинаковой длины: ``[[2, 5], [4, 7], [3, 1]]``.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Any, List, Sequence, Tuple

import numpy as np

from damped_kmeans.errors import InputShapeError


@dataclass(frozen=True)
class Extent:
    """Минимум и максимум значений по одному измерению."""

    min: float
    max: float

    @property
    def range(self) -> float:
        return self.max - self.min


@dataclass(frozen=True)
class PointSet:
    """
    Проверенный датасет.

    Attributes:
        points: исходные объекты точек в порядке подачи (для итоговой группировки)
        X: матрица координат формы (N, D), float64
        extents: границы по каждому измерению
        ranges: ширина каждого измерения (max - min)
    """

    points: List[Any]
    X: np.ndarray
    extents: List[Extent]
    ranges: List[float]

    @property
    def n_points(self) -> int:
        return self.X.shape[0]

    @property
    def n_dims(self) -> int:
        return self.X.shape[1]


def _is_real(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple, np.ndarray))


def _coords(index: int, point: Any, scalar: bool, n_dims: int) -> Tuple[float, ...]:
    """Приводит одну точку к кортежу координат, проверяя её форму."""
    if scalar:
        if not _is_real(point):
            if _is_sequence(point):
                raise InputShapeError(
                    f"data[{index}]={point!r}: sequence point in a dataset of scalars"
                )
            raise InputShapeError(f"data[{index}]={point!r}: not a real number")
        coords: Tuple[Any, ...] = (point,)
    else:
        if not _is_sequence(point):
            raise InputShapeError(
                f"data[{index}]={point!r}: scalar or non-sequence point "
                f"in a dataset of {n_dims}-dimensional points"
            )
        if isinstance(point, np.ndarray) and point.ndim != 1:
            raise InputShapeError(
                f"data[{index}]: expected a 1-D array, got shape {point.shape}"
            )
        coords = tuple(point)
        if len(coords) != n_dims:
            raise InputShapeError(
                f"data[{index}]={point!r}: expected {n_dims} dimensions, got {len(coords)}"
            )
        for value in coords:
            if not _is_real(value):
                raise InputShapeError(
                    f"data[{index}]={point!r}: coordinate {value!r} is not a real number"
                )

    result = tuple(float(v) for v in coords)
    if not all(math.isfinite(v) for v in result):
        raise InputShapeError(f"data[{index}]={point!r}: non-finite coordinate")
    return result


def _scan(data: Sequence[Any]) -> Tuple[List[Tuple[float, ...]], List[Extent]]:
    """
    Один проход по датасету: проверка формы + накопление min/max.

    Форма (скаляры или последовательности длины D) задаётся первой точкой,
    все остальные обязаны ей соответствовать.
    """
    points = list(data)
    if not points:
        raise InputShapeError("data is empty")

    first = points[0]
    scalar = not _is_sequence(first)
    n_dims = 1 if scalar else len(first)
    if n_dims == 0:
        raise InputShapeError(f"data[0]={first!r}: zero-dimensional point")

    # Стартовые значения-стражи: любая конечная координата их заменит
    mins = [math.inf] * n_dims
    maxs = [-math.inf] * n_dims
    rows: List[Tuple[float, ...]] = []

    for index, point in enumerate(points):
        coords = _coords(index, point, scalar, n_dims)
        for d, value in enumerate(coords):
            if value < mins[d]:
                mins[d] = value
            if value > maxs[d]:
                maxs[d] = value
        rows.append(coords)

    extents = [Extent(min=lo, max=hi) for lo, hi in zip(mins, maxs)]
    return rows, extents


def compute_extents(data: Sequence[Any]) -> Tuple[List[Extent], List[float]]:
    """
    Вычисляет границы и диапазоны значений по каждому измерению.

    Пример использования:
        extents, ranges = compute_extents([[2, 5, 60], [4, 7, 23], [3, 1, -89]])
        # extents: [Extent(2, 4), Extent(1, 7), Extent(-89, 60)]
        # ranges:  [2, 6, 149]

    Raises:
        InputShapeError: если датасет пуст, содержит нечисловые значения
            или точки разной размерности
    """
    _, extents = _scan(data)
    return extents, [extent.range for extent in extents]


def prepare_points(data: Sequence[Any]) -> PointSet:
    """Проверяет датасет и упаковывает его в :class:`PointSet`."""
    points = list(data)
    rows, extents = _scan(points)
    X = np.asarray(rows, dtype=np.float64).reshape(len(rows), len(extents))
    return PointSet(
        points=points,
        X=X,
        extents=extents,
        ranges=[extent.range for extent in extents],
    )
