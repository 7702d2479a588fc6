"""
Общие фикстуры для всех тестов.
"""

import numpy as np
import pytest


@pytest.fixture
def rng():
    """Детерминированный источник случайности вместо глобального seed."""
    return np.random.default_rng(42)


@pytest.fixture
def simple_2d_dataset():
    """Фикстура с очень простым 2D датасетом: два явно разделённых кластера."""
    return [
        [0.0, 0.0],
        [1.0, 1.0],
        [2.0, 2.0],
        [10.0, 10.0],
        [11.0, 11.0],
        [12.0, 12.0],
    ]


@pytest.fixture
def grid_dataset():
    """25 точек на сетке 1..10 x 1..10 (есть повторяющиеся точки)."""
    return [
        [6, 5], [9, 10], [10, 1], [5, 5], [7, 7],
        [4, 1], [10, 7], [6, 8], [10, 2], [9, 4],
        [2, 5], [9, 1], [10, 9], [2, 8], [1, 1],
        [6, 10], [3, 8], [2, 3], [7, 9], [7, 7],
        [3, 6], [5, 8], [7, 5], [10, 9], [10, 9],
    ]
