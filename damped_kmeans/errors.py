"""
Исключения пакета damped_kmeans.

Все ошибки валидации поднимаются синхронно в конструкторе модели,
до начала каких-либо вычислений.
"""

from __future__ import annotations


class KMeansError(Exception):
    """Базовое исключение пакета."""


class InputShapeError(KMeansError, TypeError):
    """Датасет содержит нечисловое значение или точки разной размерности."""


class InvalidClusterCountError(KMeansError, ValueError):
    """Количество кластеров не является положительным целым числом."""
