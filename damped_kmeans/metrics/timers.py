"""
Таймер шагов алгоритма.

Контекстный менеджер Timer на time.perf_counter(): хранит длительность
последнего замера и сумму по всем замерам одного экземпляра.
"""
from __future__ import annotations

import time
from typing import Any


class Timer:
    """
    Контекстный менеджер для замера времени шагов K-means.

    Один экземпляр можно переиспользовать на каждой итерации:
    ``elapsed`` перезаписывается, ``total`` накапливается.

    Пример использования:
        timer = Timer()
        for _ in range(3):
            with timer:
                step()
        timer.elapsed  # последний шаг
        timer.total    # все три шага
    """

    def __init__(self) -> None:
        self.start: float = 0.0
        self.end: float = 0.0
        self.elapsed: float = 0.0
        self.total: float = 0.0
        self.count: int = 0

    def __enter__(self) -> Timer:
        self.start = time.perf_counter()
        return self

    def __exit__(self, *args: Any) -> None:
        self.end = time.perf_counter()
        self.elapsed = self.end - self.start
        self.total += self.elapsed
        self.count += 1
