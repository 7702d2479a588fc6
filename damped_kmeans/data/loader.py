"""
Чтение точек из текстового файла.

Формат файла:
- одна точка на строку, координаты разделены пробелами;
- строки, начинающиеся с ``#``, и пустые строки пропускаются;
- если во всех строках одна колонка, точки возвращаются скалярами.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, List

from damped_kmeans.errors import InputShapeError

logger = logging.getLogger("damped_kmeans")


def read_points(path: str | Path) -> List[Any]:
    """
    Загружает точки из файла.

    Args:
        path: путь к текстовому файлу с точками

    Returns:
        Список скаляров (одномерные данные) или списков координат

    Raises:
        InputShapeError: если в строке встретилось нечисловое значение
    """
    path = Path(path)
    rows: List[List[float]] = []

    with open(path, "r", encoding="utf-8") as f:
        for line_no, line in enumerate(f, start=1):
            line = line.strip()
            # Пропускаем комментарии и пустые строки
            if not line or line.startswith("#"):
                continue

            try:
                rows.append([float(part) for part in line.split()])
            except ValueError as exc:
                raise InputShapeError(f"{path}:{line_no}: {exc}") from exc

    logger.info(f"Loaded {len(rows)} points from {path}")

    if rows and all(len(row) == 1 for row in rows):
        return [row[0] for row in rows]
    return rows
