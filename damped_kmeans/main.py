# main.py
from __future__ import annotations

import argparse
import json
import logging
from typing import List, Optional

from damped_kmeans.core.damped import KMeansDamped
from damped_kmeans.core.direct import KMeansDirect
from damped_kmeans.data.loader import read_points
from damped_kmeans.errors import KMeansError
from damped_kmeans.utils.logging import setup_logger

ALGORITHMS = {
    "damped": KMeansDamped,
    "direct": KMeansDirect,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="damped-kmeans",
        description="Кластеризация точек из текстового файла методом K-means.",
    )
    parser.add_argument(
        "path",
        help="Файл с точками: одна точка на строку, координаты через пробел, "
        "строки с # игнорируются.",
    )
    parser.add_argument("-k", "--clusters", type=int, required=True, help="Количество кластеров K.")
    parser.add_argument(
        "--algorithm",
        choices=sorted(ALGORITHMS),
        default="damped",
        help="Правило обновления центроидов: damped (демпфированный сдвиг, по умолчанию) "
        "или direct (сразу в среднее).",
    )
    parser.add_argument(
        "--max-iters",
        type=int,
        default=None,
        help="Лимит итераций; по умолчанию без ограничения.",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    logger = setup_logger(getattr(logging, args.log_level))

    try:
        data = read_points(args.path)
        model = ALGORITHMS[args.algorithm](
            n_clusters=args.clusters,
            data=data,
            max_iters=args.max_iters,
            logger=logger,
        )
    except (KMeansError, ValueError, OSError) as exc:
        parser.error(str(exc))

    clusters = model.run()

    logger.info(
        f"Finished in {model.iterations} iterations: "
        f"{len(clusters)} non-empty clusters, converged={model.converged}"
    )
    print(json.dumps(clusters))


if __name__ == "__main__":
    main()
