import logging


def setup_logger(level: int = logging.INFO) -> logging.Logger:
    """
    Создаёт и настраивает логгер пакета ``damped_kmeans``.

    :param level: минимальный уровень логирования
    :return: настроенный экземпляр :class:`logging.Logger`
    """
    logger = logging.getLogger("damped_kmeans")
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "[%(asctime)s] %(levelname)s: %(message)s",
            datefmt="%H:%M:%S",
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    # Чтобы сообщения не дублировались через root-логгер
    logger.propagate = False

    return logger


def format_run_prefix(n_points: int, n_dims: int, n_clusters: int) -> str:
    """Текстовый префикс для логов одного запуска: размеры датасета и K."""
    return f"[N={n_points} D={n_dims} K={n_clusters}]"
