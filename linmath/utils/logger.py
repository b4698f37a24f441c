# linmath/utils/logger.py
# ---------------------------------------------------------------
# Логгер библиотеки. По умолчанию молчит (NullHandler);
# init_logger() настраивает вывод для скриптов и примеров.
# ---------------------------------------------------------------

import logging

logger = logging.getLogger("linmath")
logger.addHandler(logging.NullHandler())


def init_logger(level: int = logging.INFO) -> logging.Logger:
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    set_log_level(level)
    return logger


def set_log_level(level) -> None:
    """Уровень логгера: int или имя ("DEBUG", "INFO", ...)."""
    if isinstance(level, str):
        value = logging.getLevelName(level.upper())
        if not isinstance(value, int):
            raise ValueError(f"Unknown log level: {level!r}")
        level = value
    logger.setLevel(level)
    logger.debug(f"[Logger] Level set to {logging.getLevelName(level)}")
