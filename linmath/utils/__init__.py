# linmath/utils/__init__.py
"""
Пакет утилит.

Экспортируем:
    * logger        – logging.Logger "linmath" (NullHandler по умолчанию)
    * init_logger   – включить вывод логов (basicConfig)
    * set_log_level – сменить уровень логгера
"""

from .logger import logger, init_logger, set_log_level

__all__ = ["logger", "init_logger", "set_log_level"]
