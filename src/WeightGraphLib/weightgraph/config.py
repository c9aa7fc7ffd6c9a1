"""
Конфигурация библиотеки weightgraph.

Значения читаются из переменных окружения при импорте.
"""

import logging
import os
from typing import Optional

# Logging
LOG_LEVEL = os.getenv("WEIGHTGRAPH_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Graph
PARALLEL_EDGE_POLICY = os.getenv("WEIGHTGRAPH_PARALLEL_EDGE_POLICY", "first")


def configure_logging(level: Optional[str] = None):
    """
    Настроить логирование для приложения, использующего библиотеку.

    Сама библиотека обработчики не устанавливает.

    Args:
        level: Уровень логирования (по умолчанию LOG_LEVEL)
    """
    logging.basicConfig(
        level=getattr(logging, (level or LOG_LEVEL).upper()),
        format=LOG_FORMAT
    )
