# 🧰 grasp_pricing/shared/utils/__init__.py
"""
🧰 Пакет узгоджених утиліт: схема логування.
"""

from __future__ import annotations

# 🔠 Логування
from .logger import (
    LOG_NAME,
    JsonFormatter,
    LoggingConfig,
    get_logger,
    init_logging,
    init_logging_from_config,
)


# ================================
# 📤 ПУБЛІЧНИЙ API ПАКЕТА
# ================================
__all__ = [
    "LOG_NAME",
    "JsonFormatter",
    "LoggingConfig",
    "get_logger",
    "init_logging",
    "init_logging_from_config",
]
