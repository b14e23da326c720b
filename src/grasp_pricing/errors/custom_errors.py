# 🚨 grasp_pricing/errors/custom_errors.py
"""
🚨 Доменні винятки калькулятора цін.

🔹 Успадковуються від `app`-ієрархії з `grasp_pricing.shared.errors`.
🔹 `PricingInputError` — некоректні числові дані або відхилення strict-режиму.
🔹 `ConfigurationError` — конфіг не вдалося прочитати чи розібрати.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging														# 🧾 Логування створення винятків
from typing import Any, Dict, Optional								# 📐 Типізація

# 🧩 Внутрішні модулі проєкту
from grasp_pricing.shared.errors import (							# 🔁 Базова ієрархія
    AppError as AppError,
    UserVisibleError as UserVisibleError,
)
from grasp_pricing.shared.utils.logger import LOG_NAME				# 🏷️ Спільний неймспейс логів


# ================================
# 🧾 ЛОГЕР
# ================================
logger = logging.getLogger(f"{LOG_NAME}.errors")					# 🧾 Локальний логер


# ================================
# ⚠️ КОДИ ПОМИЛОК
# ================================
class ErrorCode:
    """⚠️ Коди категорій помилок для логів."""

    PRICING_INPUT = "pricing_input_error"							# 🧮 Вхідні дані розрахунку
    CONFIGURATION = "configuration_error"							# ⚙️ Конфігурація
    UNKNOWN = "unknown_error"										# ❓ Резервний код


# ================================
# 🧮 ПОМИЛКИ ВХІДНИХ ДАНИХ
# ================================
class PricingInputError(UserVisibleError):
    """🧮 Значення не може брати участь у розрахунку ціни."""

    def __init__(
        self,
        message: str,
        *,
        details: Optional[str] = None,
        field: Optional[str] = None,
        value: Any = None,
    ) -> None:
        super().__init__(message, details=details)
        self.field = field											# 🏷️ Назва поля, що не пройшло перевірку
        self.value = value											# 🔢 Саме значення
        logger.debug("🧮 PricingInputError created", extra={"field": field, "value": repr(value)})

    def to_log_extra(self) -> Dict[str, object]:
        extra = super().to_log_extra()
        extra["error_code"] = ErrorCode.PRICING_INPUT
        if self.field:
            extra["field"] = self.field
        extra["value"] = repr(self.value)
        return extra


# ================================
# ⚙️ ПОМИЛКИ КОНФІГУРАЦІЇ
# ================================
class ConfigurationError(AppError):
    """⚙️ Конфігураційний файл чи значення не придатні до використання."""

    def __init__(self, message: str, *, details: Optional[str] = None, source: Optional[str] = None) -> None:
        super().__init__(message, details=details)
        self.source = source										# 📄 Файл або змінна середовища
        logger.debug("⚙️ ConfigurationError created", extra={"source": source})

    def to_log_extra(self) -> Dict[str, object]:
        extra = super().to_log_extra()
        extra["error_code"] = ErrorCode.CONFIGURATION
        if self.source:
            extra["source"] = self.source
        return extra


# ================================
# 📤 ПУБЛІЧНИЙ API
# ================================
__all__ = [
    "ErrorCode",
    "AppError",
    "UserVisibleError",
    "PricingInputError",
    "ConfigurationError",
]
