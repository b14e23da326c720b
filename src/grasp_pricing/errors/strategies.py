# 📜 grasp_pricing/errors/strategies.py
"""
📜 Стратегії конвертації сторонніх винятків у доменні `AppError`.

🔹 Виносять логіку із `ExceptionHandlerService`, щоб сервіс залишався простим DI-клієнтом.
🔹 Можна додавати нові стратегії, не змінюючи ядро.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
import yaml															# 📄 YAML-винятки конфігів

# 🔠 Системні імпорти
import decimal														# 💵 Винятки Decimal-арифметики
import logging														# 🧾 Логування стратегій
from typing import Optional, Protocol								# 📐 Типи

# 🧩 Внутрішні модулі проєкту
from grasp_pricing.shared.utils.logger import LOG_NAME				# 🏷️ Спільний неймспейс логів
from .custom_errors import AppError, ConfigurationError, PricingInputError  # ⚠️ Доменні помилки


# ================================
# 🧾 ЛОГЕР
# ================================
logger = logging.getLogger(f"{LOG_NAME}.errors.strategies")			# 🧾 Локальний логер


# ================================
# 🧠 КОНТРАКТ СТРАТЕГІЙ
# ================================
class IErrorHandlingStrategy(Protocol):
    """🧠 Контракт, що визначає єдиний метод `handle`."""

    def handle(self, error: Exception) -> Optional[AppError]:
        """Вертає `AppError`, якщо виняток розпізнано, або None."""


# ================================
# 💵 DECIMAL-СТРАТЕГІЯ
# ================================
class DecimalErrorStrategy(IErrorHandlingStrategy):
    """💵 Арифметичні збої Decimal → `PricingInputError`."""

    def handle(self, error: Exception) -> Optional[AppError]:
        if isinstance(error, decimal.InvalidOperation):					# 🔢 Нечислове значення
            logger.debug("🔢 Decimal invalid operation")
            return PricingInputError("Некоректне числове значення", details=str(error))
        if isinstance(error, ArithmeticError):							# ➗ Ділення на нуль, переповнення
            logger.debug("➗ Arithmetic error", extra={"exc_type": type(error).__name__})
            return PricingInputError("Помилка обчислення ціни", details=str(error))
        return None


# ================================
# 📄 YAML-СТРАТЕГІЯ
# ================================
class YamlErrorStrategy(IErrorHandlingStrategy):
    """📄 Синтаксичні помилки YAML → `ConfigurationError`."""

    def handle(self, error: Exception) -> Optional[AppError]:
        if isinstance(error, yaml.YAMLError):
            mark = getattr(error, "problem_mark", None)					# 📍 Рядок/колонка, якщо є
            source = getattr(mark, "name", None)						# 📄 Імʼя потоку/файлу
            logger.debug("📄 YAML error", extra={"source": source})
            return ConfigurationError("Не вдалося розібрати YAML-конфіг", details=str(error), source=source)
        return None


__all__ = [
    "IErrorHandlingStrategy",
    "DecimalErrorStrategy",
    "YamlErrorStrategy",
]																		# 📤 Публічний API
