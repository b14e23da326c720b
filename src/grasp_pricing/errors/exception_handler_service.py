# 🛡️ grasp_pricing/errors/exception_handler_service.py
"""
🛡️ Центральний сервіс обробки помилок для консольних команд.

🔹 Конвертує будь-які винятки в доменні `AppError`, використовуючи передані стратегії.
🔹 Визначає, що показати користувачу (`UserVisibleError`, конфіг або unified fallback).
🔹 Повертає код виходу процесу; сам нічого не піднімає.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging														# 🧾 Логування кроків
from typing import Any, Callable, Iterable, Mapping, Optional		# 📐 Типи

# 🧩 Внутрішні модулі проєкту
from grasp_pricing.cli.ui import static_messages as msg				# 💬 Стандартні повідомлення
from grasp_pricing.shared.utils.logger import LOG_NAME				# 🏷️ Спільний неймспейс логів
from .custom_errors import AppError, ConfigurationError, UserVisibleError  # ⚠️ Доменні винятки
from .strategies import IErrorHandlingStrategy						# 🧠 Конвертери винятків


# ================================
# 🧾 ЛОГЕР
# ================================
logger = logging.getLogger(f"{LOG_NAME}.errors")					# 🧾 Іменований логер модуля

# ================================
# 🔢 КОДИ ВИХОДУ
# ================================
EXIT_USER_ERROR = 1													# 👀 Некоректне введення
EXIT_CONFIG_ERROR = 2												# ⚙️ Зламана конфігурація
EXIT_UNEXPECTED = 3													# 🔥 Усе інше

Reply = Callable[[str], Any]										# 💬 Куди писати повідомлення користувачу


# ================================
# 🧠 СЕРВІС ОБРОБКИ ПОМИЛОК
# ================================
class ExceptionHandlerService:
    """🧠 Глобальний диспетчер помилок для CLI-команд."""

    def __init__(self, strategies: Iterable[IErrorHandlingStrategy], reply: Optional[Reply] = None) -> None:
        self._strategies = list(strategies)							# 📦 Копія списку, щоб уникнути мутацій
        self._reply = reply											# 💬 None → лише логування
        logger.debug("🛡️ ExceptionHandlerService init", extra={"strategies": len(self._strategies)})

    # ================================
    # 🔑 ПУБЛІЧНИЙ API
    # ================================
    def handle(self, error: Exception) -> int:
        """Показує повідомлення і повертає код виходу."""
        domain_error = self._convert_error(error)					# 🔄 Прагнемо отримати AppError

        if isinstance(domain_error, UserVisibleError):				# 👀 Показуємо повідомлення як є
            logger.warning(
                "⚠️ UserVisibleError: %s",
                domain_error,
                extra=self._extract_extra(domain_error),
            )
            self._safe_reply(domain_error.message)
            return EXIT_USER_ERROR

        if isinstance(domain_error, ConfigurationError):				# ⚙️ Конфіг: людський текст + деталі в лог
            logger.error(
                "⚙️ ConfigurationError: %s",
                domain_error,
                extra=self._extract_extra(domain_error),
            )
            self._safe_reply(msg.ERROR_CONFIGURATION.format(message=domain_error.message))
            return EXIT_CONFIG_ERROR

        logger.error("🔥 Unhandled exception", exc_info=error)			# 🌐 Фолбек із трасуванням
        self._safe_reply(msg.ERROR_CRITICAL)
        return EXIT_UNEXPECTED

    # ================================
    # 🛠️ ДОПОМІЖНІ МЕТОДИ
    # ================================
    def _convert_error(self, error: Exception) -> Optional[AppError]:
        """🔄 Пропускає виняток через стратегії й повертає `AppError`, якщо можливо."""
        if isinstance(error, AppError):								# 🧾 Уже доменний виняток
            return error
        for strategy in self._strategies:							# 🔁 Перебираємо всі стратегії
            try:
                converted = strategy.handle(error)					# 🧠 Спроба конвертації
            except Exception:										# noqa: BLE001
                logger.exception("🔥 Strategy failed: %r", strategy)	# 🚫 Стратегія впала — лог і далі
                continue
            if converted is not None:
                logger.debug("🔁 Strategy converted error via %r", strategy)
                return converted
        return None

    @staticmethod
    def _extract_extra(error: AppError) -> Optional[Mapping[str, Any]]:
        """📦 Payload для `logger.extra`, якщо `to_log_extra` відпрацював."""
        try:
            payload = error.to_log_extra()
        except Exception:											# noqa: BLE001
            logger.debug("⚠️ to_log_extra failed", exc_info=True)
            return None
        return dict(payload) if isinstance(payload, Mapping) else None

    def _safe_reply(self, text: str) -> None:
        """💬 Намагається показати текст, не валячи обробник."""
        if self._reply is None:
            return
        try:
            self._reply(text)
        except Exception as send_err:								# noqa: BLE001
            logger.warning("⚠️ Failed to show error message: %s", send_err)


__all__ = [
    "EXIT_USER_ERROR",
    "EXIT_CONFIG_ERROR",
    "EXIT_UNEXPECTED",
    "ExceptionHandlerService",
]
