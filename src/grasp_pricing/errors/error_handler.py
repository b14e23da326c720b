# 🛠️ grasp_pricing/errors/error_handler.py
"""
🛠️ Фабрика декораторів для безпечного виконання CLI-команд.

🔹 Не змінює сигнатуру функції, тож Typer бачить ті самі параметри.
🔹 Пропускає `typer.Exit`/`typer.Abort`, щоб не ламати штатне завершення.
🔹 Решту винятків делегує `ExceptionHandlerService` і виходить з його кодом.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
import typer														# ⌨️ Exit/Abort для CLI

# 🔠 Системні імпорти
import functools													# 🧱 wraps для збереження метаданих
import logging														# 🧾 Логи обробки помилок
from typing import Any, Callable, TypeVar							# 📐 Типи для сигнатур

# 🧩 Внутрішні модулі проєкту
from grasp_pricing.shared.utils.logger import LOG_NAME				# 🏷️ Спільний неймспейс логів
from .exception_handler_service import ExceptionHandlerService		# 🛡️ Центральний сервіс обробки винятків


# ================================
# 🧾 ЛОГЕР
# ================================
logger = logging.getLogger(f"{LOG_NAME}.errors.error_handler")		# 🧾 Локальний логер

F = TypeVar("F", bound=Callable[..., Any])


# ================================
# 🏭 ФАБРИКА ДЕКОРАТОРІВ
# ================================
def make_error_handler(service: ExceptionHandlerService) -> Callable[[F], F]:
    """
    Створює декоратор, замкнений на `ExceptionHandlerService`.

    Args:
        service: Сервіс, який отримує винятки і визначає код виходу.
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return func(*args, **kwargs)						# 🧠 Виконуємо оригінальну команду
            except (typer.Exit, typer.Abort):
                raise												# ⚠️ Штатний вихід не чіпаємо
            except Exception as exc:								# noqa: BLE001
                code = service.handle(exc)							# 🛡️ Передаємо в сервіс
                logger.debug("🧱 error_handler exit", extra={"command": func.__name__, "code": code})
                raise typer.Exit(code=code) from exc

        return wrapper												# type: ignore[return-value]

    return decorator


__all__ = ["make_error_handler"]										# 📤 Публічний API
