# 🚨 grasp_pricing/shared/errors.py
"""
🚨 Базова ієрархія винятків застосунку.

🔹 `AppError` — корінь усіх доменних/прикладних помилок (message + details).
🔹 `UserVisibleError` — помилки, текст яких можна показати користувачу як є.
"""

from __future__ import annotations

# 🔠 Системні імпорти
from typing import Dict, Optional									# 📐 Типізація


# ================================
# 🧠 БАЗОВА ПОМИЛКА
# ================================
class AppError(Exception):
    """🧠 Базовий виняток застосунку з людським повідомленням і технічними деталями."""

    def __init__(self, message: str, *, details: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message										# 💬 Текст для людини
        self.details = details										# 🔍 Технічний контекст

    def to_log_extra(self) -> Dict[str, object]:
        """📦 Формує словник для `logger.extra`."""
        extra: Dict[str, object] = {"error_type": type(self).__name__}
        if self.details:
            extra["details"] = self.details
        return extra

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} ({self.details})"
        return self.message


# ================================
# 👀 ПОМИЛКИ ДЛЯ КОРИСТУВАЧА
# ================================
class UserVisibleError(AppError):
    """👀 Помилка, повідомлення якої безпечно показати користувачу."""


__all__ = ["AppError", "UserVisibleError"]
