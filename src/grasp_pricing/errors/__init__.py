# 🚨 grasp_pricing/errors/__init__.py
"""
🚨 Пакет обробки помилок: доменні винятки, стратегії конвертації та CLI-обгортка.

`error_handler` тут не реекспортується, бо тягне Typer; імпортуйте його напряму.
"""

from .custom_errors import (
    AppError,
    ConfigurationError,
    ErrorCode,
    PricingInputError,
    UserVisibleError,
)

__all__ = [
    "AppError",
    "ConfigurationError",
    "ErrorCode",
    "PricingInputError",
    "UserVisibleError",
]
