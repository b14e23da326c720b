# 💸 grasp_pricing/__init__.py
"""
💸 Калькулятор цін із двома принципами GRASP.

🔹 Information Expert — `Product` знає свої дані, `PricingService` знає правила ціни.
🔹 Indirection — викликачі працюють через `IPricingService`, а не через конкретний клас.
"""

# 🧩 Внутрішні модулі проєкту
from .domain.pricing import (                                   # 💰 Контракт, сервіс і DTO
    IPricingService,
    PriceQuote,
    PricingConfig,
    PricingService,
)
from .domain.products import Product, ProductCategory           # 🛍️ Сутність товару
from .errors import ConfigurationError, PricingInputError       # 🚨 Доменні винятки

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "IPricingService",
    "PriceQuote",
    "PricingConfig",
    "PricingService",
    "Product",
    "ProductCategory",
    "ConfigurationError",
    "PricingInputError",
]
