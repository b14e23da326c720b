# 💸 grasp_pricing/domain/pricing/__init__.py
"""
💸 Пакет `domain.pricing` публікує контракти, DTO, утиліти та сервіс для ціноутворення.

🔹 `interfaces.py` — `PriceQuote`, `IPricingService`.
🔹 `rounding.py` — утиліти `to_decimal`, `q2` і `percent` для роботи з Decimal.
🔹 `services.py` — `PricingConfig` і `PricingService` (реалізація IPricingService).
"""

# 🧩 Внутрішні модулі проєкту
from .interfaces import (                                   # 🧱 DTO та контракти
    PriceQuote,
    IPricingService,
)
from .rounding import NumberLike, percent, q2, to_decimal   # ➗ Утиліти округлення та відсотків
from .services import (                                     # 💼 Чистий сервіс розрахунку
    DEFAULT_CATEGORY_DISCOUNTS,
    PricingConfig,
    PricingService,
)


# ================================
# 📤 ПУБЛІЧНИЙ API ПАКЕТА
# ================================
__all__ = [
    # DTO / типи
    "PriceQuote",
    "NumberLike",
    # Контракти
    "IPricingService",
    # Сервіс і правила
    "DEFAULT_CATEGORY_DISCOUNTS",
    "PricingConfig",
    "PricingService",
    # Утиліти
    "to_decimal",
    "q2",
    "percent",
]
