# 🧩 grasp_pricing/domain/products/__init__.py
"""
🧩 Пакет `domain.products` публікує сутність товару та перелік категорій.

🔹 `entities.py` — `Product`, `ProductCategory`, `normalize_category`.
"""

# 🧩 Внутрішні модулі проєкту
from .entities import (                                        # 🧱 Базові сутності продуктів
    CategoryLike,
    Product,
    ProductCategory,
    normalize_category,
)


# ================================
# 📤 ПУБЛІЧНИЙ API ПАКЕТА
# ================================
__all__ = [
    "CategoryLike",
    "Product",
    "ProductCategory",
    "normalize_category",
]
