# 📦 grasp_pricing/domain/products/entities.py
"""
📦 Сутність товару — «експерт» власних даних.

🔹 `Product` зберігає назву, ціну за одиницю, залишок на складі та категорію.
🔹 Поля змінюються прямим присвоєнням, без валідації (це відповідальність викликача).
🔹 Розрахунки цін тут відсутні — їх виконує сервіс `domain.pricing`.
"""

from __future__ import annotations

# 🔠 Системні імпорти
from dataclasses import dataclass                                   # 🧱 Опис сутності
from decimal import Decimal                                         # 💰 Ціна за одиницю
from enum import Enum                                               # 🔖 Відомі категорії
from typing import Optional, Union                                  # 🧰 Типізація


# ================================
# 🏷️ ДОМЕННІ ТИПИ
# ================================
class ProductCategory(str, Enum):
    """Категорії, для яких діє знижка."""

    ELETRONICOS = "eletronicos"
    ROUPAS = "roupas"
    ALIMENTOS = "alimentos"

    def __str__(self) -> str:
        return self.value


CategoryLike = Union[ProductCategory, str, None]                    # 🏷️ Категорія як enum або довільний текст


def normalize_category(category: CategoryLike) -> str:
    """Ключ для пошуку в таблиці знижок: значення enum або текст у нижньому регістрі."""
    if category is None:                                            # 📭 Категорію не задано
        return ""
    if isinstance(category, Enum):                                  # 🔖 Enum → його значення
        category = category.value
    return str(category).lower()


# ================================
# 🛍️ СУТНІСТЬ ТОВАРУ
# ================================
@dataclass(slots=True)
class Product:
    """
    Товар у каталозі.

    `quantity` — залишок на складі; на ціну не впливає. Кількість покупки
    передається у сервіс окремо.
    """

    name: str                                                       # 🏷️ Назва
    unit_price: Decimal                                             # 💵 Ціна за одиницю
    quantity: int                                                   # 📦 Залишок на складі
    category: Optional[str]                                         # 🗂️ Категорія (регістр неважливий)

    def describe(self) -> str:
        """Людиночитне зведення всіх полів для діагностики."""
        category = self.category.value if isinstance(self.category, Enum) else self.category
        return (
            f"Product(name={self.name!r}, unit_price={self.unit_price}, "
            f"quantity={self.quantity}, category={category!r})"
        )

    def __str__(self) -> str:
        return self.describe()
