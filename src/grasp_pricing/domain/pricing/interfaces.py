# 🧩 grasp_pricing/domain/pricing/interfaces.py
"""
🧩 Контракти доменного сервісу ціноутворення.

🔹 `IPricingService` — посередник між викликачами (CLI, форматер) і конкретною політикою цін.
🔹 `PriceQuote` — DTO з повною розкладкою одного розрахунку.
"""

from __future__ import annotations

# 🔠 Системні імпорти
from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal

# 🧩 Внутрішні модулі проєкту
from grasp_pricing.domain.products.entities import Product
from .rounding import NumberLike, to_decimal

# ================================
# 🏛️ СТРУКТУРИ ДАНИХ (DTO)
# ================================

@dataclass(frozen=True, slots=True)
class PriceQuote:
    """DTO з розкладкою ціни: від валової суми до підсумку з податком."""
    product_name: str
    category: str
    purchase_quantity: int
    unit_price: Decimal
    gross: Decimal
    category_rate: Decimal
    category_discount: Decimal
    quantity_discount: Decimal
    final_price: Decimal
    tax: Decimal
    total: Decimal

# ================================
# 💰 ІНТЕРФЕЙС СЕРВІСУ ЦІНОУТВОРЕННЯ
# ================================
class IPricingService(ABC):
    """
    💰 Контракт для сервісу розрахунку цін.
    Дозволяє іншим частинам програми працювати з сервісом, не знаючи його реалізації.
    """

    @abstractmethod
    def calculate_final_price(self, product: Product, purchase_quantity: int) -> Decimal:
        """Ціна покупки після знижок за категорією та кількістю (без податку)."""

    @abstractmethod
    def apply_category_discount(self, product: Product) -> Decimal:
        """Ставка знижки для категорії товару (0.15 = 15%)."""

    @abstractmethod
    def calculate_tax(self, price: NumberLike) -> Decimal:
        """Податок на довільну суму."""

    def quote(self, product: Product, purchase_quantity: int) -> PriceQuote:
        """
        Збирає повну розкладку, спираючись лише на три операції контракту.

        Знижка за кількістю — залишок між валовою сумою, знижкою за категорією
        та фінальною ціною, тому працює для будь-якої реалізації.
        """
        final_price = self.calculate_final_price(product, purchase_quantity)
        rate = self.apply_category_discount(product)
        unit_price = to_decimal(product.unit_price, field="unit_price")
        gross = unit_price * purchase_quantity
        category_discount = gross * rate
        tax = self.calculate_tax(final_price)
        category = product.category
        return PriceQuote(
            product_name=product.name,
            category=str(category) if category is not None else "",
            purchase_quantity=purchase_quantity,
            unit_price=unit_price,
            gross=gross,
            category_rate=rate,
            category_discount=category_discount,
            quantity_discount=gross - category_discount - final_price,
            final_price=final_price,
            tax=tax,
            total=final_price + tax,
        )
