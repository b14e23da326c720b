# 🧾 grasp_pricing/cli/ui/formatters/price_report_formatter.py
"""
🧾 Форматує результати розрахунку ціни у рядки для консолі.

🔹 Працює лише через `IPricingService`, тож будь-яка реалізація сервісу підходить
🔹 Округлює суми до копійок (`q2`) тільки тут, у шарі відображення
🔹 Підпис валюти береться з конфігу (`display.currency_symbol`)
"""

from __future__ import annotations

# 🔠 Системні імпорти
from decimal import Decimal                                          # 🔢 Операції з десятковими сумами
from typing import Final, List, Tuple                                # 🧰 Типізація

# 🧩 Внутрішні модулі проєкту
from grasp_pricing.cli.ui import static_messages as msg              # 💬 Шаблони рядків
from grasp_pricing.domain.pricing import (                           # 💸 Доменний прайсинг
    IPricingService,
    NumberLike,
    PriceQuote,
    PricingConfig,
    percent,
    q2,
)
from grasp_pricing.domain.products import Product                    # 🛍 Сутність товару


# ================================
# 💬 КЛАС ФОРМАТЕРА ЗВІТІВ
# ================================
class PriceReportFormatter:
    """
    💬 Формує готові текстові звіти прайсингу.
    """

    _ZERO: Final[Decimal] = Decimal("0")                              # 0️⃣ Ознака відсутньої знижки

    def __init__(
        self,
        pricing_service: IPricingService,
        config: PricingConfig,
        currency_symbol: str = "R$",
    ) -> None:
        self._pricing = pricing_service                               # 💰 Лише контракт, без реалізації
        self._config = config                                         # ⚙️ Ставки для підписів
        self._symbol = currency_symbol                                # 🏷️ Підпис валюти

    # ================================
    # 🧮 ДОПОМІЖНІ ФОРМАТЕРИ
    # ================================
    def _fmt_money(self, amount: NumberLike) -> str:
        """
        Форматує суму у вигляді `R$ 123.45`.
        """
        value = q2(amount)                                            # 🪙 Округлення до копійок
        return f"{self._symbol} {value:.2f}" if self._symbol else f"{value:.2f}"

    # ================================
    # 📤 ПУБЛІЧНИЙ API
    # ================================
    def format_quote(self, product: Product, purchase_quantity: int) -> List[str]:
        """
        Рахує повну розкладку через сервіс і повертає рядки звіту.
        """
        quote = self._pricing.quote(product, purchase_quantity)
        return self.format_price_quote(product, quote)

    def format_price_quote(self, product: Product, quote: PriceQuote) -> List[str]:
        """Рядки звіту для вже розрахованої розкладки."""
        threshold = self._config.quantity_threshold
        if quote.purchase_quantity > threshold:                       # 📦 Знижка за кількість могла спрацювати
            quantity_line = msg.REPORT_QUANTITY_ABOVE_THRESHOLD.format(
                quantity=quote.purchase_quantity,
                threshold=threshold,
            )
        else:
            quantity_line = msg.REPORT_PURCHASE_QUANTITY.format(quantity=quote.purchase_quantity)

        lines = [
            msg.REPORT_PRODUCT.format(product=product.describe()),
            quantity_line,
            msg.REPORT_GROSS.format(money=self._fmt_money(quote.gross)),
            msg.REPORT_CATEGORY_DISCOUNT.format(
                rate=percent(quote.category_rate),
                money=self._fmt_money(quote.category_discount),
            ),
        ]
        if quote.quantity_discount != self._ZERO:
            lines.append(
                msg.REPORT_QUANTITY_DISCOUNT.format(
                    rate=percent(self._config.quantity_discount),
                    money=self._fmt_money(quote.quantity_discount),
                )
            )
        lines.extend(
            [
                msg.REPORT_FINAL_PRICE.format(money=self._fmt_money(quote.final_price)),
                msg.REPORT_TAX.format(
                    rate=percent(self._config.tax_rate),
                    money=self._fmt_money(quote.tax),
                ),
                msg.REPORT_TOTAL.format(money=self._fmt_money(quote.total)),
            ]
        )
        return lines

    def format_tax(self, price: NumberLike) -> str:
        """Один рядок: податок від довільної суми."""
        tax = self._pricing.calculate_tax(price)
        return msg.TAX_LINE.format(
            rate=percent(self._config.tax_rate),
            price=self._fmt_money(price),
            money=self._fmt_money(tax),
        )

    def category_rows(self) -> List[Tuple[str, str]]:
        """Пари (категорія, знижка у %) для таблиці; останній рядок — ставка за замовчуванням."""
        rows = [
            (category, f"{percent(rate)}%")
            for category, rate in sorted(self._config.category_discounts.items())
        ]
        rows.append((msg.CATEGORIES_OTHER, f"{percent(self._config.default_discount)}%"))
        return rows

    def categories_footer(self) -> str:
        return msg.CATEGORIES_FOOTER.format(
            tax=percent(self._config.tax_rate),
            quantity_rate=percent(self._config.quantity_discount),
            threshold=self._config.quantity_threshold,
        )


__all__ = ["PriceReportFormatter"]
