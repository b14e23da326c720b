"""
🧪 test_pricing_service.py — поведінка доменного сервісу ціноутворення

Перевіряє:
- Знижки за категорією (регістр неважливий, невідомі → 0)
- Знижку за кількість строго понад поріг
- Податок від довільної суми
- Strict-режим і підміну реалізації через IPricingService
"""

import dataclasses
import logging
from decimal import Decimal

import pytest

from grasp_pricing.domain.pricing import IPricingService, PriceQuote, PricingConfig, PricingService, q2
from grasp_pricing.domain.products import Product, ProductCategory
from grasp_pricing.errors import PricingInputError
from grasp_pricing.shared.utils.logger import LOG_NAME


# ================================
# 🎁 ЗНИЖКА ЗА КАТЕГОРІЄЮ
# ================================
@pytest.mark.parametrize(
    "category,expected",
    [
        ("eletronicos", Decimal("0.15")),
        ("roupas", Decimal("0.10")),
        ("alimentos", Decimal("0.05")),
        ("ELETRONICOS", Decimal("0.15")),
        ("Roupas", Decimal("0.10")),
        (ProductCategory.ALIMENTOS, Decimal("0.05")),
        ("livros", Decimal("0")),
        ("", Decimal("0")),
        (None, Decimal("0")),
        (" roupas", Decimal("0")),
    ],
)
def test_category_rates(pricing_service, make_product, category, expected):
    assert pricing_service.apply_category_discount(make_product(category=category)) == expected


# ================================
# 💸 ФІНАЛЬНА ЦІНА
# ================================
@pytest.mark.parametrize(
    "unit_price,purchase_quantity,category,expected",
    [
        (Decimal("2000.00"), 1, "eletronicos", Decimal("1700.00")),
        (Decimal("80.00"), 15, "roupas", Decimal("1026.00")),
        (Decimal("3500.00"), 2, "eletronicos", Decimal("5950.00")),
        (3500.00, 2, "eletronicos", Decimal("5950.00")),
    ],
)
def test_published_examples(pricing_service, unit_price, purchase_quantity, category, expected):
    product = Product("Produto", unit_price, purchase_quantity, category)

    assert pricing_service.calculate_final_price(product, purchase_quantity) == expected


def test_electronics_single_unit(pricing_service, make_product):
    product = make_product(price="1000.00", category="eletronicos")

    assert pricing_service.calculate_final_price(product, 1) == Decimal("850.00")


def test_original_demo_scenarios(pricing_service, make_product):
    smartphone = make_product("Smartphone", "1500.00", 2, "eletronicos")
    camiseta = make_product("Camiseta", "50.00", 15, "roupas")
    arroz = make_product("Arroz", "20.00", 5, "alimentos")

    assert pricing_service.calculate_final_price(smartphone, 2) == Decimal("2550.00")
    assert pricing_service.calculate_final_price(camiseta, 15) == Decimal("641.25")
    assert pricing_service.calculate_final_price(arroz, 5) == Decimal("95.00")


def test_quantity_discount_starts_strictly_above_threshold(pricing_service, make_product):
    product = make_product(price="100.00", category="roupas")

    assert pricing_service.calculate_final_price(product, 10) == Decimal("900.00")
    assert pricing_service.calculate_final_price(product, 11) == Decimal("940.50")


def test_unknown_category_gets_only_quantity_discount(pricing_service, make_product):
    product = make_product(price="10.00", category="livros")

    assert pricing_service.calculate_final_price(product, 1) == Decimal("10.00")
    assert pricing_service.calculate_final_price(product, 20) == Decimal("190.00")


def test_stock_quantity_does_not_affect_price(pricing_service, make_product):
    in_stock = make_product(price="50.00", quantity=100, category="roupas")
    sold_out = make_product(price="50.00", quantity=0, category="roupas")

    assert pricing_service.calculate_final_price(in_stock, 3) == pricing_service.calculate_final_price(sold_out, 3)


def test_float_unit_price_is_exact(pricing_service):
    product = Product("Caneta", 80.1, 1, "livros")

    assert pricing_service.calculate_final_price(product, 1) == Decimal("80.1")


def test_calculation_is_idempotent_and_does_not_mutate_product(pricing_service, make_product):
    product = make_product("Camiseta", "50.00", 15, "roupas")
    snapshot = dataclasses.replace(product)

    first = pricing_service.calculate_final_price(product, 15)
    second = pricing_service.calculate_final_price(product, 15)

    assert first == second
    assert product == snapshot


def test_zero_and_negative_inputs_propagate_outside_strict_mode(pricing_service, make_product):
    assert pricing_service.calculate_final_price(make_product(category="roupas"), 0) == Decimal("0")
    negative = make_product(price="-10.00", category="livros")
    assert pricing_service.calculate_final_price(negative, 1) == Decimal("-10.00")


def test_final_price_is_logged(pricing_service, make_product, caplog):
    with caplog.at_level(logging.DEBUG, logger=LOG_NAME):
        pricing_service.calculate_final_price(make_product("Smartphone", "1500.00", 2), 2)

    assert "Final price" in caplog.text
    assert "'Smartphone'" in caplog.text


# ================================
# 🧾 ПОДАТОК
# ================================
def test_tax_rate_is_seven_percent(pricing_service):
    assert pricing_service.calculate_tax(Decimal("100.00")) == Decimal("7.00")
    assert pricing_service.calculate_tax(100) == Decimal("7")
    assert pricing_service.calculate_tax("0") == Decimal("0")


def test_tax_keeps_full_precision(pricing_service):
    tax = pricing_service.calculate_tax(Decimal("641.25"))

    assert tax == Decimal("44.8875")
    assert q2(tax) == Decimal("44.89")


def test_negative_tax_outside_strict_mode(pricing_service):
    assert pricing_service.calculate_tax(Decimal("-100")) == Decimal("-7.00")


def test_tax_rejects_non_numeric_in_any_mode(pricing_service):
    with pytest.raises(PricingInputError):
        pricing_service.calculate_tax("abc")


# ================================
# 🛡️ STRICT-РЕЖИМ
# ================================
@pytest.mark.parametrize("purchase_quantity", [0, -1, True, 2.5, "3"])
def test_strict_rejects_bad_purchase_quantity(strict_service, make_product, purchase_quantity):
    with pytest.raises(PricingInputError) as exc_info:
        strict_service.calculate_final_price(make_product(category="roupas"), purchase_quantity)

    assert exc_info.value.field == "purchase_quantity"


@pytest.mark.parametrize(
    "kwargs,field",
    [
        ({"price": "-1.00"}, "unit_price"),
        ({"quantity": -1}, "quantity"),
        ({"category": ""}, "category"),
        ({"category": "   "}, "category"),
        ({"category": None}, "category"),
    ],
)
def test_strict_rejects_bad_product(strict_service, make_product, kwargs, field):
    with pytest.raises(PricingInputError) as exc_info:
        strict_service.calculate_final_price(make_product(**kwargs), 1)

    assert exc_info.value.field == field


def test_strict_rejects_negative_tax_base(strict_service):
    with pytest.raises(PricingInputError):
        strict_service.calculate_tax(Decimal("-1"))


def test_strict_accepts_valid_input(strict_service, make_product):
    assert strict_service.calculate_final_price(make_product("Camiseta", "50.00", 15, "roupas"), 15) == Decimal("641.25")


# ================================
# ⚙️ НАЛАШТУВАННЯ
# ================================
def test_custom_config_changes_rates(make_product):
    service = PricingService(
        PricingConfig(
            category_discounts={"Livros": "0.30"},
            tax_rate="0.10",
            quantity_threshold=5,
            quantity_discount="0.20",
        )
    )

    assert service.apply_category_discount(make_product(category="LIVROS")) == Decimal("0.30")
    assert service.apply_category_discount(make_product(category="eletronicos")) == Decimal("0")
    assert service.calculate_final_price(make_product(price="10.00", category="livros"), 6) == Decimal("33.60")
    assert service.calculate_tax(Decimal("50")) == Decimal("5.0")


# ================================
# 📋 РОЗКЛАДКА (quote)
# ================================
def test_quote_breakdown(pricing_service, make_product):
    quote = pricing_service.quote(make_product("Camiseta", "50.00", 15, "roupas"), 15)

    assert isinstance(quote, PriceQuote)
    assert quote.product_name == "Camiseta"
    assert quote.category == "roupas"
    assert quote.gross == Decimal("750.00")
    assert quote.category_rate == Decimal("0.10")
    assert quote.category_discount == Decimal("75.00")
    assert quote.quantity_discount == Decimal("33.75")
    assert quote.final_price == Decimal("641.25")
    assert quote.tax == Decimal("44.8875")
    assert quote.total == Decimal("686.1375")


def test_quote_without_quantity_discount(pricing_service, make_product):
    quote = pricing_service.quote(make_product("Smartphone", "1500.00", 2, ProductCategory.ELETRONICOS), 2)

    assert quote.category == "eletronicos"
    assert quote.quantity_discount == Decimal("0")
    assert quote.total == Decimal("2728.50")


# ================================
# 🔀 ПІДМІНА РЕАЛІЗАЦІЇ
# ================================
class FlatPricing(IPricingService):
    """Тестова політика: жодних знижок, податок 10%."""

    def calculate_final_price(self, product, purchase_quantity):
        return product.unit_price * purchase_quantity

    def apply_category_discount(self, product):
        return Decimal("0")

    def calculate_tax(self, price):
        return Decimal(price) * Decimal("0.10")


def test_any_implementation_works_through_the_contract(make_product):
    service: IPricingService = FlatPricing()

    quote = service.quote(make_product(price="20.00", category="eletronicos"), 3)

    assert quote.final_price == Decimal("60.00")
    assert quote.category_discount == Decimal("0")
    assert quote.quantity_discount == Decimal("0")
    assert quote.total == Decimal("66.000")


def test_contract_cannot_be_instantiated_directly():
    with pytest.raises(TypeError):
        IPricingService()
