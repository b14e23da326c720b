# 📦 grasp_pricing/domain/pricing/services.py
"""
📦 Чистий сервіс розрахунку вартості товару для доменного шару.

🔹 Знижка за категорією береться з незмінної таблиці з дефолтною гілкою.
🔹 Додаткова знижка за кількістю діє лише коли кількість СТРОГО більша за поріг.
🔹 Податок — фіксована ставка від будь-якої суми, незалежно від знижок.
🔹 Жодного округлення всередині: гроші лишаються `Decimal`, копійки — справа відображення.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging                                                # 🪵 Логування кроків розрахунку
from dataclasses import dataclass, field                      # 🧱 Immutable-конфіг сервісу
from decimal import Decimal                                   # 💵 Точні гроші (без float)
from types import MappingProxyType                            # 🔒 Таблиця знижок лише для читання
from typing import Any, Mapping, Optional                     # 🧰 Типізація

# 🧩 Внутрішні модулі проєкту
from grasp_pricing.domain.products.entities import (          # 🛍️ Сутність товару
    Product,
    ProductCategory,
    normalize_category,
)
from grasp_pricing.errors.custom_errors import (              # 🚨 Доменні винятки
    ConfigurationError,
    PricingInputError,
)
from grasp_pricing.shared.utils.logger import LOG_NAME        # 🏷️ Базове імʼя логера
from .interfaces import IPricingService                       # 💰 Контракт сервісу
from .rounding import NumberLike, to_decimal                  # 🔢 Приведення до Decimal

logger = logging.getLogger(f"{LOG_NAME}.domain.pricing")      # 🧾 Іменований логер сервісу

_ONE = Decimal("1")                                           # 1️⃣ База для (1 - ставка)

DEFAULT_CATEGORY_DISCOUNTS: Mapping[str, Decimal] = MappingProxyType(
    {
        ProductCategory.ELETRONICOS.value: Decimal("0.15"),    # 📱 Електроніка
        ProductCategory.ROUPAS.value: Decimal("0.10"),        # 👕 Одяг
        ProductCategory.ALIMENTOS.value: Decimal("0.05"),     # 🍚 Продукти
    }
)

_TRUE_STRINGS = frozenset({"1", "true", "yes", "on", "y"})
_FALSE_STRINGS = frozenset({"0", "false", "no", "off", "n", ""})


# ================================
# 🛠️ ДОПОМІЖНІ ФУНКЦІЇ
# ================================
def _config_rate(value: Any, name: str) -> Decimal:
    """Ставка з конфіга: Decimal у межах [0, 1]."""
    try:
        rate = to_decimal(value, field=name)
    except PricingInputError as exc:
        raise ConfigurationError(
            f"Ставка «{name}» має бути числом",
            details=exc.details,
            source=name,
        ) from exc
    if rate < 0 or rate > 1:
        raise ConfigurationError(
            f"Ставка «{name}» має бути в межах від 0 до 1",
            details=f"got {rate}",
            source=name,
        )
    return rate


def _config_bool(value: Any, name: str) -> bool:
    """Булевий прапорець зі значення YAML або змінної середовища."""
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_STRINGS:
        return True
    if text in _FALSE_STRINGS:
        return False
    raise ConfigurationError(f"Прапорець «{name}» має бути true/false", details=f"got {value!r}", source=name)


def _config_int(value: Any, name: str) -> int:
    try:
        number = int(str(value).strip())
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(
            f"Значення «{name}» має бути цілим числом",
            details=f"got {value!r}",
            source=name,
        ) from exc
    if number < 0:
        raise ConfigurationError(f"Значення «{name}» не може бути відʼємним", details=f"got {number}", source=name)
    return number


def _category_table(source: Mapping[Any, Any]) -> Mapping[str, Decimal]:
    """Таблиця знижок: ключі в нижньому регістрі, ставки Decimal, лише для читання."""
    table: dict[str, Decimal] = {}
    origin: dict[str, Any] = {}                                # 🏷️ Вихідний ключ для повідомлення про конфлікт
    for key, value in source.items():
        normalized = normalize_category(key)
        if normalized in table:
            raise ConfigurationError(
                "Категорії у «category_discounts» збігаються без урахування регістру",
                details=f"{origin[normalized]!r} and {key!r} → {normalized!r}",
                source=f"category_discounts.{key}",
            )
        table[normalized] = _config_rate(value, f"category_discounts.{key}")
        origin[normalized] = key
    return MappingProxyType(table)


# ================================
# ⚙️ НАЛАШТУВАННЯ ФОРМУЛИ
# ================================
@dataclass(frozen=True, slots=True)
class PricingConfig:
    """Конфігураційні параметри формули прайсингу."""
    category_discounts: Mapping[str, Decimal] = field(
        default_factory=lambda: dict(DEFAULT_CATEGORY_DISCOUNTS)
    )                                                          # 🗂️ Категорія → ставка знижки
    default_discount: Decimal = Decimal("0.0")                 # 🚫 Ставка для невідомих категорій
    tax_rate: Decimal = Decimal("0.07")                        # 🧾 Податок (7%)
    quantity_threshold: int = 10                               # 📦 Поріг (строго більше)
    quantity_discount: Decimal = Decimal("0.05")               # 🎁 Знижка за кількість
    strict: bool = False                                       # 🛡️ Валідація вхідних даних

    def __post_init__(self) -> None:
        object.__setattr__(self, "category_discounts", _category_table(self.category_discounts))
        object.__setattr__(self, "default_discount", _config_rate(self.default_discount, "default_discount"))
        object.__setattr__(self, "tax_rate", _config_rate(self.tax_rate, "tax_rate"))
        object.__setattr__(self, "quantity_discount", _config_rate(self.quantity_discount, "quantity_discount"))
        object.__setattr__(self, "quantity_threshold", _config_int(self.quantity_threshold, "quantity_threshold"))
        object.__setattr__(self, "strict", _config_bool(self.strict, "strict"))

    @classmethod
    def from_mapping(cls, node: Optional[Mapping[str, Any]]) -> "PricingConfig":
        """Будує конфіг із вузла `pricing` (відсутні ключі → дефолти)."""
        data = dict(node or {})
        kwargs: dict[str, Any] = {}
        for name in ("default_discount", "tax_rate", "quantity_threshold", "quantity_discount", "strict"):
            if data.get(name) is not None:
                kwargs[name] = data[name]
        discounts = data.get("category_discounts")
        if discounts is not None:
            if not isinstance(discounts, Mapping):
                raise ConfigurationError(
                    "Розділ «category_discounts» має бути словником",
                    details=f"got {type(discounts).__name__}",
                    source="category_discounts",
                )
            kwargs["category_discounts"] = discounts
        return cls(**kwargs)

    @classmethod
    def from_config(cls, config: Any, *, strict: Optional[bool] = None) -> "PricingConfig":
        """Будує конфіг із `ConfigService` (ключ `pricing`); `strict` перекриває значення з файлу."""
        node = config.get("pricing", {}) or {}
        if strict is not None:
            node["strict"] = strict
        return cls.from_mapping(node)


# ================================
# 🏛️ ГОЛОВНИЙ ДОМЕННИЙ СЕРВІС
# ================================
class PricingService(IPricingService):
    """💸 Доменний сервіс: знижка за категорією, знижка за кількістю, податок."""

    def __init__(self, cfg: PricingConfig | None = None) -> None:
        self._cfg = cfg or PricingConfig()                      # 🧾 Кешуємо конфігурацію у сервісі

    @property
    def config(self) -> PricingConfig:
        return self._cfg

    # ================================
    # 🔢 ПУБЛІЧНИЙ API РОЗРАХУНКУ
    # ================================
    def calculate_final_price(self, product: Product, purchase_quantity: int) -> Decimal:
        """
        🚀 Валова сума → мінус знижка категорії → мінус знижка за кількість.

        Args:
            product: Товар із ціною за одиницю та категорією.
            purchase_quantity: Кількість у покупці (поза strict-режимом не перевіряється).

        Returns:
            Decimal: Ціна без податку, без округлення.
        """
        if self._cfg.strict:
            self._validate_product(product)
            self._validate_purchase_quantity(purchase_quantity)

        unit_price = to_decimal(product.unit_price, field="unit_price")  # 💵 Ціна одиниці
        gross = unit_price * purchase_quantity                             # 🧮 Валова сума
        rate = self.apply_category_discount(product)                       # 🗂️ Ставка категорії
        after_category = gross * (_ONE - rate)                             # 📉 Після знижки категорії

        if purchase_quantity > self._cfg.quantity_threshold:               # 📦 Строго більше порогу
            result = after_category * (_ONE - self._cfg.quantity_discount)
            quantity_applied = True
        else:
            result = after_category
            quantity_applied = False

        logger.info(
            "💸 Final price | product=%r qty=%s gross=%s category_rate=%s after_category=%s "
            "quantity_discount=%s → final=%s",
            product.name,
            purchase_quantity,
            gross,
            rate,
            after_category,
            self._cfg.quantity_discount if quantity_applied else Decimal("0"),
            result,
        )
        return result

    def apply_category_discount(self, product: Product) -> Decimal:
        """🎁 Ставка за категорією (регістр неважливий), решта → `default_discount`."""
        if self._cfg.strict:
            self._validate_product(product)
        key = normalize_category(product.category)
        rate = self._cfg.category_discounts.get(key, self._cfg.default_discount)
        logger.debug("🗂️ Category lookup | category=%r key=%r → rate=%s", product.category, key, rate)
        return rate

    def calculate_tax(self, price: NumberLike) -> Decimal:
        """🧾 Податок за фіксованою ставкою; відʼємна сума дає відʼємний податок (поза strict)."""
        amount = to_decimal(price, field="price")
        if self._cfg.strict and amount < 0:
            raise PricingInputError(
                "Сума для податку не може бути відʼємною",
                details=f"price={amount}",
                field="price",
                value=price,
            )
        tax = amount * self._cfg.tax_rate
        logger.debug("🧾 Tax | price=%s rate=%s → tax=%s", amount, self._cfg.tax_rate, tax)
        return tax

    # ==================================
    # 🛡️ STRICT-ВАЛІДАЦІЯ
    # ==================================
    @staticmethod
    def _validate_product(product: Product) -> None:
        unit_price = to_decimal(product.unit_price, field="unit_price")
        if unit_price < 0:
            raise PricingInputError(
                "Ціна товару не може бути відʼємною",
                details=f"unit_price={unit_price}",
                field="unit_price",
                value=product.unit_price,
            )
        quantity = product.quantity
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 0:
            raise PricingInputError(
                "Залишок товару має бути невідʼємним цілим числом",
                details=f"quantity={quantity!r}",
                field="quantity",
                value=quantity,
            )
        if not normalize_category(product.category).strip():
            raise PricingInputError(
                "Категорію товару не вказано",
                details=f"category={product.category!r}",
                field="category",
                value=product.category,
            )

    @staticmethod
    def _validate_purchase_quantity(purchase_quantity: Any) -> None:
        if isinstance(purchase_quantity, bool) or not isinstance(purchase_quantity, int):
            raise PricingInputError(
                "Кількість покупки має бути цілим числом",
                details=f"got {type(purchase_quantity).__name__}",
                field="purchase_quantity",
                value=purchase_quantity,
            )
        if purchase_quantity < 1:
            raise PricingInputError(
                "Кількість покупки має бути додатною",
                details=f"purchase_quantity={purchase_quantity}",
                field="purchase_quantity",
                value=purchase_quantity,
            )


__all__ = ["DEFAULT_CATEGORY_DISCOUNTS", "PricingConfig", "PricingService"]
