# ➗ grasp_pricing/domain/pricing/rounding.py
"""
➗ Утиліти для грошової арифметики на `Decimal`.

🔹 `to_decimal` — приводить int/float/str до `Decimal` без двійкових артефактів float.
🔹 `q2` — округлення до 2 знаків (ROUND_HALF_UP) для шару відображення.
🔹 `percent` — частка → відсотки (0.15 → 15).
"""

from __future__ import annotations

# 🔠 Системні імпорти
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation      # 💵 Точні гроші (без float)
from typing import Union                                          # 🧰 Вхідні типи

# 🧩 Внутрішні модулі проєкту
from grasp_pricing.errors.custom_errors import PricingInputError  # 🚨 Некоректне число

NumberLike = Union[Decimal, int, float, str]                      # 🔢 Усе, що можна перетворити на гроші

_CENT = Decimal("0.01")                                           # 🪙 Крок округлення
_HUNDRED = Decimal("100")                                         # 💯 Для відсотків


def to_decimal(value: NumberLike, *, field: str = "value") -> Decimal:
    """
    Перетворює значення на `Decimal`.

    float іде через `str()`, тому `80.1` стає `Decimal("80.1")`, а не двійковим хвостом.
    bool відхиляється, бо `True * 10` у грошах завжди помилка.

    Raises:
        PricingInputError: значення не є числом.
    """
    if isinstance(value, Decimal):                                # ✅ Вже Decimal
        result = value
    elif isinstance(value, bool):                                 # 🚫 bool — підклас int
        raise PricingInputError(
            f"Поле «{field}» має бути числом",
            details=f"bool is not a monetary value: {value!r}",
            field=field,
            value=value,
        )
    elif isinstance(value, (int, float)):                         # 🔢 Числові типи
        result = Decimal(str(value))
    elif isinstance(value, str):                                  # 🧵 Текстове представлення
        try:
            result = Decimal(value.strip())
        except InvalidOperation as exc:
            raise PricingInputError(
                f"Поле «{field}» має бути числом",
                details=f"cannot parse {value!r}",
                field=field,
                value=value,
            ) from exc
    else:
        raise PricingInputError(
            f"Поле «{field}» має бути числом",
            details=f"unsupported type {type(value).__name__}",
            field=field,
            value=value,
        )

    if not result.is_finite():                                    # ♾️ NaN / Infinity не гроші
        raise PricingInputError(
            f"Поле «{field}» має бути скінченним числом",
            details=f"non-finite decimal {result!r}",
            field=field,
            value=value,
        )
    return result


def q2(value: NumberLike) -> Decimal:
    """Округлює до копійок (2 знаки, ROUND_HALF_UP)."""
    return to_decimal(value).quantize(_CENT, rounding=ROUND_HALF_UP)


def percent(rate: NumberLike) -> Decimal:
    """Частка → відсотки: `0.15` → `15`, нормалізовано без зайвих нулів."""
    result = to_decimal(rate, field="rate") * _HUNDRED
    if result == result.to_integral_value():                      # 🎯 Ціле значення показуємо без дробу
        return result.quantize(Decimal("1"))
    return result.normalize()


__all__ = ["NumberLike", "to_decimal", "q2", "percent"]
