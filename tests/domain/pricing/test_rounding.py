from decimal import Decimal

import pytest

from grasp_pricing.domain.pricing import percent, q2, to_decimal
from grasp_pricing.errors import PricingInputError


# ================================
# 🔢 to_decimal
# ================================
def test_float_goes_through_str_without_binary_tail():
    assert to_decimal(80.1) == Decimal("80.1")
    assert str(to_decimal(0.1)) == "0.1"


def test_int_str_and_decimal_inputs():
    assert to_decimal(7) == Decimal("7")
    assert to_decimal(" 12.50 ") == Decimal("12.50")
    value = Decimal("3.14")
    assert to_decimal(value) is value


@pytest.mark.parametrize("bad", [True, False, None, [1], "abc", "", "1,5"])
def test_non_numeric_values_raise_pricing_input_error(bad):
    with pytest.raises(PricingInputError) as exc_info:
        to_decimal(bad, field="price")

    assert exc_info.value.field == "price"
    assert "price" in exc_info.value.message


@pytest.mark.parametrize("bad", ["NaN", "Infinity", float("inf"), Decimal("NaN")])
def test_non_finite_values_are_rejected(bad):
    with pytest.raises(PricingInputError):
        to_decimal(bad)


# ================================
# 🪙 q2 / percent
# ================================
def test_q2_rounds_half_up_to_cents():
    assert q2(Decimal("44.8875")) == Decimal("44.89")
    assert q2("2.345") == Decimal("2.35")
    assert q2("2.344") == Decimal("2.34")
    assert str(q2(7)) == "7.00"


def test_percent_formats_integral_and_fractional_rates():
    assert str(percent("0.15")) == "15"
    assert str(percent(Decimal("0.10"))) == "10"
    assert str(percent("0.0")) == "0"
    assert str(percent("0.125")) == "12.5"
