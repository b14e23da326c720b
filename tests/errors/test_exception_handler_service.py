"""
🧪 test_exception_handler_service.py — центральний обробник помилок

Перевіряє:
- Коди виходу для користувацьких, конфігураційних і невідомих помилок
- Конвертацію Decimal/YAML винятків стратегіями
- Стійкість до збоїв у стратегіях і reply
"""

import decimal
import logging

import pytest
import yaml

from grasp_pricing.cli.ui import static_messages as msg
from grasp_pricing.errors import ConfigurationError, PricingInputError
from grasp_pricing.errors.exception_handler_service import (
    EXIT_CONFIG_ERROR,
    EXIT_UNEXPECTED,
    EXIT_USER_ERROR,
    ExceptionHandlerService,
)
from grasp_pricing.errors.strategies import DecimalErrorStrategy, YamlErrorStrategy


@pytest.fixture
def replies():
    return []


@pytest.fixture
def service(replies):
    return ExceptionHandlerService([DecimalErrorStrategy(), YamlErrorStrategy()], reply=replies.append)


def test_user_visible_error_is_shown_as_is(service, replies, caplog):
    with caplog.at_level(logging.WARNING):
        code = service.handle(PricingInputError("Кількість покупки має бути додатною", field="purchase_quantity"))

    assert code == EXIT_USER_ERROR
    assert replies == ["Кількість покупки має бути додатною"]
    assert "UserVisibleError" in caplog.text


def test_configuration_error_uses_template(service, replies):
    code = service.handle(ConfigurationError("Ставка «tax_rate» має бути в межах від 0 до 1"))

    assert code == EXIT_CONFIG_ERROR
    assert replies == [msg.ERROR_CONFIGURATION.format(message="Ставка «tax_rate» має бути в межах від 0 до 1")]


def test_unknown_error_falls_back_to_critical_message(service, replies, caplog):
    with caplog.at_level(logging.ERROR):
        code = service.handle(RuntimeError("boom"))

    assert code == EXIT_UNEXPECTED
    assert replies == [msg.ERROR_CRITICAL]
    assert "Unhandled exception" in caplog.text


def test_decimal_errors_become_user_errors(service, replies):
    assert service.handle(decimal.InvalidOperation("bad")) == EXIT_USER_ERROR
    assert service.handle(ZeroDivisionError("division by zero")) == EXIT_USER_ERROR
    assert replies == ["Некоректне числове значення", "Помилка обчислення ціни"]


def test_yaml_errors_become_configuration_errors(service, replies):
    try:
        yaml.safe_load("pricing: [unclosed")
    except yaml.YAMLError as exc:
        code = service.handle(exc)

    assert code == EXIT_CONFIG_ERROR
    assert replies and replies[0].startswith(msg.ERROR_CONFIGURATION.split("{")[0])


def test_failing_strategy_is_skipped(replies):
    class Broken:
        def handle(self, error):
            raise ValueError("strategy bug")

    service = ExceptionHandlerService([Broken(), DecimalErrorStrategy()], reply=replies.append)

    assert service.handle(decimal.InvalidOperation()) == EXIT_USER_ERROR


def test_failing_reply_does_not_escape():
    def reply(_text):
        raise OSError("stderr closed")

    service = ExceptionHandlerService([], reply=reply)

    assert service.handle(PricingInputError("x")) == EXIT_USER_ERROR


def test_without_reply_only_logs():
    assert ExceptionHandlerService([]).handle(KeyError("k")) == EXIT_UNEXPECTED


def test_log_extra_payload():
    error = PricingInputError("bad", details="price=-1", field="unit_price", value=-1)

    assert error.to_log_extra() == {
        "error_type": "PricingInputError",
        "details": "price=-1",
        "error_code": "pricing_input_error",
        "field": "unit_price",
        "value": "-1",
    }
    assert str(error) == "bad (price=-1)"
