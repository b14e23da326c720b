import logging
from decimal import Decimal

import pytest
import typer

from grasp_pricing.config.config_service import ConfigService
from grasp_pricing.config.setup.container import Container, bootstrap_logging
from grasp_pricing.domain.pricing import IPricingService
from grasp_pricing.errors import ConfigurationError, PricingInputError
from grasp_pricing.shared.utils.logger import LOG_NAME


def test_container_wires_services_from_config():
    container = Container(ConfigService())

    assert isinstance(container.pricing_service, IPricingService)
    assert container.pricing_config.tax_rate == Decimal("0.07")
    assert container.pricing_config.strict is False
    assert container.report_formatter.format_tax(Decimal("100")).endswith("R$ 7.00")


def test_strict_flag_overrides_config(monkeypatch):
    monkeypatch.setenv("PRICING_STRICT", "false")

    container = Container(ConfigService(), strict=True)

    assert container.pricing_config.strict is True


def test_environment_enables_strict_mode(monkeypatch):
    monkeypatch.setenv("PRICING_STRICT", "true")

    assert Container(ConfigService()).pricing_config.strict is True


def test_invalid_rate_in_environment_fails_fast(monkeypatch):
    monkeypatch.setenv("PRICING_TAX_RATE", "7")

    with pytest.raises(ConfigurationError):
        Container(ConfigService())


def test_error_handler_reports_through_reply():
    replies = []
    container = Container(ConfigService(), reply=replies.append)

    @container.error_handler
    def failing():
        raise PricingInputError("Ціна некоректна")

    with pytest.raises(typer.Exit) as exc_info:
        failing()

    assert exc_info.value.exit_code == 1
    assert replies == ["Ціна некоректна"]


def test_bootstrap_logging_applies_cli_level():
    root = bootstrap_logging(ConfigService(), level="DEBUG")

    assert root.name == LOG_NAME
    assert root.level == logging.DEBUG
