# tests/conftest.py
import logging
import os
import sys
from decimal import Decimal
from pathlib import Path

import pytest

# 1) Гасимо автопідхоплення сторонніх плагінів
os.environ.setdefault("PYTEST_DISABLE_PLUGIN_AUTOLOAD", "1")

# 2) Додаємо src у sys.path, щоб працював імпорт "grasp_pricing.…" без встановлення
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from grasp_pricing.config.config_service import CONFIG_PATH_ENV, ENV_KEYS, ConfigService  # noqa: E402
from grasp_pricing.domain.pricing import PricingConfig, PricingService  # noqa: E402
from grasp_pricing.domain.products import Product  # noqa: E402
from grasp_pricing.shared.utils.logger import LOG_NAME  # noqa: E402


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch):
    """Кожен тест бачить лише вбудований config.yaml і чистий логер."""
    for name in (*ENV_KEYS, CONFIG_PATH_ENV):
        monkeypatch.delenv(name, raising=False)
    ConfigService.reset()
    yield
    ConfigService.reset()
    app_logger = logging.getLogger(LOG_NAME)
    for handler in list(app_logger.handlers):
        app_logger.removeHandler(handler)
        handler.close()
    app_logger.setLevel(logging.NOTSET)


@pytest.fixture
def pricing_service():
    return PricingService()


@pytest.fixture
def strict_service():
    return PricingService(PricingConfig(strict=True))


@pytest.fixture
def make_product():
    def _make(name="Товар", price="100.00", quantity=1, category="eletronicos"):
        unit_price = Decimal(price) if isinstance(price, str) else price
        return Product(name, unit_price, quantity, category)

    return _make
