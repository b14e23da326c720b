# 📦 grasp_pricing/config/setup/container.py
"""
📦 Контейнер залежностей калькулятора.

🔹 Створює сервіси в правильному порядку DI: конфіг → доменний сервіс → форматер → помилки.
🔹 Викликачі отримують `IPricingService`, а не конкретний клас.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging                                                           # 🧾 Базові засоби логування
from typing import TYPE_CHECKING, Any, Callable, Optional                # 🧮 Допоміжні типи

# 🧩 Внутрішні модулі проєкту
from grasp_pricing.cli.ui.formatters.price_report_formatter import PriceReportFormatter  # 🧾 Звіти
from grasp_pricing.domain.pricing import IPricingService, PricingConfig, PricingService  # 💵 Доменне ціноутворення
from grasp_pricing.errors.error_handler import make_error_handler                      # 🚨 Обгортка обробки помилок
from grasp_pricing.errors.exception_handler_service import ExceptionHandlerService      # 🛡️ Менеджер винятків
from grasp_pricing.errors.strategies import DecimalErrorStrategy, YamlErrorStrategy     # 🧱 Набір стратегій помилок
from grasp_pricing.shared.utils.logger import LOG_NAME, init_logging_from_config        # 🧾 Конфіг логування

if TYPE_CHECKING:
    from grasp_pricing.config.config_service import ConfigService         # 🗂️ Тип під час перевірки

logger = logging.getLogger(f"{LOG_NAME}.container")                      # 🧾 Модульний логер контейнера


def bootstrap_logging(config: Optional["ConfigService"] = None, level: Optional[str] = None) -> logging.Logger:
    """
    Зчитує конфіг логування і запускає кореневий логер.
    """
    if config is None:
        from grasp_pricing.config.config_service import ConfigService    # 🧭 Локальний імпорт для уникнення циклів

        config = ConfigService()
    node = config.get("logging", {}) or {}                               # 📄 Вузол логування
    if level:                                                            # 🎚️ CLI-прапорець важливіший за файл
        node["level"] = level
        node["console_level"] = level
    return init_logging_from_config(node)


# ================================
# 🏛️ КОНТЕЙНЕР ЗАЛЕЖНОСТЕЙ
# ================================
class Container:
    """
    Координує ініціалізацію доменних сервісів, форматера та обробки помилок.
    """

    def __init__(
        self,
        config: "ConfigService",
        *,
        strict: Optional[bool] = None,
        reply: Optional[Callable[[str], Any]] = None,
    ) -> None:
        self.config = config                                              # ⚙️ Джерело конфігурацій DI
        self._strict_override = strict                                    # 🛡️ Прапорець --strict із CLI
        self._reply = reply                                               # 💬 Куди показувати помилки
        logger.debug("🚀 Стартуємо побудову контейнера залежностей")
        self._setup_domain_services()
        self._setup_presentation()
        self._setup_error_handlers()
        logger.debug("✅ Контейнер ініціалізовано успішно")

    # ================================
    # 🏭 ДОМЕННІ СЕРВІСИ
    # ================================
    def _setup_domain_services(self) -> None:
        self.pricing_config = PricingConfig.from_config(self.config, strict=self._strict_override)  # ⚙️ Параметри формули
        self.pricing_service: IPricingService = PricingService(self.pricing_config)  # 💵 Через контракт
        logger.debug(
            "💵 PricingService ready | tax=%s threshold=%s strict=%s",
            self.pricing_config.tax_rate,
            self.pricing_config.quantity_threshold,
            self.pricing_config.strict,
        )

    # ================================
    # 🧾 ВІДОБРАЖЕННЯ
    # ================================
    def _setup_presentation(self) -> None:
        symbol = self.config.get("display.currency_symbol", "R$") or ""
        self.report_formatter = PriceReportFormatter(
            self.pricing_service,
            self.pricing_config,
            currency_symbol=str(symbol),
        )

    # ================================
    # 🛡️ ОБРОБКА ПОМИЛОК
    # ================================
    def _setup_error_handlers(self) -> None:
        strategies = [
            DecimalErrorStrategy(),                                      # 💵 Арифметика Decimal
            YamlErrorStrategy(),                                         # 📄 YAML-конфіги
        ]
        self.exception_handler_service = ExceptionHandlerService(strategies=strategies, reply=self._reply)
        self.error_handler = make_error_handler(self.exception_handler_service)          # 🔄 Уніфікована обгортка
        logger.debug("🛡️ ExceptionHandlerService активовано (%d стратегій)", len(strategies))
