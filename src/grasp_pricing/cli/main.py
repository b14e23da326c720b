# 🖥️ grasp_pricing/cli/main.py
"""
🖥️ Entry-point консольного калькулятора цін.

🔹 Глобальні опції (`--strict`, `--log-level`) зберігаються в `ctx.obj`; контейнер будується при першій команді, тож `--help` не читає конфіг.
🔹 Команди `demo`, `quote`, `tax`, `categories` працюють через `IPricingService`.
🔹 Кожна команда виконується під `make_error_handler`, тож помилки дають код виходу, а не трасування.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
import typer                                                             # ⌨️ CLI-фреймворк
from rich.console import Console                                         # 🖨️ Вивід у термінал
from rich.table import Table                                             # 📋 Таблиця категорій

# 🔠 Системні імпорти
import logging                                                           # 🧾 Логування подій запуску
from dataclasses import dataclass                                        # 🧱 Опис демо-сценаріїв
from decimal import Decimal                                              # 💵 Ціни демо-товарів
from typing import Iterable, Optional, Tuple                             # 🧮 Анотації

# 🧩 Внутрішні модулі проєкту
from grasp_pricing.cli.ui import static_messages as msg                  # 💬 Тексти інтерфейсу
from grasp_pricing.config.config_service import ConfigService            # ⚙️ Завантаження конфігів
from grasp_pricing.config.setup.container import Container, bootstrap_logging  # 🚀 DI-контейнер
from grasp_pricing.domain.pricing import to_decimal                      # 🔢 Текст → Decimal
from grasp_pricing.domain.products import Product, ProductCategory       # 🛍️ Сутність товару
from grasp_pricing.errors.error_handler import make_error_handler        # 🚨 Обгортка помилок
from grasp_pricing.errors.exception_handler_service import ExceptionHandlerService  # 🛡️ Обробка запуску
from grasp_pricing.errors.strategies import YamlErrorStrategy            # 📄 Битий YAML
from grasp_pricing.shared.utils.logger import LOG_NAME                   # 🏷️ Ім'я кореневого логера


# ================================
# 🪵 ГЛОБАЛЬНІ ОБʼЄКТИ
# ================================
logger = logging.getLogger(f"{LOG_NAME}.cli")                            # 🧾 Логер CLI
console = Console(highlight=False)                                       # 🖨️ stdout
err_console = Console(stderr=True, highlight=False)                      # 🚨 stderr для помилок

app = typer.Typer(
    help="Калькулятор цін: знижки за категорією та кількістю, податок.",
    no_args_is_help=True,
    add_completion=False,
)


# ================================
# 🎬 ДЕМО-СЦЕНАРІЇ
# ================================
@dataclass(frozen=True)
class DemoScenario:
    title: str
    product: Product
    purchase_quantity: int


def demo_scenarios() -> Tuple[DemoScenario, ...]:
    """Три класичні сценарії: електроніка, одяг понад поріг, продукти."""
    return (
        DemoScenario(msg.DEMO_ELECTRONICS, Product("Smartphone", Decimal("1500.00"), 2, ProductCategory.ELETRONICOS.value), 2),
        DemoScenario(msg.DEMO_CLOTHES, Product("Camiseta", Decimal("50.00"), 15, ProductCategory.ROUPAS.value), 15),
        DemoScenario(msg.DEMO_FOOD, Product("Arroz", Decimal("20.00"), 5, ProductCategory.ALIMENTOS.value), 5),
    )


# ================================
# 🛠️ ДОПОМІЖНІ ФУНКЦІЇ
# ================================
def _print_lines(lines: Iterable[str]) -> None:
    for line in lines:
        console.print(line, markup=False, soft_wrap=True)


def _reply_error(text: str) -> None:
    err_console.print(text, markup=False, soft_wrap=True)


@dataclass
class CliState:
    """Глобальні опції; контейнер будується при першому зверненні команди."""
    strict: Optional[bool] = None
    log_level: Optional[str] = None
    container: Optional[Container] = None


def _container(ctx: typer.Context) -> Container:
    state: CliState = ctx.ensure_object(CliState)
    if state.container is None:
        bootstrap_handler = ExceptionHandlerService([YamlErrorStrategy()], reply=_reply_error)

        @make_error_handler(bootstrap_handler)
        def _build() -> Container:
            config = ConfigService()
            bootstrap_logging(config, level=state.log_level)
            logger.debug("🧭 CLI bootstrap | strict=%s log_level=%s", state.strict, state.log_level)
            return Container(config, strict=state.strict, reply=_reply_error)

        state.container = _build()
    return state.container


# ================================
# 🌍 ГЛОБАЛЬНІ ОПЦІЇ
# ================================
@app.callback()
def main_callback(
    ctx: typer.Context,
    strict: Optional[bool] = typer.Option(
        None,
        "--strict/--no-strict",
        help="Перевіряти вхідні дані (перекриває pricing.strict з конфігу).",
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Рівень логування: DEBUG, INFO, WARNING, ERROR.",
    ),
) -> None:
    """Калькулятор цін: знижки за категорією та кількістю, податок."""
    ctx.obj = CliState(strict=strict, log_level=log_level)


# ================================
# 🧾 КОМАНДИ
# ================================
@app.command()
def demo(ctx: typer.Context) -> None:
    """Три демонстраційні сценарії та підсумок принципів Expert / Indirection."""
    container = _container(ctx)

    @container.error_handler
    def _run() -> None:
        formatter = container.report_formatter
        _print_lines([msg.DEMO_TITLE, ""])
        for index, scenario in enumerate(demo_scenarios(), start=1):
            _print_lines([msg.DEMO_SCENARIO.format(index=index, title=scenario.title)])
            _print_lines(formatter.format_quote(scenario.product, scenario.purchase_quantity))
            _print_lines([""])
        _print_lines([msg.DEMO_SEPARATOR, msg.DEMO_SUMMARY, ""])
        _print_lines(msg.DEMO_PRINCIPLES)

    _run()


@app.command()
def quote(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Назва товару"),
    price: str = typer.Option(..., "--price", "-p", help="Ціна за одиницю, напр. 1500.00"),
    quantity: int = typer.Option(1, "--quantity", "-q", help="Кількість у покупці"),
    category: str = typer.Option("", "--category", "-c", help="Категорія (регістр неважливий)"),
    stock: int = typer.Option(0, "--stock", "-s", help="Залишок на складі (на ціну не впливає)"),
) -> None:
    """Повна розкладка ціни для одного товару."""
    container = _container(ctx)

    @container.error_handler
    def _run() -> None:
        product = Product(name, to_decimal(price, field="price"), stock, category)
        _print_lines(container.report_formatter.format_quote(product, quantity))

    _run()


@app.command()
def tax(
    ctx: typer.Context,
    price: str = typer.Argument(..., help="Сума, від якої рахується податок"),
) -> None:
    """Податок від довільної суми."""
    container = _container(ctx)

    @container.error_handler
    def _run() -> None:
        _print_lines([container.report_formatter.format_tax(to_decimal(price, field="price"))])

    _run()


@app.command()
def categories(ctx: typer.Context) -> None:
    """Таблиця ставок за категоріями, податок і правило кількості."""
    container = _container(ctx)

    @container.error_handler
    def _run() -> None:
        formatter = container.report_formatter
        table = Table(title=msg.CATEGORIES_TITLE)
        table.add_column(msg.CATEGORIES_COLUMN_CATEGORY)
        table.add_column(msg.CATEGORIES_COLUMN_RATE, justify="right")
        for name, rate in formatter.category_rows():
            table.add_row(name, rate)
        console.print(table)
        _print_lines([formatter.categories_footer()])

    _run()


def main() -> None:
    """Точка входу для скрипта `grasp-pricing`."""
    app()


__all__ = ["app", "main", "demo_scenarios", "DemoScenario"]
