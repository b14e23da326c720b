# ⚙️ config_service.py
"""
⚙️ config_service.py — Сервіс для доступу до статичної конфігурації.

🔹 Клас `ConfigService`:
- Завантажує конфігурацію з вбудованого config.yaml, додаткового YAML і змінних середовища (.env).
- Надає єдиний метод .get() для доступу до будь-якого параметра.
- Працює як Singleton; `reload()` перечитує всі джерела.
"""

# 🌐 Зовнішні бібліотеки
import yaml                                  # 📦 YAML-парсинг
from dotenv import load_dotenv              # 🔐 Завантаження змінних із .env

# 🔠 Системні імпорти
import copy                                 # 🧬 Копії вузлів для get()
import logging                              # 🧾 Логування
import os                                   # 📁 Доступ до змінних середовища
from pathlib import Path                    # 📁 Побудова шляху до файлів
from typing import Any, Callable, Dict, Optional  # 🧩 Типізація

# 🧩 Внутрішні модулі проєкту
from grasp_pricing.errors.custom_errors import ConfigurationError  # ⚙️ Зламаний конфіг
from grasp_pricing.shared.utils.logger import LOG_NAME             # 🏷️ Базове імʼя логера

logger = logging.getLogger(f"{LOG_NAME}.config")

DEFAULT_CONFIG_PATH = Path(__file__).parent / "config.yaml"   # 📘 Вбудований конфіг
CONFIG_PATH_ENV = "GRASP_PRICING_CONFIG"                      # 📄 Шлях до додаткового YAML

# 🔐 Змінна середовища → крапковий ключ конфігурації
ENV_KEYS: Dict[str, str] = {
    "PRICING_TAX_RATE": "pricing.tax_rate",
    "PRICING_QUANTITY_THRESHOLD": "pricing.quantity_threshold",
    "PRICING_QUANTITY_DISCOUNT": "pricing.quantity_discount",
    "PRICING_STRICT": "pricing.strict",
    "LOG_LEVEL": "logging.level",
    "LOG_FILE": "logging.file",
}


# ============================
# ⚙️ СЕРВІС ДОСТУПУ ДО КОНФІГІВ
# ============================
class ConfigService:
    """
    ⚙️ Надає доступ до всіх статичних конфігураційних параметрів проєкту.
    Працює як Singleton — конфігурація зчитується лише один раз (до `reload()`).
    """

    _instance: Optional["ConfigService"] = None  # 🧩 Singleton-екземпляр

    def __new__(cls):
        # ✅ Патерн Singleton: створюємо лише один екземпляр
        if cls._instance is None:
            instance = super().__new__(cls)
            instance._config = instance._load_all_configs()  # 🔄 Завантаження конфігурації під час першого виклику
            cls._instance = instance
            logger.debug("🔄 Singleton ConfigService створено і конфігурація завантажена")
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """🧹 Забуває singleton (наступний виклик `ConfigService()` перечитає джерела)."""
        cls._instance = None

    def reload(self) -> "ConfigService":
        """🔄 Перечитує всі джерела; при помилці попередня конфігурація лишається чинною."""
        self._config = self._load_all_configs()
        return self

    def _load_all_configs(self) -> Dict[str, Any]:
        """
        📥 Завантажує всі джерела конфігурації в один словник.
        Пріоритет (останній перемагає): config.yaml → $GRASP_PRICING_CONFIG → змінні середовища
        """
        merged: Dict[str, Any] = {}

        # --- 1. Вбудований YAML ---
        self._deep_update(merged, self._read_yaml(DEFAULT_CONFIG_PATH, required=True))

        # --- 2. .env (лише заповнює os.environ, існуючі змінні не чіпає) ---
        load_dotenv()

        # --- 3. Додатковий YAML-файл ---
        extra_path = os.getenv(CONFIG_PATH_ENV)
        if extra_path:
            self._deep_update(merged, self._read_yaml(Path(extra_path), required=False))

        # --- 4. Змінні середовища ---
        env_vars = {key: os.getenv(name) for name, key in ENV_KEYS.items()}
        env_vars = {key: value for key, value in env_vars.items() if value is not None}
        if env_vars:
            logger.debug("🔐 Перевизначення з оточення: %s", sorted(env_vars))
        self._deep_update(merged, self._unflatten_dict(env_vars))

        logger.debug("✅ Конфігурацію успішно завантажено.")
        return merged

    @staticmethod
    def _read_yaml(path: Path, *, required: bool) -> Dict[str, Any]:
        """📘 Читає YAML-файл; битий YAML → `ConfigurationError`."""
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except FileNotFoundError as e:
            if required:
                raise ConfigurationError("Не знайдено файл конфігурації", details=str(e), source=str(path)) from e
            logger.warning("⚠️ Не вдалося завантажити %s: %s", path, e)
            return {}
        except yaml.YAMLError as e:
            raise ConfigurationError("Не вдалося розібрати YAML-конфіг", details=str(e), source=str(path)) from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                "Корінь YAML-конфігу має бути словником",
                details=f"got {type(data).__name__}",
                source=str(path),
            )
        logger.debug("📘 Завантажено %s", path)
        return data

    def get(self, key: str, default: Any = None, cast: Optional[Callable[[Any], Any]] = None) -> Any:
        """
        🔑 Отримує значення конфігурації за ключем (наприклад: 'pricing.tax_rate').

        Args:
            key (str): Ключ у форматі з крапкою.
            default (Any): Значення за замовчуванням, якщо ключ не знайдено.
            cast: Опційне перетворення знайденого значення (int, Decimal...).

        Returns:
            Any: Значення параметра (копія для словників) або default.
        """
        value: Any = self._config
        for k in key.split('.'):                  # ⛓️ Розбиваємо ключ за крапкою
            if isinstance(value, dict) and k in value:
                value = value[k]                 # 🔎 Переходимо глибше в структуру
            else:
                logger.debug("❓ Ключ '%s' не знайдено, повертаємо значення за замовчуванням", key)
                return default
        if cast is not None:
            try:
                return cast(value)
            except (TypeError, ValueError, ArithmeticError) as e:
                raise ConfigurationError(
                    f"Значення «{key}» має неправильний тип",
                    details=f"{value!r}: {e}",
                    source=key,
                ) from e
        return copy.deepcopy(value)               # ✅ Зовнішній код не мутує кеш

    # ===============================
    # 🔧 ДОПОМІЖНІ МЕТОДИ ЗЛИТТЯ КОНФІГІВ
    # ===============================

    @staticmethod
    def _unflatten_dict(d: Dict[str, Any]) -> Dict[str, Any]:
        """
        🔁 Перетворює ключі з крапками в ієрархічний словник.
        'pricing.tax_rate' → {'pricing': {'tax_rate': ...}}
        """
        result: Dict[str, Any] = {}
        for key, value in d.items():
            parts = key.split('.')                   # 🧩 Розбиваємо ключ на частини
            d_ref = result
            for part in parts[:-1]:                  # 🔁 Ітеруємось по вкладеності
                d_ref = d_ref.setdefault(part, {})
            d_ref[parts[-1]] = value                 # 🧷 Вставляємо значення у найглибший рівень
        return result

    def _deep_update(self, source: Dict, overrides: Dict) -> None:
        """
        🔁 Рекурсивно обʼєднує два словника (оновлення значень).
        Якщо значення — словник, обʼєднує його глибоко.
        """
        for key, value in overrides.items():
            if (
                isinstance(value, dict) and
                key in source and
                isinstance(source[key], dict)
            ):
                self._deep_update(source[key], value)  # 🔁 Глибоке обʼєднання
            else:
                source[key] = value                    # 🧩 Перезапис простого значення
