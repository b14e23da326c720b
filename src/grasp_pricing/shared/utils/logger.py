# 📜 grasp_pricing/shared/utils/logger.py
"""
📜 Єдина схема логування калькулятора.

🔹 Конфіг береться з вузла `logging` у config.yaml (`LoggingConfig.from_mapping`).
🔹 Консольний вивід іде в stderr, щоб звіти в stdout лишались чистими.
🔹 Файловий вивід (опційно) з ротацією за часом, у текстовому або JSON-форматі.
🔹 Повторна ініціалізація замінює лише власні хендлери, сторонні не чіпає.
"""
from __future__ import annotations

# 🔠 Системні імпорти
import json									# 📦 Серіалізація payload логів
import logging									# 🪵 Робота з логерами Python
import sys									# 🧵 Потік stderr
import threading								# 🧵 Захист ініціалізації
from dataclasses import dataclass, field					# 🧱 DTO-конфіг логування
from logging.handlers import TimedRotatingFileHandler			# 📁 Хендлер з ротацією файлів
from pathlib import Path								# 📂 Операції з файловими шляхами
from typing import Any, Dict, Mapping, Optional, Union		# 🧰 Типи

# ================================
# 🧾 КОНСТАНТИ МОДУЛЯ
# ================================
LOG_NAME: str = "grasp_pricing"						# 🏷️ Базовий префікс логерів
FILE_FORMAT: str = "%(asctime)s [%(levelname)s] - (%(name)s).%(funcName)s(%(lineno)d) - %(message)s"
CONSOLE_FORMAT: str = "[%(levelname).1s] %(message)s"			# 🖥️ Мінімалістичний консольний формат

_OWNED_MARK = "_grasp_pricing_owned"						# 🏷️ Позначка хендлерів цього модуля
_RECORD_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {"message", "asctime"}

_lock = threading.Lock()							# 🔒 Блокуємо одночасну ініціалізацію


def _to_level(value: Union[str, int, None], default: int) -> int:
    """Перетворює рядок/інт у числовий рівень логування."""
    if value is None or value == "":
        return default
    if isinstance(value, int):
        return value
    level = logging.getLevelName(str(value).upper())		# 🎚️ "DEBUG" → 10
    return level if isinstance(level, int) else default


# ================================
# 🧾 DTO КОНФІГУРАЦІЇ
# ================================
@dataclass
class LoggingConfig:
    """Налаштування логування; поля повторюють ключі вузла `logging`."""
    level: int = logging.INFO						# 🎚️ Рівень логера застосунку
    console: bool = True							# 🖥️ Чи вмикати консоль
    console_level: int = logging.WARNING				# 🖥️ Рівень консолі (звіт не засмічуємо)
    json: bool = False								# 📦 JSON-формат для файлу
    file: Optional[str] = None						# 📁 Шлях до лог-файлу (None → без файлу)
    file_level: int = logging.DEBUG					# 📁 Рівень файлу
    backup_count: int = 7							# ♻️ Скільки добових копій зберігати
    suppress: Dict[str, int] = field(default_factory=dict)			# 🙊 Сторонні логери та їх рівні

    @classmethod
    def from_mapping(cls, node: Optional[Mapping[str, Any]]) -> "LoggingConfig":
        """Будує конфіг із вузла `logging`; порожні значення → дефолти."""
        data = dict(node or {})
        default = cls()
        level = _to_level(data.get("level"), default.level)
        return cls(
            level=level,
            console=default.console if data.get("console") is None else bool(data["console"]),
            console_level=_to_level(data.get("console_level"), default.console_level),
            json=bool(data.get("json") or False),
            file=str(data["file"]) if data.get("file") else None,
            file_level=_to_level(data.get("file_level"), default.file_level),
            backup_count=int(data.get("backup_count") or default.backup_count),
            suppress={
                str(name): _to_level(lvl, logging.WARNING)
                for name, lvl in (data.get("suppress") or {}).items()
            },
        )


# ================================
# 🧰 ФОРМАТТЕРИ
# ================================
class JsonFormatter(logging.Formatter):
    """Один запис — один JSON-рядок; `extra`-поля (ставки, суми) додаються як є або рядком."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "time": self.formatTime(record, datefmt="%Y-%m-%d %H:%M:%S"),
            "level": record.levelname,
            "name": record.name,
            "func": record.funcName,
            "message": record.getMessage(),
        }
        for key, value in vars(record).items():
            if key in _RECORD_ATTRS or key.startswith("_") or key in payload:
                continue
            try:
                json.dumps(value)
            except (TypeError, ValueError):				# ⚠️ Decimal та інші обʼєкти → рядок
                value = str(value)
            payload[key] = value
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


# ================================
# 🛠️ ХЕНДЛЕРИ
# ================================
def _owned(handler: logging.Handler, level: int, fmt: logging.Formatter) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(fmt)
    setattr(handler, _OWNED_MARK, True)
    return handler


def _build_handlers(cfg: LoggingConfig) -> list[logging.Handler]:
    handlers: list[logging.Handler] = []
    if cfg.console:
        handlers.append(_owned(logging.StreamHandler(sys.stderr), cfg.console_level, logging.Formatter(CONSOLE_FORMAT)))
    if cfg.file:
        log_path = Path(cfg.file)
        log_path.parent.mkdir(parents=True, exist_ok=True)	# 🧱 Гарантуємо існування директорії
        file_handler = TimedRotatingFileHandler(
            filename=str(log_path),
            when="midnight",
            backupCount=cfg.backup_count,
            encoding="utf-8",
        )
        fmt = JsonFormatter() if cfg.json else logging.Formatter(FILE_FORMAT)
        handlers.append(_owned(file_handler, cfg.file_level, fmt))
    return handlers


# ================================
# 🚀 ПУБЛІЧНИЙ API
# ================================
def init_logging(cfg: Optional[LoggingConfig] = None) -> logging.Logger:
    """Налаштовує логер `grasp_pricing`; повторний виклик замінює лише власні хендлери."""
    cfg = cfg or LoggingConfig()
    with _lock:
        app_logger = logging.getLogger(LOG_NAME)
        for handler in list(app_logger.handlers):
            if getattr(handler, _OWNED_MARK, False):
                app_logger.removeHandler(handler)
                handler.close()

        handlers = _build_handlers(cfg)
        for handler in handlers:
            app_logger.addHandler(handler)
        # Логер пропускає все, що потрібно хоча б одному з власних хендлерів.
        app_logger.setLevel(min([cfg.level, *(h.level for h in handlers)]))

        for name, level in cfg.suppress.items():
            logging.getLogger(name).setLevel(level)

        app_logger.debug(
            "✅ Logging initialized | level=%s console=%s file=%s json=%s",
            logging.getLevelName(cfg.level),
            logging.getLevelName(cfg.console_level) if cfg.console else "OFF",
            cfg.file or "-",
            cfg.json,
        )
        return app_logger


def init_logging_from_config(node: Optional[Mapping[str, Any]]) -> logging.Logger:
    """Ініціалізує логування з вузла `logging` конфіг-сервісу."""
    return init_logging(LoggingConfig.from_mapping(node))


def get_logger(suffix: Optional[str] = None) -> logging.Logger:
    """Дочірній логер із префіксом `LOG_NAME`."""
    return logging.getLogger(f"{LOG_NAME}.{suffix}" if suffix else LOG_NAME)


__all__ = [
    "LOG_NAME",
    "JsonFormatter",
    "LoggingConfig",
    "get_logger",
    "init_logging",
    "init_logging_from_config",
]
