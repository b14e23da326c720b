# ⚙️ grasp_pricing/config/setup/__init__.py
"""
⚙️ Пакет для 'збірки' всіх компонентів калькулятора перед запуском.

Надає доступ до контейнера залежностей та ініціалізації логування.
"""

# "Піднімаємо" ключові компоненти на рівень пакета `setup`
from .container import Container, bootstrap_logging

# Вказуємо, що саме експортується при `from . import *`
__all__ = [
    "Container",
    "bootstrap_logging",
]
