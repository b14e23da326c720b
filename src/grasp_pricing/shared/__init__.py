# 🧱 grasp_pricing/shared/__init__.py
"""🧱 Спільні утиліти та ієрархія винятків, які не залежать від домену."""
