# ⌨️ grasp_pricing/cli/__init__.py
"""⌨️ Консольний драйвер: Typer-команди та форматування звітів."""
