# 🖥️ grasp_pricing/cli/ui/__init__.py
"""🖥️ Тексти та форматери консольного виводу."""
