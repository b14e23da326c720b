# 🧾 grasp_pricing/cli/ui/formatters/__init__.py
"""
🧾 Форматери текстових звітів консолі.
"""

from .price_report_formatter import PriceReportFormatter

__all__ = ["PriceReportFormatter"]
