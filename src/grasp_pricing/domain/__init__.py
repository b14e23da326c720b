# 🏭 grasp_pricing/domain/__init__.py
"""
🏭 Доменний шар: товари (`products`) і ціноутворення (`pricing`).

Шар не знає ні про конфіг-файли, ні про консоль — лише про дані та формули.
"""
