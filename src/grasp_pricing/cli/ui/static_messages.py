# 💬 grasp_pricing/cli/ui/static_messages.py
"""
💬 Статичні тексти консольного інтерфейсу.
"""

# ================================
# 🧾 ЗВІТ ПРО ЦІНУ
# ================================
REPORT_PRODUCT = "Товар: {product}"
REPORT_PURCHASE_QUANTITY = "Кількість у покупці: {quantity}"
REPORT_QUANTITY_ABOVE_THRESHOLD = "Кількість у покупці: {quantity} (більше {threshold})"
REPORT_GROSS = "Валова сума: {money}"
REPORT_CATEGORY_DISCOUNT = "Знижка за категорією ({rate}%): -{money}"
REPORT_QUANTITY_DISCOUNT = "Знижка за кількість ({rate}%): -{money}"
REPORT_FINAL_PRICE = "Фінальна ціна (зі знижками): {money}"
REPORT_TAX = "Податок ({rate}%): {money}"
REPORT_TOTAL = "Разом із податком: {money}"
TAX_LINE = "Податок ({rate}%) від {price}: {money}"

# ================================
# 🎬 ДЕМО
# ================================
DEMO_TITLE = "=== ДЕМОНСТРАЦІЯ ПРИНЦИПІВ GRASP ==="
DEMO_SCENARIO = "СЦЕНАРІЙ {index}: {title}"
DEMO_SEPARATOR = "=" * 51
DEMO_ELECTRONICS = "Електроніка (знижка 15%)"
DEMO_CLOTHES = "Одяг (знижка 10% + 5% за кількість)"
DEMO_FOOD = "Продукти (знижка 5%)"
DEMO_SUMMARY = "ПІДСУМОК ЗАСТОСОВАНИХ ПРИНЦИПІВ:"
DEMO_PRINCIPLES = (
    "EXPERT (Information Expert):",
    "  - Product знає власні дані (назва, ціна, залишок, категорія)",
    "  - PricingService знає, як рахувати знижки та податок",
    "",
    "INDIRECTION:",
    "  - IPricingService є посередником між CLI та реалізацією",
    "  - Реалізацію можна замінити, не змінюючи код викликача",
)

# ================================
# 🗂️ ТАБЛИЦЯ КАТЕГОРІЙ
# ================================
CATEGORIES_TITLE = "Знижки за категоріями"
CATEGORIES_COLUMN_CATEGORY = "Категорія"
CATEGORIES_COLUMN_RATE = "Знижка"
CATEGORIES_OTHER = "(інші)"
CATEGORIES_FOOTER = "Податок: {tax}% · знижка {quantity_rate}% при кількості більше {threshold}"

# ================================
# 🚨 ПОМИЛКИ
# ================================
ERROR_CONFIGURATION = "⚙️ Помилка конфігурації: {message}"
ERROR_CRITICAL = "❌ Критична помилка! Подробиці в логах."
