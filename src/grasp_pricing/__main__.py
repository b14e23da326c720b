# ▶️ grasp_pricing/__main__.py
"""▶️ Запуск через `python -m grasp_pricing`."""

from grasp_pricing.cli.main import main

if __name__ == "__main__":
    main()
