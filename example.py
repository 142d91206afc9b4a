from datetime import date

from kurs_pricing import CalculatorSettings, ConsoleView, KursPricing

print(KursPricing.__version__)  # 0.1.0

view = ConsoleView()
app = KursPricing(view=view)

# Fill a few rows before the rate arrives (price in USD, reference year)
app.set_rows([("100", "2024"), ("250.50", "2020"), ("", "")], recalculate=False)

# Fetch the BCA rate; on success the table is recomputed automatically
app.start()
view.show()

# Edit a single row; the whole table is recomputed with the cached rate
app.set_row(3, 80, 2018)
view.show()

# Blank everything until the rate has loaded
strict = KursPricing(
    settings=CalculatorSettings(allow_partial_display_before_rate_load=False),
    clock=lambda: date(2025, 1, 1),
)
strict.set_row(0, "100", "2024")
