from datetime import date

from fx_ptax import FxPtax, PtaxOptions

print(FxPtax.__version__)  # 0.1.0

fx = FxPtax()

# Latest PTAX closing (walks back over weekends and holidays)
resolved = fx.fetch_rates()
print(resolved.resolved_date, len(resolved.rates))

# Rates on or before a specific date
rates = fx.rates_by_date(date(2025, 12, 14))
print(rates[:2])

# Single currency and the list of supported codes
print(fx.rate("USD"))
print(fx.supported_currencies())

# Conversions through BRL
print(fx.convert(100, "BRL", "USD"))
print(fx.convert(100, "USD", "BRL", rate_kind="buy"))
print(fx.convert(100, "EUR", "USD", PtaxOptions(max_retries=7, timeout=5000)))
