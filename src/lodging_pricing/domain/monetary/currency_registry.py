from lodging_pricing.domain.monetary.currency import Currency


BRL = Currency("BRL", 2, "Brazilian Real", "R$")
USD = Currency("USD", 2, "US Dollar", "$")
EUR = Currency("EUR", 2, "Euro", "€")
GBP = Currency("GBP", 2, "British Pound", "£")
JPY = Currency("JPY", 0, "Japanese Yen", "¥")
KWD = Currency("KWD", 3, "Kuwaiti Dinar", "KD")

# Hotel prices are quoted in reais unless stated otherwise
DEFAULT_CURRENCY = BRL

# Register all predefined currencies
Currency.register(BRL, overwrite=True)
Currency.register(USD, overwrite=True)
Currency.register(EUR, overwrite=True)
Currency.register(GBP, overwrite=True)
Currency.register(JPY, overwrite=True)
Currency.register(KWD, overwrite=True)
