from cash_register.domain.monetary.currency import Currency


# Currency the register accepts as payment
USD = Currency("USD", 2, "US Dollar", "$")

# Currency items are priced in and change is returned in
EUR = Currency("EUR", 2, "Euro", "€")
