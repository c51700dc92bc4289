__version__ = "0.0.1"

from cash_register.domain.denomination.denomination_table import DenominationTable, EUR_DENOMINATIONS, USD_DENOMINATIONS
from cash_register.domain.denomination.itemized_amount import ItemizedAmount
from cash_register.domain.monetary.money import Money
from cash_register.exchange.currency_converter import CurrencyConverter
from cash_register.register.cash_register import CashRegister, Transaction
from cash_register.register.change import breakdown, compute_change
from cash_register.register.payment import PaymentAccumulator, sum_paid

__all__ = [
    "CashRegister",
    "CurrencyConverter",
    "DenominationTable",
    "EUR_DENOMINATIONS",
    "ItemizedAmount",
    "Money",
    "PaymentAccumulator",
    "Transaction",
    "USD_DENOMINATIONS",
    "breakdown",
    "compute_change",
    "sum_paid",
]
