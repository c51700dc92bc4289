from cash_register.domain.denomination.denomination_table import DenominationTable, EUR_DENOMINATIONS, USD_DENOMINATIONS
from cash_register.domain.denomination.itemized_amount import ItemizedAmount

__all__ = ["DenominationTable", "ItemizedAmount", "EUR_DENOMINATIONS", "USD_DENOMINATIONS"]
