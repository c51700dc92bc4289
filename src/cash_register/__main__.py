"""Run one sale on the console: `python -m cash_register`.

Environment:
    CASH_REGISTER_EXCHANGE_RATE: USD -> EUR rate (default 0.9446).
    CASH_REGISTER_LOG_LEVEL: logging level name (default WARNING).
"""
from __future__ import annotations

import logging
import os

from cash_register.exchange.currency_converter import CurrencyConverter, DEFAULT_EXCHANGE_RATE
from cash_register.register.cash_register import CashRegister


def main() -> None:
    logging.basicConfig(
        level=os.environ.get("CASH_REGISTER_LOG_LEVEL", "WARNING").upper(),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    )
    rate = os.environ.get("CASH_REGISTER_EXCHANGE_RATE", DEFAULT_EXCHANGE_RATE)
    CashRegister(CurrencyConverter(rate)).run()


if __name__ == "__main__":
    main()
