from __future__ import annotations

import builtins

from cash_register.__main__ import main
from tests.helpers.scripted_console import ScriptedConsole


def test_main_runs_one_sale_on_the_console(monkeypatch, capsys):
    console = ScriptedConsole(["4.56", "1", "0", "0", "0", "0", "0", "0", "0"])
    monkeypatch.setattr(builtins, "input", console.read_line)
    monkeypatch.setenv("CASH_REGISTER_EXCHANGE_RATE", "0.9446")

    main()

    printed = capsys.readouterr().out
    # 20 USD -> 18.89 EUR; 18.89 - 4.56 = 14.33 EUR change
    assert "You paid a total of $20.00." in printed
    assert "Your total change in Euros is € 14.33:" in printed
    assert printed.rstrip().splitlines()[-5:] == [
        "10€ bills: 1",
        "1€ bills: 4",
        "20 Euro coins: 1",
        "10 Euro coins: 1",
        "1 Euro coins: 3",
    ]
