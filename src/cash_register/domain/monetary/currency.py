class Currency:
    """Represents a currency with code, precision, and display metadata.

    Attributes:
        code (str): Currency code (e.g., "USD", "EUR").
        precision (int): Number of decimal places of the minor unit (0-18).
        name (str): Full currency name.
        symbol (str): Symbol used when printing amounts (e.g., "$", "€").
    """

    def __init__(self, code: str, precision: int, name: str, symbol: str):
        """Initialize a Currency instance.

        Args:
            code (str): Currency code (e.g., "USD", "EUR").
            precision (int): Number of decimal places (0-18).
            name (str): Full currency name.
            symbol (str): Display symbol.

        Raises:
            ValueError: If parameters are invalid.
        """
        # Validate inputs
        if not isinstance(code, str) or not code.strip():
            raise ValueError(f"$code must be a non-empty string, but provided value is: '{code}'")

        if not isinstance(precision, int) or precision < 0 or precision > 18:
            raise ValueError(f"$precision must be an integer between 0 and 18, but provided value is: {precision}")

        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"$name must be a non-empty string, but provided value is: '{name}'")

        if not isinstance(symbol, str) or not symbol.strip():
            raise ValueError(f"$symbol must be a non-empty string, but provided value is: '{symbol}'")

        self._code = code.upper().strip()
        self._precision = precision
        self._name = name.strip()
        self._symbol = symbol.strip()

    @property
    def code(self) -> str:
        """Get the currency code."""
        return self._code

    @property
    def precision(self) -> int:
        """Get the currency precision."""
        return self._precision

    @property
    def name(self) -> str:
        """Get the currency name."""
        return self._name

    @property
    def symbol(self) -> str:
        """Get the currency symbol."""
        return self._symbol

    def __eq__(self, other) -> bool:
        if not isinstance(other, Currency):
            return False
        return self.code == other.code

    def __hash__(self) -> int:
        return hash(self.code)

    def __str__(self) -> str:
        return self.code

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}('{self.code}', {self.precision}, '{self.name}', '{self.symbol}')"
