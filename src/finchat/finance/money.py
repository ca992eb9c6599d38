"""Currency metadata and money formatting."""

from decimal import ROUND_HALF_EVEN, Decimal

from pydantic import BaseModel, ConfigDict, Field


class Currency(BaseModel):
    """Formatting rules for one ISO 4217 currency."""

    model_config = ConfigDict(frozen=True)

    iso_code: str
    symbol: str
    default_precision: int = Field(default=2, ge=0)
    default_format: str = Field(default="%u%n", description="%u is the symbol, %n the number")
    separator: str = Field(default=".", description="Decimal mark")
    delimiter: str = Field(default=",", description="Thousands delimiter")

    @classmethod
    def find(cls, iso_code: str) -> "Currency":
        """Look up a currency by ISO code.

        Unknown codes get a generic currency that uses the code as its symbol.
        """
        code = iso_code.strip().upper()
        known = _CURRENCIES.get(code)
        if known is not None:
            return known
        return cls(iso_code=code, symbol=code, default_format="%n %u")


_CURRENCIES: dict[str, Currency] = {
    c.iso_code: c
    for c in (
        Currency(iso_code="USD", symbol="$"),
        Currency(iso_code="CAD", symbol="C$"),
        Currency(iso_code="AUD", symbol="A$"),
        Currency(iso_code="GBP", symbol="£"),
        Currency(iso_code="EUR", symbol="€", separator=",", delimiter="."),
        Currency(iso_code="CHF", symbol="CHF", default_format="%u %n", delimiter="'"),
        Currency(iso_code="JPY", symbol="¥", default_precision=0),
        Currency(iso_code="INR", symbol="₹"),
    )
}


def _group(digits: str, delimiter: str) -> str:
    groups = []
    while len(digits) > 3:
        groups.insert(0, digits[-3:])
        digits = digits[:-3]
    groups.insert(0, digits)
    return delimiter.join(groups)


def format_money(amount: Decimal | int | float | str, currency: Currency | str) -> str:
    """Format an amount in a currency, e.g. ``$1,234.50`` or ``-€10,00``.

    Args:
        amount: Amount in major units
        currency: Currency or ISO code

    Returns:
        Formatted money string
    """
    if isinstance(currency, str):
        currency = Currency.find(currency)

    value = Decimal(str(amount))
    exponent = Decimal(1).scaleb(-currency.default_precision)
    value = value.quantize(exponent, rounding=ROUND_HALF_EVEN)

    sign = "-" if value < 0 else ""
    whole, _, fraction = f"{abs(value):f}".partition(".")
    number = _group(whole, currency.delimiter)
    if currency.default_precision:
        number = f"{number}{currency.separator}{fraction}"

    formatted = currency.default_format.replace("%n", number).replace("%u", currency.symbol)
    return f"{sign}{formatted}"
